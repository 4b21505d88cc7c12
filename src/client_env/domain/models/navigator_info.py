"""Navigator information domain model."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

NAVIGATOR_FIELDS = ("platform", "product", "vendor", "user_agent", "language")


class NavigatorInfo(BaseModel):
    """Navigator-like fields reported by a browser host.

    Accepts both the browser spelling (``userAgent``) and the Python spelling
    (``user_agent``). Missing fields and ``None`` are equivalent.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    platform: str | None = None
    product: str | None = None
    vendor: str | None = None
    user_agent: str | None = None
    language: str | None = None

    @classmethod
    def coerce(cls, source: Any) -> "NavigatorInfo":
        """Build navigator info from a model, mapping or attribute-bearing object.

        Values that are not strings are dropped, so a malformed host object
        degrades to unknown fields instead of failing validation.
        """
        if isinstance(source, cls):
            return source

        values: dict[str, str] = {}
        for name in NAVIGATOR_FIELDS:
            alias = to_camel(name)
            if isinstance(source, Mapping):
                candidates = (source.get(alias), source.get(name))
            else:
                candidates = (getattr(source, alias, None), getattr(source, name, None))
            value = next((c for c in candidates if isinstance(c, str)), None)
            if value is not None:
                values[name] = value
        return cls.model_validate(values)
