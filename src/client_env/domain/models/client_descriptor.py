"""Client descriptor domain model."""

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel


class ClientDescriptor(BaseModel):
    """Normalized description of the client runtime environment.

    Every field is a string; the empty string means "unknown". ``app_version``
    is derived from ``model`` and ``version`` and cannot be set directly.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    platform: str = ""
    make: str = ""
    model: str = ""
    version: str = ""
    language: str = ""
    timezone: str = ""

    @computed_field(alias="appVersion")  # type: ignore[prop-decorator]
    @property
    def app_version(self) -> str:
        """Browser family and version joined by a slash, e.g. ``Chrome/114.0``."""
        return f"{self.model}/{self.version}"

    def to_payload(self) -> dict[str, str]:
        """Serialize with the camelCase keys the bootstrap payload expects."""
        return self.model_dump(by_alias=True)
