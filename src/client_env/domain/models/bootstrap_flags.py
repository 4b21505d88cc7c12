"""Bootstrap flags domain model."""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

UInt32 = Annotated[int, Field(ge=0, le=0xFFFFFFFF)]


class BootstrapFlags(BaseModel):
    """Initialization payload handed to the downstream application.

    ``seed`` is ``(first, rest)``: the first random value and the remaining
    values, all unsigned 32-bit integers.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    seed: tuple[UInt32, tuple[UInt32, ...]]
    app_id: str | None = None
    identity_pool_id: str | None = None
    region: str | None = None
    project_id: str | None = None
    client_info: dict[str, str] = Field(default_factory=dict)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to JSON-compatible data with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
