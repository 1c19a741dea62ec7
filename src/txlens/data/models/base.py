"""Shared pydantic base for txlens models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TxLensModel(BaseModel):
    """Frozen model that reads and writes camelCase wallet payloads.

    Fields are declared in snake_case; ``populate_by_name`` lets Python
    callers use the snake_case names while payloads keep their camelCase
    keys. ``model_dump(by_alias=True)`` restores the camelCase shape.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )
