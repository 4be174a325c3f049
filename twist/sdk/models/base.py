"""Base model shared by all API entities."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TwistModel(BaseModel):
    """Immutable entity parsed from a camel-cased, timestamp-converted payload.

    Attributes are snake_case; validation reads the camelCase keys through
    aliases and also accepts the attribute names. Unknown keys are ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )
