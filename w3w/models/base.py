"""
Model Base
----------
Shared pydantic base for the API payload models.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class W3WModel(BaseModel):
    """Immutable model using the camelCase field names of the API."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
