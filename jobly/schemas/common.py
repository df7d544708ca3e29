"""
Shared pydantic configuration.

The API speaks camelCase JSON (``numEmployees``) while Python code uses
snake_case attributes; request bodies reject unknown fields.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Response base: snake_case attributes, camelCase JSON."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(CamelModel):
    """Request base: only the declared fields are accepted."""
    model_config = ConfigDict(extra="forbid")

    def changed_fields(self) -> dict:
        """Fields the client actually sent, keyed by their camelCase names."""
        return self.model_dump(exclude_unset=True, by_alias=True)
