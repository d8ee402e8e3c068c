"""Base model for records returned by the API."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Accepts both the API's camelCase and snake_case keys.

    Unknown fields are kept so records round-trip without losing data the
    client does not model.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class SubjectRef(ApiModel):
    """Subject summary embedded in legal bases and requirements."""
    subject_id: int | None = None
    subject_name: str | None = None
    abbreviation: str | None = None
    order_index: int | None = None


class AspectRef(ApiModel):
    """Aspect summary embedded in legal bases and requirements."""
    aspect_id: int | None = None
    aspect_name: str | None = None
    abbreviation: str | None = None
    order_index: int | None = None
