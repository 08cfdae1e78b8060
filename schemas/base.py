"""Shared base class and string types for request schemas."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

RequiredStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Secret = Annotated[str, StringConstraints(min_length=1)]


class RequestSchema(BaseModel):
    """Base for JSON request bodies; accepts camelCase aliases and numeric codes."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)
