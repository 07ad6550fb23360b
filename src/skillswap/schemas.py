"""Shared pydantic base for the JSON API.

The wire format is camelCase (``skillsOffered``, ``fromId``); Python code uses
snake_case attributes. Unknown request fields are ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class SuccessResponse(ApiModel):
    success: bool = True
