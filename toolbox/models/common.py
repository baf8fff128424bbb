"""
Common response models and utilities.

CamelModel is the base of every API schema: fields are snake_case in
Python and camelCase on the wire, and either spelling is accepted on input.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialised with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SuccessResponse(CamelModel):
    success: bool = True
