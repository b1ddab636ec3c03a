from typing import Annotated
from pydantic import BaseModel, ConfigDict, Field

INT64_MIN = -2**63
INT64_MAX = 2**63 - 1

# integer columns are signed 64-bit in the store
Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]


class WireModel(BaseModel):
    """Accepts either the wire key (``Device_ID``) or the attribute name."""
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class DeleteResult(BaseModel):
    result: str


class ErrorResponse(BaseModel):
    error: str
