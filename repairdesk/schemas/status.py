from typing import Optional
from pydantic import Field
from repairdesk.schemas.common import Int64, WireModel

class StatusCreate(WireModel):
    status_id: Optional[Int64] = Field(None, alias="Status_ID", examples=[1])
    status_name: Optional[str] = Field(None, alias="Status_name", examples=["waiting for parts"])

class StatusOut(StatusCreate):
    id: int
