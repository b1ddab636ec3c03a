from typing import Optional
from pydantic import Field
from repairdesk.schemas.common import Int64, WireModel

class SymptomCreate(WireModel):
    symptom_id: Optional[Int64] = Field(None, alias="Symptom_ID", examples=[7])
    symptom_name: Optional[str] = Field(None, alias="Symptom_name", examples=["screen flicker"])

class SymptomOut(SymptomCreate):
    id: int
