from typing import Optional
from pydantic import Field
from repairdesk.schemas.common import Int64, WireModel

class RepairInvoiceCreate(WireModel):
    repair_invoice_id: Optional[Int64] = Field(None, alias="RepairInvoice_ID", examples=[5001])
    # references carry the store id of the target row
    device_id: Optional[Int64] = Field(None, alias="Device_ID", examples=[1])
    status_id: Optional[Int64] = Field(None, alias="Status_ID", examples=[1])
    symptom_id: Optional[Int64] = Field(None, alias="Symptom_ID", examples=[1])

class RepairInvoiceOut(RepairInvoiceCreate):
    id: int
