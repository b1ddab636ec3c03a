from typing import Optional
from pydantic import Field
from repairdesk.schemas.common import Int64, WireModel

class DeviceCreate(WireModel):
    device_id: Optional[Int64] = Field(None, alias="Device_ID", examples=[1001])
    customer_id: Optional[Int64] = Field(None, alias="Customer_ID", examples=[42])

class DeviceOut(DeviceCreate):
    id: int
