from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from models.parking_management import SlotStatus
from schemas.common import RecordId, reject_null

class ParkingSlotBase(BaseModel):
    restaurant_id: RecordId = Field(..., alias="restaurantId")
    slot_number: str = Field(..., min_length=1, alias="slotNumber")

    class Config:
        populate_by_name = True

class ParkingSlotCreate(ParkingSlotBase):
    status: SlotStatus = SlotStatus.AVAILABLE

class ParkingSlotUpdate(BaseModel):
    restaurant_id: Optional[RecordId] = Field(None, alias="restaurantId")
    slot_number: Optional[str] = Field(None, min_length=1, alias="slotNumber")
    status: Optional[SlotStatus] = None

    @field_validator("restaurant_id", "slot_number", "status")
    def not_null(cls, v):
        return reject_null(v)

    class Config:
        populate_by_name = True

class ParkingSlotResponse(ParkingSlotBase):
    id: int
    status: SlotStatus
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True
