from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from models.booking import BookingStatus
from schemas.common import RecordId, as_utc, reject_null
from schemas.table_management import TableRef

class UserEmailRef(BaseModel):
    email: str

    class Config:
        from_attributes = True

class BookingBase(BaseModel):
    user_id: RecordId = Field(..., alias="userId")
    restaurant_id: RecordId = Field(..., alias="restaurantId")
    table_id: RecordId = Field(..., alias="tableId")
    booking_time: datetime = Field(..., alias="bookingTime")

    @field_validator("booking_time")
    def utc_booking_time(cls, v):
        return as_utc(v)

    class Config:
        populate_by_name = True

class BookingCreate(BookingBase):
    status: BookingStatus = BookingStatus.PENDING

class BookingUpdate(BaseModel):
    table_id: Optional[RecordId] = Field(None, alias="tableId")
    booking_time: Optional[datetime] = Field(None, alias="bookingTime")
    status: Optional[BookingStatus] = None

    @field_validator("table_id", "booking_time", "status")
    def not_null(cls, v):
        return reject_null(v)

    @field_validator("booking_time")
    def utc_booking_time(cls, v):
        return as_utc(v)

    class Config:
        populate_by_name = True

class BookingResponse(BookingBase):
    id: int
    status: BookingStatus
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    user: Optional[UserEmailRef] = None
    table: Optional[TableRef] = None

    class Config:
        from_attributes = True
        populate_by_name = True
