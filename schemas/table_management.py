from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from models.table_management import TableStatus
from schemas.common import MAX_ID, RecordId, reject_null

class TableBase(BaseModel):
    restaurant_id: RecordId = Field(..., alias="restaurantId")
    table_number: str = Field(..., min_length=1, alias="tableNumber")
    capacity: int = Field(..., gt=0, le=MAX_ID)

    class Config:
        populate_by_name = True

class TableCreate(TableBase):
    status: TableStatus = TableStatus.AVAILABLE

class TableUpdate(BaseModel):
    restaurant_id: Optional[RecordId] = Field(None, alias="restaurantId")
    table_number: Optional[str] = Field(None, min_length=1, alias="tableNumber")
    capacity: Optional[int] = Field(None, gt=0, le=MAX_ID)
    status: Optional[TableStatus] = None

    @field_validator("restaurant_id", "table_number", "capacity", "status")
    def not_null(cls, v):
        return reject_null(v)

    class Config:
        populate_by_name = True

class TableResponse(TableBase):
    id: int
    status: TableStatus
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True

class TableRef(BaseModel):
    table_number: str = Field(..., alias="tableNumber")

    class Config:
        from_attributes = True
        populate_by_name = True
