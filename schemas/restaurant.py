from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from models.restaurant import RestaurantStatus
from schemas.common import reject_null, validate_email_format

class RestaurantBase(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    description: Optional[str] = None
    logo: Optional[str] = None
    bg_image: Optional[str] = Field(None, alias="bgImage")

    class Config:
        populate_by_name = True

class RestaurantCreate(RestaurantBase):
    password: str = Field(..., min_length=1)

    @field_validator("email")
    def check_email(cls, v):
        return validate_email_format(v)

class RestaurantUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, min_length=1)
    password: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = Field(None, min_length=1)
    address: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    logo: Optional[str] = None
    bg_image: Optional[str] = Field(None, alias="bgImage")
    status: Optional[RestaurantStatus] = None

    @field_validator("name", "email", "password", "phone", "address", "status")
    def not_null(cls, v):
        return reject_null(v)

    @field_validator("email")
    def check_email(cls, v):
        return validate_email_format(v)

    class Config:
        populate_by_name = True

class RestaurantResponse(RestaurantBase):
    """Public projection of a restaurant; the password hash never leaves the service."""
    id: int
    status: RestaurantStatus
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True
