from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from schemas.common import RecordId, reject_null

class CategoryBase(BaseModel):
    restaurant_id: RecordId = Field(..., alias="restaurantId")
    name: str = Field(..., min_length=1)
    imgurl: Optional[str] = None

    class Config:
        populate_by_name = True

class CategoryCreate(CategoryBase):
    pass

class CategoryUpdate(BaseModel):
    restaurant_id: Optional[RecordId] = Field(None, alias="restaurantId")
    name: Optional[str] = Field(None, min_length=1)
    imgurl: Optional[str] = None

    @field_validator("restaurant_id", "name")
    def not_null(cls, v):
        return reject_null(v)

    class Config:
        populate_by_name = True

class CategoryResponse(CategoryBase):
    id: int
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True

class CategoryRef(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True

class DishBase(BaseModel):
    category_id: RecordId = Field(..., alias="categoryId")
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    price: float = Field(..., gt=0)
    available: bool = True
    imgurl: Optional[str] = None

    class Config:
        populate_by_name = True

class DishCreate(DishBase):
    pass

class DishUpdate(BaseModel):
    category_id: Optional[RecordId] = Field(None, alias="categoryId")
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(None, gt=0)
    available: Optional[bool] = None
    imgurl: Optional[str] = None

    @field_validator("category_id", "name", "price", "available")
    def not_null(cls, v):
        return reject_null(v)

    class Config:
        populate_by_name = True

class DishResponse(DishBase):
    id: int
    category: Optional[CategoryRef] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True
