from typing import List, Optional
from pydantic import BaseModel, Field
from datetime import datetime
from models.order_management import OrderStatus, OrderType
from schemas.booking import UserEmailRef
from schemas.common import MAX_ID, RecordId


class OrderItemCreate(BaseModel):
    dish_id: RecordId = Field(..., alias="dishId")
    unit_rate: float = Field(..., ge=0)
    quantity: int = Field(..., ge=1, le=MAX_ID)
    price: float = Field(..., ge=0)

    class Config:
        populate_by_name = True


class OrderCreate(BaseModel):
    """Order placed by a diner.

    Amounts are taken as submitted; nothing is recomputed from dish prices.
    A zero ``totalAmount`` is a valid order (fully discounted, complimentary).
    """
    user_id: RecordId = Field(..., alias="userId", description="ID of the ordering user")
    restaurant_id: RecordId = Field(..., alias="restaurantId", description="ID of the restaurant")
    order_items: List[OrderItemCreate] = Field(..., min_length=1, alias="orderItems")
    total_amount: float = Field(..., ge=0, alias="totalAmount")
    order_type: OrderType = Field(..., description="DINE_IN, TAKEAWAY or DELIVERY")
    order_date: Optional[str] = Field(None, description="Defaults to the server date (YYYY-MM-DD)")
    order_time: Optional[str] = Field(None, description="Defaults to the server time (HH:MM:SS)")
    contact_info: Optional[str] = None
    table_no: Optional[str] = None
    trnx_id: Optional[str] = None
    trnx_receipt: Optional[str] = None

    class Config:
        populate_by_name = True


class OrderCreated(BaseModel):
    order_id: int = Field(..., alias="orderId")

    class Config:
        populate_by_name = True


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class RestaurantNameRef(BaseModel):
    name: str

    class Config:
        from_attributes = True


class DishRef(BaseModel):
    id: int
    name: str
    imgurl: Optional[str] = None

    class Config:
        from_attributes = True


class OrderItemResponse(BaseModel):
    id: int
    order_id: int = Field(..., alias="orderId")
    dish_id: int = Field(..., alias="dishId")
    unit_rate: float
    quantity: int
    price: float
    dish: Optional[DishRef] = None

    class Config:
        from_attributes = True
        populate_by_name = True


class OrderResponse(BaseModel):
    id: int
    user_id: int = Field(..., alias="userId")
    restaurant_id: int = Field(..., alias="restaurantId")
    total_amount: float = Field(..., alias="totalAmount")
    order_date: str
    order_time: str
    contact_info: Optional[str] = None
    order_type: OrderType
    table_no: Optional[str] = None
    trnx_id: Optional[str] = None
    trnx_receipt: Optional[str] = None
    status: OrderStatus
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    user: Optional[UserEmailRef] = None
    restaurant: Optional[RestaurantNameRef] = None
    items: List[OrderItemResponse] = Field(default_factory=list, alias="orderItems")

    class Config:
        from_attributes = True
        populate_by_name = True
