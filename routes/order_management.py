from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.orm import Session, joinedload, selectinload
from typing import List, Optional
from datetime import datetime
import logging

from utils import config
from utils.database import get_db
from utils.validators import get_or_404, require_id, validate_status_transition
from models.restaurant import Restaurant
from models.user import User
from models.menu_management import Dish
from models.order_management import Order, OrderItem, OrderStatus
from schemas.common import MAX_ID, ApiResponse
from schemas.order_management import (
    OrderCreate,
    OrderCreated,
    OrderResponse,
    OrderStatusUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix=f"{config.API_PREFIX}/order_management", tags=["orders"])

ORDER_TRANSITIONS = {
    OrderStatus.PENDING: [OrderStatus.CONFIRMED, OrderStatus.CANCELLED],
    OrderStatus.CONFIRMED: [OrderStatus.COMPLETED, OrderStatus.CANCELLED],
    OrderStatus.CANCELLED: [],
    OrderStatus.COMPLETED: [],
}


def _order_query(db: Session):
    return db.query(Order).options(
        joinedload(Order.user),
        joinedload(Order.restaurant),
        selectinload(Order.items).joinedload(OrderItem.dish),
    )


def _list_for_restaurant(db: Session, restaurant_id: int):
    get_or_404(db, Restaurant, restaurant_id)
    orders = _order_query(db).filter(Order.restaurant_id == restaurant_id).order_by(Order.id.desc()).all()
    logger.debug(f"Retrieved {len(orders)} orders for restaurant {restaurant_id}")
    return {"message": "Orders fetched successfully", "status": True, "data": orders}


@router.post("", response_model=ApiResponse[OrderCreated], status_code=status.HTTP_201_CREATED)
async def create_order(order: OrderCreate, db: Session = Depends(get_db)):
    logger.debug(f"Parsed OrderCreate: user={order.user_id}, restaurant={order.restaurant_id}, items={len(order.order_items)}")

    get_or_404(db, User, order.user_id)
    get_or_404(db, Restaurant, order.restaurant_id)

    dish_ids = {item.dish_id for item in order.order_items}
    found_ids = {dish_id for (dish_id,) in db.query(Dish.id).filter(Dish.id.in_(dish_ids)).all()}
    missing = sorted(dish_ids - found_ids)
    if missing:
        logger.warning(f"Order for restaurant {order.restaurant_id} references unknown dishes {missing}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Dish IDs not found: {', '.join(str(dish_id) for dish_id in missing)}"
        )

    now = datetime.now()
    try:
        db_order = Order(
            user_id=order.user_id,
            restaurant_id=order.restaurant_id,
            total_amount=order.total_amount,
            order_date=order.order_date or now.strftime("%Y-%m-%d"),
            order_time=order.order_time or now.strftime("%H:%M:%S"),
            contact_info=order.contact_info,
            order_type=order.order_type,
            table_no=order.table_no,
            trnx_id=order.trnx_id,
            trnx_receipt=order.trnx_receipt,
            status=OrderStatus.PENDING,
        )
        db.add(db_order)
        db.flush()

        # Order and items commit together; a failed item insert rolls the order back
        db.add_all([
            OrderItem(
                order_id=db_order.id,
                dish_id=item.dish_id,
                unit_rate=float(item.unit_rate),
                quantity=int(item.quantity),
                price=float(item.price),
            )
            for item in order.order_items
        ])
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Error creating order for restaurant {order.restaurant_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create order: {str(e)}"
        )

    logger.info(f"Order {db_order.id} created by user {order.user_id} for restaurant {order.restaurant_id}")
    return {"message": "Order created successfully", "status": True, "data": {"orderId": db_order.id}}


@router.get("", response_model=ApiResponse[List[OrderResponse]])
async def list_orders(
    restaurant_id: Optional[int] = Query(None, alias="restaurantId", gt=0, le=MAX_ID),
    db: Session = Depends(get_db)
):
    return _list_for_restaurant(db, require_id(restaurant_id, "restaurantId"))


@router.get("/restaurant/{restaurant_id}", response_model=ApiResponse[List[OrderResponse]])
async def list_restaurant_orders(restaurant_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    return _list_for_restaurant(db, restaurant_id)


@router.get("/{order_id}", response_model=ApiResponse[OrderResponse])
async def get_order(order_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    db_order = get_or_404(db, Order, order_id, query=_order_query(db))
    return {"message": "Order fetched successfully", "status": True, "data": db_order}


@router.put("/{order_id}", response_model=ApiResponse[OrderResponse])
async def update_order_status(
    status_update: OrderStatusUpdate,
    order_id: int = Path(..., gt=0, le=MAX_ID),
    db: Session = Depends(get_db)
):
    db_order = get_or_404(db, Order, order_id)
    validate_status_transition(db_order.status, status_update.status, ORDER_TRANSITIONS, "order")

    try:
        db_order.status = status_update.status
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Error updating order {order_id} status: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update order status: {str(e)}"
        )

    logger.info(f"Order {order_id} status updated to {status_update.status.value}")
    db_order = get_or_404(db, Order, order_id, query=_order_query(db))
    return {"message": "Order updated successfully", "status": True, "data": db_order}


@router.delete("/{order_id}", response_model=ApiResponse[OrderResponse])
async def delete_order(order_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    db_order = get_or_404(db, Order, order_id, query=_order_query(db))
    deleted = OrderResponse.model_validate(db_order)

    try:
        db.delete(db_order)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting order {order_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete order: {str(e)}"
        )

    logger.info(f"Order {order_id} deleted")
    return {"message": "Order deleted successfully", "status": True, "data": deleted}
