from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.orm import Session, joinedload
from typing import List, Optional
import logging

from utils import config
from utils.database import get_db
from utils.validators import get_or_404, require_id, validate_status_transition
from models.restaurant import Restaurant
from models.user import User
from models.table_management import Table
from models.booking import Booking, BookingStatus
from schemas.common import MAX_ID, ApiResponse
from schemas.booking import BookingCreate, BookingUpdate, BookingResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix=f"{config.API_PREFIX}/bookings", tags=["bookings"])

BOOKING_TRANSITIONS = {
    BookingStatus.PENDING: [BookingStatus.CONFIRMED, BookingStatus.CANCELLED],
    BookingStatus.CONFIRMED: [BookingStatus.COMPLETED, BookingStatus.CANCELLED],
    BookingStatus.CANCELLED: [],
    BookingStatus.COMPLETED: [],
}


def _booking_query(db: Session):
    return db.query(Booking).options(joinedload(Booking.user), joinedload(Booking.table))


def _check_table(db: Session, table_id: int, restaurant_id: int) -> Table:
    table = get_or_404(db, Table, table_id)
    if table.restaurant_id != restaurant_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Table {table_id} does not belong to restaurant {restaurant_id}"
        )
    return table


@router.get("", response_model=ApiResponse[List[BookingResponse]])
async def list_bookings(
    restaurant_id: Optional[int] = Query(None, alias="restaurantId", gt=0, le=MAX_ID),
    db: Session = Depends(get_db)
):
    restaurant_id = require_id(restaurant_id, "restaurantId")
    get_or_404(db, Restaurant, restaurant_id)
    bookings = _booking_query(db).filter(Booking.restaurant_id == restaurant_id).order_by(Booking.id).all()
    return {"message": "Bookings fetched successfully", "status": True, "data": bookings}


@router.get("/{booking_id}", response_model=ApiResponse[BookingResponse])
async def get_booking(booking_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    db_booking = get_or_404(db, Booking, booking_id, query=_booking_query(db))
    return {"message": "Booking fetched successfully", "status": True, "data": db_booking}


@router.post("", response_model=ApiResponse[BookingResponse], status_code=status.HTTP_201_CREATED)
async def create_booking(booking: BookingCreate, db: Session = Depends(get_db)):
    get_or_404(db, User, booking.user_id)
    get_or_404(db, Restaurant, booking.restaurant_id)
    _check_table(db, booking.table_id, booking.restaurant_id)

    try:
        db_booking = Booking(**booking.model_dump())
        db.add(db_booking)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to create booking: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create booking: {str(e)}"
        )

    logger.info(f"Booking {db_booking.id} created for restaurant {booking.restaurant_id}, table {booking.table_id}")
    db_booking = get_or_404(db, Booking, db_booking.id, query=_booking_query(db))
    return {"message": "Booking created successfully", "status": True, "data": db_booking}


@router.put("/{booking_id}", response_model=ApiResponse[BookingResponse])
async def update_booking(
    booking_update: BookingUpdate,
    booking_id: int = Path(..., gt=0, le=MAX_ID),
    db: Session = Depends(get_db)
):
    db_booking = get_or_404(db, Booking, booking_id)
    changes = booking_update.model_dump(exclude_unset=True)

    if "table_id" in changes:
        _check_table(db, changes["table_id"], db_booking.restaurant_id)
    if "status" in changes:
        validate_status_transition(db_booking.status, changes["status"], BOOKING_TRANSITIONS, "booking")

    try:
        for field, value in changes.items():
            setattr(db_booking, field, value)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update booking {booking_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update booking: {str(e)}"
        )

    logger.info(f"Booking {booking_id} updated: {sorted(changes)}")
    db_booking = get_or_404(db, Booking, booking_id, query=_booking_query(db))
    return {"message": "Booking updated successfully", "status": True, "data": db_booking}


@router.delete("/{booking_id}", response_model=ApiResponse[BookingResponse])
async def delete_booking(booking_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    db_booking = get_or_404(db, Booking, booking_id, query=_booking_query(db))
    deleted = BookingResponse.model_validate(db_booking)

    try:
        db.delete(db_booking)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to delete booking {booking_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete booking: {str(e)}"
        )

    logger.info(f"Booking {booking_id} deleted")
    return {"message": "Booking deleted successfully", "status": True, "data": deleted}
