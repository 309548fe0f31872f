from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from utils import config
from utils.database import get_db
from utils.validators import get_or_404, require_id, validate_uniqueness
from models.restaurant import Restaurant
from models.parking_management import ParkingSlot
from schemas.common import MAX_ID, ApiResponse
from schemas.parking_management import ParkingSlotCreate, ParkingSlotUpdate, ParkingSlotResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix=f"{config.API_PREFIX}/parking_slots", tags=["parking_management"])


def _duplicate_number(slot_number: str) -> str:
    return f"Parking slot {slot_number} already exists for this restaurant"


@router.get("", response_model=ApiResponse[List[ParkingSlotResponse]])
async def list_parking_slots(
    restaurant_id: Optional[int] = Query(None, alias="restaurantId", gt=0, le=MAX_ID),
    db: Session = Depends(get_db)
):
    restaurant_id = require_id(restaurant_id, "restaurantId")
    get_or_404(db, Restaurant, restaurant_id)
    slots = db.query(ParkingSlot).filter(ParkingSlot.restaurant_id == restaurant_id).order_by(ParkingSlot.id).all()
    logger.info(f"Retrieved {len(slots)} parking slots for restaurant {restaurant_id}")
    return {"message": "Parking slots fetched successfully", "status": True, "data": slots}


@router.get("/{slot_id}", response_model=ApiResponse[ParkingSlotResponse])
async def get_parking_slot(slot_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    db_slot = get_or_404(db, ParkingSlot, slot_id, label="Parking slot")
    return {"message": "Parking slot fetched successfully", "status": True, "data": db_slot}


@router.post("", response_model=ApiResponse[ParkingSlotResponse], status_code=status.HTTP_201_CREATED)
async def create_parking_slot(slot: ParkingSlotCreate, db: Session = Depends(get_db)):
    get_or_404(db, Restaurant, slot.restaurant_id)
    validate_uniqueness(
        db, ParkingSlot, _duplicate_number(slot.slot_number),
        restaurant_id=slot.restaurant_id, slot_number=slot.slot_number
    )

    try:
        db_slot = ParkingSlot(**slot.model_dump())
        db.add(db_slot)
        db.commit()
        db.refresh(db_slot)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to create parking slot: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create parking slot: {str(e)}"
        )

    logger.info(f"Parking slot {db_slot.id} created for restaurant {db_slot.restaurant_id}")
    return {"message": "Parking slot created successfully", "status": True, "data": db_slot}


@router.put("/{slot_id}", response_model=ApiResponse[ParkingSlotResponse])
async def update_parking_slot(
    slot_update: ParkingSlotUpdate,
    slot_id: int = Path(..., gt=0, le=MAX_ID),
    db: Session = Depends(get_db)
):
    db_slot = get_or_404(db, ParkingSlot, slot_id, label="Parking slot")
    changes = slot_update.model_dump(exclude_unset=True)

    restaurant_id = changes.get("restaurant_id", db_slot.restaurant_id)
    slot_number = changes.get("slot_number", db_slot.slot_number)
    if "restaurant_id" in changes:
        get_or_404(db, Restaurant, restaurant_id)
    if "restaurant_id" in changes or "slot_number" in changes:
        validate_uniqueness(
            db, ParkingSlot, _duplicate_number(slot_number), exclude_id=slot_id,
            restaurant_id=restaurant_id, slot_number=slot_number
        )

    try:
        for field, value in changes.items():
            setattr(db_slot, field, value)
        db.commit()
        db.refresh(db_slot)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update parking slot {slot_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update parking slot: {str(e)}"
        )

    logger.info(f"Parking slot {slot_id} updated")
    return {"message": "Parking slot updated successfully", "status": True, "data": db_slot}


@router.delete("/{slot_id}", response_model=ApiResponse[ParkingSlotResponse])
async def delete_parking_slot(slot_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    db_slot = get_or_404(db, ParkingSlot, slot_id, label="Parking slot")
    deleted = ParkingSlotResponse.model_validate(db_slot)

    try:
        db.delete(db_slot)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to delete parking slot {slot_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete parking slot: {str(e)}"
        )

    logger.info(f"Parking slot {slot_id} deleted")
    return {"message": "Parking slot deleted successfully", "status": True, "data": deleted}
