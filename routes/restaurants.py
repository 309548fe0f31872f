from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from utils import config
from utils.database import get_db
from utils.security import get_password_hash
from utils.validators import get_or_404, validate_uniqueness
from models.restaurant import Restaurant, RestaurantStatus
from schemas.common import MAX_ID, ApiResponse
from schemas.restaurant import RestaurantCreate, RestaurantUpdate, RestaurantResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix=f"{config.API_PREFIX}/restaurants", tags=["restaurants"])

DUPLICATE_EMAIL = "Restaurant with this email already exists"


@router.post("", response_model=ApiResponse[RestaurantResponse], status_code=status.HTTP_201_CREATED)
async def signup_restaurant(restaurant: RestaurantCreate, db: Session = Depends(get_db)):
    logger.info(f"Attempting to sign up restaurant with email: {restaurant.email}")

    existing = db.query(Restaurant).filter(Restaurant.email == restaurant.email).first()
    if existing:
        logger.warning(f"Signup failed: email already registered: {restaurant.email}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=DUPLICATE_EMAIL)

    db_restaurant = Restaurant(
        name=restaurant.name,
        email=restaurant.email,
        password=get_password_hash(restaurant.password),
        phone=restaurant.phone,
        address=restaurant.address,
        description=restaurant.description or None,
        logo=restaurant.logo or None,
        bg_image=restaurant.bg_image or None,
        status=RestaurantStatus.DE_ACTIVE,
    )
    try:
        db.add(db_restaurant)
        db.commit()
        db.refresh(db_restaurant)
    except IntegrityError:
        # Lost a race against a concurrent signup with the same email
        db.rollback()
        logger.warning(f"Signup failed on unique constraint for email: {restaurant.email}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=DUPLICATE_EMAIL)
    except Exception as e:
        db.rollback()
        logger.error(f"Unexpected error signing up restaurant {restaurant.email}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}"
        )

    logger.info(f"Restaurant signed up: {db_restaurant.email} (ID: {db_restaurant.id})")
    return {"message": "Restaurant created successfully", "status": True, "data": db_restaurant}


@router.get("", response_model=ApiResponse[List[RestaurantResponse]])
async def list_restaurants(
    restaurant_status: Optional[RestaurantStatus] = Query(None, alias="status"),
    db: Session = Depends(get_db)
):
    query = db.query(Restaurant)
    if restaurant_status is not None:
        query = query.filter(Restaurant.status == restaurant_status)
    restaurants = query.order_by(Restaurant.id).all()
    return {"message": "Restaurants fetched successfully", "status": True, "data": restaurants}


@router.get("/{restaurant_id}", response_model=ApiResponse[RestaurantResponse])
async def get_restaurant(restaurant_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    db_restaurant = get_or_404(db, Restaurant, restaurant_id)
    return {"message": "Restaurant fetched successfully", "status": True, "data": db_restaurant}


@router.put("/{restaurant_id}", response_model=ApiResponse[RestaurantResponse])
async def update_restaurant(
    restaurant_update: RestaurantUpdate,
    restaurant_id: int = Path(..., gt=0, le=MAX_ID),
    db: Session = Depends(get_db)
):
    db_restaurant = get_or_404(db, Restaurant, restaurant_id)
    changes = restaurant_update.model_dump(exclude_unset=True)

    if "email" in changes and changes["email"] != db_restaurant.email:
        validate_uniqueness(db, Restaurant, DUPLICATE_EMAIL, exclude_id=restaurant_id, email=changes["email"])
    if "password" in changes:
        changes["password"] = get_password_hash(changes["password"])

    try:
        for field, value in changes.items():
            setattr(db_restaurant, field, value)
        db.commit()
        db.refresh(db_restaurant)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=DUPLICATE_EMAIL)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update restaurant {restaurant_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update restaurant: {str(e)}"
        )

    logger.info(f"Restaurant {restaurant_id} updated fields: {sorted(changes)}")
    return {"message": "Restaurant updated successfully", "status": True, "data": db_restaurant}


@router.delete("/{restaurant_id}", response_model=ApiResponse[RestaurantResponse])
async def delete_restaurant(restaurant_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    db_restaurant = get_or_404(db, Restaurant, restaurant_id)
    deleted = RestaurantResponse.model_validate(db_restaurant)

    try:
        db.delete(db_restaurant)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Restaurant {restaurant_id} delete blocked: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Restaurant dishes are referenced by orders of another restaurant"
        )
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to delete restaurant {restaurant_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete restaurant: {str(e)}"
        )

    logger.info(f"Restaurant {restaurant_id} deleted")
    return {"message": "Restaurant deleted successfully", "status": True, "data": deleted}
