from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload
from typing import List, Optional
import logging

from utils import config
from utils.database import get_db
from utils.validators import get_or_404
from models.restaurant import Restaurant
from models.menu_management import Category, Dish
from schemas.common import MAX_ID, ApiResponse
from schemas.menu_management import DishCreate, DishUpdate, DishResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix=f"{config.API_PREFIX}/menus", tags=["menus"])


def _dish_query(db: Session):
    return db.query(Dish).options(joinedload(Dish.category))


@router.get("", response_model=ApiResponse[List[DishResponse]])
async def list_dishes(
    restaurant_id: Optional[int] = Query(None, alias="restaurantId", gt=0, le=MAX_ID),
    category_id: Optional[int] = Query(None, alias="categoryId", gt=0, le=MAX_ID),
    db: Session = Depends(get_db)
):
    if restaurant_id is None and category_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="restaurantId or categoryId is required and must be a valid number"
        )

    query = _dish_query(db)
    if restaurant_id is not None:
        get_or_404(db, Restaurant, restaurant_id)
        query = query.join(Category, Dish.category_id == Category.id).filter(Category.restaurant_id == restaurant_id)
    if category_id is not None:
        get_or_404(db, Category, category_id)
        query = query.filter(Dish.category_id == category_id)

    dishes = query.order_by(Dish.id).all()
    logger.debug(f"Retrieved {len(dishes)} dishes (restaurant={restaurant_id}, category={category_id})")
    return {"message": "Dishes fetched successfully", "status": True, "data": dishes}


@router.get("/{dish_id}", response_model=ApiResponse[DishResponse])
async def get_dish(dish_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    db_dish = get_or_404(db, Dish, dish_id, query=_dish_query(db))
    return {"message": "Dish fetched successfully", "status": True, "data": db_dish}


@router.post("", response_model=ApiResponse[DishResponse], status_code=status.HTTP_201_CREATED)
async def create_dish(dish: DishCreate, db: Session = Depends(get_db)):
    get_or_404(db, Category, dish.category_id)

    try:
        db_dish = Dish(**dish.model_dump())
        db.add(db_dish)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to create dish: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create dish: {str(e)}"
        )

    logger.info(f"Dish {db_dish.id} created in category {db_dish.category_id}")
    db_dish = get_or_404(db, Dish, db_dish.id, query=_dish_query(db))
    return {"message": "Dish created successfully", "status": True, "data": db_dish}


@router.put("/{dish_id}", response_model=ApiResponse[DishResponse])
async def update_dish(dish_update: DishUpdate, dish_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    db_dish = get_or_404(db, Dish, dish_id)
    changes = dish_update.model_dump(exclude_unset=True)
    if "category_id" in changes:
        get_or_404(db, Category, changes["category_id"])

    try:
        for field, value in changes.items():
            setattr(db_dish, field, value)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update dish {dish_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update dish: {str(e)}"
        )

    logger.info(f"Dish {dish_id} updated")
    db_dish = get_or_404(db, Dish, dish_id, query=_dish_query(db))
    return {"message": "Dish updated successfully", "status": True, "data": db_dish}


@router.delete("/{dish_id}", response_model=ApiResponse[DishResponse])
async def delete_dish(dish_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    db_dish = get_or_404(db, Dish, dish_id, query=_dish_query(db))
    deleted = DishResponse.model_validate(db_dish)

    try:
        db.delete(db_dish)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Dish {dish_id} delete blocked: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Dish is referenced by existing order items"
        )
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to delete dish {dish_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete dish: {str(e)}"
        )

    logger.info(f"Dish {dish_id} deleted")
    return {"message": "Dish deleted successfully", "status": True, "data": deleted}
