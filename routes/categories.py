from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from utils import config
from utils.database import get_db
from utils.validators import get_or_404, require_id
from models.restaurant import Restaurant
from models.menu_management import Category
from schemas.common import MAX_ID, ApiResponse
from schemas.menu_management import CategoryCreate, CategoryUpdate, CategoryResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix=f"{config.API_PREFIX}/categories", tags=["categories"])


def _list_for_restaurant(db: Session, restaurant_id: int):
    get_or_404(db, Restaurant, restaurant_id)
    categories = db.query(Category).filter(Category.restaurant_id == restaurant_id).order_by(Category.id).all()
    logger.debug(f"Retrieved {len(categories)} categories for restaurant {restaurant_id}")
    return {"message": "Categories fetched successfully", "status": True, "data": categories}


@router.get("", response_model=ApiResponse[List[CategoryResponse]])
async def list_categories(
    restaurant_id: Optional[int] = Query(None, alias="restaurantId", gt=0, le=MAX_ID),
    db: Session = Depends(get_db)
):
    return _list_for_restaurant(db, require_id(restaurant_id, "restaurantId"))


@router.get("/restaurant/{restaurant_id}", response_model=ApiResponse[List[CategoryResponse]])
async def list_restaurant_categories(restaurant_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    return _list_for_restaurant(db, restaurant_id)


@router.get("/{category_id}", response_model=ApiResponse[CategoryResponse])
async def get_category(category_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    db_category = get_or_404(db, Category, category_id)
    return {"message": "Category fetched successfully", "status": True, "data": db_category}


@router.post("", response_model=ApiResponse[CategoryResponse], status_code=status.HTTP_201_CREATED)
async def create_category(category: CategoryCreate, db: Session = Depends(get_db)):
    get_or_404(db, Restaurant, category.restaurant_id)

    try:
        db_category = Category(**category.model_dump())
        db.add(db_category)
        db.commit()
        db.refresh(db_category)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to create category: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create category: {str(e)}"
        )

    logger.info(f"Category {db_category.id} created for restaurant {db_category.restaurant_id}")
    return {"message": "Category created successfully", "status": True, "data": db_category}


@router.put("/{category_id}", response_model=ApiResponse[CategoryResponse])
async def update_category(
    category_update: CategoryUpdate,
    category_id: int = Path(..., gt=0, le=MAX_ID),
    db: Session = Depends(get_db)
):
    db_category = get_or_404(db, Category, category_id)
    changes = category_update.model_dump(exclude_unset=True)
    if "restaurant_id" in changes:
        get_or_404(db, Restaurant, changes["restaurant_id"])

    try:
        for field, value in changes.items():
            setattr(db_category, field, value)
        db.commit()
        db.refresh(db_category)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update category {category_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update category: {str(e)}"
        )

    logger.info(f"Category {category_id} updated")
    return {"message": "Category updated successfully", "status": True, "data": db_category}


@router.delete("/{category_id}", response_model=ApiResponse[CategoryResponse])
async def delete_category(category_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    db_category = get_or_404(db, Category, category_id)
    deleted = CategoryResponse.model_validate(db_category)

    try:
        db.delete(db_category)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Category {category_id} delete blocked: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Category has dishes referenced by existing orders"
        )
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to delete category {category_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete category: {str(e)}"
        )

    logger.info(f"Category {category_id} deleted")
    return {"message": "Category deleted successfully", "status": True, "data": deleted}
