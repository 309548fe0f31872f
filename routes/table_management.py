from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from utils import config
from utils.database import get_db
from utils.validators import get_or_404, require_id, validate_uniqueness
from models.restaurant import Restaurant
from models.table_management import Table
from schemas.common import MAX_ID, ApiResponse
from schemas.table_management import TableCreate, TableUpdate, TableResponse


logger = logging.getLogger(__name__)
router = APIRouter(prefix=f"{config.API_PREFIX}/tables", tags=["table_management"])


def _duplicate_number(table_number: str) -> str:
    return f"Table number {table_number} already exists for this restaurant"


@router.get("", response_model=ApiResponse[List[TableResponse]])
async def list_tables(
    restaurant_id: Optional[int] = Query(None, alias="restaurantId", gt=0, le=MAX_ID),
    db: Session = Depends(get_db)
):
    restaurant_id = require_id(restaurant_id, "restaurantId")
    get_or_404(db, Restaurant, restaurant_id)
    tables = db.query(Table).filter(Table.restaurant_id == restaurant_id).order_by(Table.id).all()
    logger.info(f"Retrieved {len(tables)} tables for restaurant {restaurant_id}")
    return {"message": "Tables fetched successfully", "status": True, "data": tables}


@router.get("/{table_id}", response_model=ApiResponse[TableResponse])
async def get_table(table_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    db_table = get_or_404(db, Table, table_id)
    return {"message": "Table fetched successfully", "status": True, "data": db_table}


@router.post("", response_model=ApiResponse[TableResponse], status_code=status.HTTP_201_CREATED)
async def create_table(table: TableCreate, db: Session = Depends(get_db)):
    get_or_404(db, Restaurant, table.restaurant_id)
    validate_uniqueness(
        db, Table, _duplicate_number(table.table_number),
        restaurant_id=table.restaurant_id, table_number=table.table_number
    )

    # Create table
    try:
        db_table = Table(**table.model_dump())
        db.add(db_table)
        db.commit()
        db.refresh(db_table)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to create table: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create table: {str(e)}"
        )

    logger.info(f"Table {db_table.id} created for restaurant {db_table.restaurant_id}")
    return {"message": "Table created successfully", "status": True, "data": db_table}


@router.put("/{table_id}", response_model=ApiResponse[TableResponse])
async def update_table(
    table_update: TableUpdate,
    table_id: int = Path(..., gt=0, le=MAX_ID),
    db: Session = Depends(get_db)
):
    db_table = get_or_404(db, Table, table_id)
    changes = table_update.model_dump(exclude_unset=True)

    restaurant_id = changes.get("restaurant_id", db_table.restaurant_id)
    table_number = changes.get("table_number", db_table.table_number)
    if "restaurant_id" in changes:
        get_or_404(db, Restaurant, restaurant_id)
    if "restaurant_id" in changes or "table_number" in changes:
        validate_uniqueness(
            db, Table, _duplicate_number(table_number), exclude_id=table_id,
            restaurant_id=restaurant_id, table_number=table_number
        )

    # Update table
    try:
        for field, value in changes.items():
            setattr(db_table, field, value)
        db.commit()
        db.refresh(db_table)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update table {table_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update table: {str(e)}"
        )

    logger.info(f"Table {table_id} updated")
    return {"message": "Table updated successfully", "status": True, "data": db_table}


@router.delete("/{table_id}", response_model=ApiResponse[TableResponse])
async def delete_table(table_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    db_table = get_or_404(db, Table, table_id)
    deleted = TableResponse.model_validate(db_table)

    try:
        db.delete(db_table)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to delete table {table_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete table: {str(e)}"
        )

    logger.info(f"Table {table_id} deleted")
    return {"message": "Table deleted successfully", "status": True, "data": deleted}
