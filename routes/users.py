from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session
from typing import List
import logging

from utils import config
from utils.database import get_db
from utils.validators import get_or_404, validate_uniqueness
from models.user import User
from schemas.common import MAX_ID, ApiResponse
from schemas.user import UserCreate, UserUpdate, UserResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix=f"{config.API_PREFIX}/users", tags=["users"])


@router.post("", response_model=ApiResponse[UserResponse], status_code=status.HTTP_201_CREATED)
async def create_user(user: UserCreate, db: Session = Depends(get_db)):
    validate_uniqueness(db, User, "User with this email already exists", email=user.email)

    try:
        db_user = User(**user.model_dump())
        db.add(db_user)
        db.commit()
        db.refresh(db_user)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to create user {user.email}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create user: {str(e)}"
        )

    logger.info(f"User {db_user.id} created")
    return {"message": "User created successfully", "status": True, "data": db_user}


@router.get("", response_model=ApiResponse[List[UserResponse]])
async def list_users(db: Session = Depends(get_db)):
    users = db.query(User).order_by(User.id).all()
    return {"message": "Users fetched successfully", "status": True, "data": users}


@router.get("/{user_id}", response_model=ApiResponse[UserResponse])
async def get_user(user_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    db_user = get_or_404(db, User, user_id)
    return {"message": "User fetched successfully", "status": True, "data": db_user}


@router.put("/{user_id}", response_model=ApiResponse[UserResponse])
async def update_user(user_update: UserUpdate, user_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    db_user = get_or_404(db, User, user_id)
    changes = user_update.model_dump(exclude_unset=True)
    if "email" in changes:
        validate_uniqueness(db, User, "User with this email already exists", exclude_id=user_id, email=changes["email"])

    try:
        for field, value in changes.items():
            setattr(db_user, field, value)
        db.commit()
        db.refresh(db_user)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to update user {user_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update user: {str(e)}"
        )

    logger.info(f"User {user_id} updated")
    return {"message": "User updated successfully", "status": True, "data": db_user}


@router.delete("/{user_id}", response_model=ApiResponse[UserResponse])
async def delete_user(user_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    db_user = get_or_404(db, User, user_id)
    deleted = UserResponse.model_validate(db_user)

    try:
        db.delete(db_user)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to delete user {user_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete user: {str(e)}"
        )

    logger.info(f"User {user_id} deleted")
    return {"message": "User deleted successfully", "status": True, "data": deleted}
