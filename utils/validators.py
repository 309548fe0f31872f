from typing import Dict, Iterable, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from utils import config


def get_or_404(db: Session, model, object_id: int, label: Optional[str] = None, query=None):
    """Fetch a row by primary key or raise a 404 naming the resource."""
    query = query if query is not None else db.query(model)
    instance = query.filter(model.id == object_id).first()
    if not instance:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{label or model.__name__} with id {object_id} not found"
        )
    return instance


def require_id(value: Optional[int], name: str) -> int:
    """Scope ids arrive as optional query parameters; absence is a client error."""
    if value is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{name} is required and must be a valid number"
        )
    return value


def validate_uniqueness(db: Session, model, detail: str, exclude_id: Optional[int] = None, **filters):
    """Raise 409 when another row already holds the given column values."""
    query = db.query(model).filter_by(**filters)
    if exclude_id is not None:
        query = query.filter(model.id != exclude_id)
    if query.first():
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=detail)


def validate_status_transition(current_status: str, new_status: str, valid_transitions: Dict[str, Iterable[str]], label: str):
    if not config.ENFORCE_STATUS_TRANSITIONS or current_status == new_status:
        return
    if new_status not in valid_transitions.get(current_status, []):
        current = getattr(current_status, "value", current_status)
        requested = getattr(new_status, "value", new_status)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {label} status transition from {current} to {requested}"
        )
