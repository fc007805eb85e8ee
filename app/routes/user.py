# routes/user.py
from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.orm import Session
from typing import Any, List
import logging
from ..constants import messages
from ..database import get_db
from ..db.crud import user as user_crud
from ..db.schemas.user import USER_SCHEMA, UserRead
from ..errors import ApiError, ErrorMessages, PersistenceError
from ..validation import validate
from .params import RecordId

logger = logging.getLogger(__name__)

router = APIRouter()

LIST_ERRORS = ErrorMessages(fallback=messages.USER_LIST_FAILED)
FETCH_ERRORS = ErrorMessages(fallback=messages.USER_FETCH_FAILED)
CREATE_ERRORS = ErrorMessages(fallback=messages.USER_CREATE_FAILED, unique=messages.EMAIL_TAKEN)
UPDATE_ERRORS = ErrorMessages(
    fallback=messages.USER_UPDATE_FAILED,
    unique=messages.EMAIL_TAKEN,
    not_found=messages.USER_NOT_FOUND,
)
DELETE_ERRORS = ErrorMessages(
    fallback=messages.USER_DELETE_FAILED,
    not_found=messages.USER_NOT_FOUND,
    foreign_key=messages.USER_HAS_STORE,
)

@router.get("", response_model=List[UserRead])
def list_users(db: Session = Depends(get_db)):
    """List all users with their store"""
    try:
        return user_crud.get_users(db)
    except PersistenceError as exc:
        raise LIST_ERRORS.translate(exc) from exc

@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: RecordId, db: Session = Depends(get_db)):
    """Get a specific user"""
    try:
        db_user = user_crud.get_user(db, user_id)
    except PersistenceError as exc:
        raise FETCH_ERRORS.translate(exc) from exc
    if not db_user:
        raise ApiError(status.HTTP_404_NOT_FOUND, messages.USER_NOT_FOUND)
    return db_user

@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(payload: Any = Body(None), db: Session = Depends(get_db)):
    """
    Create a user

    - name is required and must hold at least first and last name
    - email is required, valid and unique
    - password is required with at least 8 characters
    """
    data = validate(USER_SCHEMA, payload)
    try:
        db_user = user_crud.create_user(db, data)
    except PersistenceError as exc:
        raise CREATE_ERRORS.translate(exc) from exc
    logger.info("Created user %s", db_user.id)
    return db_user

@router.put("/{user_id}", response_model=UserRead)
def update_user(user_id: RecordId, payload: Any = Body(None), db: Session = Depends(get_db)):
    """Replace a user; same rules as creation"""
    data = validate(USER_SCHEMA, payload)
    try:
        db_user = user_crud.update_user(db, user_id, data)
    except PersistenceError as exc:
        raise UPDATE_ERRORS.translate(exc) from exc
    logger.info("Updated user %s", user_id)
    return db_user

@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: RecordId, db: Session = Depends(get_db)):
    """Delete a user that owns no store"""
    try:
        db_user = user_crud.get_user(db, user_id)
        if not db_user:
            raise ApiError(status.HTTP_404_NOT_FOUND, messages.USER_NOT_FOUND)
        if db_user.store is not None:
            raise ApiError(status.HTTP_409_CONFLICT, messages.USER_HAS_STORE)
        user_crud.delete_user(db, user_id)
    except PersistenceError as exc:
        raise DELETE_ERRORS.translate(exc) from exc
    logger.info("Deleted user %s", user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
