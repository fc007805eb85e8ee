# routes/store.py
from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.orm import Session
from typing import Any, List
import logging
from ..constants import messages
from ..database import get_db
from ..db.crud import store as store_crud
from ..db.crud import user as user_crud
from ..db.schemas.store import CREATE_STORE_SCHEMA, UPDATE_STORE_SCHEMA, StoreRead
from ..errors import ApiError, ErrorMessages, PersistenceError
from ..validation import validate
from .params import RecordId

logger = logging.getLogger(__name__)

router = APIRouter()

LIST_ERRORS = ErrorMessages(fallback=messages.STORE_LIST_FAILED)
FETCH_ERRORS = ErrorMessages(fallback=messages.STORE_FETCH_FAILED)
CREATE_ERRORS = ErrorMessages(
    fallback=messages.STORE_CREATE_FAILED,
    unique=messages.USER_ALREADY_HAS_STORE,
    # owner removed between the existence check and the insert
    foreign_key=messages.USER_NOT_FOUND,
    foreign_key_status=status.HTTP_404_NOT_FOUND,
)
UPDATE_ERRORS = ErrorMessages(fallback=messages.STORE_UPDATE_FAILED, not_found=messages.STORE_NOT_FOUND)
DELETE_ERRORS = ErrorMessages(
    fallback=messages.STORE_DELETE_FAILED,
    not_found=messages.STORE_NOT_FOUND,
    foreign_key=messages.STORE_HAS_PRODUCTS,
)

@router.get("", response_model=List[StoreRead])
def list_stores(db: Session = Depends(get_db)):
    """List all stores with their products and owner"""
    try:
        return store_crud.get_stores(db)
    except PersistenceError as exc:
        raise LIST_ERRORS.translate(exc) from exc

@router.get("/{store_id}", response_model=StoreRead)
def get_store(store_id: RecordId, db: Session = Depends(get_db)):
    """Get a specific store"""
    try:
        db_store = store_crud.get_store(db, store_id)
    except PersistenceError as exc:
        raise FETCH_ERRORS.translate(exc) from exc
    if not db_store:
        raise ApiError(status.HTTP_404_NOT_FOUND, messages.STORE_NOT_FOUND)
    return db_store

@router.post("", response_model=StoreRead, status_code=status.HTTP_201_CREATED)
def create_store(payload: Any = Body(None), db: Session = Depends(get_db)):
    """
    Create a store

    - name is required
    - userId must reference an existing user
    - a user owns at most one store
    """
    data = validate(CREATE_STORE_SCHEMA, payload)
    try:
        if not user_crud.get_user(db, data.user_id):
            raise ApiError(status.HTTP_404_NOT_FOUND, messages.USER_NOT_FOUND)
        if store_crud.get_store_by_user(db, data.user_id):
            raise ApiError(status.HTTP_409_CONFLICT, messages.USER_ALREADY_HAS_STORE)
        db_store = store_crud.create_store(db, data)
    except PersistenceError as exc:
        raise CREATE_ERRORS.translate(exc) from exc
    logger.info("Created store %s for user %s", db_store.id, data.user_id)
    return db_store

@router.put("/{store_id}", response_model=StoreRead)
def update_store(store_id: RecordId, payload: Any = Body(None), db: Session = Depends(get_db)):
    """Rename a store; the owner cannot change"""
    data = validate(UPDATE_STORE_SCHEMA, payload)
    try:
        if not store_crud.get_store(db, store_id):
            raise ApiError(status.HTTP_404_NOT_FOUND, messages.STORE_NOT_FOUND)
        db_store = store_crud.update_store(db, store_id, data)
    except PersistenceError as exc:
        raise UPDATE_ERRORS.translate(exc) from exc
    logger.info("Updated store %s", store_id)
    return db_store

@router.delete("/{store_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_store(store_id: RecordId, db: Session = Depends(get_db)):
    """Delete a store that has no products"""
    try:
        db_store = store_crud.get_store(db, store_id)
        if not db_store:
            raise ApiError(status.HTTP_404_NOT_FOUND, messages.STORE_NOT_FOUND)
        if db_store.products:
            raise ApiError(status.HTTP_409_CONFLICT, messages.STORE_HAS_PRODUCTS)
        store_crud.delete_store(db, store_id)
    except PersistenceError as exc:
        raise DELETE_ERRORS.translate(exc) from exc
    logger.info("Deleted store %s", store_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
