# routes/product.py
from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.orm import Session
from typing import Any, List
import logging
from ..constants import messages
from ..database import get_db
from ..db.crud import product as product_crud
from ..db.crud import store as store_crud
from ..db.schemas.product import PRODUCT_SCHEMA, UPDATE_PRODUCT_SCHEMA, ProductRead
from ..errors import ApiError, ErrorMessages, PersistenceError
from ..validation import validate
from .params import RecordId

logger = logging.getLogger(__name__)

router = APIRouter()

LIST_ERRORS = ErrorMessages(fallback=messages.PRODUCT_LIST_FAILED)
FETCH_ERRORS = ErrorMessages(fallback=messages.PRODUCT_FETCH_FAILED)
CREATE_ERRORS = ErrorMessages(
    fallback=messages.PRODUCT_CREATE_FAILED,
    foreign_key=messages.STORE_NOT_FOUND,
    foreign_key_status=status.HTTP_404_NOT_FOUND,
)
UPDATE_ERRORS = ErrorMessages(
    fallback=messages.PRODUCT_UPDATE_FAILED,
    not_found=messages.PRODUCT_NOT_FOUND,
    foreign_key=messages.STORE_REFERENCE_MISSING,
    foreign_key_status=status.HTTP_404_NOT_FOUND,
)
DELETE_ERRORS = ErrorMessages(fallback=messages.PRODUCT_DELETE_FAILED, not_found=messages.PRODUCT_NOT_FOUND)

@router.get("", response_model=List[ProductRead])
def list_products(db: Session = Depends(get_db)):
    """List all products with their store and its owner"""
    try:
        return product_crud.get_products(db)
    except PersistenceError as exc:
        raise LIST_ERRORS.translate(exc) from exc

@router.get("/{product_id}", response_model=ProductRead)
def get_product(product_id: RecordId, db: Session = Depends(get_db)):
    """Get a specific product"""
    try:
        db_product = product_crud.get_product(db, product_id)
    except PersistenceError as exc:
        raise FETCH_ERRORS.translate(exc) from exc
    if not db_product:
        raise ApiError(status.HTTP_404_NOT_FOUND, messages.PRODUCT_NOT_FOUND)
    return db_product

@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(payload: Any = Body(None), db: Session = Depends(get_db)):
    """
    Create a product

    - name is required
    - price is required and greater than zero
    - storeId is required and must reference an existing store
    """
    data = validate(PRODUCT_SCHEMA, payload)
    try:
        if not store_crud.get_store(db, data.store_id):
            raise ApiError(status.HTTP_404_NOT_FOUND, messages.STORE_NOT_FOUND)
        db_product = product_crud.create_product(db, data)
    except PersistenceError as exc:
        raise CREATE_ERRORS.translate(exc) from exc
    logger.info("Created product %s in store %s", db_product.id, data.store_id)
    return db_product

@router.put("/{product_id}", response_model=ProductRead)
def update_product(product_id: RecordId, payload: Any = Body(None), db: Session = Depends(get_db)):
    """
    Replace a product

    - name and price follow the creation rules
    - storeId, when given, must reference an existing store
    """
    data = validate(UPDATE_PRODUCT_SCHEMA, payload)
    try:
        if not product_crud.get_product(db, product_id):
            raise ApiError(status.HTTP_404_NOT_FOUND, messages.PRODUCT_NOT_FOUND)
        if data.store_id is not None and not store_crud.get_store(db, data.store_id):
            raise ApiError(status.HTTP_404_NOT_FOUND, messages.STORE_REFERENCE_MISSING)
        db_product = product_crud.update_product(db, product_id, data)
    except PersistenceError as exc:
        raise UPDATE_ERRORS.translate(exc) from exc
    logger.info("Updated product %s", product_id)
    return db_product

@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: RecordId, db: Session = Depends(get_db)):
    """Delete a product"""
    try:
        if not product_crud.get_product(db, product_id):
            raise ApiError(status.HTTP_404_NOT_FOUND, messages.PRODUCT_NOT_FOUND)
        product_crud.delete_product(db, product_id)
    except PersistenceError as exc:
        raise DELETE_ERRORS.translate(exc) from exc
    logger.info("Deleted product %s", product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
