from sqlalchemy.orm import Session, joinedload
from typing import List, Optional
from pydantic import BaseModel
from app.db.models.product import Product
from app.db.models.store import Store
from app.errors import persistence_errors

def _product_query(db: Session):
    return db.query(Product).options(joinedload(Product.store).joinedload(Store.user))

def get_product(db: Session, product_id: int) -> Optional[Product]:
    with persistence_errors(db):
        return _product_query(db).filter(Product.id == product_id).first()

def get_products(db: Session) -> List[Product]:
    with persistence_errors(db):
        return _product_query(db).order_by(Product.id.asc()).all()

def create_product(db: Session, data: BaseModel) -> Product:
    db_product = Product(name=data.name, price=data.price, store_id=data.store_id)
    with persistence_errors(db):
        db.add(db_product)
        db.commit()
    return get_product(db, db_product.id)

def update_product(db: Session, product_id: int, data: BaseModel) -> Product:
    with persistence_errors(db):
        db_product = db.query(Product).filter(Product.id == product_id).one()
        db_product.name = data.name
        db_product.price = data.price
        # store_id is optional on update; keep the current store when absent
        if data.store_id is not None:
            db_product.store_id = data.store_id
        db.commit()
    return get_product(db, product_id)

def delete_product(db: Session, product_id: int) -> None:
    with persistence_errors(db):
        db_product = db.query(Product).filter(Product.id == product_id).one()
        db.delete(db_product)
        db.commit()
