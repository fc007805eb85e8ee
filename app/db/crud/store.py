from sqlalchemy.orm import Session, joinedload, selectinload
from typing import List, Optional
from pydantic import BaseModel
from app.db.models.store import Store
from app.errors import persistence_errors

def _store_query(db: Session):
    return db.query(Store).options(joinedload(Store.user), selectinload(Store.products))

def get_store(db: Session, store_id: int) -> Optional[Store]:
    with persistence_errors(db):
        return _store_query(db).filter(Store.id == store_id).first()

def get_store_by_user(db: Session, user_id: int) -> Optional[Store]:
    with persistence_errors(db):
        return db.query(Store).filter(Store.user_id == user_id).first()

def get_stores(db: Session) -> List[Store]:
    with persistence_errors(db):
        return _store_query(db).order_by(Store.id.asc()).all()

def create_store(db: Session, data: BaseModel) -> Store:
    db_store = Store(name=data.name, user_id=data.user_id)
    with persistence_errors(db):
        db.add(db_store)
        db.commit()
    return get_store(db, db_store.id)

def update_store(db: Session, store_id: int, data: BaseModel) -> Store:
    with persistence_errors(db):
        db_store = db.query(Store).filter(Store.id == store_id).one()
        db_store.name = data.name
        db.commit()
    return get_store(db, store_id)

def delete_store(db: Session, store_id: int) -> None:
    with persistence_errors(db):
        db_store = db.query(Store).filter(Store.id == store_id).one()
        db.delete(db_store)
        db.commit()
