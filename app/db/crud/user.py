from sqlalchemy.orm import Session, selectinload
from typing import List, Optional
from pydantic import BaseModel
from app.db.models.user import User
from app.errors import persistence_errors
from app.security import hash_password

def _user_query(db: Session):
    return db.query(User).options(selectinload(User.store))

def get_user(db: Session, user_id: int) -> Optional[User]:
    with persistence_errors(db):
        return _user_query(db).filter(User.id == user_id).first()

def get_users(db: Session) -> List[User]:
    with persistence_errors(db):
        return _user_query(db).order_by(User.id.asc()).all()

def create_user(db: Session, data: BaseModel) -> User:
    db_user = User(name=data.name, email=data.email, password=hash_password(data.password))
    with persistence_errors(db):
        db.add(db_user)
        db.commit()
    return get_user(db, db_user.id)

def update_user(db: Session, user_id: int, data: BaseModel) -> User:
    # .one() raises NoResultFound, reported as NOT_FOUND
    with persistence_errors(db):
        db_user = db.query(User).filter(User.id == user_id).one()
        db_user.name = data.name
        db_user.email = data.email
        db_user.password = hash_password(data.password)
        db.commit()
    return get_user(db, user_id)

def delete_user(db: Session, user_id: int) -> None:
    with persistence_errors(db):
        db_user = db.query(User).filter(User.id == user_id).one()
        db.delete(db_user)
        db.commit()
