# models/user.py
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True, index=True)
    # PBKDF2 hash, see app.security
    password = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Deletes are restricted by the database, never nullified by the ORM
    store = relationship("Store", back_populates="user", uselist=False, passive_deletes="all")

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
