"""
User model, the owner of designs and posts.
"""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from ..database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash

    # Relationships
    designs = relationship("Design", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
    posts = relationship("Post", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
