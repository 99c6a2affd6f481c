"""
Platform model for social network targets.
"""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from ..database import Base


class Platform(Base):
    __tablename__ = "platforms"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)
    # Stored as given, e.g. "1080x1080"; never parsed or enforced
    image_size_constraint = Column(String(100), nullable=False)

    # Relationships
    posts = relationship("Post", back_populates="platform", cascade="all, delete-orphan", passive_deletes=True)
