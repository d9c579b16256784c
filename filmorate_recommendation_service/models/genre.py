"""Film genre reference data."""
from sqlalchemy import Column, Integer, String

from filmorate_recommendation_service.models.base import Base


class Genre(Base):
    __tablename__ = "genres"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False, unique=True)

    def __repr__(self):
        return f"<Genre(id={self.id}, name='{self.name}')>"
