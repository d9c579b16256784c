"""MPA age rating reference data."""
from sqlalchemy import Column, Integer, String

from filmorate_recommendation_service.models.base import Base


class MpaRating(Base):
    __tablename__ = "mpa_ratings"

    id = Column(Integer, primary_key=True)
    name = Column(String(20), nullable=False, unique=True)

    def __repr__(self):
        return f"<MpaRating(id={self.id}, name='{self.name}')>"
