"""Film director reference data."""
from sqlalchemy import Column, Integer, String

from filmorate_recommendation_service.models.base import Base


class Director(Base):
    __tablename__ = "directors"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)

    def __repr__(self):
        return f"<Director(id={self.id}, name='{self.name}')>"
