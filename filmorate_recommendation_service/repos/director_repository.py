"""Repository for film directors."""

import logging

from sqlalchemy.orm import Session

from filmorate_recommendation_service.exceptions import DirectorNotFoundError
from filmorate_recommendation_service.models import Director

logger = logging.getLogger(__name__)


class DirectorRepository:
    def __init__(self, db: Session):
        self.db = db

    # noinspection PyTypeChecker
    def get_all_directors(self) -> list[Director]:
        """Get all directors ordered by ID."""
        return self.db.query(Director).order_by(Director.id).all()

    def get_director(self, director_id: int) -> Director:
        """
        Get director by ID.

        Raises:
            DirectorNotFoundError: If no director has this ID
        """
        director = self.db.query(Director).filter(Director.id == director_id).first()
        if director is None:
            logger.warning(f"Director {director_id} not found")
            raise DirectorNotFoundError(director_id)
        return director

    def create_director(self, director_data: dict) -> Director:
        """
        Store a new director.

        Args:
            director_data: Dict with name and optionally id

        Returns:
            Director object
        """
        director = Director(id=director_data.get("id"), name=director_data["name"])
        self.db.add(director)
        self.db.commit()
        self.db.refresh(director)

        logger.info(f"Created director {director.id} '{director.name}'")
        return director
