"""Repository for genre reference data."""

import logging

from sqlalchemy.orm import Session

from filmorate_recommendation_service.exceptions import GenreNotFoundError
from filmorate_recommendation_service.models import Genre

logger = logging.getLogger(__name__)


class GenreRepository:
    def __init__(self, db: Session):
        self.db = db

    # noinspection PyTypeChecker
    def get_all_genres(self) -> list[Genre]:
        """Get all genres ordered by ID."""
        return self.db.query(Genre).order_by(Genre.id).all()

    def get_genre(self, genre_id: int) -> Genre:
        """
        Get genre by ID.

        Raises:
            GenreNotFoundError: If no genre has this ID
        """
        genre = self.db.query(Genre).filter(Genre.id == genre_id).first()
        if genre is None:
            logger.warning(f"Genre {genre_id} not found")
            raise GenreNotFoundError(genre_id)
        return genre

    def create_genre(self, genre_data: dict) -> Genre:
        """
        Store a new genre.

        Args:
            genre_data: Dict with name and optionally id

        Returns:
            Genre object
        """
        genre = Genre(id=genre_data.get("id"), name=genre_data["name"])
        self.db.add(genre)
        self.db.commit()
        self.db.refresh(genre)

        logger.info(f"Created genre {genre.id} '{genre.name}'")
        return genre
