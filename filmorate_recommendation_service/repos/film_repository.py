"""Repository for the film catalog."""

import logging
from typing import Dict, Iterable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from filmorate_recommendation_service.exceptions import (
    DirectorNotFoundError,
    FilmNotFoundError,
    GenreNotFoundError,
    MpaNotFoundError,
    NotFoundError,
)
from filmorate_recommendation_service.models import Director, Film, Genre, Like, MpaRating

logger = logging.getLogger(__name__)


class FilmRepository:
    """
    Repository for the film catalog.

    Film data dicts use the keys name, description, release_date, duration,
    rating, mpa_id, genre_ids and director_ids. Tag ID lists are expected
    to be deduplicated by the caller.
    """

    def __init__(self, db: Session):
        self.db = db

    def create_film(self, film_data: Dict) -> Film:
        """
        Insert a film together with its genre and director links.

        Args:
            film_data: Film data dict

        Returns:
            The stored Film
        """
        film = Film()
        try:
            self._apply(film, film_data)
            self.db.add(film)
            self.db.commit()
        except (SQLAlchemyError, NotFoundError):
            self.db.rollback()
            raise

        self.db.refresh(film)
        logger.info(f"Created film {film.id} '{film.name}'")
        return film

    def update_film(self, film_id: int, film_data: Dict) -> Film:
        """
        Replace a film's fields and re-link its genres and directors.

        The scalar update and the re-linking are committed together, so a
        failure leaves the previous version of the film untouched.

        Args:
            film_id: ID of the film to update
            film_data: Film data dict

        Returns:
            The updated Film

        Raises:
            FilmNotFoundError: If no film has this ID
        """
        film = self.find_film(film_id)
        if film is None:
            logger.warning(f"Film {film_id} not found for update")
            raise FilmNotFoundError(film_id)

        try:
            self._apply(film, film_data)
            self.db.commit()
        except (SQLAlchemyError, NotFoundError):
            self.db.rollback()
            raise

        self.db.refresh(film)
        logger.info(f"Updated film {film.id} '{film.name}'")
        return film

    def find_film(self, film_id: int) -> Optional[Film]:
        """Get film by ID, or None."""
        return self.db.query(Film).filter(Film.id == film_id).first()

    def get_film(self, film_id: int) -> Film:
        """
        Get film by ID.

        Raises:
            FilmNotFoundError: If no film has this ID
        """
        film = self.find_film(film_id)
        if film is None:
            logger.warning(f"Film {film_id} not found")
            raise FilmNotFoundError(film_id)
        return film

    # noinspection PyTypeChecker
    def get_all_films(self) -> List[Film]:
        """Get all films ordered by ID, with genres and directors loaded."""
        return (
            self.db.query(Film)
            .options(selectinload(Film.genres), selectinload(Film.directors))
            .order_by(Film.id)
            .all()
        )

    def get_films_by_ids(self, film_ids: Iterable[int]) -> List[Film]:
        """
        Get films in the order their IDs are given.

        Raises:
            FilmNotFoundError: For the first ID with no film
        """
        film_ids = list(film_ids)
        if not film_ids:
            return []

        films = (
            self.db.query(Film)
            .options(selectinload(Film.genres), selectinload(Film.directors))
            .filter(Film.id.in_(film_ids))
            .all()
        )
        by_id = {film.id: film for film in films}

        ordered = []
        for film_id in film_ids:
            if film_id not in by_id:
                logger.warning(f"Film {film_id} not found")
                raise FilmNotFoundError(film_id)
            ordered.append(by_id[film_id])
        return ordered

    def delete_film(self, film_id: int) -> bool:
        """
        Delete a film, its tag links and its likes.

        Returns:
            True if deleted, False if not found
        """
        film = self.find_film(film_id)
        if film is None:
            return False

        self.db.query(Like).filter(Like.film_id == film_id).delete()
        self.db.delete(film)
        self.db.commit()

        logger.info(f"Deleted film {film_id}")
        return True

    def count_films(self) -> int:
        """Count films in the catalog."""
        return self.db.query(Film).count()

    def _apply(self, film: Film, film_data: Dict) -> None:
        """Copy a film data dict onto a Film, resolving referenced rows."""
        film.name = film_data["name"]
        film.description = film_data.get("description")
        film.release_date = film_data.get("release_date")
        film.duration = film_data.get("duration")
        film.rating = film_data.get("rating") or 0

        mpa_id = film_data.get("mpa_id")
        if mpa_id is None:
            film.mpa = None
        else:
            mpa = self.db.query(MpaRating).filter(MpaRating.id == mpa_id).first()
            if mpa is None:
                raise MpaNotFoundError(mpa_id)
            film.mpa = mpa

        film.genres = self._load_tags(Genre, film_data.get("genre_ids") or [], GenreNotFoundError)
        film.directors = self._load_tags(Director, film_data.get("director_ids") or [], DirectorNotFoundError)

    def _load_tags(self, model, tag_ids: List[int], not_found) -> list:
        if not tag_ids:
            return []
        rows = self.db.query(model).filter(model.id.in_(tag_ids)).all()
        by_id = {row.id: row for row in rows}
        for tag_id in tag_ids:
            if tag_id not in by_id:
                raise not_found(tag_id)
        return [by_id[tag_id] for tag_id in tag_ids]
