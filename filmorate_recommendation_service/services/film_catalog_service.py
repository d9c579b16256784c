"""Service for film catalog reads and writes."""
import logging
from datetime import date
from typing import Callable, Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from filmorate_recommendation_service.exceptions import FilmNotFoundError, ValidationError
from filmorate_recommendation_service.models.database import SessionLocal
from filmorate_recommendation_service.repos import (
    DirectorRepository,
    FilmRepository,
    GenreRepository,
    LikesRepository,
    MpaRepository,
)
from filmorate_recommendation_service.services.film_payloads import format_film

logger = logging.getLogger(__name__)

MAX_DESCRIPTION_LENGTH = 200
EARLIEST_RELEASE_DATE = date(1895, 12, 28)  # first public film screening


def normalize_tag_ids(tags: Optional[Iterable]) -> List[int]:
    """
    Reduce a list of tag references to unique IDs, first occurrence first.

    Args:
        tags: Tag IDs or dicts with an 'id' key (None means no tags)

    Returns:
        List of distinct integer IDs

    Raises:
        ValidationError: If a tag has no usable ID
    """
    seen = set()
    tag_ids = []
    for tag in tags or []:
        raw_id = tag.get('id') if isinstance(tag, dict) else tag
        if isinstance(raw_id, bool):
            raise ValidationError(f"Invalid tag id: {raw_id!r}")
        try:
            tag_id = int(raw_id)
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid tag id: {raw_id!r}")
        if tag_id not in seen:
            seen.add(tag_id)
            tag_ids.append(tag_id)
    return tag_ids


def parse_film_payload(payload: Dict) -> Dict:
    """
    Validate an incoming film payload and convert it to repository form.

    Args:
        payload: Decoded JSON body

    Returns:
        Film data dict for FilmRepository

    Raises:
        ValidationError: If any field breaks the catalog rules
    """
    if not isinstance(payload, dict):
        raise ValidationError("Film payload must be a JSON object")

    name = payload.get('name')
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("name must not be blank")

    description = payload.get('description')
    if description is not None and not isinstance(description, str):
        raise ValidationError("description must be a string")
    if description is not None and len(description) > MAX_DESCRIPTION_LENGTH:
        raise ValidationError(f"description must be at most {MAX_DESCRIPTION_LENGTH} characters")

    release_date = payload.get('release_date')
    if release_date is not None:
        try:
            release_date = date.fromisoformat(release_date)
        except (TypeError, ValueError):
            raise ValidationError("release_date must be an ISO date (YYYY-MM-DD)")
        if release_date < EARLIEST_RELEASE_DATE:
            raise ValidationError(f"release_date must not be before {EARLIEST_RELEASE_DATE.isoformat()}")

    duration = payload.get('duration')
    if duration is not None and (isinstance(duration, bool) or not isinstance(duration, int) or duration <= 0):
        raise ValidationError("duration must be a positive integer")

    rating = payload.get('rating', 0)
    if rating is not None and (isinstance(rating, bool) or not isinstance(rating, int)):
        raise ValidationError("rating must be an integer")

    mpa = payload.get('mpa')
    mpa_id = None
    if mpa is not None:
        raw_mpa_id = mpa.get('id') if isinstance(mpa, dict) else mpa
        if isinstance(raw_mpa_id, bool):
            raise ValidationError(f"Invalid mpa id: {raw_mpa_id!r}")
        try:
            mpa_id = int(raw_mpa_id)
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid mpa id: {raw_mpa_id!r}")

    return {
        'name': name,
        'description': description,
        'release_date': release_date,
        'duration': duration,
        'rating': rating,
        'mpa_id': mpa_id,
        'genre_ids': normalize_tag_ids(payload.get('genres')),
        'director_ids': normalize_tag_ids(payload.get('directors')),
    }


class FilmCatalogService:
    """
    Service for film catalog reads and writes.
    Validates payloads and returns films as dicts with their like counts.
    """

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None):
        """
        Initialize the catalog service.

        Args:
            session_factory: Callable returning a new Session (default: SessionLocal)
        """
        self.session_factory = session_factory or SessionLocal

    def create_film(self, payload: Dict) -> Dict:
        """Validate and store a new film."""
        film_data = parse_film_payload(payload)

        db = self.session_factory()
        try:
            film = FilmRepository(db).create_film(film_data)
            return format_film(film, 0)
        finally:
            db.close()

    def update_film(self, payload: Dict) -> Dict:
        """
        Validate and apply a full update of an existing film.

        Args:
            payload: Film payload including its 'id'

        Raises:
            ValidationError: If the payload is invalid or has no id
            FilmNotFoundError: If the film does not exist
        """
        try:
            film_id = int(payload.get('id'))
        except (AttributeError, TypeError, ValueError):
            raise ValidationError("id is required to update a film")
        film_data = parse_film_payload(payload)

        db = self.session_factory()
        try:
            film = FilmRepository(db).update_film(film_id, film_data)
            likes = LikesRepository(db).like_count(film.id)
            return format_film(film, likes)
        finally:
            db.close()

    def get_film(self, film_id: int) -> Dict:
        """Get one film. Raises FilmNotFoundError if missing."""
        db = self.session_factory()
        try:
            film = FilmRepository(db).get_film(film_id)
            likes = LikesRepository(db).like_count(film_id)
            return format_film(film, likes)
        finally:
            db.close()

    def get_all_films(self) -> List[Dict]:
        """Get every film in ID order."""
        db = self.session_factory()
        try:
            films = FilmRepository(db).get_all_films()
            counts = LikesRepository(db).like_counts()
            return [format_film(film, counts.get(film.id, 0)) for film in films]
        finally:
            db.close()

    def delete_film(self, film_id: int) -> None:
        """Delete a film. Raises FilmNotFoundError if missing."""
        db = self.session_factory()
        try:
            if not FilmRepository(db).delete_film(film_id):
                raise FilmNotFoundError(film_id)
        finally:
            db.close()

    def get_all_mpa(self) -> List[Dict]:
        """Get all MPA ratings."""
        db = self.session_factory()
        try:
            return [
                {'id': mpa.id, 'name': mpa.name}
                for mpa in MpaRepository(db).get_all_mpa()
            ]
        finally:
            db.close()

    def get_mpa(self, mpa_id: int) -> Dict:
        """Get one MPA rating. Raises MpaNotFoundError if missing."""
        db = self.session_factory()
        try:
            mpa = MpaRepository(db).get_mpa(mpa_id)
            return {'id': mpa.id, 'name': mpa.name}
        finally:
            db.close()

    def get_all_genres(self) -> List[Dict]:
        """Get all genres."""
        db = self.session_factory()
        try:
            return [
                {'id': genre.id, 'name': genre.name}
                for genre in GenreRepository(db).get_all_genres()
            ]
        finally:
            db.close()

    def get_genre(self, genre_id: int) -> Dict:
        """Get one genre. Raises GenreNotFoundError if missing."""
        db = self.session_factory()
        try:
            genre = GenreRepository(db).get_genre(genre_id)
            return {'id': genre.id, 'name': genre.name}
        finally:
            db.close()

    def get_all_directors(self) -> List[Dict]:
        """Get all directors."""
        db = self.session_factory()
        try:
            return [
                {'id': director.id, 'name': director.name}
                for director in DirectorRepository(db).get_all_directors()
            ]
        finally:
            db.close()

    def get_director(self, director_id: int) -> Dict:
        """Get one director. Raises DirectorNotFoundError if missing."""
        db = self.session_factory()
        try:
            director = DirectorRepository(db).get_director(director_id)
            return {'id': director.id, 'name': director.name}
        finally:
            db.close()

    def create_director(self, payload: Dict) -> Dict:
        """
        Store a new director so films can reference it.

        Args:
            payload: Decoded JSON body with a non-blank 'name'

        Raises:
            ValidationError: If the name is missing or blank
        """
        if not isinstance(payload, dict):
            raise ValidationError("Director payload must be a JSON object")
        name = payload.get('name')
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("name must not be blank")

        db = self.session_factory()
        try:
            director = DirectorRepository(db).create_director({'name': name.strip()})
            return {'id': director.id, 'name': director.name}
        finally:
            db.close()
