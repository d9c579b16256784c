"""Shape Film rows into JSON-ready dicts."""
from typing import Dict

from filmorate_recommendation_service.models import Film


def format_film(film: Film, likes: int) -> Dict:
    """
    Build the API representation of a film.

    Args:
        film: Film row with genres, directors and MPA loaded
        likes: Current like count of the film

    Returns:
        Dict with film fields, nested tags and like count
    """
    return {
        'id': film.id,
        'name': film.name,
        'description': film.description,
        'release_date': film.release_date.isoformat() if film.release_date else None,
        'duration': film.duration,
        'rating': film.rating,
        'mpa': {'id': film.mpa.id, 'name': film.mpa.name} if film.mpa else None,
        'genres': [{'id': genre.id, 'name': genre.name} for genre in film.genres],
        'directors': [{'id': director.id, 'name': director.name} for director in film.directors],
        'likes': likes,
    }
