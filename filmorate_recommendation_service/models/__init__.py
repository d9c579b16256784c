"""SQLAlchemy models"""

from filmorate_recommendation_service.models.base import Base
from filmorate_recommendation_service.models.director import Director
from filmorate_recommendation_service.models.film import Film, film_directors, film_genres
from filmorate_recommendation_service.models.genre import Genre
from filmorate_recommendation_service.models.like import Like
from filmorate_recommendation_service.models.mpa_rating import MpaRating

__all__ = [
    "Base",
    "Director",
    "Film",
    "Genre",
    "Like",
    "MpaRating",
    "film_directors",
    "film_genres",
]
