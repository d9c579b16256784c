"""Repository classes"""

from filmorate_recommendation_service.repos.director_repository import DirectorRepository
from filmorate_recommendation_service.repos.film_repository import FilmRepository
from filmorate_recommendation_service.repos.genre_repository import GenreRepository
from filmorate_recommendation_service.repos.likes_repository import LikesRepository
from filmorate_recommendation_service.repos.mpa_repository import MpaRepository

__all__ = [
    "DirectorRepository",
    "FilmRepository",
    "GenreRepository",
    "LikesRepository",
    "MpaRepository",
]
