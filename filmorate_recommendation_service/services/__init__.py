"""Service classes"""

from .film_catalog_service import FilmCatalogService
from .film_recommendation_service import FilmRecommendationService

__all__ = ["FilmCatalogService", "FilmRecommendationService"]
