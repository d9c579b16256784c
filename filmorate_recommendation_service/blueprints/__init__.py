"""HTTP blueprints"""

from filmorate_recommendation_service.blueprints.films_bp import bp as films_bp
from filmorate_recommendation_service.blueprints.recommendations_bp import bp as recommendations_bp

__all__ = ["films_bp", "recommendations_bp"]
