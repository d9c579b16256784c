"""Popular films, common films and recommendations."""
import azure.functions as func
import logging

from filmorate_recommendation_service.blueprints.http_helpers import (
    error_response,
    json_response,
    query_int,
    route_int,
)
from filmorate_recommendation_service.exceptions import NotFoundError, ValidationError
from filmorate_recommendation_service.services import FilmRecommendationService

# Initialize blueprint
bp = func.Blueprint()

# Initialize service (singleton pattern)
recommendation_service = FilmRecommendationService()

logger = logging.getLogger(__name__)


@bp.route(route="films/popular", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def get_popular_films(req: func.HttpRequest) -> func.HttpResponse:
    """
    Get the most liked films.

    Query Parameters:
        - count: Number of films (default from config, must be >= 0)
        - genreId: Only films with this genre
        - year: Only films released in this year
    """
    try:
        count = query_int(req, 'count')
        genre_id = query_int(req, 'genreId')
        year = query_int(req, 'year')

        if count is not None and count < 0:
            return error_response("count must be non-negative", 400)

        films = recommendation_service.get_popular_films(
            count=count,
            genre_id=genre_id,
            year=year
        )

        return json_response({
            "count": len(films),
            "films": films
        })

    except ValidationError as e:
        return error_response(str(e), 400)
    except Exception as e:
        logger.error(f"Error getting popular films: {str(e)}", exc_info=True)
        return error_response("Internal server error", 500)


@bp.route(route="films/common", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def get_common_films(req: func.HttpRequest) -> func.HttpResponse:
    """
    Get films liked by both users, most liked overall first.

    Query Parameters:
        - userId: First user (required)
        - friendId: Second user (required)
    """
    try:
        user_id = query_int(req, 'userId', required=True)
        friend_id = query_int(req, 'friendId', required=True)

        films = recommendation_service.get_common_films(user_id, friend_id)

        return json_response({
            "user_id": user_id,
            "friend_id": friend_id,
            "count": len(films),
            "films": films
        })

    except ValidationError as e:
        return error_response(str(e), 400)
    except NotFoundError as e:
        return error_response(str(e), 404)
    except Exception as e:
        logger.error(f"Error getting common films: {str(e)}", exc_info=True)
        return error_response("Internal server error", 500)


@bp.route(route="users/{user_id}/recommendations", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def get_user_recommendations(req: func.HttpRequest) -> func.HttpResponse:
    """
    Get recommended films for a user.
    An empty list is a normal result and is returned with 200.
    """
    try:
        user_id = route_int(req, 'user_id')

        recommendations = recommendation_service.get_recommendations(user_id)

        return json_response({
            "user_id": user_id,
            "count": len(recommendations),
            "recommendations": recommendations
        })

    except ValidationError as e:
        return error_response(str(e), 400)
    except NotFoundError as e:
        return error_response(str(e), 404)
    except Exception as e:
        logger.error(f"Error getting recommendations: {str(e)}", exc_info=True)
        return error_response("Internal server error", 500)


@bp.route(route="users/{user_id}/peers", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def get_user_peers(req: func.HttpRequest) -> func.HttpResponse:
    """Get users who share liked films with a user, largest overlap first."""
    try:
        user_id = route_int(req, 'user_id')

        peers = recommendation_service.get_overlap_peers(user_id)

        return json_response({
            "user_id": user_id,
            "count": len(peers),
            "peers": peers
        })

    except ValidationError as e:
        return error_response(str(e), 400)
    except Exception as e:
        logger.error(f"Error getting peers: {str(e)}", exc_info=True)
        return error_response("Internal server error", 500)


# noinspection PyUnusedLocal
@bp.route(route="recommendations/stats", methods=["GET"])
def get_recommendation_stats(req: func.HttpRequest) -> func.HttpResponse:
    """
    Get statistics about the catalog and likes.
    """
    try:
        stats = recommendation_service.get_stats()
        return json_response(stats)

    except Exception as e:
        logger.error(f"Error getting stats: {str(e)}", exc_info=True)
        return error_response("Internal server error", 500)


# noinspection PyUnusedLocal
@bp.route(route="recommendations/health", methods=["GET"])
def health_check(req: func.HttpRequest) -> func.HttpResponse:
    """Health check endpoint."""
    return json_response({
        "status": "healthy",
        "service": "filmorate-recommendation-service",
        "version": "1.0.0"
    })
