"""Film catalog, likes and MPA ratings."""
import azure.functions as func
import logging

from filmorate_recommendation_service.blueprints.http_helpers import (
    error_response,
    json_response,
    route_int,
)
from filmorate_recommendation_service.exceptions import NotFoundError, ValidationError
from filmorate_recommendation_service.services import FilmCatalogService, FilmRecommendationService

# Initialize blueprint
bp = func.Blueprint()

catalog_service = FilmCatalogService()
recommendation_service = FilmRecommendationService()

logger = logging.getLogger(__name__)


def _get_body(req: func.HttpRequest) -> dict:
    try:
        return req.get_json()
    except ValueError:
        raise ValidationError("Request body must be valid JSON")


@bp.route(route="films/{film_id:int}/like/{user_id:int}", methods=["PUT"], auth_level=func.AuthLevel.ANONYMOUS)
def add_like(req: func.HttpRequest) -> func.HttpResponse:
    """Like a film. Liking the same film again is a no-op."""
    try:
        film_id = route_int(req, 'film_id')
        user_id = route_int(req, 'user_id')

        created = recommendation_service.add_like(film_id, user_id)

        return json_response({
            "film_id": film_id,
            "user_id": user_id,
            "created": created
        })

    except ValidationError as e:
        return error_response(str(e), 400)
    except NotFoundError as e:
        return error_response(str(e), 404)
    except Exception as e:
        logger.error(f"Error adding like: {str(e)}", exc_info=True)
        return error_response("Internal server error", 500)


@bp.route(route="films/{film_id:int}/like/{user_id:int}", methods=["DELETE"], auth_level=func.AuthLevel.ANONYMOUS)
def remove_like(req: func.HttpRequest) -> func.HttpResponse:
    """Remove a like. Removing a like that does not exist is a no-op."""
    try:
        film_id = route_int(req, 'film_id')
        user_id = route_int(req, 'user_id')

        removed = recommendation_service.remove_like(film_id, user_id)

        return json_response({
            "film_id": film_id,
            "user_id": user_id,
            "removed": removed
        })

    except ValidationError as e:
        return error_response(str(e), 400)
    except Exception as e:
        logger.error(f"Error removing like: {str(e)}", exc_info=True)
        return error_response("Internal server error", 500)


# noinspection PyUnusedLocal
@bp.route(route="films", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def get_films(req: func.HttpRequest) -> func.HttpResponse:
    """Get all films."""
    try:
        films = catalog_service.get_all_films()
        return json_response({
            "count": len(films),
            "films": films
        })

    except Exception as e:
        logger.error(f"Error getting films: {str(e)}", exc_info=True)
        return error_response("Internal server error", 500)


@bp.route(route="films/{film_id:int}", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def get_film(req: func.HttpRequest) -> func.HttpResponse:
    """Get one film by ID."""
    try:
        film_id = route_int(req, 'film_id')
        return json_response(catalog_service.get_film(film_id))

    except ValidationError as e:
        return error_response(str(e), 400)
    except NotFoundError as e:
        return error_response(str(e), 404)
    except Exception as e:
        logger.error(f"Error getting film: {str(e)}", exc_info=True)
        return error_response("Internal server error", 500)


@bp.route(route="films", methods=["POST"], auth_level=func.AuthLevel.ANONYMOUS)
def create_film(req: func.HttpRequest) -> func.HttpResponse:
    """
    Create a film.

    Body: name, description, release_date, duration, rating,
    mpa {id}, genres [{id}], directors [{id}]. Repeated genre or
    director IDs are stored once.
    """
    try:
        film = catalog_service.create_film(_get_body(req))
        return json_response(film, status_code=201)

    except ValidationError as e:
        return error_response(str(e), 400)
    except NotFoundError as e:
        return error_response(str(e), 404)
    except Exception as e:
        logger.error(f"Error creating film: {str(e)}", exc_info=True)
        return error_response("Internal server error", 500)


@bp.route(route="films", methods=["PUT"], auth_level=func.AuthLevel.ANONYMOUS)
def update_film(req: func.HttpRequest) -> func.HttpResponse:
    """Replace a film. The body carries the film's id."""
    try:
        film = catalog_service.update_film(_get_body(req))
        return json_response(film)

    except ValidationError as e:
        return error_response(str(e), 400)
    except NotFoundError as e:
        return error_response(str(e), 404)
    except Exception as e:
        logger.error(f"Error updating film: {str(e)}", exc_info=True)
        return error_response("Internal server error", 500)


@bp.route(route="films/{film_id:int}", methods=["DELETE"], auth_level=func.AuthLevel.ANONYMOUS)
def delete_film(req: func.HttpRequest) -> func.HttpResponse:
    """Delete a film with its tags and likes."""
    try:
        film_id = route_int(req, 'film_id')
        catalog_service.delete_film(film_id)
        return json_response({"film_id": film_id, "deleted": True})

    except ValidationError as e:
        return error_response(str(e), 400)
    except NotFoundError as e:
        return error_response(str(e), 404)
    except Exception as e:
        logger.error(f"Error deleting film: {str(e)}", exc_info=True)
        return error_response("Internal server error", 500)


# noinspection PyUnusedLocal
@bp.route(route="mpa", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def get_all_mpa(req: func.HttpRequest) -> func.HttpResponse:
    """Get all MPA ratings."""
    try:
        ratings = catalog_service.get_all_mpa()
        return json_response({
            "count": len(ratings),
            "mpa": ratings
        })

    except Exception as e:
        logger.error(f"Error getting MPA ratings: {str(e)}", exc_info=True)
        return error_response("Internal server error", 500)


@bp.route(route="mpa/{mpa_id:int}", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def get_mpa(req: func.HttpRequest) -> func.HttpResponse:
    """Get one MPA rating by ID."""
    try:
        mpa_id = route_int(req, 'mpa_id')
        return json_response(catalog_service.get_mpa(mpa_id))

    except ValidationError as e:
        return error_response(str(e), 400)
    except NotFoundError as e:
        return error_response(str(e), 404)
    except Exception as e:
        logger.error(f"Error getting MPA rating: {str(e)}", exc_info=True)
        return error_response("Internal server error", 500)


# noinspection PyUnusedLocal
@bp.route(route="genres", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def get_all_genres(req: func.HttpRequest) -> func.HttpResponse:
    """Get all genres."""
    try:
        genres = catalog_service.get_all_genres()
        return json_response({
            "count": len(genres),
            "genres": genres
        })

    except Exception as e:
        logger.error(f"Error getting genres: {str(e)}", exc_info=True)
        return error_response("Internal server error", 500)


@bp.route(route="genres/{genre_id:int}", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def get_genre(req: func.HttpRequest) -> func.HttpResponse:
    """Get one genre by ID."""
    try:
        genre_id = route_int(req, 'genre_id')
        return json_response(catalog_service.get_genre(genre_id))

    except ValidationError as e:
        return error_response(str(e), 400)
    except NotFoundError as e:
        return error_response(str(e), 404)
    except Exception as e:
        logger.error(f"Error getting genre: {str(e)}", exc_info=True)
        return error_response("Internal server error", 500)


# noinspection PyUnusedLocal
@bp.route(route="directors", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def get_all_directors(req: func.HttpRequest) -> func.HttpResponse:
    """Get all directors."""
    try:
        directors = catalog_service.get_all_directors()
        return json_response({
            "count": len(directors),
            "directors": directors
        })

    except Exception as e:
        logger.error(f"Error getting directors: {str(e)}", exc_info=True)
        return error_response("Internal server error", 500)


@bp.route(route="directors/{director_id:int}", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def get_director(req: func.HttpRequest) -> func.HttpResponse:
    """Get one director by ID."""
    try:
        director_id = route_int(req, 'director_id')
        return json_response(catalog_service.get_director(director_id))

    except ValidationError as e:
        return error_response(str(e), 400)
    except NotFoundError as e:
        return error_response(str(e), 404)
    except Exception as e:
        logger.error(f"Error getting director: {str(e)}", exc_info=True)
        return error_response("Internal server error", 500)


@bp.route(route="directors", methods=["POST"], auth_level=func.AuthLevel.ANONYMOUS)
def create_director(req: func.HttpRequest) -> func.HttpResponse:
    """Create a director. Body: name."""
    try:
        director = catalog_service.create_director(_get_body(req))
        return json_response(director, status_code=201)

    except ValidationError as e:
        return error_response(str(e), 400)
    except Exception as e:
        logger.error(f"Error creating director: {str(e)}", exc_info=True)
        return error_response("Internal server error", 500)
