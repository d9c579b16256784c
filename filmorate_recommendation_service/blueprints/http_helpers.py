"""Shared request parsing and response helpers for the HTTP blueprints."""
import json
from typing import Optional

import azure.functions as func

from filmorate_recommendation_service.exceptions import ValidationError


def json_response(body, status_code: int = 200) -> func.HttpResponse:
    """Serialize body to a JSON HttpResponse."""
    return func.HttpResponse(
        json.dumps(body, default=str),
        status_code=status_code,
        mimetype="application/json"
    )


def error_response(message: str, status_code: int) -> func.HttpResponse:
    return json_response({"error": message}, status_code=status_code)


def route_int(req: func.HttpRequest, name: str) -> int:
    """
    Read a required integer route parameter.

    Raises:
        ValidationError: If missing or not an integer
    """
    value = req.route_params.get(name)
    if not value:
        raise ValidationError(f"{name} is required")
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{name} must be an integer")


def query_int(req: func.HttpRequest, name: str, required: bool = False) -> Optional[int]:
    """
    Read an optional (or required) integer query parameter.

    Raises:
        ValidationError: If required and missing, or not an integer
    """
    value = req.params.get(name)
    if value is None or value == "":
        if required:
            raise ValidationError(f"{name} is required")
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{name} must be an integer")
