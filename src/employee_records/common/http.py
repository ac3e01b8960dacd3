from __future__ import annotations

import logging
from functools import wraps

from flask import g, jsonify, request

from ..core.exceptions import AuthenticationError, NotFoundError, PersistenceError, ValidationError
from ..users.service import AuthService, bearer_token

logger = logging.getLogger(__name__)

ERROR_STATUS = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (NotFoundError, 404),
    (PersistenceError, 500),
)


def json_error(message: str, status: int):
    return jsonify({"error": message}), status


def json_errors(view):
    """Turn domain errors raised by a view into ``{"error": ...}`` responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except (ValidationError, AuthenticationError, NotFoundError, PersistenceError) as e:
            # PersistenceError is logged by the store that raised it.
            status = next(code for exc_type, code in ERROR_STATUS if isinstance(e, exc_type))
            return json_error(str(e), status)
        except Exception:
            logger.exception("Unhandled error in %s %s", request.method, request.path)
            return json_error("Internal server error", 500)

    return wrapper


def token_required(auth_service: AuthService):
    """Reject the request with 401 unless it carries a known bearer token."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                g.username = auth_service.check(bearer_token(request.headers.get("Authorization")))
            except AuthenticationError as e:
                return json_error(str(e), 401)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
