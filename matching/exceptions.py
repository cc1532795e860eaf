"""Typed business-rule failures raised by the matching services.

All of them are DRF `APIException`s, so views can let them propagate and
DRF renders the status code and message.
"""

import logging

from rest_framework import exceptions, status
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class MatchingError(exceptions.APIException):
    """Base class for user-visible like/match failures."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Matching request failed."
    default_code = "matching_error"


class Conflict(MatchingError):
    """A like for this pair already exists."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Already liked."
    default_code = "conflict"


class NotFound(MatchingError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found."
    default_code = "not_found"


class Forbidden(MatchingError):
    """The actor is not a participant of the requested match."""
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "You do not have access to this match."
    default_code = "forbidden"


def matching_exception_handler(exc, context):
    """Render errors as {"detail", "code"} and log matching failures at info level."""
    response = exception_handler(exc, context)
    if response is None:
        return None
    if isinstance(exc, MatchingError):
        view = context.get("view")
        logger.info(
            "%s rejected in %s: %s",
            exc.default_code,
            type(view).__name__ if view else "unknown view",
            exc.detail,
        )
    if isinstance(response.data, dict) and "detail" in response.data:
        response.data["code"] = getattr(exc, "default_code", "error")
    return response
