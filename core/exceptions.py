from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework import status
import logging

logger = logging.getLogger("venturelink")


class DuplicateInterest(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "You have already expressed interest in this idea"
    default_code = "duplicate_interest"


class InvalidTransition(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid status transition"
    default_code = "invalid_transition"


class MutualInterestRequired(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Chat is only available after mutual interest"
    default_code = "mutual_interest_required"


def _error_message(data) -> str:
    """Flatten DRF error data to one readable string."""
    if isinstance(data, dict):
        if "detail" in data:
            return str(data["detail"])
        return "; ".join(f"{key}: {_error_message(value)}" for key, value in data.items())
    if isinstance(data, (list, tuple)):
        return " ".join(_error_message(item) for item in data)
    return str(data)


def custom_exception_handler(exc, context):
    """
    Wrap DRF + Django exceptions into the API envelope:

        {"success": false, "error": "<message>"}

    Validation errors use a generic message and carry field errors
    under "details". Success responses (2xx) are not touched.
    """
    response = drf_exception_handler(exc, context)

    if response is not None:
        if isinstance(exc, ValidationError):
            body = {
                "success": False,
                "error": "Invalid request data",
                "details": response.data,
            }
        else:
            body = {
                "success": False,
                "error": _error_message(response.data),
            }
        return Response(body, status=response.status_code, headers=_auth_headers(response))

    # Unhandled exceptions -> 500
    logger.exception("Unhandled API exception", exc_info=exc)

    return Response(
        {
            "success": False,
            "error": "Internal server error.",
        },
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _auth_headers(response):
    headers = {}
    for name in ("WWW-Authenticate", "Retry-After"):
        if response.has_header(name):
            headers[name] = response[name]
    return headers
