from rest_framework.response import Response
from rest_framework import status


def api_success(data=None, message=None, status_code=status.HTTP_200_OK):
    """
    Standard success envelope used by every VentureLink endpoint.
    Returns: {"success": true, "data"?: ..., "message"?: "..."}
    """
    body = {"success": True}
    if data is not None:
        body["data"] = data
    if message:
        body["message"] = message
    return Response(body, status=status_code)


def api_error(message: str, status_code=status.HTTP_400_BAD_REQUEST):
    """Error envelope for failures detected inside a view."""
    return Response({"success": False, "error": message}, status=status_code)
