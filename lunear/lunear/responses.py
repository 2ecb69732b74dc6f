"""
Response shapes shared by every route action.

    400 {"status": "error", "errors": {...}}                       rejected submission
    200 {"status": "error", "toast": {"type": "error", ...}}       failed data operation
    200 {"status": "success", "data": ...}                         succeeded, refreshed loader data
    302 Location: ...                                              navigation
"""
from django.http import HttpResponseRedirect
from rest_framework import status
from rest_framework.response import Response

from lunear.results import error_message


def validation_errors(errors) -> Response:
    return Response({"status": "error", "errors": errors}, status=status.HTTP_400_BAD_REQUEST)


def toast_error(error) -> Response:
    message = error if isinstance(error, str) else error_message(error)
    return Response({"status": "error", "toast": {"type": "error", "message": message}})


def success(data=None) -> Response:
    return Response({"status": "success", "data": data})


def redirect(url: str) -> HttpResponseRedirect:
    return HttpResponseRedirect(url)
