"""
Project-wide DRF exception handler.

- SignInRequired          -> 302 to the sign-in page
- django PermissionDenied -> 401 (authenticated, wrong role)
- everything else         -> DRF defaults (400 validation, 404 not found)
"""
from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.http import HttpResponseRedirect
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from accounts.guards import SignInRequired


def exception_handler(exc, context):
    if isinstance(exc, SignInRequired):
        return HttpResponseRedirect(settings.SIGN_IN_URL)

    if isinstance(exc, PermissionDenied):
        return Response(
            {"detail": str(exc) or "Unauthorized"},
            status=status.HTTP_401_UNAUTHORIZED,
        )

    return drf_exception_handler(exc, context)
