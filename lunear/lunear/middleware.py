import logging
import time
from urllib.parse import urlparse

from django.http import HttpResponse

logger = logging.getLogger(__name__)

SAFE_METHODS = ("GET", "HEAD", "OPTIONS")
SKIP_LOG_PREFIXES = ("/static/", "/favicon.ico")


class RequestLogMiddleware:
    """One line per request: METHOD path status - N.N ms"""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        started = time.perf_counter()
        response = self.get_response(request)
        if not request.path.startswith(SKIP_LOG_PREFIXES):
            elapsed = (time.perf_counter() - started) * 1000
            logger.info("%s %s %s - %.1f ms", request.method, request.get_full_path(), response.status_code, elapsed)
        return response


def verify_request_origin(origin: str | None, allowed_hosts: list[str]) -> bool:
    if not origin:
        return False
    host = urlparse(origin).netloc
    return bool(host) and host in allowed_hosts


class OriginCheckMiddleware:
    """
    Reject state-changing requests whose Origin header does not match the Host.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if request.method in SAFE_METHODS:
            return self.get_response(request)

        origin = request.META.get("HTTP_ORIGIN")
        host = request.get_host()
        if not verify_request_origin(origin, [host]):
            logger.warning("[csrf] origin mismatch: origin=%s host=%s path=%s", origin, host, request.path)
            return HttpResponse(status=403)

        return self.get_response(request)
