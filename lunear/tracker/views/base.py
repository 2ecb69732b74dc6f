# ============================================
# tracker/views/base.py
# ============================================
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.guards import require_auth
from lunear.responses import success, toast_error, validation_errors
from lunear.results import Result
from tracker.intents import INVALID_INTENT, IntentSchema


class RouteAPIView(APIView):
    """
    A page route: GET runs the loader, POST runs the action.

    Subclasses set `intents` and implement `load()` and `perform()`. Both
    receive the URL kwargs. The action answers with:
    - 400 + field errors when the submission does not parse
    - 200 + toast when the data operation failed
    - 200 + fresh loader data on success, unless `perform` redirects
    """
    intents: IntentSchema = None

    def load(self, request, **kwargs) -> dict:
        raise NotImplementedError

    def perform(self, request, payload, **kwargs) -> Response:
        raise NotImplementedError

    def get(self, request, **kwargs):
        require_auth(request)
        return Response(self.load(request, **kwargs))

    def post(self, request, **kwargs):
        require_auth(request)

        submission = self.intents.parse(request.data)
        if not submission.ok:
            return validation_errors(submission.errors)

        return self.perform(request, submission.payload, **kwargs)

    def respond(self, request, result: Result, **kwargs) -> Response:
        if result.error:
            return toast_error(result.error)
        return success(self.load(request, **kwargs))

    @staticmethod
    def invalid_intent() -> Response:
        return toast_error(INVALID_INTENT)
