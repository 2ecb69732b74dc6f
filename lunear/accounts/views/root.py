# ============================================
# accounts/views/root.py
# ============================================
from django.conf import settings
from drf_spectacular.utils import extend_schema
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.serializers.auth import UserOutputSerializer
from accounts.services.theme import get_theme


class RootAPIView(APIView):
    """
    GET: Root loader shared by every page

    Returns the signed-in user (or null) and the theme preference.
    """

    @extend_schema(tags=["Auth"], responses={200: None})
    def get(self, request):
        user = request.user if request.user.is_authenticated else None
        return Response({
            "appName": settings.APP_NAME,
            "isSignedIn": user is not None,
            "user": UserOutputSerializer(user).data if user else None,
            "requestInfo": {
                "userPrefs": {"theme": get_theme(request)},
            },
        })
