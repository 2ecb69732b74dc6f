# ============================================
# accounts/views/theme.py
# ============================================
from drf_spectacular.utils import extend_schema
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.serializers.auth import ThemeSerializer
from accounts.services.theme import set_theme
from lunear.responses import redirect, validation_errors


class ThemeSwitchAPIView(APIView):
    """
    POST: Store the theme preference in a cookie

    Request body:
    - theme: "system" | "light" | "dark" (required)
    - redirectTo: string (optional)
    """

    @extend_schema(tags=["Auth"], request=ThemeSerializer, responses={200: None, 302: None})
    def post(self, request):
        serializer = ThemeSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_errors(serializer.errors)

        theme = serializer.validated_data['theme']
        redirect_to = serializer.validated_data.get('redirectTo')
        if redirect_to:
            response = redirect(redirect_to)
        else:
            response = Response({"theme": theme})
        set_theme(response, theme)
        return response
