# ============================================
# accounts/views/auth.py
# ============================================
import logging

from django.conf import settings
from drf_spectacular.utils import extend_schema
from rest_framework.views import APIView

from accounts.selectors.user import UserSelector
from accounts.serializers.auth import SignInSerializer, SignUpSerializer
from accounts.services.user import UserService
from lunear.responses import redirect, toast_error, validation_errors

logger = logging.getLogger(__name__)

INCORRECT_CREDENTIALS = "Incorrect username or password"


def _signed_in_redirect(request, user):
    session = request.authenticator.create_session(user)
    response = redirect("/")
    request.authenticator.set_session_cookie(response, session)
    response.session_cookie_handled = True
    return response


class SignUpAPIView(APIView):
    """
    POST: Create an account and sign in

    Request body:
    - userName, password, confirmPassword, firstName, lastName: string (required)
    """

    @extend_schema(tags=["Auth"], request=SignUpSerializer, responses={302: None})
    def post(self, request):
        serializer = SignUpSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_errors(serializer.errors)

        data = serializer.validated_data
        user, error = UserService.create_user(
            username=data['userName'],
            password=data['password'],
            first_name=data['firstName'],
            last_name=data['lastName']
        )
        if error:
            return toast_error(error)

        logger.info("[auth] signed up user=%s", user.pk)
        return _signed_in_redirect(request, user)


class SignInAPIView(APIView):
    """
    POST: Sign in with username and password

    Request body:
    - userName: string (required)
    - password: string (required)
    """

    @extend_schema(tags=["Auth"], request=SignInSerializer, responses={302: None})
    def post(self, request):
        serializer = SignInSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_errors(serializer.errors)

        data = serializer.validated_data
        user = UserSelector.get_user_by_username(data['userName'])
        if user is None or not user.check_password(data['password']):
            logger.info("[auth] failed sign-in for username=%s", data['userName'])
            return toast_error(INCORRECT_CREDENTIALS)

        logger.info("[auth] signed in user=%s", user.pk)
        return _signed_in_redirect(request, user)


class SignOutAPIView(APIView):
    """
    POST: Invalidate the current session
    """

    @extend_schema(tags=["Auth"], request=None, responses={302: None})
    def post(self, request):
        session = getattr(request._request, 'auth_session', None)
        if session is None:
            return redirect(settings.SIGN_IN_URL)

        request.authenticator.invalidate_session(session.id)
        response = redirect("/")
        request.authenticator.set_blank_session_cookie(response)
        response.session_cookie_handled = True
        return response
