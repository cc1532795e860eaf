from django.contrib.auth import get_user_model
from firebase_admin import auth
from rest_framework import authentication, exceptions

from .firebase_admin_client import get_app

User = get_user_model()


class FirebaseAuthentication(authentication.BaseAuthentication):
    """DRF authentication backend validating Firebase ID tokens.

    The token's `uid` is the local username of the person or company staff
    member.
    """
    keyword = "Bearer"

    def authenticate(self, request):
        """Validate Authorization header token and return (user, auth)."""
        auth_header = request.META.get("HTTP_AUTHORIZATION")
        if not auth_header:
            return None

        parts = auth_header.split()
        if len(parts) != 2 or parts[0] != self.keyword:
            return None

        app = get_app()
        if app is None:
            raise exceptions.AuthenticationFailed("Token authentication is not configured")
        try:
            decoded_token = auth.verify_id_token(parts[1], app=app)
        except (ValueError, auth.InvalidIdTokenError, auth.CertificateFetchError, auth.UserDisabledError):
            raise exceptions.AuthenticationFailed("Invalid Firebase token")

        try:
            user = User.objects.get(username=decoded_token.get("uid"))
        except User.DoesNotExist:
            raise exceptions.AuthenticationFailed("User not found")
        if not user.is_active:
            raise exceptions.AuthenticationFailed("User inactive")
        return (user, decoded_token)

    def authenticate_header(self, request):
        return self.keyword
