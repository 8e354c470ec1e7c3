# propertyhub/authentication.py
"""
Bearer-token authentication.

Tokens are minted by the account service and only validated here. A token
whose ``jti`` is stored under ``blacklist:<jti>`` in the cache has been
revoked.
"""

import logging

from django.core.cache import cache
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication

from .models import User

logger = logging.getLogger(__name__)

BLACKLIST_KEY = "blacklist:{jti}"


def is_revoked(jti: str | None) -> bool:
    return bool(jti) and bool(cache.get(BLACKLIST_KEY.format(jti=jti)))


class CustomJWTAuthentication(JWTAuthentication):
    """
    Resolves the token's ``user_id`` to an active, non-deleted account and
    exposes ``user_id``, ``role`` and ``token_jti`` on the request.
    """

    def get_user(self, validated_token):
        if is_revoked(validated_token.get("jti")):
            raise AuthenticationFailed("Token has been revoked", code="token_revoked")

        user_id = validated_token.get("user_id")
        if not user_id:
            raise AuthenticationFailed("Token carries no user_id", code="user_id_missing")

        user = User.objects.active().filter(user_id=user_id).first()
        if user is None:
            logger.info("Rejected token for unknown or inactive user %s", user_id)
            raise AuthenticationFailed("User not found", code="user_not_found")
        return user

    def authenticate(self, request):
        result = super().authenticate(request)
        if result is None:
            return None

        user, validated_token = result
        request.user_id = user.user_id
        # The stored role wins over the token claim
        request.role = user.role or validated_token.get("role")
        request.token_jti = validated_token.get("jti")
        return user, validated_token
