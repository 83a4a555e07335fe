"""Session service - issuing and revoking JWT pairs."""

import logging

from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from .exceptions import InvalidTokenError

logger = logging.getLogger(__name__)


def issue_tokens(user) -> dict:
    """Return a fresh refresh/access pair for ``user``."""
    refresh = RefreshToken.for_user(user)
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


def sign_out(*, refresh_token: str) -> None:
    """
    Invalidate a session by blacklisting its refresh token.

    Access tokens already handed out stay valid until they expire; the
    refresh token can no longer mint new ones.

    Raises:
        InvalidTokenError: If the token is malformed, expired or already revoked
    """
    try:
        token = RefreshToken(refresh_token)
        token.blacklist()
    except TokenError as e:
        raise InvalidTokenError(str(e))

    logger.info("Refresh token revoked for user=%s", token.payload.get('user_id'))
