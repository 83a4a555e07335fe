"""
Access guard for server-rendered pages.

``identity_required`` is composed in front of each protected page handler.
It resolves the session identity and either lets the request through or
redirects to the login page, carrying the requested path in ``next``.
The JSON API is guarded by DRF's ``IsAuthenticated`` instead.
"""
import logging
from functools import wraps

from django.conf import settings
from django.contrib.auth.views import redirect_to_login

logger = logging.getLogger(__name__)


def resolve_identity(request):
    """Return the signed-in user for ``request`` or None."""
    user = getattr(request, 'user', None)
    if user is None or not user.is_authenticated:
        return None
    return user


def identity_required(view_func):
    """Redirect anonymous requests to ``settings.LOGIN_URL``."""

    @wraps(view_func)
    def guarded(request, *args, **kwargs):
        if resolve_identity(request) is None:
            logger.debug("Anonymous request to %s redirected to login", request.path)
            return redirect_to_login(request.get_full_path(), settings.LOGIN_URL)
        return view_func(request, *args, **kwargs)

    return guarded
