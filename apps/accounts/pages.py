"""Login and logout pages."""
from django.conf import settings
from django.contrib import auth
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_http_methods, require_POST

from .guards import resolve_identity
from .serializers import UserLoginSerializer
from .services import authenticate_user, AccountsServiceError


def _safe_next(request):
    next_url = request.POST.get('next') or request.GET.get('next') or ''
    if url_has_allowed_host_and_scheme(
        next_url,
        allowed_hosts={request.get_host()},
        require_https=request.is_secure(),
    ):
        return next_url
    return settings.LOGIN_REDIRECT_URL


@require_http_methods(['GET', 'POST'])
def login_page(request):
    """Render the sign-in form; on success start a session and redirect."""
    if resolve_identity(request) is not None:
        return redirect(_safe_next(request))

    error = None
    if request.method == 'POST':
        serializer = UserLoginSerializer(data=request.POST)
        if serializer.is_valid():
            try:
                user = authenticate_user(**serializer.validated_data)
            except AccountsServiceError as e:
                error = str(e)
            else:
                auth.login(request, user)
                return redirect(_safe_next(request))
        else:
            error = 'Enter a valid email and password.'

    return render(request, 'accounts/login.html', {
        'error': error,
        'next': _safe_next(request),
    })


@require_POST
def logout_page(request):
    """Invalidate the session and go back to the login page."""
    auth.logout(request)
    return redirect(settings.LOGIN_URL)
