"""
Session authentication for administrator endpoints.

The dashboard is a separate single-page app that sends the session cookie
cross-origin, so CSRF tokens are not available to it. Cookies are scoped
with SameSite and CORS is restricted to the configured origins instead.
"""
from rest_framework.authentication import SessionAuthentication


class AdminSessionAuthentication(SessionAuthentication):
    """
    Resolve the administrator from the Django session.

    Returning a WWW-Authenticate value makes DRF answer unauthenticated
    requests with 401 instead of 403.
    """

    www_authenticate_realm = 'admin'

    def enforce_csrf(self, request):
        return

    def authenticate_header(self, request):
        return f'Session realm="{self.www_authenticate_realm}"'
