"""
URL configuration for the Payment Claims project.

Public:
    GET  /_health               - Liveness probe
    GET  /account-details       - Current payout instructions
    POST /submissions           - Submit a payment claim (multipart)
    GET  /mock-storage/<name>   - Stored upload (SERVE_MEDIA)

Administrator (session cookie required unless noted):
    POST /admin/login           - Start a session (public)
    POST /admin/logout          - End the session (public)
    POST /admin/change-password - Change the admin password
    PUT  /account-details       - Replace payout instructions
    GET  /submissions           - List claims, newest first
    PUT  /submissions/<id>/status - Confirm a claim
"""
from django.urls import path, include
from django.conf import settings
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from config.views import health_check, serve_media

urlpatterns = [
    # Health check
    path('_health', health_check, name='health-check'),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # Administrator session
    path('admin/', include('apps.accounts.urls')),

    # API endpoints
    path('', include('apps.payouts.urls')),
    path('', include('apps.submissions.urls')),
]

# Uploaded files
if settings.SERVE_MEDIA:
    urlpatterns += [
        path(f"{settings.MEDIA_URL.strip('/')}/<path:path>", serve_media, name='media'),
    ]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
