from django.conf import settings
from django.http import JsonResponse
from django.views.static import serve


def health_check(request):
    """Liveness probe."""
    return JsonResponse({'ok': True})


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'message': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'message': 'Server error',
        'status': 500
    }, status=500)


def serve_media(request, path):
    """Serve a stored upload from MEDIA_ROOT."""
    return serve(request, path, document_root=settings.MEDIA_ROOT)
