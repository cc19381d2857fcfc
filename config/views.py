from django.db import connection
from django.http import JsonResponse
from django.utils import timezone


def health_check(request):
    """Liveness check: reports database reachability."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
        database = 'ok'
    except Exception as e:
        database = f'error: {str(e)[:60]}'

    return JsonResponse({
        'status': 'ok' if database == 'ok' else 'degraded',
        'database': database,
        'time': timezone.now().isoformat(),
    })


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'error': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'error': 'Internal server error',
        'status': 500
    }, status=500)
