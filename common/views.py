from django.conf import settings
from django.http import JsonResponse
from django.utils import timezone

from .http import api_endpoint


@api_endpoint('GET')
def diagnostic(request):
    return JsonResponse({
        'message': 'API is working!',
        'timestamp': timezone.now().isoformat(),
        'environment': settings.APP_ENV or 'unknown',
        'host': request.get_host(),
        'origin': request.headers.get('Origin') or 'none',
    })
