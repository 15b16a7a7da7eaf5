import json
import logging
from functools import wraps

from django.http import HttpResponse
from django.views.decorators.csrf import csrf_exempt

from .errors import ApiError, MethodNotAllowed, PersistenceError, ValidationError

logger = logging.getLogger(__name__)


def api_endpoint(*methods, failure_message=None):
    """Wrap a JSON view with the request boundary shared by every API route.

    OPTIONS gets an empty 200, other verbs outside ``methods`` a 405. Any
    ``ApiError`` becomes ``{"message": ...}`` with its status; anything else
    is logged and reported as a ``PersistenceError`` with ``failure_message``.
    """
    allowed = {method.upper() for method in methods}

    def decorator(view):
        @csrf_exempt
        @wraps(view)
        def wrapped(request, *args, **kwargs):
            if request.method == 'OPTIONS':
                return HttpResponse(status=200)
            try:
                if request.method not in allowed:
                    raise MethodNotAllowed()
                return view(request, *args, **kwargs)
            except ApiError as e:
                if e.status_code >= 500:
                    logger.error('%s failed: %s', view.__name__, e.message)
                return e.as_response()
            except Exception:
                logger.exception('Unhandled error in %s', view.__name__)
                return PersistenceError(failure_message).as_response()

        return wrapped

    return decorator


def parse_json_body(request):
    try:
        data = json.loads(request.body or b'{}')
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ValidationError('Invalid JSON')
    if not isinstance(data, dict):
        raise ValidationError('Invalid JSON')
    return data


def is_blank(value):
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_fields(data, fields, message):
    """Return the values of ``fields`` in order, or raise if any is missing or blank."""
    values = [data.get(field) for field in fields]
    if any(is_blank(value) for value in values):
        raise ValidationError(message)
    return values


def require_text(values, message):
    """Raise unless every value is a string."""
    if not all(isinstance(value, str) for value in values):
        raise ValidationError(message)
