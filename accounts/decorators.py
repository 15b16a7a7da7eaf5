from functools import wraps

from common.config import SiteConfig
from common.errors import AuthError

from .tokens import COOKIE_NAME, INVALID_TOKEN_MESSAGE, verify_token
from .users import get_directory


def authenticate_request(request, config):
    token = request.COOKIES.get(COOKIE_NAME)
    if not token:
        raise AuthError('Authentication required')

    account_id = verify_token(token, config)
    account = get_directory(config).get(account_id)
    if account is None:
        raise AuthError(INVALID_TOKEN_MESSAGE)
    return account


def admin_required(view):
    """Reject the request with 401 unless it carries a valid session cookie.

    Must sit inside ``api_endpoint`` so the raised ``AuthError`` is rendered.
    """
    @wraps(view)
    def wrapped(request, *args, **kwargs):
        config = SiteConfig.from_settings()
        request.admin_account = authenticate_request(request, config)
        return view(request, *args, **kwargs)

    return wrapped
