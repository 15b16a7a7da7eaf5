import logging

from django.http import JsonResponse

from common.config import SiteConfig
from common.errors import AuthError, ValidationError
from common.http import api_endpoint, parse_json_body, require_fields

from .decorators import admin_required
from .tokens import clear_session_cookie, issue_token, set_session_cookie
from .users import get_directory

logger = logging.getLogger(__name__)

AUTH_FAILURE_MESSAGE = 'An error occurred during authentication'


@api_endpoint('POST', failure_message=AUTH_FAILURE_MESSAGE)
def login(request):
    data = parse_json_body(request)
    username, password = require_fields(
        data, ['username', 'password'], 'Username and password are required'
    )
    if not isinstance(username, str) or not isinstance(password, str):
        raise ValidationError('Username and password must be strings')

    config = SiteConfig.from_settings()
    account = get_directory(config).authenticate(username, password)
    if account is None:
        logger.warning('Login failed for user: %s', username)
        raise AuthError('Invalid credentials')

    response = JsonResponse({'message': 'Login successful'})
    set_session_cookie(response, issue_token(account, config), config)
    return response


@api_endpoint('POST', failure_message=AUTH_FAILURE_MESSAGE)
def logout(request):
    config = SiteConfig.from_settings()
    response = JsonResponse({'message': 'Logout successful'})
    clear_session_cookie(response, config)
    return response


@api_endpoint('GET', failure_message=AUTH_FAILURE_MESSAGE)
@admin_required
def me(request):
    return JsonResponse(request.admin_account.profile())
