"""Signed session tokens carried in the ``token`` cookie.

A token is a ``django.core.signing`` value holding the account id (``sub``)
and an absolute expiry timestamp (``exp``, seconds since the epoch).
"""
import time

from django.core import signing

from common.errors import AuthError

COOKIE_NAME = 'token'
TOKEN_SALT = 'accounts.session-token'
INVALID_TOKEN_MESSAGE = 'Invalid or expired token'


def issue_token(account, config, now=None):
    issued_at = int(time.time() if now is None else now)
    payload = {'sub': account.id, 'exp': issued_at + config.token_max_age}
    return signing.dumps(payload, key=config.token_secret, salt=TOKEN_SALT)


def verify_token(token, config, now=None):
    """Return the account id in ``token`` or raise ``AuthError``."""
    try:
        payload = signing.loads(token, key=config.token_secret, salt=TOKEN_SALT)
    except signing.BadSignature:
        raise AuthError(INVALID_TOKEN_MESSAGE)

    if not isinstance(payload, dict):
        raise AuthError(INVALID_TOKEN_MESSAGE)
    subject = payload.get('sub')
    expires_at = payload.get('exp')
    if not subject or not isinstance(expires_at, (int, float)):
        raise AuthError(INVALID_TOKEN_MESSAGE)

    current = time.time() if now is None else now
    if expires_at <= current:
        raise AuthError(INVALID_TOKEN_MESSAGE)
    return subject


def set_session_cookie(response, token, config):
    response.set_cookie(
        COOKIE_NAME,
        token,
        max_age=config.token_max_age,
        path='/',
        secure=config.is_production,
        httponly=True,
        samesite='Strict',
    )


def clear_session_cookie(response, config):
    response.set_cookie(
        COOKIE_NAME,
        '',
        max_age=0,
        path='/',
        secure=config.is_production,
        httponly=True,
        samesite='Strict',
    )
