from dataclasses import dataclass

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

PASSWORD_MODES = ('plain', 'hashed')


@dataclass(frozen=True)
class SiteConfig:
    """Runtime configuration handed to the auth helpers.

    Built from Django settings with ``from_settings``; instances are immutable
    and hashable so they can key per-config caches.
    """

    environment: str
    token_secret: str
    token_max_age: int
    admin_username: str
    password_mode: str
    admin_password: str
    admin_password_hash: str

    @property
    def is_production(self):
        return self.environment == 'production'

    @classmethod
    def from_settings(cls, source=None):
        source = source or settings
        config = cls(
            environment=getattr(source, 'APP_ENV', 'development'),
            token_secret=getattr(source, 'SESSION_TOKEN_SECRET', ''),
            token_max_age=int(getattr(source, 'SESSION_TOKEN_MAX_AGE', 24 * 60 * 60)),
            admin_username=getattr(source, 'ADMIN_USERNAME', 'admin'),
            password_mode=getattr(source, 'ADMIN_PASSWORD_MODE', 'plain'),
            admin_password=getattr(source, 'ADMIN_PASSWORD', ''),
            admin_password_hash=getattr(source, 'ADMIN_PASSWORD_HASH', ''),
        )
        config.validate()
        return config

    def validate(self):
        if not self.token_secret:
            raise ImproperlyConfigured('SESSION_TOKEN_SECRET must be set.')
        if self.token_max_age <= 0:
            raise ImproperlyConfigured('SESSION_TOKEN_MAX_AGE must be a positive number of seconds.')
        if not self.admin_username:
            raise ImproperlyConfigured('ADMIN_USERNAME must be set.')
        if self.password_mode not in PASSWORD_MODES:
            raise ImproperlyConfigured(
                f"ADMIN_PASSWORD_MODE must be one of {', '.join(PASSWORD_MODES)}, got {self.password_mode!r}."
            )
        if self.password_mode == 'hashed' and not self.admin_password_hash:
            raise ImproperlyConfigured('ADMIN_PASSWORD_HASH must be set when ADMIN_PASSWORD_MODE is "hashed".')
        if self.password_mode == 'plain' and not self.admin_password:
            raise ImproperlyConfigured('ADMIN_PASSWORD must be set when ADMIN_PASSWORD_MODE is "plain".')
