from django.core.checks import Error, Tags, register
from django.core.exceptions import ImproperlyConfigured

from common.config import SiteConfig


@register(Tags.security)
def check_site_config(app_configs, **kwargs):
    try:
        SiteConfig.from_settings()
    except ImproperlyConfigured as e:
        return [Error(str(e), id='accounts.E001')]
    return []
