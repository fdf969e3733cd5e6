"""
Django app configuration for payments.
"""
import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class PaymentsConfig(AppConfig):
    """Configuration for the payments app."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.payments'
    verbose_name = 'Payments'

    def ready(self):
        """
        Warn at startup about Stripe keys that were not configured.
        Requests still go through; Stripe rejects them with an auth error.
        """
        from apps.core.runtime_config import RuntimeConfig

        for name in RuntimeConfig.from_settings(settings).missing_secrets():
            logger.warning(f"{name} is not set; Stripe calls will fail")
