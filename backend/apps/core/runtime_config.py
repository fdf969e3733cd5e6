"""
Runtime configuration for the storefront.

Built once at startup from the environment (or the Django settings that
mirror it) and handed to every view that talks to Stripe. The record is
read-only for the lifetime of the process.
"""
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

DEFAULT_BASE_URL = 'http://localhost:3000'


@dataclass(frozen=True)
class PublicRuntimeConfig:
    """Values that are safe to hand to the browser."""
    stripe_publishable_key: str = ''
    base_url: str = DEFAULT_BASE_URL

    def as_dict(self) -> Dict[str, str]:
        return {
            'stripePublishableKey': self.stripe_publishable_key,
            'baseURL': self.base_url,
        }


@dataclass(frozen=True)
class RuntimeConfig:
    """
    Process-wide configuration record.

    Attributes:
        stripe_secret_key: Server-side Stripe API key
        stripe_webhook_secret: Signing secret for Stripe webhooks
        public: Browser-safe values (publishable key, base URL)
    """
    stripe_secret_key: str = ''
    stripe_webhook_secret: str = ''
    public: PublicRuntimeConfig = field(default_factory=PublicRuntimeConfig)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'RuntimeConfig':
        """
        Build the configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            A new RuntimeConfig
        """
        env = os.environ if environ is None else environ
        return cls(
            stripe_secret_key=env.get('STRIPE_SECRET_KEY', ''),
            stripe_webhook_secret=env.get('STRIPE_WEBHOOK_SECRET', ''),
            public=PublicRuntimeConfig(
                stripe_publishable_key=env.get(
                    'PUBLIC_STRIPE_PUBLISHABLE_KEY', ''),
                base_url=_base_url(env.get('BASE_URL')),
            ),
        )

    @classmethod
    def from_settings(cls, settings: Any) -> 'RuntimeConfig':
        """
        Build the configuration from a Django settings object.

        Args:
            settings: django.conf.settings (or anything with the same attributes)

        Returns:
            A new RuntimeConfig
        """
        return cls(
            stripe_secret_key=getattr(settings, 'STRIPE_SECRET_KEY', '') or '',
            stripe_webhook_secret=getattr(
                settings, 'STRIPE_WEBHOOK_SECRET', '') or '',
            public=PublicRuntimeConfig(
                stripe_publishable_key=getattr(
                    settings, 'STRIPE_PUBLISHABLE_KEY', '') or '',
                base_url=_base_url(getattr(settings, 'BASE_URL', None)),
            ),
        )

    def public_dict(self) -> Dict[str, str]:
        """Browser-safe part of the configuration as JSON keys."""
        return self.public.as_dict()

    def missing_secrets(self) -> List[str]:
        """Names of the server-side values that were not configured."""
        missing = []
        if not self.stripe_secret_key:
            missing.append('STRIPE_SECRET_KEY')
        if not self.stripe_webhook_secret:
            missing.append('STRIPE_WEBHOOK_SECRET')
        if not self.public.stripe_publishable_key:
            missing.append('PUBLIC_STRIPE_PUBLISHABLE_KEY')
        return missing

    def __repr__(self) -> str:
        # secrets stay out of logs and tracebacks
        return (
            f"<RuntimeConfig base_url={self.public.base_url!r} "
            f"missing={self.missing_secrets()}>"
        )


def _base_url(raw: Optional[str]) -> str:
    value = (raw or '').strip()
    return value or DEFAULT_BASE_URL
