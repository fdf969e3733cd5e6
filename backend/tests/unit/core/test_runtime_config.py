"""
Unit tests for RuntimeConfig.
"""
import dataclasses

import pytest
from django.conf import settings

from apps.core.runtime_config import (
    DEFAULT_BASE_URL, PublicRuntimeConfig, RuntimeConfig
)


class TestFromEnv:
    """Test building the config from environment variables."""

    def test_reads_all_variables(self):
        config = RuntimeConfig.from_env({
            'STRIPE_SECRET_KEY': 'sk_test_env',
            'STRIPE_WEBHOOK_SECRET': 'whsec_env',
            'PUBLIC_STRIPE_PUBLISHABLE_KEY': 'pk_test_env',
            'BASE_URL': 'https://shop.example.com',
        })

        assert config.stripe_secret_key == 'sk_test_env'
        assert config.stripe_webhook_secret == 'whsec_env'
        assert config.public == PublicRuntimeConfig(
            stripe_publishable_key='pk_test_env',
            base_url='https://shop.example.com'
        )

    @pytest.mark.parametrize('base_url', [None, '', '   '])
    def test_base_url_default(self, base_url):
        env = {} if base_url is None else {'BASE_URL': base_url}

        config = RuntimeConfig.from_env(env)

        assert config.public.base_url == DEFAULT_BASE_URL == 'http://localhost:3000'

    def test_missing_secrets_are_blank(self):
        config = RuntimeConfig.from_env({})

        assert config.stripe_secret_key == ''
        assert config.missing_secrets() == [
            'STRIPE_SECRET_KEY',
            'STRIPE_WEBHOOK_SECRET',
            'PUBLIC_STRIPE_PUBLISHABLE_KEY',
        ]

    def test_defaults_to_process_environment(self, monkeypatch):
        monkeypatch.setenv('STRIPE_SECRET_KEY', 'sk_test_process')
        monkeypatch.delenv('BASE_URL', raising=False)

        config = RuntimeConfig.from_env()

        assert config.stripe_secret_key == 'sk_test_process'
        assert config.public.base_url == DEFAULT_BASE_URL


class TestFromSettings:
    """Test building the config from Django settings."""

    def test_reads_django_settings(self):
        config = RuntimeConfig.from_settings(settings)

        assert config.stripe_secret_key == 'sk_test_dummy'
        assert config.stripe_webhook_secret == 'whsec_dummy'
        assert config.public.stripe_publishable_key == 'pk_test_dummy'
        assert config.public.base_url == 'http://localhost:3000'
        assert config.missing_secrets() == []

    def test_tolerates_missing_attributes(self):
        class Bare:
            pass

        config = RuntimeConfig.from_settings(Bare())

        assert config == RuntimeConfig()


class TestImmutability:
    """The config is read-only once built."""

    def test_cannot_reassign(self, runtime_config):
        with pytest.raises(dataclasses.FrozenInstanceError):
            runtime_config.stripe_secret_key = 'sk_live_other'

    def test_public_part_cannot_reassign(self, runtime_config):
        with pytest.raises(dataclasses.FrozenInstanceError):
            runtime_config.public.base_url = 'https://evil.example.com'


class TestExposure:
    """Only browser-safe values leave the server."""

    def test_public_dict(self, runtime_config):
        assert runtime_config.public_dict() == {
            'stripePublishableKey': 'pk_test_fixture',
            'baseURL': 'https://shop.example.com',
        }

    def test_repr_hides_secrets(self, runtime_config):
        text = repr(runtime_config)

        assert 'sk_test_fixture' not in text
        assert 'whsec_fixture' not in text
        assert 'https://shop.example.com' in text
