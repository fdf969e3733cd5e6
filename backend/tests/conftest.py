"""
Pytest configuration and fixtures for the Storefront checkout tests.
Provides reusable fixtures for the runtime config, services and Stripe mocks.
"""
import os
import sys

import django
import pytest

# Add the backend directory to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Configure Django settings before any Django imports
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'storefront.settings.test')
django.setup()

from rest_framework.test import APIClient  # noqa: E402

from apps.core.runtime_config import PublicRuntimeConfig, RuntimeConfig  # noqa: E402


# ==================== Configuration ====================

@pytest.fixture
def runtime_config():
    """Runtime config with fake Stripe credentials."""
    return RuntimeConfig(
        stripe_secret_key='sk_test_fixture',
        stripe_webhook_secret='whsec_fixture',
        public=PublicRuntimeConfig(
            stripe_publishable_key='pk_test_fixture',
            base_url='https://shop.example.com'
        )
    )


# ==================== Services ====================

@pytest.fixture
def intent_service(runtime_config):
    """Create PaymentIntentService instance."""
    from apps.payments.services.intent_service import PaymentIntentService
    return PaymentIntentService(runtime_config)


# ==================== API ====================

@pytest.fixture
def api_client():
    """API client that returns 500 responses instead of raising."""
    return APIClient(raise_request_exception=False)


# ==================== Stripe Mocks ====================

def make_intent(mocker, intent_id='pi_test_123456789', status='requires_payment_method',
                amount=1500):
    """Build a stand-in for a stripe.PaymentIntent."""
    return mocker.MagicMock(
        id=intent_id,
        client_secret=f'{intent_id}_secret_abc',
        amount=amount,
        currency='usd',
        status=status
    )


@pytest.fixture
def mock_stripe_create(mocker):
    """Mock Stripe payment intent creation."""
    mock = mocker.patch('stripe.PaymentIntent.create')
    mock.return_value = make_intent(mocker)
    return mock


@pytest.fixture
def mock_stripe_modify(mocker):
    """Mock Stripe payment intent update."""
    mock = mocker.patch('stripe.PaymentIntent.modify')
    mock.return_value = make_intent(mocker, intent_id='pi_existing', amount=2500)
    return mock


@pytest.fixture
def mock_stripe_cancel(mocker):
    """Mock Stripe payment intent cancellation."""
    mock = mocker.patch('stripe.PaymentIntent.cancel')
    mock.return_value = make_intent(
        mocker, intent_id='pi_existing', status='canceled')
    return mock
