"""
URL configuration for payment endpoints.
"""
from django.conf import settings
from django.urls import path

from apps.core.runtime_config import RuntimeConfig
from .views import PaymentIntentView, PublicConfigView

app_name = 'payments'

# Built once when the URLconf is loaded, then shared read-only by every request
runtime_config = RuntimeConfig.from_settings(settings)

urlpatterns = [
    path(
        'intent',
        PaymentIntentView.as_view(runtime_config=runtime_config),
        name='payment-intent'
    ),
    path(
        'config',
        PublicConfigView.as_view(runtime_config=runtime_config),
        name='public-config'
    ),
]
