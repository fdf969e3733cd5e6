"""
URL Configuration for the Storefront checkout backend
"""
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from django.http import JsonResponse
from django.templatetags.static import static as static_url
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView, SpectacularRedocView

from apps.payments.urls import runtime_config


def home_view(request):
    """API root information and front-end wiring"""
    base = f"{request.scheme}://{request.get_host()}"
    return JsonResponse({
        'message': 'Welcome to the Storefront checkout API',
        'version': '1.0.0',
        'documentation': {
            'swagger_ui': f"{base}/api/docs/",
            'redoc': f"{base}/api/redoc/",
            'openapi_schema': f"{base}/api/schema/"
        },
        'endpoints': {
            'payment_intent': '/api/payments/intent',
            'public_config': '/api/payments/config',
        },
        'stylesheets': [static_url(path) for path in settings.STOREFRONT_STYLESHEETS],
        'modules': list(settings.STOREFRONT_MODULES),
        'public': runtime_config.public_dict(),
    })


urlpatterns = [
    path('', home_view, name='home'),

    # Checkout endpoints
    path('api/payments/', include('apps.payments.urls')),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'),
         name='swagger-ui'),
    path('api/redoc/', SpectacularRedocView.as_view(url_name='schema'),
         name='redoc'),
]

# Serve the CSS pipeline output in development
if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL,
                          document_root=settings.STATIC_ROOT)

    # Django Debug Toolbar (only if installed AND in INSTALLED_APPS)
    if 'debug_toolbar' in settings.INSTALLED_APPS:
        import debug_toolbar
        urlpatterns = [
            path('__debug__/', include(debug_toolbar.urls)),
        ] + urlpatterns
