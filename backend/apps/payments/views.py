"""
API views for the storefront checkout.
Proxies payment intent creation, updates and cancellation to Stripe.
"""
from rest_framework import views, status
from rest_framework.response import Response
from rest_framework.permissions import AllowAny

from drf_spectacular.utils import extend_schema, OpenApiExample

from apps.core.runtime_config import RuntimeConfig
from apps.core.services.base import ServiceException
from .services.intent_service import PaymentIntentService
from .serializers import (
    IntentRequestSerializer,
    CancelIntentRequestSerializer,
    PaymentIntentSerializer,
    CancelIntentSerializer,
    PublicConfigSerializer,
    PaymentErrorSerializer
)


def _error_response(exc: ServiceException) -> Response:
    return Response(
        PaymentErrorSerializer(exc).data,
        status=exc.status_code
    )


class PaymentIntentView(views.APIView):
    """
    Create, update or cancel a Stripe payment intent.

    POST   /api/payments/intent
    DELETE /api/payments/intent

    The runtime configuration is injected through as_view(runtime_config=...).
    """
    permission_classes = [AllowAny]
    authentication_classes = []
    runtime_config: RuntimeConfig = None

    def get_service(self) -> PaymentIntentService:
        return PaymentIntentService(self.runtime_config)

    @extend_schema(
        summary="Create or update a payment intent",
        description="""
        Create a Stripe payment intent for the checkout total, or re-price an
        existing one when `intentId` is supplied.

        **Rules:**
        - `amount_cents` must be a whole number of cents, at least 100 ($1.00)
        - Currency is always `usd`
        - New intents let Stripe choose the payment methods automatically

        **Errors:**
        - 400 `INVALID_ARGUMENT`: amount missing, not an integer or below 100,
          or `intentId` is not a string
        - 400 `REMOTE_REJECTED`: Stripe refused the request (message forwarded)
        """,
        request={
            'application/json': {
                'type': 'object',
                'properties': {
                    'amount_cents': {
                        'type': 'integer',
                        'minimum': 100,
                        'description': 'Amount in cents'
                    },
                    'intentId': {
                        'type': 'string',
                        'nullable': True,
                        'description': 'Existing payment intent to update'
                    }
                },
                'required': ['amount_cents']
            }
        },
        responses={
            200: PaymentIntentSerializer,
            400: PaymentErrorSerializer
        },
        examples=[
            OpenApiExample(
                'New intent',
                value={'amount_cents': 1500},
                request_only=True
            ),
            OpenApiExample(
                'Created',
                value={'clientSecret': 'pi_x_secret_y', 'intentId': 'pi_x'},
                response_only=True
            ),
        ],
        tags=['Payments']
    )
    def post(self, request):
        """Create a new intent or update an existing one."""
        serializer = IntentRequestSerializer(data=request.data)

        if not serializer.is_valid():
            return _error_response(serializer.service_error())

        try:
            result = self.get_service().create_or_update(
                serializer.validated_data['amount_cents'],
                intent_id=serializer.validated_data.get('intentId')
            )
        except ServiceException as e:
            return _error_response(e)

        return Response(
            PaymentIntentSerializer(result).data,
            status=status.HTTP_200_OK
        )

    @extend_schema(
        summary="Cancel a payment intent",
        description="""
        Cancel a Stripe payment intent that has not been completed.

        **Errors:**
        - 400 `MISSING_ARGUMENT`: `intentId` missing or empty
        - 400 `REMOTE_REJECTED`: Stripe refused the cancellation, e.g. the
          intent already succeeded (message forwarded)
        """,
        request={
            'application/json': {
                'type': 'object',
                'properties': {
                    'intentId': {
                        'type': 'string',
                        'description': 'Payment intent to cancel'
                    }
                },
                'required': ['intentId']
            }
        },
        responses={
            200: CancelIntentSerializer,
            400: PaymentErrorSerializer
        },
        tags=['Payments']
    )
    def delete(self, request):
        """Cancel the intent named in the body."""
        serializer = CancelIntentRequestSerializer(data=request.data)

        if not serializer.is_valid():
            return _error_response(serializer.service_error())

        try:
            result = self.get_service().cancel(
                serializer.validated_data['intentId'])
        except ServiceException as e:
            return _error_response(e)

        return Response(
            CancelIntentSerializer(result).data,
            status=status.HTTP_200_OK
        )


class PublicConfigView(views.APIView):
    """
    Browser-safe runtime configuration.

    GET /api/payments/config

    Response:
        {
            "stripePublishableKey": "pk_test_xxx",
            "baseURL": "http://localhost:3000"
        }
    """
    permission_classes = [AllowAny]
    authentication_classes = []
    runtime_config: RuntimeConfig = None

    @extend_schema(
        summary="Get public checkout configuration",
        description="Publishable Stripe key and storefront base URL for Stripe.js.",
        responses={200: PublicConfigSerializer},
        tags=['Payments']
    )
    def get(self, request):
        return Response(
            PublicConfigSerializer(self.runtime_config.public).data,
            status=status.HTTP_200_OK
        )
