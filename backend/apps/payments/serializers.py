"""
Serializers for payment operations.
Validates checkout request bodies and formats payment intent results and
errors for the storefront front-end.
"""
from collections.abc import Mapping
from numbers import Integral, Real

from rest_framework import serializers

from apps.core.services.base import (
    ServiceException, InvalidArgument, MissingArgument
)


class ServiceRequestSerializer(serializers.Serializer):
    """
    Base for checkout request bodies.

    A body that is not a JSON object is validated as an empty one, and the
    first field error is surfaced as a ServiceException so every failure
    renders through PaymentErrorSerializer.
    """
    # field name -> ServiceException subclass raised for its errors
    error_classes = {}

    def run_validation(self, data=serializers.empty):
        if not isinstance(data, Mapping):
            data = {}
        return super().run_validation(data)

    def service_error(self) -> ServiceException:
        """Build the ServiceException for a failed is_valid() call."""
        field, messages = next(iter(self.errors.items()))
        error_class = self.error_classes.get(field, InvalidArgument)
        return error_class(str(messages[0]), details={'field': field})


class IntentRequestSerializer(ServiceRequestSerializer):
    """
    Validates the body of POST /api/payments/intent.

    Rules:
    - amount_cents is a whole number of cents, at least 100 ($1.00);
      JSON 1500.0 counts as 1500, booleans and strings do not
    - intentId is optional; null, empty or blank means "create"
    """
    MIN_AMOUNT_CENTS = 100
    INVALID_AMOUNT_MESSAGE = 'Invalid amount (min $1.00)'
    INVALID_INTENT_MESSAGE = 'Invalid intentId'

    # JSONField keeps the raw JSON value; IntegerField would coerce "1500"
    amount_cents = serializers.JSONField(
        error_messages={
            'required': INVALID_AMOUNT_MESSAGE,
            'null': INVALID_AMOUNT_MESSAGE,
            'invalid': INVALID_AMOUNT_MESSAGE,
        },
        help_text="Amount in cents, at least 100"
    )
    intentId = serializers.JSONField(
        required=False,
        allow_null=True,
        error_messages={'invalid': INVALID_INTENT_MESSAGE},
        help_text="Existing payment intent to update"
    )

    error_classes = {
        'amount_cents': InvalidArgument,
        'intentId': InvalidArgument,
    }

    def validate_amount_cents(self, value):
        if isinstance(value, bool) or not isinstance(value, Real):
            raise serializers.ValidationError(self.INVALID_AMOUNT_MESSAGE)

        if not isinstance(value, Integral):
            if not float(value).is_integer():
                raise serializers.ValidationError(self.INVALID_AMOUNT_MESSAGE)

        if value < self.MIN_AMOUNT_CENTS:
            raise serializers.ValidationError(self.INVALID_AMOUNT_MESSAGE)

        return int(value)

    def validate_intentId(self, value):
        return normalize_intent_id(value, self.INVALID_INTENT_MESSAGE) or None


class CancelIntentRequestSerializer(ServiceRequestSerializer):
    """Validates the body of DELETE /api/payments/intent."""
    MISSING_INTENT_MESSAGE = 'Missing intentId'

    intentId = serializers.JSONField(
        error_messages={
            'required': MISSING_INTENT_MESSAGE,
            'null': MISSING_INTENT_MESSAGE,
            'invalid': MISSING_INTENT_MESSAGE,
        },
        help_text="Payment intent to cancel"
    )

    error_classes = {'intentId': MissingArgument}

    def validate_intentId(self, value):
        intent_id = normalize_intent_id(value, self.MISSING_INTENT_MESSAGE)
        if not intent_id:
            raise serializers.ValidationError(self.MISSING_INTENT_MESSAGE)
        return intent_id


def normalize_intent_id(value, message: str) -> str:
    """Strip an intent id; anything other than a string is rejected."""
    if value is None:
        return ''
    if not isinstance(value, str):
        raise serializers.ValidationError(message)
    return value.strip()


class PaymentIntentSerializer(serializers.Serializer):
    """
    Serializer for a created or updated payment intent.

    Field names follow the front-end's camelCase contract.
    """
    clientSecret = serializers.CharField(
        source='client_secret',
        help_text="Stripe client secret used by Stripe.js to confirm payment"
    )
    intentId = serializers.CharField(
        source='intent_id',
        help_text="Stripe payment intent ID"
    )


class CancelIntentSerializer(serializers.Serializer):
    """Serializer for a cancellation result."""
    success = serializers.SerializerMethodField()
    status = serializers.CharField(
        help_text="Intent status reported by Stripe after cancellation"
    )

    def get_success(self, instance) -> bool:
        return True


class PublicConfigSerializer(serializers.Serializer):
    """Browser-safe runtime configuration."""
    stripePublishableKey = serializers.CharField(
        source='stripe_publishable_key')
    baseURL = serializers.CharField(source='base_url')


class PaymentErrorSerializer(serializers.Serializer):
    """
    Serializer for payment error responses.
    Provides consistent error format across payment endpoints.
    """
    statusCode = serializers.IntegerField(help_text="HTTP status code")
    statusMessage = serializers.CharField(help_text="Human-readable message")
    message = serializers.CharField(help_text="Same as statusMessage")
    error_code = serializers.CharField(
        help_text="Machine-readable error code"
    )
    details = serializers.DictField(
        required=False,
        help_text="Additional error details"
    )

    def to_representation(self, instance):
        """
        Format error response.

        Args:
            instance: ServiceException raised by the payment service
        """
        return {
            'statusCode': instance.status_code,
            'statusMessage': instance.message,
            'message': instance.message,
            'error_code': instance.code,
            'details': instance.details,
        }
