"""
Stripe PaymentIntent service for the storefront checkout.
Creates, updates and cancels payment intents on behalf of the browser.

Stripe owns the intent lifecycle (requires_payment_method -> processing ->
succeeded/canceled); this service only forwards requests and classifies errors.
"""
import stripe
from dataclasses import dataclass
from typing import Optional

from apps.core.runtime_config import RuntimeConfig
from apps.core.services.base import BaseService, RemoteRejected


@dataclass(frozen=True)
class IntentResult:
    """Client-facing view of a created or updated payment intent."""
    client_secret: str
    intent_id: str


@dataclass(frozen=True)
class CancelResult:
    """Outcome of a cancellation as reported by Stripe."""
    status: str


class PaymentIntentService(BaseService):
    """
    Service wrapping the Stripe PaymentIntent API.

    Every call authenticates with the secret key from the injected
    RuntimeConfig; the global stripe.api_key is never touched.

    Stripe PaymentIntents: https://stripe.com/docs/api/payment_intents
    """

    CURRENCY = 'usd'

    def __init__(self, runtime_config: RuntimeConfig):
        """
        Initialize the service.

        Args:
            runtime_config: Process-wide configuration holding the Stripe keys
        """
        super().__init__()
        self.config = runtime_config

    def create_or_update(self, amount_cents: int,
                         intent_id: Optional[str] = None) -> IntentResult:
        """
        Create a new payment intent, or re-price an existing one.

        Inputs arrive already validated by IntentRequestSerializer.

        Args:
            amount_cents: Amount in cents, at least 100
            intent_id: Existing intent to update; a new intent is created when empty

        Returns:
            IntentResult with Stripe's client_secret and id, unchanged

        Raises:
            RemoteRejected: If Stripe refuses the request
        """
        if intent_id:
            return self._update_intent(intent_id, amount_cents)
        return self._create_intent(amount_cents)

    def cancel(self, intent_id: str) -> CancelResult:
        """
        Cancel a payment intent.

        Whether the intent can still be canceled is decided by Stripe;
        intents in a terminal state are rejected remotely.

        Args:
            intent_id: Intent to cancel, validated by CancelIntentRequestSerializer

        Returns:
            CancelResult carrying the status Stripe reports after cancellation

        Raises:
            RemoteRejected: If Stripe refuses the cancellation
        """
        try:
            intent = stripe.PaymentIntent.cancel(
                intent_id,
                api_key=self.config.stripe_secret_key
            )
        except stripe.StripeError as e:
            raise self._rejected(
                e, 'Failed to cancel intent', intent_id=intent_id) from e

        self.log_info(
            f"Canceled payment intent {intent.id}",
            intent_id=intent.id,
            status=intent.status
        )

        return CancelResult(status=intent.status)

    def _create_intent(self, amount: int) -> IntentResult:
        try:
            intent = stripe.PaymentIntent.create(
                amount=amount,
                currency=self.CURRENCY,
                # lets Stripe pick the supported methods (cards, wallets, etc.)
                automatic_payment_methods={'enabled': True},
                api_key=self.config.stripe_secret_key
            )
        except stripe.StripeError as e:
            raise self._rejected(
                e, 'Failed to create intent', amount=amount) from e

        self.log_info(
            f"Created payment intent {intent.id}",
            intent_id=intent.id,
            amount=amount
        )

        return IntentResult(client_secret=intent.client_secret, intent_id=intent.id)

    def _update_intent(self, intent_id: str, amount: int) -> IntentResult:
        try:
            intent = stripe.PaymentIntent.modify(
                intent_id,
                amount=amount,
                currency=self.CURRENCY,
                api_key=self.config.stripe_secret_key
            )
        except stripe.StripeError as e:
            raise self._rejected(
                e, 'Failed to update intent',
                intent_id=intent_id, amount=amount) from e

        self.log_info(
            f"Updated payment intent {intent.id}",
            intent_id=intent.id,
            amount=amount
        )

        return IntentResult(client_secret=intent.client_secret, intent_id=intent.id)

    def _rejected(self, error: stripe.StripeError, fallback: str,
                  **context) -> RemoteRejected:
        """Turn a Stripe error into RemoteRejected, keeping Stripe's message."""
        message = error.user_message or fallback

        self.log_error(
            f"Stripe rejected request: {message}",
            exception=error,
            stripe_error=type(error).__name__,
            stripe_code=error.code,
            **context
        )

        return RemoteRejected(
            message,
            details={
                'type': type(error).__name__,
                'stripe_code': error.code,
                'http_status': error.http_status,
            }
        )
