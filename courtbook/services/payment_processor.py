"""Payment processor client.

Creates payment intents at Stripe and hands back the client secret; the
capture itself happens between the client and Stripe. Each call is attempted
once.
"""
import logging
from typing import Optional

import stripe
from fastapi.concurrency import run_in_threadpool

from courtbook.core.config import settings
from courtbook.core.exceptions import InternalException

logger = logging.getLogger(__name__)


class StripePaymentProcessor:
    """Creates card payment intents through the Stripe SDK."""

    def __init__(self, secret_key: Optional[str] = None, currency: Optional[str] = None):
        """Initialize the client, falling back to application settings."""
        self.secret_key = secret_key if secret_key is not None else settings.STRIPE_SECRET_KEY
        self.currency = currency or settings.PAYMENT_CURRENCY

    async def create_payment_intent(self, amount: int) -> str:
        """
        Create a card payment intent.

        Args:
            amount: Amount in the smallest currency unit

        Returns:
            The intent's client secret
        """
        try:
            intent = await run_in_threadpool(
                stripe.PaymentIntent.create,
                amount=amount,
                currency=self.currency,
                payment_method_types=["card"],
                api_key=self.secret_key,
            )
        except stripe.StripeError as e:
            logger.error(f"Failed to create payment intent: {e}")
            raise InternalException("Failed to create payment intent")

        client_secret = intent.get("client_secret")
        if not client_secret:
            logger.error(f"Payment intent {intent.get('id')} has no client secret")
            raise InternalException("Failed to create payment intent")
        return client_secret


# Singleton instance
payment_processor = StripePaymentProcessor()
