"""
Stripe client - hosted Checkout, Billing Portal, customers and webhook verification.

The SDK is synchronous; every call here is pushed to the threadpool so the event loop
is never blocked on the network. Stripe failures surface as PaymentProviderError.
"""

import json
import logging
from typing import Any

import stripe
from fastapi.concurrency import run_in_threadpool

from solace.config import get_settings
from solace.core.errors import InvalidRequestError, PaymentProviderError

logger = logging.getLogger(__name__)


def _configure() -> None:
    settings = get_settings()
    if not settings.stripe_secret_key:
        raise PaymentProviderError("Payment provider is not configured")
    stripe.api_key = settings.stripe_secret_key


async def _call(fn, **params) -> Any:
    _configure()
    try:
        return await run_in_threadpool(lambda: fn(**params))
    except stripe.StripeError as e:
        logger.error("Stripe call %s failed: %s", getattr(fn, "__qualname__", fn), e)
        raise PaymentProviderError("Payment provider error") from e


async def create_checkout_session(**params) -> dict[str, str]:
    """Create a hosted Checkout session. Returns {"session_id", "url"}."""
    session = await _call(stripe.checkout.Session.create, **params)
    return {"session_id": session["id"], "url": session["url"]}


async def create_customer(email: str, metadata: dict[str, str]) -> str:
    customer = await _call(stripe.Customer.create, email=email, metadata=metadata)
    return customer["id"]


async def create_portal_session(customer_id: str, return_url: str) -> str:
    portal = await _call(stripe.billing_portal.Session.create, customer=customer_id, return_url=return_url)
    return portal["url"]


def construct_event(payload: bytes, signature: str | None) -> dict[str, Any]:
    """
    Verify the Stripe-Signature header and return the event as a plain dict.
    Raises InvalidRequestError("Invalid signature") when verification fails.
    """
    secret = get_settings().stripe_webhook_secret
    if not signature or not secret:
        raise InvalidRequestError("Invalid signature")
    try:
        stripe.Webhook.construct_event(payload, signature, secret)
    except (ValueError, stripe.SignatureVerificationError) as e:
        logger.warning("Webhook signature verification failed: %s", e)
        raise InvalidRequestError("Invalid signature") from e
    return json.loads(payload)
