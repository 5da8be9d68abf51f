import stripe
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional
from app.configs.app_settings import settings

stripe.api_key = settings.STRIPE_SECRET_KEY


class PaymentConstants:
    CARD_PAYMENT_METHOD = "card"
    PAYMENT_MODE = "payment"
    BILLING_ADDRESS_COLLECTION = "required"

    # Stripe swaps this placeholder for the real session id on redirect
    SESSION_ID_PLACEHOLDER = "{CHECKOUT_SESSION_ID}"

    CUSTOMER_CREATED_VIA = "storefront_checkout"

    MINOR_UNITS_PER_MAJOR = 100


def to_minor_units(amount: Decimal) -> int:
    """Convert a decimal major-unit price into integer cents (half-up rounding)"""
    cents = Decimal(amount) * PaymentConstants.MINOR_UNITS_PER_MAJOR
    return int(cents.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def from_minor_units(amount: Optional[int]) -> Optional[float]:
    """Convert integer cents coming back from Stripe into a decimal major-unit amount"""
    if amount is None:
        return None
    return amount / PaymentConstants.MINOR_UNITS_PER_MAJOR


class StripeConfig:
    """Async wrapper for the Stripe operations the checkout server uses"""

    @staticmethod
    async def create_checkout_session(
        line_items: List[Dict[str, Any]],
        success_url: str,
        cancel_url: str,
        customer_id: str,
        allowed_countries: List[str],
        metadata: Optional[dict] = None,
    ) -> stripe.checkout.Session:
        """Create a card-only, single-payment Stripe checkout session"""

        session_config = {
            "payment_method_types": [PaymentConstants.CARD_PAYMENT_METHOD],
            "line_items": line_items,
            "mode": PaymentConstants.PAYMENT_MODE,
            "success_url": success_url,
            "cancel_url": cancel_url,
            "customer": customer_id,
            "shipping_address_collection": {"allowed_countries": allowed_countries},
            "billing_address_collection": PaymentConstants.BILLING_ADDRESS_COLLECTION,
            "metadata": metadata or {},
        }

        return await stripe.checkout.Session.create_async(**session_config)

    @staticmethod
    async def retrieve_session(session_id: str, expand: Optional[List[str]] = None) -> stripe.checkout.Session:
        """Retrieve a checkout session by ID, optionally expanding nested objects"""
        if expand:
            return await stripe.checkout.Session.retrieve_async(session_id, expand=expand)
        return await stripe.checkout.Session.retrieve_async(session_id)

    @staticmethod
    async def find_customer_by_email(email: str) -> Optional[stripe.Customer]:
        """Return the first Stripe customer registered with this email, if any"""
        customers = await stripe.Customer.list_async(email=email, limit=1)
        if customers.data:
            return customers.data[0]
        return None

    @staticmethod
    async def create_customer(email: str, metadata: Optional[dict] = None) -> stripe.Customer:
        return await stripe.Customer.create_async(email=email, metadata=metadata or {})

    @staticmethod
    async def retrieve_customer(customer_id: str) -> stripe.Customer:
        return await stripe.Customer.retrieve_async(customer_id)

    @staticmethod
    async def create_billing_portal_session(customer_id: str, return_url: str) -> stripe.billing_portal.Session:
        """Create a customer-scoped self-service billing portal session"""
        return await stripe.billing_portal.Session.create_async(customer=customer_id, return_url=return_url)
