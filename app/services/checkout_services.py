from datetime import datetime, timezone
from typing import Any, Dict, List
from app.configs.app_settings import Settings
from app.configs.stripe_config import StripeConfig, PaymentConstants, to_minor_units, from_minor_units
from app.custom_error import CheckoutSessionCreationError, SessionNotFoundError, OrderNotFoundError
from app.models.checkout_models import (
    CartItem,
    CheckoutSessionRequest,
    CheckoutSessionResponse,
    OrderStatusResponse,
    SessionLineItem,
    SessionSummaryResponse,
)
import stripe
import logging

logger = logging.getLogger(__name__)


class CheckoutService:
    def __init__(self, settings: Settings):
        self.settings = settings

    # ######################################################################################################################
    # Helper methods:
    # ######################################################################################################################

    def _build_line_item(self, item: CartItem) -> Dict[str, Any]:
        """Convert one cart item into a Stripe price_data line item"""
        product = item.product

        product_data = {
            "name": product.name,
            "metadata": {"product_id": product.id, "category": product.category or ""},
        }
        # Stripe rejects empty strings for description
        if product.description:
            product_data["description"] = product.description
        if product.image_url:
            product_data["images"] = [product.image_url]

        return {
            "price_data": {
                "currency": self.settings.CURRENCY,
                "product_data": product_data,
                "unit_amount": to_minor_units(product.price),
            },
            "quantity": item.quantity,
        }

    # ---------------------------------------------------------------------------------------------------------------------

    async def _get_or_create_customer(self, customer_email: str) -> stripe.Customer:
        """Look the customer up by email in Stripe, creating one on first order"""
        customer = await StripeConfig.find_customer_by_email(customer_email)
        if customer:
            logger.info(f"Found existing customer: {customer.id}")
            return customer

        customer = await StripeConfig.create_customer(
            customer_email,
            metadata={
                "created_via": PaymentConstants.CUSTOMER_CREATED_VIA,
                "first_order_date": datetime.now(timezone.utc).isoformat(),
            },
        )
        logger.info(f"Created new customer: {customer.id}")
        return customer

    # ---------------------------------------------------------------------------------------------------------------------

    @staticmethod
    def _cart_total(items: List[CartItem]):
        return sum((item.product.price * item.quantity for item in items), 0)

    # ######################################################################################################################
    # Public methods:
    # ######################################################################################################################

    async def create_checkout_session(self, request: CheckoutSessionRequest) -> CheckoutSessionResponse:
        """Create a Stripe hosted checkout session for the cart"""
        try:
            logger.info(
                f"🛒 Creating checkout session for: {request.customer_email}, "
                f"items={len(request.items)}, total={self._cart_total(request.items)}"
            )

            customer = await self._get_or_create_customer(request.customer_email)

            line_items = [self._build_line_item(item) for item in request.items]

            # Store order context in metadata for reconciliation from the webhook
            metadata = {
                "customer_id": customer.id,
                "customer_email": request.customer_email,
                "order_date": datetime.now(timezone.utc).isoformat(),
                "item_count": str(len(request.items)),
            }

            session = await StripeConfig.create_checkout_session(
                line_items=line_items,
                success_url=f"{request.success_url}?session_id={PaymentConstants.SESSION_ID_PLACEHOLDER}",
                cancel_url=request.cancel_url,
                customer_id=customer.id,
                allowed_countries=self.settings.SHIPPING_ALLOWED_COUNTRIES,
                metadata=metadata,
            )

            logger.info(f"✅ Checkout session created: {session.id}")
            return CheckoutSessionResponse(url=session.url, session_id=session.id)

        except Exception as e:
            logger.error(f"❌ Error creating checkout session: {str(e)}")
            raise CheckoutSessionCreationError(getattr(e, "user_message", None) or str(e))

    # ---------------------------------------------------------------------------------------------------------------------

    async def get_session_summary(self, session_id: str) -> SessionSummaryResponse:
        """Session details for the order confirmation page"""
        try:
            session = await StripeConfig.retrieve_session(session_id, expand=["line_items", "customer"])
        except Exception as e:
            logger.error(f"❌ Error retrieving session {session_id}: {str(e)}")
            raise SessionNotFoundError()

        customer_details = session.get("customer_details") or {}
        line_items = session.get("line_items") or {}

        return SessionSummaryResponse(
            id=session["id"],
            payment_status=session.get("payment_status"),
            customer_email=session.get("customer_email") or customer_details.get("email"),
            amount_total=from_minor_units(session.get("amount_total")),
            currency=session.get("currency"),
            created=session.get("created"),
            line_items=[
                SessionLineItem(
                    description=item.get("description"),
                    quantity=item.get("quantity"),
                    amount_total=from_minor_units(item.get("amount_total")),
                )
                for item in line_items.get("data", [])
            ],
        )

    # ---------------------------------------------------------------------------------------------------------------------

    async def get_order_status(self, session_id: str) -> OrderStatusResponse:
        """Minimal payment status lookup for the order tracking page"""
        try:
            session = await StripeConfig.retrieve_session(session_id)
        except Exception as e:
            logger.error(f"❌ Error retrieving order status {session_id}: {str(e)}")
            raise OrderNotFoundError()

        return OrderStatusResponse(
            status=session.get("payment_status"),
            customer_email=session.get("customer_email"),
            amount_total=from_minor_units(session.get("amount_total")),
            created=session.get("created"),
        )
