from datetime import datetime, timezone
from typing import Optional
from app.configs.stripe_config import StripeConfig, from_minor_units
from app.models.stripe_webhook_models import OrderSummary
from app.services.notification_services import NotificationService
import logging

logger = logging.getLogger(__name__)


class FulfillmentService:
    def __init__(self, notification_service: Optional[NotificationService] = None):
        self.notification_service = notification_service or NotificationService()

    # ######################################################################################################################
    # Helper methods:
    # ######################################################################################################################

    @staticmethod
    def _line_item_snapshot(line_item) -> dict:
        return {
            "description": line_item.get("description"),
            "quantity": line_item.get("quantity"),
            "amount_total": from_minor_units(line_item.get("amount_total")),
            "currency": line_item.get("currency"),
        }

    # ---------------------------------------------------------------------------------------------------------------------

    async def build_order_summary(self, checkout_session) -> OrderSummary:
        """Re-fetch customer and line items from Stripe and assemble the order record"""
        session_id = checkout_session["id"]
        customer_details = checkout_session.get("customer_details") or {}

        customer = None
        customer_id = checkout_session.get("customer")
        if customer_id:
            customer = await StripeConfig.retrieve_customer(customer_id)

        session_with_items = await StripeConfig.retrieve_session(session_id, expand=["line_items"])
        line_items = session_with_items.get("line_items") or {}

        # shipping moved from shipping_details to collected_information in newer API versions
        shipping_details = checkout_session.get("shipping_details") or (checkout_session.get("collected_information") or {}).get(
            "shipping_details"
        )
        shipping_address = shipping_details.get("address") if shipping_details else None

        created = checkout_session.get("created")

        return OrderSummary(
            session_id=session_id,
            customer_id=customer["id"] if customer else None,
            customer_email=(customer.get("email") if customer else None) or customer_details.get("email"),
            customer_name=(customer.get("name") if customer else None) or customer_details.get("name"),
            shipping_address=dict(shipping_address) if shipping_address else None,
            amount_total=from_minor_units(checkout_session.get("amount_total")),
            currency=checkout_session.get("currency"),
            payment_status=checkout_session.get("payment_status"),
            created=datetime.fromtimestamp(created, tz=timezone.utc) if created else None,
            items=[self._line_item_snapshot(item) for item in line_items.get("data", [])],
            metadata=dict(checkout_session.get("metadata") or {}),
        )

    # ---------------------------------------------------------------------------------------------------------------------

    async def fulfill_order(self, checkout_session) -> Optional[OrderSummary]:
        """Handle a completed checkout session. Never raises: the webhook must still be acknowledged."""
        try:
            logger.info(f"📦 Fulfilling order for session: {checkout_session['id']}")

            order = await self.build_order_summary(checkout_session)

            logger.info(
                f"✅ Order fulfilled: session={order.session_id} customer={order.customer_id} "
                f"email={order.customer_email} total={order.amount_total} items={len(order.items)}"
            )

            # Stripe is the system of record for the order, nothing is stored locally
            await self.notification_service.send_order_notification(order)
            return order

        except Exception as e:
            logger.error(f"❌ Error fulfilling order: {str(e)}")
            return None
