from typing import Awaitable, Callable, Dict, Optional
from app.services.fulfillment_services import FulfillmentService
from app.services.notification_services import NotificationService
import logging

logger = logging.getLogger(__name__)


class StripeWebhookService:
    """Routes verified Stripe events to their handlers through a fixed event-type table"""

    def __init__(self, fulfillment_service: Optional[FulfillmentService] = None, notification_service: Optional[NotificationService] = None):
        self.notification_service = notification_service or NotificationService()
        self.fulfillment_service = fulfillment_service or FulfillmentService(self.notification_service)

        self.event_handlers: Dict[str, Callable[[dict], Awaitable[None]]] = {
            "checkout.session.completed": self.handle_checkout_session_completed,
            "checkout.session.expired": self.handle_checkout_session_expired,
            "payment_intent.payment_failed": self.handle_payment_intent_failed,
        }

    # ---------------------------------------------------------------------------------------------------------------------

    async def dispatch(self, event) -> bool:
        """Run the handler registered for the event type. Returns False for unhandled types."""
        event_type = event["type"]
        handler = self.event_handlers.get(event_type)

        if handler is None:
            logger.info(f"⚠️ Unhandled webhook event type: {event_type}")
            return False

        await handler(event["data"]["object"])
        return True

    # ---------------------------------------------------------------------------------------------------------------------
    # event handlers

    async def handle_checkout_session_completed(self, checkout_session) -> None:
        logger.info(f"💰 Payment successful for session: {checkout_session['id']}")
        await self.fulfillment_service.fulfill_order(checkout_session)

    async def handle_checkout_session_expired(self, checkout_session) -> None:
        logger.info(f"⌛ Checkout session expired: {checkout_session['id']}")

    async def handle_payment_intent_failed(self, payment_intent) -> None:
        logger.info(f"💥 Payment failed: {payment_intent['id']}")
        await self.notification_service.send_payment_failure_notification(payment_intent.get("receipt_email"), payment_intent["id"])
