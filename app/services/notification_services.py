import logging
from typing import Optional
from app.models.stripe_webhook_models import OrderSummary

logger = logging.getLogger(__name__)


class NotificationService:
    """Order notifications. Stripe already emails receipts, so these only record what would be sent."""

    @staticmethod
    async def send_order_notification(order: OrderSummary) -> None:
        logger.info(f"📧 Custom order notification for: {order.customer_email}")
        logger.info(f"   Customer ID: {order.customer_id}")
        logger.info(f"   Order total: {order.amount_total} {(order.currency or '').upper()}")
        logger.info(f"   Session ID: {order.session_id}")
        logger.info(f"   Items: {len(order.items)}")

    @staticmethod
    async def send_payment_failure_notification(customer_email: Optional[str], payment_intent_id: str) -> None:
        logger.info(f"📧 Payment failure notification for: {customer_email or 'unknown customer'} (payment intent {payment_intent_id})")
