from fastapi import APIRouter, Request, Depends
import stripe
import logging
from app.configs.app_settings import Settings, get_settings
from app.services.stripe_webhook_services import StripeWebhookService
from app.models.stripe_webhook_models import StripeWebhookAckResponse
from app.custom_error import WebhookError

stripe_webhook_router = APIRouter(tags=["Webhooks"])
logger = logging.getLogger(__name__)


async def get_stripe_webhook_service() -> StripeWebhookService:
    """Dependency to get StripeWebhookService instance"""
    return StripeWebhookService()


def verify_stripe_event(payload: bytes, sig_header: str, webhook_secret: str):
    """Check the stripe-signature header against the raw body; raises WebhookError on any mismatch"""
    if not sig_header:
        raise WebhookError("Missing stripe-signature header")

    if not webhook_secret:
        raise WebhookError("Webhook signing secret is not configured")

    try:
        return stripe.Webhook.construct_event(payload, sig_header, webhook_secret)
    except ValueError:
        raise WebhookError("Invalid payload")
    except stripe.SignatureVerificationError as e:
        raise WebhookError(str(e))


# ################################################################################################################################


@stripe_webhook_router.post("/webhook", response_model=StripeWebhookAckResponse)
async def stripe_webhook_handler(
    request: Request,
    settings: Settings = Depends(get_settings),
    webhook_service: StripeWebhookService = Depends(get_stripe_webhook_service),
):
    """Handle Stripe webhook events"""

    # the signature is computed over the exact bytes Stripe sent, so never parse JSON first
    payload = await request.body()
    sig_header = request.headers.get("stripe-signature")

    try:
        event = verify_stripe_event(payload, sig_header, settings.STRIPE_WEBHOOK_SECRET)
    except WebhookError as e:
        logger.error(f"❌ Webhook signature verification failed: {e.detail}")
        raise

    logger.info(f"🔔 Received Stripe webhook: {event['type']}")

    try:
        await webhook_service.dispatch(event)
    except Exception as e:
        # Stripe retries anything that is not acknowledged; a handler failure must not cause that
        logger.error(f"❌ Error handling webhook event {event['type']}: {str(e)}")

    return StripeWebhookAckResponse(received=True)
