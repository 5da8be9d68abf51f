from app.configs.app_settings import Settings
from app.configs.stripe_config import StripeConfig
from app.custom_error import CustomerNotFoundError, PortalCreationError
from app.models.customer_portal_models import CustomerPortalRequest, CustomerPortalResponse
import logging

logger = logging.getLogger(__name__)


class CustomerPortalService:
    def __init__(self, settings: Settings):
        self.settings = settings

    async def create_portal_session(self, request: CustomerPortalRequest) -> CustomerPortalResponse:
        """Create a Stripe billing portal link for a known customer (order history, payment methods)"""
        try:
            customer = await StripeConfig.find_customer_by_email(request.customer_email)

            if not customer:
                raise CustomerNotFoundError()

            portal_session = await StripeConfig.create_billing_portal_session(
                customer_id=customer.id,
                return_url=request.return_url or self.settings.FRONTEND_URL,
            )

            logger.info(f"✅ Customer portal session created for customer {customer.id}")
            return CustomerPortalResponse(url=portal_session.url)

        except CustomerNotFoundError:
            logger.warning(f"No Stripe customer found for {request.customer_email}")
            raise
        except Exception as e:
            logger.error(f"❌ Error creating customer portal: {str(e)}")
            raise PortalCreationError(getattr(e, "user_message", None) or str(e))
