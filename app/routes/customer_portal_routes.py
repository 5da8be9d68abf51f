from fastapi import APIRouter, Depends
from app.configs.app_settings import Settings, get_settings
from app.services.customer_portal_services import CustomerPortalService
from app.models.customer_portal_models import CustomerPortalRequest, CustomerPortalResponse

customer_portal_router = APIRouter(tags=["Customer Portal"])


async def get_customer_portal_service(settings: Settings = Depends(get_settings)) -> CustomerPortalService:
    """Dependency to get CustomerPortalService instance"""
    return CustomerPortalService(settings)


@customer_portal_router.post("/create-customer-portal", response_model=CustomerPortalResponse)
async def create_customer_portal(
    request: CustomerPortalRequest,
    customer_portal_service: CustomerPortalService = Depends(get_customer_portal_service),
):
    """Create a Stripe billing portal session (order history, saved cards)"""
    return await customer_portal_service.create_portal_session(request)
