from fastapi import APIRouter, Depends
from app.configs.app_settings import Settings, get_settings
from app.services.checkout_services import CheckoutService
from app.models.checkout_models import CheckoutSessionRequest, CheckoutSessionResponse, OrderStatusResponse, SessionSummaryResponse

checkout_router = APIRouter(tags=["Checkout"])


async def get_checkout_service(settings: Settings = Depends(get_settings)) -> CheckoutService:
    """Dependency to get CheckoutService instance"""
    return CheckoutService(settings)


#########################################################################################################################


@checkout_router.post("/create-checkout-session", response_model=CheckoutSessionResponse)
async def create_checkout_session(request: CheckoutSessionRequest, checkout_service: CheckoutService = Depends(get_checkout_service)):
    """Create Stripe checkout session from the shopping cart"""
    return await checkout_service.create_checkout_session(request)


# ---------------------------------------------------------------------------------------------------------------------


@checkout_router.get("/session/{session_id}", response_model=SessionSummaryResponse)
async def get_session(session_id: str, checkout_service: CheckoutService = Depends(get_checkout_service)):
    """Get session details for the order confirmation page"""
    return await checkout_service.get_session_summary(session_id)


# ---------------------------------------------------------------------------------------------------------------------


@checkout_router.get("/order-status/{session_id}", response_model=OrderStatusResponse)
async def get_order_status(session_id: str, checkout_service: CheckoutService = Depends(get_checkout_service)):
    """Get payment status for the order tracking page"""
    return await checkout_service.get_order_status(session_id)
