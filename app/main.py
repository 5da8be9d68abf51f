from fastapi import FastAPI, Request, Depends
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging
from app.configs.app_settings import Settings, settings, get_settings
from app.configs.logging_config import configure_logging
from app.custom_error import CheckoutAPIError
from app.models.checkout_models import HealthResponse
from app.routes.checkout_routes import checkout_router
from app.routes.customer_portal_routes import customer_portal_router
from app.routes.stripe_webhook_route import stripe_webhook_router
from app.utils.origin_policy import OriginPolicy, OriginPolicyMiddleware
from app.utils.security_headers import SecurityHeadersMiddleware
from app.utils.unhandled_errors import UnhandledErrorMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # before yield = code to run during startup
    configure_logging(settings.LOG_LEVEL)
    logger.info(f"🚀 Storefront checkout server running on port {settings.PORT}")
    logger.info(f"📍 Health check: http://localhost:{settings.PORT}/health")
    logger.info(f"💳 Stripe mode: {'configured' if settings.STRIPE_SECRET_KEY else 'NOT CONFIGURED'}")
    logger.info(f"🌐 CORS enabled for: {settings.FRONTEND_URL}")

    yield
    # after yield = code to run during shutdown
    logger.info("👋 Storefront checkout server stopped")


app = FastAPI(title="Storefront Checkout API", version="1.0.0", lifespan=lifespan)


# ######################################################################################################################
# Global exception handlers: every error leaves as {"error": <message>, "type": <tag>}
# ######################################################################################################################


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render our own errors with their type tag, and framework errors (unknown route etc.) generically"""
    if isinstance(exc, CheckoutAPIError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail, "type": exc.error_type})

    if exc.status_code == 404:
        return JSONResponse(status_code=404, content={"error": "Endpoint not found", "type": "not_found"})

    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail), "type": "http_error"}, headers=exc.headers)


# will apply across the entire application, catching validation errors from: Request body, Query parameters, Path params, etc.
@app.exception_handler(RequestValidationError)
async def custom_request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle validation errors"""
    logger.warning(f"Request validation failed for {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"error": "Validation error", "type": "validation_error", "errors": jsonable_encoder(exc.errors())},
    )


# ######################################################################################################################
# Middleware (the last one added runs first on the way in)
# ######################################################################################################################

# innermost: turns unexpected exceptions into the 500 envelope before CORS and security headers are applied
app.add_middleware(UnhandledErrorMiddleware)
app.add_middleware(
    OriginPolicyMiddleware,
    policy=OriginPolicy(frontend_url=settings.FRONTEND_URL, deployed_origins=settings.DEPLOYED_FRONTEND_ORIGINS),
)
# outermost: CORS rejections get the security headers too
app.add_middleware(SecurityHeadersMiddleware)


# Include routers
app.include_router(checkout_router)
app.include_router(stripe_webhook_router)
app.include_router(customer_portal_router)


@app.get("/health", response_model=HealthResponse)
async def health(app_settings: Settings = Depends(get_settings)):
    return HealthResponse(status="ok", timestamp=datetime.now(timezone.utc).isoformat(), env=app_settings.ENVIRONMENT)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT)
