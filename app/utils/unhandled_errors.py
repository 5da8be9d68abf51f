from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
import logging

logger = logging.getLogger(__name__)


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Last resort for anything a route did not turn into a CheckoutAPIError.

    Registered innermost so the 500 envelope still passes through the CORS and security header middleware.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(f"❌ Unhandled error on {request.method} {request.url.path}: {str(e)}", exc_info=e)
            return JSONResponse(status_code=500, content={"error": "Internal server error", "type": "internal_server_error"})
