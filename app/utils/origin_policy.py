from typing import Iterable, Optional
from urllib.parse import urlsplit
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Receive, Scope, Send
from app.custom_error import CorsOriginError
import logging

logger = logging.getLogger(__name__)

# logics explain:
# 1. requests without an Origin header (curl, mobile apps, Stripe's webhook calls) are always let through
# 2. any http(s)://localhost:<port> is allowed for local frontend development
# 3. the known deployed frontends plus the configured FRONTEND_URL are allowed
# 4. anything else is rejected with 403 before reaching a route handler


class OriginPolicy:
    LOCAL_SCHEMES = ("http", "https")
    LOCAL_HOST = "localhost"

    def __init__(self, frontend_url: Optional[str] = None, deployed_origins: Iterable[str] = ()):
        self.frontend_url = frontend_url
        self.deployed_origins = frozenset(deployed_origins)

    def _is_localhost(self, origin: str) -> bool:
        try:
            parts = urlsplit(origin)
        except ValueError:
            # e.g. "http://[broken" is not a parseable URL, so it cannot be localhost
            return False
        return parts.scheme in self.LOCAL_SCHEMES and parts.hostname == self.LOCAL_HOST

    def is_allowed(self, origin: Optional[str]) -> bool:
        if not origin:
            return True
        if self._is_localhost(origin):
            return True
        if origin in self.deployed_origins:
            return True
        return bool(self.frontend_url) and origin == self.frontend_url


class OriginPolicyMiddleware(CORSMiddleware):
    """Starlette's CORSMiddleware driven by an OriginPolicy, rejecting disallowed origins outright"""

    def __init__(self, app: ASGIApp, policy: OriginPolicy):
        super().__init__(app, allow_origins=(), allow_credentials=True, allow_methods=["*"], allow_headers=["*"])
        self.policy = policy

    def is_allowed_origin(self, origin: str) -> bool:
        return self.policy.is_allowed(origin)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            origin = dict(scope["headers"]).get(b"origin")
            if origin is not None and not self.policy.is_allowed(origin.decode("latin-1")):
                rejection = CorsOriginError(origin.decode("latin-1"))
                logger.warning(f"🚫 {rejection.detail} (path {scope.get('path')})")
                response = JSONResponse(status_code=rejection.status_code, content={"error": rejection.detail, "type": rejection.error_type})
                await response(scope, receive, send)
                return

        await super().__call__(scope, receive, send)
