from fastapi import HTTPException, status


class CheckoutAPIError(HTTPException):
    """HTTPException carrying the short machine-readable type tag sent back as {error, type}"""

    def __init__(self, status_code: int, error_detail_message: str, error_type: str):
        super().__init__(status_code=status_code, detail=error_detail_message)
        self.error_type = error_type


class CheckoutSessionCreationError(CheckoutAPIError):
    def __init__(self, error_detail_message: str):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, error_detail_message, "checkout_session_creation_failed")


class SessionNotFoundError(CheckoutAPIError):
    def __init__(self):
        super().__init__(status.HTTP_404_NOT_FOUND, "Session not found", "session_not_found")


class OrderNotFoundError(CheckoutAPIError):
    def __init__(self):
        super().__init__(status.HTTP_404_NOT_FOUND, "Order not found", "order_not_found")


class CustomerNotFoundError(CheckoutAPIError):
    def __init__(self):
        super().__init__(status.HTTP_404_NOT_FOUND, "Customer not found", "customer_not_found")


class PortalCreationError(CheckoutAPIError):
    def __init__(self, error_detail_message: str):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, error_detail_message, "portal_creation_failed")


class WebhookError(CheckoutAPIError):
    def __init__(self, error_detail_message: str):
        super().__init__(status.HTTP_400_BAD_REQUEST, f"Webhook Error: {error_detail_message}", "webhook_signature_invalid")


class CorsOriginError(CheckoutAPIError):
    def __init__(self, origin: str):
        super().__init__(status.HTTP_403_FORBIDDEN, f"Origin {origin} not allowed by CORS", "cors_origin_rejected")
