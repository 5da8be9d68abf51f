from pydantic import BaseModel
from datetime import datetime
from typing import Optional, Dict, Any, List


class StripeWebhookAckResponse(BaseModel):
    """Acknowledgment Stripe expects back; anything but 2xx triggers a redelivery"""

    received: bool = True


class OrderSummary(BaseModel):
    """Snapshot of a paid checkout session forwarded to the notification stub"""

    session_id: str
    customer_id: Optional[str] = None
    customer_email: Optional[str] = None
    customer_name: Optional[str] = None
    shipping_address: Optional[Dict[str, Any]] = None
    amount_total: Optional[float] = None
    currency: Optional[str] = None
    payment_status: Optional[str] = None
    created: Optional[datetime] = None
    items: List[Dict[str, Any]] = []
    metadata: Dict[str, Any] = {}
