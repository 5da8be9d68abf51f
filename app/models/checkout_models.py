from pydantic import BaseModel, ConfigDict, Field
from decimal import Decimal
from typing import List, Optional


# the frontend cart speaks camelCase, so wire names are set through aliases
class CartProduct(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: Optional[str] = None
    category: Optional[str] = None
    price: Decimal  # major units, e.g. 19.99
    image_url: Optional[str] = Field(default=None, alias="imageUrl")


class CartItem(BaseModel):
    product: CartProduct
    quantity: int  # passed through to Stripe as-is


class CheckoutSessionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    items: List[CartItem]
    customer_email: str = Field(alias="customerEmail")
    success_url: str = Field(alias="successUrl")
    cancel_url: str = Field(alias="cancelUrl")


class CheckoutSessionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str
    session_id: str = Field(alias="sessionId")


class SessionLineItem(BaseModel):
    description: Optional[str] = None
    quantity: Optional[int] = None
    amount_total: Optional[float] = None


class SessionSummaryResponse(BaseModel):
    id: str
    payment_status: Optional[str] = None
    customer_email: Optional[str] = None
    amount_total: Optional[float] = None
    currency: Optional[str] = None
    created: Optional[int] = None
    line_items: List[SessionLineItem] = []


class OrderStatusResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: Optional[str] = None
    customer_email: Optional[str] = Field(default=None, alias="customerEmail")
    amount_total: Optional[float] = Field(default=None, alias="amountTotal")
    created: Optional[int] = None


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    env: str
