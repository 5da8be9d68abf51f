from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class CustomerPortalRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    customer_email: str = Field(alias="customerEmail")
    return_url: Optional[str] = Field(default=None, alias="returnUrl")


class CustomerPortalResponse(BaseModel):
    url: str
