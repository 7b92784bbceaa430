from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class CheckoutSessionIn(BaseModel):
    model_config = ConfigDict(extra="ignore")
    slug: StrictStr = Field(..., min_length=1)
    quantity: StrictInt = Field(1, ge=1)


class SessionLookup(BaseModel):
    status: Literal["ok", "missing", "error"]
    customer_email: Optional[str] = None
    payment_status: Optional[str] = None
