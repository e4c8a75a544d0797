from typing import Any, Dict
from pydantic import BaseModel, ConfigDict, Field, constr


class CheckoutRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: constr(strip_whitespace=True, min_length=1, max_length=64) = Field(alias="sessionId")
    shipping_address: Dict[str, Any] = Field(alias="shippingAddress")
    payment_method: constr(strip_whitespace=True, min_length=1, max_length=50) = Field(alias="paymentMethod")
