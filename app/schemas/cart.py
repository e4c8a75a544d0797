from pydantic import BaseModel, ConfigDict, Field


class AddCartItemRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(alias="productId", gt=0)
    quantity: int = Field(default=1, ge=1)
