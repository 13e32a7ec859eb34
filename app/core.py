from typing import Union, Dict, Any

from pydantic import BaseModel, StrictBool, StrictFloat, StrictInt, StrictStr

INVALID_PRODUCT_MESSAGE = (
    "Invalid product data. Ensure all fields are correct: name (string), "
    "description (string), price (number), category (string), inStock (boolean)."
)
UNAUTHORIZED_MESSAGE = "Unauthorized: Invalid or missing API key"
PRODUCT_NOT_FOUND_MESSAGE = "Product not found"
NOT_FOUND_MESSAGE = "Not Found"
INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class ProductIn(BaseModel):
    # strict types: "25" is not a price and 1 is not a boolean
    name: StrictStr
    description: StrictStr
    price: Union[StrictInt, StrictFloat]
    category: StrictStr
    inStock: StrictBool


def _product_fields(p: ProductIn) -> Dict[str, Any]:
    # only the declared fields reach the store, a body "id" is dropped here
    return p.model_dump(exclude_unset=True)
