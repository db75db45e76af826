"""Product PUT operations."""
from typing import Any, Optional, Union

from ..api.inflow_client import InflowClient
from ..builder import Mode
from ..schema import PRODUCT_CONSTRAINTS, ProductPUT
from .base import EntityData, EntityOperation

PRODUCTS = EntityOperation(
    name="product",
    path="/products",
    id_field="productId",
    schema=ProductPUT,
    constraints=PRODUCT_CONSTRAINTS,
)


def put_product(
    data: EntityData,
    mode: Union[Mode, str] = Mode.UPDATE,
    client: Optional[InflowClient] = None,
) -> Optional[Any]:
    """
    Create or update a product

    Args:
        data: Product data (validated against ProductPUT)
        mode: Mode.CREATE for a new product, Mode.UPDATE for an existing one

    Returns:
        API response (product data) or None for 204 responses
    """
    return PRODUCTS.put(data, mode, client=client)
