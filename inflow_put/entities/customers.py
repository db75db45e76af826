"""Customer PUT operations."""
from typing import Any, Optional, Union

from ..api.inflow_client import InflowClient
from ..builder import Mode
from ..schema import CUSTOMER_CONSTRAINTS, CustomerPUT
from .base import EntityData, EntityOperation

CUSTOMERS = EntityOperation(
    name="customer",
    path="/customers",
    id_field="customerId",
    schema=CustomerPUT,
    constraints=CUSTOMER_CONSTRAINTS,
)


def put_customer(
    data: EntityData,
    mode: Union[Mode, str] = Mode.UPDATE,
    client: Optional[InflowClient] = None,
) -> Optional[Any]:
    """
    Create or update a customer

    Args:
        data: Customer data (validated against CustomerPUT)
        mode: Mode.CREATE for a new customer, Mode.UPDATE for an existing one

    Returns:
        API response (customer data) or None for 204 responses
    """
    return CUSTOMERS.put(data, mode, client=client)
