"""Vendor PUT operations."""
from typing import Any, Optional, Union

from ..api.inflow_client import InflowClient
from ..builder import Mode
from ..schema import VENDOR_CONSTRAINTS, VendorPUT
from .base import EntityData, EntityOperation

VENDORS = EntityOperation(
    name="vendor",
    path="/vendors",
    id_field="vendorId",
    schema=VendorPUT,
    constraints=VENDOR_CONSTRAINTS,
)


def put_vendor(
    data: EntityData,
    mode: Union[Mode, str] = Mode.UPDATE,
    client: Optional[InflowClient] = None,
) -> Optional[Any]:
    """Create or update a vendor. Returns the API response, or None for 204."""
    return VENDORS.put(data, mode, client=client)
