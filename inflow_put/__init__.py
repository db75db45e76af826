"""
inflow-put: write local entity changes back to the inFlow Inventory API

Entity operations validate caller data against a PUT schema, shape it with
the entity's constraints (read-only stripping, create defaults, required
fields) and send it with an idempotent PUT.
"""

from .api.inflow_client import InflowClient, get, get_one, put
from .builder import (
    EntityConstraints,
    Mode,
    NestedIdField,
    PayloadBuilder,
    RequiredFields,
    build_payload,
    check_required_fields,
    collect_nested_ids,
    strip_read_only_fields,
)
from .config import InflowApiConfig
from .entities import (
    CUSTOMERS,
    PRODUCTS,
    VENDORS,
    EntityOperation,
    put_customer,
    put_product,
    put_vendor,
)
from .exceptions import InflowApiError, InflowPutError, MissingRequiredFieldsError
from .schema import CustomerPUT, ProductPUT, VendorPUT

__version__ = "0.1.0"

__all__ = [
    "put_customer",
    "put_vendor",
    "put_product",
    "CUSTOMERS",
    "VENDORS",
    "PRODUCTS",
    "EntityOperation",
    "build_payload",
    "strip_read_only_fields",
    "check_required_fields",
    "collect_nested_ids",
    "PayloadBuilder",
    "EntityConstraints",
    "RequiredFields",
    "NestedIdField",
    "Mode",
    "CustomerPUT",
    "VendorPUT",
    "ProductPUT",
    "InflowPutError",
    "MissingRequiredFieldsError",
    "InflowApiError",
    "InflowClient",
    "InflowApiConfig",
    "get",
    "get_one",
    "put",
]
