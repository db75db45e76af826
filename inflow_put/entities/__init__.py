"""Entity PUT operations."""

from .base import EntityOperation
from .customers import CUSTOMERS, put_customer
from .products import PRODUCTS, put_product
from .vendors import VENDORS, put_vendor

__all__ = [
    "EntityOperation",
    "CUSTOMERS",
    "PRODUCTS",
    "VENDORS",
    "put_customer",
    "put_product",
    "put_vendor",
]
