"""
Schema Module

PUT schemas and constraint tables for inFlow entities.
"""

from .constraints import CUSTOMER_CONSTRAINTS, PRODUCT_CONSTRAINTS, VENDOR_CONSTRAINTS
from .models import (
    Address,
    CustomerAddress,
    CustomerPUT,
    ProductBarcode,
    ProductPUT,
    VendorAddress,
    VendorItem,
    VendorPUT,
)

__all__ = [
    "CUSTOMER_CONSTRAINTS",
    "PRODUCT_CONSTRAINTS",
    "VENDOR_CONSTRAINTS",
    "Address",
    "CustomerAddress",
    "CustomerPUT",
    "ProductBarcode",
    "ProductPUT",
    "VendorAddress",
    "VendorItem",
    "VendorPUT",
]
