"""PUT schemas for inFlow entities.

Attributes are snake_case in Python and camelCase on the wire; models accept
either. Unknown fields are dropped. Server-owned fields (timestamp,
lastModified*) are accepted so fetched records can be sent back; the payload
builder strips them.
"""
from datetime import datetime
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class InflowModel(BaseModel):
    """Base for inFlow wire models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Address(InflowModel):
    """Postal address."""

    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    remarks: Optional[str] = None
    address_type: Optional[str] = None


class CustomerAddress(InflowModel):
    customer_address_id: str
    name: Optional[str] = None
    address: Optional[Address] = None
    timestamp: Optional[str] = None


class VendorAddress(InflowModel):
    vendor_address_id: str
    name: Optional[str] = None
    address: Optional[Address] = None
    timestamp: Optional[str] = None


class VendorItem(InflowModel):
    """Product as supplied by a vendor."""

    vendor_item_id: str
    product_id: str
    vendor_item_code: Optional[str] = None
    cost: Optional[Decimal] = None
    lead_time_days: Optional[int] = Field(default=None, ge=0)
    timestamp: Optional[str] = None


class ProductBarcode(InflowModel):
    product_barcode_id: str
    barcode: str = Field(..., min_length=1)
    line_num: Optional[int] = None
    timestamp: Optional[str] = None


class CustomerPUT(InflowModel):
    """Customer create/update body."""

    customer_id: Optional[str] = None
    name: Optional[str] = Field(default=None, min_length=1)
    contact_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    fax: Optional[str] = None
    website: Optional[str] = None
    remarks: Optional[str] = None
    is_active: Optional[bool] = None
    discount: Optional[Decimal] = None
    default_payment_terms_id: Optional[str] = None
    pricing_scheme_id: Optional[str] = None
    taxing_scheme_id: Optional[str] = None
    default_location_id: Optional[str] = None
    default_billing_address_id: Optional[str] = None
    default_shipping_address_id: Optional[str] = None
    addresses: Optional[List[CustomerAddress]] = None
    # server-owned
    timestamp: Optional[str] = None
    last_modified_date_time: Optional[datetime] = None
    last_modified_by_id: Optional[str] = None


class VendorPUT(InflowModel):
    """Vendor create/update body."""

    vendor_id: Optional[str] = None
    name: Optional[str] = Field(default=None, min_length=1)
    contact_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    fax: Optional[str] = None
    website: Optional[str] = None
    remarks: Optional[str] = None
    is_active: Optional[bool] = None
    discount: Optional[Decimal] = None
    currency_id: Optional[str] = None
    default_payment_terms_id: Optional[str] = None
    default_address_id: Optional[str] = None
    addresses: Optional[List[VendorAddress]] = None
    vendor_items: Optional[List[VendorItem]] = None
    # server-owned
    timestamp: Optional[str] = None
    last_modified_date_time: Optional[datetime] = None
    last_modified_by_id: Optional[str] = None


class ProductPUT(InflowModel):
    """Product create/update body."""

    product_id: Optional[str] = None
    name: Optional[str] = Field(default=None, min_length=1)
    sku: Optional[str] = None
    description: Optional[str] = None
    item_type: Optional[Literal["stockedProduct", "nonstockedProduct", "service"]] = None
    is_active: Optional[bool] = None
    category_id: Optional[str] = None
    default_image_id: Optional[str] = None
    remarks: Optional[str] = None
    standard_uom_name: Optional[str] = None
    is_manufacturable: Optional[bool] = None
    product_barcodes: Optional[List[ProductBarcode]] = None
    # server-owned
    timestamp: Optional[str] = None
    last_modified_date_time: Optional[datetime] = None
    last_modified_by_id: Optional[str] = None
    total_quantity_on_hand: Optional[Decimal] = None
