"""Constraint tables for inFlow entities, keyed by wire field name."""
from types import MappingProxyType

from ..builder.constraints import EntityConstraints, NestedIdField, RequiredFields

SERVER_OWNED = frozenset({"timestamp", "lastModifiedDateTime", "lastModifiedById"})


CUSTOMER_CONSTRAINTS = EntityConstraints(
    read_only=SERVER_OWNED,
    immutable=frozenset({"customerId"}),
    required=RequiredFields(
        create=("customerId", "name"),
        update=("customerId",),
    ),
    defaults=MappingProxyType({"isActive": True}),
    nested_with_ids=(NestedIdField("addresses", "customerAddressId"),),
)

VENDOR_CONSTRAINTS = EntityConstraints(
    read_only=SERVER_OWNED,
    immutable=frozenset({"vendorId"}),
    required=RequiredFields(
        create=("vendorId", "name"),
        update=("vendorId",),
    ),
    defaults=MappingProxyType({"isActive": True}),
    nested_with_ids=(
        NestedIdField("addresses", "vendorAddressId"),
        NestedIdField("vendorItems", "vendorItemId"),
    ),
)

PRODUCT_CONSTRAINTS = EntityConstraints(
    read_only=SERVER_OWNED | {"totalQuantityOnHand"},
    immutable=frozenset({"productId"}),
    required=RequiredFields(
        create=("productId", "name", "itemType"),
        update=("productId",),
    ),
    defaults=MappingProxyType({"isActive": True, "itemType": "stockedProduct"}),
    nested_with_ids=(NestedIdField("productBarcodes", "productBarcodeId"),),
)
