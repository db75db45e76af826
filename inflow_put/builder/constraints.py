"""
Entity constraints - declarative field rules for a remote entity kind

Each entity kind (customer, vendor, product) gets one EntityConstraints
instance describing which fields the server owns, which are required per
mode and which defaults apply on create. The builder reads these tables and
never holds entity-specific logic itself.
"""

from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from typing import Any, FrozenSet, Mapping, Optional, Tuple, Union


class Mode(str, Enum):
    """Upsert mode of a PUT call"""
    CREATE = "create"
    UPDATE = "update"

    @classmethod
    def coerce(cls, value: Union["Mode", str]) -> "Mode":
        """Accept a Mode member or its string value"""
        return value if isinstance(value, cls) else cls(value)


@dataclass(frozen=True)
class RequiredFields:
    """Required field names per mode, in reporting order"""
    create: Tuple[str, ...] = ()
    update: Tuple[str, ...] = ()

    def for_mode(self, mode: Union[Mode, str]) -> Tuple[str, ...]:
        return self.create if Mode.coerce(mode) is Mode.CREATE else self.update


@dataclass(frozen=True)
class NestedIdField:
    """Nested collection whose records carry their own identifier"""
    field: str  # e.g. "addresses"
    id_field: str  # e.g. "vendorAddressId"


@dataclass(frozen=True)
class EntityConstraints:
    """
    Field rules for one entity kind

    Attributes:
        read_only: Server-computed fields, never sent
        immutable: Fields settable on create only (informational, not enforced)
        required: Required fields for create and update
        defaults: Values applied on create for fields the caller left out
        nested_with_ids: Nested collections with per-record identifiers
    """
    read_only: FrozenSet[str] = frozenset()
    immutable: FrozenSet[str] = frozenset()
    required: RequiredFields = dataclass_field(default_factory=RequiredFields)
    defaults: Optional[Mapping[str, Any]] = None
    nested_with_ids: Tuple[NestedIdField, ...] = ()
