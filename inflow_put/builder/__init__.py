"""
Payload Builder Module

Shapes entity data into inFlow PUT payloads according to per-entity
constraints:
- Read-only field stripping
- Create-only defaults
- Required field checks per mode
"""

from .constraints import EntityConstraints, Mode, NestedIdField, RequiredFields
from .payload_builder import (
    PayloadBuilder,
    build_payload,
    check_required_fields,
    collect_nested_ids,
    strip_read_only_fields,
)

__all__ = [
    "EntityConstraints",
    "Mode",
    "NestedIdField",
    "RequiredFields",
    "PayloadBuilder",
    "build_payload",
    "check_required_fields",
    "collect_nested_ids",
    "strip_read_only_fields",
]
