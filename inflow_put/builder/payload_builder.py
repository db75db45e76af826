"""
Payload Builder - Shapes entity data into inFlow PUT request bodies

Steps, in order:
- Strip read-only fields (top level only)
- Apply defaults on create (caller values win)
- Check required fields for the mode, raising before anything is sent

No I/O, no coercion: the returned payload is exactly the caller's data minus
read-only fields, plus create defaults.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Union

from ..exceptions import MissingRequiredFieldsError
from .constraints import EntityConstraints, Mode

logger = logging.getLogger(__name__)


def strip_read_only_fields(
    data: Mapping[str, Any],
    read_only_fields: Iterable[str],
) -> Dict[str, Any]:
    """
    Return a copy of data without the given top-level keys

    Nested objects and arrays are not inspected.
    """
    excluded = set(read_only_fields)
    return {key: value for key, value in data.items() if key not in excluded}


def check_required_fields(
    data: Mapping[str, Any],
    required_fields: Iterable[str],
) -> List[str]:
    """
    Check if required fields are present

    Returns:
        Names from required_fields whose value is absent or None, in order.
        Falsy values such as "", 0 and False count as present.
    """
    return [field for field in required_fields if data.get(field) is None]


def build_payload(
    data: Mapping[str, Any],
    constraints: EntityConstraints,
    mode: Union[Mode, str],
) -> Dict[str, Any]:
    """
    Build a payload for a PUT request

    Args:
        data: Entity data keyed by wire field name
        constraints: Field rules for the entity kind
        mode: Mode.CREATE or Mode.UPDATE (or their string values)

    Returns:
        New payload dictionary ready to send

    Raises:
        MissingRequiredFieldsError: If a field required for mode is missing
    """
    mode = Mode.coerce(mode)

    payload = strip_read_only_fields(data, constraints.read_only)
    stripped = len(data) - len(payload)

    # Defaults only on create; updates send exactly what the caller gave
    if mode is Mode.CREATE and constraints.defaults:
        payload = {**constraints.defaults, **payload}

    missing = check_required_fields(payload, constraints.required.for_mode(mode))
    if missing:
        raise MissingRequiredFieldsError(mode.value, missing)

    logger.debug(
        f"Built {mode.value} payload: {len(payload)} fields, "
        f"{stripped} read-only stripped"
    )
    return payload


def collect_nested_ids(
    payload: Mapping[str, Any],
    constraints: EntityConstraints,
) -> Dict[str, List[Any]]:
    """
    Collect identifiers of nested records declared in nested_with_ids

    Only list-valued fields are read; records without the id field are
    skipped. Useful to correlate nested records after a write.

    Returns:
        {field: [ids]} for each declared field present in payload
    """
    result: Dict[str, List[Any]] = {}

    for nested in constraints.nested_with_ids:
        records = payload.get(nested.field)
        if not isinstance(records, list):
            continue

        result[nested.field] = [
            record[nested.id_field]
            for record in records
            if isinstance(record, Mapping) and record.get(nested.id_field) is not None
        ]

    return result


class PayloadBuilder:
    """
    Builds payloads for one entity kind

    Usage:
    ```python
    builder = PayloadBuilder(CUSTOMER_CONSTRAINTS)
    payload = builder.build({"customerId": cid, "name": "Acme"}, Mode.CREATE)
    ```
    """

    def __init__(self, constraints: EntityConstraints):
        self.constraints = constraints

    def build(self, data: Mapping[str, Any], mode: Union[Mode, str]) -> Dict[str, Any]:
        """Build a payload using this builder's constraints"""
        return build_payload(data, self.constraints, mode)

    def nested_ids(self, payload: Mapping[str, Any]) -> Dict[str, List[Any]]:
        """Identifiers of nested records in payload"""
        return collect_nested_ids(payload, self.constraints)
