"""
Entity operations - validate, build and PUT one inFlow entity kind

One EntityOperation instance per entity kind. Entity kinds differ only in
their schema, constraints and endpoint path; there is no per-entity code.
"""

import logging
from dataclasses import dataclass, field as dataclass_field
from typing import Any, Dict, Mapping, Optional, Type, Union

from pydantic import BaseModel

from ..api.inflow_client import InflowClient, get_default_client
from ..builder import EntityConstraints, Mode, PayloadBuilder
from ..exceptions import InflowApiError

logger = logging.getLogger(__name__)

EntityData = Union[Mapping[str, Any], BaseModel]


@dataclass
class EntityOperation:
    """
    PUT operations for one entity kind

    Usage:
    ```python
    CUSTOMERS.put({"customerId": cid, "name": "Acme"}, Mode.CREATE)
    CUSTOMERS.get(cid)
    ```
    """

    name: str
    path: str  # collection endpoint, e.g. "/customers"
    id_field: str  # wire name of the identifier, e.g. "customerId"
    schema: Type[BaseModel]
    constraints: EntityConstraints
    builder: PayloadBuilder = dataclass_field(init=False, repr=False)

    def __post_init__(self):
        self.builder = PayloadBuilder(self.constraints)

    def validate(self, data: EntityData) -> Dict[str, Any]:
        """
        Validate data against the entity schema

        Returns:
            Wire dictionary with only the fields the caller set

        Raises:
            pydantic.ValidationError: If data does not match the schema
        """
        if isinstance(data, BaseModel):
            data = data.model_dump(by_alias=True, exclude_unset=True)
        validated = self.schema.model_validate(data)
        return validated.model_dump(by_alias=True, exclude_unset=True, mode="json")

    def build(self, data: EntityData, mode: Union[Mode, str] = Mode.UPDATE) -> Dict[str, Any]:
        """Validate data and shape it into a PUT payload"""
        return self.builder.build(self.validate(data), mode)

    def put(
        self,
        data: EntityData,
        mode: Union[Mode, str] = Mode.UPDATE,
        client: Optional[InflowClient] = None,
    ) -> Optional[Any]:
        """
        Create or update an entity

        Args:
            data: Entity data (mapping or schema instance)
            mode: Mode.CREATE for a new entity, Mode.UPDATE for an existing one
            client: Transport to use (defaults to the environment client)

        Returns:
            API response, or None for 204 responses
        """
        mode = Mode.coerce(mode)
        payload = self.build(data, mode)

        client = client or get_default_client()
        response = client.put(self.path, payload)

        logger.info(f"PUT {self.name} ({mode.value}, {len(payload)} fields)")
        return response

    def get(
        self,
        entity_id: str,
        include: Optional[str] = None,
        client: Optional[InflowClient] = None,
    ) -> Any:
        """Fetch one entity by id"""
        client = client or get_default_client()
        return client.get_one(self.path, entity_id, include=include)

    def exists(self, entity_id: str, client: Optional[InflowClient] = None) -> bool:
        """Check if an entity exists; only a 404 counts as absent"""
        try:
            self.get(entity_id, client=client)
        except InflowApiError as e:
            if e.status_code == 404:
                return False
            raise
        return True

    def deactivate(self, entity_id: str, client: Optional[InflowClient] = None) -> Optional[Any]:
        """Set isActive to False (inFlow does not delete entities)"""
        return self.put({self.id_field: entity_id, "isActive": False}, Mode.UPDATE, client=client)
