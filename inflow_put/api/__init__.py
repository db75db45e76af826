"""HTTP transport for the inFlow Inventory API."""

from .inflow_client import InflowClient, get, get_default_client, get_one, put, set_default_client

__all__ = [
    "InflowClient",
    "get",
    "get_default_client",
    "get_one",
    "put",
    "set_default_client",
]
