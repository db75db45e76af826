"""inFlow Inventory API client."""
import logging
from typing import Any, Dict, Optional

import requests

from ..config import InflowApiConfig
from ..exceptions import InflowApiError

logger = logging.getLogger(__name__)


class InflowClient:
    """
    Client for the inFlow Inventory API.

    Thin transport: one HTTP call per method, no retries or pagination.
    Non-2xx responses raise InflowApiError.
    """

    def __init__(self, config: InflowApiConfig, session: Optional[requests.Session] = None):
        """Initialize client."""
        self.config = config
        self.base_url = config.company_url
        self.session = session or requests.Session()

        self.session.headers.update({
            "Accept": f"application/json;version={config.api_version}",
            "Content-Type": "application/json",
        })
        if config.api_key:
            self.session.headers.update({"Authorization": f"Bearer {config.api_key}"})

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET a resource and return its parsed JSON."""
        url = f"{self.base_url}{path}"
        logger.debug(f"GET {path}")
        response = self.session.get(url, params=params, timeout=self.config.timeout)
        return self._handle_response("GET", path, response)

    def get_one(self, path: str, entity_id: str, include: Optional[str] = None) -> Any:
        """GET a single entity by id, optionally with related collections."""
        params = {"include": include} if include else None
        return self.get(f"{path}/{entity_id}", params=params)

    def put(self, path: str, body: Dict[str, Any]) -> Optional[Any]:
        """
        PUT a body to a collection endpoint.

        Returns:
            Parsed JSON response, or None for 204 No Content
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"PUT {path} ({len(body)} fields)")
        response = self.session.put(url, json=body, timeout=self.config.timeout)
        return self._handle_response("PUT", path, response)

    @staticmethod
    def _handle_response(method: str, path: str, response: requests.Response) -> Optional[Any]:
        """Raise on non-2xx, otherwise parse the body."""
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            logger.error(f"{method} {path} failed with HTTP {response.status_code}")
            raise InflowApiError(
                f"{method} {path} failed with HTTP {response.status_code}",
                status_code=response.status_code,
                response_body=response.text,
            ) from e

        if response.status_code == 204 or not response.content:
            return None
        return response.json()


_default_client: Optional[InflowClient] = None


def get_default_client() -> InflowClient:
    """Client built from environment configuration, created on first use."""
    global _default_client
    if _default_client is None:
        _default_client = InflowClient(InflowApiConfig.from_env())
    return _default_client


def set_default_client(client: Optional[InflowClient]) -> None:
    """Replace (or with None, reset) the module default client."""
    global _default_client
    _default_client = client


def get(path: str, params: Optional[Dict[str, Any]] = None) -> Any:
    """GET with the default client."""
    return get_default_client().get(path, params=params)


def put(path: str, body: Dict[str, Any]) -> Optional[Any]:
    """PUT with the default client."""
    return get_default_client().put(path, body)


def get_one(path: str, entity_id: str, include: Optional[str] = None) -> Any:
    """GET a single entity with the default client."""
    return get_default_client().get_one(path, entity_id, include=include)
