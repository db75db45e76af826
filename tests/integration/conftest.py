"""
Fixtures for tests against the real inFlow API

inFlow does not delete entities, so everything created here is
deactivated afterwards.
"""
import pytest

from inflow_put.api.inflow_client import InflowClient
from inflow_put.config import InflowApiConfig
from inflow_put.exceptions import InflowApiError


@pytest.fixture(scope="module")
def real_client():
    return InflowClient(InflowApiConfig.from_env())


@pytest.fixture
def created(real_client):
    """Collects (entity_operation, id) pairs and deactivates them on teardown"""
    entities = []
    yield entities
    for operation, entity_id in entities:
        try:
            operation.deactivate(entity_id, client=real_client)
        except InflowApiError:
            # cleanup failures must not mask the test result
            pass
