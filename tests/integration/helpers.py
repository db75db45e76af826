"""Helpers for tests against the real inFlow API."""
import os
import uuid
from datetime import datetime, timezone

import pytest

requires_api = pytest.mark.skipif(
    not (os.getenv("INFLOW_API_KEY") and os.getenv("INFLOW_COMPANY_ID")),
    reason="INFLOW_API_KEY / INFLOW_COMPANY_ID not set",
)


def generate_id() -> str:
    """New id for entity creation"""
    return str(uuid.uuid4())


def unique_name(base: str) -> str:
    """Name prefixed with TEST_ and a timestamp so test data is easy to find"""
    return f"TEST_{datetime.now(timezone.utc).strftime('%Y%m%dT%H%M')}_{base}"
