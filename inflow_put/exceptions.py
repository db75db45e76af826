"""Error types raised by inflow-put."""
from typing import List


class InflowPutError(Exception):
    """Base exception for inflow-put errors."""


class MissingRequiredFieldsError(InflowPutError):
    """Payload lacks fields required for the requested mode.

    Raised by the payload builder before any request is sent, so it never
    results in a partial write.
    """

    def __init__(self, mode: str, missing: List[str]):
        self.mode = mode
        self.missing = list(missing)
        super().__init__(
            f"Missing required fields for {mode}: {', '.join(self.missing)}"
        )


class InflowApiError(InflowPutError):
    """Non-2xx response from the inFlow API."""

    def __init__(self, message: str, status_code: int = 0, response_body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body
