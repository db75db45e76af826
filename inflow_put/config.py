"""Application configuration."""
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_BASE_URL = "https://cloudapi.inflowinventory.com"
DEFAULT_API_VERSION = "2024-10-01"


@dataclass
class InflowApiConfig:
    """inFlow Inventory API configuration."""

    base_url: str = DEFAULT_BASE_URL
    api_key: str = ""
    company_id: Optional[str] = None
    api_version: str = DEFAULT_API_VERSION
    timeout: int = 30

    @classmethod
    def from_env(cls) -> "InflowApiConfig":
        """Load config from environment variables."""
        return cls(
            base_url=os.getenv("INFLOW_API_URL", DEFAULT_BASE_URL),
            api_key=os.getenv("INFLOW_API_KEY", ""),
            company_id=os.getenv("INFLOW_COMPANY_ID") or None,
            api_version=os.getenv("INFLOW_API_VERSION", DEFAULT_API_VERSION),
            timeout=int(os.getenv("INFLOW_TIMEOUT", "30")),
        )

    @property
    def company_url(self) -> str:
        """Base URL for company-scoped API calls."""
        if not self.company_id:
            raise ValueError("company_id must be set (INFLOW_COMPANY_ID)")
        return f"{self.base_url.rstrip('/')}/{self.company_id}"
