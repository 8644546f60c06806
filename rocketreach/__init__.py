"""
RocketReach API client.

    import rocketreach

    client = rocketreach.new("your_api_key")
    response = client.get_company_tech_stack("example.com")
"""

from .api.client import APIConfig, APIResponse, APIStatus
from .client import BulkLookupOptions, RocketReach, new
from .core.errors import APIError, ConfigurationError, NotAvailableError, RocketReachError

__version__ = "0.1.0"

__all__ = [
    "RocketReach",
    "new",
    "BulkLookupOptions",
    "APIConfig",
    "APIResponse",
    "APIStatus",
    "RocketReachError",
    "APIError",
    "ConfigurationError",
    "NotAvailableError",
]
