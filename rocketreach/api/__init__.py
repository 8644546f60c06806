# API module - HTTP transport
# One request in, one APIResponse out

from .client import APIClient, APIConfig, APIResponse, APIStatus

__all__ = ["APIClient", "APIConfig", "APIResponse", "APIStatus"]
