"""
Error Handling Module
---------------------
Exceptions for callers who prefer raising over inspecting APIResponse.

Two tiers:
- APIError: the request itself failed (network, timeout, non-2xx, bad JSON)
- NotAvailableError: the request succeeded but the requested fact is absent
"""

from typing import Any, Optional


class RocketReachError(Exception):
    """Base class for all client errors."""


class ConfigurationError(RocketReachError):
    """Client could not be configured (e.g. missing API key)."""


class APIError(RocketReachError):
    """
    A transport-level failure.

    Carries the failed APIResponse so status and status_code stay reachable.
    """

    def __init__(self, message: str, response: Optional[Any] = None):
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> int:
        return getattr(self.response, "status_code", 0)

    def __repr__(self) -> str:
        status = getattr(getattr(self.response, "status", None), "name", "-")
        return f"APIError({status}: {self})"


class NotAvailableError(RocketReachError):
    """A successful lookup lacked the requested field."""
