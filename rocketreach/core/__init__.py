# Core module - pure domain logic, no I/O

from .errors import APIError, ConfigurationError, NotAvailableError, RocketReachError
from .org_chart import (
    MANAGEMENT_LEVELS,
    filter_direct_reports,
    infer_management_level,
    organize_employees,
)

__all__ = [
    "RocketReachError",
    "APIError",
    "ConfigurationError",
    "NotAvailableError",
    "MANAGEMENT_LEVELS",
    "infer_management_level",
    "organize_employees",
    "filter_direct_reports",
]
