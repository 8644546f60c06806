"""
Search Query Builders
---------------------
Request bodies for the company and people search endpoints.

The remote API expects numeric bounds as single-element string lists and
parses location filters as a small query language, so the encodings here
are exact.
"""

from typing import Any, Dict, List, Optional, Union

from .org_chart import LEADERSHIP_LEVELS, MANAGEMENT_LEVELS

EMPLOYEE_PAGE_SIZE = 100

Number = Union[int, float, str]


def tech_query(technologies: List[str]) -> Dict[str, Any]:
    if not isinstance(technologies, list):
        raise TypeError("technologies must be a list")
    return {"query": {"techstack": technologies}}


def size_query(min_size: Number, max_size: Number) -> Dict[str, Any]:
    return {
        "query": {
            "company_size_min": [str(min_size)],
            "company_size_max": [str(max_size)],
        }
    }


def revenue_query(min_revenue: Number, max_revenue: Number) -> Dict[str, Any]:
    return {
        "query": {
            "company_revenue_min": [str(min_revenue)],
            "company_revenue_max": [str(max_revenue)],
        }
    }


def location_query(location: str, radius: Number, unit: str = "mi") -> Dict[str, Any]:
    """Proximity filter: '"<location>"::~<radius><unit>'."""
    return {"query": {"location": [f'"{location}"::~{radius}{unit}']}}


def employees_query(
    domain: str,
    management_levels: Optional[List[str]] = None,
    department: Optional[str] = None,
    page_size: Optional[int] = EMPLOYEE_PAGE_SIZE,
) -> Dict[str, Any]:
    """People search scoped to one employer."""
    query: Dict[str, Any] = {"current_employer": [domain]}
    if management_levels is not None:
        query["management_levels"] = list(management_levels)
    if department is not None:
        query["department"] = [department]

    body: Dict[str, Any] = {"query": query}
    if page_size is not None:
        body["page_size"] = page_size
    return body


def company_employees_query(domain: str) -> Dict[str, Any]:
    return employees_query(domain, management_levels=MANAGEMENT_LEVELS)


def department_query(domain: str, department: str) -> Dict[str, Any]:
    return employees_query(domain, department=department)


def leadership_query(domain: str) -> Dict[str, Any]:
    return employees_query(domain, management_levels=LEADERSHIP_LEVELS, page_size=None)
