"""
Organization Structure
----------------------
Heuristic management levels from job titles, and the groupings built on them.
Pure functions, no I/O.
"""

from typing import Any, Dict, List, Mapping, Optional

C_LEVEL = "C-Level"
VP = "VP"
DIRECTOR = "Director"
MANAGER = "Manager"
INDIVIDUAL_CONTRIBUTOR = "Individual Contributor"

# Highest first; a larger index is a lower level
MANAGEMENT_LEVELS: List[str] = [C_LEVEL, VP, DIRECTOR, MANAGER, INDIVIDUAL_CONTRIBUTOR]
LEADERSHIP_LEVELS: List[str] = [C_LEVEL, VP]

# Checked in order, first match wins
_TITLE_RULES = [
    (("CEO", "CTO", "CFO", "COO", "Chief"), C_LEVEL),
    (("VP",), VP),
    (("Director",), DIRECTOR),
    (("Manager",), MANAGER),
]

Employee = Mapping[str, Any]
OrgChart = Dict[str, Dict[Optional[str], List[Employee]]]


def infer_management_level(employee: Employee) -> str:
    """Classify an employee by the keywords in their current_title."""
    title = employee.get("current_title")
    if not isinstance(title, str):
        title = ""
    for keywords, level in _TITLE_RULES:
        if any(keyword in title for keyword in keywords):
            return level
    return INDIVIDUAL_CONTRIBUTOR


def level_rank(level: str) -> int:
    """Position of a level in MANAGEMENT_LEVELS (0 is the top)."""
    return MANAGEMENT_LEVELS.index(level)


def is_lower_level(level: str, than: str) -> bool:
    return level_rank(level) > level_rank(than)


def organize_employees(employees: List[Employee]) -> OrgChart:
    """
    Group employees by management level, then by department.

    Input order is preserved inside each group. Employees without a
    department are grouped under None.
    """
    chart: OrgChart = {}
    for employee in employees:
        level = infer_management_level(employee)
        departments = chart.setdefault(level, {})
        departments.setdefault(employee.get("department"), []).append(employee)
    return chart


def filter_direct_reports(employees: List[Employee], manager: Employee) -> List[Employee]:
    """Employees in the manager's department at a strictly lower level."""
    manager_level = infer_management_level(manager)
    department = manager.get("department")
    return [
        employee for employee in employees
        if employee.get("department") == department
        and is_lower_level(infer_management_level(employee), manager_level)
    ]
