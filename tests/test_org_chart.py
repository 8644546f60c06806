"""
Org Chart Tests
---------------
Management-level inference and employee grouping (no HTTP).
"""

import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))

from rocketreach.core.org_chart import (
    MANAGEMENT_LEVELS,
    filter_direct_reports,
    infer_management_level,
    is_lower_level,
    organize_employees,
)


class TestInferManagementLevel:
    """Tests for title keyword classification."""

    @pytest.mark.parametrize("title, level", [
        ("Chief Technology Officer", "C-Level"),
        ("VP of Sales", "VP"),
        ("Senior Director", "Director"),
        ("Engineering Manager", "Manager"),
        ("Software Engineer", "Individual Contributor"),
        ("CEO & Founder", "C-Level"),
        ("COO", "C-Level"),
    ])
    def test_title_keywords(self, title, level):
        assert infer_management_level({"current_title": title}) == level

    def test_first_match_wins(self):
        """A title matching several rules takes the highest rule."""
        assert infer_management_level({"current_title": "VP, Director of Product"}) == "VP"
        assert infer_management_level({"current_title": "Chief of Staff to the VP"}) == "C-Level"
        assert infer_management_level({"current_title": "Director, Program Manager"}) == "Director"

    def test_matching_is_case_sensitive(self):
        assert infer_management_level({"current_title": "product manager"}) == "Individual Contributor"

    def test_missing_title_is_individual_contributor(self):
        assert infer_management_level({}) == "Individual Contributor"
        assert infer_management_level({"current_title": None}) == "Individual Contributor"

    @pytest.mark.parametrize("title", [42, ["CEO"], {"title": "VP"}, 3.5])
    def test_non_string_title_is_individual_contributor(self, title):
        assert infer_management_level({"current_title": title}) == "Individual Contributor"


class TestLevelOrdering:
    """Tests for level comparison."""

    def test_order(self):
        assert MANAGEMENT_LEVELS == [
            "C-Level", "VP", "Director", "Manager", "Individual Contributor"
        ]

    def test_strictly_lower(self):
        assert is_lower_level("Manager", "Director")
        assert is_lower_level("Individual Contributor", "C-Level")
        assert not is_lower_level("Director", "Director")
        assert not is_lower_level("VP", "Director")


class TestOrganizeEmployees:
    """Tests for level -> department grouping."""

    def test_groups_by_level_then_department(self, employees):
        chart = organize_employees(employees)

        assert set(chart) == {"C-Level", "VP", "Individual Contributor"}
        assert [e["id"] for e in chart["C-Level"]["A"]] == [1, 2]
        assert [e["id"] for e in chart["VP"]["A"]] == [3]
        assert [e["id"] for e in chart["Individual Contributor"]["B"]] == [4, 5]
        assert set(chart["C-Level"]) == {"A"}

    def test_empty(self):
        assert organize_employees([]) == {}

    def test_missing_department_grouped_under_none(self):
        chart = organize_employees([{"current_title": "Engineer"}])
        assert chart == {"Individual Contributor": {None: [{"current_title": "Engineer"}]}}


class TestFilterDirectReports:
    """Tests for direct report selection."""

    def test_same_department_strictly_lower(self):
        manager = {"id": 10, "current_title": "Director of Engineering", "department": "Eng"}
        staff = [
            {"id": 1, "current_title": "CTO", "department": "Eng"},
            {"id": 2, "current_title": "VP Engineering", "department": "Eng"},
            {"id": 3, "current_title": "Director of Platform", "department": "Eng"},
            {"id": 4, "current_title": "Engineering Manager", "department": "Eng"},
            {"id": 5, "current_title": "Software Engineer", "department": "Eng"},
            {"id": 6, "current_title": "Account Executive", "department": "Sales"},
            {"id": 7, "current_title": "Sales Manager", "department": "Sales"},
        ]

        reports = filter_direct_reports(staff, manager)

        assert [e["id"] for e in reports] == [4, 5]

    def test_individual_contributor_has_no_reports(self):
        manager = {"current_title": "Software Engineer", "department": "Eng"}
        staff = [{"current_title": "Intern", "department": "Eng"}]

        assert filter_direct_reports(staff, manager) == []
