"""
Query Builder Tests
-------------------
Exact request bodies for the search endpoints.
"""

import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))

from rocketreach.core import queries


class TestCompanySearchQueries:
    """Tests for company search bodies."""

    def test_location_default_unit(self):
        assert queries.location_query("Austin, TX", 50) == {
            "query": {"location": ['"Austin, TX"::~50mi']}
        }

    def test_location_custom_unit(self):
        body = queries.location_query("Berlin", 25, unit="km")
        assert body["query"]["location"] == ['"Berlin"::~25km']

    def test_size_bounds_are_stringified(self):
        assert queries.size_query(10, 50) == {
            "query": {"company_size_min": ["10"], "company_size_max": ["50"]}
        }

    def test_revenue_bounds_are_stringified(self):
        assert queries.revenue_query(1000000, 5000000) == {
            "query": {
                "company_revenue_min": ["1000000"],
                "company_revenue_max": ["5000000"],
            }
        }

    def test_tech(self):
        assert queries.tech_query(["Python", "React"]) == {
            "query": {"techstack": ["Python", "React"]}
        }

    def test_tech_requires_list(self):
        with pytest.raises(TypeError):
            queries.tech_query("Python")


class TestPeopleSearchQueries:
    """Tests for employer-scoped people search bodies."""

    def test_company_employees(self):
        assert queries.company_employees_query("example.com") == {
            "query": {
                "current_employer": ["example.com"],
                "management_levels": [
                    "C-Level", "VP", "Director", "Manager", "Individual Contributor"
                ],
            },
            "page_size": 100,
        }

    def test_department(self):
        assert queries.department_query("example.com", "Engineering") == {
            "query": {"current_employer": ["example.com"], "department": ["Engineering"]},
            "page_size": 100,
        }

    def test_leadership_has_no_page_size(self):
        assert queries.leadership_query("example.com") == {
            "query": {
                "current_employer": ["example.com"],
                "management_levels": ["C-Level", "VP"],
            }
        }
