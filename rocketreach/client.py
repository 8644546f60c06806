"""
RocketReach Client
------------------
One method per RocketReach API operation, plus company accessors and
organization-structure helpers built on top of them.

Usage:
    import rocketreach

    client = rocketreach.new("your_api_key")
    response = client.lookup_company({"domain": "example.com"})
    if response.success:
        print(response.data["name"])

Every method returns an APIResponse. Pass-through methods return the
transport's response unmodified; accessors return the extracted value as
data, or an APIStatus.NOT_AVAILABLE response when the lookup succeeded but
the field is missing.

API Reference: https://api.rocketreach.co/api/v2
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import httpx

from .api.client import APIClient, APIConfig, APIResponse
from .core import queries
from .core.errors import ConfigurationError
from .core.org_chart import filter_direct_reports, organize_employees
from .infra.config import DEFAULT_BASE_URL, Settings, load_settings
from .infra.logging import get_logger

Params = Mapping[str, Any]


@dataclass(frozen=True)
class BulkLookupOptions:
    """Optional fields of a bulk lookup request."""
    profile_list: str = "API Bulk Lookup"
    webhook_id: Optional[Union[int, str]] = None


class RocketReach:
    """
    Client for the RocketReach API.

    Immutable after construction and safe to share between threads; each
    request opens and closes its own HTTP connection.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        if not api_key:
            raise ConfigurationError("An API key is required")

        self._config = APIConfig(
            api_key=api_key,
            base_url=base_url,
            timeout_seconds=timeout_seconds,
            headers=dict(headers or {}),
            transport=transport,
        )
        self._api = APIClient(self._config)
        self._logger = get_logger("client")

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "RocketReach":
        return cls(
            settings.api_key,
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
            **kwargs,
        )

    @classmethod
    def from_env(cls, **kwargs) -> "RocketReach":
        """Build a client from ROCKETREACH_* environment variables."""
        return cls.from_settings(load_settings(), **kwargs)

    @classmethod
    def from_config(cls, path: Union[str, Path], **kwargs) -> "RocketReach":
        """Build a client from a YAML file; the environment still overrides it."""
        return cls.from_settings(load_settings(path), **kwargs)

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def config(self) -> APIConfig:
        return self._config

    def __repr__(self) -> str:
        return f"RocketReach(base_url={self.base_url!r})"

    # -------------------------------------------------------------------------
    # Account
    # -------------------------------------------------------------------------

    def get_account(self) -> APIResponse:
        """Retrieve account information for the authenticated user."""
        return self._api.get("/account/")

    def create_api_key(self) -> APIResponse:
        """Create a new API key for the authenticated account."""
        return self._api.post("/account/key/")

    # -------------------------------------------------------------------------
    # People
    # -------------------------------------------------------------------------

    def lookup_person(self, params: Params) -> APIResponse:
        """
        Look up detailed information about a person.

        Args:
            params: Lookup parameters (e.g. id, email, name, current_employer)
        """
        return self._api.get("/person/lookup", params=params)

    def check_person_status(self, ids: List[Any]) -> APIResponse:
        """Check the status of pending person lookups."""
        if not isinstance(ids, list):
            raise TypeError("ids must be a list")
        return self._api.get("/person/checkStatus", params={"ids": ids})

    def search_people(self, query: Params) -> APIResponse:
        """Search for people; query is sent as the JSON body."""
        return self._api.post("/person/search", data=query)

    def get_npi_contact(self, npi: Union[int, str]) -> APIResponse:
        """Contact information for a healthcare provider by NPI number."""
        return self._api.get("/npi/search", params={"npi": npi})

    def lookup_profile_company(self, params: Params) -> APIResponse:
        """Look up a person together with their current company."""
        return self._api.get("/profile-company/lookup", params=params)

    def bulk_lookup(
        self,
        queries: List[Params],
        options: Optional[BulkLookupOptions] = None,
    ) -> APIResponse:
        """
        Queue lookups for many people in one request.

        Results are delivered to the webhook named by options.webhook_id,
        or collected in options.profile_list.
        """
        options = options or BulkLookupOptions()
        body: Dict[str, Any] = {
            "queries": queries,
            "profile_list": options.profile_list,
        }
        if options.webhook_id is not None:
            body["webhook_id"] = options.webhook_id
        return self._api.post("/bulkLookup", data=body)

    # -------------------------------------------------------------------------
    # Companies
    # -------------------------------------------------------------------------

    def lookup_company(self, params: Params) -> APIResponse:
        """
        Look up company information.

        Args:
            params: Lookup parameters (e.g. domain, name, id)
        """
        return self._api.get("/company/lookup/", params=params)

    def search_companies(self, query: Params) -> APIResponse:
        """Search for companies; query is sent as the JSON body."""
        return self._api.post("/searchCompany", data=query)

    def _company_field(
        self,
        domain: str,
        field: str,
        missing: str,
        list_only: bool = True,
    ) -> APIResponse:
        """Look up a company and extract one field of the body."""
        response = self.lookup_company({"domain": domain})
        if not response.success:
            return response

        body = response.data
        value = body.get(field) if isinstance(body, dict) else None
        if value is None or (list_only and not isinstance(value, list)):
            return APIResponse.not_available(missing, response)
        return response.with_data(value)

    def get_company_tech_stack(self, domain: str) -> APIResponse:
        return self._company_field(domain, "techstack", "No tech stack information available")

    def get_company_competitors(self, domain: str) -> APIResponse:
        return self._company_field(domain, "competitors", "No competitor information available")

    def get_company_industries(self, domain: str) -> APIResponse:
        return self._company_field(domain, "industries", "No industry information available")

    def get_company_growth(self, domain: str) -> APIResponse:
        return self._company_field(domain, "company_growth", "No growth information available")

    def get_company_funding(self, domain: str) -> APIResponse:
        return self._company_field(domain, "funding_investors", "No funding information available")

    def get_company_size(self, domain: str) -> APIResponse:
        """Employee count; any non-null value is accepted."""
        return self._company_field(
            domain, "num_employees", "No employee count information available", list_only=False
        )

    def is_publicly_traded(self, domain: str) -> APIResponse:
        """
        True when the company has a ticker symbol.

        A missing or null ticker_symbol means False; a failed lookup is
        returned as a failure.
        """
        response = self.lookup_company({"domain": domain})
        if not response.success:
            return response

        body = response.data
        ticker = body.get("ticker_symbol") if isinstance(body, dict) else None
        return response.with_data(ticker is not None)

    def search_companies_by_tech(self, technologies: List[str]) -> APIResponse:
        return self.search_companies(queries.tech_query(technologies))

    def search_companies_by_size(self, min_size: queries.Number, max_size: queries.Number) -> APIResponse:
        return self.search_companies(queries.size_query(min_size, max_size))

    def search_companies_by_revenue(
        self, min_revenue: queries.Number, max_revenue: queries.Number
    ) -> APIResponse:
        return self.search_companies(queries.revenue_query(min_revenue, max_revenue))

    def search_companies_by_location(
        self, location: str, radius: queries.Number, unit: str = "mi"
    ) -> APIResponse:
        """Companies within radius (in unit, 'mi' or 'km') of location."""
        return self.search_companies(queries.location_query(location, radius, unit))

    # -------------------------------------------------------------------------
    # Organization structure
    # -------------------------------------------------------------------------

    def search_company_employees(self, domain: str) -> APIResponse:
        """Employees at a company across all management levels."""
        return self.search_people(queries.company_employees_query(domain))

    def get_department_structure(self, domain: str, department: str) -> APIResponse:
        return self.search_people(queries.department_query(domain, department))

    def get_leadership_team(self, domain: str) -> APIResponse:
        """C-Level and VP employees at a company."""
        return self.search_people(queries.leadership_query(domain))

    def get_org_chart(self, domain: str) -> APIResponse:
        """
        Company employees grouped as level -> department -> [employees].

        The company lookup runs first; if it fails its response is returned
        and no employee search is made.
        """
        company = self.lookup_company({"domain": domain})
        if not company.success:
            return company

        search = self.search_company_employees(domain)
        if not search.success:
            return search

        employees = _profiles(search)
        if employees is None:
            return APIResponse.not_available("No employee information available", search)

        self._logger.debug(f"Organizing {len(employees)} employees for {domain}")
        return search.with_data(organize_employees(employees))

    def get_direct_reports(self, manager_id: Union[int, str]) -> APIResponse:
        """
        Likely direct reports of a person.

        Colleagues at the manager's employer, in the same department, whose
        inferred management level is strictly below the manager's.
        """
        lookup = self.lookup_person({"id": manager_id})
        if not lookup.success:
            return lookup

        manager = lookup.data
        domain = manager.get("current_employer_domain") if isinstance(manager, dict) else None
        if not domain:
            return APIResponse.not_available("No employer information available", lookup)

        search = self.search_company_employees(domain)
        if not search.success:
            return search

        employees = _profiles(search)
        if employees is None:
            return APIResponse.not_available("No employee information available", search)

        return search.with_data(filter_direct_reports(employees, manager))


def _profiles(response: APIResponse) -> Optional[List[Dict[str, Any]]]:
    body = response.data
    profiles = body.get("profiles") if isinstance(body, dict) else None
    if not isinstance(profiles, list):
        return None
    return [profile for profile in profiles if isinstance(profile, dict)]


def new(api_key: str, **kwargs) -> RocketReach:
    """Create a RocketReach client for the given API key."""
    return RocketReach(api_key, **kwargs)
