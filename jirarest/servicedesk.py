"""Service desks: their organizations and customers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from jirarest.client import Client, JiraError, Response
from jirarest.organization import PagedDTO

_ACCEPT_JSON = {"Accept": "application/json"}
_EXPERIMENTAL = {"X-ExperimentalApi": "opt-in"}


@dataclass
class CustomerListOptions:
    """Query parameters for listing the customers of a service desk."""

    query: str = ""
    start: int = 0
    limit: int = 0

    def to_params(self) -> dict[str, Any]:
        """Return the non-empty options keyed by their wire names."""
        params = {"query": self.query, "start": self.start, "limit": self.limit}
        return {key: value for key, value in params.items() if value}


class ServiceDeskService:
    """Calls for service desks."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def get_organizations(
        self, service_desk_id: Any, start: int, limit: int, account_id: str = ""
    ) -> PagedDTO:
        """Return a page of the organizations associated with a service desk."""
        params: dict[str, Any] = {"start": start, "limit": limit}
        if account_id:
            params["accountId"] = account_id
        response = self.client.call(
            "GET",
            f"rest/servicedeskapi/servicedesk/{service_desk_id}/organization",
            params=params,
            headers=_ACCEPT_JSON,
        )
        data = response.json()
        if not isinstance(data, dict):
            raise JiraError("could not decode response body: expected a JSON object", response)
        return PagedDTO.from_dict(data)

    def _organization_call(
        self, method: str, service_desk_id: Any, organization_id: int
    ) -> Response:
        body = {"organizationId": organization_id} if organization_id else {}
        return self.client.call(
            method,
            f"rest/servicedeskapi/servicedesk/{service_desk_id}/organization",
            body=body,
        )

    def add_organization(self, service_desk_id: Any, organization_id: int) -> Response:
        """Associate an organization with a service desk."""
        return self._organization_call("POST", service_desk_id, organization_id)

    def remove_organization(self, service_desk_id: Any, organization_id: int) -> Response:
        """Remove an organization from a service desk."""
        return self._organization_call("DELETE", service_desk_id, organization_id)

    def add_customers(self, service_desk_id: Any, *args: str) -> Response:
        """Add the customers with these account ids to a service desk."""
        return self.client.call(
            "POST",
            f"rest/servicedeskapi/servicedesk/{service_desk_id}/customer",
            body={"accountIds": list(args)},
        )

    def remove_customers(self, service_desk_id: Any, *args: str) -> Response:
        """Remove the customers with these account ids from a service desk."""
        return self.client.call(
            "DELETE",
            f"rest/servicedeskapi/servicedesk/{service_desk_id}/customer",
            body={"accountIDs": list(args)},
        )

    def list_customers(
        self, service_desk_id: Any, options: CustomerListOptions | None = None
    ) -> PagedDTO:
        """Return a page of the customers of a service desk."""
        response = self.client.call(
            "GET",
            f"rest/servicedeskapi/servicedesk/{service_desk_id}/customer",
            params=options,
            headers=_EXPERIMENTAL,
        )
        try:
            data = response.json()
        except JiraError as exc:
            raise JiraError("could not unmarshall the data into struct", response) from exc
        if not isinstance(data, dict):
            raise JiraError("could not unmarshall the data into struct", response)
        return PagedDTO.from_dict(data)