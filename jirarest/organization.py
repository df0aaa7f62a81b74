"""Service desk organizations, their users and properties."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from jirarest.client import Client, JiraError, Response
from jirarest.request import SelfLink

_ACCEPT_JSON = {"Accept": "application/json"}


def _decode_object(response: Response) -> dict[str, Any]:
    data = response.json()
    if not isinstance(data, dict):
        raise JiraError("could not decode response body: expected a JSON object", response)
    return data


def _int(value: Any) -> int:
    return int(value) if isinstance(value, (int, float)) and not isinstance(value, bool) else 0


@dataclass
class Organization:
    """A service desk organization."""

    id: str = ""
    name: str = ""
    links: SelfLink | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Organization":
        links = data.get("_links")
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            links=SelfLink(self_url=links.get("self", "")) if isinstance(links, dict) else None,
        )


@dataclass
class OrganizationUsers:
    """Account ids of users to add to or remove from an organization."""

    account_ids: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form, leaving out an empty id list."""
        return {"accountIds": list(self.account_ids)} if self.account_ids else {}


@dataclass
class PagedDTO:
    """One page of a paged list."""

    size: int = 0
    start: int = 0
    limit: int = 0
    is_last_page: bool = False
    values: list[Any] = field(default_factory=list)
    expands: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PagedDTO":
        return cls(
            size=_int(data.get("size")),
            start=_int(data.get("start")),
            limit=_int(data.get("limit")),
            is_last_page=bool(data.get("isLastPage", False)),
            values=list(data.get("values") or []),
            expands=list(data.get("_expands") or []),
        )


@dataclass
class PropertyKey:
    """The key of a property and its REST URL."""

    self_url: str = ""
    key: str = ""


@dataclass
class PropertyKeys:
    """The property keys of an entity."""

    keys: list[PropertyKey] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PropertyKeys":
        return cls(
            keys=[
                PropertyKey(self_url=item.get("self", ""), key=item.get("key", ""))
                for item in data.get("keys") or []
                if isinstance(item, dict)
            ]
        )


@dataclass
class EntityProperty:
    """A property of an entity: a key and an arbitrary JSON value."""

    key: str = ""
    value: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EntityProperty":
        return cls(key=data.get("key", ""), value=data.get("value"))


class OrganizationService:
    """Calls for service desk organizations."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def get_all_organizations(self, start: int, limit: int, account_id: str = "") -> PagedDTO:
        """Return a page of the organizations of the instance."""
        params: dict[str, Any] = {"start": start, "limit": limit}
        if account_id:
            params["accountId"] = account_id
        response = self.client.call(
            "GET", "rest/servicedeskapi/organization", params=params, headers=_ACCEPT_JSON
        )
        return PagedDTO.from_dict(_decode_object(response))

    def create_organization(self, name: str) -> Organization:
        """Create an organization with this name."""
        body = {"name": name} if name else {}
        response = self.client.call(
            "POST", "rest/servicedeskapi/organization", body=body, headers=_ACCEPT_JSON
        )
        return Organization.from_dict(_decode_object(response))

    def get_organization(self, organization_id: int) -> Organization:
        """Return the organization with this id."""
        response = self.client.call(
            "GET", f"rest/servicedeskapi/organization/{organization_id}", headers=_ACCEPT_JSON
        )
        return Organization.from_dict(_decode_object(response))

    def delete_organization(self, organization_id: int) -> Response:
        """Delete the organization, whatever it is associated with."""
        return self.client.call("DELETE", f"rest/servicedeskapi/organization/{organization_id}")

    def get_properties_keys(self, organization_id: int) -> PropertyKeys:
        """Return the keys of all properties of the organization."""
        response = self.client.call(
            "GET",
            f"rest/servicedeskapi/organization/{organization_id}/property",
            headers=_ACCEPT_JSON,
        )
        return PropertyKeys.from_dict(_decode_object(response))

    def get_property(self, organization_id: int, property_key: str) -> EntityProperty:
        """Return one property of the organization."""
        response = self.client.call(
            "GET",
            f"rest/servicedeskapi/organization/{organization_id}/property/{property_key}",
            headers=_ACCEPT_JSON,
        )
        return EntityProperty.from_dict(_decode_object(response))

    def set_property(self, organization_id: int, property_key: str) -> Response:
        """Set a property of the organization."""
        return self.client.call(
            "PUT",
            f"rest/servicedeskapi/organization/{organization_id}/property/{property_key}",
            headers=_ACCEPT_JSON,
        )

    def delete_property(self, organization_id: int, property_key: str) -> Response:
        """Remove a property from the organization."""
        return self.client.call(
            "DELETE",
            f"rest/servicedeskapi/organization/{organization_id}/property/{property_key}",
            headers=_ACCEPT_JSON,
        )

    def get_users(self, organization_id: int, start: int, limit: int) -> PagedDTO:
        """Return a page of the users of the organization."""
        response = self.client.call(
            "GET",
            f"rest/servicedeskapi/organization/{organization_id}/user",
            params={"start": start, "limit": limit},
            headers=_ACCEPT_JSON,
        )
        return PagedDTO.from_dict(_decode_object(response))

    def add_users(self, organization_id: int, users: OrganizationUsers) -> Response:
        """Add users to the organization."""
        return self.client.call(
            "POST",
            f"rest/servicedeskapi/organization/{organization_id}/user",
            body=users.to_dict(),
        )

    def remove_users(self, organization_id: int, users: OrganizationUsers) -> Response:
        """Remove users from the organization."""
        return self.client.call(
            "DELETE",
            f"rest/servicedeskapi/organization/{organization_id}/user",
            headers=_ACCEPT_JSON,
        )