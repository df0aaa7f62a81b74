"""Permission schemes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from jirarest.client import Client, JiraError
from jirarest.priority import _as_int, _decode, _load, _nested

if TYPE_CHECKING:
    from jirarest.project import PermissionScheme


@dataclass
class Holder:
    """Who a permission is granted to."""

    type: str = ""
    parameter: str = ""
    expand: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Holder":
        return _load(cls, data)


@dataclass
class Permission:
    """A single permission grant of a scheme."""

    id: int = 0
    self_url: str = ""
    holder: Holder = field(default_factory=Holder)
    name: str = field(default="", metadata={"json": "permission"})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Permission":
        return _load(cls, data, id=_as_int, holder=_nested(Holder))


@dataclass
class PermissionSchemeService:
    """Calls for permission schemes."""

    client: Client

    def get_list(self) -> list["PermissionScheme"]:
        """Return all permission schemes."""
        from jirarest.project import PermissionScheme

        response = self.client.call("GET", "/rest/api/3/permissionscheme")
        schemes = _decode(response, dict).get("permissionSchemes") or []
        return [PermissionScheme.from_dict(item) for item in schemes]

    def get(self, scheme_id: int) -> "PermissionScheme":
        """Return one permission scheme; raise JiraError if it does not exist."""
        from jirarest.project import PermissionScheme

        response = self.client.call("GET", f"/rest/api/3/permissionscheme/{scheme_id}")
        scheme = PermissionScheme.from_dict(_decode(response, dict))
        if not scheme.self_url:
            raise JiraError(f"no permissionscheme with ID {scheme_id} found", response)
        return scheme