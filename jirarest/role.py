"""Project roles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from jirarest.client import Client, JiraError
from jirarest.priority import _as_int, _decode, _list_of, _load


@dataclass
class ActorUser:
    """The account behind an actor."""

    account_id: str = ""


@dataclass
class Actor:
    """A user or group holding a role."""

    id: int = 0
    display_name: str = ""
    type: str = ""
    name: str = ""
    avatar_url: str = ""
    actor_user: ActorUser | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Actor":
        return _load(
            cls,
            data,
            id=_as_int,
            actor_user=lambda user: _load(ActorUser, user) if isinstance(user, dict) else None,
        )


@dataclass
class Role:
    """A project role."""

    self_url: str = ""
    name: str = ""
    id: int = 0
    description: str = ""
    actors: list[Actor] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Role":
        return _load(cls, data, id=_as_int, actors=_list_of(Actor))


@dataclass
class RoleService:
    """Calls for project roles."""

    client: Client

    def get_list(self) -> list[Role]:
        """Return all project roles."""
        response = self.client.call("GET", "rest/api/3/role")
        return [Role.from_dict(item) for item in _decode(response, list)]

    def get(self, role_id: int) -> Role:
        """Return one role; raise JiraError if no such role exists."""
        response = self.client.call("GET", f"rest/api/3/role/{role_id}")
        role = Role.from_dict(_decode(response, dict))
        if not role.self_url:
            raise JiraError(f"no role with ID {role_id} found", response)
        return role