"""Projects, their components and permission schemes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from jirarest.client import Client, QueryOptions
from jirarest.permissionscheme import Permission
from jirarest.priority import _as_int, _decode, _list_of, _load, _nested


def _mapping(value: Any) -> dict[str, Any]:
    return dict(value) if isinstance(value, dict) else {}


def _mappings(items: list[Any]) -> list[dict[str, Any]]:
    return [dict(item) for item in items]


@dataclass
class ProjectCategory:
    """A category a project belongs to."""

    self_url: str = ""
    id: str = ""
    name: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProjectCategory":
        return _load(cls, data)


@dataclass
class ProjectComponent:
    """A single component of a project."""

    self_url: str = ""
    id: str = ""
    name: str = ""
    description: str = ""
    lead: dict[str, Any] = field(default_factory=dict)
    assignee_type: str = ""
    assignee: dict[str, Any] = field(default_factory=dict)
    real_assignee_type: str = ""
    real_assignee: dict[str, Any] = field(default_factory=dict)
    is_assignee_type_valid: bool = False
    project: str = ""
    project_id: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProjectComponent":
        return _load(
            cls,
            data,
            lead=_mapping,
            assignee=_mapping,
            real_assignee=_mapping,
            is_assignee_type_valid=bool,
            project_id=_as_int,
        )


@dataclass
class PermissionScheme:
    """The permission scheme of a project."""

    expand: str = ""
    self_url: str = ""
    id: int = 0
    name: str = ""
    description: str = ""
    permissions: list[Permission] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PermissionScheme":
        return _load(cls, data, id=_as_int, permissions=_list_of(Permission))


@dataclass
class Project:
    """A Jira project."""

    expand: str = ""
    self_url: str = ""
    id: str = ""
    key: str = ""
    description: str = ""
    lead: dict[str, Any] = field(default_factory=dict)
    components: list[ProjectComponent] = field(default_factory=list)
    issue_types: list[dict[str, Any]] = field(default_factory=list)
    url: str = ""
    email: str = ""
    assignee_type: str = ""
    versions: list[dict[str, Any]] = field(default_factory=list)
    name: str = ""
    roles: dict[str, str] = field(default_factory=dict)
    avatar_urls: dict[str, str] = field(default_factory=dict)
    project_category: ProjectCategory = field(default_factory=ProjectCategory)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Project":
        return _load(
            cls,
            data,
            lead=_mapping,
            components=_list_of(ProjectComponent),
            issue_types=_mappings,
            versions=_mappings,
            roles=_mapping,
            avatar_urls=_mapping,
            project_category=_nested(ProjectCategory),
        )


@dataclass
class ProjectService:
    """Calls for projects."""

    client: Client

    def get_list(self) -> list[Project]:
        """Return all projects."""
        return self.list_with_options(QueryOptions())

    def list_with_options(self, options: Any) -> list[Project]:
        """Return all projects, passing options such as expand=issueTypes."""
        response = self.client.call("GET", "rest/api/2/project", params=options)
        return [Project.from_dict(item) for item in _decode(response, list)]

    def get(self, project_id: str) -> Project:
        """Return the project with this id or key."""
        response = self.client.call("GET", f"rest/api/2/project/{project_id}")
        return Project.from_dict(_decode(response, dict))

    def get_permission_scheme(self, project_id: str) -> PermissionScheme:
        """Return the permission scheme of the project with this id or key."""
        response = self.client.call("GET", f"/rest/api/2/project/{project_id}/permissionscheme")
        return PermissionScheme.from_dict(_decode(response, dict))