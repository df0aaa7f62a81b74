"""Create and edit meta information for issues."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from jirarest.client import Client, QueryOptions
from jirarest.priority import _decode, _list_of, _load


def _field_attribute(fields: dict[str, Any], key: str, attribute: str, kind: type) -> Any:
    spec = fields.get(key)
    if not isinstance(spec, dict) or attribute not in spec:
        raise ValueError(f"field {key!r} has no {attribute!r} entry")
    value = spec[attribute]
    if not isinstance(value, kind):
        raise ValueError(f"field {key!r}: {attribute!r} is not a {kind.__name__}")
    return value


@dataclass
class MetaIssueType:
    """An issue type of a project together with its field descriptions."""

    self_url: str = ""
    id: str = ""
    description: str = ""
    icon_url: str = ""
    name: str = ""
    subtasks: bool = field(default=False, metadata={"json": "subtask"})
    expand: str = ""
    fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MetaIssueType":
        merged = {"iconUrl": data.get("iconurl"), **data}
        return _load(cls, merged, subtasks=bool, fields=dict)

    def get_mandatory_fields(self) -> dict[str, str]:
        """Map the display name of every required field to its field key."""
        mandatory: dict[str, str] = {}
        for key in self.fields:
            if _field_attribute(self.fields, key, "required", bool):
                mandatory[_field_attribute(self.fields, key, "name", str)] = key
        return mandatory

    def get_all_fields(self) -> dict[str, str]:
        """Map the display name of every field to its field key."""
        return {_field_attribute(self.fields, key, "name", str): key for key in self.fields}

    def check_complete_and_available(self, config: dict[str, str]) -> bool:
        """Check that config holds every mandatory field and only available ones."""
        mandatory = self.get_mandatory_fields()
        available = self.get_all_fields()
        if any(name not in config for name in mandatory):
            raise ValueError(
                "required field not found in provided jira.fields. "
                f"Required are: {list(mandatory)}"
            )
        if any(name not in available for name in config):
            raise ValueError(
                "fields in jira.fields are not available in jira. "
                f"Available are: {list(available)}"
            )
        return True


@dataclass
class MetaProject:
    """A project as described by the create meta call."""

    expand: str = ""
    self_url: str = ""
    id: str = ""
    key: str = ""
    name: str = ""
    issue_types: list[MetaIssueType] = field(
        default_factory=list, metadata={"json": "issuetypes"}
    )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MetaProject":
        return _load(cls, data, issue_types=_list_of(MetaIssueType))

    def get_issue_type_with_name(self, name: str) -> MetaIssueType | None:
        """Return the issue type with this name, compared case-insensitively."""
        wanted = name.casefold()
        return next((t for t in self.issue_types if t.name.casefold() == wanted), None)


@dataclass
class CreateMetaInfo:
    """Fields and their attributes needed to create an issue."""

    expand: str = ""
    projects: list[MetaProject] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CreateMetaInfo":
        return _load(cls, data, projects=_list_of(MetaProject))

    def get_project_with_name(self, name: str) -> MetaProject | None:
        """Return the project with this name, compared case-insensitively."""
        wanted = name.casefold()
        return next((p for p in self.projects if p.name.casefold() == wanted), None)

    def get_project_with_key(self, key: str) -> MetaProject | None:
        """Return the project with this key, compared case-insensitively."""
        wanted = key.casefold()
        return next((p for p in self.projects if p.key.casefold() == wanted), None)


@dataclass
class EditMetaInfo:
    """Fields and their attributes available when editing an issue."""

    fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EditMetaInfo":
        return _load(cls, data, fields=dict)


@dataclass
class IssueMetaService:
    """Calls for issue create and edit meta information."""

    client: Client

    def get_create_meta(self, project_keys: str) -> CreateMetaInfo:
        """Fetch create meta information for the given project keys, fields expanded."""
        return self.get_create_meta_with_options(
            QueryOptions(expand="projects.issuetypes.fields", project_keys=project_keys)
        )

    def get_create_meta_with_options(self, options: Any) -> CreateMetaInfo:
        """Fetch create meta information with arbitrary query options."""
        response = self.client.call("GET", "rest/api/2/issue/createmeta", params=options)
        return CreateMetaInfo.from_dict(_decode(response, dict))

    def get_edit_meta(self, issue_key: str) -> EditMetaInfo:
        """Fetch edit meta information for one issue."""
        response = self.client.call("GET", f"/rest/api/2/issue/{issue_key}/editmeta")
        return EditMetaInfo.from_dict(_decode(response, dict))