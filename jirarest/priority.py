"""Issue priorities, and the JSON decoding shared by the record types."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable, TypeVar

from jirarest.client import Client, JiraError, Response

_T = TypeVar("_T")


def _json_key(spec: Any) -> str:
    if "json" in spec.metadata:
        return spec.metadata["json"]
    if spec.name == "self_url":
        return "self"
    head, *rest = spec.name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _load(cls: type[_T], data: dict[str, Any], **convert: Callable[[Any], Any]) -> _T:
    """Build a dataclass from a JSON object; missing or null keys keep their defaults."""
    values = {}
    for spec in fields(cls):
        raw = data.get(_json_key(spec))
        if raw is not None:
            values[spec.name] = convert[spec.name](raw) if spec.name in convert else raw
    return cls(**values)


def _decode(response: Response, kind: type) -> Any:
    """Return the JSON body of the response, which must be of the given kind."""
    data = response.json()
    if not isinstance(data, kind):
        noun = "array" if kind is list else "object"
        raise JiraError(f"could not decode response body: expected a JSON {noun}", response)
    return data


def _as_int(value: Any) -> int:
    return int(value or 0)


def _list_of(item_cls: Any) -> Callable[[list[Any]], list[Any]]:
    return lambda items: [item_cls.from_dict(item) for item in items]


def _nested(item_cls: Any) -> Callable[[Any], Any]:
    return lambda value: item_cls.from_dict(value) if isinstance(value, dict) else item_cls()


@dataclass
class Priority:
    """A priority of an issue, such as Normal or Urgent."""

    self_url: str = ""
    icon_url: str = ""
    name: str = ""
    id: str = ""
    status_color: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Priority":
        return _load(cls, data)


@dataclass
class PriorityService:
    """Calls for the priorities of the instance."""

    client: Client

    def get_list(self) -> list[Priority]:
        """Return all priorities."""
        response = self.client.call("GET", "rest/api/2/priority")
        return [Priority.from_dict(item) for item in _decode(response, list)]