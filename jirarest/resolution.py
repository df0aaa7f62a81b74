"""Issue resolutions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from jirarest.client import Client
from jirarest.priority import _decode, _load


@dataclass
class Resolution:
    """A resolution of an issue, such as Fixed or Won't Fix."""

    self_url: str = ""
    id: str = ""
    description: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Resolution":
        return _load(cls, data)


@dataclass
class ResolutionService:
    """Calls for the resolutions of the instance."""

    client: Client

    def get_list(self) -> list[Resolution]:
        """Return all resolutions."""
        response = self.client.call("GET", "rest/api/2/resolution")
        return [Resolution.from_dict(item) for item in _decode(response, list)]