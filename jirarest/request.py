"""Service desk customer requests and their comments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from jirarest.client import Client, JiraError, Response


def _decode_object(response: Response) -> dict[str, Any]:
    data = response.json()
    if not isinstance(data, dict):
        raise JiraError("could not decode response body: expected a JSON object", response)
    return data


@dataclass
class SelfLink:
    """The REST URL of a resource."""

    self_url: str = ""


def _link_from(value: Any) -> SelfLink | None:
    return SelfLink(self_url=value.get("self", "")) if isinstance(value, dict) else None


def _link_to_dict(link: SelfLink) -> dict[str, str]:
    return {"self": link.self_url} if link.self_url else {}


@dataclass
class RequestFieldValue:
    """A field of a request."""

    field_id: str = ""
    label: str = ""
    value: str = ""


@dataclass
class RequestDate:
    """A date in the formats used by requests."""

    iso8601: str = ""
    jira: str = ""
    friendly: str = ""
    epoch: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RequestDate":
        return cls(
            iso8601=data.get("iso8601", ""),
            jira=data.get("jira", ""),
            friendly=data.get("friendly", ""),
            epoch=int(data.get("epoch") or 0),
        )


def _date_to_dict(date: RequestDate) -> dict[str, Any]:
    values = {
        "iso8601": date.iso8601,
        "jira": date.jira,
        "friendly": date.friendly,
        "epoch": date.epoch,
    }
    return {key: value for key, value in values.items() if value}


@dataclass
class RequestStatus:
    """The current status of a request."""

    status: str = ""
    category: str = ""
    date: RequestDate = field(default_factory=RequestDate)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RequestStatus":
        lowered = {key.lower(): value for key, value in data.items()}
        date = lowered.get("date")
        return cls(
            status=lowered.get("status") or "",
            category=lowered.get("category") or "",
            date=RequestDate.from_dict(date) if isinstance(date, dict) else RequestDate(),
        )


def _status_to_dict(status: RequestStatus) -> dict[str, Any]:
    return {
        "Status": status.status,
        "Category": status.category,
        "Date": _date_to_dict(status.date),
    }


@dataclass
class Request:
    """A service desk customer request."""

    issue_id: str = ""
    issue_key: str = ""
    type_id: str = ""
    service_desk_id: str = ""
    reporter: dict[str, Any] | None = None
    field_values: list[RequestFieldValue] = field(default_factory=list)
    status: RequestStatus | None = None
    links: SelfLink | None = None
    expands: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Request":
        reporter = data.get("reporter")
        status = data.get("currentStatus")
        return cls(
            issue_id=data.get("issueId", ""),
            issue_key=data.get("issueKey", ""),
            type_id=data.get("requestTypeId", ""),
            service_desk_id=data.get("serviceDeskId", ""),
            reporter=dict(reporter) if isinstance(reporter, dict) else None,
            field_values=[
                RequestFieldValue(
                    field_id=item.get("fieldId", ""),
                    label=item.get("label", ""),
                    value=item.get("value", ""),
                )
                for item in data.get("requestFieldValues") or []
            ],
            status=RequestStatus.from_dict(status) if isinstance(status, dict) else None,
            links=_link_from(data.get("_links")),
            expands=list(data.get("_expands") or []),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form, leaving out empty values."""
        result: dict[str, Any] = {}
        for key, value in (
            ("issueId", self.issue_id),
            ("issueKey", self.issue_key),
            ("requestTypeId", self.type_id),
            ("serviceDeskId", self.service_desk_id),
        ):
            if value:
                result[key] = value
        if self.reporter is not None:
            result["reporter"] = self.reporter
        if self.field_values:
            result["requestFieldValues"] = [
                {
                    key: value
                    for key, value in (
                        ("fieldId", item.field_id),
                        ("label", item.label),
                        ("value", item.value),
                    )
                    if value
                }
                for item in self.field_values
            ]
        if self.status is not None:
            result["currentStatus"] = _status_to_dict(self.status)
        if self.links is not None:
            result["_links"] = _link_to_dict(self.links)
        if self.expands:
            result["_expands"] = list(self.expands)
        return result


@dataclass
class RequestComment:
    """A comment on a request."""

    id: str = ""
    body: str = ""
    public: bool = False
    author: dict[str, Any] | None = None
    created: RequestDate | None = None
    links: SelfLink | None = None
    expands: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RequestComment":
        author = data.get("author")
        created = data.get("created")
        return cls(
            id=data.get("id", ""),
            body=data.get("body", ""),
            public=bool(data.get("public", False)),
            author=dict(author) if isinstance(author, dict) else None,
            created=RequestDate.from_dict(created) if isinstance(created, dict) else None,
            links=_link_from(data.get("_links")),
            expands=list(data.get("_expands") or []),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form; public is always present."""
        result: dict[str, Any] = {}
        if self.id:
            result["id"] = self.id
        if self.body:
            result["body"] = self.body
        result["public"] = self.public
        if self.author is not None:
            result["author"] = self.author
        if self.created is not None:
            result["created"] = _date_to_dict(self.created)
        if self.links is not None:
            result["_links"] = _link_to_dict(self.links)
        if self.expands:
            result["_expands"] = list(self.expands)
        return result


class RequestService:
    """Calls for service desk customer requests."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def create(self, requester: str, participants: list[str], request: Request) -> Request:
        """Raise a new request, optionally on behalf of requester."""
        payload = request.to_dict()
        payload.pop("requestFieldValues", None)
        field_values = {item.field_id: item.value for item in request.field_values}
        if field_values:
            payload["requestFieldValues"] = field_values
        if requester:
            payload["raiseOnBehalfOf"] = requester
        if participants:
            payload["requestParticipants"] = list(participants)
        response = self.client.call("POST", "rest/servicedeskapi/request", body=payload)
        return Request.from_dict(_decode_object(response))

    def create_comment(self, issue_id_or_key: str, comment: RequestComment) -> RequestComment:
        """Add a comment to the request with this issue id or key."""
        response = self.client.call(
            "POST",
            f"rest/servicedeskapi/request/{issue_id_or_key}/comment",
            body=comment.to_dict(),
        )
        return RequestComment.from_dict(_decode_object(response))