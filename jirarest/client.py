"""HTTP plumbing shared by every API service: request building, sending and decoding."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import urlencode, urljoin, urlsplit, urlunsplit

import requests
from requests.auth import HTTPBasicAuth

_UNSET = object()


class JiraError(Exception):
    """Raised when the API answers with an error or an unreadable body."""

    def __init__(self, message: str, response: Any = None) -> None:
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> int | None:
        """HTTP status of the failed response, if there was one."""
        if self.response is None:
            return None
        return self.response.status_code


class Response:
    """An API response with lazily decoded JSON and paging information."""

    def __init__(self, http_response: requests.Response) -> None:
        self.http_response = http_response
        self.start_at = 0
        self.max_results = 0
        self.total = 0
        self._data: Any = _UNSET

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> Mapping[str, str]:
        return self.http_response.headers

    @property
    def text(self) -> str:
        return self.http_response.text

    @property
    def content(self) -> bytes:
        return self.http_response.content

    def json(self) -> Any:
        """Decode the body as JSON; raise JiraError if it is not valid JSON."""
        if self._data is _UNSET:
            try:
                data = json.loads(self.http_response.content)
            except ValueError as exc:
                raise JiraError(f"could not decode response body: {exc}", self) from exc
            self._data = data
            self._populate_page_values(data)
        return self._data

    def _populate_page_values(self, data: Any) -> None:
        if not isinstance(data, dict):
            return
        for key, attr in (("startAt", "start_at"), ("maxResults", "max_results"), ("total", "total")):
            value = data.get(key)
            if isinstance(value, int) and not isinstance(value, bool):
                setattr(self, attr, value)


@dataclass
class QueryOptions:
    """Common query parameters for GET calls."""

    expand: str = ""
    project_keys: str = ""

    def to_params(self) -> dict[str, str]:
        """Return the non-empty options keyed by their wire names."""
        params = {"expand": self.expand, "projectKeys": self.project_keys}
        return {key: value for key, value in params.items() if value}


def _as_params(options: Any) -> dict[str, Any]:
    if hasattr(options, "to_params"):
        return options.to_params()
    return dict(options)


def check_response(response: Any) -> None:
    """Raise JiraError unless the response has a 2xx status code."""
    status = response.status_code
    if 200 <= status <= 299:
        return
    raise JiraError(
        "request failed. Please analyze the request body for more details. "
        f"Status code: {status}",
        response,
    )


def add_options(url: str, options: Any) -> str:
    """Replace the query of url with the encoded options; None leaves it unchanged."""
    if options is None:
        return url
    params = sorted(_as_params(options).items())
    parts = urlsplit(url)
    return urlunsplit(parts._replace(query=urlencode(params, doseq=True)))


class Client:
    """Builds and sends requests against one Jira instance."""

    def __init__(
        self,
        base_url: str,
        http_client: requests.Session | None = None,
        username: str | None = None,
        password: str | None = None,
    ) -> None:
        if not base_url.endswith("/"):
            base_url += "/"
        urlsplit(base_url)
        self.base_url = base_url
        self.http_client = http_client if http_client is not None else requests.Session()
        self.username = username
        self.password = password

    def resolve(self, url: str) -> str:
        """Resolve a path relative to the base URL, ignoring leading slashes."""
        parts = urlsplit(url)
        relative = urlunsplit(parts._replace(path=parts.path.lstrip("/")))
        return urljoin(self.base_url, relative)

    def _prepare(
        self,
        method: str,
        url: str,
        data: Any = None,
        headers: Mapping[str, str] | None = None,
        params: Any = None,
    ) -> requests.PreparedRequest:
        request = requests.Request(
            method,
            self.resolve(url),
            data=data,
            headers=dict(headers or {}),
            params=sorted(_as_params(params).items()) if params is not None else None,
        )
        if self.username:
            request.auth = HTTPBasicAuth(self.username, self.password or "")
        prepare = getattr(self.http_client, "prepare_request", None)
        return prepare(request) if prepare is not None else request.prepare()

    def new_request(
        self, method: str, url: str, body: Any = None, params: Any = None
    ) -> requests.PreparedRequest:
        """Build a request whose body, if given, is JSON encoded."""
        data = json.dumps(body).encode("utf-8") if body is not None else None
        return self._prepare(
            method, url, data, {"Content-Type": "application/json"}, params
        )

    def new_raw_request(
        self, method: str, url: str, body: Any = None
    ) -> requests.PreparedRequest:
        """Build a request whose body is sent as given."""
        return self._prepare(method, url, body, {"Content-Type": "application/json"})

    def new_multipart_request(
        self, method: str, url: str, body: bytes, content_type: str | None = None
    ) -> requests.PreparedRequest:
        """Build a request carrying an already encoded multipart form."""
        headers = {"X-Atlassian-Token": "nocheck"}
        if content_type:
            headers["Content-Type"] = content_type
        return self._prepare(method, url, body, headers)

    def do(self, request: requests.PreparedRequest) -> Response:
        """Send a prepared request; raise JiraError on a non-2xx answer."""
        http_response = self.http_client.send(request)
        response = Response(http_response)
        check_response(response)
        return response

    def call(
        self,
        method: str,
        url: str,
        body: Any = None,
        params: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        """Build a JSON request, add extra headers and send it."""
        request = self.new_request(method, url, body, params)
        if headers:
            request.headers.update(headers)
        return self.do(request)