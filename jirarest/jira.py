"""Entry point bundling all API services around one client."""

from __future__ import annotations

import requests

from jirarest.client import Client
from jirarest.metaissue import IssueMetaService
from jirarest.organization import OrganizationService
from jirarest.permissionscheme import PermissionSchemeService
from jirarest.priority import PriorityService
from jirarest.project import ProjectService
from jirarest.request import RequestService
from jirarest.resolution import ResolutionService
from jirarest.role import RoleService
from jirarest.servicedesk import ServiceDeskService


class Jira:
    """A Jira API client exposing one attribute per service."""

    def __init__(
        self,
        base_url: str,
        http_client: requests.Session | None = None,
        username: str | None = None,
        password: str | None = None,
    ) -> None:
        self.client = Client(base_url, http_client, username, password)
        self.issue = IssueMetaService(self.client)
        self.project = ProjectService(self.client)
        self.priority = PriorityService(self.client)
        self.resolution = ResolutionService(self.client)
        self.role = RoleService(self.client)
        self.permission_scheme = PermissionSchemeService(self.client)
        self.request = RequestService(self.client)
        self.organization = OrganizationService(self.client)
        self.service_desk = ServiceDeskService(self.client)

    @property
    def base_url(self) -> str:
        """The base URL of the instance, always ending in a slash."""
        return self.client.base_url