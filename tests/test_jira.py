import base64

import pytest
import requests
import responses

from jirarest.jira import Jira

BASE = "https://jira.example.com"


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


def test_base_url_gets_trailing_slash():
    jira = Jira(BASE)
    assert jira.base_url == BASE + "/"


def test_base_url_with_slash_is_kept():
    jira = Jira(BASE + "/")
    assert jira.base_url == BASE + "/"


def test_services_share_one_client():
    jira = Jira(BASE)
    services = [
        jira.issue,
        jira.project,
        jira.priority,
        jira.resolution,
        jira.role,
        jira.permission_scheme,
        jira.request,
        jira.organization,
        jira.service_desk,
    ]
    assert all(service.client is jira.client for service in services)


def test_given_http_client_is_used():
    session = requests.Session()
    jira = Jira(BASE, session)
    assert jira.client.http_client is session


def test_call_through_service_resolves_against_base(mocked):
    mocked.add(
        responses.GET,
        BASE + "/rest/api/2/priority",
        json=[{"name": "Urgent", "id": "2"}],
    )
    jira = Jira(BASE)
    priorities = jira.priority.get_list()
    assert [p.name for p in priorities] == ["Urgent"]
    assert mocked.calls[0].request.url == BASE + "/rest/api/2/priority"


def test_basic_credentials_are_sent(mocked):
    mocked.add(responses.GET, BASE + "/rest/api/2/resolution", json=[])
    username = "user"
    password = "password"
    jira = Jira(BASE, username=username, password=password)
    assert jira.resolution.get_list() == []
    header = mocked.calls[0].request.headers["Authorization"]
    scheme, _, encoded = header.partition(" ")
    assert scheme == "Basic"
    assert base64.b64decode(encoded).decode() == f"{username}:{password}"


def test_no_credentials_no_authorization_header(mocked):
    mocked.add(responses.GET, BASE + "/rest/api/2/resolution", json=[])
    jira = Jira(BASE)
    jira.resolution.get_list()
    assert "Authorization" not in mocked.calls[0].request.headers