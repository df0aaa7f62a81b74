import json
from urllib.parse import parse_qs, urlsplit

import pytest
import responses

from jirarest.client import Client, JiraError
from jirarest.organization import (
    EntityProperty,
    Organization,
    OrganizationService,
    OrganizationUsers,
    PagedDTO,
    PropertyKeys,
)

BASE = "https://jira.example.com/"
ORG_URL = BASE + "rest/servicedeskapi/organization"

ACCOUNT_A = "qm:00000000-0000-0000-0000-000000000001:user-one"
ACCOUNT_B = "qm:00000000-0000-0000-0000-000000000002:user-two"


@pytest.fixture
def rsps():
    with responses.RequestsMock() as mock:
        yield mock


@pytest.fixture
def service():
    return OrganizationService(Client(BASE))


def test_get_all_organizations(rsps, service):
    rsps.add(
        responses.GET,
        ORG_URL,
        json={
            "_expands": [],
            "size": 1,
            "start": 1,
            "limit": 1,
            "isLastPage": False,
            "values": [
                {
                    "id": "1",
                    "name": "Charlie Cakes Franchises",
                    "_links": {"self": ORG_URL + "/1"},
                }
            ],
        },
    )
    result = service.get_all_organizations(0, 50, "")
    assert result.size == 1
    assert result.limit == 1
    assert result.values[0]["name"] == "Charlie Cakes Franchises"
    request = rsps.calls[0].request
    assert request.method == "GET"
    assert urlsplit(request.url).path == "/rest/servicedeskapi/organization"
    assert parse_qs(urlsplit(request.url).query) == {"start": ["0"], "limit": ["50"]}
    assert request.headers["Accept"] == "application/json"


def test_get_all_organizations_with_account_id(rsps, service):
    rsps.add(responses.GET, ORG_URL, json={"size": 0})
    service.get_all_organizations(2, 10, ACCOUNT_A)
    query = parse_qs(urlsplit(rsps.calls[0].request.url).query)
    assert query["accountId"] == [ACCOUNT_A]
    assert query["start"] == ["2"]


def test_create_organization(rsps, service):
    def handler(request):
        sent = json.loads(request.body)
        body = {"id": "1", "name": sent["name"], "_links": {"self": ORG_URL + "/1"}}
        return 201, {}, json.dumps(body)

    rsps.add_callback(responses.POST, ORG_URL, callback=handler)
    organization = service.create_organization("MyOrg")
    assert organization.name == "MyOrg"
    assert organization.id == "1"
    assert organization.links.self_url == ORG_URL + "/1"


def test_get_organization(rsps, service):
    rsps.add(
        responses.GET,
        ORG_URL + "/1",
        json={"id": "1", "name": "name", "_links": {"self": ORG_URL + "/1"}},
    )
    organization = service.get_organization(1)
    assert organization == Organization.from_dict(
        {"id": "1", "name": "name", "_links": {"self": ORG_URL + "/1"}}
    )
    assert organization.name == "name"


def test_delete_organization(rsps, service):
    rsps.add(responses.DELETE, ORG_URL + "/1", status=204)
    response = service.delete_organization(1)
    assert response.status_code == 204
    assert rsps.calls[0].request.method == "DELETE"


def test_get_properties_keys(rsps, service):
    rsps.add(
        responses.GET,
        ORG_URL + "/1/property",
        json={
            "keys": [
                {
                    "self": "/rest/servicedeskapi/organization/1/property/propertyKey",
                    "key": "organization.attributes",
                }
            ]
        },
    )
    keys = service.get_properties_keys(1)
    assert keys.keys[0].key == "organization.attributes"


def test_get_property(rsps, service):
    key = "organization.attributes"
    rsps.add(
        responses.GET,
        ORG_URL + "/1/property/" + key,
        json={
            "key": key,
            "value": {"phone": "0800-[phone]", "mail": "charlie@example.com"},
        },
    )
    prop = service.get_property(1, key)
    assert prop.key == key
    assert prop.value["mail"] == "charlie@example.com"


def test_set_property(rsps, service):
    key = "organization.attributes"
    rsps.add(responses.PUT, ORG_URL + "/1/property/" + key, status=200)
    response = service.set_property(1, key)
    assert response.status_code == 200
    assert rsps.calls[0].request.method == "PUT"


def test_delete_property(rsps, service):
    key = "organization.attributes"
    rsps.add(responses.DELETE, ORG_URL + "/1/property/" + key, status=200)
    response = service.delete_property(1, key)
    assert response.status_code == 200
    assert rsps.calls[0].request.method == "DELETE"


def test_get_users(rsps, service):
    rsps.add(
        responses.GET,
        ORG_URL + "/1/user",
        json={
            "_expands": [],
            "size": 1,
            "start": 1,
            "limit": 1,
            "isLastPage": False,
            "values": [
                {"accountId": ACCOUNT_A, "emailAddress": "fred@example.com"},
                {"accountId": ACCOUNT_B, "emailAddress": "bob@example.com"},
            ],
        },
    )
    users = service.get_users(1, 0, 50)
    assert users.size == 1
    assert [item["emailAddress"] for item in users.values] == [
        "fred@example.com",
        "bob@example.com",
    ]
    query = parse_qs(urlsplit(rsps.calls[0].request.url).query)
    assert query == {"start": ["0"], "limit": ["50"]}


def test_add_users(rsps, service):
    rsps.add(responses.POST, ORG_URL + "/1/user", status=204)
    users = OrganizationUsers(account_ids=[ACCOUNT_A, ACCOUNT_B])
    response = service.add_users(1, users)
    assert response.status_code == 204
    assert json.loads(rsps.calls[0].request.body) == {"accountIds": [ACCOUNT_A, ACCOUNT_B]}


def test_remove_users(rsps, service):
    rsps.add(responses.DELETE, ORG_URL + "/1/user", status=204)
    users = OrganizationUsers(account_ids=[ACCOUNT_A, ACCOUNT_B])
    response = service.remove_users(1, users)
    assert response.status_code == 204
    assert rsps.calls[0].request.method == "DELETE"


def test_error_status_raises(rsps, service):
    rsps.add(responses.GET, ORG_URL + "/7", status=404, body="not found")
    with pytest.raises(JiraError) as info:
        service.get_organization(7)
    assert info.value.status_code == 404


def test_non_object_body_raises(rsps, service):
    rsps.add(responses.GET, ORG_URL + "/1/property", json=[1, 2])
    with pytest.raises(JiraError):
        service.get_properties_keys(1)


def test_organization_users_to_dict_omits_empty():
    assert OrganizationUsers().to_dict() == {}
    assert OrganizationUsers(account_ids=[ACCOUNT_A]).to_dict() == {"accountIds": [ACCOUNT_A]}


def test_paged_dto_defaults():
    page = PagedDTO.from_dict({"isLastPage": True, "_expands": ["x"]})
    assert page.size == 0
    assert page.is_last_page is True
    assert page.expands == ["x"]
    assert page.values == []


def test_property_keys_and_entity_property_from_dict():
    keys = PropertyKeys.from_dict({"keys": [{"self": "s", "key": "k"}]})
    assert keys.keys[0].self_url == "s"
    prop = EntityProperty.from_dict({"key": "k", "value": [1, 2]})
    assert prop.value == [1, 2]


def test_organization_without_links():
    organization = Organization.from_dict({"id": "5", "name": "n"})
    assert organization.links is None
    assert organization.id == "5"