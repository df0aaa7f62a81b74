# jirarest

A small client for the Jira REST API and the Jira Service Management
(service desk) API, built on `requests`.

It covers:

- issue create and edit metadata, with checks for mandatory and available
  fields
- projects, project permission schemes and permission schemes
- priorities, resolutions and project roles
- service desk organizations, their users and their properties
- service desk customers, customer requests and request comments

## Installation

```
pip install jirarest
```

To run the test suite:

```
pip install "jirarest[test]"
pytest
```

## Getting started

`jirarest.jira.Jira` bundles one service object per API area around a
single `jirarest.client.Client`:

```python
from jirarest.jira import Jira

password = "password"
jira = Jira("https://jira.example.com", username="user", password=password)

projects = jira.project.get_list()
priorities = jira.priority.get_list()
role = jira.role.get(10002)
```

Its attributes are `client`, `issue`, `project`, `priority`, `resolution`,
`role`, `permission_scheme`, `request`, `organization`, `service_desk` and
`base_url`.

A trailing slash is added to the base URL if it is missing, and endpoint
paths are resolved against it with any leading slash removed. The services
can also be built on their own from a `Client`:

```python
from jirarest.client import Client
from jirarest.resolution import ResolutionService

password = "password"
client = Client("https://jira.example.com", username="user", password=password)
resolutions = ResolutionService(client).get_list()
```

### Authentication

When a `username` is given, every request carries HTTP Basic credentials.
For anything else, pass your own `requests.Session` as `http_client`; the
client prepares requests through it, so its headers, cookies and `auth`
apply to every call.

### Low-level calls

`Client.call(method, url, body, params, headers)` sends a JSON request and
returns a `jirarest.client.Response`, whose `json()` decodes the body and
fills `start_at`, `max_results` and `total` when the body carries them.
`Client.new_request`, `new_raw_request` and `new_multipart_request` build
prepared requests that `Client.do` sends. `QueryOptions(expand=...,
project_keys=...)` and `add_options(url, options)` help with query strings.

### Errors

Any response outside the 2xx range raises `jirarest.client.JiraError`,
which keeps the response (`error.response`, `error.status_code`). A body
that is not valid JSON, or not of the expected shape, raises it as well,
and so does a lookup of a role or permission scheme that returns an empty
object.

### Issue metadata

```python
meta = jira.issue.get_create_meta("SPN")
project = meta.get_project_with_key("SPN")
issue_type = project.get_issue_type_with_name("Bug")

issue_type.get_mandatory_fields()   # {"Summary": "summary", ...}
issue_type.check_complete_and_available({"Summary": "Broken build"})

edit = jira.issue.get_edit_meta("PROJ-9001")
```

Name and key lookups are case-insensitive and return `None` when nothing
matches. `get_mandatory_fields`, `get_all_fields` and
`check_complete_and_available` raise `ValueError` when a field description
lacks its `required` or `name` entry, when a mandatory field is missing
from the given config, or when the config names a field that is not
available.

### Service desk

```python
from jirarest.request import Request, RequestFieldValue
from jirarest.servicedesk import CustomerListOptions

jira.service_desk.add_customers(10000, "account-1", "account-2")
customers = jira.service_desk.list_customers(
    10000, CustomerListOptions(query="fred@example.com", start=1, limit=10)
)

jira.request.create(
    "account-1",
    ["account-2"],
    Request(
        service_desk_id="10",
        type_id="25",
        field_values=[RequestFieldValue(field_id="summary", value="New mouse")],
    ),
)

orgs = jira.organization.get_all_organizations(0, 50)
```

Service desk ids may be given as numbers or as strings. Paged answers come
back as `jirarest.organization.PagedDTO`.

## What it does not do

Only HTTP Basic credentials are built in. There are no ready-made helpers
for bearer tokens, personal access tokens, session-cookie login or
JWT-signed requests; set those up on the `requests.Session` you pass in.
The package has no command-line tool.