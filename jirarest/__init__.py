"""Client library for the Jira REST and Jira Service Management APIs."""

__version__ = "0.1.0"

__all__ = [
    "client",
    "jira",
    "metaissue",
    "organization",
    "permissionscheme",
    "priority",
    "project",
    "request",
    "resolution",
    "role",
    "servicedesk",
]