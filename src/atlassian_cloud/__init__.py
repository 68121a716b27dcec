"""
atlassian-cloud: Client library for the Jira and Confluence Cloud REST APIs.

Each client groups the endpoints of one product into services that map one
method to one REST operation. Requests share a single HTTP helper that
handles authentication, query encoding, JSON decoding and error mapping.

Example Usage:
    from atlassian_cloud import ConfluenceClient, JiraClient

    # Credentials come from arguments, ATLASSIAN_* env vars, keyring or .env
    with JiraClient(version="3") as jira:
        issue = jira.issue.get("KP-2", fields=["summary"])
        jira.issue.comment.add("KP-2", {"body": "Triaged"})

    with ConfluenceClient() as confluence:
        pages = confluence.content.search("space = OPS AND type = page")
"""

from atlassian_cloud.confluence import ConfluenceClient
from atlassian_cloud.core.exceptions import (
    AtlassianConnectionError,
    AtlassianError,
    AuthenticationError,
    DecodeError,
    NotFoundError,
    RateLimitError,
    RequestFailedError,
    ValidationError,
)
from atlassian_cloud.jira import CustomFields, JiraClient, UpdateOperations

__version__ = "0.1.0"

__all__ = [
    # Clients
    "JiraClient",
    "ConfluenceClient",
    # Payload builders
    "CustomFields",
    "UpdateOperations",
    # Exceptions
    "AtlassianError",
    "AtlassianConnectionError",
    "AuthenticationError",
    "DecodeError",
    "NotFoundError",
    "RateLimitError",
    "RequestFailedError",
    "ValidationError",
]
