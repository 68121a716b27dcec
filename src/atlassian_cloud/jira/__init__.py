"""Jira Cloud REST API (v2 and v3).

Example:
    from atlassian_cloud.jira import CustomFields, JiraClient

    with JiraClient(version="3") as jira:
        fields = CustomFields().select("customfield_10010", "High")
        jira.issue.update("KP-2", {"fields": {"summary": "New title"}}, custom_fields=fields)
"""

from atlassian_cloud.jira.client import JiraClient
from atlassian_cloud.jira.custom_fields import (
    CustomFields,
    UpdateOperations,
    build_issue_payload,
    deep_merge,
    merge_custom_fields,
    merge_operations,
    parse_custom_field,
    parse_custom_fields,
)

__all__ = [
    "JiraClient",
    "CustomFields",
    "UpdateOperations",
    "build_issue_payload",
    "deep_merge",
    "merge_custom_fields",
    "merge_operations",
    "parse_custom_field",
    "parse_custom_fields",
]
