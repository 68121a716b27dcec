"""Jira Cloud client.

Example:
    from atlassian_cloud.jira import JiraClient

    with JiraClient() as jira:
        issue = jira.issue.get("KP-2", fields=["summary", "status"])
        jira.issue.comment.add("KP-2", {"body": "Looks good"})
        page = jira.issue.search.get("project = KP ORDER BY created DESC")
"""

from typing import Any

from atlassian_cloud.client.base import AtlassianClient
from atlassian_cloud.jira.dashboard import DashboardService
from atlassian_cloud.jira.issue import IssueService
from atlassian_cloud.jira.project import ProjectService
from atlassian_cloud.jira.service import API_VERSIONS, DEFAULT_API_VERSION
from atlassian_cloud.jira.system import MySelfService, ServerService
from atlassian_cloud.jira.task import TaskService


class JiraClient(AtlassianClient):
    """Entry point to the Jira REST API.

    Attributes:
        issue: Issues, with ``comment``, ``link``, ``remote_link`` and ``search``
        project: Projects, with ``role``, ``version`` and ``component``
        dashboard: Dashboards
        task: Long-running tasks
        myself: The authenticated user
        server: Server information
    """

    provider_name = "jira"

    def __init__(self, version: str = DEFAULT_API_VERSION, **kwargs: Any) -> None:
        """Initialize the client.

        Args:
            version: REST API version, "3" (ADF rich text) or "2" (wiki markup)
            **kwargs: Passed to AtlassianClient (base_url, email, api_token, ...)

        Raises:
            ValueError: If the version is not supported or credentials are missing
        """
        if version not in API_VERSIONS:
            raise ValueError(f"Unsupported Jira API version {version!r}, expected one of {', '.join(API_VERSIONS)}")
        super().__init__(**kwargs)
        self.api_version = version
        self.health_path = f"/rest/api/{version}/serverInfo"

        self.issue = IssueService(self, version)
        self.project = ProjectService(self, version)
        self.dashboard = DashboardService(self, version)
        self.task = TaskService(self, version)
        self.myself = MySelfService(self, version)
        self.server = ServerService(self, version)
