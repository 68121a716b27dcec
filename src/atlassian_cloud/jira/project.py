"""Jira project endpoints."""

import logging
from typing import Any

from atlassian_cloud.client.base import AtlassianClient, join
from atlassian_cloud.jira.component import ProjectComponentService
from atlassian_cloud.jira.models import (
    NotificationScheme,
    Project,
    ProjectCreated,
    ProjectIssueTypeStatuses,
    ProjectPage,
    ProjectPayload,
    ProjectSearchOptions,
    Task,
)
from atlassian_cloud.jira.role import ProjectRoleService
from atlassian_cloud.jira.service import DEFAULT_API_VERSION, JiraService
from atlassian_cloud.jira.version import ProjectVersionService

logger = logging.getLogger(__name__)

NO_PROJECT = "no project id or key set"


class ProjectService(JiraService):
    """Create, search, edit, archive and delete projects.

    Attributes:
        role: Project roles
        version: Project versions
        component: Project components
    """

    def __init__(self, client: AtlassianClient, version: str = DEFAULT_API_VERSION) -> None:
        super().__init__(client, version)
        self.role = ProjectRoleService(client, version)
        self.version = ProjectVersionService(client, version)
        self.component = ProjectComponentService(client, version)

    def create(self, payload: ProjectPayload | dict[str, Any]) -> ProjectCreated:
        """Create a project.

        ``key``, ``name``, ``project_type_key`` and ``lead_account_id`` are
        required by Jira; the first three are checked before sending.
        """
        body = self._payload(payload)
        self._require(body.get("key"), "no project key set", field="key")
        self._require(body.get("name"), "no project name set", field="name")
        self._require(body.get("projectTypeKey"), "no project type key set", field="project_type_key")
        created = self._post(self._api("project"), json=body, model=ProjectCreated)
        logger.info("Created project %s (%s)", created.key, created.id)
        return created

    def search(
        self,
        options: ProjectSearchOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> ProjectPage:
        """Paginated list of visible projects."""
        params: dict[str, Any] = {"startAt": start_at, "maxResults": max_results}
        if options is not None:
            params.update(
                {
                    "expand": join(options.expand),
                    "id": options.ids,
                    "keys": options.keys,
                    "orderBy": options.order_by,
                    "query": options.query,
                    "typeKey": join(options.type_keys),
                    "categoryId": options.category_id,
                    "action": options.action,
                    "status": join(options.status),
                    "properties": join(options.properties),
                    "propertyQuery": options.property_query,
                }
            )
        return self._get(self._api("project/search"), params=params, model=ProjectPage)

    def get(self, project_key_or_id: str, expand: list[str] | None = None) -> Project:
        self._require(project_key_or_id, NO_PROJECT, field="project_key_or_id")
        return self._get(
            self._api(f"project/{project_key_or_id}"),
            params={"expand": join(expand)},
            model=Project,
        )

    def update(self, project_key_or_id: str, payload: ProjectPayload | dict[str, Any]) -> Project:
        self._require(project_key_or_id, NO_PROJECT, field="project_key_or_id")
        return self._put(self._api(f"project/{project_key_or_id}"), json=self._payload(payload), model=Project)

    def delete(self, project_key_or_id: str, enable_undo: bool = True) -> None:
        """Delete a project. With ``enable_undo`` it goes to the trash for 60 days."""
        self._require(project_key_or_id, NO_PROJECT, field="project_key_or_id")
        self._delete(self._api(f"project/{project_key_or_id}"), params={"enableUndo": enable_undo})
        logger.info("Deleted project %s", project_key_or_id)

    def delete_async(self, project_key_or_id: str) -> Task:
        """Delete a project in the background; poll the returned task."""
        self._require(project_key_or_id, NO_PROJECT, field="project_key_or_id")
        task = self._post(self._api(f"project/{project_key_or_id}/delete"), model=Task)
        logger.info("Scheduled deletion of project %s (task %s)", project_key_or_id, task.id)
        return task

    def archive(self, project_key_or_id: str) -> None:
        self._require(project_key_or_id, NO_PROJECT, field="project_key_or_id")
        self._post(self._api(f"project/{project_key_or_id}/archive"))
        logger.info("Archived project %s", project_key_or_id)

    def restore(self, project_key_or_id: str) -> Project:
        """Restore an archived or trashed project."""
        self._require(project_key_or_id, NO_PROJECT, field="project_key_or_id")
        return self._post(self._api(f"project/{project_key_or_id}/restore"), model=Project)

    def statuses(self, project_key_or_id: str) -> list[ProjectIssueTypeStatuses]:
        """Valid statuses for each issue type of a project."""
        self._require(project_key_or_id, NO_PROJECT, field="project_key_or_id")
        return self._get(
            self._api(f"project/{project_key_or_id}/statuses"),
            model=list[ProjectIssueTypeStatuses],
        )

    def notification_scheme(self, project_key_or_id: str, expand: list[str] | None = None) -> NotificationScheme:
        self._require(project_key_or_id, NO_PROJECT, field="project_key_or_id")
        return self._get(
            self._api(f"project/{project_key_or_id}/notificationscheme"),
            params={"expand": join(expand)},
            model=NotificationScheme,
        )
