"""Project version endpoints."""

import logging
from typing import Any

from atlassian_cloud.client.base import join
from atlassian_cloud.jira.models import (
    Version,
    VersionIssueCounts,
    VersionPage,
    VersionSearchOptions,
    VersionUnresolvedCount,
)
from atlassian_cloud.jira.service import JiraService

logger = logging.getLogger(__name__)

NO_PROJECT = "no project id or key set"
NO_VERSION = "no version id set"


class ProjectVersionService(JiraService):
    """Versions (releases) of a project."""

    def gets(self, project_key_or_id: str) -> list[Version]:
        """All versions of a project, unpaginated."""
        self._require(project_key_or_id, NO_PROJECT, field="project_key_or_id")
        return self._get(self._api(f"project/{project_key_or_id}/versions"), model=list[Version])

    def search(
        self,
        project_key_or_id: str,
        options: VersionSearchOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> VersionPage:
        """Paginated, filterable list of versions of a project."""
        self._require(project_key_or_id, NO_PROJECT, field="project_key_or_id")
        params: dict[str, Any] = {"startAt": start_at, "maxResults": max_results}
        if options is not None:
            params.update(
                {
                    "expand": join(options.expand),
                    "query": options.query,
                    "status": join(options.status),
                    "orderBy": options.order_by,
                }
            )
        return self._get(self._api(f"project/{project_key_or_id}/version"), params=params, model=VersionPage)

    def create(self, payload: Version | dict[str, Any]) -> Version:
        """Create a version. ``name`` and ``project_id`` are required."""
        body = self._payload(payload)
        self._require(body.get("name"), "no version name set", field="name")
        self._require(body.get("projectId"), "no project id set", field="project_id")
        version = self._post(self._api("version"), json=body, model=Version)
        logger.info("Created version %s (%s)", version.name, version.id)
        return version

    def get(self, version_id: str, expand: list[str] | None = None) -> Version:
        self._require(version_id, NO_VERSION, field="version_id")
        return self._get(self._api(f"version/{version_id}"), params={"expand": join(expand)}, model=Version)

    def update(self, version_id: str, payload: Version | dict[str, Any]) -> Version:
        self._require(version_id, NO_VERSION, field="version_id")
        return self._put(self._api(f"version/{version_id}"), json=self._payload(payload), model=Version)

    def merge(self, version_id: str, move_issues_to: str) -> None:
        """Move the issues of ``version_id`` to ``move_issues_to`` and delete it."""
        self._require(version_id, NO_VERSION, field="version_id")
        self._require(move_issues_to, NO_VERSION, field="move_issues_to")
        self._put(self._api(f"version/{version_id}/mergeto/{move_issues_to}"))
        logger.info("Merged version %s into %s", version_id, move_issues_to)

    def related_issue_counts(self, version_id: str) -> VersionIssueCounts:
        self._require(version_id, NO_VERSION, field="version_id")
        return self._get(self._api(f"version/{version_id}/relatedIssueCounts"), model=VersionIssueCounts)

    def unresolved_issue_count(self, version_id: str) -> VersionUnresolvedCount:
        self._require(version_id, NO_VERSION, field="version_id")
        return self._get(self._api(f"version/{version_id}/unresolvedIssueCount"), model=VersionUnresolvedCount)
