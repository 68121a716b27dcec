"""Project role endpoints."""

from typing import Any
from urllib.parse import urlparse

from atlassian_cloud.core.exceptions import DecodeError
from atlassian_cloud.jira.models import ProjectRole, ProjectRolePayload
from atlassian_cloud.jira.service import JiraService

NO_PROJECT = "no project id or key set"


class ProjectRoleService(JiraService):
    def gets(self, project_key_or_id: str) -> dict[str, int]:
        """Map role name to role id for a project.

        Jira answers with role URLs; the id is the last path segment.
        """
        self._require(project_key_or_id, NO_PROJECT, field="project_key_or_id")
        links = self._get(self._api(f"project/{project_key_or_id}/role"), model=dict[str, str])

        roles: dict[str, int] = {}
        for name, link in links.items():
            segment = urlparse(link).path.rstrip("/").rsplit("/", 1)[-1]
            try:
                roles[name] = int(segment)
            except ValueError as e:
                raise DecodeError(
                    f"Cannot read role id from {link!r}",
                    provider=self._client.provider_name,
                ) from e
        return roles

    def get(self, project_key_or_id: str, role_id: int) -> ProjectRole:
        """Get a role with its actors in a project."""
        self._require(project_key_or_id, NO_PROJECT, field="project_key_or_id")
        self._require(role_id, "no project role id set", field="role_id")
        return self._get(self._api(f"project/{project_key_or_id}/role/{role_id}"), model=ProjectRole)

    def details(self, project_key_or_id: str) -> list[ProjectRole]:
        """Roles of a project, without actors."""
        self._require(project_key_or_id, NO_PROJECT, field="project_key_or_id")
        return self._get(self._api(f"project/{project_key_or_id}/roledetails"), model=list[ProjectRole])

    def global_roles(self) -> list[ProjectRole]:
        """All project roles of the site."""
        return self._get(self._api("role"), model=list[ProjectRole])

    def create(self, payload: ProjectRolePayload | dict[str, Any]) -> ProjectRole:
        return self._post(self._api("role"), json=self._payload(payload), model=ProjectRole)
