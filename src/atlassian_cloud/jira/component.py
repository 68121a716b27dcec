"""Project component endpoints."""

from typing import Any

from atlassian_cloud.jira.models import Component, ComponentCount
from atlassian_cloud.jira.service import JiraService

NO_COMPONENT = "no component id set"


class ProjectComponentService(JiraService):
    def create(self, payload: Component | dict[str, Any]) -> Component:
        """Create a component. ``name`` and ``project`` (key) are required."""
        return self._post(self._api("component"), json=self._payload(payload), model=Component)

    def gets(self, project_key_or_id: str) -> list[Component]:
        self._require(project_key_or_id, "no project id or key set", field="project_key_or_id")
        return self._get(self._api(f"project/{project_key_or_id}/components"), model=list[Component])

    def get(self, component_id: str) -> Component:
        self._require(component_id, NO_COMPONENT, field="component_id")
        return self._get(self._api(f"component/{component_id}"), model=Component)

    def update(self, component_id: str, payload: Component | dict[str, Any]) -> Component:
        self._require(component_id, NO_COMPONENT, field="component_id")
        return self._put(self._api(f"component/{component_id}"), json=self._payload(payload), model=Component)

    def delete(self, component_id: str) -> None:
        self._require(component_id, NO_COMPONENT, field="component_id")
        self._delete(self._api(f"component/{component_id}"))

    def count(self, component_id: str) -> ComponentCount:
        """Number of issues assigned to a component."""
        self._require(component_id, NO_COMPONENT, field="component_id")
        return self._get(self._api(f"component/{component_id}/relatedIssueCounts"), model=ComponentCount)
