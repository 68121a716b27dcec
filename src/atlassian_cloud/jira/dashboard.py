"""Dashboard endpoints."""

import logging
from typing import Any

from atlassian_cloud.client.base import join
from atlassian_cloud.jira.models import (
    Dashboard,
    DashboardPage,
    DashboardPayload,
    DashboardSearchOptions,
    DashboardSearchPage,
)
from atlassian_cloud.jira.service import JiraService

logger = logging.getLogger(__name__)

NO_DASHBOARD = "no dashboard id set"


class DashboardService(JiraService):
    def gets(self, start_at: int = 0, max_results: int = 50, filter: str | None = None) -> DashboardPage:
        """List dashboards.

        Args:
            start_at: Index of the first dashboard
            max_results: Page size
            filter: 'favourite' or 'my'
        """
        params = {"startAt": start_at, "maxResults": max_results, "filter": filter}
        return self._get(self._api("dashboard"), params=params, model=DashboardPage)

    def create(self, payload: DashboardPayload | dict[str, Any]) -> Dashboard:
        dashboard = self._post(self._api("dashboard"), json=self._payload(payload), model=Dashboard)
        logger.info("Created dashboard %s", dashboard.id)
        return dashboard

    def search(
        self,
        options: DashboardSearchOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> DashboardSearchPage:
        """Paginated dashboard search."""
        params: dict[str, Any] = {"startAt": start_at, "maxResults": max_results}
        if options is not None:
            params.update(
                {
                    "accountId": options.owner_account_id,
                    "dashboardName": options.dashboard_name,
                    "groupname": options.group_permission_name,
                    "orderBy": options.order_by,
                    "expand": join(options.expand),
                }
            )
        return self._get(self._api("dashboard/search"), params=params, model=DashboardSearchPage)

    def get(self, dashboard_id: str) -> Dashboard:
        self._require(dashboard_id, NO_DASHBOARD, field="dashboard_id")
        return self._get(self._api(f"dashboard/{dashboard_id}"), model=Dashboard)

    def delete(self, dashboard_id: str) -> None:
        self._require(dashboard_id, NO_DASHBOARD, field="dashboard_id")
        self._delete(self._api(f"dashboard/{dashboard_id}"))
        logger.info("Deleted dashboard %s", dashboard_id)

    def copy(self, dashboard_id: str, payload: DashboardPayload | dict[str, Any]) -> Dashboard:
        """Copy a dashboard under a new name and sharing settings."""
        self._require(dashboard_id, NO_DASHBOARD, field="dashboard_id")
        return self._post(self._api(f"dashboard/{dashboard_id}/copy"), json=self._payload(payload), model=Dashboard)

    def update(self, dashboard_id: str, payload: DashboardPayload | dict[str, Any]) -> Dashboard:
        self._require(dashboard_id, NO_DASHBOARD, field="dashboard_id")
        return self._put(self._api(f"dashboard/{dashboard_id}"), json=self._payload(payload), model=Dashboard)
