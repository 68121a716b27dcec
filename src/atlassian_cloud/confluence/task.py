"""Long-running task endpoints."""

from atlassian_cloud.confluence.models import LongTask, LongTaskPage
from atlassian_cloud.confluence.service import ConfluenceService


class LongTaskService(ConfluenceService):
    """Progress of space deletions, hierarchy copies and archives."""

    def gets(self, start_at: int = 0, max_results: int = 50) -> LongTaskPage:
        params = {"start": start_at, "limit": max_results}
        return self._get(self._api("longtask"), params=params, model=LongTaskPage)

    def get(self, task_id: str) -> LongTask:
        self._require(task_id, "no task id set", field="task_id")
        return self._get(self._api(f"longtask/{task_id}"), model=LongTask)
