"""Long-running task endpoints."""

import logging

from atlassian_cloud.jira.models import Task
from atlassian_cloud.jira.service import JiraService

logger = logging.getLogger(__name__)

NO_TASK = "no task id set"


class TaskService(JiraService):
    """Status of asynchronous operations such as project deletion."""

    def get(self, task_id: str) -> Task:
        self._require(task_id, NO_TASK, field="task_id")
        return self._get(self._api(f"task/{task_id}"), model=Task)

    def cancel(self, task_id: str) -> None:
        """Request cancellation. The task moves to CANCEL_REQUESTED."""
        self._require(task_id, NO_TASK, field="task_id")
        self._post(self._api(f"task/{task_id}/cancel"))
        logger.info("Requested cancellation of task %s", task_id)
