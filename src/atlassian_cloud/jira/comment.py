"""Issue comment endpoints."""

from typing import Any

from atlassian_cloud.client.base import join
from atlassian_cloud.jira.models import Comment, CommentPage
from atlassian_cloud.jira.service import JiraService

NO_ISSUE = "no issue key/id set"
NO_COMMENT = "no comment id set"


class CommentService(JiraService):
    """Comments of an issue. Bodies are ADF documents on v3 and strings on v2."""

    def gets(
        self,
        issue_key_or_id: str,
        order_by: str | None = None,
        expand: list[str] | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> CommentPage:
        """List comments of an issue.

        Args:
            issue_key_or_id: Issue key or id
            order_by: 'created' or '-created'
            expand: e.g. ['renderedBody']
            start_at: Index of the first comment
            max_results: Page size
        """
        self._require(issue_key_or_id, NO_ISSUE, field="issue_key_or_id")
        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "expand": join(expand),
            "orderBy": order_by,
        }
        return self._get(self._api(f"issue/{issue_key_or_id}/comment"), params=params, model=CommentPage)

    def get(self, issue_key_or_id: str, comment_id: str) -> Comment:
        self._require(issue_key_or_id, NO_ISSUE, field="issue_key_or_id")
        self._require(comment_id, NO_COMMENT, field="comment_id")
        return self._get(self._api(f"issue/{issue_key_or_id}/comment/{comment_id}"), model=Comment)

    def add(
        self,
        issue_key_or_id: str,
        payload: Comment | dict[str, Any],
        expand: list[str] | None = None,
    ) -> Comment:
        """Add a comment. ``payload`` needs at least ``body``."""
        self._require(issue_key_or_id, NO_ISSUE, field="issue_key_or_id")
        return self._post(
            self._api(f"issue/{issue_key_or_id}/comment"),
            json=self._payload(payload, "no comment body set"),
            params={"expand": join(expand)},
            model=Comment,
        )

    def update(self, issue_key_or_id: str, comment_id: str, payload: Comment | dict[str, Any]) -> Comment:
        self._require(issue_key_or_id, NO_ISSUE, field="issue_key_or_id")
        self._require(comment_id, NO_COMMENT, field="comment_id")
        return self._put(
            self._api(f"issue/{issue_key_or_id}/comment/{comment_id}"),
            json=self._payload(payload, "no comment body set"),
            model=Comment,
        )

    def delete(self, issue_key_or_id: str, comment_id: str) -> None:
        self._require(issue_key_or_id, NO_ISSUE, field="issue_key_or_id")
        self._require(comment_id, NO_COMMENT, field="comment_id")
        self._delete(self._api(f"issue/{issue_key_or_id}/comment/{comment_id}"))
