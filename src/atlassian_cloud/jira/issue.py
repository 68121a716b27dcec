"""Jira issue endpoints.

Payloads accept either models from :mod:`atlassian_cloud.jira.models` or plain
dicts. Custom fields and update operations are merged into the serialized
payload by :func:`atlassian_cloud.jira.custom_fields.build_issue_payload`.
"""

import logging
from typing import Any

from atlassian_cloud.client.base import AtlassianClient, join
from atlassian_cloud.jira.comment import CommentService
from atlassian_cloud.jira.custom_fields import (
    CustomFields,
    UpdateOperations,
    build_issue_payload,
    deep_merge,
)
from atlassian_cloud.jira.link import IssueLinkService
from atlassian_cloud.jira.models import (
    Issue,
    IssueBulkCreated,
    IssueCreated,
    IssueNotification,
    TransitionPage,
)
from atlassian_cloud.jira.remote_link import RemoteLinkService
from atlassian_cloud.jira.search import SearchService
from atlassian_cloud.jira.service import DEFAULT_API_VERSION, JiraService

logger = logging.getLogger(__name__)

NO_ISSUE = "no issue key/id set"


class IssueService(JiraService):
    """Create, read, edit, delete, assign and transition issues.

    Attributes:
        comment: Issue comments
        link: Issue links (and ``link.type`` for link types)
        remote_link: Links to external resources
        search: JQL search
    """

    def __init__(self, client: AtlassianClient, version: str = DEFAULT_API_VERSION) -> None:
        super().__init__(client, version)
        self.comment = CommentService(client, version)
        self.link = IssueLinkService(client, version)
        self.remote_link = RemoteLinkService(client, version)
        self.search = SearchService(client, version)

    def create(self, payload: Issue | dict[str, Any], custom_fields: CustomFields | None = None) -> IssueCreated:
        """Create an issue or subtask.

        Args:
            payload: Issue with at least project, issue type and summary set
            custom_fields: Optional custom-field values merged into ``fields``

        Returns:
            Id, key and URL of the new issue
        """
        body = build_issue_payload(self._payload(payload), custom_fields=custom_fields)
        created = self._post(self._api("issue"), json=body, model=IssueCreated)
        logger.info("Created issue %s", created.key)
        return created

    def create_bulk(
        self,
        payloads: list[tuple[Issue | dict[str, Any], CustomFields | None]],
    ) -> IssueBulkCreated:
        """Create up to 50 issues in one request.

        Args:
            payloads: ``(issue, custom_fields)`` pairs; ``custom_fields`` may be None

        Returns:
            Created issues and per-issue errors
        """
        if not payloads:
            self._require(None, "no issues payload set", field="payloads")

        updates = [
            build_issue_payload(payload, custom_fields=custom_fields)
            for payload, custom_fields in payloads
            if payload is not None
        ]
        result = self._post(self._api("issue/bulk"), json={"issueUpdates": updates}, model=IssueBulkCreated)
        logger.info("Bulk created %d issue(s), %d error(s)", len(result.issues), len(result.errors))
        return result

    def get(
        self,
        issue_key_or_id: str,
        fields: list[str] | None = None,
        expand: list[str] | None = None,
    ) -> Issue:
        """Get an issue.

        Args:
            issue_key_or_id: Issue key (e.g., 'KP-2') or id
            fields: Fields to return (e.g., ['summary', '-comment', '*all'])
            expand: Entities to expand (e.g., ['renderedFields', 'changelog'])
        """
        self._require(issue_key_or_id, NO_ISSUE, field="issue_key_or_id")
        params = {"expand": join(expand), "fields": join(fields)}
        return self._get(self._api(f"issue/{issue_key_or_id}"), params=params, model=Issue)

    def update(
        self,
        issue_key_or_id: str,
        payload: Issue | dict[str, Any] | None,
        notify: bool = True,
        custom_fields: CustomFields | None = None,
        operations: UpdateOperations | None = None,
    ) -> None:
        """Edit an issue.

        Args:
            issue_key_or_id: Issue key or id
            payload: Fields to set; may be None when only builders are passed
            notify: Whether watchers get an email
            custom_fields: Custom-field values merged into ``fields``
            operations: Update verbs merged into ``update``
        """
        self._require(issue_key_or_id, NO_ISSUE, field="issue_key_or_id")
        body = build_issue_payload(payload, custom_fields=custom_fields, operations=operations)
        self._put(self._api(f"issue/{issue_key_or_id}"), json=body, params={"notifyUsers": notify})

    def delete(self, issue_key_or_id: str, delete_subtasks: bool = False) -> None:
        """Delete an issue. Issues with subtasks need ``delete_subtasks=True``."""
        self._require(issue_key_or_id, NO_ISSUE, field="issue_key_or_id")
        self._delete(self._api(f"issue/{issue_key_or_id}"), params={"deleteSubtasks": delete_subtasks})
        logger.info("Deleted issue %s", issue_key_or_id)

    def assign(self, issue_key_or_id: str, account_id: str) -> None:
        """Assign an issue to a user by account id."""
        self._require(issue_key_or_id, NO_ISSUE, field="issue_key_or_id")
        self._require(account_id, "no account id set", field="account_id")
        self._put(self._api(f"issue/{issue_key_or_id}/assignee"), json={"accountId": account_id})

    def notify(self, issue_key_or_id: str, options: IssueNotification | dict[str, Any]) -> None:
        """Queue an email notification about an issue."""
        self._require(issue_key_or_id, NO_ISSUE, field="issue_key_or_id")
        self._post(self._api(f"issue/{issue_key_or_id}/notify"), json=self._payload(options))

    def transitions(self, issue_key_or_id: str) -> TransitionPage:
        """List the transitions available to the current user."""
        self._require(issue_key_or_id, NO_ISSUE, field="issue_key_or_id")
        return self._get(self._api(f"issue/{issue_key_or_id}/transitions"), model=TransitionPage)

    def move(
        self,
        issue_key_or_id: str,
        transition_id: str,
        fields: Issue | dict[str, Any] | None = None,
        custom_fields: CustomFields | None = None,
        operations: UpdateOperations | None = None,
    ) -> None:
        """Perform a workflow transition, optionally setting fields on the way.

        Args:
            issue_key_or_id: Issue key or id
            transition_id: Transition id, see :meth:`transitions`
            fields: Issue payload with fields required by the transition screen
            custom_fields: Custom-field values merged into ``fields``
            operations: Update verbs merged into ``update``
        """
        self._require(issue_key_or_id, NO_ISSUE, field="issue_key_or_id")
        self._require(transition_id, "no transition id set", field="transition_id")

        body = build_issue_payload(fields, custom_fields=custom_fields, operations=operations)
        deep_merge(body, {"transition": {"id": transition_id}})
        self._post(self._api(f"issue/{issue_key_or_id}/transitions"), json=body)
        logger.info("Moved issue %s through transition %s", issue_key_or_id, transition_id)
