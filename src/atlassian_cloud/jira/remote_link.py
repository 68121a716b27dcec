"""Remote issue link endpoints (links from an issue to external resources)."""

from typing import Any

from atlassian_cloud.jira.models import RemoteLink, RemoteLinkIdentify
from atlassian_cloud.jira.service import JiraService

NO_ISSUE = "no issue key/id set"
NO_REMOTE_LINK = "no remote link id set"


class RemoteLinkService(JiraService):
    def gets(self, issue_key_or_id: str, global_id: str | None = None) -> list[RemoteLink]:
        """List remote links of an issue, optionally only the one with ``global_id``."""
        self._require(issue_key_or_id, NO_ISSUE, field="issue_key_or_id")
        return self._get(
            self._api(f"issue/{issue_key_or_id}/remotelink"),
            params={"globalId": global_id},
            model=list[RemoteLink],
        )

    def get(self, issue_key_or_id: str, link_id: str) -> RemoteLink:
        self._require(issue_key_or_id, NO_ISSUE, field="issue_key_or_id")
        self._require(link_id, NO_REMOTE_LINK, field="link_id")
        return self._get(self._api(f"issue/{issue_key_or_id}/remotelink/{link_id}"), model=RemoteLink)

    def create(self, issue_key_or_id: str, payload: RemoteLink | dict[str, Any]) -> RemoteLinkIdentify:
        """Create a remote link, or update the one with the same ``global_id``."""
        self._require(issue_key_or_id, NO_ISSUE, field="issue_key_or_id")
        return self._post(
            self._api(f"issue/{issue_key_or_id}/remotelink"),
            json=self._payload(payload),
            model=RemoteLinkIdentify,
        )

    def update(self, issue_key_or_id: str, link_id: str, payload: RemoteLink | dict[str, Any]) -> None:
        self._require(issue_key_or_id, NO_ISSUE, field="issue_key_or_id")
        self._require(link_id, NO_REMOTE_LINK, field="link_id")
        self._put(self._api(f"issue/{issue_key_or_id}/remotelink/{link_id}"), json=self._payload(payload))

    def delete_by_id(self, issue_key_or_id: str, link_id: str) -> None:
        self._require(issue_key_or_id, NO_ISSUE, field="issue_key_or_id")
        self._require(link_id, NO_REMOTE_LINK, field="link_id")
        self._delete(self._api(f"issue/{issue_key_or_id}/remotelink/{link_id}"))

    def delete_by_global_id(self, issue_key_or_id: str, global_id: str) -> None:
        self._require(issue_key_or_id, NO_ISSUE, field="issue_key_or_id")
        self._require(global_id, "no global remote link id set", field="global_id")
        self._delete(self._api(f"issue/{issue_key_or_id}/remotelink"), params={"globalId": global_id})
