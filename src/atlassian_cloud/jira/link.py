"""Issue link and issue link type endpoints."""

import logging
from typing import Any

from atlassian_cloud.client.base import AtlassianClient
from atlassian_cloud.jira.models import Issue, IssueLink, IssueLinkType
from atlassian_cloud.jira.service import DEFAULT_API_VERSION, JiraService

logger = logging.getLogger(__name__)

NO_LINK = "no link id set"
NO_LINK_TYPE = "no link type id set"


class IssueLinkTypeService(JiraService):
    """Link types such as 'Blocks' or 'Duplicate'."""

    def gets(self) -> list[IssueLinkType]:
        result = self._get(self._api("issueLinkType"), model=dict[str, list[IssueLinkType]])
        return result.get("issueLinkTypes", [])

    def get(self, link_type_id: str) -> IssueLinkType:
        self._require(link_type_id, NO_LINK_TYPE, field="link_type_id")
        return self._get(self._api(f"issueLinkType/{link_type_id}"), model=IssueLinkType)

    def create(self, payload: IssueLinkType | dict[str, Any]) -> IssueLinkType:
        """Create a link type. ``name``, ``inward`` and ``outward`` are required."""
        return self._post(self._api("issueLinkType"), json=self._payload(payload), model=IssueLinkType)

    def update(self, link_type_id: str, payload: IssueLinkType | dict[str, Any]) -> IssueLinkType:
        self._require(link_type_id, NO_LINK_TYPE, field="link_type_id")
        return self._put(
            self._api(f"issueLinkType/{link_type_id}"),
            json=self._payload(payload),
            model=IssueLinkType,
        )

    def delete(self, link_type_id: str) -> None:
        self._require(link_type_id, NO_LINK_TYPE, field="link_type_id")
        self._delete(self._api(f"issueLinkType/{link_type_id}"))


class IssueLinkService(JiraService):
    """Links between issues.

    Attributes:
        type: Link type administration
    """

    def __init__(self, client: AtlassianClient, version: str = DEFAULT_API_VERSION) -> None:
        super().__init__(client, version)
        self.type = IssueLinkTypeService(client, version)

    def create(self, payload: IssueLink | dict[str, Any]) -> None:
        """Link two issues.

        Example:
            jira.issue.link.create(
                IssueLink(
                    type=IssueLinkType(name="Blocks"),
                    inward_issue=Issue(key="KP-1"),
                    outward_issue=Issue(key="KP-2"),
                )
            )
        """
        self._post(self._api("issueLink"), json=self._payload(payload))
        logger.info("Created issue link")

    def get(self, link_id: str) -> IssueLink:
        self._require(link_id, NO_LINK, field="link_id")
        return self._get(self._api(f"issueLink/{link_id}"), model=IssueLink)

    def gets(self, issue_key_or_id: str) -> list[IssueLink]:
        """List the links of an issue."""
        self._require(issue_key_or_id, "no issue key/id set", field="issue_key_or_id")
        issue = self._get(
            self._api(f"issue/{issue_key_or_id}"),
            params={"fields": "issuelinks"},
            model=Issue,
        )
        if issue.fields is None:
            return []
        return issue.fields.issue_links or []

    def delete(self, link_id: str) -> None:
        self._require(link_id, NO_LINK, field="link_id")
        self._delete(self._api(f"issueLink/{link_id}"))
        logger.info("Deleted issue link %s", link_id)
