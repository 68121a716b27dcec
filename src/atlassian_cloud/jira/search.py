"""JQL search endpoints."""

from typing import Any

from atlassian_cloud.client.base import join
from atlassian_cloud.jira.models import IssueBulkFetched, SearchJqlResult, SearchResult
from atlassian_cloud.jira.service import JiraService

NO_JQL = "no jql set"


class SearchService(JiraService):
    """Search issues with JQL.

    ``get`` and ``post`` use offset pagination (``start_at``). ``jql`` uses the
    token-paginated endpoint: pass ``next_page_token`` from the previous page
    until ``is_last`` is true.
    """

    def get(
        self,
        jql: str,
        fields: list[str] | None = None,
        expand: list[str] | None = None,
        start_at: int = 0,
        max_results: int = 50,
        validate: str | None = None,
    ) -> SearchResult:
        """Search with a GET request (the JQL goes in the URL).

        Args:
            jql: JQL query
            fields: Fields to return
            expand: Entities to expand
            start_at: Index of the first issue
            max_results: Page size
            validate: 'strict', 'warn' or 'none'
        """
        self._require(jql, NO_JQL, field="jql")
        params = {
            "jql": jql,
            "startAt": start_at,
            "maxResults": max_results,
            "expand": join(expand),
            "validateQuery": validate,
            "fields": join(fields),
        }
        return self._get(self._api("search"), params=params, model=SearchResult)

    def post(
        self,
        jql: str,
        fields: list[str] | None = None,
        expand: list[str] | None = None,
        start_at: int = 0,
        max_results: int = 50,
        validate: str | None = None,
    ) -> SearchResult:
        """Search with a POST request, for queries too long for a URL."""
        self._require(jql, NO_JQL, field="jql")
        body = _compact(
            {
                "jql": jql,
                "startAt": start_at,
                "maxResults": max_results,
                "expand": expand,
                "fields": fields,
                "validateQuery": validate,
            }
        )
        return self._post(self._api("search"), json=body, model=SearchResult)

    def jql(
        self,
        jql: str,
        fields: list[str] | None = None,
        expand: list[str] | None = None,
        max_results: int = 50,
        next_page_token: str | None = None,
    ) -> SearchJqlResult:
        """Search with the token-paginated endpoint."""
        self._require(jql, NO_JQL, field="jql")
        body = _compact(
            {
                "jql": jql,
                "maxResults": max_results,
                "fields": fields,
                "expand": join(expand),
                "nextPageToken": next_page_token,
            }
        )
        return self._post(self._api("search/jql"), json=body, model=SearchJqlResult)

    def approximate_count(self, jql: str) -> int:
        """Approximate number of issues matching a bounded JQL query."""
        self._require(jql, NO_JQL, field="jql")
        result = self._post(self._api("search/approximate-count"), json={"jql": jql}, model=dict[str, int])
        return result["count"]

    def bulk_fetch(self, issue_keys_or_ids: list[str], fields: list[str] | None = None) -> IssueBulkFetched:
        """Fetch up to 100 issues by key or id.

        Keys that do not exist or are not visible are silently left out.
        """
        self._require(issue_keys_or_ids, "no issue keys/ids set", field="issue_keys_or_ids")
        body = _compact({"issueIdsOrKeys": issue_keys_or_ids, "fields": fields})
        return self._post(self._api("issue/bulkfetch"), json=body, model=IssueBulkFetched)


def _compact(body: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in body.items() if value not in (None, [], "")}
