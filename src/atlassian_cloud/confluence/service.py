"""Base class for Confluence endpoint groups."""

from atlassian_cloud.client.base import Service

API_V1 = "/wiki/rest/api"
API_V2 = "/wiki/api/v2"


class ConfluenceService(Service):
    """Confluence service with helpers for the v1 and v2 REST paths."""

    def _api(self, path: str) -> str:
        return f"{API_V1}/{path}"

    def _api_v2(self, path: str) -> str:
        return f"{API_V2}/{path}"
