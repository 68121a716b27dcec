"""Base class for Jira endpoint groups."""

from atlassian_cloud.client.base import AtlassianClient, Service

DEFAULT_API_VERSION = "3"
API_VERSIONS = ("2", "3")


class JiraService(Service):
    """Jira service bound to one REST API version ("2" or "3")."""

    def __init__(self, client: AtlassianClient, version: str = DEFAULT_API_VERSION) -> None:
        super().__init__(client, version)

    def _api(self, path: str) -> str:
        return f"/rest/api/{self.api_version}/{path}"
