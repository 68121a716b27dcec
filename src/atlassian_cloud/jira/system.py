"""Current user and server information."""

from atlassian_cloud.client.base import join
from atlassian_cloud.jira.models import MySelf, ServerInfo
from atlassian_cloud.jira.service import JiraService


class MySelfService(JiraService):
    def details(self, expand: list[str] | None = None) -> MySelf:
        """The authenticated user, optionally with 'groups' and 'applicationRoles'."""
        return self._get(self._api("myself"), params={"expand": join(expand)}, model=MySelf)


class ServerService(JiraService):
    def info(self) -> ServerInfo:
        return self._get(self._api("serverInfo"), model=ServerInfo)
