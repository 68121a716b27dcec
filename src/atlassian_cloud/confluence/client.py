"""Confluence Cloud client.

Example:
    from atlassian_cloud.confluence import ConfluenceClient

    with ConfluenceClient() as confluence:
        results = confluence.content.search("type = page AND space = OPS")
        page = confluence.page.get(results.results[0].id, format="storage")
"""

from typing import Any

from atlassian_cloud.client.base import AtlassianClient
from atlassian_cloud.confluence.content import ContentService
from atlassian_cloud.confluence.page import PageService
from atlassian_cloud.confluence.service import API_V1
from atlassian_cloud.confluence.space import SpaceService
from atlassian_cloud.confluence.task import LongTaskService


class ConfluenceClient(AtlassianClient):
    """Entry point to the Confluence REST API.

    Attributes:
        content: Content (v1), with ``children_descendants``
        space: Spaces (v1)
        page: Pages (v2)
        long_task: Long-running tasks
    """

    provider_name = "confluence"
    health_path = f"{API_V1}/space?limit=1"

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.content = ContentService(self)
        self.space = SpaceService(self)
        self.page = PageService(self)
        self.long_task = LongTaskService(self)
