"""Page endpoints of the Confluence v2 API.

The v2 API paginates with opaque cursors. Pass the ``cursor`` query value
from ``PageChunk.links['next']`` to fetch the following chunk.
"""

import logging
from typing import Any

from atlassian_cloud.confluence.models import Page, PageChunk, PagePayload
from atlassian_cloud.confluence.service import ConfluenceService

logger = logging.getLogger(__name__)

NO_PAGE = "no page id set"


class PageService(ConfluenceService):
    def get(self, page_id: int | str, format: str | None = None, draft: bool = False, version: int = 0) -> Page:
        """Get a page.

        Args:
            page_id: Page id
            format: Body format to include: 'storage' or 'atlas_doc_format'
            draft: Return the current draft instead of the published page
            version: Version number to return (0 for the latest)
        """
        self._require(page_id, NO_PAGE, field="page_id")
        params = {
            "body-format": format,
            "get-draft": draft or None,
            "version": version or None,
        }
        return self._get(self._api_v2(f"pages/{page_id}"), params=params, model=Page)

    def bulk(self, cursor: str | None = None, limit: int = 25) -> PageChunk:
        """All pages visible to the caller."""
        return self.bulk_filtered(cursor=cursor, limit=limit)

    def bulk_filtered(
        self,
        status: str | None = None,
        format: str | None = None,
        cursor: str | None = None,
        limit: int = 25,
        page_ids: list[int | str] | None = None,
    ) -> PageChunk:
        params = {
            "limit": limit,
            "status": status,
            "body-format": format,
            "cursor": cursor,
            "id": ",".join(str(page_id) for page_id in page_ids) if page_ids else None,
        }
        return self._get(self._api_v2("pages"), params=params, model=PageChunk)

    def gets_by_label(
        self,
        label_id: int | str,
        sort: str | None = None,
        cursor: str | None = None,
        limit: int = 25,
    ) -> PageChunk:
        self._require(label_id, "no label id set", field="label_id")
        params = {"limit": limit, "cursor": cursor, "sort": sort}
        return self._get(self._api_v2(f"labels/{label_id}/pages"), params=params, model=PageChunk)

    def gets_by_space(self, space_id: int | str, cursor: str | None = None, limit: int = 25) -> PageChunk:
        self._require(space_id, "no space id set", field="space_id")
        params = {"limit": limit, "cursor": cursor}
        return self._get(self._api_v2(f"spaces/{space_id}/pages"), params=params, model=PageChunk)

    def create(self, payload: PagePayload | dict[str, Any]) -> Page:
        """Create a page in a space, optionally under ``parentId``.

        Raises:
            ValidationError: If the payload has no ``spaceId``
        """
        body = self._payload(payload)
        self._require(body.get("spaceId"), "no space id set", field="spaceId")
        page = self._post(self._api_v2("pages"), json=body, model=Page)
        logger.info("Created page %s (%s)", page.id, page.title)
        return page

    def update(self, page_id: int | str, payload: PagePayload | dict[str, Any]) -> Page:
        """Replace a page. The payload must carry the next version number."""
        self._require(page_id, NO_PAGE, field="page_id")
        page = self._put(self._api_v2(f"pages/{page_id}"), json=self._payload(payload), model=Page)
        logger.info("Updated page %s", page_id)
        return page

    def delete(self, page_id: int | str) -> None:
        self._require(page_id, NO_PAGE, field="page_id")
        self._delete(self._api_v2(f"pages/{page_id}"))
        logger.info("Deleted page %s", page_id)
