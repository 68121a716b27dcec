"""Content endpoints: pages, blog posts and their hierarchy.

Example:
    page = confluence.content.create(
        {
            "type": "page",
            "title": "Runbook",
            "space": {"key": "OPS"},
            "body": {"storage": {"value": "<p>Steps</p>", "representation": "storage"}},
        }
    )
    children = confluence.content.children_descendants.children_by_type(page.id, "page")
"""

import logging
from typing import Any

from atlassian_cloud.client.base import join
from atlassian_cloud.confluence.models import (
    Content,
    ContentArchiveResult,
    ContentChildren,
    ContentHistory,
    ContentMove,
    ContentPage,
    ContentSearchOptions,
    ContentTask,
    CopyOptions,
)
from atlassian_cloud.confluence.service import ConfluenceService
from atlassian_cloud.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

NO_CONTENT = "no content id set"
NO_CONTENT_TYPE = "no content type set"
MOVE_POSITIONS = ("before", "after", "append")


class ContentService(ConfluenceService):
    """Confluence content (v1 API).

    Attributes:
        children_descendants: Child and descendant navigation, move and copy
    """

    def __init__(self, client: Any) -> None:
        super().__init__(client)
        self.children_descendants = ChildrenDescendantService(client)

    def gets(
        self,
        options: ContentSearchOptions | None = None,
        start_at: int = 0,
        max_results: int = 25,
    ) -> ContentPage:
        """List content, filtered by space, title, type or posting day."""
        params: dict[str, Any] = {"start": start_at, "limit": max_results}
        if options is not None:
            params.update(
                {
                    "type": options.context_type,
                    "spaceKey": options.space_key,
                    "title": options.title,
                    "trigger": options.trigger,
                    "orderby": options.order_by,
                    "postingDay": options.posting_day.isoformat() if options.posting_day else None,
                    "status": join(options.status),
                    "expand": join(options.expand),
                }
            )
        return self._get(self._api("content"), params=params, model=ContentPage)

    def create(self, payload: Content | dict[str, Any]) -> Content:
        content = self._post(self._api("content"), json=self._payload(payload), model=Content)
        logger.info("Created content %s (%s)", content.id, content.title)
        return content

    def search(
        self,
        cql: str,
        cql_context: str | None = None,
        expand: list[str] | None = None,
        cursor: str | None = None,
        max_results: int = 25,
    ) -> ContentPage:
        """Search content with CQL.

        Args:
            cql: CQL query, e.g. ``type = page AND space = OPS``
            cql_context: JSON-encoded space/content context for the query
            expand: Properties to expand on each result
            cursor: Cursor from the ``next`` link of a previous page
            max_results: Page size

        Raises:
            ValidationError: If ``cql`` is empty
        """
        self._require(cql, "no CQL query set", field="cql")
        params = {
            "limit": max_results,
            "cql": cql,
            "cursor": cursor,
            "cqlcontext": cql_context,
            "expand": join(expand),
        }
        return self._get(self._api("content/search"), params=params, model=ContentPage)

    def get(self, content_id: str, expand: list[str] | None = None, version: int = 0) -> Content:
        """Get content by id, at a given version (0 for the latest)."""
        self._require(content_id, NO_CONTENT, field="content_id")
        params = {"version": version, "expand": join(expand)}
        return self._get(self._api(f"content/{content_id}"), params=params, model=Content)

    def update(self, content_id: str, payload: Content | dict[str, Any]) -> Content:
        """Update content. The payload must carry the next version number."""
        self._require(content_id, NO_CONTENT, field="content_id")
        content = self._put(self._api(f"content/{content_id}"), json=self._payload(payload), model=Content)
        logger.info("Updated content %s", content_id)
        return content

    def delete(self, content_id: str, status: str | None = None) -> None:
        """Trash content, or purge it when ``status`` is 'trashed'."""
        self._require(content_id, NO_CONTENT, field="content_id")
        self._delete(self._api(f"content/{content_id}"), params={"status": status})
        logger.info("Deleted content %s", content_id)

    def history(self, content_id: str, expand: list[str] | None = None) -> ContentHistory:
        self._require(content_id, NO_CONTENT, field="content_id")
        return self._get(
            self._api(f"content/{content_id}/history"),
            params={"expand": join(expand)},
            model=ContentHistory,
        )

    def archive(self, payload: list[int | str] | dict[str, Any]) -> ContentArchiveResult:
        """Archive pages in the background.

        Args:
            payload: Page ids, or a ``{"pages": [{"id": ...}]}`` body

        Returns:
            The long task tracking the archive
        """
        if isinstance(payload, list):
            self._require(payload, "no page ids set", field="payload")
            try:
                payload = {"pages": [{"id": int(page_id)} for page_id in payload]}
            except (TypeError, ValueError) as e:
                raise ValidationError(
                    f"invalid page id in {payload!r}", field="payload", provider=self._client.provider_name
                ) from e
        result = self._post(self._api("content/archive"), json=self._payload(payload), model=ContentArchiveResult)
        logger.info("Started archive task %s", result.id)
        return result


class ChildrenDescendantService(ConfluenceService):
    """Children and descendants of a piece of content."""

    def children(self, content_id: str, expand: list[str] | None = None, parent_version: int = 0) -> ContentChildren:
        """Direct children, grouped by type (page, comment, attachment)."""
        self._require(content_id, NO_CONTENT, field="content_id")
        params = {"expand": join(expand), "parentVersion": parent_version or None}
        return self._get(self._api(f"content/{content_id}/child"), params=params, model=ContentChildren)

    def move(self, page_id: str, position: str, target_id: str) -> ContentMove:
        """Move a page relative to a target page.

        Args:
            page_id: Page to move
            position: 'before' or 'after' the target (same parent), or 'append'
                to make it the target's last child
            target_id: Target page

        Raises:
            ValidationError: If an argument is missing or the position is unknown
        """
        self._require(page_id, "no page id set", field="page_id")
        self._require(position, "no position set", field="position")
        self._require(target_id, "no target id set", field="target_id")
        if position not in MOVE_POSITIONS:
            raise ValidationError(
                "invalid position: (before, after, append)",
                field="position",
                provider=self._client.provider_name,
            )
        moved = self._put(self._api(f"content/{page_id}/move/{position}/{target_id}"), model=ContentMove)
        logger.info("Moved page %s %s %s", page_id, position, target_id)
        return moved

    def children_by_type(
        self,
        content_id: str,
        content_type: str,
        parent_version: int = 0,
        expand: list[str] | None = None,
        start_at: int = 0,
        max_results: int = 25,
    ) -> ContentPage:
        self._require(content_id, NO_CONTENT, field="content_id")
        self._require(content_type, NO_CONTENT_TYPE, field="content_type")
        params = {
            "start": start_at,
            "limit": max_results,
            "expand": join(expand),
            "parentVersion": parent_version or None,
        }
        return self._get(
            self._api(f"content/{content_id}/child/{content_type}"),
            params=params,
            model=ContentPage,
        )

    def descendants(self, content_id: str, expand: list[str] | None = None) -> ContentChildren:
        self._require(content_id, NO_CONTENT, field="content_id")
        return self._get(
            self._api(f"content/{content_id}/descendant"),
            params={"expand": join(expand)},
            model=ContentChildren,
        )

    def descendants_by_type(
        self,
        content_id: str,
        content_type: str,
        depth: str | None = None,
        expand: list[str] | None = None,
        start_at: int = 0,
        max_results: int = 25,
    ) -> ContentPage:
        """Descendants of one type, optionally limited to ``depth`` ('all' or 'root')."""
        self._require(content_id, NO_CONTENT, field="content_id")
        self._require(content_type, NO_CONTENT_TYPE, field="content_type")
        params = {"start": start_at, "limit": max_results, "expand": join(expand), "depth": depth}
        return self._get(
            self._api(f"content/{content_id}/descendant/{content_type}"),
            params=params,
            model=ContentPage,
        )

    def copy_hierarchy(self, content_id: str, options: CopyOptions | dict[str, Any]) -> ContentTask:
        """Copy a page and all its descendants under ``destinationPageId``.

        Returns:
            Long task; poll it with ``ConfluenceClient.long_task.get``
        """
        self._require(content_id, NO_CONTENT, field="content_id")
        task = self._post(
            self._api(f"content/{content_id}/pagehierarchy/copy"),
            json=self._payload(options, "no copy options set"),
            model=ContentTask,
        )
        logger.info("Started hierarchy copy of %s (task %s)", content_id, task.id)
        return task

    def copy_page(
        self,
        content_id: str,
        options: CopyOptions | dict[str, Any],
        expand: list[str] | None = None,
    ) -> Content:
        """Copy a single page to a space, under a parent page, or over an existing page."""
        self._require(content_id, NO_CONTENT, field="content_id")
        content = self._post(
            self._api(f"content/{content_id}/copy"),
            json=self._payload(options, "no copy options set"),
            params={"expand": join(expand)},
            model=Content,
        )
        logger.info("Copied page %s to %s", content_id, content.id)
        return content
