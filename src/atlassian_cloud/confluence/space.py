"""Space endpoints."""

import logging
from typing import Any

from atlassian_cloud.client.base import join
from atlassian_cloud.confluence.models import (
    ContentChildren,
    ContentPage,
    ContentTask,
    Space,
    SpacePage,
    SpacePayload,
    SpaceSearchOptions,
)
from atlassian_cloud.confluence.service import ConfluenceService

logger = logging.getLogger(__name__)

NO_SPACE_KEY = "no space key set"


class SpaceService(ConfluenceService):
    def gets(
        self,
        options: SpaceSearchOptions | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> SpacePage:
        """List spaces.

        Space keys and ids are sent as repeated parameters, labels comma-joined.
        """
        params: dict[str, Any] = {"start": start_at, "limit": max_results}
        if options is not None:
            params.update(
                {
                    "spaceKey": options.space_keys,
                    "spaceId": options.space_ids,
                    "type": options.space_type,
                    "status": options.status,
                    "label": join(options.labels),
                    "favourite": options.favourite or None,
                    "favouriteUserKey": options.favourite_user_key,
                    "expand": join(options.expand),
                }
            )
        return self._get(self._api("space"), params=params, model=SpacePage)

    def create(self, payload: SpacePayload | dict[str, Any], private: bool = False) -> Space:
        """Create a space.

        Args:
            payload: Space key, name and description
            private: Create a space visible only to the creator

        Raises:
            ValidationError: If the name or key is missing
        """
        body = self._payload(payload)
        self._require(body.get("name"), "no space name set", field="name")
        self._require(body.get("key"), NO_SPACE_KEY, field="key")

        path = "space/_private" if private else "space"
        space = self._post(self._api(path), json=body, model=Space)
        logger.info("Created %sspace %s", "private " if private else "", space.key)
        return space

    def get(self, space_key: str, expand: list[str] | None = None) -> Space:
        self._require(space_key, NO_SPACE_KEY, field="space_key")
        return self._get(self._api(f"space/{space_key}"), params={"expand": join(expand)}, model=Space)

    def update(self, space_key: str, payload: SpacePayload | dict[str, Any]) -> Space:
        """Update the name, description or homepage of a space."""
        self._require(space_key, NO_SPACE_KEY, field="space_key")
        return self._put(self._api(f"space/{space_key}"), json=self._payload(payload), model=Space)

    def delete(self, space_key: str) -> ContentTask:
        """Delete a space in the background.

        Returns:
            Long task; poll it with ``ConfluenceClient.long_task.get``
        """
        self._require(space_key, NO_SPACE_KEY, field="space_key")
        task = self._delete(self._api(f"space/{space_key}"), model=ContentTask)
        logger.info("Started deletion of space %s (task %s)", space_key, task.id if task else None)
        return task

    def content(
        self,
        space_key: str,
        depth: str | None = None,
        expand: list[str] | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> ContentChildren:
        """Content of a space grouped by type; ``depth='root'`` for top-level only."""
        self._require(space_key, NO_SPACE_KEY, field="space_key")
        params = {"start": start_at, "limit": max_results, "expand": join(expand), "depth": depth}
        return self._get(self._api(f"space/{space_key}/content"), params=params, model=ContentChildren)

    def content_by_type(
        self,
        space_key: str,
        content_type: str,
        depth: str | None = None,
        expand: list[str] | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> ContentPage:
        self._require(space_key, NO_SPACE_KEY, field="space_key")
        self._require(content_type, "no content type set", field="content_type")
        params = {"start": start_at, "limit": max_results, "expand": join(expand), "depth": depth}
        return self._get(
            self._api(f"space/{space_key}/content/{content_type}"),
            params=params,
            model=ContentPage,
        )
