"""Tests for Confluence space endpoints."""

from collections.abc import Callable
from typing import Any

import pytest
import responses

from atlassian_cloud.confluence import ConfluenceClient
from atlassian_cloud.confluence.models import SpacePayload, SpaceSearchOptions
from atlassian_cloud.core.exceptions import BadRequestError, ValidationError

SPACE = {
    "id": 98306,
    "key": "OPS",
    "name": "Operations",
    "type": "global",
    "status": "current",
    "homepage": {"id": "65537", "title": "Operations Home"},
}
CONTENT_PAGE = {"results": [{"id": "65538", "type": "page", "title": "Runbook"}], "start": 0, "limit": 50, "size": 1}

ENDPOINTS = [
    pytest.param(
        responses.GET,
        "/wiki/rest/api/space",
        {
            "start": "0",
            "limit": "50",
            "spaceKey": ["OPS", "DEV"],
            "spaceId": ["98306", "98307"],
            "type": "global",
            "status": "current",
            "label": "team,docs",
            "favourite": "true",
            "favouriteUserKey": "ff8080815a",
            "expand": "description.plain,homepage",
        },
        None,
        lambda c: c.space.gets(
            SpaceSearchOptions(
                space_keys=["OPS", "DEV"],
                space_ids=[98306, 98307],
                space_type="global",
                status="current",
                labels=["team", "docs"],
                favourite=True,
                favourite_user_key="ff8080815a",
                expand=["description.plain", "homepage"],
            )
        ),
        {"results": [SPACE], "start": 0, "limit": 50, "size": 1},
        id="gets",
    ),
    pytest.param(
        responses.POST,
        "/wiki/rest/api/space",
        None,
        {"key": "OPS", "name": "Operations", "description": {"plain": {"value": "Ops", "representation": "plain"}}},
        lambda c: c.space.create(
            SpacePayload(
                key="OPS",
                name="Operations",
                description={"plain": {"value": "Ops", "representation": "plain"}},
            )
        ),
        SPACE,
        id="create",
    ),
    pytest.param(
        responses.POST,
        "/wiki/rest/api/space/_private",
        None,
        {"key": "ME", "name": "Scratch"},
        lambda c: c.space.create({"key": "ME", "name": "Scratch"}, private=True),
        {"id": 98400, "key": "ME", "name": "Scratch"},
        id="create-private",
    ),
    pytest.param(
        responses.GET,
        "/wiki/rest/api/space/OPS",
        {"expand": "homepage"},
        None,
        lambda c: c.space.get("OPS", expand=["homepage"]),
        SPACE,
        id="get",
    ),
    pytest.param(
        responses.PUT,
        "/wiki/rest/api/space/OPS",
        None,
        {"name": "Operations team", "homepage": {"id": "65540"}},
        lambda c: c.space.update("OPS", SpacePayload(name="Operations team", homepage={"id": "65540"})),
        SPACE,
        id="update",
    ),
    pytest.param(
        responses.DELETE,
        "/wiki/rest/api/space/OPS",
        None,
        None,
        lambda c: c.space.delete("OPS"),
        {"id": "1180608", "links": {"status": "/wiki/rest/api/longtask/1180608"}},
        id="delete",
    ),
    pytest.param(
        responses.GET,
        "/wiki/rest/api/space/OPS/content",
        {"start": "0", "limit": "50", "depth": "root", "expand": "version"},
        None,
        lambda c: c.space.content("OPS", depth="root", expand=["version"]),
        {"page": CONTENT_PAGE, "blogpost": {"results": [], "size": 0}},
        id="content",
    ),
    pytest.param(
        responses.GET,
        "/wiki/rest/api/space/OPS/content/blogpost",
        {"start": "10", "limit": "10"},
        None,
        lambda c: c.space.content_by_type("OPS", "blogpost", start_at=10, max_results=10),
        CONTENT_PAGE,
        id="content-by-type",
    ),
]

VALIDATION = [
    pytest.param(lambda c: c.space.create({"key": "OPS"}), "no space name set", id="create-name"),
    pytest.param(lambda c: c.space.create({"name": "Operations"}), "no space key set", id="create-key"),
    pytest.param(lambda c: c.space.create(None), "no payload set", id="create-payload"),
    pytest.param(lambda c: c.space.get(""), "no space key set", id="get"),
    pytest.param(lambda c: c.space.update("", {}), "no space key set", id="update"),
    pytest.param(lambda c: c.space.delete(""), "no space key set", id="delete"),
    pytest.param(lambda c: c.space.content(""), "no space key set", id="content"),
    pytest.param(lambda c: c.space.content_by_type("OPS", ""), "no content type set", id="content-type"),
]


class TestSpaceEndpoints:
    """Each space method hits one endpoint with the expected query and body."""

    @responses.activate
    @pytest.mark.parametrize(("method", "path", "query", "body", "call", "reply"), ENDPOINTS)
    def test_endpoint(
        self,
        confluence: ConfluenceClient,
        expect_call: Callable[..., None],
        method: str,
        path: str,
        query: dict[str, Any] | None,
        body: Any,
        call: Callable[[ConfluenceClient], Any],
        reply: Any,
    ) -> None:
        expect_call(method, path, query=query, body=body, reply=reply)

        call(confluence)

        assert len(responses.calls) == 1

    @responses.activate
    @pytest.mark.parametrize(("call", "message"), VALIDATION)
    def test_validation(
        self,
        confluence: ConfluenceClient,
        call: Callable[[ConfluenceClient], Any],
        message: str,
    ) -> None:
        with pytest.raises(ValidationError) as exc_info:
            call(confluence)

        assert exc_info.value.message == message
        assert len(responses.calls) == 0


class TestSpaceService:
    @responses.activate
    def test_gets_without_favourite_filter(
        self, confluence: ConfluenceClient, expect_call: Callable[..., None]
    ) -> None:
        """favourite=False means no filter, not 'only non-favourites'."""
        expect_call(
            responses.GET,
            "/wiki/rest/api/space",
            query={"start": "0", "limit": "50", "type": "personal"},
            reply={"results": [], "size": 0},
        )

        page = confluence.space.gets(SpaceSearchOptions(space_type="personal", favourite=False))

        assert page.results == []

    @responses.activate
    def test_get_decodes_homepage(self, confluence: ConfluenceClient, expect_call: Callable[..., None]) -> None:
        expect_call(responses.GET, "/wiki/rest/api/space/OPS", reply=SPACE)

        space = confluence.space.get("OPS")

        assert space.id == 98306
        assert space.homepage.title == "Operations Home"

    @responses.activate
    def test_delete_returns_task(self, confluence: ConfluenceClient, expect_call: Callable[..., None]) -> None:
        expect_call(
            responses.DELETE,
            "/wiki/rest/api/space/OPS",
            reply={"id": "1180608", "links": {"status": "/wiki/rest/api/longtask/1180608"}},
            status=202,
        )

        task = confluence.space.delete("OPS")

        assert task.id == "1180608"

    @responses.activate
    def test_create_duplicate_key(self, confluence: ConfluenceClient, expect_call: Callable[..., None]) -> None:
        expect_call(
            responses.POST,
            "/wiki/rest/api/space",
            reply={"statusCode": 400, "message": "A space already exists with key OPS"},
            status=400,
        )

        with pytest.raises(BadRequestError, match="already exists"):
            confluence.space.create({"key": "OPS", "name": "Operations"})
