"""Tests for the Confluence v2 page endpoints."""

from collections.abc import Callable
from typing import Any

import pytest
import responses

from atlassian_cloud.confluence import ConfluenceClient
from atlassian_cloud.confluence.models import PageBodyRepresentation, PagePayload
from atlassian_cloud.core.exceptions import NotFoundError, ValidationError

PAGE = {
    "id": "65538",
    "status": "current",
    "title": "Runbook",
    "spaceId": "98306",
    "parentId": "65537",
    "parentType": "page",
    "version": {"number": 4, "authorId": "5b10a"},
    "body": {"storage": {"representation": "storage", "value": "<p>Steps</p>"}},
    "_links": {"webui": "/spaces/OPS/pages/65538/Runbook"},
}
CHUNK = {"results": [PAGE], "_links": {"next": "/wiki/api/v2/pages?cursor=eyJpZCI6IjY1NTM4In0"}}

ENDPOINTS = [
    pytest.param(
        responses.GET,
        "/wiki/api/v2/pages/65538",
        {"body-format": "storage", "get-draft": "true", "version": "3"},
        None,
        lambda c: c.page.get(65538, format="storage", draft=True, version=3),
        PAGE,
        id="get",
    ),
    pytest.param(
        responses.GET,
        "/wiki/api/v2/pages",
        {"limit": "25", "cursor": "abc"},
        None,
        lambda c: c.page.bulk(cursor="abc"),
        CHUNK,
        id="bulk",
    ),
    pytest.param(
        responses.GET,
        "/wiki/api/v2/pages",
        {"limit": "10", "status": "current", "body-format": "atlas_doc_format", "id": "65538,65539"},
        None,
        lambda c: c.page.bulk_filtered(
            status="current", format="atlas_doc_format", limit=10, page_ids=[65538, "65539"]
        ),
        CHUNK,
        id="bulk-filtered",
    ),
    pytest.param(
        responses.GET,
        "/wiki/api/v2/labels/1234/pages",
        {"limit": "25", "sort": "-modified-date"},
        None,
        lambda c: c.page.gets_by_label(1234, sort="-modified-date"),
        CHUNK,
        id="by-label",
    ),
    pytest.param(
        responses.GET,
        "/wiki/api/v2/spaces/98306/pages",
        {"limit": "50", "cursor": "next"},
        None,
        lambda c: c.page.gets_by_space("98306", cursor="next", limit=50),
        CHUNK,
        id="by-space",
    ),
    pytest.param(
        responses.POST,
        "/wiki/api/v2/pages",
        None,
        {
            "spaceId": "98306",
            "status": "current",
            "title": "Runbook",
            "parentId": "65537",
            "body": {"representation": "storage", "value": "<p>Steps</p>"},
        },
        lambda c: c.page.create(
            PagePayload(
                space_id="98306",
                status="current",
                title="Runbook",
                parent_id="65537",
                body=PageBodyRepresentation(representation="storage", value="<p>Steps</p>"),
            )
        ),
        PAGE,
        id="create",
    ),
    pytest.param(
        responses.PUT,
        "/wiki/api/v2/pages/65538",
        None,
        {
            "id": "65538",
            "status": "current",
            "title": "Runbook",
            "body": {"representation": "storage", "value": "<p>More steps</p>"},
            "version": {"number": 5, "message": "Add steps"},
        },
        lambda c: c.page.update(
            "65538",
            PagePayload(
                id="65538",
                status="current",
                title="Runbook",
                body=PageBodyRepresentation(representation="storage", value="<p>More steps</p>"),
                version={"number": 5, "message": "Add steps"},
            ),
        ),
        PAGE,
        id="update",
    ),
    pytest.param(
        responses.DELETE,
        "/wiki/api/v2/pages/65538",
        None,
        None,
        lambda c: c.page.delete(65538),
        None,
        id="delete",
    ),
]

VALIDATION = [
    pytest.param(lambda c: c.page.get(""), "no page id set", id="get"),
    pytest.param(lambda c: c.page.gets_by_label(""), "no label id set", id="by-label"),
    pytest.param(lambda c: c.page.gets_by_space(""), "no space id set", id="by-space"),
    pytest.param(lambda c: c.page.create({"title": "Runbook"}), "no space id set", id="create"),
    pytest.param(lambda c: c.page.create(None), "no payload set", id="create-payload"),
    pytest.param(lambda c: c.page.update("", {}), "no page id set", id="update"),
    pytest.param(lambda c: c.page.delete(""), "no page id set", id="delete"),
]


class TestPageEndpoints:
    """Each page method hits one v2 endpoint with the expected query and body."""

    @responses.activate
    @pytest.mark.parametrize(("method", "path", "query", "body", "call", "reply"), ENDPOINTS)
    def test_endpoint(
        self,
        confluence: ConfluenceClient,
        expect_call: Callable[..., None],
        method: str,
        path: str,
        query: dict[str, str] | None,
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


class TestPageService:
    @responses.activate
    def test_get_published_latest(self, confluence: ConfluenceClient, expect_call: Callable[..., None]) -> None:
        """Defaults send no draft flag and no version."""
        expect_call(responses.GET, "/wiki/api/v2/pages/65538", reply=PAGE)

        page = confluence.page.get("65538")

        assert page.space_id == "98306"
        assert page.parent_type == "page"
        assert page.version.author_id == "5b10a"
        assert page.body["storage"].value == "<p>Steps</p>"
        assert page.links["webui"].endswith("/Runbook")

    @responses.activate
    def test_bulk_next_cursor(self, confluence: ConfluenceClient, expect_call: Callable[..., None]) -> None:
        expect_call(responses.GET, "/wiki/api/v2/pages", query={"limit": "25"}, reply=CHUNK)

        chunk = confluence.page.bulk()

        assert len(chunk.results) == 1
        assert "cursor=" in chunk.links["next"]

    @responses.activate
    def test_create_from_dict(self, confluence: ConfluenceClient, expect_call: Callable[..., None]) -> None:
        expect_call(
            responses.POST,
            "/wiki/api/v2/pages",
            body={"spaceId": "98306", "title": "Notes"},
            reply={**PAGE, "title": "Notes"},
        )

        page = confluence.page.create({"spaceId": "98306", "title": "Notes"})

        assert page.title == "Notes"

    @responses.activate
    def test_get_missing_page_v2_errors(self, confluence: ConfluenceClient, expect_call: Callable[..., None]) -> None:
        """v2 replies carry ``errors`` as a list of objects."""
        expect_call(
            responses.GET,
            "/wiki/api/v2/pages/42",
            reply={"errors": [{"status": 404, "code": "NOT_FOUND", "title": "Page not found", "detail": None}]},
            status=404,
        )

        with pytest.raises(NotFoundError, match="Page not found") as exc_info:
            confluence.page.get(42)

        assert exc_info.value.status_code == 404
