"""Confluence Cloud resources.

The v1 REST API (``/wiki/rest/api``) nests links and expandable names under
``_links`` and ``_expandable``; those are exposed as ``links`` and
``expandable``. The v2 API (``/wiki/api/v2``) returns flat page objects and
cursor-paginated chunks.
"""

from datetime import date
from typing import Any

from pydantic import Field

from atlassian_cloud.core.models import AtlassianModel


class Links(AtlassianModel):
    """The ``_links`` object of a v1 resource or page of results."""

    base: str | None = None
    context: str | None = None
    self_: str | None = Field(default=None, alias="self")
    tinyui: str | None = None
    editui: str | None = None
    webui: str | None = None
    download: str | None = None
    next: str | None = None
    collection: str | None = None


# =============================================================================
# Content (v1)
# =============================================================================


class BodyNode(AtlassianModel):
    value: str | None = None
    representation: str | None = Field(default=None, description="storage, editor2, view, ...")


class Body(AtlassianModel):
    """Content body, one entry per requested representation."""

    view: BodyNode | None = None
    export_view: BodyNode | None = Field(default=None, alias="export_view")
    styled_view: BodyNode | None = Field(default=None, alias="styled_view")
    storage: BodyNode | None = None
    editor2: BodyNode | None = None
    anonymous_export_view: BodyNode | None = Field(default=None, alias="anonymous_export_view")


class ContentUser(AtlassianModel):
    type: str | None = None
    account_id: str | None = None
    account_type: str | None = None
    email: str | None = None
    public_name: str | None = None
    display_name: str | None = None
    time_zone: str | None = None


class ContentVersion(AtlassianModel):
    """A content version. ``number`` must be incremented on every update."""

    by: ContentUser | None = None
    number: int | None = None
    when: str | None = None
    friendly_when: str | None = None
    message: str | None = None
    minor_edit: bool | None = None
    content_type_modified: bool | None = None
    confrev: str | None = None


class ContentHistory(AtlassianModel):
    latest: bool | None = None
    created_by: ContentUser | None = None
    created_date: str | None = None
    last_updated: ContentVersion | None = None
    previous_version: ContentVersion | None = None
    next_version: ContentVersion | None = None
    contributors: dict[str, Any] | None = None
    expandable: dict[str, Any] | None = Field(default=None, alias="_expandable")
    links: Links | None = Field(default=None, alias="_links")


class Space(AtlassianModel):
    """Confluence space."""

    id: int | None = None
    key: str | None = None
    name: str | None = None
    type: str | None = Field(default=None, description="global or personal")
    status: str | None = Field(default=None, description="current or archived")
    description: dict[str, Any] | None = None
    homepage: "Content | None" = None
    expandable: dict[str, Any] | None = Field(default=None, alias="_expandable")
    links: Links | None = Field(default=None, alias="_links")


class Content(AtlassianModel):
    """A page, blog post, comment or attachment."""

    id: str | None = None
    type: str | None = Field(default=None, description="page, blogpost, comment or attachment")
    status: str | None = None
    title: str | None = None
    space: Space | None = None
    history: ContentHistory | None = None
    version: ContentVersion | None = None
    ancestors: list["Content"] | None = None
    body: Body | None = None
    metadata: dict[str, Any] | None = None
    operations: list[dict[str, Any]] | None = None
    child_types: dict[str, Any] | None = None
    extensions: dict[str, Any] | None = None
    expandable: dict[str, Any] | None = Field(default=None, alias="_expandable")
    links: Links | None = Field(default=None, alias="_links")


class ContentPage(AtlassianModel):
    """Offset-paginated list of content."""

    results: list[Content] = Field(default_factory=list)
    start: int | None = None
    limit: int | None = None
    size: int | None = None
    links: Links | None = Field(default=None, alias="_links")


class ContentChildren(AtlassianModel):
    """Children or descendants grouped by content type."""

    attachment: ContentPage | None = None
    comment: ContentPage | None = None
    page: ContentPage | None = None
    blogpost: ContentPage | None = None
    links: Links | None = Field(default=None, alias="_links")


class ContentSearchOptions(AtlassianModel):
    """Filters for listing content with ``ContentService.gets``."""

    context_type: str | None = Field(default=None, description="page or blogpost")
    space_key: str | None = None
    title: str | None = None
    trigger: str | None = Field(default=None, description="'viewed' to list recently viewed content")
    order_by: str | None = None
    status: list[str] | None = None
    expand: list[str] | None = None
    posting_day: date | None = Field(default=None, description="Blog posts published on this day")


class ContentArchiveResult(AtlassianModel):
    """Long task started by an archive request."""

    id: str | None = None
    links: dict[str, Any] | None = Field(default=None, alias="_links")


class ContentMove(AtlassianModel):
    page_id: str | None = None


class CopyOptions(AtlassianModel):
    """Body of a single page copy or a page hierarchy copy."""

    copy_attachments: bool | None = None
    copy_permissions: bool | None = None
    copy_properties: bool | None = None
    copy_labels: bool | None = None
    copy_custom_contents: bool | None = None
    destination_page_id: str | None = None
    title_options: dict[str, str] | None = Field(default=None, description="prefix, search and replace")
    destination: dict[str, str] | None = Field(
        default=None,
        description="{'type': 'space' | 'parent_page' | 'existing_page', 'value': ...}",
    )
    page_title: str | None = None
    body: dict[str, Any] | None = None


# =============================================================================
# Spaces (v1)
# =============================================================================


class SpacePage(AtlassianModel):
    results: list[Space] = Field(default_factory=list)
    start: int | None = None
    limit: int | None = None
    size: int | None = None
    links: Links | None = Field(default=None, alias="_links")


class SpaceSearchOptions(AtlassianModel):
    """Filters for ``SpaceService.gets``."""

    space_keys: list[str] | None = None
    space_ids: list[int] | None = None
    space_type: str | None = None
    status: str | None = None
    labels: list[str] | None = None
    favourite: bool | None = None
    favourite_user_key: str | None = None
    expand: list[str] | None = None


class SpacePayload(AtlassianModel):
    """Body of a space create or update."""

    key: str | None = None
    name: str | None = None
    description: dict[str, Any] | None = Field(
        default=None,
        description="{'plain': {'value': ..., 'representation': 'plain'}}",
    )
    homepage: dict[str, str] | None = None
    anonymous_access: bool | None = None
    unlicensed_access: bool | None = None


# =============================================================================
# Long tasks
# =============================================================================


class ContentTask(AtlassianModel):
    """Reference to a long task returned by space deletion and hierarchy copy."""

    id: str | None = None
    links: dict[str, Any] | None = None


class LongTaskMessage(AtlassianModel):
    translation: str | None = None
    args: list[Any] | None = None


class LongTask(AtlassianModel):
    """Progress of an asynchronous Confluence operation."""

    ari: str | None = None
    id: str | None = None
    name: dict[str, Any] | None = None
    elapsed_time: int | None = None
    percentage_complete: int | None = None
    successful: bool | None = None
    finished: bool | None = None
    status: str | None = None
    messages: list[LongTaskMessage] | None = None
    errors: list[dict[str, Any]] | None = None
    links: Links | None = Field(default=None, alias="_links")


class LongTaskPage(AtlassianModel):
    results: list[LongTask] = Field(default_factory=list)
    start: int | None = None
    limit: int | None = None
    size: int | None = None
    links: Links | None = Field(default=None, alias="_links")


# =============================================================================
# Pages (v2)
# =============================================================================


class PageBodyRepresentation(AtlassianModel):
    representation: str | None = None
    value: str | None = None


class PageVersion(AtlassianModel):
    created_at: str | None = None
    message: str | None = None
    number: int | None = None
    minor_edit: bool | None = None
    author_id: str | None = None


class Page(AtlassianModel):
    """A page as returned by the v2 API."""

    id: str | None = None
    status: str | None = None
    title: str | None = None
    space_id: str | None = None
    parent_id: str | None = None
    parent_type: str | None = None
    author_id: str | None = None
    owner_id: str | None = None
    created_at: str | None = None
    position: int | None = None
    version: PageVersion | None = None
    body: dict[str, PageBodyRepresentation] | None = Field(
        default=None,
        description="Keyed by format: storage, atlas_doc_format or view",
    )
    links: dict[str, Any] | None = Field(default=None, alias="_links")


class PageChunk(AtlassianModel):
    """Cursor-paginated list of pages; follow ``links['next']`` for more."""

    results: list[Page] = Field(default_factory=list)
    links: dict[str, Any] | None = Field(default=None, alias="_links")


class PagePayload(AtlassianModel):
    """Body of a v2 page create or update."""

    id: str | None = None
    space_id: str | None = None
    status: str | None = None
    title: str | None = None
    parent_id: str | None = None
    owner_id: str | None = None
    body: PageBodyRepresentation | None = None
    version: dict[str, Any] | None = Field(default=None, description="{'number': ..., 'message': ...}")


for _model in (Space, Content):
    _model.model_rebuild()
