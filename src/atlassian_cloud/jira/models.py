"""Jira Cloud resources.

Models mirror the Jira REST API (v2 and v3 share the same shapes except for
rich-text fields, which are ADF documents in v3 and wiki markup in v2; those
are typed ``Any``). Timestamps are kept as the strings Jira returns.
"""

from typing import Any

from pydantic import Field

from atlassian_cloud.core.models import AtlassianModel, Expandable, User


# =============================================================================
# Issue building blocks
# =============================================================================


class IssueType(AtlassianModel):
    """Issue type (e.g., 'Bug', 'Story')."""

    self_: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    description: str | None = None
    icon_url: str | None = None
    subtask: bool | None = None
    hierarchy_level: int | None = None


class Priority(AtlassianModel):
    self_: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    icon_url: str | None = None


class Status(AtlassianModel):
    """Workflow status."""

    self_: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    description: str | None = None
    icon_url: str | None = None
    status_category: dict[str, Any] | None = None


class Resolution(AtlassianModel):
    self_: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    description: str | None = None


class Component(AtlassianModel):
    """Project component."""

    self_: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = Field(default=None, description="Unique name within the project")
    description: str | None = None
    lead: User | None = None
    lead_account_id: str | None = None
    assignee_type: str | None = Field(
        default=None,
        description="PROJECT_DEFAULT, COMPONENT_LEAD, PROJECT_LEAD or UNASSIGNED",
    )
    assignee: User | None = None
    real_assignee_type: str | None = None
    real_assignee: User | None = None
    is_assignee_type_valid: bool | None = None
    project: str | None = Field(default=None, description="Key of the owning project")
    project_id: int | None = None


class Version(AtlassianModel):
    """Project version (release)."""

    self_: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    description: str | None = None
    archived: bool | None = None
    released: bool | None = None
    release_date: str | None = Field(default=None, description="YYYY-MM-DD")
    start_date: str | None = Field(default=None, description="YYYY-MM-DD")
    user_release_date: str | None = None
    user_start_date: str | None = None
    overdue: bool | None = None
    project: str | None = None
    project_id: int | None = None
    move_unfixed_issues_to: str | None = None
    issues_status_for_fix_version: dict[str, Any] | None = None
    operations: list[dict[str, Any]] | None = None


class Project(AtlassianModel):
    """A Jira project."""

    self_: str | None = Field(default=None, alias="self")
    id: str | None = None
    key: str | None = Field(default=None, description="Project key (e.g., 'KP')")
    name: str | None = None
    description: str | None = None
    lead: User | None = None
    url: str | None = None
    email: str | None = None
    assignee_type: str | None = None
    project_type_key: str | None = Field(default=None, description="software, service_desk or business")
    project_category: dict[str, Any] | None = None
    simplified: bool | None = None
    style: str | None = None
    is_private: bool | None = None
    archived: bool | None = None
    deleted: bool | None = None
    avatar_urls: dict[str, str] | None = None
    components: list[Component] | None = None
    versions: list[Version] | None = None
    issue_types: list[IssueType] | None = None
    roles: dict[str, str] | None = None
    properties: dict[str, Any] | None = None
    insight: dict[str, Any] | None = None


# =============================================================================
# Issues
# =============================================================================


class IssueLinkType(AtlassianModel):
    """Link type such as 'Blocks' (outward 'blocks', inward 'is blocked by')."""

    self_: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    inward: str | None = None
    outward: str | None = None


class IssueLink(AtlassianModel):
    """Link between two issues. Also used as the create payload."""

    self_: str | None = Field(default=None, alias="self")
    id: str | None = None
    type: IssueLinkType | None = None
    inward_issue: "Issue | None" = None
    outward_issue: "Issue | None" = None
    comment: "Comment | None" = None


class CommentVisibility(AtlassianModel):
    type: str | None = Field(default=None, description="'group' or 'role'")
    value: str | None = None
    identifier: str | None = None


class Comment(AtlassianModel):
    """Issue comment. ``body`` is an ADF document on v3 and a string on v2."""

    self_: str | None = Field(default=None, alias="self")
    id: str | None = None
    author: User | None = None
    update_author: User | None = None
    body: Any = None
    rendered_body: str | None = None
    created: str | None = None
    updated: str | None = None
    visibility: CommentVisibility | None = None
    jsd_public: bool | None = None


class CommentPage(AtlassianModel):
    start_at: int = 0
    max_results: int = 0
    total: int = 0
    comments: list[Comment] = Field(default_factory=list)


class IssueFields(AtlassianModel):
    """System fields of an issue. Custom fields are kept as extra attributes."""

    summary: str | None = None
    description: Any = None
    environment: Any = None
    issue_type: IssueType | None = Field(default=None, alias="issuetype")
    project: Project | None = None
    parent: "Issue | None" = None
    priority: Priority | None = None
    status: Status | None = None
    resolution: Resolution | None = None
    labels: list[str] | None = None
    components: list[Component] | None = None
    fix_versions: list[Version] | None = None
    versions: list[Version] | None = None
    assignee: User | None = None
    reporter: User | None = None
    creator: User | None = None
    created: str | None = None
    updated: str | None = None
    due_date: str | None = Field(default=None, alias="duedate")
    resolution_date: str | None = Field(default=None, alias="resolutiondate")
    last_viewed: str | None = Field(default=None, alias="lastViewed")
    status_category_change_date: str | None = Field(default=None, alias="statuscategorychangedate")
    issue_links: list[IssueLink] | None = Field(default=None, alias="issuelinks")
    subtasks: list["Issue"] | None = None
    watches: dict[str, Any] | None = None
    votes: dict[str, Any] | None = None
    comment: CommentPage | None = None
    security: dict[str, Any] | None = None
    time_tracking: dict[str, Any] | None = Field(default=None, alias="timetracking")


class Transition(AtlassianModel):
    """Workflow transition available on an issue."""

    id: str | None = None
    name: str | None = None
    to: Status | None = None
    has_screen: bool | None = None
    is_global: bool | None = None
    is_initial: bool | None = None
    is_available: bool | None = None
    is_conditional: bool | None = None
    is_looped: bool | None = None
    fields: dict[str, Any] | None = None


class TransitionPage(AtlassianModel):
    expand: str | None = None
    transitions: list[Transition] = Field(default_factory=list)


class Issue(AtlassianModel):
    """A Jira issue. Also used as the create/update payload (``fields`` only)."""

    self_: str | None = Field(default=None, alias="self")
    id: str | None = None
    key: str | None = Field(default=None, description="Issue key (e.g., 'KP-2')")
    expand: str | None = None
    fields: IssueFields | None = None
    update: dict[str, Any] | None = None
    transitions: list[Transition] | None = None
    changelog: dict[str, Any] | None = None
    rendered_fields: dict[str, Any] | None = None
    names: dict[str, str] | None = None


class IssueCreated(AtlassianModel):
    """Response of issue creation."""

    self_: str | None = Field(default=None, alias="self")
    id: str | None = None
    key: str | None = None
    transition: dict[str, Any] | None = None


class IssueBulkCreated(AtlassianModel):
    issues: list[IssueCreated] = Field(default_factory=list)
    errors: list[dict[str, Any]] = Field(default_factory=list)


class NotificationRecipients(AtlassianModel):
    reporter: bool | None = None
    assignee: bool | None = None
    watchers: bool | None = None
    voters: bool | None = None
    users: list[User] | None = None
    groups: list[dict[str, Any]] | None = None


class IssueNotification(AtlassianModel):
    """Payload for sending an email notification about an issue."""

    subject: str | None = None
    text_body: str | None = None
    html_body: str | None = None
    to: NotificationRecipients | None = None
    restrict: dict[str, Any] | None = None


class SearchResult(AtlassianModel):
    """Offset-paginated JQL search page."""

    expand: str | None = None
    start_at: int = 0
    max_results: int = 0
    total: int = 0
    issues: list[Issue] = Field(default_factory=list)
    warning_messages: list[str] | None = None


class SearchJqlResult(AtlassianModel):
    """Token-paginated JQL search page (``search/jql``)."""

    issues: list[Issue] = Field(default_factory=list)
    next_page_token: str | None = None
    is_last: bool | None = None


class IssueBulkFetched(AtlassianModel):
    issues: list[Issue] = Field(default_factory=list)
    issue_errors: list[Any] = Field(default_factory=list)


class RemoteLinkObject(AtlassianModel):
    url: str | None = None
    title: str | None = None
    summary: str | None = None
    icon: dict[str, Any] | None = None
    status: dict[str, Any] | None = None


class RemoteLink(AtlassianModel):
    """Link from an issue to an external resource. Also used as the payload."""

    self_: str | None = Field(default=None, alias="self")
    id: int | None = None
    global_id: str | None = None
    application: dict[str, Any] | None = None
    relationship: str | None = None
    object: RemoteLinkObject | None = None


class RemoteLinkIdentify(AtlassianModel):
    self_: str | None = Field(default=None, alias="self")
    id: int | None = None


# =============================================================================
# Projects
# =============================================================================


class ProjectPayload(AtlassianModel):
    """Payload to create or update a project."""

    key: str | None = None
    name: str | None = None
    description: str | None = None
    project_type_key: str | None = None
    project_template_key: str | None = None
    lead_account_id: str | None = None
    url: str | None = None
    assignee_type: str | None = None
    avatar_id: int | None = None
    issue_security_scheme: int | None = None
    permission_scheme: int | None = None
    notification_scheme: int | None = None
    category_id: int | None = None
    workflow_scheme: int | None = None
    field_configuration_scheme: int | None = None
    issue_type_scheme: int | None = None
    issue_type_screen_scheme: int | None = None


class ProjectCreated(AtlassianModel):
    self_: str | None = Field(default=None, alias="self")
    id: int | None = None
    key: str | None = None


class ProjectSearchOptions(AtlassianModel):
    """Filters for the paginated project search."""

    order_by: str | None = None
    ids: list[int] | None = None
    keys: list[str] | None = None
    query: str | None = None
    type_keys: list[str] | None = None
    category_id: int | None = None
    action: str | None = Field(default=None, description="view, browse or edit")
    status: list[str] | None = Field(default=None, description="live, archived, deleted")
    expand: list[str] | None = None
    properties: list[str] | None = None
    property_query: str | None = None


class ProjectPage(AtlassianModel):
    self_: str | None = Field(default=None, alias="self")
    next_page: str | None = None
    max_results: int = 0
    start_at: int = 0
    total: int = 0
    is_last: bool | None = None
    values: list[Project] = Field(default_factory=list)


class ProjectIssueTypeStatuses(AtlassianModel):
    """Valid statuses of one issue type in a project."""

    self_: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    subtask: bool | None = None
    statuses: list[Status] = Field(default_factory=list)


class NotificationScheme(AtlassianModel):
    self_: str | None = Field(default=None, alias="self")
    id: int | None = None
    expand: str | None = None
    name: str | None = None
    description: str | None = None
    notification_scheme_events: list[dict[str, Any]] | None = None
    scope: dict[str, Any] | None = None


class RoleActor(AtlassianModel):
    id: int | None = None
    display_name: str | None = None
    type: str | None = None
    name: str | None = None
    avatar_url: str | None = None
    actor_user: dict[str, Any] | None = None
    actor_group: dict[str, Any] | None = None


class ProjectRole(AtlassianModel):
    """Project role, with its actors when read in a project context."""

    self_: str | None = Field(default=None, alias="self")
    id: int | None = None
    name: str | None = None
    description: str | None = None
    actors: list[RoleActor] | None = None
    scope: dict[str, Any] | None = None
    translated_name: str | None = None
    current_user_role: bool | None = None
    admin: bool | None = None
    role_configurable: bool | None = None
    default: bool | None = None


class ProjectRolePayload(AtlassianModel):
    name: str | None = None
    description: str | None = None


class VersionSearchOptions(AtlassianModel):
    query: str | None = None
    status: list[str] | None = Field(default=None, description="released, unreleased, archived")
    order_by: str | None = None
    expand: list[str] | None = None


class VersionPage(AtlassianModel):
    self_: str | None = Field(default=None, alias="self")
    next_page: str | None = None
    max_results: int = 0
    start_at: int = 0
    total: int = 0
    is_last: bool | None = None
    values: list[Version] = Field(default_factory=list)


class VersionIssueCounts(AtlassianModel):
    self_: str | None = Field(default=None, alias="self")
    issues_fixed_count: int | None = None
    issues_affected_count: int | None = None
    issue_count_with_custom_fields_showing_version: int | None = None
    custom_field_usage: list[dict[str, Any]] | None = None


class VersionUnresolvedCount(AtlassianModel):
    self_: str | None = Field(default=None, alias="self")
    issues_unresolved_count: int | None = None
    issues_count: int | None = None


class ComponentCount(AtlassianModel):
    self_: str | None = Field(default=None, alias="self")
    issue_count: int | None = None


# =============================================================================
# Dashboards
# =============================================================================


class SharePermission(AtlassianModel):
    """Who a dashboard (or filter) is shared with."""

    id: int | None = None
    type: str | None = Field(default=None, description="user, group, project, projectRole, global, loggedin")
    project: Project | None = None
    role: ProjectRole | None = None
    group: dict[str, Any] | None = None
    user: User | None = None


class Dashboard(AtlassianModel):
    self_: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    description: str | None = None
    is_favourite: bool | None = None
    owner: User | None = None
    popularity: int | None = None
    rank: int | None = None
    view: str | None = None
    system_dashboard: bool | None = None
    automatic_refresh_ms: int | None = None
    share_permissions: list[SharePermission] | None = None
    edit_permissions: list[SharePermission] | None = None


class DashboardPayload(AtlassianModel):
    name: str | None = None
    description: str | None = None
    share_permissions: list[SharePermission] = Field(default_factory=list)
    edit_permissions: list[SharePermission] = Field(default_factory=list)


class DashboardPage(AtlassianModel):
    start_at: int = 0
    max_results: int = 0
    total: int = 0
    prev: str | None = None
    next: str | None = None
    dashboards: list[Dashboard] = Field(default_factory=list)


class DashboardSearchOptions(AtlassianModel):
    dashboard_name: str | None = None
    owner_account_id: str | None = None
    group_permission_name: str | None = None
    order_by: str | None = None
    expand: list[str] | None = None


class DashboardSearchPage(AtlassianModel):
    self_: str | None = Field(default=None, alias="self")
    next_page: str | None = None
    max_results: int = 0
    start_at: int = 0
    total: int = 0
    is_last: bool | None = None
    values: list[Dashboard] = Field(default_factory=list)


# =============================================================================
# Tasks, users, server
# =============================================================================


class Task(AtlassianModel):
    """Long-running Jira task (e.g., asynchronous project deletion)."""

    self_: str | None = Field(default=None, alias="self")
    id: str | None = None
    description: str | None = None
    status: str | None = Field(
        default=None,
        description="ENQUEUED, RUNNING, COMPLETE, FAILED, CANCEL_REQUESTED, CANCELLED or DEAD",
    )
    message: str | None = None
    result: Any = None
    submitted_by: int | None = None
    progress: int | None = None
    elapsed_runtime: int | None = None
    submitted: int | None = None
    started: int | None = None
    finished: int | None = None
    last_update: int | None = None


class MySelf(User):
    """The authenticated user."""

    locale: str | None = None
    groups: Expandable | None = None
    application_roles: Expandable | None = None
    expand: str | None = None


class ServerInfo(AtlassianModel):
    base_url: str | None = None
    version: str | None = None
    version_numbers: list[int] | None = None
    deployment_type: str | None = None
    build_number: int | None = None
    build_date: str | None = None
    server_time: str | None = None
    scm_info: str | None = None
    server_title: str | None = None


for _model in (IssueLink, IssueFields, Issue, SearchResult, SearchJqlResult, IssueBulkFetched):
    _model.model_rebuild()
