"""Command-line interface for atlassian-cloud.

Usage:
    # Jira
    atlassian issue get KP-2
    atlassian issue search 'project = KP AND status = "To Do"'
    atlassian issue create --project KP --type Story --summary "New feature"
    atlassian issue transitions KP-2 --to "In Progress"
    atlassian project get KP
    atlassian project search --query platform
    atlassian task get 10641

    # Confluence
    atlassian space get OPS
    atlassian content get 83820565 --body
    atlassian content search 'space = OPS AND type = page'

    # Configuration
    atlassian config show
    atlassian config setup
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from atlassian_cloud import __version__
from atlassian_cloud.core.exceptions import AtlassianError

ISSUE_SUMMARY_FIELDS = ["summary", "status", "issuetype", "assignee", "priority"]


def _print_json(model: Any) -> None:
    """Print a model (or plain data) as indented JSON."""
    data = model.to_payload() if hasattr(model, "to_payload") else model
    print(json.dumps(data, indent=2, default=str))


def _name(value: Any, attr: str = "name", default: str = "None") -> str:
    return getattr(value, attr, None) or default


def _text_body(text: str, api_version: str) -> Any:
    """Rich-text field value: wiki markup for v2, an ADF document for v3."""
    if api_version == "2":
        return text
    return {
        "type": "doc",
        "version": 1,
        "content": [{"type": "paragraph", "content": [{"type": "text", "text": text}]}],
    }


# =============================================================================
# Issue Commands
# =============================================================================


def cmd_issue_get(args: argparse.Namespace) -> int:
    """Get issue details."""
    from atlassian_cloud.jira import JiraClient

    with JiraClient() as jira:
        issue = jira.issue.get(args.issue_key)

        if args.json:
            _print_json(issue)
            return 0

        fields = issue.fields
        print(f"Key:         {issue.key}")
        if fields is None:
            return 0
        print(f"Summary:     {fields.summary}")
        print(f"Type:        {_name(fields.issue_type)}")
        print(f"Status:      {_name(fields.status)}")
        print(f"Assignee:    {_name(fields.assignee, 'display_name', 'Unassigned')}")
        print(f"Reporter:    {_name(fields.reporter, 'display_name', 'Unknown')}")
        print(f"Priority:    {_name(fields.priority)}")
        print(f"Labels:      {', '.join(fields.labels) if fields.labels else 'None'}")
        print(f"Created:     {fields.created}")
        print(f"Updated:     {fields.updated}")
        if fields.parent:
            print(f"Parent:      {fields.parent.key}")
        print(f"URL:         {jira.base_url}/browse/{issue.key}")

    return 0


def cmd_issue_search(args: argparse.Namespace) -> int:
    """Search for issues with JQL."""
    from atlassian_cloud.jira import JiraClient

    with JiraClient() as jira:
        result = jira.issue.search.jql(args.query, fields=ISSUE_SUMMARY_FIELDS, max_results=args.limit)

        if args.json:
            _print_json(result)
            return 0

        if not result.issues:
            print("No issues found")
            return 0

        print(f"Found {len(result.issues)} issue(s):\n")
        for issue in result.issues:
            fields = issue.fields
            print(f"  {issue.key}: {fields.summary if fields else ''}")
            if fields:
                print(f"    Status: {_name(fields.status)} | Type: {_name(fields.issue_type)}")
        if result.next_page_token:
            print("\nMore results available, raise --limit to see them")

    return 0


def cmd_issue_create(args: argparse.Namespace) -> int:
    """Create a new issue."""
    from atlassian_cloud.jira import JiraClient

    with JiraClient() as jira:
        fields: dict[str, Any] = {
            "project": {"key": args.project},
            "issuetype": {"name": args.type},
            "summary": args.summary,
        }
        if args.description:
            fields["description"] = _text_body(args.description, jira.api_version)
        if args.labels:
            fields["labels"] = [label.strip() for label in args.labels.split(",")]
        if args.parent:
            fields["parent"] = {"key": args.parent}

        created = jira.issue.create({"fields": fields})

        if args.json:
            _print_json(created)
            return 0

        print(f"Created {created.key}: {args.summary}")
        print(f"URL: {jira.base_url}/browse/{created.key}")

    return 0


def cmd_issue_transitions(args: argparse.Namespace) -> int:
    """List available transitions, or perform one with --to."""
    from atlassian_cloud.jira import JiraClient

    with JiraClient() as jira:
        page = jira.issue.transitions(args.issue_key)

        if not args.to:
            if args.json:
                _print_json(page)
                return 0
            for transition in page.transitions:
                print(f"  {transition.id}: {transition.name} -> {_name(transition.to)}")
            return 0

        target = args.to.lower()
        for transition in page.transitions:
            candidates = {transition.id, (transition.name or "").lower(), _name(transition.to, default="").lower()}
            if target in candidates:
                jira.issue.move(args.issue_key, transition.id)
                print(f"Transitioned {args.issue_key} to '{_name(transition.to, default=transition.name)}'")
                return 0

        available = ", ".join(t.name or "" for t in page.transitions) or "none"
        print(f"No transition to '{args.to}' (available: {available})", file=sys.stderr)
        return 1


# =============================================================================
# Project and Task Commands
# =============================================================================


def cmd_project_get(args: argparse.Namespace) -> int:
    """Get project details."""
    from atlassian_cloud.jira import JiraClient

    with JiraClient() as jira:
        project = jira.project.get(args.project_key)

        if args.json:
            _print_json(project)
            return 0

        print(f"Key:         {project.key}")
        print(f"Name:        {project.name}")
        print(f"ID:          {project.id}")
        print(f"Type:        {project.project_type_key}")
        print(f"Lead:        {_name(project.lead, 'display_name', 'None')}")
        if project.description:
            print(f"Description: {project.description}")

    return 0


def cmd_project_search(args: argparse.Namespace) -> int:
    """Search projects by name or key."""
    from atlassian_cloud.jira import JiraClient
    from atlassian_cloud.jira.models import ProjectSearchOptions

    with JiraClient() as jira:
        options = ProjectSearchOptions(query=args.query) if args.query else None
        page = jira.project.search(options, max_results=args.limit)

        if args.json:
            _print_json(page)
            return 0

        if not page.values:
            print("No projects found")
            return 0

        print(f"Found {page.total} project(s):\n")
        for project in page.values:
            print(f"  {project.key}: {project.name} ({project.project_type_key})")

    return 0


def cmd_task_get(args: argparse.Namespace) -> int:
    """Show the progress of a long-running Jira task."""
    from atlassian_cloud.jira import JiraClient

    with JiraClient() as jira:
        task = jira.task.get(args.task_id)

        if args.json:
            _print_json(task)
            return 0

        print(f"ID:          {task.id}")
        print(f"Status:      {task.status}")
        print(f"Progress:    {task.progress if task.progress is not None else 0}%")
        if task.description:
            print(f"Description: {task.description}")
        if task.message:
            print(f"Message:     {task.message}")

    return 0


def cmd_task_cancel(args: argparse.Namespace) -> int:
    """Request cancellation of a long-running Jira task."""
    from atlassian_cloud.jira import JiraClient

    with JiraClient() as jira:
        jira.task.cancel(args.task_id)
        print(f"Requested cancellation of task {args.task_id}")

    return 0


# =============================================================================
# Confluence Commands
# =============================================================================


def cmd_space_get(args: argparse.Namespace) -> int:
    """Get space details."""
    from atlassian_cloud.confluence import ConfluenceClient

    with ConfluenceClient() as confluence:
        space = confluence.space.get(args.space_key, expand=["description.plain", "homepage"])

        if args.json:
            _print_json(space)
            return 0

        print(f"Key:         {space.key}")
        print(f"Name:        {space.name}")
        print(f"ID:          {space.id}")
        print(f"Type:        {space.type}")
        print(f"Status:      {space.status}")
        if space.homepage:
            print(f"Homepage:    {space.homepage.title} ({space.homepage.id})")

    return 0


def cmd_content_get(args: argparse.Namespace) -> int:
    """Get content details."""
    from atlassian_cloud.confluence import ConfluenceClient

    expand = ["space", "version", "ancestors"]
    if args.body:
        expand.append("body.storage")

    with ConfluenceClient() as confluence:
        content = confluence.content.get(args.content_id, expand=expand)

        if args.json:
            _print_json(content)
            return 0

        print(f"ID:          {content.id}")
        print(f"Title:       {content.title}")
        print(f"Type:        {content.type}")
        print(f"Space:       {_name(content.space, 'key', 'Unknown')}")
        if content.version:
            print(f"Version:     {content.version.number}")
            print(f"Author:      {_name(content.version.by, 'display_name', 'Unknown')}")
            print(f"Updated:     {content.version.when}")
        if content.ancestors:
            print(f"Parent:      {content.ancestors[-1].id}")
        if content.links and content.links.webui:
            print(f"URL:         {confluence.base_url}/wiki{content.links.webui}")

        if args.body and content.body and content.body.storage:
            print(f"\nContent:\n{content.body.storage.value}")

    return 0


def cmd_content_search(args: argparse.Namespace) -> int:
    """Search content with CQL."""
    from atlassian_cloud.confluence import ConfluenceClient

    with ConfluenceClient() as confluence:
        page = confluence.content.search(args.query, expand=["space"], max_results=args.limit)

        if args.json:
            _print_json(page)
            return 0

        if not page.results:
            print("No content found")
            return 0

        print(f"Found {len(page.results)} result(s):\n")
        for content in page.results:
            print(f"  {content.id}: {content.title}")
            print(f"    Type: {content.type} | Space: {_name(content.space, 'key', 'Unknown')}")

    return 0


# =============================================================================
# Config Commands
# =============================================================================


def cmd_config_show(args: argparse.Namespace) -> int:
    """Show the resolved configuration."""
    from atlassian_cloud.client.credentials import get_credentials

    print("Atlassian Cloud Configuration")
    print("=" * 40)

    try:
        creds = get_credentials()
    except ValueError:
        print("\nNot configured")
        print("  Set ATLASSIAN_* environment variables or use: atlassian config setup")
        return 0

    print(f"\nURL:   {creds.base_url}")
    if creds.uses_basic_auth:
        print("Auth:  basic")
        print(f"Email: {creds.email}")
        print(f"Token: ****{creds.api_token[-4:]}")
    else:
        print("Auth:  bearer")
        print(f"Token: ****{creds.bearer_token[-4:]}")

    return 0


def cmd_config_setup(args: argparse.Namespace) -> int:
    """Interactive credential setup."""
    import getpass

    from atlassian_cloud.client.credentials import save_credentials

    print("Atlassian Cloud Configuration")
    print("=" * 40)
    print("\nYou'll need an API token from:")
    print("https://id.atlassian.com/manage-profile/security/api-tokens\n")

    base_url = input("Atlassian URL (e.g., https://yoursite.atlassian.net): ").strip()
    if not base_url:
        print("URL is required", file=sys.stderr)
        return 1

    email = input("Your Atlassian email: ").strip()
    if not email:
        print("Email is required", file=sys.stderr)
        return 1

    api_token = getpass.getpass("API token (hidden): ").strip()
    if not api_token:
        print("API token is required", file=sys.stderr)
        return 1

    print("\nTesting credentials...")
    from atlassian_cloud.jira import JiraClient

    try:
        with JiraClient(base_url=base_url, email=email, api_token=api_token) as jira:
            jira.test_connection()
    except (AtlassianError, ValueError) as e:
        print(f"Connection failed: {e}", file=sys.stderr)
        return 1
    print("Connection successful!")

    save_credentials(base_url.rstrip("/"), email, api_token)
    print("\nCredentials saved to system keyring.")

    return 0


# =============================================================================
# Main Entry Point
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="atlassian",
        description="Jira and Confluence Cloud CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  atlassian issue get KP-2
  atlassian issue create --project KP --type Story --summary "New feature"
  atlassian issue transitions KP-2 --to done

  atlassian content search 'space = OPS AND title ~ "deploy"'
  atlassian space get OPS

  atlassian config show
  atlassian config setup
        """,
    )
    parser.add_argument("--version", action="version", version=f"atlassian-cloud {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log HTTP requests")
    parser.add_argument("--json", action="store_true", help="Print raw JSON instead of a summary")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # =========================================================================
    # Issue subcommands
    # =========================================================================
    issue_parser = subparsers.add_parser("issue", help="Jira issue commands")
    issue_sub = issue_parser.add_subparsers(dest="issue_command", required=True)

    issue_get = issue_sub.add_parser("get", help="Get issue details")
    issue_get.add_argument("issue_key", help="Issue key (e.g., KP-2)")

    issue_search = issue_sub.add_parser("search", help="Search issues with JQL")
    issue_search.add_argument("query", help="JQL query")
    issue_search.add_argument("--limit", type=int, default=25, help="Max results")

    issue_create = issue_sub.add_parser("create", help="Create a new issue")
    issue_create.add_argument("--project", required=True, help="Project key")
    issue_create.add_argument("--type", default="Task", help="Issue type (default: Task)")
    issue_create.add_argument("--summary", required=True, help="Issue summary")
    issue_create.add_argument("--description", help="Issue description")
    issue_create.add_argument("--labels", help="Comma-separated labels")
    issue_create.add_argument("--parent", help="Parent issue key (for subtasks)")

    issue_trans = issue_sub.add_parser("transitions", help="List or perform transitions")
    issue_trans.add_argument("issue_key", help="Issue key")
    issue_trans.add_argument("--to", help="Transition id or name, or target status")

    # =========================================================================
    # Project and task subcommands
    # =========================================================================
    project_parser = subparsers.add_parser("project", help="Jira project commands")
    project_sub = project_parser.add_subparsers(dest="project_command", required=True)

    project_get = project_sub.add_parser("get", help="Get project details")
    project_get.add_argument("project_key", help="Project key or id")

    project_search = project_sub.add_parser("search", help="Search projects")
    project_search.add_argument("--query", help="Match against project key and name")
    project_search.add_argument("--limit", type=int, default=50, help="Max results")

    task_parser = subparsers.add_parser("task", help="Jira long-running task commands")
    task_sub = task_parser.add_subparsers(dest="task_command", required=True)

    task_get = task_sub.add_parser("get", help="Show task progress")
    task_get.add_argument("task_id", help="Task ID")

    task_cancel = task_sub.add_parser("cancel", help="Cancel a task")
    task_cancel.add_argument("task_id", help="Task ID")

    # =========================================================================
    # Confluence subcommands
    # =========================================================================
    space_parser = subparsers.add_parser("space", help="Confluence space commands")
    space_sub = space_parser.add_subparsers(dest="space_command", required=True)

    space_get = space_sub.add_parser("get", help="Get space details")
    space_get.add_argument("space_key", help="Space key")

    content_parser = subparsers.add_parser("content", help="Confluence content commands")
    content_sub = content_parser.add_subparsers(dest="content_command", required=True)

    content_get = content_sub.add_parser("get", help="Get content details")
    content_get.add_argument("content_id", help="Content ID")
    content_get.add_argument("--body", action="store_true", help="Include the storage body")

    content_search = content_sub.add_parser("search", help="Search content with CQL")
    content_search.add_argument("query", help="CQL query")
    content_search.add_argument("--limit", type=int, default=25, help="Max results")

    # =========================================================================
    # Config subcommands
    # =========================================================================
    config_parser = subparsers.add_parser("config", help="Configuration commands")
    config_sub = config_parser.add_subparsers(dest="config_command", required=True)
    config_sub.add_parser("show", help="Show current configuration")
    config_sub.add_parser("setup", help="Interactive credential setup")

    return parser


COMMANDS = {
    "issue": (
        "issue_command",
        {
            "get": cmd_issue_get,
            "search": cmd_issue_search,
            "create": cmd_issue_create,
            "transitions": cmd_issue_transitions,
        },
    ),
    "project": ("project_command", {"get": cmd_project_get, "search": cmd_project_search}),
    "task": ("task_command", {"get": cmd_task_get, "cancel": cmd_task_cancel}),
    "space": ("space_command", {"get": cmd_space_get}),
    "content": ("content_command", {"get": cmd_content_get, "search": cmd_content_search}),
    "config": ("config_command", {"show": cmd_config_show, "setup": cmd_config_setup}),
}


def main() -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    dest, commands = COMMANDS[args.command]
    try:
        return commands[getattr(args, dest)](args)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    except AtlassianError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
