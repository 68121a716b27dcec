"""Confluence Cloud REST API (v1 content and spaces, v2 pages).

Example:
    from atlassian_cloud.confluence import ConfluenceClient

    with ConfluenceClient() as confluence:
        space = confluence.space.get("OPS", expand=["homepage"])
"""

from atlassian_cloud.confluence.client import ConfluenceClient

__all__ = ["ConfluenceClient"]
