"""Shared pytest fixtures for atlassian-cloud tests."""

from collections.abc import Callable, Iterator
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
import responses
from responses import matchers

from atlassian_cloud.client.credentials import AtlassianCredentials
from atlassian_cloud.confluence import ConfluenceClient
from atlassian_cloud.jira import JiraClient

BASE_URL = "https://test.atlassian.net"


@pytest.fixture
def mock_credentials() -> Iterator[MagicMock]:
    """Mock get_credentials to return Basic test credentials."""
    with patch("atlassian_cloud.client.base.get_credentials") as mock:
        mock.return_value = AtlassianCredentials(
            base_url=BASE_URL,
            email="test@example.com",
            api_token="test-token",
        )
        yield mock


@pytest.fixture
def jira(mock_credentials: MagicMock) -> Iterator[JiraClient]:
    """Jira client on the v3 REST API."""
    with JiraClient() as client:
        yield client


@pytest.fixture
def jira_v2(mock_credentials: MagicMock) -> Iterator[JiraClient]:
    """Jira client on the v2 REST API."""
    with JiraClient(version="2") as client:
        yield client


@pytest.fixture
def confluence(mock_credentials: MagicMock) -> Iterator[ConfluenceClient]:
    with ConfluenceClient() as client:
        yield client


@pytest.fixture
def expect_call() -> Callable[..., None]:
    """Register a mocked endpoint that only matches the exact query and JSON body.

    Must be used inside a ``@responses.activate`` test. A request with any
    other query string or body fails with a ConnectionError.
    """

    def register(
        method: str,
        path: str,
        query: dict[str, Any] | None = None,
        body: Any = None,
        reply: Any = None,
        status: int | None = None,
    ) -> None:
        match = [matchers.query_param_matcher(dict(query or {}))]
        if body is not None:
            match.append(matchers.json_params_matcher(body))
        responses.add(
            method,
            f"{BASE_URL}{path}",
            json=reply,
            status=status or (200 if reply is not None else 204),
            match=match,
        )

    return register
