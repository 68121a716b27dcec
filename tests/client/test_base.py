"""Tests for the shared HTTP helper."""

from unittest.mock import MagicMock, patch

import pytest
import requests
import responses
from pydantic import BaseModel
from responses import matchers

from atlassian_cloud.client.base import AtlassianClient, Service, encode_params, join
from atlassian_cloud.client.credentials import AtlassianCredentials
from atlassian_cloud.core.exceptions import (
    AtlassianConnectionError,
    AuthenticationError,
    BadRequestError,
    DecodeError,
    ForbiddenError,
    InternalServerError,
    NotFoundError,
    RateLimitError,
    RequestFailedError,
    ValidationError,
)
from atlassian_cloud.core.models import AtlassianModel, User

BASE_URL = "https://test.atlassian.net"


class Widget(AtlassianModel):
    id: str | None = None
    display_name: str | None = None


@pytest.fixture
def client(mock_credentials: MagicMock) -> AtlassianClient:
    return AtlassianClient()


class TestEncodeParams:
    """Tests for query parameter encoding."""

    def test_drops_empty_values(self) -> None:
        """Test that None, empty strings and empty lists are dropped."""
        assert encode_params({"a": None, "b": "", "c": [], "d": "x"}) == {"d": "x"}

    def test_keeps_zero(self) -> None:
        """Test that zero is a real value."""
        assert encode_params({"startAt": 0}) == {"startAt": 0}

    @pytest.mark.parametrize(("value", "expected"), [(True, "true"), (False, "false")])
    def test_booleans(self, value: bool, expected: str) -> None:
        """Test that booleans are sent lowercase."""
        assert encode_params({"flag": value}) == {"flag": expected}

    def test_lists_become_repeated_values(self) -> None:
        """Test that sequences are kept for repeated parameters."""
        assert encode_params({"id": [1, 2]}) == {"id": ["1", "2"]}

    def test_all_empty_returns_none(self) -> None:
        """Test that nothing to send yields None."""
        assert encode_params({"a": None}) is None
        assert encode_params(None) is None


class TestJoin:
    """Tests for comma-joining list parameters."""

    def test_join(self) -> None:
        assert join(["summary", "status"]) == "summary,status"

    @pytest.mark.parametrize("values", [None, []])
    def test_join_empty(self, values: list[str] | None) -> None:
        assert join(values) is None


class TestAtlassianClientInit:
    """Tests for AtlassianClient initialization."""

    def test_init_with_basic_auth(self, mock_credentials: MagicMock) -> None:
        """Test that email + token configure Basic auth."""
        client = AtlassianClient(
            base_url=BASE_URL,
            email="test@example.com",
            api_token="test-token",
        )
        assert client.base_url == BASE_URL
        assert client.timeout == 30
        assert isinstance(client._session.auth, requests.auth.HTTPBasicAuth)
        assert client._session.headers["Accept"] == "application/json"

    def test_init_with_bearer_token(self, mock_credentials: MagicMock) -> None:
        """Test that a bearer token sets the Authorization header."""
        mock_credentials.return_value = AtlassianCredentials(base_url=BASE_URL, bearer_token="oauth-token")
        client = AtlassianClient()
        assert client._session.auth is None
        assert client._session.headers["Authorization"] == "Bearer oauth-token"

    def test_init_custom_timeout_and_user_agent(self, mock_credentials: MagicMock) -> None:
        """Test optional timeout and User-Agent."""
        client = AtlassianClient(timeout=60, user_agent="ops-bot/1.0")
        assert client.timeout == 60
        assert client._session.headers["User-Agent"] == "ops-bot/1.0"

    def test_init_with_session(self, mock_credentials: MagicMock) -> None:
        """Test that a caller-provided session is used."""
        session = requests.Session()
        client = AtlassianClient(session=session)
        assert client._session is session

    def test_init_missing_credentials(self) -> None:
        """Test that credential errors propagate as ValueError."""
        with patch("atlassian_cloud.client.base.get_credentials", side_effect=ValueError("Missing")):
            with pytest.raises(ValueError):
                AtlassianClient()


class TestAtlassianClientContextManager:
    """Tests for context manager support."""

    def test_close_called_on_exit(self, mock_credentials: MagicMock) -> None:
        """Test that close is called when exiting context."""
        with patch.object(AtlassianClient, "close") as mock_close:
            with AtlassianClient():
                pass
            mock_close.assert_called_once()

    def test_url_for(self, client: AtlassianClient) -> None:
        """Test that paths with or without a leading slash resolve."""
        assert client.url_for("rest/api/3/myself") == f"{BASE_URL}/rest/api/3/myself"
        assert client.url_for("/rest/api/3/myself") == f"{BASE_URL}/rest/api/3/myself"


class TestAtlassianClientRequests:
    """Tests for request building and decoding."""

    @responses.activate
    def test_get_with_params(self, client: AtlassianClient) -> None:
        """Test that query parameters are encoded."""
        responses.add(
            responses.GET,
            f"{BASE_URL}/rest/api/test",
            json={"key": "value"},
            match=[matchers.query_param_matcher({"startAt": "0", "validateQuery": "true", "id": ["1", "2"]})],
        )

        result = client.call(
            "GET",
            "/rest/api/test",
            params={"startAt": 0, "validateQuery": True, "id": [1, 2], "expand": None},
        )
        assert result == {"key": "value"}

    @responses.activate
    def test_post_sends_json_with_content_type(self, client: AtlassianClient) -> None:
        """Test that JSON bodies set Content-Type."""
        responses.add(
            responses.POST,
            f"{BASE_URL}/rest/api/test",
            json={"id": "123"},
            status=201,
            match=[
                matchers.json_params_matcher({"name": "test"}),
                matchers.header_matcher({"Content-Type": "application/json", "Accept": "application/json"}),
            ],
        )

        assert client.call("POST", "/rest/api/test", json={"name": "test"}) == {"id": "123"}

    @responses.activate
    def test_get_without_body_has_no_content_type(self, client: AtlassianClient) -> None:
        """Test that bodiless requests carry no Content-Type."""
        responses.add(responses.GET, f"{BASE_URL}/rest/api/test", json={})

        client.call("GET", "/rest/api/test")
        assert "Content-Type" not in responses.calls[0].request.headers

    @responses.activate
    def test_files_send_xsrf_header(self, client: AtlassianClient) -> None:
        """Test that multipart uploads bypass the XSRF check."""
        responses.add(
            responses.POST,
            f"{BASE_URL}/rest/api/3/issue/KP-2/attachments",
            json=[],
            match=[matchers.header_matcher({"X-Atlassian-Token": "no-check"})],
        )

        client.request("POST", "/rest/api/3/issue/KP-2/attachments", files={"file": ("a.txt", b"hello")})

    @responses.activate
    def test_basic_auth_header(self, client: AtlassianClient) -> None:
        """Test that Basic credentials reach the wire."""
        responses.add(responses.GET, f"{BASE_URL}/rest/api/test", json={})

        client.call("GET", "/rest/api/test")
        assert responses.calls[0].request.headers["Authorization"].startswith("Basic ")

    @responses.activate
    def test_decode_into_model(self, client: AtlassianClient) -> None:
        """Test that camelCase bodies validate into snake_case models."""
        responses.add(responses.GET, f"{BASE_URL}/rest/api/test", json={"id": "1", "displayName": "Ada"})

        widget = client.call("GET", "/rest/api/test", model=Widget)
        assert isinstance(widget, Widget)
        assert widget.display_name == "Ada"

    @responses.activate
    def test_decode_into_list(self, client: AtlassianClient) -> None:
        """Test decoding into a generic type."""
        responses.add(responses.GET, f"{BASE_URL}/rest/api/test", json=[{"accountId": "abc"}])

        users = client.call("GET", "/rest/api/test", model=list[User])
        assert users[0].account_id == "abc"

    @responses.activate
    @pytest.mark.parametrize("status", [204, 200])
    def test_empty_body_returns_none(self, client: AtlassianClient, status: int) -> None:
        """Test that empty bodies decode to None even with a model."""
        responses.add(responses.DELETE, f"{BASE_URL}/rest/api/test", status=status, body="")

        assert client.call("DELETE", "/rest/api/test", model=Widget) is None

    @responses.activate
    def test_invalid_json_raises_decode_error(self, client: AtlassianClient) -> None:
        """Test that a non-JSON 2xx body is a DecodeError."""
        responses.add(responses.GET, f"{BASE_URL}/rest/api/test", body="<html>oops</html>", status=200)

        with pytest.raises(DecodeError) as exc_info:
            client.call("GET", "/rest/api/test")
        assert "oops" in exc_info.value.details["body"]

    @responses.activate
    def test_model_mismatch_raises_decode_error(self, client: AtlassianClient) -> None:
        """Test that a body of the wrong shape is a DecodeError."""
        responses.add(responses.GET, f"{BASE_URL}/rest/api/test", json=["not", "an", "object"])

        with pytest.raises(DecodeError):
            client.call("GET", "/rest/api/test", model=Widget)


class TestAtlassianClientErrors:
    """Tests for status and transport error mapping."""

    @responses.activate
    @pytest.mark.parametrize(
        ("status", "error_class"),
        [
            (400, BadRequestError),
            (401, AuthenticationError),
            (403, ForbiddenError),
            (404, NotFoundError),
            (429, RateLimitError),
            (500, InternalServerError),
            (409, RequestFailedError),
            (503, RequestFailedError),
        ],
    )
    def test_status_mapping(self, client: AtlassianClient, status: int, error_class: type) -> None:
        """Test that each status maps to its exception."""
        responses.add(responses.GET, f"{BASE_URL}/rest/api/test", json={}, status=status)

        with pytest.raises(error_class) as exc_info:
            client.call("GET", "/rest/api/test")
        assert exc_info.value.status_code == status
        assert exc_info.value.method == "GET"
        assert exc_info.value.endpoint == f"{BASE_URL}/rest/api/test"

    @responses.activate
    def test_error_messages_are_collected(self, client: AtlassianClient) -> None:
        """Test that Jira errorMessages and errors end up in the message."""
        body = {"errorMessages": ["Issue does not exist"], "errors": {"summary": "required"}}
        responses.add(responses.GET, f"{BASE_URL}/rest/api/test", json=body, status=400)

        with pytest.raises(BadRequestError) as exc_info:
            client.call("GET", "/rest/api/test")
        assert "Issue does not exist" in str(exc_info.value)
        assert "summary: required" in str(exc_info.value)
        assert exc_info.value.response == body

    @responses.activate
    def test_confluence_message_is_used(self, client: AtlassianClient) -> None:
        """Test that a Confluence 'message' field is used when nothing else is set."""
        responses.add(
            responses.GET,
            f"{BASE_URL}/wiki/rest/api/test",
            json={"statusCode": 404, "message": "No content found with id"},
            status=404,
        )

        with pytest.raises(NotFoundError, match="No content found with id"):
            client.call("GET", "/wiki/rest/api/test")

    @responses.activate
    def test_non_json_error_body(self, client: AtlassianClient) -> None:
        """Test that a text error body is kept as-is."""
        responses.add(responses.GET, f"{BASE_URL}/rest/api/test", body="Bad gateway", status=502)

        with pytest.raises(RequestFailedError) as exc_info:
            client.call("GET", "/rest/api/test")
        assert exc_info.value.response == "Bad gateway"

    @responses.activate
    def test_rate_limit_is_not_retried(self, client: AtlassianClient) -> None:
        """Test that 429 raises immediately with Retry-After exposed."""
        responses.add(
            responses.GET,
            f"{BASE_URL}/rest/api/test",
            json={},
            status=429,
            headers={"Retry-After": "30"},
        )

        with pytest.raises(RateLimitError) as exc_info:
            client.call("GET", "/rest/api/test")
        assert exc_info.value.retry_after == 30
        assert len(responses.calls) == 1

    @responses.activate
    def test_server_error_is_not_retried(self, client: AtlassianClient) -> None:
        """Test that a 500 is sent exactly once."""
        responses.add(responses.GET, f"{BASE_URL}/rest/api/test", json={}, status=500)

        with pytest.raises(InternalServerError):
            client.call("GET", "/rest/api/test")
        assert len(responses.calls) == 1

    @responses.activate
    def test_connection_error(self, client: AtlassianClient) -> None:
        """Test that transport failures become AtlassianConnectionError."""
        responses.add(
            responses.GET,
            f"{BASE_URL}/rest/api/test",
            body=requests.exceptions.ConnectionError("refused"),
        )

        with pytest.raises(AtlassianConnectionError, match="Connection failed"):
            client.call("GET", "/rest/api/test")

    @responses.activate
    def test_timeout(self, client: AtlassianClient) -> None:
        """Test that timeouts become AtlassianConnectionError."""
        responses.add(responses.GET, f"{BASE_URL}/rest/api/test", body=requests.exceptions.Timeout())

        with pytest.raises(AtlassianConnectionError, match="timed out"):
            client.call("GET", "/rest/api/test")


class TestAtlassianClientTestConnection:
    """Tests for test_connection."""

    @responses.activate
    def test_connection_success(self, client: AtlassianClient) -> None:
        responses.add(responses.GET, f"{BASE_URL}/rest/api/3/serverInfo", json={"version": "1001.0.0"})

        assert client.test_connection() is True

    @responses.activate
    def test_connection_auth_failure(self, client: AtlassianClient) -> None:
        responses.add(responses.GET, f"{BASE_URL}/rest/api/3/serverInfo", json={}, status=401)

        with pytest.raises(AuthenticationError):
            client.test_connection()


class TestService:
    """Tests for the Service base class helpers."""

    @pytest.mark.parametrize("value", [None, "", [], 0])
    def test_require_rejects_empty(self, client: AtlassianClient, value: object) -> None:
        """Test that empty required values raise ValidationError."""
        service = Service(client)
        with pytest.raises(ValidationError) as exc_info:
            service._require(value, "no issue key/id set", field="issue_key_or_id")
        assert exc_info.value.field == "issue_key_or_id"
        assert exc_info.value.message == "no issue key/id set"

    def test_payload_serializes_models(self, client: AtlassianClient) -> None:
        """Test that models are dumped with wire names and no unset values."""
        service = Service(client)
        assert service._payload(Widget(display_name="Ada")) == {"displayName": "Ada"}

    def test_payload_serializes_plain_models(self, client: AtlassianClient) -> None:
        """Test that non-Atlassian pydantic models are dumped too."""

        class Plain(BaseModel):
            name: str
            note: str | None = None

        assert Service(client)._payload(Plain(name="x")) == {"name": "x"}

    def test_payload_passes_dicts_through(self, client: AtlassianClient) -> None:
        body = {"fields": {"summary": "x"}}
        assert Service(client)._payload(body) is body

    def test_payload_none_raises(self, client: AtlassianClient) -> None:
        with pytest.raises(ValidationError, match="no payload set"):
            Service(client)._payload(None)
