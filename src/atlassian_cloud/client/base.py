"""Shared HTTP helper for the Atlassian Cloud REST APIs.

Every Jira and Confluence service goes through :class:`AtlassianClient`,
which:
- resolves credentials and configures Basic or Bearer auth
- encodes query parameters the way Atlassian expects them
- maps non-2xx statuses to :mod:`atlassian_cloud.core.exceptions`
- decodes JSON bodies, optionally into pydantic models

Requests are never retried; a 429 surfaces as ``RateLimitError``.

Example:
    from atlassian_cloud.client.base import AtlassianClient, Service

    class ServerService(Service):
        def info(self) -> dict:
            return self._get("/rest/api/3/serverInfo")

    with AtlassianClient() as client:
        print(ServerService(client).info())
"""

import logging
from functools import lru_cache
from typing import Any

import pydantic
import requests
from pydantic import BaseModel, TypeAdapter
from requests.auth import HTTPBasicAuth

from atlassian_cloud.client.credentials import (
    DEFAULT_SERVICE,
    AtlassianCredentials,
    get_credentials,
)
from atlassian_cloud.core.exceptions import (
    STATUS_ERRORS,
    AtlassianConnectionError,
    DecodeError,
    RateLimitError,
    RequestFailedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30  # seconds


def encode_params(params: dict[str, Any] | None) -> dict[str, Any] | None:
    """Prepare query parameters for requests.

    ``None``, empty strings and empty sequences are dropped, booleans become
    ``true``/``false`` and sequences are sent as repeated parameters. Values
    that must be comma-joined are joined by the caller.
    """
    if not params:
        return None

    encoded: dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (str, list, tuple, set)) and not value:
            continue
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        elif isinstance(value, (list, tuple, set)):
            encoded[key] = [str(item) for item in value]
        else:
            encoded[key] = value
    return encoded or None


def join(values: list[str] | tuple[str, ...] | None) -> str | None:
    """Comma-join a list for parameters such as ``expand`` and ``fields``."""
    if not values:
        return None
    return ",".join(values)


@lru_cache(maxsize=256)
def _adapter(model: Any) -> TypeAdapter:
    return TypeAdapter(model)


class AtlassianClient:
    """Base HTTP client for Atlassian Cloud sites.

    Attributes:
        base_url: Site URL without trailing slash
        timeout: Request timeout in seconds
        user_agent: Value of the User-Agent header, if set
    """

    provider_name = "atlassian"
    health_path = "/rest/api/3/serverInfo"

    def __init__(
        self,
        base_url: str | None = None,
        email: str | None = None,
        api_token: str | None = None,
        bearer_token: str | None = None,
        user_agent: str | None = None,
        timeout: int = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
        service: str | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Site URL (e.g., https://company.atlassian.net)
            email: Account email for Basic auth
            api_token: API token for Basic auth
            bearer_token: OAuth 2.0 access token, used when Basic auth is not configured
            user_agent: Optional User-Agent header
            timeout: Request timeout in seconds
            session: Pre-configured requests session to use instead of a new one
            service: Keyring service name for credential lookup
        """
        creds = get_credentials(
            base_url=base_url,
            email=email,
            api_token=api_token,
            bearer_token=bearer_token,
            service=service or DEFAULT_SERVICE,
        )
        self._credentials: AtlassianCredentials = creds
        self.base_url = creds.base_url
        self.timeout = timeout
        self.user_agent = user_agent

        self._session = session or requests.Session()
        if creds.uses_basic_auth:
            self._session.auth = HTTPBasicAuth(creds.email, creds.api_token)
        else:
            self._session.headers["Authorization"] = f"Bearer {creds.bearer_token}"
        self._session.headers["Accept"] = "application/json"
        if user_agent:
            self._session.headers["User-Agent"] = user_agent

        logger.debug(
            "Initialized %s client for %s (auth: %s)",
            self.provider_name,
            self.base_url,
            "basic" if creds.uses_basic_auth else "bearer",
        )

    def __enter__(self) -> "AtlassianClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit - close session."""
        self.close()

    def close(self) -> None:
        """Close the HTTP session."""
        self._session.close()
        logger.debug("Closed %s client session", self.provider_name)

    def url_for(self, path: str) -> str:
        """Resolve an API path against the site URL."""
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.base_url}{path}"

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
        data: Any = None,
        files: Any = None,
        headers: dict[str, str] | None = None,
    ) -> requests.Response:
        """Send a request and check its status.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path (appended to base_url)
            params: Query parameters, see :func:`encode_params`
            json: JSON body (will be serialized)
            data: Raw body data
            files: Multipart files, sent with the XSRF bypass header
            headers: Additional headers

        Returns:
            Response object with a 2xx status

        Raises:
            AtlassianConnectionError: If the transport fails
            RequestFailedError: If the status is not 2xx (or one of its subclasses)
        """
        url = self.url_for(path)
        request_headers: dict[str, str] = {}
        if json is not None:
            request_headers["Content-Type"] = "application/json"
        if files:
            request_headers["X-Atlassian-Token"] = "no-check"
        if headers:
            request_headers.update(headers)

        logger.debug("%s %s", method, url)
        try:
            response = self._session.request(
                method=method,
                url=url,
                params=encode_params(params),
                json=json,
                data=data,
                files=files,
                headers=request_headers,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            raise AtlassianConnectionError(
                f"Request timed out after {self.timeout} seconds",
                provider=self.provider_name,
                details={"url": url, "timeout": self.timeout},
            ) from e
        except requests.exceptions.RequestException as e:
            raise AtlassianConnectionError(
                f"Connection failed: {e}",
                provider=self.provider_name,
                details={"url": url},
            ) from e

        logger.debug(
            "%s %s -> %d (%d bytes)",
            method,
            path,
            response.status_code,
            len(response.content),
        )

        if not 200 <= response.status_code < 300:
            raise self._status_error(method, response)
        return response

    def call(self, method: str, path: str, *, model: Any = None, **kwargs: Any) -> Any:
        """Send a request and decode the JSON body.

        Args:
            method: HTTP method
            path: API path
            model: Optional type to validate the body into (a model, ``list[Model]``, ...)
            **kwargs: Passed to :meth:`request`

        Returns:
            Decoded body, the validated model, or None for empty bodies
        """
        response = self.request(method, path, **kwargs)
        return self.decode(response, model)

    def decode(self, response: requests.Response, model: Any = None) -> Any:
        """Decode a response body.

        Raises:
            DecodeError: If the body is not JSON or does not match ``model``
        """
        if response.status_code == 204 or not response.content:
            return None
        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeError(
                "Response body is not valid JSON",
                provider=self.provider_name,
                details={"url": response.url, "body": response.text[:500]},
            ) from e
        if model is None:
            return payload
        try:
            return _adapter(model).validate_python(payload)
        except pydantic.ValidationError as e:
            raise DecodeError(
                f"Response body does not match {getattr(model, '__name__', model)}: {e.error_count()} error(s)",
                provider=self.provider_name,
                details={"url": response.url, "errors": e.errors(include_url=False)},
            ) from e

    def _status_error(self, method: str, response: requests.Response) -> RequestFailedError:
        """Build the exception for a non-2xx response."""
        body = self._safe_json(response)
        error_class = STATUS_ERRORS.get(response.status_code, RequestFailedError)
        message = f"Request failed: {response.status_code}"
        if isinstance(body, dict):
            messages = list(body.get("errorMessages") or [])
            errors = body.get("errors") or {}
            if isinstance(errors, dict):
                messages.extend(f"{k}: {v}" for k, v in errors.items())
            elif isinstance(errors, list):
                # Confluence v2: [{"status", "code", "title", "detail"}]
                for error in errors:
                    if isinstance(error, dict):
                        text = error.get("title") or error.get("detail") or error.get("message")
                        if text:
                            messages.append(str(text))
            if not messages and body.get("message"):
                messages.append(str(body["message"]))
            if messages:
                message = f"{message} ({'; '.join(messages)})"

        kwargs: dict[str, Any] = {
            "method": method,
            "endpoint": response.url,
            "response": body,
            "provider": self.provider_name,
            "details": {"url": response.url, "response": body},
        }
        if error_class is RateLimitError:
            kwargs["retry_after"] = self._retry_after(response)
        return error_class(message, status_code=response.status_code, **kwargs)

    @staticmethod
    def _retry_after(response: requests.Response) -> int | None:
        retry_after = response.headers.get("Retry-After")
        if retry_after:
            try:
                return int(retry_after)
            except ValueError:
                return None
        return None

    @staticmethod
    def _safe_json(response: requests.Response) -> Any:
        """Parse a JSON error body, returning raw text on failure."""
        try:
            return response.json()
        except ValueError:
            return response.text

    def test_connection(self) -> bool:
        """Check that the site is reachable and the credentials are accepted.

        Raises:
            AuthenticationError: If authentication fails
            AtlassianConnectionError: If connection fails
        """
        self.request("GET", self.health_path)
        logger.info("Connection test successful for %s", self.base_url)
        return True


class Service:
    """Base class for a group of endpoints sharing one client.

    Services hold no state besides the client and, for Jira, the REST API
    version, so they are safe to share between threads as long as the
    underlying session is.
    """

    def __init__(self, client: AtlassianClient, version: str | None = None) -> None:
        self._client = client
        self.api_version = version

    def _get(self, path: str, params: dict[str, Any] | None = None, model: Any = None) -> Any:
        return self._client.call("GET", path, params=params, model=model)

    def _post(
        self,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
        model: Any = None,
    ) -> Any:
        return self._client.call("POST", path, json=json, params=params, model=model)

    def _put(
        self,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
        model: Any = None,
    ) -> Any:
        return self._client.call("PUT", path, json=json, params=params, model=model)

    def _delete(self, path: str, params: dict[str, Any] | None = None, model: Any = None) -> Any:
        return self._client.call("DELETE", path, params=params, model=model)

    def _require(self, value: Any, message: str, field: str | None = None) -> None:
        """Raise ValidationError when a required argument is empty."""
        if not value:
            raise ValidationError(message, field=field, provider=self._client.provider_name)

    def _payload(self, payload: Any, message: str = "no payload set") -> Any:
        """Serialize a model payload, or pass a plain dict/list through."""
        if payload is None:
            raise ValidationError(message, field="payload", provider=self._client.provider_name)
        if isinstance(payload, BaseModel):
            to_payload = getattr(payload, "to_payload", None)
            if to_payload is not None:
                return to_payload()
            return payload.model_dump(by_alias=True, exclude_none=True, mode="json")
        return payload
