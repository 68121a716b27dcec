"""Cross-platform credential management for Atlassian Cloud sites.

Each value is resolved in the following order:
1. Explicit parameters passed to the client
2. Environment variables (ATLASSIAN_BASE_URL, ATLASSIAN_USER_EMAIL,
   ATLASSIAN_API_TOKEN, ATLASSIAN_BEARER_TOKEN)
3. System keyring (via keyring library)
4. .env file in current directory or parent directories

A site can be reached with Basic auth (email + API token) or with an OAuth 2.0
bearer token. The base URL is always required.

Example:
    from atlassian_cloud.client.credentials import get_credentials

    creds = get_credentials()
    creds = get_credentials(service="my-team-site")
"""

import logging
import os
from pathlib import Path
from typing import NamedTuple
from urllib.parse import urlparse

import keyring

logger = logging.getLogger(__name__)

DEFAULT_SERVICE = "atlassian-cloud"

# Environment variable names
ENV_BASE_URL = "ATLASSIAN_BASE_URL"
ENV_USER_EMAIL = "ATLASSIAN_USER_EMAIL"
ENV_API_TOKEN = "ATLASSIAN_API_TOKEN"  # noqa: S105
ENV_BEARER_TOKEN = "ATLASSIAN_BEARER_TOKEN"  # noqa: S105

# Keyring account names
KEYRING_BASE_URL = "base_url"
KEYRING_EMAIL = "user_email"
KEYRING_TOKEN = "api_token"  # noqa: S105
KEYRING_BEARER = "bearer_token"  # noqa: S105

_LOOKUPS = (
    ("base_url", ENV_BASE_URL, KEYRING_BASE_URL),
    ("email", ENV_USER_EMAIL, KEYRING_EMAIL),
    ("api_token", ENV_API_TOKEN, KEYRING_TOKEN),
)


class AtlassianCredentials(NamedTuple):
    """Atlassian site URL plus either Basic or Bearer credentials."""

    base_url: str
    email: str | None = None
    api_token: str | None = None
    bearer_token: str | None = None

    @property
    def uses_basic_auth(self) -> bool:
        """Whether email + API token are available."""
        return bool(self.email and self.api_token)


def get_credentials(
    base_url: str | None = None,
    email: str | None = None,
    api_token: str | None = None,
    bearer_token: str | None = None,
    service: str = DEFAULT_SERVICE,
) -> AtlassianCredentials:
    """Get Atlassian credentials from various sources.

    The bearer token is only looked up when Basic credentials cannot be
    completed from any source.

    Args:
        base_url: Explicit site URL (e.g., https://company.atlassian.net)
        email: Explicit account email
        api_token: Explicit API token
        bearer_token: Explicit OAuth 2.0 access token
        service: Keyring service name

    Returns:
        AtlassianCredentials tuple

    Raises:
        ValueError: If credentials cannot be found or the URL is malformed
    """
    resolved: dict[str, str | None] = {"base_url": base_url, "email": email, "api_token": api_token}

    for name, env_name, _ in _LOOKUPS:
        if not resolved[name]:
            resolved[name] = os.environ.get(env_name)

    for name, _, account in _LOOKUPS:
        if not resolved[name]:
            resolved[name] = _get_from_keyring(service, account)

    env_vars: dict[str, str] | None = None
    if not all(resolved.values()):
        env_vars = _load_dotenv()
        for name, env_name, _ in _LOOKUPS:
            if not resolved[name]:
                resolved[name] = env_vars.get(env_name)

    resolved_bearer = bearer_token
    if not (resolved["email"] and resolved["api_token"]) and not resolved_bearer:
        resolved_bearer = os.environ.get(ENV_BEARER_TOKEN) or _get_from_keyring(service, KEYRING_BEARER)
        if not resolved_bearer:
            if env_vars is None:
                env_vars = _load_dotenv()
            resolved_bearer = env_vars.get(ENV_BEARER_TOKEN)

    missing = []
    if not resolved["base_url"]:
        missing.append("base_url")
    if not resolved_bearer:
        if not resolved["email"]:
            missing.append("email")
        if not resolved["api_token"]:
            missing.append("api_token")

    if missing:
        raise ValueError(
            f"Missing Atlassian credentials: {', '.join(missing)}. "
            f"Set environment variables ({ENV_BASE_URL}, {ENV_USER_EMAIL}, {ENV_API_TOKEN} "
            f"or {ENV_BEARER_TOKEN}), use the keyring, or provide credentials explicitly."
        )

    url = str(resolved["base_url"]).rstrip("/")
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(f"Invalid Atlassian base URL: {url!r}")

    return AtlassianCredentials(
        base_url=url,
        email=resolved["email"],
        api_token=resolved["api_token"],
        bearer_token=resolved_bearer,
    )


def save_credentials(
    base_url: str,
    email: str | None = None,
    api_token: str | None = None,
    bearer_token: str | None = None,
    service: str = DEFAULT_SERVICE,
) -> None:
    """Save credentials to the system keyring.

    Args:
        base_url: Atlassian site URL
        email: Account email
        api_token: API token
        bearer_token: OAuth 2.0 access token
        service: Keyring service name
    """
    keyring.set_password(service, KEYRING_BASE_URL, base_url)
    if email:
        keyring.set_password(service, KEYRING_EMAIL, email)
    if api_token:
        keyring.set_password(service, KEYRING_TOKEN, api_token)
    if bearer_token:
        keyring.set_password(service, KEYRING_BEARER, bearer_token)
    logger.info("Credentials saved to keyring (service: %s)", service)


def delete_credentials(service: str = DEFAULT_SERVICE) -> None:
    """Delete credentials from the system keyring.

    Args:
        service: Keyring service name
    """
    for account in [KEYRING_BASE_URL, KEYRING_EMAIL, KEYRING_TOKEN, KEYRING_BEARER]:
        try:
            keyring.delete_password(service, account)
        except keyring.errors.PasswordDeleteError:
            logger.debug("No keyring entry %s/%s to delete", service, account)
    logger.info("Credentials deleted from keyring (service: %s)", service)


def _get_from_keyring(service: str, account: str) -> str | None:
    try:
        return keyring.get_password(service, account)
    except keyring.errors.KeyringError as e:
        logger.debug("Keyring error for %s/%s: %s", service, account, e)
        return None


def _load_dotenv() -> dict[str, str]:
    """Load variables from the first .env file in the current directory or its parents."""
    env_vars: dict[str, str] = {}

    current = Path.cwd()
    for directory in [current, *current.parents]:
        env_file = directory / ".env"
        if not env_file.exists():
            continue
        logger.debug("Loading .env from %s", env_file)
        try:
            with open(env_file, encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if not line or line.startswith("#") or "=" not in line:
                        continue
                    key, _, value = line.partition("=")
                    key = key.strip().removeprefix("export ").strip()
                    value = value.strip()
                    if value and value[0] in ('"', "'") and value[-1] == value[0]:
                        value = value[1:-1]
                    env_vars[key] = value
        except OSError as e:
            logger.debug("Error reading .env file: %s", e)
        break

    return env_vars
