"""Core exceptions and base models for atlassian-cloud."""

from atlassian_cloud.core.exceptions import (
    AtlassianConnectionError,
    AtlassianError,
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

__all__ = [
    "AtlassianModel",
    "User",
    "AtlassianError",
    "AtlassianConnectionError",
    "AuthenticationError",
    "BadRequestError",
    "DecodeError",
    "ForbiddenError",
    "InternalServerError",
    "NotFoundError",
    "RateLimitError",
    "RequestFailedError",
    "ValidationError",
]
