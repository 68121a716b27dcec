"""HTTP helper and credential management shared by all services."""

from atlassian_cloud.client.base import AtlassianClient, Service, encode_params, join
from atlassian_cloud.client.credentials import (
    AtlassianCredentials,
    delete_credentials,
    get_credentials,
    save_credentials,
)

__all__ = [
    "AtlassianClient",
    "Service",
    "encode_params",
    "join",
    "AtlassianCredentials",
    "get_credentials",
    "save_credentials",
    "delete_credentials",
]
