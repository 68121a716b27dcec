"""Base data models shared by the Jira and Confluence services.

Atlassian resources use camelCase JSON keys; models expose snake_case
attributes and serialize back to the wire names. Unknown keys are kept so
custom fields and undocumented attributes survive a round trip.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AtlassianModel(BaseModel):
    """Base class for all Atlassian resources."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dict using wire names, dropping unset values."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class User(AtlassianModel):
    """An Atlassian account as embedded in Jira and Confluence resources."""

    self_: str | None = Field(default=None, alias="self", description="REST URL of the user")
    account_id: str | None = Field(default=None, description="Atlassian account id")
    account_type: str | None = None
    email_address: str | None = None
    display_name: str | None = None
    active: bool | None = None
    time_zone: str | None = None
    avatar_urls: dict[str, str] | None = None


class Expandable(AtlassianModel):
    """A paginated Jira collection embedded in a resource (e.g., ``groups``)."""

    size: int | None = None
    items: list[dict[str, Any]] = Field(default_factory=list)
