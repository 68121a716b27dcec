"""Custom fields: building issue payloads and reading values back.

Jira custom fields are addressed by id (``customfield_10042``) and their JSON
shape depends on the field type. :class:`CustomFields` collects typed values
as ``{"fields": {<id>: <value>}}`` fragments and :class:`UpdateOperations`
collects ``{"update": {<id>: [{<op>: <value>}]}}`` fragments. Both are merged
into the serialized issue payload right before a request is sent:

    fields = CustomFields().select("customfield_10010", "High").number("customfield_10020", 3)
    payload = build_issue_payload(Issue(fields=IssueFields(summary="Bug")), custom_fields=fields)

Merging follows "source overrides target" semantics: nested objects are
merged key by key, any other value replaces the one already in the payload.

The ``parse_custom_field``/``parse_custom_fields`` helpers do the reverse,
reading a typed value from one issue or a map of values from a search page.
"""

import copy
import json
from collections.abc import Iterable, Iterator
from datetime import date, datetime, timezone
from typing import Any

from pydantic import BaseModel, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from atlassian_cloud.core.exceptions import ValidationError
from atlassian_cloud.core.models import AtlassianModel, User

PROVIDER = "jira"


def _invalid(message: str, field: str | None = None) -> ValidationError:
    return ValidationError(message, field=field, provider=PROVIDER)


def _require_id(field_id: str) -> None:
    if not field_id:
        raise _invalid("no custom-field id set", field="field_id")


class CustomFields:
    """Builder of custom-field values to merge into an issue payload.

    Every method validates its arguments, appends one fragment and returns the
    builder so calls can be chained.
    """

    def __init__(self) -> None:
        self.fields: list[dict[str, Any]] = []

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[dict[str, Any]]:
        return iter(self.fields)

    def _add(self, field_id: str, value: Any) -> "CustomFields":
        self.fields.append({"fields": {field_id: value}})
        return self

    def groups(self, field_id: str, groups: list[str]) -> "CustomFields":
        """Multi group picker."""
        _require_id(field_id)
        if not groups:
            raise _invalid("no groups names set", field="groups")
        return self._add(field_id, [{"name": name} for name in groups])

    def group(self, field_id: str, group: str) -> "CustomFields":
        """Single group picker."""
        _require_id(field_id)
        if not group:
            raise _invalid("no group name set", field="group")
        return self._add(field_id, {"name": group})

    def url(self, field_id: str, url: str) -> "CustomFields":
        _require_id(field_id)
        if not url:
            raise _invalid("no url type set", field="url")
        return self._add(field_id, url)

    def text(self, field_id: str, text: str) -> "CustomFields":
        """Single- or multi-line text field."""
        _require_id(field_id)
        if not text:
            raise _invalid("no text type set", field="text")
        return self._add(field_id, text)

    def date_time(self, field_id: str, value: datetime) -> "CustomFields":
        """Date-time picker, sent as RFC 3339. Naive values are taken as UTC."""
        _require_id(field_id)
        if value is None:
            raise _invalid("no datetime type set", field="value")
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return self._add(field_id, value.isoformat(timespec="seconds"))

    def date(self, field_id: str, value: date) -> "CustomFields":
        """Date picker, sent as YYYY-MM-DD."""
        _require_id(field_id)
        if value is None:
            raise _invalid("no datepicker type set", field="value")
        return self._add(field_id, value.strftime("%Y-%m-%d"))

    def multi_select(self, field_id: str, options: list[str]) -> "CustomFields":
        _require_id(field_id)
        if not options:
            raise _invalid("no multiselect type found", field="options")
        return self._add(field_id, [{"value": option} for option in options])

    def select(self, field_id: str, option: str) -> "CustomFields":
        _require_id(field_id)
        if not option:
            raise _invalid("no select type set", field="option")
        return self._add(field_id, {"value": option})

    def radio_button(self, field_id: str, button: str) -> "CustomFields":
        _require_id(field_id)
        if not button:
            raise _invalid("no button type set", field="button")
        return self._add(field_id, {"value": button})

    def user(self, field_id: str, account_id: str) -> "CustomFields":
        """Single user picker, by Atlassian account id."""
        _require_id(field_id)
        if not account_id:
            raise _invalid("no user type set", field="account_id")
        return self._add(field_id, {"accountId": account_id})

    def users(self, field_id: str, account_ids: list[str]) -> "CustomFields":
        _require_id(field_id)
        if not account_ids:
            raise _invalid("no multi-user type set", field="account_ids")
        return self._add(field_id, [{"accountId": account_id} for account_id in account_ids])

    def number(self, field_id: str, value: float) -> "CustomFields":
        _require_id(field_id)
        if value is None or isinstance(value, bool):
            raise _invalid("no float type set", field="value")
        return self._add(field_id, value)

    def check_box(self, field_id: str, options: list[str]) -> "CustomFields":
        _require_id(field_id)
        if not options:
            raise _invalid("no check-box type set", field="options")
        return self._add(field_id, [{"value": option} for option in options])

    def cascading(self, field_id: str, parent: str, child: str) -> "CustomFields":
        """Cascading select: a parent option and one of its children."""
        _require_id(field_id)
        if not parent:
            raise _invalid("no cascading parent value set", field="parent")
        if not child:
            raise _invalid("no cascading child value set", field="child")
        return self._add(field_id, {"value": parent, "child": {"value": child}})

    def raw(self, field_id: str, value: Any) -> "CustomFields":
        """Any JSON value, for field types without a dedicated method."""
        _require_id(field_id)
        if value is None:
            raise _invalid("no value set", field="value")
        return self._add(field_id, value)


class UpdateOperations:
    """Builder of ``update`` verbs (add, set, remove, edit) for issue edits."""

    def __init__(self) -> None:
        self.fields: list[dict[str, Any]] = []

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[dict[str, Any]]:
        return iter(self.fields)

    def _add(self, field_id: str, operations: list[dict[str, Any]]) -> "UpdateOperations":
        self.fields.append({"update": {field_id: operations}})
        return self

    def add_array_operation(self, field_id: str, mapping: dict[str, str]) -> "UpdateOperations":
        """Add one operation per value, e.g. ``{"label-a": "add", "label-b": "remove"}``.

        Args:
            field_id: Field to update (system fields such as ``labels`` work too)
            mapping: Value to operation name
        """
        _require_id(field_id)
        if not mapping:
            raise _invalid("no update operation set", field="mapping")
        return self._add(field_id, [{operation: value} for value, operation in mapping.items()])

    def add_string_operation(self, field_id: str, operation: str, value: str) -> "UpdateOperations":
        _require_id(field_id)
        if not operation:
            raise _invalid("no update operation set", field="operation")
        if not value:
            raise _invalid("no update operation value set", field="value")
        return self._add(field_id, [{operation: value}])

    def add_multi_raw_operation(self, field_id: str, operations: list[dict[str, Any]]) -> "UpdateOperations":
        """Add pre-built operation objects, e.g. ``[{"add": {"id": "10001"}}]``."""
        _require_id(field_id)
        if not operations:
            raise _invalid("no update operation set", field="operations")
        return self._add(field_id, list(operations))


# =============================================================================
# Merging
# =============================================================================


def deep_merge(target: dict[str, Any], source: dict[str, Any]) -> dict[str, Any]:
    """Merge ``source`` into ``target`` in place and return ``target``.

    Dicts present on both sides are merged recursively; every other value in
    ``source`` overrides the one in ``target``.
    """
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            deep_merge(target[key], value)
        else:
            target[key] = copy.deepcopy(value)
    return target


def to_dict(payload: Any) -> dict[str, Any]:
    """Serialize a payload model to a fresh dict; dicts are deep-copied."""
    if payload is None:
        return {}
    if isinstance(payload, AtlassianModel):
        return payload.to_payload()
    if isinstance(payload, BaseModel):
        return payload.model_dump(by_alias=True, exclude_none=True, mode="json")
    if isinstance(payload, dict):
        return copy.deepcopy(payload)
    raise _invalid(f"unsupported payload type: {type(payload).__name__}", field="payload")


def _merge_all(payload: Any, fragments: Iterable[dict[str, Any]]) -> dict[str, Any]:
    result = to_dict(payload)
    for fragment in fragments:
        deep_merge(result, fragment)
    return result


def merge_custom_fields(payload: Any, custom_fields: CustomFields | None) -> dict[str, Any]:
    """Serialize ``payload`` and merge every custom-field fragment into it.

    Raises:
        ValidationError: If no custom field was added to the builder
    """
    if not custom_fields:
        raise _invalid("no custom-field set", field="custom_fields")
    return _merge_all(payload, custom_fields)


def merge_operations(payload: Any, operations: UpdateOperations | None) -> dict[str, Any]:
    """Serialize ``payload`` and merge every update operation into it.

    Raises:
        ValidationError: If no operation was added to the builder
    """
    if not operations:
        raise _invalid("no update operation set", field="operations")
    return _merge_all(payload, operations)


def build_issue_payload(
    payload: Any,
    custom_fields: CustomFields | None = None,
    operations: UpdateOperations | None = None,
) -> dict[str, Any]:
    """Serialize an issue payload and apply whichever builders are given.

    Unlike :func:`merge_custom_fields` and :func:`merge_operations`, missing or
    empty builders are simply skipped.
    """
    result = to_dict(payload)
    if custom_fields:
        result = _merge_all(result, custom_fields)
    if operations:
        result = _merge_all(result, operations)
    return result


# =============================================================================
# Parsing
# =============================================================================


class CustomFieldOption(AtlassianModel):
    """Option of a select, multi-select, radio or check-box field."""

    self_: str | None = Field(default=None, alias="self")
    id: str | None = None
    value: str | None = None
    disabled: bool | None = None


class CascadingSelection(CustomFieldOption):
    child: CustomFieldOption | None = None


class GroupDetail(AtlassianModel):
    self_: str | None = Field(default=None, alias="self")
    name: str | None = None
    group_id: str | None = None


class VersionDetail(AtlassianModel):
    self_: str | None = Field(default=None, alias="self")
    id: str | None = None
    name: str | None = None
    description: str | None = None
    archived: bool | None = None
    released: bool | None = None
    release_date: str | None = None


class Sprint(AtlassianModel):
    id: int | None = None
    name: str | None = None
    state: str | None = None
    board_id: int | None = None
    goal: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    complete_date: str | None = None


FIELD_KINDS: dict[str, Any] = {
    "string": str,
    "float": float,
    "labels": list[str],
    "select": CustomFieldOption,
    "multi_select": list[CustomFieldOption],
    "cascading": CascadingSelection,
    "user": User,
    "multi_user": list[User],
    "multi_group": list[GroupDetail],
    "multi_version": list[VersionDetail],
    "sprint": list[Sprint],
}


def _adapter_for(kind: str) -> TypeAdapter:
    try:
        return TypeAdapter(FIELD_KINDS[kind])
    except KeyError:
        raise _invalid(
            f"unknown custom-field kind {kind!r}, expected one of {', '.join(FIELD_KINDS)}",
            field="kind",
        ) from None


def _load(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True, mode="json")
    if isinstance(data, (str, bytes, bytearray)):
        try:
            return json.loads(data)
        except ValueError as e:
            raise _invalid("custom-field source is not valid JSON", field="data") from e
    return data


def parse_custom_field(issue: Any, field_id: str, kind: str = "string") -> Any:
    """Read one custom field from an issue.

    Args:
        issue: Issue as a dict, an ``Issue`` model or raw JSON
        field_id: Custom field id (e.g., 'customfield_10042')
        kind: One of :data:`FIELD_KINDS`

    Returns:
        The value, typed according to ``kind``

    Raises:
        ValidationError: If the issue has no ``fields`` object, or the value is
            missing, null or not of the requested kind
    """
    _require_id(field_id)
    adapter = _adapter_for(kind)
    data = _load(issue)

    fields = data.get("fields") if isinstance(data, dict) else None
    if not isinstance(fields, dict):
        raise _invalid("no fields object found", field="fields")

    value = fields.get(field_id)
    if value is None:
        raise _invalid(f"no {kind} type found in {field_id}", field=field_id)
    try:
        return adapter.validate_python(value)
    except PydanticValidationError as e:
        raise _invalid(f"no {kind} type found in {field_id}", field=field_id) from e


def parse_custom_fields(search_result: Any, field_id: str, kind: str = "string") -> dict[str, Any]:
    """Read one custom field from every issue of a search page.

    Issues without the field (or with a value of another kind) are skipped.

    Args:
        search_result: Search page as a dict, a ``SearchResult`` model or raw JSON
        field_id: Custom field id
        kind: One of :data:`FIELD_KINDS`

    Returns:
        Mapping of issue key to typed value

    Raises:
        ValidationError: If there is no ``issues`` array, or no issue has the field
    """
    _require_id(field_id)
    adapter = _adapter_for(kind)
    data = _load(search_result)

    issues = data.get("issues") if isinstance(data, dict) else None
    if not isinstance(issues, list):
        raise _invalid("no issues object set", field="issues")

    values: dict[str, Any] = {}
    for issue in issues:
        if not isinstance(issue, dict):
            continue
        value = (issue.get("fields") or {}).get(field_id)
        if value is None:
            continue
        try:
            values[issue.get("key")] = adapter.validate_python(value)
        except PydanticValidationError:
            continue

    if not values:
        raise _invalid("no map values set", field=field_id)
    return values
