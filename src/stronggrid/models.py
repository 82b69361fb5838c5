"""Typed SendGrid resource models.

Absent or null JSON fields map to None (or an empty list) rather than failing
validation. Unix timestamps are parsed into timezone-aware UTC datetimes.

Usage example:
    from stronggrid.models import Contact, CustomField

    contact = Contact(
        email="jones@example.com",
        last_name="Jones",
        custom_fields=[CustomField(name="age", type="number", value=43)],
    )
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

CustomFieldType = Literal["text", "number", "date"]

_MODEL_CONFIG = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


def to_unix_seconds(value: datetime) -> int:
    """Return the unix timestamp SendGrid expects for `value` (naive values are UTC)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return int(value.timestamp())


class CustomField(BaseModel):
    """A contact custom field; `value` is coerced according to `type`."""

    model_config = _MODEL_CONFIG

    id: int | None = None
    name: str
    type: CustomFieldType = "text"
    value: str | int | float | datetime | None = None

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, value: object, info: ValidationInfo) -> object:
        if value is None or value == "":
            return None
        field_type = info.data.get("type", "text")
        if field_type == "number":
            if isinstance(value, bool):
                raise ValueError("number custom fields do not accept booleans")
            if isinstance(value, int | float):
                return value
            text = str(value).strip()
            try:
                return int(text)
            except ValueError:
                return float(text)
        if field_type == "date":
            if isinstance(value, datetime):
                return value
            return datetime.fromtimestamp(int(str(value).strip()), tz=UTC)
        return str(value)

    def payload_value(self) -> str | int | float | None:
        if isinstance(self.value, datetime):
            return to_unix_seconds(self.value)
        return self.value


class Contact(BaseModel):
    """A Marketing Campaigns recipient."""

    model_config = _MODEL_CONFIG

    id: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    last_clicked: datetime | None = None
    last_emailed: datetime | None = None
    last_opened: datetime | None = None
    custom_fields: list[CustomField] = Field(default_factory=list)

    @field_validator("custom_fields", mode="before")
    @classmethod
    def _null_custom_fields(cls, value: object) -> object:
        return [] if value is None else value


class ImportErrorDetail(BaseModel):
    model_config = _MODEL_CONFIG

    message: str = ""
    error_indices: list[int] = Field(default_factory=list)


class ImportResult(BaseModel):
    """Outcome of a bulk contact write."""

    model_config = _MODEL_CONFIG

    error_count: int = 0
    error_indices: list[int] = Field(default_factory=list)
    unmodified_indices: list[int] = Field(default_factory=list)
    new_count: int = 0
    updated_count: int = 0
    persisted_recipients: list[str] = Field(default_factory=list)
    errors: list[ImportErrorDetail] = Field(default_factory=list)


class ConditionOperator(StrEnum):
    EQUAL = "eq"
    NOT_EQUAL = "ne"
    LESS_THAN = "lt"
    GREATER_THAN = "gt"
    CONTAINS = "contains"


class LogicalOperator(StrEnum):
    NONE = ""
    AND = "and"
    OR = "or"


class SearchCondition(BaseModel):
    """A single contact search or segment condition."""

    model_config = _MODEL_CONFIG

    field: str
    value: str
    operator: ConditionOperator
    logical_operator: LogicalOperator = Field(default=LogicalOperator.NONE, alias="and_or")

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True)


class ContactList(BaseModel):
    model_config = _MODEL_CONFIG

    id: int
    name: str = ""
    recipient_count: int = 0


class Segment(BaseModel):
    model_config = _MODEL_CONFIG

    id: int
    name: str = ""
    list_id: int | None = None
    conditions: list[SearchCondition] = Field(default_factory=list)
    recipient_count: int | None = None


class TemplateVersion(BaseModel):
    model_config = _MODEL_CONFIG

    id: str
    template_id: str | None = None
    active: bool = False
    name: str = ""
    subject: str | None = None
    html_content: str | None = None
    plain_content: str | None = None
    updated_at: str | None = None


class Template(BaseModel):
    model_config = _MODEL_CONFIG

    id: str
    name: str = ""
    versions: list[TemplateVersion] = Field(default_factory=list)


class UserProfile(BaseModel):
    model_config = _MODEL_CONFIG

    address: str | None = None
    city: str | None = None
    company: str | None = None
    country: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    state: str | None = None
    website: str | None = None
    zip: str | None = None


class Account(BaseModel):
    model_config = _MODEL_CONFIG

    type: str = ""
    reputation: float = 0.0


class UserCredits(BaseModel):
    model_config = _MODEL_CONFIG

    remain: int = 0
    total: int = 0
    overage: int = 0
    used: int = 0
    last_reset: date | None = None
    next_reset: date | None = None
    reset_frequency: str | None = None


class MailAddress(BaseModel):
    model_config = _MODEL_CONFIG

    email: str
    name: str | None = None

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(exclude_none=True)


class SenderIdentity(BaseModel):
    """A verified sender used by Marketing Campaigns."""

    model_config = _MODEL_CONFIG

    id: int
    nickname: str = ""
    from_address: MailAddress | None = Field(default=None, alias="from")
    reply_to: MailAddress | None = None
    address: str | None = None
    address_2: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None
    verified: bool | None = None
    locked: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class InvalidEmail(BaseModel):
    model_config = _MODEL_CONFIG

    created: datetime | None = None
    email: str
    reason: str | None = None


class ApiKey(BaseModel):
    model_config = _MODEL_CONFIG

    api_key: str | None = None
    api_key_id: str
    name: str = ""
    scopes: list[str] = Field(default_factory=list)
