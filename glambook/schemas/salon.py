"""
Request schemas for salon records

Request bodies are camelCase, unknown fields are rejected.
"""

import datetime as dt
import re
from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from glambook.models.appointment import AppointmentStatus
from glambook.models.campaign import CampaignChannel
from glambook.models.client import LoyaltyTier
from glambook.models.record import Money
from glambook.models.salon_settings import check_timezone
from glambook.models.staff import StaffAvailability

_DURATION_RE = re.compile(r"^\s*(?:(\d+)\s*h)?\s*(?:(\d+)\s*m(?:in)?)?\s*$", re.IGNORECASE)
_TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


def parse_duration(value):
    """Minutes from 90, "90", "45m", "2h" or "1h 30m" """
    if value is None or isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return int(text)
        match = _DURATION_RE.match(text)
        if text and match and (match.group(1) or match.group(2)):
            return int(match.group(1) or 0) * 60 + int(match.group(2) or 0)
    raise ValueError(f"Invalid duration: {value!r}")


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class RequestModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        str_strip_whitespace=True,
    )


# ============================================================================
# Appointment Schemas
# ============================================================================

class AppointmentCreate(RequestModel):
    client_name: str = Field(min_length=1, max_length=255)
    client_email: Optional[str] = Field(default=None, max_length=255)
    client_phone: Optional[str] = Field(default=None, max_length=50)
    service: str = Field(min_length=1, max_length=255)
    stylist_name: str = Field(
        min_length=1,
        max_length=255,
        validation_alias=AliasChoices("stylistName", "stylist", "stylist_name"),
        serialization_alias="stylistName",
    )
    date: dt.date
    time: str = Field(pattern=_TIME_PATTERN)
    duration_minutes: int = Field(
        default=60,
        gt=0,
        validation_alias=AliasChoices("durationMinutes", "duration", "duration_minutes"),
        serialization_alias="durationMinutes",
    )
    price: Money = Decimal("0")
    notes: Optional[str] = Field(default=None, max_length=2000)

    @field_validator("duration_minutes", mode="before")
    @classmethod
    def parse_duration_field(cls, value):
        return parse_duration(value)

    @field_validator("client_email", "client_phone", "notes", mode="before")
    @classmethod
    def blank_optional_text(cls, value):
        return _blank_to_none(value)


class AppointmentUpdate(RequestModel):
    client_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    client_email: Optional[str] = Field(default=None, max_length=255)
    client_phone: Optional[str] = Field(default=None, max_length=50)
    service: Optional[str] = Field(default=None, min_length=1, max_length=255)
    stylist_name: Optional[str] = Field(
        default=None,
        min_length=1,
        max_length=255,
        validation_alias=AliasChoices("stylistName", "stylist", "stylist_name"),
        serialization_alias="stylistName",
    )
    date: Optional[dt.date] = None
    time: Optional[str] = Field(default=None, pattern=_TIME_PATTERN)
    duration_minutes: Optional[int] = Field(
        default=None,
        gt=0,
        validation_alias=AliasChoices("durationMinutes", "duration", "duration_minutes"),
        serialization_alias="durationMinutes",
    )
    price: Optional[Money] = None
    notes: Optional[str] = Field(default=None, max_length=2000)
    status: Optional[AppointmentStatus] = None

    @field_validator("duration_minutes", mode="before")
    @classmethod
    def parse_duration_field(cls, value):
        return parse_duration(value)

    @field_validator("client_email", "client_phone", "notes", mode="before")
    @classmethod
    def blank_optional_text(cls, value):
        return _blank_to_none(value)


# ============================================================================
# Staff Schemas
# ============================================================================

class StaffMemberCreate(RequestModel):
    name: str = Field(min_length=1, max_length=255)
    specialization: str = Field(default="", max_length=255)
    rating: float = Field(default=0.0, ge=0.0, le=5.0)
    availability: StaffAvailability = StaffAvailability.AVAILABLE
    next_appointment_label: str = Field(
        default="",
        max_length=100,
        validation_alias=AliasChoices("nextAppointmentLabel", "nextAppointment", "next_appointment_label"),
        serialization_alias="nextAppointmentLabel",
    )
    avatar_ref: Optional[str] = Field(
        default=None,
        max_length=2048,
        validation_alias=AliasChoices("avatarRef", "avatar", "avatar_ref"),
        serialization_alias="avatarRef",
    )


class StaffMemberUpdate(RequestModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    specialization: Optional[str] = Field(default=None, max_length=255)
    rating: Optional[float] = Field(default=None, ge=0.0, le=5.0)
    availability: Optional[StaffAvailability] = None
    next_appointment_label: Optional[str] = Field(
        default=None,
        max_length=100,
        validation_alias=AliasChoices("nextAppointmentLabel", "nextAppointment", "next_appointment_label"),
        serialization_alias="nextAppointmentLabel",
    )
    avatar_ref: Optional[str] = Field(
        default=None,
        max_length=2048,
        validation_alias=AliasChoices("avatarRef", "avatar", "avatar_ref"),
        serialization_alias="avatarRef",
    )


# ============================================================================
# Client Schemas
# ============================================================================

class ClientCreate(RequestModel):
    name: str = Field(min_length=1, max_length=255)
    last_visit: Optional[dt.date] = None
    avatar_ref: Optional[str] = Field(
        default=None,
        max_length=2048,
        validation_alias=AliasChoices("avatarRef", "avatar", "avatar_ref"),
        serialization_alias="avatarRef",
    )


class ClientUpdate(RequestModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    loyalty_tier: Optional[LoyaltyTier] = None
    visits: Optional[int] = Field(default=None, ge=0)
    total_spent: Optional[Money] = None
    last_visit: Optional[dt.date] = None
    avatar_ref: Optional[str] = Field(
        default=None,
        max_length=2048,
        validation_alias=AliasChoices("avatarRef", "avatar", "avatar_ref"),
        serialization_alias="avatarRef",
    )


# ============================================================================
# Campaign Schemas
# ============================================================================

class CampaignCreate(RequestModel):
    channel: CampaignChannel
    segment: str = Field(min_length=1, max_length=255)
    message: str = Field(min_length=1, max_length=2000)


# ============================================================================
# Settings Schemas
# ============================================================================

class SettingsUpdate(RequestModel):
    salon_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    timezone: Optional[str] = None

    @field_validator("timezone")
    @classmethod
    def known_timezone(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return check_timezone(value)
