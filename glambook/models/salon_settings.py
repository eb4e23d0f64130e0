"""
Salon settings, stored as one object per tenant
"""

from datetime import datetime
from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from glambook.models.record import utc_now


def check_timezone(value: str) -> str:
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"Unknown timezone: {value}")
    return value


class SalonSettings(BaseModel):
    """Per-salon configuration shown on the dashboard"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    salon_name: str = Field(default="", max_length=255)
    owner: str = Field(default="", max_length=255)
    created_at: Optional[datetime] = Field(default_factory=utc_now)
    subscription_tier: str = "basic"
    features: List[str] = Field(default_factory=list)
    timezone: str = "UTC"

    @field_validator("timezone")
    @classmethod
    def known_timezone(cls, value: str) -> str:
        return check_timezone(value)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
