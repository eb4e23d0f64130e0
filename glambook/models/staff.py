"""
Staff member record
"""

from enum import Enum

from pydantic import Field

from glambook.models.record import Record


class StaffAvailability(str, Enum):
    AVAILABLE = "available"
    BUSY = "busy"
    BREAK = "break"


class StaffMember(Record):
    """A stylist or other bookable team member"""

    name: str = Field(min_length=1, max_length=255)
    specialization: str = Field(default="", max_length=255)
    rating: float = Field(default=0.0, ge=0.0, le=5.0)
    availability: StaffAvailability = StaffAvailability.AVAILABLE
    next_appointment_label: str = Field(default="", max_length=100)
    avatar_ref: str = Field(default="", max_length=2048)
