"""
Appointment record
"""

import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import Field

from glambook.models.record import Money, Record


class AppointmentStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"


class Appointment(Record):
    """A booked salon visit"""

    client_name: str = Field(min_length=1, max_length=255)
    client_email: Optional[str] = None
    client_phone: Optional[str] = None
    service: str = Field(min_length=1, max_length=255)
    stylist_name: str = Field(min_length=1, max_length=255)
    date: dt.date
    time: str = Field(pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    duration_minutes: int = Field(default=60, gt=0)
    price: Money = Decimal("0")
    notes: Optional[str] = None
    status: AppointmentStatus = AppointmentStatus.CONFIRMED
