"""
Dashboard and analytics aggregation

Pure functions of the tenant's collections and the current instant. "Today"
and "this month" are taken in the salon's timezone.
"""

from collections import Counter
from datetime import date, datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Sequence
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from glambook.models.appointment import Appointment
from glambook.models.client import Client
from glambook.models.record import Money
from glambook.models.staff import StaffAvailability, StaffMember

RECENT_APPOINTMENTS_LIMIT = 10
TOP_STAFF_LIMIT = 6
TOP_CLIENTS_LIMIT = 8
POPULAR_SERVICES_LIMIT = 5
ACTIVE_CLIENT_WINDOW_DAYS = 30


class _Summary(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class DashboardSummary(_Summary):
    today_revenue: Money
    today_appointment_count: int
    active_client_count: int
    staff_utilization_percent: int
    recent_appointments: List[Appointment] = Field(default_factory=list)
    top_staff: List[StaffMember] = Field(default_factory=list)
    top_clients: List[Client] = Field(default_factory=list)


class ServicePopularity(_Summary):
    service: str
    count: int


class AnalyticsSummary(_Summary):
    monthly_revenue: Money
    retention_rate: int
    popular_services: List[ServicePopularity] = Field(default_factory=list)
    total_appointments: int
    total_clients: int
    total_staff: int


def local_today(now: datetime, timezone: str = "UTC") -> date:
    """Calendar date of ``now`` in the given timezone; naive values are taken as UTC"""
    if now.tzinfo is None:
        now = now.replace(tzinfo=ZoneInfo("UTC"))
    return now.astimezone(ZoneInfo(timezone)).date()


def percent(part: int, whole: int) -> int:
    """Whole percentage rounded half up, 0 for an empty whole"""
    if whole <= 0:
        return 0
    value = Decimal(100 * part) / Decimal(whole)
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def total_price(appointments: Sequence[Appointment]) -> Decimal:
    return sum((appointment.price for appointment in appointments), Decimal("0"))


def build_dashboard(
    appointments: Sequence[Appointment],
    staff: Sequence[StaffMember],
    clients: Sequence[Client],
    now: datetime,
    timezone: str = "UTC",
    active_window_days: int = ACTIVE_CLIENT_WINDOW_DAYS,
) -> DashboardSummary:
    today = local_today(now, timezone)
    today_appointments = [appointment for appointment in appointments if appointment.date == today]

    active_since = today - timedelta(days=active_window_days)
    active_clients = [
        client for client in clients
        if client.last_visit is not None and client.last_visit > active_since
    ]
    busy_staff = [member for member in staff if member.availability == StaffAvailability.BUSY]

    return DashboardSummary(
        today_revenue=total_price(today_appointments),
        today_appointment_count=len(today_appointments),
        active_client_count=len(active_clients),
        staff_utilization_percent=percent(len(busy_staff), len(staff)),
        recent_appointments=today_appointments[:RECENT_APPOINTMENTS_LIMIT],
        top_staff=list(staff[:TOP_STAFF_LIMIT]),
        top_clients=list(clients[:TOP_CLIENTS_LIMIT]),
    )


def build_analytics(
    appointments: Sequence[Appointment],
    staff: Sequence[StaffMember],
    clients: Sequence[Client],
    now: datetime,
    timezone: str = "UTC",
) -> AnalyticsSummary:
    today = local_today(now, timezone)
    this_month = [
        appointment for appointment in appointments
        if appointment.date.year == today.year and appointment.date.month == today.month
    ]

    returning_clients = [client for client in clients if client.visits > 1]

    # most_common keeps first-seen order among equal counts
    service_counts = Counter(appointment.service for appointment in appointments)
    popular = [
        ServicePopularity(service=service, count=count)
        for service, count in service_counts.most_common(POPULAR_SERVICES_LIMIT)
    ]

    return AnalyticsSummary(
        monthly_revenue=total_price(this_month),
        retention_rate=percent(len(returning_clients), len(clients)),
        popular_services=popular,
        total_appointments=len(appointments),
        total_clients=len(clients),
        total_staff=len(staff),
    )
