"""
Salon record operations for one tenant

Every mutation reads the whole collection, changes it and writes it back.
Concurrent writers to the same collection can overwrite each other.
"""

from datetime import datetime
from typing import Callable, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError
import structlog

from glambook.core.config import get_settings
from glambook.core.exceptions import NotFoundError, UnexpectedError, ValidationError, describe_errors
from glambook.models.appointment import Appointment, AppointmentStatus
from glambook.models.campaign import Campaign, CampaignStatus
from glambook.models.client import Client, LoyaltyTier
from glambook.models.record import Record, initials, new_record_id, utc_now
from glambook.models.salon_settings import SalonSettings
from glambook.models.staff import StaffMember
from glambook.schemas.salon import (
    AppointmentCreate,
    AppointmentUpdate,
    CampaignCreate,
    ClientCreate,
    ClientUpdate,
    SettingsUpdate,
    StaffMemberCreate,
    StaffMemberUpdate,
)
from glambook.services import aggregator
from glambook.services.tenant_store import (
    APPOINTMENTS,
    CAMPAIGNS,
    CLIENTS,
    SETTINGS,
    STAFF,
    TenantStore,
)

logger = structlog.get_logger(__name__)
settings = get_settings()

RecordT = TypeVar("RecordT", bound=Record)


class SalonService:
    """Create, update and read a tenant's collections"""

    def __init__(
        self,
        store: TenantStore,
        tenant_id: str,
        clock: Callable[[], datetime] = utc_now,
        default_timezone: Optional[str] = None,
    ):
        self.store = store
        self.tenant_id = tenant_id
        self.clock = clock
        self.default_timezone = default_timezone or settings.DEFAULT_TIMEZONE

    # Appointments

    def list_appointments(self) -> List[Appointment]:
        return self._load(APPOINTMENTS, Appointment)

    def create_appointment(self, data: AppointmentCreate) -> Appointment:
        appointments = self.list_appointments()
        appointment = self._build(
            Appointment,
            data,
            prefix="apt",
            existing=appointments,
            status=AppointmentStatus.CONFIRMED,
        )
        appointments.append(appointment)
        self._save(APPOINTMENTS, appointments)
        logger.info("Appointment created", tenant_id=self.tenant_id, appointment_id=appointment.id)
        return appointment

    def update_appointment(self, appointment_id: str, data: AppointmentUpdate) -> Appointment:
        appointment = self._update(APPOINTMENTS, Appointment, appointment_id, data, "Appointment")
        logger.info("Appointment updated", tenant_id=self.tenant_id, appointment_id=appointment_id)
        return appointment

    # Staff

    def list_staff(self) -> List[StaffMember]:
        return self._load(STAFF, StaffMember)

    def add_staff_member(self, data: StaffMemberCreate) -> StaffMember:
        staff = self.list_staff()
        member = self._build(
            StaffMember,
            data,
            prefix="staff",
            existing=staff,
            avatar_ref=data.avatar_ref or initials(data.name),
        )
        staff.append(member)
        self._save(STAFF, staff)
        logger.info("Staff member added", tenant_id=self.tenant_id, staff_id=member.id)
        return member

    def update_staff_member(self, staff_id: str, data: StaffMemberUpdate) -> StaffMember:
        return self._update(STAFF, StaffMember, staff_id, data, "Staff member")

    # Clients

    def list_clients(self) -> List[Client]:
        return self._load(CLIENTS, Client)

    def add_client(self, data: ClientCreate) -> Client:
        clients = self.list_clients()
        client = self._build(
            Client,
            data,
            prefix="client",
            existing=clients,
            loyalty_tier=LoyaltyTier.BRONZE,
            visits=0,
            total_spent=0,
            avatar_ref=data.avatar_ref or initials(data.name),
        )
        clients.append(client)
        self._save(CLIENTS, clients)
        logger.info("Client added", tenant_id=self.tenant_id, client_id=client.id)
        return client

    def update_client(self, client_id: str, data: ClientUpdate) -> Client:
        return self._update(CLIENTS, Client, client_id, data, "Client")

    # Campaigns

    def list_campaigns(self) -> List[Campaign]:
        return self._load(CAMPAIGNS, Campaign)

    def create_campaign(self, data: CampaignCreate) -> Campaign:
        campaigns = self.list_campaigns()
        campaign = self._build(
            Campaign,
            data,
            prefix="campaign",
            existing=campaigns,
            status=CampaignStatus.DRAFT,
        )
        campaigns.append(campaign)
        self._save(CAMPAIGNS, campaigns)
        logger.info("Campaign created", tenant_id=self.tenant_id, campaign_id=campaign.id)
        return campaign

    # Settings

    def get_settings(self) -> SalonSettings:
        raw = self.store.get(self.tenant_id, SETTINGS)
        try:
            return SalonSettings.model_validate({"timezone": self.default_timezone, **raw})
        except PydanticValidationError:
            logger.error("Stored settings are malformed", tenant_id=self.tenant_id)
            raise UnexpectedError("Stored settings are malformed")

    def update_settings(self, data: SettingsUpdate) -> SalonSettings:
        current = self.get_settings()
        updated = current.model_copy(update=data.model_dump(exclude_unset=True, exclude_none=True))
        self.store.set(self.tenant_id, SETTINGS, updated.to_json())
        logger.info("Settings updated", tenant_id=self.tenant_id)
        return updated

    # Derived views

    def dashboard(self) -> aggregator.DashboardSummary:
        return aggregator.build_dashboard(
            self.list_appointments(),
            self.list_staff(),
            self.list_clients(),
            now=self.clock(),
            timezone=self.get_settings().timezone,
            active_window_days=settings.ACTIVE_CLIENT_WINDOW_DAYS,
        )

    def analytics(self) -> aggregator.AnalyticsSummary:
        return aggregator.build_analytics(
            self.list_appointments(),
            self.list_staff(),
            self.list_clients(),
            now=self.clock(),
            timezone=self.get_settings().timezone,
        )

    # Collection plumbing

    def _load(self, collection: str, model: Type[RecordT]) -> List[RecordT]:
        raw = self.store.get(self.tenant_id, collection)
        try:
            return [model.model_validate(item) for item in raw]
        except PydanticValidationError:
            logger.error("Stored collection is malformed", tenant_id=self.tenant_id, collection=collection)
            raise UnexpectedError(f"Stored {collection} are malformed")

    def _save(self, collection: str, records: List[Record]) -> None:
        self.store.set(self.tenant_id, collection, [record.to_json() for record in records])

    def _build(self, model: Type[RecordT], data: BaseModel, prefix: str, existing: List[Record], **defaults) -> RecordT:
        fields = data.model_dump()
        fields.update(defaults)
        fields.update(
            id=new_record_id(prefix, (record.id for record in existing)),
            tenant_id=self.tenant_id,
            created_at=self.clock(),
        )
        try:
            return model.model_validate(fields)
        except PydanticValidationError as exc:
            raise ValidationError(describe_errors(exc.errors()))

    def _update(
        self,
        collection: str,
        model: Type[RecordT],
        record_id: str,
        data: BaseModel,
        label: str,
    ) -> RecordT:
        records = self._load(collection, model)
        for index, record in enumerate(records):
            if record.id == record_id:
                break
        else:
            raise NotFoundError(f"{label} not found")

        fields = record.model_dump()
        fields.update(data.model_dump(exclude_unset=True))
        fields["updated_at"] = self.clock()
        try:
            updated = model.model_validate(fields)
        except PydanticValidationError as exc:
            raise ValidationError(describe_errors(exc.errors()))

        records[index] = updated
        self._save(collection, records)
        return updated
