from glambook.models.tenant import Tenant
from glambook.models.credential import Credential
from glambook.models.auth_session import AuthSession
from glambook.models.tenant_kv import TenantKV
from glambook.models.record import Record
from glambook.models.appointment import Appointment, AppointmentStatus
from glambook.models.staff import StaffMember, StaffAvailability
from glambook.models.client import Client, LoyaltyTier
from glambook.models.campaign import Campaign, CampaignChannel, CampaignStatus
from glambook.models.salon_settings import SalonSettings
