"""
Seed the demo salon account

Creates owner@example.com / password ("Salon Owner", "My Salon") with a few
staff members, clients and today's appointments. Running it again is a
no-op once the account exists.

    python -m glambook.scripts.seed_demo
"""

from datetime import date, timedelta
from typing import Optional

from sqlmodel import Session, select
import structlog

from glambook.core.database import engine, init_db
from glambook.models.credential import Credential
from glambook.schemas.salon import (
    AppointmentCreate,
    AppointmentUpdate,
    ClientCreate,
    ClientUpdate,
    StaffMemberCreate,
)
from glambook.services.identity import IdentityService, normalize_email
from glambook.services.salon import SalonService
from glambook.services.tenant_store import SQLTenantStore

logger = structlog.get_logger(__name__)

DEMO_EMAIL = "owner@example.com"
DEMO_PASSWORD = "password"
DEMO_NAME = "Salon Owner"
DEMO_SALON = "My Salon"

STAFF = [
    {"name": "Emma Wilson", "specialization": "Hair Color Expert", "rating": 4.9,
     "availability": "available", "nextAppointmentLabel": "10:00 AM"},
    {"name": "Carlos Rodriguez", "specialization": "Men's Grooming", "rating": 4.8,
     "availability": "busy", "nextAppointmentLabel": "11:30 AM"},
    {"name": "Sophia Kim", "specialization": "Skincare Specialist", "rating": 4.9,
     "availability": "available", "nextAppointmentLabel": "2:00 PM"},
    {"name": "Marcus Thompson", "specialization": "Barber & Stylist", "rating": 4.7,
     "availability": "break", "nextAppointmentLabel": "3:30 PM"},
]

# name, tier, visits, days since last visit
CLIENTS = [
    ("Sarah Johnson", "Platinum", 24, 2),
    ("Lisa Anderson", "Gold", 18, 7),
    ("Michael Chen", "Silver", 12, 3),
    ("David Wilson", "Gold", 16, 0),
]

# client, service, stylist, time, duration, price, status
APPOINTMENTS = [
    ("Sarah Johnson", "Hair Color & Cut", "Emma Wilson", "10:00", "2h", 180, "confirmed"),
    ("Michael Chen", "Beard Trim", "Carlos Rodriguez", "11:30", "45m", 45, "pending"),
    ("Lisa Anderson", "Facial Treatment", "Sophia Kim", "14:00", "1h 30m", 120, "confirmed"),
    ("David Wilson", "Full Hair Styling", "Emma Wilson", "16:00", "1h 15m", 85, "completed"),
]


def seed_demo(session: Session, today: Optional[date] = None) -> dict:
    """Create the demo account and its records if the email is unused"""
    today = today or date.today()
    existing = session.exec(
        select(Credential).where(Credential.email == normalize_email(DEMO_EMAIL))
    ).first()
    if existing is not None:
        logger.info(f"Demo account already present: {existing.tenant_id}")
        return {"created": False, "tenant_id": existing.tenant_id}

    store = SQLTenantStore(session)
    tenant = IdentityService(session, store).sign_up(DEMO_EMAIL, DEMO_PASSWORD, DEMO_NAME, DEMO_SALON)
    salon = SalonService(store, tenant.id)

    for member in STAFF:
        salon.add_staff_member(StaffMemberCreate.model_validate(member))

    for name, tier, visits, days_ago in CLIENTS:
        client = salon.add_client(ClientCreate(name=name, last_visit=today - timedelta(days=days_ago)))
        salon.update_client(client.id, ClientUpdate(loyalty_tier=tier, visits=visits))

    for client_name, service, stylist, time, duration, price, status in APPOINTMENTS:
        appointment = salon.create_appointment(AppointmentCreate.model_validate({
            "clientName": client_name,
            "service": service,
            "stylist": stylist,
            "date": today.isoformat(),
            "time": time,
            "duration": duration,
            "price": price,
        }))
        if status != appointment.status.value:
            salon.update_appointment(appointment.id, AppointmentUpdate(status=status))

    logger.info(f"Demo account created: {tenant.id}")
    return {"created": True, "tenant_id": tenant.id}


def main():
    init_db()
    with Session(engine) as session:
        result = seed_demo(session)
    print(result)


if __name__ == "__main__":
    main()
