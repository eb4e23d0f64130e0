"""
Salon settings API endpoints
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session
from datetime import datetime, timezone
import structlog

from glambook.core.database import get_session
from glambook.core.dependencies import get_current_tenant, get_salon_service
from glambook.models.tenant import Tenant
from glambook.schemas.salon import SettingsUpdate
from glambook.services.salon import SalonService

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.get("")
def get_settings(service: SalonService = Depends(get_salon_service)):
    return {"settings": service.get_settings().to_json()}


@router.put("")
def update_settings(
    data: SettingsUpdate,
    tenant: Tenant = Depends(get_current_tenant),
    service: SalonService = Depends(get_salon_service),
    session: Session = Depends(get_session),
):
    """Rename the salon or change its timezone"""
    salon_settings = service.update_settings(data)

    if data.salon_name and data.salon_name != tenant.display_name:
        tenant.display_name = data.salon_name
        tenant.updated_at = datetime.now(timezone.utc)
        session.add(tenant)
        session.commit()
        logger.info(f"Tenant renamed: {tenant.id}")

    return {"success": True, "settings": salon_settings.to_json()}
