"""
Dashboard and analytics API endpoints
"""

from fastapi import APIRouter, Depends

from glambook.core.dependencies import get_salon_service
from glambook.services.salon import SalonService

router = APIRouter()


@router.get("/dashboard")
def get_dashboard(service: SalonService = Depends(get_salon_service)):
    """Today's figures plus the salon settings"""
    summary = service.dashboard()
    return {"settings": service.get_settings().to_json(), **summary.to_json()}


@router.get("/analytics")
def get_analytics(service: SalonService = Depends(get_salon_service)):
    """Monthly revenue, retention and popular services"""
    return service.analytics().to_json()
