"""
Staff API endpoints
"""

from fastapi import APIRouter, Depends, status

from glambook.core.dependencies import get_salon_service
from glambook.schemas.salon import StaffMemberCreate, StaffMemberUpdate
from glambook.services.salon import SalonService

router = APIRouter()


@router.get("")
def list_staff(service: SalonService = Depends(get_salon_service)):
    return {"staff": [member.to_json() for member in service.list_staff()]}


@router.post("", status_code=status.HTTP_201_CREATED)
def add_staff_member(
    data: StaffMemberCreate,
    service: SalonService = Depends(get_salon_service),
):
    member = service.add_staff_member(data)
    return {"success": True, "staffMember": member.to_json()}


@router.put("/{staff_id}")
def update_staff_member(
    staff_id: str,
    data: StaffMemberUpdate,
    service: SalonService = Depends(get_salon_service),
):
    """Update a staff member, e.g. their availability"""
    member = service.update_staff_member(staff_id, data)
    return {"success": True, "staffMember": member.to_json()}
