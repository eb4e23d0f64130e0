"""
Appointments API endpoints
"""

from fastapi import APIRouter, Depends, status

from glambook.core.dependencies import get_salon_service
from glambook.schemas.salon import AppointmentCreate, AppointmentUpdate
from glambook.services.salon import SalonService

router = APIRouter()


@router.get("")
def list_appointments(service: SalonService = Depends(get_salon_service)):
    """List the salon's appointments in booking order"""
    return {"appointments": [appointment.to_json() for appointment in service.list_appointments()]}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_appointment(
    data: AppointmentCreate,
    service: SalonService = Depends(get_salon_service),
):
    """Book an appointment; new bookings start confirmed"""
    appointment = service.create_appointment(data)
    return {"success": True, "appointment": appointment.to_json()}


@router.put("/{appointment_id}")
def update_appointment(
    appointment_id: str,
    data: AppointmentUpdate,
    service: SalonService = Depends(get_salon_service),
):
    """Change an appointment's fields or status"""
    appointment = service.update_appointment(appointment_id, data)
    return {"success": True, "appointment": appointment.to_json()}
