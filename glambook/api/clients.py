"""
Clients API endpoints
"""

from fastapi import APIRouter, Depends, status

from glambook.core.dependencies import get_salon_service
from glambook.schemas.salon import ClientCreate, ClientUpdate
from glambook.services.salon import SalonService

router = APIRouter()


@router.get("")
def list_clients(service: SalonService = Depends(get_salon_service)):
    return {"clients": [client.to_json() for client in service.list_clients()]}


@router.post("", status_code=status.HTTP_201_CREATED)
def add_client(
    data: ClientCreate,
    service: SalonService = Depends(get_salon_service),
):
    """Add a client at the Bronze tier with no visits"""
    client = service.add_client(data)
    return {"success": True, "client": client.to_json()}


@router.put("/{client_id}")
def update_client(
    client_id: str,
    data: ClientUpdate,
    service: SalonService = Depends(get_salon_service),
):
    client = service.update_client(client_id, data)
    return {"success": True, "client": client.to_json()}
