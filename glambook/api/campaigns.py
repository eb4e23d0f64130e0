"""
Marketing campaigns API endpoints
"""

from fastapi import APIRouter, Depends, status

from glambook.core.dependencies import get_salon_service
from glambook.schemas.salon import CampaignCreate
from glambook.services.salon import SalonService

router = APIRouter()


@router.get("")
def list_campaigns(service: SalonService = Depends(get_salon_service)):
    return {"campaigns": [campaign.to_json() for campaign in service.list_campaigns()]}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_campaign(
    data: CampaignCreate,
    service: SalonService = Depends(get_salon_service),
):
    """Save a campaign as a draft"""
    campaign = service.create_campaign(data)
    return {"success": True, "campaign": campaign.to_json()}
