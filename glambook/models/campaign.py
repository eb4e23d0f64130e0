"""
Marketing campaign record
"""

from enum import Enum

from pydantic import Field

from glambook.models.record import Record


class CampaignChannel(str, Enum):
    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"


class CampaignStatus(str, Enum):
    DRAFT = "draft"
    SCHEDULED = "scheduled"
    SENT = "sent"


class Campaign(Record):
    """A message to a client segment; delivery happens outside this service"""

    channel: CampaignChannel
    segment: str = Field(min_length=1, max_length=255)
    message: str = Field(min_length=1, max_length=2000)
    status: CampaignStatus = CampaignStatus.DRAFT
