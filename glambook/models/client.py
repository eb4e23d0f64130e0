"""
Client record
"""

import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import Field

from glambook.models.record import Money, Record


class LoyaltyTier(str, Enum):
    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"


class Client(Record):
    """A salon customer and their loyalty standing"""

    name: str = Field(min_length=1, max_length=255)
    loyalty_tier: LoyaltyTier = LoyaltyTier.BRONZE
    visits: int = Field(default=0, ge=0)
    total_spent: Money = Decimal("0")
    last_visit: Optional[dt.date] = None
    avatar_ref: str = Field(default="", max_length=2048)
