"""
Tenant model - one registered salon account
"""

from sqlmodel import Field, SQLModel
from sqlalchemy import Column, JSON
from datetime import datetime, timezone
from typing import List, Optional
import uuid


def new_tenant_id() -> str:
    return f"salon_{uuid.uuid4().hex}"


class Tenant(SQLModel, table=True):
    """Tenant model, the unit of data isolation"""

    __tablename__ = "tenants"

    id: str = Field(default_factory=new_tenant_id, primary_key=True, max_length=64)
    display_name: str = Field(nullable=False, max_length=255)
    owner_name: str = Field(nullable=False, max_length=255)

    # Plan
    subscription_tier: str = Field(default="basic", max_length=50)
    enabled_features: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Optional[datetime] = None
