"""
Pydantic schemas for sign-up, sign-in and the signed-in account
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import List, Optional

from glambook.models.tenant import Tenant


class SignUpRequest(BaseModel):
    """Account registration schema"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    email: EmailStr
    password: str = Field(..., min_length=8, max_length=100)
    name: str = Field(..., min_length=1, max_length=255)
    salon_name: Optional[str] = Field(default=None, max_length=255)


class SignInRequest(BaseModel):
    """Sign-in schema"""
    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=100)


class UserResponse(BaseModel):
    """The signed-in salon owner and their tenant"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    tenant_id: str
    email: Optional[str] = None
    name: str
    salon_name: str
    subscription_tier: str
    enabled_features: List[str]
    created_at: datetime

    @classmethod
    def from_tenant(cls, tenant: Tenant, email: Optional[str] = None) -> "UserResponse":
        return cls(
            id=tenant.id,
            tenant_id=tenant.id,
            email=email,
            name=tenant.owner_name,
            salon_name=tenant.display_name,
            subscription_tier=tenant.subscription_tier,
            enabled_features=list(tenant.enabled_features or []),
            created_at=tenant.created_at,
        )

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
