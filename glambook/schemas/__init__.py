"""
Schemas module
"""

from glambook.schemas.user import SignInRequest, SignUpRequest, UserResponse
from glambook.schemas.token import TokenResponse
from glambook.schemas.salon import (
    AppointmentCreate,
    AppointmentUpdate,
    CampaignCreate,
    ClientCreate,
    ClientUpdate,
    SettingsUpdate,
    StaffMemberCreate,
    StaffMemberUpdate,
)

__all__ = [
    "AppointmentCreate",
    "AppointmentUpdate",
    "CampaignCreate",
    "ClientCreate",
    "ClientUpdate",
    "SettingsUpdate",
    "SignInRequest",
    "SignUpRequest",
    "StaffMemberCreate",
    "StaffMemberUpdate",
    "TokenResponse",
    "UserResponse",
]
