"""
Authentication API endpoints - sign-up, sign-in and sessions
"""

from fastapi import APIRouter, Depends, status
from typing import Optional
import structlog

from glambook.core.dependencies import get_bearer_token, get_current_tenant, get_identity_service
from glambook.models.tenant import Tenant
from glambook.schemas.token import TokenResponse
from glambook.schemas.user import SignInRequest, SignUpRequest, UserResponse
from glambook.services.identity import IdentityService

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post("/signup", status_code=status.HTTP_201_CREATED)
def sign_up(
    data: SignUpRequest,
    identity: IdentityService = Depends(get_identity_service),
):
    """Register a salon owner and create their tenant"""
    tenant = identity.sign_up(
        email=data.email,
        password=data.password,
        name=data.name,
        salon_name=data.salon_name,
    )
    user = UserResponse.from_tenant(tenant, email=identity.credential_email(tenant.id))
    return {
        "success": True,
        "user": user.to_json(),
        "message": "Account created successfully",
    }


@router.post("/signin", response_model=TokenResponse)
def sign_in(
    data: SignInRequest,
    identity: IdentityService = Depends(get_identity_service),
):
    """Exchange email and password for a bearer token"""
    token, tenant = identity.sign_in(data.email, data.password)
    return TokenResponse(
        access_token=token,
        user=UserResponse.from_tenant(tenant, email=identity.credential_email(tenant.id)),
    )


@router.post("/signout")
def sign_out(
    token: Optional[str] = Depends(get_bearer_token),
    identity: IdentityService = Depends(get_identity_service),
):
    """End the session; unknown or missing tokens are ignored"""
    identity.sign_out(token)
    return {"success": True}


@router.get("/me")
def get_current_user_info(
    tenant: Tenant = Depends(get_current_tenant),
    identity: IdentityService = Depends(get_identity_service),
):
    """Get the signed-in account"""
    user = UserResponse.from_tenant(tenant, email=identity.credential_email(tenant.id))
    return {"user": user.to_json()}
