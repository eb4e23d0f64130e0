"""
Authentication and service dependencies for FastAPI
"""

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session
from typing import Optional
import structlog

from glambook.core.database import get_session
from glambook.core.exceptions import AuthenticationError
from glambook.models.tenant import Tenant
from glambook.services.identity import IdentityService
from glambook.services.salon import SalonService
from glambook.services.tenant_store import SQLTenantStore, TenantStore

logger = structlog.get_logger(__name__)
security = HTTPBearer(auto_error=False)


def get_tenant_store(session: Session = Depends(get_session)) -> TenantStore:
    """Tenant store for the request; override to swap the backend"""
    return SQLTenantStore(session)


def get_identity_service(
    session: Session = Depends(get_session),
    store: TenantStore = Depends(get_tenant_store),
) -> IdentityService:
    return IdentityService(session, store)


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    if credentials is None or credentials.scheme.lower() != "bearer":
        return None
    return credentials.credentials


def get_current_tenant(
    token: Optional[str] = Depends(get_bearer_token),
    identity: IdentityService = Depends(get_identity_service),
) -> Tenant:
    """Resolve the bearer token to its tenant or fail with 401"""
    if token is None:
        raise AuthenticationError("No authorization token provided")

    tenant = identity.resolve_session(token)
    logger.debug(f"Tenant authenticated: {tenant.id}")
    return tenant


def get_salon_service(
    tenant: Tenant = Depends(get_current_tenant),
    store: TenantStore = Depends(get_tenant_store),
) -> SalonService:
    return SalonService(store, tenant.id)
