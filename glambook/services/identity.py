"""
Identity and session provider

Sign-up creates the tenant, its credential and the tenant's default
collections. Sign-in issues a bearer token for a new session row; the
token is only honoured while that row exists.
"""

from datetime import datetime, timezone
from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select
import structlog

from glambook.core.auth import (
    create_session_token,
    decode_session_token,
    hash_password,
    new_session_id,
    verify_password,
)
from glambook.core.config import get_settings
from glambook.core.exceptions import AuthenticationError, ConflictError, ValidationError
from glambook.models.auth_session import AuthSession
from glambook.models.credential import Credential
from glambook.models.salon_settings import SalonSettings
from glambook.models.tenant import Tenant
from glambook.services import tenant_store
from glambook.services.tenant_store import TenantStore

logger = structlog.get_logger(__name__)
settings = get_settings()

INVALID_CREDENTIALS = "Invalid email or password"
UNAUTHORIZED = "Unauthorized access"


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class IdentityService:
    """Sign-up, sign-in, session resolution and sign-out"""

    def __init__(self, session: Session, store: TenantStore):
        self.session = session
        self.store = store

    def sign_up(self, email: str, password: str, name: str, salon_name: Optional[str] = None) -> Tenant:
        email = normalize_email(email)
        name = (name or "").strip()
        if not email or not password or not name:
            raise ValidationError("Missing required fields")

        if self._find_credential(email) is not None:
            raise ConflictError("Email already registered")

        tenant = Tenant(
            display_name=(salon_name or "").strip() or f"{name}'s Salon",
            owner_name=name,
            subscription_tier=settings.DEFAULT_SUBSCRIPTION_TIER,
            enabled_features=list(settings.DEFAULT_FEATURES),
        )
        credential = Credential(
            tenant_id=tenant.id,
            email=email,
            password_hash=hash_password(password),
        )
        self.session.add(tenant)
        self.session.add(credential)
        try:
            self.session.flush()
        except IntegrityError:
            self.session.rollback()
            raise ConflictError("Email already registered")

        salon_settings = SalonSettings(
            salon_name=tenant.display_name,
            owner=name,
            created_at=tenant.created_at,
            subscription_tier=tenant.subscription_tier,
            features=tenant.enabled_features,
            timezone=settings.DEFAULT_TIMEZONE,
        )
        # With the SQL store the first write commits tenant and credential too
        self.store.set(tenant.id, tenant_store.SETTINGS, salon_settings.to_json())
        for collection in (tenant_store.APPOINTMENTS, tenant_store.STAFF,
                           tenant_store.CLIENTS, tenant_store.CAMPAIGNS):
            self.store.set(tenant.id, collection, [])
        self.session.commit()

        self.session.refresh(tenant)
        logger.info("Tenant signed up", tenant_id=tenant.id)
        return tenant

    def sign_in(self, email: str, password: str) -> Tuple[str, Tenant]:
        credential = self._find_credential(normalize_email(email))
        password_hash = credential.password_hash if credential is not None else None

        if not verify_password(password or "", password_hash):
            logger.info("Sign-in rejected")
            raise AuthenticationError(INVALID_CREDENTIALS)

        tenant = self.session.get(Tenant, credential.tenant_id)
        if tenant is None:
            raise AuthenticationError(INVALID_CREDENTIALS)

        auth_session = AuthSession(
            id=new_session_id(),
            tenant_id=tenant.id,
            issued_at=datetime.now(timezone.utc),
        )
        self.session.add(auth_session)
        self.session.commit()
        self.session.refresh(tenant)

        token = create_session_token(auth_session.id, tenant.id, issued_at=auth_session.issued_at)
        logger.info("Tenant signed in", tenant_id=tenant.id)
        return token, tenant

    def resolve_session(self, token: Optional[str]) -> Tenant:
        auth_session = self._find_session(token)
        if auth_session is None:
            raise AuthenticationError(UNAUTHORIZED)

        tenant = self.session.get(Tenant, auth_session.tenant_id)
        if tenant is None:
            raise AuthenticationError(UNAUTHORIZED)
        return tenant

    def sign_out(self, token: Optional[str]) -> None:
        auth_session = self._find_session(token)
        if auth_session is None:
            return
        self.session.delete(auth_session)
        self.session.commit()
        logger.info("Tenant signed out", tenant_id=auth_session.tenant_id)

    def credential_email(self, tenant_id: str) -> Optional[str]:
        credential = self.session.exec(
            select(Credential).where(Credential.tenant_id == tenant_id)
        ).first()
        return credential.email if credential else None

    def _find_credential(self, email: str) -> Optional[Credential]:
        if not email:
            return None
        return self.session.exec(
            select(Credential).where(Credential.email == email)
        ).first()

    def _find_session(self, token: Optional[str]) -> Optional[AuthSession]:
        if not token:
            return None
        payload = decode_session_token(token)
        if payload is None:
            return None
        auth_session = self.session.get(AuthSession, payload["jti"])
        if auth_session is None or auth_session.tenant_id != payload["sub"]:
            return None
        return auth_session
