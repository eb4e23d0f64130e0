"""
Credential model - login email and password hash of a tenant owner
"""

from sqlmodel import Field, SQLModel
from datetime import datetime, timezone
import uuid


class Credential(SQLModel, table=True):
    """Email/password credential, email is unique across all tenants"""

    __tablename__ = "credentials"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    tenant_id: str = Field(foreign_key="tenants.id", index=True, max_length=64)

    email: str = Field(unique=True, index=True, nullable=False, max_length=255)
    password_hash: str = Field(nullable=False)

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
