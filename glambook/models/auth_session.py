"""
Login session model
"""

from sqlmodel import Field, SQLModel
from datetime import datetime, timezone


class AuthSession(SQLModel, table=True):
    """A signed-in session; the row is deleted at sign-out"""

    __tablename__ = "auth_sessions"

    id: str = Field(primary_key=True, max_length=64, description="Session id carried by the bearer token")
    tenant_id: str = Field(foreign_key="tenants.id", index=True, max_length=64)
    issued_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
