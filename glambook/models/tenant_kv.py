"""
Key-value rows backing the tenant store
"""

from sqlmodel import Field, SQLModel
from sqlalchemy import Column, JSON
from datetime import datetime, timezone
from typing import Any, Optional


class TenantKV(SQLModel, table=True):
    """One JSON value under a ``{tenant_id}_{collection}`` key"""

    __tablename__ = "tenant_kv"

    key: str = Field(primary_key=True, max_length=128)
    value: Any = Field(default=None, sa_column=Column(JSON, nullable=True))
    updated_at: Optional[datetime] = Field(default_factory=lambda: datetime.now(timezone.utc))
