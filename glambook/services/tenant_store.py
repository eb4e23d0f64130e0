"""
Tenant-scoped key-value store

Each tenant collection is one JSON value under ``{tenant_id}_{collection}``.
Writes replace the whole value (last write wins), reads of a missing key
return the collection's empty default.
"""

import copy
import json
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict

from sqlmodel import Session
import structlog

from glambook.models.tenant_kv import TenantKV

logger = structlog.get_logger(__name__)

APPOINTMENTS = "appointments"
STAFF = "staff"
CLIENTS = "clients"
CAMPAIGNS = "campaigns"
SETTINGS = "settings"

COLLECTIONS = (APPOINTMENTS, STAFF, CLIENTS, CAMPAIGNS, SETTINGS)


def collection_key(tenant_id: str, collection: str) -> str:
    if collection not in COLLECTIONS:
        raise ValueError(f"Unknown collection: {collection}")
    if not tenant_id:
        raise ValueError("Tenant id is required")
    return f"{tenant_id}_{collection}"


def empty_value(collection: str) -> Any:
    return {} if collection == SETTINGS else []


def _detach(value: Any) -> Any:
    # Round-trip through JSON so callers never share mutable state with the store
    return json.loads(json.dumps(value))


class TenantStore(ABC):
    """Repository interface the gateway reads and writes collections through"""

    def get(self, tenant_id: str, collection: str) -> Any:
        value = self._read(collection_key(tenant_id, collection))
        if value is None:
            return empty_value(collection)
        return value

    def set(self, tenant_id: str, collection: str, value: Any) -> None:
        key = collection_key(tenant_id, collection)
        self._write(key, _detach(value))
        logger.debug("Tenant store write", key=key)

    @abstractmethod
    def _read(self, key: str) -> Any:
        ...

    @abstractmethod
    def _write(self, key: str, value: Any) -> None:
        ...


class SQLTenantStore(TenantStore):
    """Durable store on the ``tenant_kv`` table"""

    def __init__(self, session: Session):
        self.session = session

    def _read(self, key: str) -> Any:
        row = self.session.get(TenantKV, key)
        if row is None:
            return None
        return copy.deepcopy(row.value)

    def _write(self, key: str, value: Any) -> None:
        row = self.session.get(TenantKV, key)
        if row is None:
            row = TenantKV(key=key, value=value)
        else:
            row.value = value
            row.updated_at = datetime.now(timezone.utc)
        self.session.add(row)
        self.session.commit()


class InMemoryTenantStore(TenantStore):
    """Process-local store for tests and scripts"""

    def __init__(self):
        self._data: Dict[str, Any] = {}

    def _read(self, key: str) -> Any:
        if key not in self._data:
            return None
        return copy.deepcopy(self._data[key])

    def _write(self, key: str, value: Any) -> None:
        self._data[key] = value

    def keys(self):
        return sorted(self._data)
