"""
Base for the JSON records kept in tenant collections

Records are stored and served with camelCase keys; Python code uses the
snake_case attribute names.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, Iterable, Optional
import uuid

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel


# Non-negative amount, written to JSON as a number
Money = Annotated[
    Decimal,
    Field(ge=0),
    PlainSerializer(lambda value: float(value), return_type=float, when_used="json"),
]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_record_id(prefix: str, taken: Iterable[str] = ()) -> str:
    """Fresh id with a type prefix, never one of ``taken``"""
    taken = set(taken)
    while True:
        record_id = f"{prefix}_{uuid.uuid4().hex[:16]}"
        if record_id not in taken:
            return record_id


def initials(name: str) -> str:
    """Avatar fallback: "Emma Wilson" -> "EW" """
    letters = [part[0] for part in name.split() if part]
    return "".join(letters[:2]).upper()


class Record(BaseModel):
    """A tenant-owned record stored inside a collection"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    id: str
    tenant_id: str
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: Optional[datetime] = None

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
