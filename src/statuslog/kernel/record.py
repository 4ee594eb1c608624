"""Status record model."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .status import HistoryKind, Status


def assume_utc(value: datetime | None) -> datetime | None:
    """Treat a timezone-less datetime as UTC; aware ones are returned as is."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class DetailedStatus(BaseModel):
    """One observed status transition of a unit, machine or container.

    Records are immutable. `since` is only None on synthetic records and
    `err` is only set when the record stands for a failed lookup.
    """
    status: Status
    info: str = ""
    data: dict[str, Any] = Field(default_factory=dict)
    since: datetime | None = None  # timezone-less values are read as UTC
    kind: HistoryKind | None = None
    life: str | None = None  # owning entity's life-cycle stage
    err: Exception | None = Field(default=None, exclude=True)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @field_validator('since')
    @classmethod
    def validate_since(cls, v: datetime | None) -> datetime | None:
        return assume_utc(v)


History = list[DetailedStatus]


def same_status(a: DetailedStatus, b: DetailedStatus) -> bool:
    """Cycle-detection equality: status and info only."""
    return a.status == b.status and a.info == b.info
