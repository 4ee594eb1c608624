"""Status history query filter."""

from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import InvalidFilterError
from .record import assume_utc


class StatusHistoryFilter(BaseModel):
    """Arguments used to select a slice of an entity's status history.

    Exactly one of size, from_date and delta selects the slice; exclude
    names status values to leave out of the result.
    """
    size: int = 0  # at most this many records
    from_date: datetime | None = None  # earliest record expected; timezone-less is UTC
    delta: timedelta | None = None  # age of the oldest record expected
    exclude: frozenset[str] = Field(default_factory=frozenset)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator('from_date')
    @classmethod
    def validate_from_date(cls, v: datetime | None) -> datetime | None:
        return assume_utc(v)

    def is_valid(self) -> bool:
        """Return True if validate_filter would accept this filter."""
        try:
            validate_filter(self)
        except InvalidFilterError:
            return False
        return True


def validate_filter(f: StatusHistoryFilter) -> None:
    """Check that exactly one selector of the filter is set.

    Raises:
        InvalidFilterError: no selector is set, or two of them are.
    """
    s = f.size > 0
    t = f.from_date is not None
    d = f.delta is not None

    if not (s or t or d):
        raise InvalidFilterError("missing filter parameters")
    if s and t:
        raise InvalidFilterError("Size and Date together")
    if s and d:
        raise InvalidFilterError("Size and Delta together")
    if t and d:
        raise InvalidFilterError("Date and Delta together")
