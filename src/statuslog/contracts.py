"""Storage collaborator contracts.

Implementations return records oldest first and have already dropped
records whose status is in `filter.exclude`. Filter shape is checked
with validate_filter() before any of these are called.
"""

from typing import Protocol, runtime_checkable

from statuslog.kernel.filter import StatusHistoryFilter
from statuslog.kernel.record import DetailedStatus


@runtime_checkable
class StatusHistoryGetter(Protocol):
    """An entity that can fetch its own status history."""
    def status_history(self, filter: StatusHistoryFilter) -> list[DetailedStatus]:
        ...


@runtime_checkable
class InstanceStatusHistoryGetter(Protocol):
    """An entity that can fetch the status history of its instance."""
    def instance_status_history(self, filter: StatusHistoryFilter) -> list[DetailedStatus]:
        ...


@runtime_checkable
class HistorySource(Protocol):
    """Entity-scoped access to stored status history."""
    def fetch_history(self, entity: str, filter: StatusHistoryFilter) -> list[DetailedStatus]:
        ...

    def fetch_instance_history(self, entity: str, filter: StatusHistoryFilter) -> list[DetailedStatus]:
        ...
