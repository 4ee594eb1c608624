"""In-memory HistorySource."""

from collections import defaultdict
from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from statuslog.kernel.filter import StatusHistoryFilter
from statuslog.kernel.record import DetailedStatus, assume_utc


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryHistorySource:
    """Holds status history per entity in memory.

    Each entity has two streams: agent/workload statuses and instance
    statuses. Records are kept in the order they were recorded.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None):
        self._clock = clock or _utcnow
        self._history: dict[str, list[DetailedStatus]] = defaultdict(list)
        self._instance_history: dict[str, list[DetailedStatus]] = defaultdict(list)

    def record(self, entity: str, records: Iterable[DetailedStatus]) -> None:
        """Append records to the entity's status history."""
        self._history[entity].extend(records)

    def record_instance(self, entity: str, records: Iterable[DetailedStatus]) -> None:
        """Append records to the entity's instance status history."""
        self._instance_history[entity].extend(records)

    def fetch_history(self, entity: str, filter: StatusHistoryFilter) -> list[DetailedStatus]:
        return self._select(self._history.get(entity, []), filter)

    def fetch_instance_history(self, entity: str, filter: StatusHistoryFilter) -> list[DetailedStatus]:
        return self._select(self._instance_history.get(entity, []), filter)

    def entity(self, entity: str) -> "EntityHistory":
        """Return a view of one entity's history bound to this source."""
        return EntityHistory(self, entity)

    def _select(self, records: list[DetailedStatus], filter: StatusHistoryFilter) -> list[DetailedStatus]:
        kept = [r for r in records if r.status.value not in filter.exclude]
        if filter.size > 0:
            return kept[-filter.size:]
        if filter.from_date is not None:
            earliest = filter.from_date
        elif filter.delta is not None:
            earliest = assume_utc(self._clock()) - filter.delta
        else:
            return kept
        return [r for r in kept if r.since is not None and r.since >= earliest]


class EntityHistory:
    """One entity's status history, read through an InMemoryHistorySource."""

    def __init__(self, source: InMemoryHistorySource, entity: str):
        self.source = source
        self.name = entity

    def status_history(self, filter: StatusHistoryFilter) -> list[DetailedStatus]:
        return self.source.fetch_history(self.name, filter)

    def instance_status_history(self, filter: StatusHistoryFilter) -> list[DetailedStatus]:
        return self.source.fetch_instance_history(self.name, filter)
