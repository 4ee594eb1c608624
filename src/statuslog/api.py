"""Public API for statuslog.

High-level entry points over the kernel. Callers should import from here
(or from the package root) rather than from statuslog.kernel.
"""

import logging
from datetime import datetime

from statuslog.contracts import HistorySource
from statuslog.kernel.errors import (
    EmptyWindowError,
    InvalidCycleSizeError,
    InvalidFilterError,
    StatusHistoryError,
)
from statuslog.kernel.filter import StatusHistoryFilter, validate_filter
from statuslog.kernel.record import DetailedStatus, History, same_status
from statuslog.kernel.squash import check_cycle_size, squash_logs
from statuslog.kernel.status import HistoryKind, Status, all_kinds, is_valid_kind
from statuslog.kernel.window import RingWindow, push

logger = logging.getLogger(__name__)


def status_history(
    source: HistorySource,
    entity: str,
    filter: StatusHistoryFilter,
    *,
    instance: bool = False,
    squash_cycle: int | None = None,
    now: datetime | None = None,
) -> History:
    """Fetch an entity's status history and optionally squash repeated cycles.

    The filter is validated before the source is consulted, so an invalid
    filter never reaches storage.

    Args:
        source: Storage collaborator to read from.
        entity: Entity whose history is wanted, e.g. "unit-mysql-0".
        filter: Selects which records to return.
        instance: Read the instance stream instead of the agent/workload one.
        squash_cycle: If given, collapse repetitions of cycles this long.
        now: Timestamp for repeat markers, see squash_logs().

    Raises:
        InvalidFilterError: filter does not select exactly one range.
        InvalidCycleSizeError: squash_cycle is less than 1.
    """
    validate_filter(filter)
    if squash_cycle is not None:
        check_cycle_size(squash_cycle)

    if instance:
        records = source.fetch_instance_history(entity, filter)
    else:
        records = source.fetch_history(entity, filter)
    logger.debug("fetched %d status records for %s (instance=%s)", len(records), entity, instance)

    if squash_cycle is None:
        return list(records)

    squashed = squash_logs(records, squash_cycle, now=now)
    logger.debug(
        "squashed %d status records for %s into %d (cycle size %d)",
        len(records), entity, len(squashed), squash_cycle,
    )
    return squashed


__all__ = [
    "status_history",
    "validate_filter",
    "squash_logs",
    "push",
    "RingWindow",
    "same_status",
    "is_valid_kind",
    "all_kinds",
    "DetailedStatus",
    "History",
    "HistoryKind",
    "Status",
    "StatusHistoryFilter",
    "StatusHistoryError",
    "InvalidFilterError",
    "InvalidCycleSizeError",
    "EmptyWindowError",
]
