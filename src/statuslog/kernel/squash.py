"""Collapse repeating cycles of status records."""

from collections.abc import Sequence
from datetime import datetime, timezone

from .errors import InvalidCycleSizeError
from .record import DetailedStatus, History, same_status
from .status import Status
from .window import RingWindow


def _repeat_marker(cycle_size: int, repeat: int, now: datetime) -> DetailedStatus:
    return DetailedStatus(
        status=Status.IDLE,
        info=f"last {cycle_size} statuses repeated {repeat} times",
        since=now,
    )


def check_cycle_size(cycle_size) -> None:
    """Raise InvalidCycleSizeError unless cycle_size is a positive int."""
    if isinstance(cycle_size, bool) or not isinstance(cycle_size, int) or cycle_size < 1:
        raise InvalidCycleSizeError(cycle_size)


def squash_logs(
    statuses: Sequence[DetailedStatus],
    cycle_size: int,
    now: datetime | None = None,
) -> History:
    """Replace consecutive repetitions of a cycle of records with one marker.

    A cycle is `cycle_size` consecutive records; two records match when their
    status and info are equal. Each run of repetitions is kept once, followed
    by an idle record reading "last N statuses repeated M times". Records are
    otherwise emitted in input order; a trailing partial cycle is appended
    as is.

    The window of `cycle_size` records doubles as the comparison baseline and
    as a delay line, so nothing is emitted until it is known whether the
    records ahead repeat it.

    Args:
        statuses: Records in stream order. Not modified.
        cycle_size: Length of the cycle to detect, at least 1.
        now: Timestamp for the markers. Defaults to the current UTC time;
            it is never taken from the input records.

    Returns:
        A new list. When there are no more records than `cycle_size` it holds
        the input unchanged.

    Raises:
        InvalidCycleSizeError: cycle_size is not a positive integer.
    """
    check_cycle_size(cycle_size)
    statuses = list(statuses)
    if len(statuses) <= cycle_size:
        return statuses

    if now is None:
        now = datetime.now(timezone.utc)

    window = RingWindow(statuses[:cycle_size])
    result: History = []
    repeat = 0
    i = cycle_size

    while i + cycle_size <= len(statuses):
        chunk = statuses[i:i + cycle_size]
        if all(same_status(a, b) for a, b in zip(chunk, window)):
            repeat += 1
            i += cycle_size
            continue
        if repeat > 0:
            for record in chunk:
                result.append(window.push(record))
            result.append(_repeat_marker(cycle_size, repeat, now))
            repeat = 0
            i += cycle_size
            continue
        # Slide by one so a cycle starting mid-chunk can still line up.
        result.append(window.push(statuses[i]))
        i += 1

    result.extend(window)
    if repeat > 0:
        result.append(_repeat_marker(cycle_size, repeat, now))
    result.extend(statuses[i:])
    return result
