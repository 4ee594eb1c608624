"""Performance sentinels (gated)."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from statuslog.kernel.record import DetailedStatus
from statuslog.kernel.squash import squash_logs
from statuslog.kernel.status import Status

# Mean wall-clock budgets in milliseconds.
MAX_LONG_REPEAT_MS = 500.0
MAX_NO_REPEAT_MS = 500.0

START = datetime(2016, 5, 1, tzinfo=timezone.utc)
NOW = datetime(2016, 6, 1, tzinfo=timezone.utc)


def _hook_runs(n: int) -> list:
    records = []
    for i in range(n):
        records.append(DetailedStatus(status=Status.EXECUTING, info="running update-status hook",
                                      since=START + timedelta(minutes=5 * i)))
        records.append(DetailedStatus(status=Status.IDLE, since=START + timedelta(minutes=5 * i, seconds=2)))
    return records


def _assert_budget(benchmark, max_ms: float) -> None:
    mean_ms = benchmark.stats.stats.mean * 1000.0
    assert mean_ms < max_ms, f"Mean {mean_ms:.2f} ms exceeded budget {max_ms:.2f} ms"


@pytest.mark.perf
def test_long_repeat_sentinel(benchmark):
    statuses = _hook_runs(20000)
    result = benchmark.pedantic(lambda: squash_logs(statuses, 2, now=NOW), rounds=3, iterations=1)

    assert len(result) == 3
    assert result[-1].info == "last 2 statuses repeated 19999 times"

    _assert_budget(benchmark, MAX_LONG_REPEAT_MS)


@pytest.mark.perf
def test_no_repeat_sentinel(benchmark):
    statuses = [
        DetailedStatus(status=Status.EXECUTING, info=f"step {i}", since=START + timedelta(seconds=i))
        for i in range(20000)
    ]
    result = benchmark.pedantic(lambda: squash_logs(statuses, 16, now=NOW), rounds=3, iterations=1)

    assert result == statuses

    _assert_budget(benchmark, MAX_NO_REPEAT_MS)
