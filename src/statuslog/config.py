"""History pruning configuration.

These values are only read upstream, by whatever prunes stored history and
schedules the update-status hook. They are kept as the human-readable
strings the operator supplied; accessors turn them into durations and sizes.
"""

import json
import math
import re
from datetime import timedelta
from pathlib import Path

from pydantic import BaseModel, ConfigDict

DEFAULT_STATUS_HISTORY_AGE = "336h"  # 2 weeks
DEFAULT_STATUS_HISTORY_SIZE = "5G"
DEFAULT_ACTION_RESULTS_AGE = "336h"  # 2 weeks
DEFAULT_ACTION_RESULTS_SIZE = "5G"
DEFAULT_UPDATE_STATUS_HOOK_INTERVAL = "5m"

_DURATION_UNITS = {
    "us": timedelta(microseconds=1),
    "µs": timedelta(microseconds=1),
    "ms": timedelta(milliseconds=1),
    "s": timedelta(seconds=1),
    "m": timedelta(minutes=1),
    "h": timedelta(hours=1),
}
_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(us|µs|ms|s|m|h)")

# Multipliers to MiB.
_SIZE_UNITS = {"M": 1, "G": 1024, "T": 1024 ** 2, "P": 1024 ** 3, "E": 1024 ** 4}
_SIZE = re.compile(r"(\d+(?:\.\d*)?|\.\d+)([MGTPE]?)(?:I?B)?")


def parse_duration(value: str) -> timedelta:
    """Parse a duration such as "336h", "5m" or "1h30m".

    Raises:
        ValueError: value is empty or not a sequence of number+unit parts.
    """
    text = value.strip()
    if text in ("0", "+0", "-0"):
        return timedelta(0)
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    if not text:
        raise ValueError(f"invalid duration {value!r}")
    total = timedelta(0)
    pos = 0
    while pos < len(text):
        match = _DURATION_PART.match(text, pos)
        if not match:
            raise ValueError(f"invalid duration {value!r}")
        total += float(match.group(1)) * _DURATION_UNITS[match.group(2)]
        pos = match.end()
    return sign * total


def parse_size_mb(value: str) -> int:
    """Parse a size such as "5G" or "512M" into MiB, rounding up.

    A bare number is taken as MiB.

    Raises:
        ValueError: value is not a non-negative number with an optional suffix.
    """
    match = _SIZE.fullmatch(value.strip().upper())
    if not match:
        raise ValueError(f"invalid size {value!r}")
    number = float(match.group(1))
    mb = number * _SIZE_UNITS[match.group(2) or "M"]
    return math.ceil(mb)


class HistoryConfig(BaseModel):
    """Retention thresholds for status history and action results."""
    max_status_history_age: str = DEFAULT_STATUS_HISTORY_AGE
    max_status_history_size: str = DEFAULT_STATUS_HISTORY_SIZE
    max_action_results_age: str = DEFAULT_ACTION_RESULTS_AGE
    max_action_results_size: str = DEFAULT_ACTION_RESULTS_SIZE
    update_status_hook_interval: str = DEFAULT_UPDATE_STATUS_HOOK_INTERVAL

    model_config = ConfigDict(extra="forbid")

    def status_history_max_age(self) -> timedelta:
        return parse_duration(self.max_status_history_age)

    def status_history_max_size_mb(self) -> int:
        return parse_size_mb(self.max_status_history_size)

    def action_results_max_age(self) -> timedelta:
        return parse_duration(self.max_action_results_age)

    def action_results_max_size_mb(self) -> int:
        return parse_size_mb(self.max_action_results_size)

    def update_status_interval(self) -> timedelta:
        """How often the update-status hook runs; empty means the default."""
        raw = self.update_status_hook_interval or DEFAULT_UPDATE_STATUS_HOOK_INTERVAL
        return parse_duration(raw)


def load_config(path: str | Path) -> HistoryConfig:
    """Load a HistoryConfig from a JSON object on disk."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return HistoryConfig(**data)
