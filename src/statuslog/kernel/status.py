"""Status values and history kinds.

HistoryKind members carry their own description, so the validity check
and the description table both read the same declaration. Adding a kind
means adding one member here (and updating the `kinds` command help if
its wording changes).
"""

from enum import Enum
from typing import Any


class Status(str, Enum):
    """Life-cycle states reported by agents, workloads and instances."""

    # Agent
    ALLOCATING = "allocating"
    REBOOTING = "rebooting"
    EXECUTING = "executing"
    IDLE = "idle"
    FAILED = "failed"
    LOST = "lost"
    ERROR = "error"

    # Workload
    MAINTENANCE = "maintenance"
    TERMINATED = "terminated"
    UNKNOWN = "unknown"
    WAITING = "waiting"
    BLOCKED = "blocked"
    ACTIVE = "active"

    # Instance
    PENDING = "pending"
    PROVISIONING = "provisioning"
    RUNNING = "running"
    PROVISIONING_ERROR = "provisioning error"
    STOPPED = "stopped"
    STARTED = "started"
    DOWN = "down"
    EMPTY = "empty"


class HistoryKind(str, Enum):
    """Which logical stream a status history entry belongs to."""

    def __new__(cls, value: str, description: str):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.description = description
        return obj

    UNIT = ("unit", "statuses for specified unit and its workload")
    UNIT_AGENT = ("juju-unit", "statuses from the agent that is managing a unit")
    WORKLOAD = ("workload", "statuses for unit's workload")
    MACHINE_INSTANCE = ("machine", "statuses that occur due to provisioning of a machine")
    MACHINE = ("juju-machine", "status of the agent that is managing a machine")
    CONTAINER_INSTANCE = ("container", "statuses from the agent that is managing containers")
    CONTAINER = ("juju-container", "statuses from the containers only and not their host machines")

    def __str__(self) -> str:
        return self.value


def is_valid_kind(kind: Any) -> bool:
    """Return True if kind is a HistoryKind member or the value of one."""
    if isinstance(kind, HistoryKind):
        return True
    if not isinstance(kind, str):
        return False
    try:
        HistoryKind(kind)
    except ValueError:
        return False
    return True


def all_kinds() -> dict[HistoryKind, str]:
    """Return every valid HistoryKind mapped to its description."""
    return {kind: kind.description for kind in HistoryKind}
