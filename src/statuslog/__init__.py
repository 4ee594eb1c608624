"""statuslog: status history filtering and cycle squashing."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("statuslog")
except PackageNotFoundError:
    __version__ = "dev"

from statuslog.api import (
    status_history,
    validate_filter,
    squash_logs,
    push,
    is_valid_kind,
    all_kinds,
    DetailedStatus,
    HistoryKind,
    Status,
    StatusHistoryFilter,
    StatusHistoryError,
    InvalidFilterError,
    InvalidCycleSizeError,
    EmptyWindowError,
)

__all__ = [
    "__version__",
    "status_history",
    "validate_filter",
    "squash_logs",
    "push",
    "is_valid_kind",
    "all_kinds",
    "DetailedStatus",
    "HistoryKind",
    "Status",
    "StatusHistoryFilter",
    "StatusHistoryError",
    "InvalidFilterError",
    "InvalidCycleSizeError",
    "EmptyWindowError",
]
