"""statuslog CLI: inspect and squash status history dumps."""

import argparse
import json
import logging
import sys
from datetime import datetime, timedelta
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path

from statuslog.adapters.memory import InMemoryHistorySource
from statuslog.api import status_history
from statuslog.kernel.errors import StatusHistoryError
from statuslog.kernel.filter import StatusHistoryFilter
from statuslog.kernel.record import DetailedStatus
from statuslog.kernel.status import HistoryKind, all_kinds, is_valid_kind

logger = logging.getLogger(__name__)

_ENTITY = "entity"
_INSTANCE_KINDS = (HistoryKind.MACHINE_INSTANCE, HistoryKind.CONTAINER_INSTANCE)
_UNIT_KINDS = (HistoryKind.UNIT, HistoryKind.UNIT_AGENT, HistoryKind.WORKLOAD)


def _kinds_help() -> str:
    lines = ["Status history kinds:"]
    for kind, description in all_kinds().items():
        lines.append(f"  {kind.value:<16} {description}")
    return "\n".join(lines)


def _load_records(path: Path) -> list[DetailedStatus]:
    """Load records from a JSON list or an object with a "records" list."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("records", [])
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of status records")
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"{path}: status record {index} is not an object")
    return [DetailedStatus(**item) for item in data]


def _matches_kind(record: DetailedStatus, kind: HistoryKind) -> bool:
    if record.kind is None:
        return kind in _UNIT_KINDS
    if kind == HistoryKind.UNIT:
        return record.kind in _UNIT_KINDS
    return record.kind == kind


def _build_filter(args) -> StatusHistoryFilter:
    from_date = datetime.fromisoformat(args.from_date) if args.from_date else None
    delta = timedelta(days=args.days) if args.days is not None else None
    return StatusHistoryFilter(
        size=args.size or 0,
        from_date=from_date,
        delta=delta,
        exclude=frozenset(args.exclude or ()),
    )


def _format_table(records: list[DetailedStatus]) -> str:
    rows = [("Time", "Type", "Status", "Message")]
    for record in records:
        since = record.since.strftime("%d %b %Y %H:%M:%S%z") if record.since else ""
        kind = record.kind.value if record.kind else ""
        rows.append((since, kind, record.status.value, record.info))
    widths = [max(len(row[i]) for row in rows) for i in range(3)]
    return "\n".join(
        f"{row[0]:<{widths[0]}}  {row[1]:<{widths[1]}}  {row[2]:<{widths[2]}}  {row[3]}".rstrip()
        for row in rows
    )


def main():
    """Main CLI entry point for statuslog commands."""
    try:
        statuslog_version = get_version("statuslog")
    except PackageNotFoundError:
        statuslog_version = "dev"

    parser = argparse.ArgumentParser(
        prog="statuslog",
        description="statuslog: filter and squash status history of units, machines and containers"
    )
    parser.add_argument("--version", action="version", version=f"statuslog {statuslog_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output to stderr."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # kinds command
    subparsers.add_parser(
        "kinds",
        help="List status history kinds",
        parents=[parent_parser]
    )

    # show command
    show_parser = subparsers.add_parser(
        "show",
        help="Show status history from a JSON dump",
        description=_kinds_help(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        parents=[parent_parser]
    )
    show_parser.add_argument(
        "records",
        type=Path,
        help="Path to a JSON file of status records"
    )
    show_parser.add_argument(
        "--type",
        dest="kind",
        default=HistoryKind.UNIT.value,
        help="Kind of status history to show (default: unit)"
    )
    selector = show_parser.add_mutually_exclusive_group()
    selector.add_argument(
        "-n",
        dest="size",
        type=int,
        default=None,
        help="Return at most this many entries"
    )
    selector.add_argument(
        "--days",
        type=int,
        default=None,
        help="Return entries from the last N days"
    )
    selector.add_argument(
        "--from-date",
        dest="from_date",
        default=None,
        help="Return entries since this ISO 8601 date"
    )
    show_parser.add_argument(
        "--exclude",
        nargs="*",
        default=None,
        help="Status values to leave out"
    )
    show_parser.add_argument(
        "--squash",
        type=int,
        default=None,
        help="Collapse repetitions of cycles of this many entries"
    )
    show_parser.add_argument(
        "--json",
        action="store_true",
        help="Print entries as JSON"
    )

    args = parser.parse_args()

    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "kinds":
        if not args.quiet:
            print(_kinds_help())
        sys.exit(0)
    elif args.command == "show":
        if not is_valid_kind(args.kind):
            print(f"Error: unexpected status type {args.kind!r}", file=sys.stderr)
            sys.exit(1)
        kind = HistoryKind(args.kind)
        try:
            records = [r for r in _load_records(args.records) if _matches_kind(r, kind)]
            logger.debug("loaded %d %s records from %s", len(records), kind.value, args.records)
            source = InMemoryHistorySource()
            instance = kind in _INSTANCE_KINDS
            if instance:
                source.record_instance(_ENTITY, records)
            else:
                source.record(_ENTITY, records)
            history = status_history(
                source,
                _ENTITY,
                _build_filter(args),
                instance=instance,
                squash_cycle=args.squash,
            )
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except (StatusHistoryError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        if not args.quiet:
            if args.json:
                print(json.dumps([r.model_dump(mode="json") for r in history], indent=2))
            else:
                print(_format_table(history))
        sys.exit(0)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
