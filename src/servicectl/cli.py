"""CLI entry point for servicectl."""

import argparse
import json
import sys

from .controller import list_services, start_service, stop_service
from .errors import ServiceAlreadyExists, ServiceCtlError


def _fail(exc: ServiceCtlError) -> None:
    print(f"Error: {exc}", file=sys.stderr)
    sys.exit(1)


def cmd_start(args) -> None:
    """Start a binary as a background service."""
    try:
        record = start_service(args.binary_path)
    except ServiceAlreadyExists as exc:
        # Not an error: the service is already tracked, nothing to do.
        print(str(exc), file=sys.stderr)
        return
    except ServiceCtlError as exc:
        _fail(exc)
    print(f"Service with binary path {record.binary_path} started")


def cmd_stop(args) -> None:
    """Force-kill a registered service and forget it."""
    try:
        record = stop_service(args.binary_path)
    except ServiceCtlError as exc:
        _fail(exc)
    print(f"Service with binary path {record.binary_path} stopped")


def _format_services(services, fmt: str) -> str:
    """Format a list of ServiceRecord objects for output."""
    if fmt == "json":
        return json.dumps([s.to_dict() for s in services], indent=2)
    lines = []
    for s in services:
        pid = s.pid if s.pid is not None else "-"
        lines.append(f"{pid}  {s.binary_path}")
    return "\n".join(lines) if lines else "(no services)"


def cmd_list(args) -> None:
    try:
        services = list_services()
    except ServiceCtlError as exc:
        _fail(exc)
    print(_format_services(services, args.format))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="servicectl",
        description="servicectl: run binaries as background services",
    )
    subparsers = parser.add_subparsers(dest="command")

    # start
    start_parser = subparsers.add_parser(
        "start", help="Start a binary as a background service",
    )
    start_parser.add_argument(
        "binary_path", type=str, help="The path to the binary to run as a service",
    )
    start_parser.set_defaults(func=cmd_start)

    # stop
    stop_parser = subparsers.add_parser(
        "stop", help="Stop a running service",
    )
    stop_parser.add_argument(
        "binary_path", type=str, help="The binary path the service was started with",
    )
    stop_parser.set_defaults(func=cmd_stop)

    # list
    list_parser = subparsers.add_parser("list", help="List registered services")
    list_parser.add_argument(
        "--format", choices=["text", "json"], default="text",
        help="Output format (default: text)",
    )
    list_parser.set_defaults(func=cmd_list)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)
