"""Channels command."""

import json

from session2eq.commands.common import resolve_id_range, session_path_from_args
from session2eq.constants import ExitCode
from session2eq.core.aggregator import aggregate
from session2eq.core.session import LoadError, load_path
from session2eq.exporters.json_exporter import records_to_payload
from session2eq.report import format_report


def run(args):
    session_path = session_path_from_args(args)
    if not session_path:
        print("error: missing/invalid session file path")
        return ExitCode.USAGE

    try:
        session = load_path(session_path)
    except LoadError as exc:
        print(f"error: {exc}")
        return ExitCode.RUNTIME_ERROR

    with session:
        records = aggregate(session, id_range=resolve_id_range(args), snapshot_id=args.snapshot_id)

    if getattr(args, "json", False):
        print(json.dumps(records_to_payload(records), indent=2))
    else:
        print(format_report(records))
    return ExitCode.OK
