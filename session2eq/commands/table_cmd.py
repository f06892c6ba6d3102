"""Table browser command."""

import json

from session2eq.commands.common import session_path_from_args
from session2eq.constants import ExitCode
from session2eq.core.browser import browse_table
from session2eq.core.session import LoadError, QueryError, load_path


def _print_rows(rows):
    if not rows:
        print("(no rows)")
        return
    columns = list(rows[0].keys())
    print(" | ".join(columns))
    for row in rows:
        print(" | ".join(str(row.get(c)) for c in columns))


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
        try:
            if args.list:
                for name in session.tables():
                    print(name)
                return ExitCode.OK
            rows = browse_table(session, args.table, args.channel, args.snapshot_id)
        except ValueError as exc:
            print(f"error: {exc}")
            return ExitCode.USAGE
        except QueryError as exc:
            print(f"error: {exc}")
            return ExitCode.RUNTIME_ERROR

    if getattr(args, "json", False):
        print(json.dumps(rows, indent=2, default=str))
    else:
        _print_rows(rows)
    return ExitCode.OK
