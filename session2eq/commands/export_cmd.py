"""Export command."""

from session2eq.commands.common import resolve_id_range, session_path_from_args
from session2eq.constants import ExitCode
from session2eq.core.session import LoadError
from session2eq.export_pipeline import run_export


def run(args):
    session_path = session_path_from_args(args)
    if not session_path:
        print("error: missing/invalid session file path")
        return ExitCode.USAGE

    try:
        run_export(
            str(session_path),
            args.outdir,
            id_range=resolve_id_range(args),
            snapshot_id=args.snapshot_id,
        )
    except LoadError as exc:
        print(f"error: {exc}")
        return ExitCode.RUNTIME_ERROR
    except OSError as exc:
        print(f"error: export failed: {exc}")
        return ExitCode.RUNTIME_ERROR

    return ExitCode.OK
