"""Graph command."""

from pathlib import Path

from session2eq.commands.common import resolve_id_range, session_path_from_args
from session2eq.constants import ExitCode
from session2eq.core.aggregator import aggregate
from session2eq.core.session import LoadError, load_path
from session2eq.export_pipeline import channel_curves, write_graphs
from session2eq.render.scene import Viewport


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

    if args.channel is not None:
        records = [r for r in records if r.channel.channel_number == args.channel]
        if not records:
            print(f"error: channel {args.channel} not found")
            return ExitCode.USAGE

    for rec in records:
        if not rec.eq_bands:
            print(f"channel {rec.channel.channel_number}: No EQ graph - no bands")

    outdir = args.outdir or str(session_path.parent / f"{session_path.stem}_graphs")
    viewport = Viewport(width=args.width, height=args.height)
    try:
        written = write_graphs(channel_curves(records), outdir, formats=(args.format,), viewport=viewport)
    except OSError as exc:
        print(f"error: graph export failed: {exc}")
        return ExitCode.RUNTIME_ERROR

    for path in written:
        print(f"  {Path(path)}")
    print(f"graph ok: {len(written)} files")
    return ExitCode.OK
