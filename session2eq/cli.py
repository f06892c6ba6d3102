"""CLI entry and command wiring."""

import argparse
import logging
import sys

from session2eq.commands import channels_cmd, export_cmd, graph_cmd, table_cmd
from session2eq.constants import BROWSABLE_TABLES, DEFAULT_SNAPSHOT_ID, ExitCode


COMMANDS = {
    "channels": channels_cmd.run,
    "graph": graph_cmd.run,
    "export": export_cmd.run,
    "table": table_cmd.run,
}


def _add_session_args(p):
    p.add_argument("session_pos", nargs="?", help="Path to .session file")
    p.add_argument("--session", help="Path to .session file")
    p.add_argument("--snapshot-id", type=int, default=DEFAULT_SNAPSHOT_ID)


def _add_range_arg(p):
    p.add_argument("--id-range", type=int, nargs=2, metavar=("MIN", "MAX"), help="Channel.id range")


def build_parser():
    parser = argparse.ArgumentParser(prog="session2eq")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command")

    p_channels = sub.add_parser("channels", help="Show per-channel settings")
    _add_session_args(p_channels)
    _add_range_arg(p_channels)
    p_channels.add_argument("--json", action="store_true")

    p_graph = sub.add_parser("graph", help="Render EQ response graphs")
    _add_session_args(p_graph)
    _add_range_arg(p_graph)
    p_graph.add_argument("--channel", type=int, help="Only this channel number")
    p_graph.add_argument("--outdir", help="Output directory")
    p_graph.add_argument("--format", choices=("svg", "png"), default="svg")
    p_graph.add_argument("--width", type=int, default=720)
    p_graph.add_argument("--height", type=int, default=200)

    p_export = sub.add_parser("export", help="Export channels, curves and graphs")
    _add_session_args(p_export)
    _add_range_arg(p_export)
    p_export.add_argument("--outdir", help="Output directory")

    p_table = sub.add_parser("table", help="Browse one table for a channel")
    _add_session_args(p_table)
    p_table.add_argument("--table", choices=BROWSABLE_TABLES, default="Channel")
    p_table.add_argument("--channel", type=int, default=1, help="channelNumber filter")
    p_table.add_argument("--list", action="store_true", help="List tables in the session")
    p_table.add_argument("--json", action="store_true")

    return parser


GLOBAL_FLAGS = ("-v", "--verbose")


def expand_session_shorthand(argv):
    """Rewrite `session2eq show.session [opts]` to the `channels` command.

    Global flags may appear anywhere on the line; they are moved ahead of the
    subcommand so the top-level parser sees them.
    """
    flags = [a for a in argv if a in GLOBAL_FLAGS]
    rest = [a for a in argv if a not in GLOBAL_FLAGS]
    if not rest or rest[0] in COMMANDS or rest[0].startswith("-"):
        return [*flags, *rest]
    return [*flags, "channels", "--session", rest[0], *rest[1:]]


def configure_logging(verbose=False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(expand_session_shorthand(list(argv)))
    configure_logging(args.verbose)

    if not args.command:
        parser.print_help()
        return ExitCode.USAGE

    return COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
