"""Shared command helpers."""

from pathlib import Path

from session2eq.constants import DEFAULT_ID_RANGE


def session_path_from_args(args):
    """Path of the session file named on the command line, if it is a file."""
    text = getattr(args, "session", None) or getattr(args, "session_pos", None)
    if not text:
        return None
    path = Path(text).expanduser()
    return path if path.is_file() else None


def resolve_id_range(args):
    id_range = getattr(args, "id_range", None)
    if not id_range:
        return DEFAULT_ID_RANGE
    lo, hi = id_range
    return (min(lo, hi), max(lo, hi))
