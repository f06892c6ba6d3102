"""Shared constants and defaults."""

from enum import IntEnum


class ExitCode(IntEnum):
    OK = 0
    USAGE = 2
    RUNTIME_ERROR = 10


APP_NAME = "session2eq"

DEFAULT_SNAPSHOT_ID = 10000
DEFAULT_ID_RANGE = (21, 116)

COMPRESSOR_PROCESSOR = 0
GATE_PROCESSOR = 1

BROWSABLE_TABLES = ("Channel", "EqualiserBand", "DynamicProcessor", "Passband")

CURVE_POINTS = 320
CURVE_FMIN = 20.0
CURVE_FMAX = 20000.0
