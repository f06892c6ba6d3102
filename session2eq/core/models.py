"""Shared data models."""

import math
from dataclasses import dataclass, field

import numpy as np


def _to_float(value):
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _to_int(value):
    number = _to_float(value)
    if number is None:
        return None
    return int(number)


def _to_bool(value):
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _to_text(value):
    if value is None:
        return None
    return str(value)


@dataclass
class Channel:
    id: int
    snapshot_id: int
    channel_number: int
    name: str | None
    gain: float | None

    @classmethod
    def from_row(cls, row):
        return cls(
            id=_to_int(row.get("id")),
            snapshot_id=_to_int(row.get("snapshotId")),
            channel_number=_to_int(row.get("channelNumber")),
            name=_to_text(row.get("name")),
            gain=_to_float(row.get("gain")),
        )


@dataclass
class EqualiserBand:
    id: int | None
    band_number: int | None
    name: str | None
    frequency: float | None
    gain: float | None
    qvalue: float | None

    @classmethod
    def from_row(cls, row):
        return cls(
            id=_to_int(row.get("id")),
            band_number=_to_int(row.get("bandNumber")),
            name=_to_text(row.get("name")),
            frequency=_to_float(row.get("frequency")),
            gain=_to_float(row.get("gain")),
            qvalue=_to_float(row.get("qvalue")),
        )


@dataclass
class DynamicProcessor:
    """Compressor (processor 0) or gate (processor 1) settings.

    Times are stored in seconds, levels in dB. Session files spell the
    threshold column ``threashold``.
    """

    threshold: float | None = None
    ratio: float | None = None
    gain: float | None = None
    attack: float | None = None
    hold: float | None = None
    release: float | None = None

    @classmethod
    def from_row(cls, row):
        return cls(
            threshold=_to_float(row.get("threashold")),
            ratio=_to_float(row.get("ratio")),
            gain=_to_float(row.get("gain")),
            attack=_to_float(row.get("attack")),
            hold=_to_float(row.get("hold")),
            release=_to_float(row.get("release")),
        )


@dataclass
class Passband:
    high_pass_enabled: bool
    high_pass_frequency: float | None
    low_pass_enabled: bool
    low_pass_frequency: float | None

    @classmethod
    def from_row(cls, row):
        return cls(
            high_pass_enabled=_to_bool(row.get("highPassEnabled")),
            high_pass_frequency=_to_float(row.get("highPassFrequency")),
            low_pass_enabled=_to_bool(row.get("lowPassEnabled")),
            low_pass_frequency=_to_float(row.get("lowPassFrequency")),
        )


@dataclass
class ChannelRecord:
    channel: Channel
    eq_bands: list[EqualiserBand] = field(default_factory=list)
    compressor: DynamicProcessor | None = None
    gate: DynamicProcessor | None = None
    passband: Passband | None = None


@dataclass
class BandCurve:
    band_number: int | None
    name: str | None
    f0: float
    gain: float
    q: float
    values: np.ndarray


@dataclass
class CurveResult:
    freqs: np.ndarray
    bands: list[BandCurve]
    combined: np.ndarray
    hpf: np.ndarray | None = None
    lpf: np.ndarray | None = None
    y_min: float = -6.0
    y_max: float = 6.0
