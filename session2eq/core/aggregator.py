"""Per-channel assembly of EQ, dynamics and passband settings."""

import logging

from session2eq.constants import (
    COMPRESSOR_PROCESSOR,
    DEFAULT_ID_RANGE,
    DEFAULT_SNAPSHOT_ID,
    GATE_PROCESSOR,
)
from session2eq.core.models import (
    Channel,
    ChannelRecord,
    DynamicProcessor,
    EqualiserBand,
    Passband,
)
from session2eq.core.session import QueryError

logger = logging.getLogger(__name__)


CHANNEL_SQL = """
    SELECT id, snapshotId, channelNumber, name, gain
    FROM Channel
    WHERE id BETWEEN ? AND ?
      AND snapshotId = ?
    ORDER BY id
"""

EQ_SQL = """
    SELECT id, bandNumber, name, frequency, gain, qvalue
    FROM EqualiserBand
    WHERE channelNumber = ?
      AND snapshotId = ?
    ORDER BY bandNumber, id ASC
"""

COMPRESSOR_SQL = """
    SELECT threashold, ratio, gain, attack, release
    FROM DynamicProcessor
    WHERE channelNumber = ?
      AND snapshotId = ?
      AND processorNumber = ?
"""

GATE_SQL = """
    SELECT threashold, attack, hold, release
    FROM DynamicProcessor
    WHERE channelNumber = ?
      AND snapshotId = ?
      AND processorNumber = ?
"""

PASSBAND_SQL = """
    SELECT highPassEnabled, highPassFrequency, lowPassEnabled, lowPassFrequency
    FROM Passband
    WHERE channelNumber = ?
      AND snapshotId = ?
"""


def _safe_fetch(session, record_type, sql, params, facet):
    try:
        return session.fetch(record_type, sql, params)
    except QueryError as exc:
        logger.warning("%s query failed for params %s: %s", facet, params, exc)
        return []


def _first(records, facet, channel_number):
    if not records:
        return None
    if len(records) > 1:
        logger.debug(
            "channel %s has %d %s rows; using the first", channel_number, len(records), facet
        )
    return records[0]


def dedupe_bands(bands):
    """Keep the first row seen per band number, ordered by band number.

    Input order decides which duplicate wins, so callers pass rows sorted by
    (bandNumber, id) to keep the lowest id.
    """
    by_band = {}
    for band in bands:
        if band.band_number not in by_band:
            by_band[band.band_number] = band
    return sorted(
        by_band.values(),
        key=lambda b: (b.band_number is None, b.band_number or 0),
    )


def build_record(session, channel, snapshot_id=DEFAULT_SNAPSHOT_ID):
    ch_num = channel.channel_number

    eq_rows = _safe_fetch(session, EqualiserBand, EQ_SQL, (ch_num, snapshot_id), "EqualiserBand")
    comp_rows = _safe_fetch(
        session,
        DynamicProcessor,
        COMPRESSOR_SQL,
        (ch_num, snapshot_id, COMPRESSOR_PROCESSOR),
        "compressor",
    )
    gate_rows = _safe_fetch(
        session,
        DynamicProcessor,
        GATE_SQL,
        (ch_num, snapshot_id, GATE_PROCESSOR),
        "gate",
    )
    pass_rows = _safe_fetch(session, Passband, PASSBAND_SQL, (ch_num, snapshot_id), "Passband")

    return ChannelRecord(
        channel=channel,
        eq_bands=dedupe_bands(eq_rows),
        compressor=_first(comp_rows, "compressor", ch_num),
        gate=_first(gate_rows, "gate", ch_num),
        passband=_first(pass_rows, "passband", ch_num),
    )


def aggregate(session, id_range=DEFAULT_ID_RANGE, snapshot_id=DEFAULT_SNAPSHOT_ID):
    lo, hi = id_range
    channels = _safe_fetch(session, Channel, CHANNEL_SQL, (lo, hi, snapshot_id), "Channel")
    records = [build_record(session, ch, snapshot_id) for ch in channels]
    logger.info(
        "aggregated %d channels (ids %s-%s, snapshot %s)", len(records), lo, hi, snapshot_id
    )
    return records
