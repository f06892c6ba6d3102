import unittest

from session2eq.core.aggregator import aggregate, dedupe_bands
from session2eq.core.models import EqualiserBand
from session2eq.core.session import load

from session_fixture import build_session_bytes, sample_session_bytes


def band(id_, band_number, name):
    return EqualiserBand(id_, band_number, name, 1000.0, 0.0, 1.0)


class DedupeBandsTests(unittest.TestCase):
    def test_first_seen_row_wins(self):
        bands = [band(5, 1, "Low"), band(7, 1, "LowDup"), band(6, 2, "Mid")]
        result = dedupe_bands(bands)
        self.assertEqual([b.name for b in result], ["Low", "Mid"])

    def test_output_sorted_by_band_number(self):
        bands = [band(3, 4, "D"), band(1, 2, "B"), band(2, 1, "A")]
        self.assertEqual([b.band_number for b in dedupe_bands(bands)], [1, 2, 4])


class AggregateTests(unittest.TestCase):
    def setUp(self):
        self.session = load(sample_session_bytes())
        self.records = aggregate(self.session)

    def tearDown(self):
        self.session.close()

    def test_only_channels_in_range_and_snapshot_sorted_by_id(self):
        self.assertEqual([r.channel.id for r in self.records], [21, 22])

    def test_duplicate_band_keeps_lowest_id(self):
        kick = self.records[0]
        self.assertEqual([b.band_number for b in kick.eq_bands], [1, 2, 3])
        self.assertEqual(kick.eq_bands[0].id, 5)
        self.assertEqual(kick.eq_bands[0].name, "Low")

    def test_other_snapshot_rows_are_ignored(self):
        names = [b.name for b in self.records[0].eq_bands]
        self.assertNotIn("WrongSnapshot", names)

    def test_compressor_and_gate_by_processor_number(self):
        kick = self.records[0]
        self.assertEqual(kick.compressor.threshold, -20.0)
        self.assertEqual(kick.compressor.ratio, 4.0)
        self.assertEqual(kick.gate.threshold, -40.0)
        self.assertEqual(kick.gate.hold, 0.05)

    def test_passband_coerced(self):
        pb = self.records[0].passband
        self.assertIs(pb.high_pass_enabled, True)
        self.assertIs(pb.low_pass_enabled, False)
        self.assertEqual(pb.high_pass_frequency, 100.0)

    def test_partial_record_has_absent_facets(self):
        bass = self.records[1]
        self.assertEqual([b.name for b in bass.eq_bands], ["BassLow"])
        self.assertIsNone(bass.compressor)
        self.assertIsNone(bass.gate)
        self.assertIsNone(bass.passband)

    def test_custom_range_and_snapshot(self):
        records = aggregate(self.session, id_range=(23, 23), snapshot_id=20000)
        self.assertEqual([r.channel.name for r in records], ["OtherSnapshot"])


class IdRangeTests(unittest.TestCase):
    def test_range_edges_are_inclusive(self):
        data = build_session_bytes(
            channels=[
                (117, 10000, 4, "After", 0.0),
                (20, 10000, 1, "Before", 0.0),
                (116, 10000, 3, "Last", 0.0),
                (21, 10000, 2, "First", 0.0),
            ]
        )
        with load(data) as session:
            records = aggregate(session)
        self.assertEqual([r.channel.id for r in records], [21, 116])


class FacetFailureTests(unittest.TestCase):
    def test_missing_table_does_not_abort_channel(self):
        data = build_session_bytes(
            channels=[(21, 10000, 1, "Vox", 0.0), (22, 10000, 2, "Gtr", 0.0)],
            bands=[(1, 10000, 1, 1, "Low", 120.0, 2.0, 1.0)],
            tables=("Channel", "EqualiserBand"),
        )
        with load(data) as session:
            with self.assertLogs("session2eq.core.aggregator", level="WARNING"):
                records = aggregate(session)

        self.assertEqual(len(records), 2)
        self.assertEqual(records[0].eq_bands[0].name, "Low")
        self.assertIsNone(records[0].compressor)
        self.assertIsNone(records[0].passband)
        self.assertEqual(records[1].eq_bands, [])

    def test_missing_channel_table_yields_no_records(self):
        data = build_session_bytes(tables=("Passband",))
        with load(data) as session:
            with self.assertLogs("session2eq.core.aggregator", level="WARNING"):
                self.assertEqual(aggregate(session), [])


if __name__ == "__main__":
    unittest.main()
