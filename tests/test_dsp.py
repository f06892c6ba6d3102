import math
import unittest

import numpy as np

from session2eq.core.dsp import (
    band_contribution,
    compute_curve,
    frequency_axis,
    highpass_response,
    lowpass_response,
    value_range,
)
from session2eq.core.models import EqualiserBand, Passband


def band(frequency=1000.0, gain=6.0, q=1.0, number=1, name="B1"):
    return EqualiserBand(number, number, name, frequency, gain, q)


class FrequencyAxisTests(unittest.TestCase):
    def test_log_spaced_between_limits(self):
        freqs = frequency_axis()
        self.assertEqual(len(freqs), 320)
        self.assertAlmostEqual(freqs[0], 20.0)
        self.assertAlmostEqual(freqs[-1], 20000.0, places=6)
        ratios = freqs[1:] / freqs[:-1]
        self.assertTrue(np.allclose(ratios, ratios[0]))


class BandCurveTests(unittest.TestCase):
    def test_zero_gain_is_flat(self):
        curve = compute_curve([band(frequency=250.0, gain=0.0, q=3.0)])
        self.assertTrue(np.all(curve.combined == 0.0))

    def test_peak_at_nearest_sample(self):
        curve = compute_curve([band(frequency=1000.0, gain=6.0, q=1.0)])
        peak = int(np.argmax(curve.combined))
        nearest = int(np.argmin(np.abs(np.log10(curve.freqs) - 3.0)))
        self.assertEqual(peak, nearest)
        self.assertAlmostEqual(curve.combined[peak], 6.0, places=3)
        self.assertTrue(np.all(np.diff(curve.combined[: peak + 1]) > 0))
        self.assertTrue(np.all(np.diff(curve.combined[peak:]) < 0))

    def test_gaussian_width_follows_q(self):
        freqs = np.array([1000.0, 10 ** 3.5])
        values = band_contribution(freqs, 1000.0, 6.0, 1.0)
        # sigma is 0.5 decades for Q=1, so half a decade away is one sigma
        self.assertAlmostEqual(values[1], 6.0 * math.exp(-0.5))

    def test_non_positive_q_treated_as_one(self):
        freqs = frequency_axis()
        expected = band_contribution(freqs, 500.0, 3.0, 1.0)
        for q in (0.0, -2.0, None):
            self.assertTrue(np.allclose(band_contribution(freqs, 500.0, 3.0, q), expected))

    def test_missing_frequency_and_gain_defaults(self):
        curve = compute_curve([band(frequency=None, gain=None, q=None)])
        self.assertEqual(curve.bands[0].f0, 1000.0)
        self.assertEqual(curve.bands[0].gain, 0.0)
        self.assertEqual(curve.bands[0].q, 1.0)
        self.assertTrue(np.all(curve.combined == 0.0))

    def test_combined_is_sum_of_bands(self):
        curve = compute_curve([band(100.0, 3.0, 1.0, 1), band(5000.0, -4.0, 2.0, 2)])
        self.assertTrue(np.allclose(curve.combined, curve.bands[0].values + curve.bands[1].values))

    def test_no_bands_means_no_graph(self):
        self.assertIsNone(compute_curve([], Passband(True, 100.0, True, 10000.0)))

    def test_idempotent(self):
        bands = [band(120.0, 4.0, 0.8, 1), band(3000.0, -2.5, 1.5, 2)]
        pb = Passband(True, 80.0, True, 12000.0)
        a = compute_curve(bands, pb)
        b = compute_curve(bands, pb)
        self.assertTrue(np.array_equal(a.combined, b.combined))
        self.assertTrue(np.array_equal(a.hpf, b.hpf))
        self.assertEqual((a.y_min, a.y_max), (b.y_min, b.y_max))


class PassbandCurveTests(unittest.TestCase):
    def test_highpass_is_minus_three_db_at_cutoff(self):
        value = highpass_response(np.array([100.0]), 100.0)[0]
        self.assertAlmostEqual(value, 20 * math.log10(100 / math.sqrt(100**2 + 100**2)))
        self.assertAlmostEqual(value, -3.0103, places=4)

    def test_lowpass_is_minus_three_db_at_cutoff(self):
        self.assertAlmostEqual(lowpass_response(np.array([8000.0]), 8000.0)[0], -3.0103, places=4)

    def test_disabled_filters_omitted(self):
        curve = compute_curve([band()], Passband(False, 100.0, False, 10000.0))
        self.assertIsNone(curve.hpf)
        self.assertIsNone(curve.lpf)

    def test_absent_passband_uses_bands_only(self):
        curve = compute_curve([band()], None)
        self.assertIsNone(curve.hpf)
        self.assertIsNone(curve.lpf)
        self.assertAlmostEqual(float(curve.combined.max()), 6.0, places=3)

    def test_enabled_filters_present(self):
        curve = compute_curve([band()], Passband(True, 100.0, True, 10000.0))
        self.assertEqual(len(curve.hpf), 320)
        self.assertLess(curve.hpf[0], curve.hpf[-1])
        self.assertGreater(curve.lpf[0], curve.lpf[-1])


class ValueRangeTests(unittest.TestCase):
    def test_minimum_pad_is_six(self):
        self.assertEqual(value_range([np.zeros(4)]), (-6.0, 6.0))

    def test_pad_scales_with_span(self):
        lo, hi = value_range([np.array([-100.0, 0.0])])
        self.assertAlmostEqual(lo, -112.0)
        self.assertAlmostEqual(hi, 12.0)

    def test_non_finite_values_ignored(self):
        lo, hi = value_range([np.array([-np.inf, 1.0, 2.0, np.nan]), None])
        self.assertEqual((lo, hi), (1.0 - 6.0, 2.0 + 6.0))

    def test_curve_range_covers_filters(self):
        curve = compute_curve([band(gain=2.0)], Passband(True, 1000.0, False, None))
        self.assertLessEqual(curve.y_min, float(curve.hpf.min()) - 6.0)
        self.assertGreaterEqual(curve.y_max, 2.0)


if __name__ == "__main__":
    unittest.main()
