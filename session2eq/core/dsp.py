"""EQ and passband response curves for display.

Bands are drawn as Gaussian bumps in log-frequency and the passband filters
as first-order magnitude responses. This is a visualization model only: the
Q-to-width mapping (sigma = 0.5 / Q) is a placeholder kept for output parity
with existing reports, not an acoustic filter design.
"""

import math

import numpy as np

from session2eq.constants import CURVE_FMAX, CURVE_FMIN, CURVE_POINTS
from session2eq.core.models import BandCurve, CurveResult


DEFAULT_BAND_FREQ = 1000.0
DEFAULT_HPF_FREQ = 20.0
DEFAULT_LPF_FREQ = 20000.0
MIN_Q = 1e-4
MIN_PAD_DB = 6.0
PAD_FRACTION = 0.12


def frequency_axis(n=CURVE_POINTS, fmin=CURVE_FMIN, fmax=CURVE_FMAX):
    lo, hi = math.log10(fmin), math.log10(fmax)
    t = np.arange(n, dtype=float) / (n - 1)
    return 10 ** (lo + t * (hi - lo))


def _safe_q(q):
    if q is None or not math.isfinite(q) or q <= 0:
        q = 1.0
    return max(q, MIN_Q)


def band_contribution(freqs, f0, gain_db, q):
    sigma = 0.5 / _safe_q(q)
    return gain_db * np.exp(-0.5 * ((np.log10(freqs) - math.log10(f0)) / sigma) ** 2)


def highpass_response(freqs, f0):
    return 20 * np.log10(freqs / np.sqrt(freqs**2 + f0**2))


def lowpass_response(freqs, f0):
    return 20 * np.log10(f0 / np.sqrt(freqs**2 + f0**2))


def value_range(series):
    """Padded (min, max) across all series, ignoring non-finite samples."""
    finite = [s[np.isfinite(s)] for s in series if s is not None]
    finite = [s for s in finite if s.size]
    if finite:
        values = np.concatenate(finite)
        lo, hi = float(values.min()), float(values.max())
    else:
        lo = hi = 0.0
    pad = max(MIN_PAD_DB, (hi - lo) * PAD_FRACTION)
    return lo - pad, hi + pad


def compute_curve(eq_bands, passband=None, freqs=None):
    """Return the sampled response for a channel, or None without EQ bands."""
    if not eq_bands:
        return None
    if freqs is None:
        freqs = frequency_axis()

    bands = []
    for b in eq_bands:
        f0 = b.frequency if b.frequency and b.frequency > 0 else DEFAULT_BAND_FREQ
        gain = b.gain or 0.0
        q = b.qvalue if b.qvalue is not None else 1.0
        bands.append(
            BandCurve(
                band_number=b.band_number,
                name=b.name,
                f0=f0,
                gain=gain,
                q=q,
                values=band_contribution(freqs, f0, gain, q),
            )
        )

    combined = np.zeros_like(freqs)
    for band in bands:
        combined = combined + band.values

    hpf = lpf = None
    if passband is not None and passband.high_pass_enabled:
        hpf = highpass_response(freqs, passband.high_pass_frequency or DEFAULT_HPF_FREQ)
    if passband is not None and passband.low_pass_enabled:
        lpf = lowpass_response(freqs, passband.low_pass_frequency or DEFAULT_LPF_FREQ)

    y_min, y_max = value_range([combined, *(b.values for b in bands), hpf, lpf])
    return CurveResult(
        freqs=freqs,
        bands=bands,
        combined=combined,
        hpf=hpf,
        lpf=lpf,
        y_min=y_min,
        y_max=y_max,
    )
