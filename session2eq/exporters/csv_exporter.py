"""CSV exporter for combined channel responses."""

import csv


def _column_name(record):
    ch = record.channel
    name = (ch.name or "").strip() or "unnamed"
    return f"ch{ch.channel_number}_{name}_dB"


def export_csv(curves, outpath):
    """Write one combined-response column per channel.

    ``curves`` is a list of (ChannelRecord, CurveResult) pairs; channels
    without a curve are skipped.
    """
    curves = [(rec, curve) for rec, curve in curves if curve is not None]
    with open(outpath, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["frequency_hz"] + [_column_name(rec) for rec, _ in curves])
        if not curves:
            return outpath
        freqs = curves[0][1].freqs
        for i in range(len(freqs)):
            row = [f"{freqs[i]:.2f}"]
            for _, curve in curves:
                row.append(f"{curve.combined[i]:.4f}")
            writer.writerow(row)
    return outpath
