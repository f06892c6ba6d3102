"""High-level export orchestration."""

import logging
import os

from session2eq.constants import DEFAULT_ID_RANGE, DEFAULT_SNAPSHOT_ID
from session2eq.core.aggregator import aggregate
from session2eq.core.dsp import compute_curve
from session2eq.core.session import load_path
from session2eq.exporters.csv_exporter import export_csv
from session2eq.exporters.json_exporter import export_json
from session2eq.exporters.png_exporter import export_png
from session2eq.exporters.svg_exporter import export_svg
from session2eq.render.scene import Viewport, render

logger = logging.getLogger(__name__)


def channel_curves(records):
    return [(rec, compute_curve(rec.eq_bands, rec.passband)) for rec in records]


def graph_basename(record):
    ch = record.channel
    if ch.channel_number is None:
        return f"channel_id{ch.id}"
    return f"channel_{ch.channel_number:03d}"


def write_graphs(curves, outdir, formats=("svg", "png"), viewport=None):
    os.makedirs(outdir, exist_ok=True)
    written = []
    for rec, curve in curves:
        if curve is None:
            logger.info("channel %s has no EQ bands; no graph", rec.channel.channel_number)
            continue
        scene = render(curve, viewport=viewport or Viewport())
        base = os.path.join(outdir, graph_basename(rec))
        if "svg" in formats:
            written.append(export_svg(scene, f"{base}.svg"))
        if "png" in formats:
            written.append(export_png(scene, f"{base}.png"))
    return written


def run_export(
    filepath,
    outdir=None,
    id_range=DEFAULT_ID_RANGE,
    snapshot_id=DEFAULT_SNAPSHOT_ID,
    viewport=None,
):
    with load_path(filepath) as session:
        records = aggregate(session, id_range=id_range, snapshot_id=snapshot_id)

    print(f"\nAggregated {len(records)} channels (snapshot {snapshot_id}):")
    for rec in records:
        ch = rec.channel
        print(f"  {ch.channel_number}: {ch.name or '(unnamed)'} (id={ch.id}, bands={len(rec.eq_bands)})")

    base = os.path.splitext(os.path.basename(filepath))[0]
    if outdir is None:
        outdir = os.path.join(os.path.dirname(filepath) or ".", f"{base}_export")
    os.makedirs(outdir, exist_ok=True)

    print(f"\nExporting to {outdir}/\n")
    json_path = os.path.join(outdir, "channels.json")
    csv_path = os.path.join(outdir, "curves.csv")
    graphs_dir = os.path.join(outdir, "graphs")

    export_json(records, json_path)
    print(f"  Channels: {json_path}")

    curves = channel_curves(records)
    export_csv(curves, csv_path)
    print(f"  Curves CSV: {csv_path}")

    graphs = write_graphs(curves, graphs_dir, viewport=viewport)
    print(f"  Graphs: {len(graphs)} files in {graphs_dir}")

    print("\nDone!")
    return {
        "records": records,
        "outdir": outdir,
        "json_path": json_path,
        "csv_path": csv_path,
        "graphs": graphs,
    }
