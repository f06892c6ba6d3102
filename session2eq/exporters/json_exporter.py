"""JSON exporter for aggregated channel records."""

from dataclasses import asdict
import json


def records_to_payload(records):
    return [asdict(rec) for rec in records]


def export_json(records, outpath):
    with open(outpath, "w") as f:
        json.dump(records_to_payload(records), f, indent=2)
    return outpath
