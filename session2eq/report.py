"""Plain-text channel report."""


def ms_from_sec(value):
    return f"{(value or 0.0) * 1000:.2f}"


def _num(value, fmt):
    if value is None:
        return "-"
    return format(value, fmt)


def _plain(value):
    if value is None:
        return "-"
    return f"{value:g}"


def format_compressor(comp):
    if comp is None:
        return ["  No compressor"]
    return [
        f"  Threshold: {_plain(comp.threshold)} dB",
        f"  Ratio: {_plain(comp.ratio)}",
        f"  Makeup/Gain: {_plain(comp.gain)} dB",
        f"  Attack: {ms_from_sec(comp.attack)} ms",
        f"  Release: {ms_from_sec(comp.release)} ms",
    ]


def format_gate(gate):
    if gate is None:
        return ["  No gate"]
    return [
        f"  Threshold: {_plain(gate.threshold)} dB",
        f"  Attack: {ms_from_sec(gate.attack)} ms",
        f"  Hold: {ms_from_sec(gate.hold)} ms",
        f"  Release: {ms_from_sec(gate.release)} ms",
    ]


def format_passband(pb):
    if pb is None:
        return ["  No passband settings"]
    return [
        f"  HPF enabled: {'Yes' if pb.high_pass_enabled else 'No'}; "
        f"Frequency: {_plain(pb.high_pass_frequency)} Hz",
        f"  LPF enabled: {'Yes' if pb.low_pass_enabled else 'No'}; "
        f"Frequency: {_plain(pb.low_pass_frequency)} Hz",
    ]


def format_eq(bands):
    if not bands:
        return ["  No EQ bands"]
    lines = [f"  {'Band':<10} {'Freq (Hz)':>10} {'Gain (dB)':>10} {'Q':>6}"]
    for b in bands:
        lines.append(
            f"  {(b.name or '-'):<10} {_plain(b.frequency):>10} "
            f"{_num(b.gain, '.2f'):>10} {_num(b.qvalue, '.2f'):>6}"
        )
    return lines


def format_record(record):
    ch = record.channel
    lines = [
        f"Channel {ch.channel_number} - {ch.name or '(unnamed)'}",
        f"  ID: {ch.id} | snapshotId: {ch.snapshot_id}",
        f"  Gain: {_num(ch.gain, '.6f')} dB",
        "Compressor",
        *format_compressor(record.compressor),
        "Gate",
        *format_gate(record.gate),
        "Passband (HPF / LPF)",
        *format_passband(record.passband),
        "EQ Bands",
        *format_eq(record.eq_bands),
    ]
    return "\n".join(lines)


def format_report(records):
    if not records:
        return "No channels found for the requested range/snapshot."
    return "\n\n".join(format_record(rec) for rec in records)
