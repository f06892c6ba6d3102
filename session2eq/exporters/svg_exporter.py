"""SVG exporter for EQ graph scenes."""

from xml.sax.saxutils import escape


def _path_d(points):
    return " ".join(
        f"{'M' if i == 0 else 'L'} {x:.2f} {y:.2f}" for i, (x, y) in enumerate(points)
    )


def _path_element(path):
    dash = " ".join(f"{d:g}" for d in path.dash) if path.dash else "none"
    return (
        f'  <path d="{_path_d(path.points)}" stroke="{path.color}" '
        f'stroke-width="{path.width:g}" fill="none" stroke-dasharray="{dash}" />'
    )


def scene_to_svg(scene):
    vp = scene.viewport
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{vp.width}" height="{vp.height}" '
        f'viewBox="0 0 {vp.width} {vp.height}">',
        f'  <rect width="{vp.width}" height="{vp.height}" fill="#fbfbfb" rx="6" />',
    ]

    for g in scene.freq_grid:
        lines.append(
            f'  <line x1="{g.x1:.2f}" y1="{g.y1:.2f}" x2="{g.x2:.2f}" y2="{g.y2:.2f}" '
            'stroke="#eee" stroke-width="1" />'
        )
    for g in scene.value_grid:
        lines.append(
            f'  <line x1="{g.x1:.2f}" y1="{g.y1:.2f}" x2="{g.x2:.2f}" y2="{g.y2:.2f}" '
            'stroke="#f0f0f0" />'
        )

    for path in scene.band_paths:
        lines.append(_path_element(path))
    for m in scene.markers:
        lines.append(
            f'  <circle cx="{m.x:.2f}" cy="{m.y:.2f}" r="3" fill="{m.color}" '
            'stroke="#000" stroke-width="0.6" />'
        )
        lines.append(
            f'  <text x="{m.x:.2f}" y="{m.y - 8:.2f}" font-size="10" fill="#222" '
            f'text-anchor="middle">{escape(m.label)}</text>'
        )
    for path in scene.filter_paths:
        lines.append(_path_element(path))
    if scene.combined_path is not None:
        lines.append(_path_element(scene.combined_path))

    for g in scene.freq_grid:
        lines.append(
            f'  <line x1="{g.x2:.2f}" y1="{g.y2:.2f}" x2="{g.x2:.2f}" y2="{g.y2 + 6:.2f}" '
            'stroke="#333" />'
        )
        lines.append(
            f'  <text x="{g.label_x:.2f}" y="{g.label_y:.2f}" font-size="10" '
            f'text-anchor="middle">{g.label}</text>'
        )
    for g in scene.value_grid:
        lines.append(
            f'  <text x="{g.label_x:.2f}" y="{g.label_y:.2f}" font-size="10" '
            f'fill="#666">{g.label}</text>'
        )

    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def export_svg(scene, outpath):
    with open(outpath, "w") as f:
        f.write(scene_to_svg(scene))
    return outpath
