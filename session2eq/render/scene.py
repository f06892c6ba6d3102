"""Map response curves onto a 2D drawing surface."""

import math
from dataclasses import dataclass, field

from session2eq.constants import CURVE_FMAX, CURVE_FMIN


FREQ_GRID_HZ = (20, 50, 100, 200, 500, 1000, 2000, 5000, 10000, 20000)
VALUE_GRID_LINES = 5

BAND_COLORS = ("#d62728", "#ff7f0e", "#2ca02c", "#1f77b4", "#9467bd", "#8c564b")
HPF_COLOR = "#6a0dad"
LPF_COLOR = "#8b4513"
COMBINED_COLOR = "#000000"
GRID_COLOR = "#eeeeee"


@dataclass
class Viewport:
    width: int = 720
    height: int = 200
    pad_left: int = 48
    pad_right: int = 12
    pad_top: int = 20
    pad_bottom: int = 30

    @property
    def inner_width(self):
        return self.width - self.pad_left - self.pad_right

    @property
    def inner_height(self):
        return self.height - self.pad_top - self.pad_bottom


@dataclass
class GridLine:
    x1: float
    y1: float
    x2: float
    y2: float
    label: str
    label_x: float
    label_y: float


@dataclass
class CurvePath:
    points: list[tuple[float, float]]
    color: str
    width: float
    dash: tuple[float, ...] | None = None


@dataclass
class Marker:
    x: float
    y: float
    color: str
    label: str


@dataclass
class Scene:
    viewport: Viewport
    freq_grid: list[GridLine] = field(default_factory=list)
    value_grid: list[GridLine] = field(default_factory=list)
    band_paths: list[CurvePath] = field(default_factory=list)
    markers: list[Marker] = field(default_factory=list)
    filter_paths: list[CurvePath] = field(default_factory=list)
    combined_path: CurvePath | None = None

    def paths(self):
        """All curves in drawing order, combined response last."""
        out = [*self.band_paths, *self.filter_paths]
        if self.combined_path is not None:
            out.append(self.combined_path)
        return out


class CoordinateMap:
    def __init__(self, viewport, y_min, y_max, fmin=CURVE_FMIN, fmax=CURVE_FMAX):
        self.viewport = viewport
        self.y_min = y_min
        self.y_max = y_max
        self._log_min = math.log10(fmin)
        self._log_span = math.log10(fmax) - self._log_min

    def x(self, freq):
        t = (math.log10(freq) - self._log_min) / self._log_span
        return self.viewport.pad_left + t * self.viewport.inner_width

    def y(self, value):
        t = (value - self.y_min) / (self.y_max - self.y_min)
        return self.viewport.pad_top + (1 - t) * self.viewport.inner_height


def format_freq(freq):
    if freq >= 1000:
        return f"{freq / 1000:g}k"
    return f"{freq:g}"


def _path(cmap, freqs, values, color, width, dash=None):
    points = [
        (cmap.x(float(f)), cmap.y(float(v)))
        for f, v in zip(freqs, values)
        if math.isfinite(v)
    ]
    return CurvePath(points=points, color=color, width=width, dash=dash)


def render(curve, freqs=None, viewport=None):
    viewport = viewport or Viewport()
    if freqs is None:
        freqs = curve.freqs
    cmap = CoordinateMap(viewport, curve.y_min, curve.y_max)
    top = viewport.pad_top
    bottom = viewport.pad_top + viewport.inner_height
    left = viewport.pad_left
    right = viewport.pad_left + viewport.inner_width

    scene = Scene(viewport=viewport)
    for f in FREQ_GRID_HZ:
        x = cmap.x(f)
        scene.freq_grid.append(
            GridLine(x, top, x, bottom, format_freq(f), label_x=x, label_y=bottom + 20)
        )

    for i in range(VALUE_GRID_LINES):
        v = curve.y_min + (i / (VALUE_GRID_LINES - 1)) * (curve.y_max - curve.y_min)
        y = cmap.y(v)
        scene.value_grid.append(GridLine(left, y, right, y, f"{v:.1f}", label_x=6, label_y=y + 4))

    for idx, band in enumerate(curve.bands):
        color = BAND_COLORS[idx % len(BAND_COLORS)]
        scene.band_paths.append(_path(cmap, freqs, band.values, color, 1.3, dash=(4, 4)))
        scene.markers.append(
            Marker(cmap.x(band.f0), cmap.y(band.gain), color, band.name or "")
        )

    if curve.hpf is not None:
        scene.filter_paths.append(_path(cmap, freqs, curve.hpf, HPF_COLOR, 1.2, dash=(2, 3)))
    if curve.lpf is not None:
        scene.filter_paths.append(_path(cmap, freqs, curve.lpf, LPF_COLOR, 1.2, dash=(2, 3)))

    scene.combined_path = _path(cmap, freqs, curve.combined, COMBINED_COLOR, 2.4)
    return scene
