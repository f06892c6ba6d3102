"""PNG exporter for EQ graph scenes (matplotlib, headless)."""

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt


def draw_scene(scene, dpi=100):
    vp = scene.viewport
    fig = plt.figure(figsize=(vp.width / dpi, vp.height / dpi), dpi=dpi)
    ax = fig.add_axes([0, 0, 1, 1])
    # scene coordinates are pixels with y growing downward
    ax.set_xlim(0, vp.width)
    ax.set_ylim(vp.height, 0)
    ax.axis("off")
    fig.patch.set_facecolor("#fbfbfb")

    for g in scene.freq_grid:
        ax.plot([g.x1, g.x2], [g.y1, g.y2], color="#eeeeee", linewidth=1)
        ax.plot([g.x2, g.x2], [g.y2, g.y2 + 6], color="#333333", linewidth=1)
        ax.text(g.label_x, g.label_y, g.label, fontsize=7, ha="center", va="bottom")
    for g in scene.value_grid:
        ax.plot([g.x1, g.x2], [g.y1, g.y2], color="#f0f0f0", linewidth=1)
        ax.text(g.label_x, g.label_y, g.label, fontsize=7, color="#666666", va="bottom")

    for path in scene.paths():
        if not path.points:
            continue
        xs, ys = zip(*path.points)
        style = {"color": path.color, "linewidth": path.width}
        if path.dash:
            style["linestyle"] = (0, path.dash)
        ax.plot(xs, ys, **style)

    for m in scene.markers:
        ax.scatter([m.x], [m.y], s=18, color=m.color, edgecolors="#000000", linewidths=0.6, zorder=5)
        ax.text(m.x, m.y - 8, m.label, fontsize=7, color="#222222", ha="center")

    return fig


def export_png(scene, outpath, dpi=100):
    fig = draw_scene(scene, dpi=dpi)
    try:
        fig.savefig(outpath, dpi=dpi, facecolor=fig.get_facecolor())
    finally:
        plt.close(fig)
    return outpath
