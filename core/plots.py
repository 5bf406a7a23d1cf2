import logging
import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import Circle
from matplotlib.backends.backend_agg import FigureCanvasAgg
from .surface import Surface
from .render import render
from .state import COLOR_BG

logger = logging.getLogger(__name__)


class FigureSurface(Surface):
    """Surface backed by a matplotlib Figure; axes span the whole figure in pixel units (y down)."""

    def __init__(self, width=800, height=600, dpi=100, background=COLOR_BG):
        self._w, self._h = int(width), int(height)
        self.background = background
        self.fig = Figure(figsize=(self._w / dpi, self._h / dpi), dpi=dpi)
        self.ax = self.fig.add_axes([0, 0, 1, 1])
        self.clear()

    @property
    def width(self):
        return self._w

    @property
    def height(self):
        return self._h

    def clear(self):
        self.ax.clear()
        self.ax.set_xlim(0, self._w)
        self.ax.set_ylim(self._h, 0)
        self.ax.set_facecolor(self.background)
        self.ax.set_axis_off()
        self.fig.set_facecolor(self.background)

    def circle(self, x, y, r, fill, outline=None, width=1):
        self.ax.add_patch(Circle((x, y), r, facecolor=fill,
                                 edgecolor=outline or "none", linewidth=width if outline else 0))

    def line(self, x1, y1, x2, y2, color, width=1):
        self.ax.plot([x1, x2], [y1, y2], color=color, linewidth=width, solid_capstyle="round")

    def text(self, x, y, text, color):
        self.ax.text(x, y, text, color=color, fontsize=9, ha="center", va="center")


def plot_points(points, line, width=800, height=600):
    surface = FigureSurface(width, height)
    render(surface, points, line)
    return surface.fig


def save_snapshot(points, line, path, width=800, height=600):
    fig = plot_points(points, line, width, height)
    FigureCanvasAgg(fig).print_png(path)
    logger.info("Snapshot saved to %s", path)
    return path


def plot_cm_metrics(cm, metrics):
    fig = Figure(figsize=(7.5, 4.5), dpi=100)
    ax = fig.add_subplot(121)
    mat = cm.as_matrix()
    im = ax.imshow(mat, interpolation="nearest", cmap="Blues")
    ax.set_title(f"Macierz pomyłek (n={cm.total})")
    ax.set_xticks([0, 1], ["Pred. (-)", "Pred. (+)"])
    ax.set_yticks([0, 1], ["Negatyw", "Pozytyw"])
    names = np.array([["TN", "FP"], ["FN", "TP"]])
    for (i, j), v in np.ndenumerate(mat):
        ax.text(j, i, f"{names[i, j]}\n{v}", ha="center", va="center", color="black")
    fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04)

    ax2 = fig.add_subplot(122)
    values = [("Accuracy", metrics.accuracy), ("Precision", metrics.precision),
              ("Recall", metrics.recall), ("F1", metrics.f1)]
    ax2.bar([v[0] for v in values], [v[1] for v in values])
    ax2.set_ylim(0, 1); ax2.set_title("Metryki")
    ax2.tick_params(axis='x', rotation=20)
    fig.tight_layout()
    return fig
