import logging
from tkinter import ttk, filedialog
from core.plots import plot_cm_metrics, save_snapshot
from .base import BaseTab

logger = logging.getLogger(__name__)


class PlotsTab(BaseTab):
    def build(self):
        top = ttk.Frame(self.tab); top.pack(fill="x")
        ttk.Button(top, text="Macierz + metryki", command=self._cm).pack(side="left", padx=6, pady=4)
        ttk.Button(top, text="Zapisz PNG…", command=self._save_png).pack(side="left", padx=6, pady=4)

        self.toolbar_area = ttk.Frame(self.tab); self.toolbar_area.pack(fill="x")
        self.plot_area = ttk.Frame(self.tab); self.plot_area.pack(fill="both", expand=True, pady=(4, 0))

    def _cm(self):
        if self.state.confusion is None:
            self.warn("Uwaga", "Brak danych – najpierw wylosuj punkty.")
            return
        fig = plot_cm_metrics(self.state.confusion, self.state.metrics)
        self.draw_figure(fig, self.plot_area, self.toolbar_area)

    def _save_png(self):
        path = filedialog.asksaveasfilename(defaultextension=".png",
                                            filetypes=[("PNG", "*.png"), ("All files", "*.*")],
                                            parent=self.root)
        if not path:
            return
        w = max(self.state.width, 200); h = max(self.state.height, 200)
        try:
            save_snapshot(self.state.points, self.state.line, path, w, h)
        except OSError as e:
            logger.exception("Snapshot export failed")
            self.error("Błąd", f"Nie udało się zapisać obrazu: {e}")
            return
        self.info("OK", f"Zapisano obraz do:\n{path}")
