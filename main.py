import argparse
import logging
import tkinter as tk
from tkinter import ttk

from core.config import Settings, parse_log_level, setup_logging
from core.controller import SessionController
from gui.playground_tab import PlaygroundTab
from gui.points_tab import PointsTab
from gui.plots_tab import PlotsTab

logger = logging.getLogger(__name__)


class MainApp(tk.Tk):
    def __init__(self, settings: Settings):
        super().__init__()
        self.title("Decision Line Lab – macierz pomyłek na żywo")
        self.geometry(settings.geometry)
        self.minsize(900, 600)

        try:
            style = ttk.Style(self)
            style.theme_use("clam")
        except tk.TclError:
            logger.debug("Theme 'clam' not available")

        self.controller = SessionController(settings, listener=self._on_state)
        self.tabs = []
        self._build_ui()
        self.controller.regenerate()

    def _build_ui(self):
        self.nb = ttk.Notebook(self)
        self.nb.pack(fill="both", expand=True, padx=10, pady=10)

        self.tab_play = ttk.Frame(self.nb, padding=10)
        self.tab_points = ttk.Frame(self.nb, padding=10)
        self.tab_plots = ttk.Frame(self.nb, padding=10)

        self.nb.add(self.tab_play, text="Granica decyzyjna")
        self.nb.add(self.tab_points, text="Punkty (FP/FN)")
        self.nb.add(self.tab_plots, text="Wykresy")

        # zakładki
        self.play_tab = PlaygroundTab(self, self.tab_play)
        self.points_tab = PointsTab(self, self.tab_points)
        self.plots_tab = PlotsTab(self, self.tab_plots)

        # budowa UI
        self.play_tab.build()
        self.points_tab.build()
        self.plots_tab.build()
        self.tabs = [self.play_tab]

        self.nb.bind("<<NotebookTabChanged>>", self._on_tab_changed)

    def _on_state(self, state):
        for tab in self.tabs:
            tab.on_state(state)

    def _on_tab_changed(self, _event):
        if self.nb.select() == str(self.tab_points):
            self.points_tab.refresh()


def parse_args(argv=None, settings=None):
    settings = settings or Settings.from_env()
    p = argparse.ArgumentParser(description="Interactive decision line and confusion matrix playground.")
    p.add_argument("--noise", type=int, default=settings.noise, help="initial noise level (0-100)")
    p.add_argument("--seed", type=int, default=settings.seed, help="random seed for reproducible data")
    p.add_argument("--log-level", type=parse_log_level, default=settings.log_level)
    args = p.parse_args(argv)
    settings.noise, settings.seed, settings.log_level = args.noise, args.seed, args.log_level
    return settings


def main(argv=None):
    settings = parse_args(argv)
    setup_logging(settings.log_level)
    logger.info("Starting with noise=%s seed=%s", settings.noise, settings.seed)
    app = MainApp(settings)
    app.mainloop()


if __name__ == "__main__":
    main()
