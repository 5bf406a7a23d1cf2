import logging
from tkinter import messagebox
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg, NavigationToolbar2Tk

logger = logging.getLogger(__name__)


class BaseTab:
    def __init__(self, app, tab):
        self.app = app
        self.controller = app.controller
        self.state = app.controller.state
        self.root = app
        self.tab = tab

    def on_state(self, state):
        """Called after every state change; tabs that mirror the state override it."""

    def info(self, title, text):
        messagebox.showinfo(title, text, parent=self.root)

    def warn(self, title, text):
        messagebox.showwarning(title, text, parent=self.root)

    def error(self, title, text):
        logger.error("%s: %s", title, text)
        messagebox.showerror(title, text, parent=self.root)

    def draw_figure(self, fig, plot_area, toolbar_area):
        # czyść
        for child in plot_area.winfo_children():
            child.destroy()
        for child in toolbar_area.winfo_children():
            child.destroy()
        canvas = FigureCanvasTkAgg(fig, master=plot_area)
        canvas.draw()
        widget = canvas.get_tk_widget()
        widget.pack(fill="both", expand=True)
        toolbar = NavigationToolbar2Tk(canvas, toolbar_area)
        toolbar.update()
