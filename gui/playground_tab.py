import tkinter as tk
from tkinter import ttk
from core.render import render
from core.metrics import format_metrics
from core.state import COLOR_BG, COLOR_POSITIVE, COLOR_NEGATIVE, COLOR_FP, COLOR_FN
from .tk_surface import TkCanvasSurface
from .base import BaseTab


class PlaygroundTab(BaseTab):
    def build(self):
        paned = ttk.Panedwindow(self.tab, orient="horizontal")
        paned.pack(fill="both", expand=True)

        left = ttk.Frame(paned, padding=8)
        right = ttk.Frame(paned, padding=8)
        paned.add(left, weight=0)
        paned.add(right, weight=1)

        # Dane
        data = ttk.LabelFrame(left, text="Dane", padding=8)
        data.pack(fill="x")
        self.noise_var = tk.IntVar(value=self.state.noise)
        ttk.Label(data, text="Szum:").grid(row=0, column=0, sticky="w")
        ttk.Scale(data, from_=0, to=100, variable=self.noise_var, command=self._on_noise).grid(
            row=0, column=1, sticky="we", padx=6)
        self.noise_label = ttk.Label(data, text=str(self.state.noise), width=4)
        self.noise_label.grid(row=0, column=2, sticky="e")
        ttk.Button(data, text="Losuj ponownie (reset)", command=self.controller.reset).grid(
            row=1, column=0, columnspan=3, sticky="we", pady=(8, 0))
        data.columnconfigure(1, weight=1)

        # Macierz pomyłek
        cmf = ttk.LabelFrame(left, text="Macierz pomyłek", padding=8)
        cmf.pack(fill="x", pady=(8, 0))
        ttk.Label(cmf, text="").grid(row=0, column=0)
        ttk.Label(cmf, text="Pred. (+)").grid(row=0, column=1, padx=6)
        ttk.Label(cmf, text="Pred. (-)").grid(row=0, column=2, padx=6)
        ttk.Label(cmf, text="Rzecz. (+)").grid(row=1, column=0, sticky="w")
        ttk.Label(cmf, text="Rzecz. (-)").grid(row=2, column=0, sticky="w")
        self.cm_labels = {}
        for key, r, c in (("tp", 1, 1), ("fn", 1, 2), ("fp", 2, 1), ("tn", 2, 2)):
            box = ttk.Frame(cmf, padding=4, relief="groove")
            box.grid(row=r, column=c, sticky="nsew", padx=2, pady=2)
            ttk.Label(box, text=key.upper(), foreground="#666").pack()
            lbl = ttk.Label(box, text="0", font=("Segoe UI", 14, "bold"))
            lbl.pack()
            self.cm_labels[key] = lbl

        # Metryki
        mf = ttk.LabelFrame(left, text="Metryki", padding=8)
        mf.pack(fill="x", pady=(8, 0))
        self.metric_labels = {}
        for r, (key, name) in enumerate((("accuracy", "Accuracy"), ("precision", "Precision"),
                                         ("recall", "Recall"), ("f1", "F1 score"))):
            ttk.Label(mf, text=name + ":").grid(row=r, column=0, sticky="w", pady=2)
            lbl = ttk.Label(mf, text="-", font=("Segoe UI", 11, "bold"))
            lbl.grid(row=r, column=1, sticky="e", padx=(12, 0))
            self.metric_labels[key] = lbl
        mf.columnconfigure(1, weight=1)

        legend = ttk.LabelFrame(left, text="Legenda", padding=8)
        legend.pack(fill="x", pady=(8, 0))
        for text, color in (("Rzeczywista klasa 1", COLOR_POSITIVE), ("Rzeczywista klasa 0", COLOR_NEGATIVE),
                            ("Obwódka: FP", COLOR_FP), ("Obwódka: FN", COLOR_FN)):
            tk.Label(legend, text=text, fg=color, anchor="w").pack(fill="x")
        ttk.Label(left, text="Przeciągnij białe uchwyty, aby przesunąć granicę.",
                  foreground="#666", wraplength=220).pack(anchor="w", pady=(8, 0))

        # Płótno
        self.canvas = tk.Canvas(right, background=COLOR_BG, highlightthickness=0)
        self.canvas.pack(fill="both", expand=True)
        self.surface = TkCanvasSurface(self.canvas)

        self.canvas.bind("<Configure>", lambda e: self.controller.resize(e.width, e.height))
        self.canvas.bind("<ButtonPress-1>", lambda e: self.controller.press(e.x, e.y))
        self.canvas.bind("<B1-Motion>", lambda e: self.controller.move(e.x, e.y))
        # puszczenie przycisku kończy przeciąganie także poza płótnem
        self.root.bind_all("<ButtonRelease-1>", lambda e: self.controller.release(), add="+")

    def _on_noise(self, value):
        noise = int(round(float(value)))
        self.noise_label.config(text=str(noise))
        self.controller.set_noise(noise)

    def on_state(self, state):
        render(self.surface, state.points, state.line)
        if state.confusion is None:
            return
        for key, lbl in self.cm_labels.items():
            lbl.config(text=str(getattr(state.confusion, key)))
        for key, text in format_metrics(state.metrics).items():
            self.metric_labels[key].config(text=text)
