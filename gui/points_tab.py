import tkinter as tk
from tkinter import ttk
from core.analysis import make_point_table, filter_table, error_summary
from .base import BaseTab


class PointsTab(BaseTab):
    def build(self):
        btns = ttk.Frame(self.tab); btns.pack(fill="x")
        ttk.Button(btns, text="Odśwież", command=self.refresh).pack(side="left", padx=6, pady=4)
        ttk.Label(btns, text="Pokaż:").pack(side="left", padx=(12, 0))
        self.filter_var = tk.StringVar(value="ALL")
        cb = ttk.Combobox(btns, textvariable=self.filter_var, values=["ALL", "TP", "TN", "FP", "FN"],
                          width=6, state="readonly")
        cb.pack(side="left", padx=6)
        cb.bind("<<ComboboxSelected>>", lambda e: self.refresh())
        self.lbl_summary = ttk.Label(btns, text="")
        self.lbl_summary.pack(side="left", padx=12)

        frame = ttk.LabelFrame(self.tab, text="Punkty", padding=6)
        frame.pack(fill="both", expand=True, pady=(6, 0))
        self.tree = ttk.Treeview(frame, columns=[], show="headings", height=20)
        ys = ttk.Scrollbar(frame, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=ys.set)
        self.tree.grid(row=0, column=0, sticky="nsew")
        ys.grid(row=0, column=1, sticky="ns")
        frame.columnconfigure(0, weight=1); frame.rowconfigure(0, weight=1)

    def refresh(self):
        df = make_point_table(self.state.points, self.state.line)
        summary = error_summary(df)
        self.lbl_summary.config(text="  ".join(f"{k}={v}" for k, v in summary.items()))

        dfp = filter_table(df, self.filter_var.get())
        cols = ["row_id", "x", "y", "y_true", "y_pred", "error_type"]
        self.tree.delete(*self.tree.get_children())
        self.tree["columns"] = cols
        for c in cols:
            self.tree.heading(c, text=c)
            self.tree.column(c, anchor="center", width=max(90, int(9 * len(c))))
        for _, row in dfp[cols].iterrows():
            values = [f"{v:.3f}" if isinstance(v, float) else str(v) for v in row.tolist()]
            self.tree.insert("", "end", values=values)
