from core.surface import Surface


class TkCanvasSurface(Surface):
    """Surface drawing onto a tk.Canvas; size follows the widget."""

    def __init__(self, canvas, font=("Segoe UI", 9)):
        self.canvas = canvas
        self.font = font

    @property
    def width(self):
        return self.canvas.winfo_width()

    @property
    def height(self):
        return self.canvas.winfo_height()

    def clear(self):
        self.canvas.delete("all")

    def circle(self, x, y, r, fill, outline=None, width=1):
        self.canvas.create_oval(x - r, y - r, x + r, y + r, fill=fill,
                                outline=outline or "", width=width if outline else 0)

    def line(self, x1, y1, x2, y2, color, width=1):
        self.canvas.create_line(x1, y1, x2, y2, fill=color, width=width, capstyle="round")

    def text(self, x, y, text, color):
        self.canvas.create_text(x, y, text=text, fill=color, font=self.font, anchor="center")
