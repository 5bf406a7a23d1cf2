from dataclasses import dataclass, field
from enum import Enum

TOTAL_POINTS = 200
DRAG_TOLERANCE = 0.05  # w jednostkach znormalizowanych
INITIAL_LINE = (0.2, 0.8, 0.8, 0.2)

# rysowanie (px)
POINT_RADIUS = 5
HANDLE_RADIUS = 8
LABEL_OFFSET = 30

COLOR_BG = "#0f172a"
COLOR_POSITIVE = "#10b981"
COLOR_NEGATIVE = "#3b82f6"
COLOR_FP = "#f43f5e"
COLOR_FN = "#f59e0b"
COLOR_CORRECT = "#64748b"
COLOR_LINE = "#f8fafc"
COLOR_HANDLE = "#ffffff"
COLOR_LABEL = "#e2e8f0"


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    actual: int


@dataclass(frozen=True)
class DecisionLine:
    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def p1(self) -> tuple[float, float]:
        return self.x1, self.y1

    @property
    def p2(self) -> tuple[float, float]:
        return self.x2, self.y2

    def with_p1(self, x: float, y: float) -> "DecisionLine":
        return DecisionLine(x, y, self.x2, self.y2)

    def with_p2(self, x: float, y: float) -> "DecisionLine":
        return DecisionLine(self.x1, self.y1, x, y)


class DragTarget(Enum):
    NONE = "none"
    P1 = "p1"
    P2 = "p2"


class AppState:
    def __init__(self):
        # dane
        self.points: list[Point] = []
        self.noise: int = 0

        # granica decyzyjna
        self.line = DecisionLine(*INITIAL_LINE)
        self.drag = DragTarget.NONE

        # powierzchnia rysowania (px)
        self.width: int = 1
        self.height: int = 1

        # ostatnie wyniki
        self.confusion = None
        self.metrics = None
