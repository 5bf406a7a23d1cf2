import math
from dataclasses import dataclass
import numpy as np
from .geometry import predict


@dataclass(frozen=True)
class Confusion:
    tp: int = 0
    tn: int = 0
    fp: int = 0
    fn: int = 0

    @property
    def total(self) -> int:
        return self.tp + self.tn + self.fp + self.fn

    def as_matrix(self) -> np.ndarray:
        # wiersze: rzeczywista (0, 1), kolumny: predykcja (0, 1)
        return np.array([[self.tn, self.fp], [self.fn, self.tp]])


@dataclass(frozen=True)
class Metrics:
    accuracy: float = 0.0
    precision: float = 0.0
    recall: float = 0.0
    f1: float = 0.0


def safe_ratio(num, den) -> float:
    return num / den if den != 0 else 0.0


def confusion(y_true, y_pred) -> Confusion:
    y_true = np.asarray(y_true).reshape(-1)
    y_pred = np.asarray(y_pred).reshape(-1)
    tp = int(np.sum((y_true == 1) & (y_pred == 1)))
    tn = int(np.sum((y_true == 0) & (y_pred == 0)))
    fp = int(np.sum((y_true == 0) & (y_pred == 1)))
    fn = int(np.sum((y_true == 1) & (y_pred == 0)))
    return Confusion(tp=tp, tn=tn, fp=fp, fn=fn)


def derive_metrics(cm: Confusion) -> Metrics:
    accuracy = safe_ratio(cm.tp + cm.tn, cm.total)
    precision = safe_ratio(cm.tp, cm.tp + cm.fp)
    recall = safe_ratio(cm.tp, cm.tp + cm.fn)
    # 2PR/(P+R) == 2tp/(2tp+fp+fn)
    f1 = safe_ratio(2 * cm.tp, 2 * cm.tp + cm.fp + cm.fn)
    return Metrics(accuracy, precision, recall, f1)


def compute_metrics(points, line) -> tuple[Confusion, Metrics]:
    y_true = np.array([p.actual for p in points], dtype=int)
    y_pred = predict(points, line)
    cm = confusion(y_true, y_pred)
    return cm, derive_metrics(cm)


def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


def format_metrics(m: Metrics) -> dict[str, str]:
    return {
        "accuracy": f"{_round_half_up(m.accuracy * 100)}%",
        "precision": f"{_round_half_up(m.precision * 100)}%",
        "recall": f"{_round_half_up(m.recall * 100)}%",
        "f1": f"{_round_half_up(m.f1 * 100) / 100:.2f}",
    }
