from dataclasses import dataclass, replace
from enum import Enum
from .geometry import clamp01, distance
from .state import DecisionLine, DragTarget, DRAG_TOLERANCE


class EventKind(Enum):
    PRESS = "press"
    MOVE = "move"
    RELEASE = "release"


@dataclass(frozen=True)
class PointerEvent:
    kind: EventKind
    x: float = 0.0  # znormalizowane
    y: float = 0.0


@dataclass(frozen=True)
class InteractionState:
    line: DecisionLine
    drag: DragTarget = DragTarget.NONE

    @property
    def dragging(self) -> bool:
        return self.drag is not DragTarget.NONE


def hit_test(line: DecisionLine, x: float, y: float, tol: float = DRAG_TOLERANCE) -> DragTarget:
    # endpoint 1 wygrywa, gdy oba są w zasięgu
    if distance(x, y, *line.p1) < tol:
        return DragTarget.P1
    if distance(x, y, *line.p2) < tol:
        return DragTarget.P2
    return DragTarget.NONE


def on_press(state: InteractionState, x: float, y: float, tol: float = DRAG_TOLERANCE) -> InteractionState:
    target = hit_test(state.line, x, y, tol)
    if target is DragTarget.NONE:
        return state
    return replace(state, drag=target)


def on_move(state: InteractionState, x: float, y: float) -> InteractionState:
    if not state.dragging:
        return state
    x, y = clamp01(x), clamp01(y)
    if state.drag is DragTarget.P1:
        return replace(state, line=state.line.with_p1(x, y))
    return replace(state, line=state.line.with_p2(x, y))


def on_release(state: InteractionState) -> InteractionState:
    return replace(state, drag=DragTarget.NONE)


def transition(state: InteractionState, event: PointerEvent, tol: float = DRAG_TOLERANCE) -> InteractionState:
    if event.kind is EventKind.PRESS:
        return on_press(state, event.x, event.y, tol)
    if event.kind is EventKind.MOVE:
        return on_move(state, event.x, event.y)
    return on_release(state)
