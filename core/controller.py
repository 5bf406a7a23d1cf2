import logging
import numpy as np
from .state import AppState, DragTarget
from .datagen import generate_points
from .metrics import compute_metrics
from .geometry import to_normalized
from .interaction import InteractionState, PointerEvent, EventKind, transition
from .config import Settings

logger = logging.getLogger(__name__)


class SessionController:
    """Owns the session state; every mutation recomputes metrics and then notifies the listener.

    The listener (the view) is called as listener(state) and is expected to redraw from it.
    Resizes only redraw: normalized coordinates and metrics are left untouched.
    """

    def __init__(self, settings: Settings | None = None, listener=None, state: AppState | None = None):
        self.settings = settings or Settings()
        self.state = state or AppState()
        self.state.noise = self.settings.noise
        self.listener = listener or (lambda *args, **kwargs: None)
        self.rng = np.random.RandomState(self.settings.seed)

    # --- dane
    def regenerate(self, noise=None):
        if noise is not None:
            self.state.noise = noise
        self.state.points = generate_points(self.state.noise, self.settings.n_points, self.rng)
        self._recompute()
        self._notify()

    def reset(self):
        logger.info("Reset requested")
        self.regenerate()

    def set_noise(self, noise):
        noise = int(round(float(noise)))
        if noise == self.state.noise and self.state.points:
            return
        self.regenerate(noise)

    # --- wskaźnik (piksele powierzchni)
    def press(self, px, py):
        self._dispatch(EventKind.PRESS, px, py)

    def move(self, px, py):
        self._dispatch(EventKind.MOVE, px, py)

    def release(self, px=0.0, py=0.0):
        self._dispatch(EventKind.RELEASE, px, py)

    def handle(self, event: PointerEvent):
        before = InteractionState(self.state.line, self.state.drag)
        after = transition(before, event, self.settings.drag_tolerance)
        if after.drag is not before.drag:
            if after.drag is DragTarget.NONE:
                logger.debug("Drag of %s finished at %s", before.drag.value, after.line)
            else:
                logger.debug("Drag of %s started", after.drag.value)
        self.state.drag = after.drag
        if after.line != before.line:
            self.state.line = after.line
            self._recompute()
            self._notify()

    def _dispatch(self, kind, px, py):
        x, y = to_normalized(px, py, self.state.width, self.state.height)
        self.handle(PointerEvent(kind, x, y))

    # --- widok
    def resize(self, width, height):
        self.state.width, self.state.height = int(width), int(height)
        logger.debug("Surface resized to %dx%d", self.state.width, self.state.height)
        self._notify()

    def refresh(self):
        self._recompute()
        self._notify()

    def _recompute(self):
        self.state.confusion, self.state.metrics = compute_metrics(self.state.points, self.state.line)

    def _notify(self):
        self.listener(self.state)
