from abc import ABC, abstractmethod


class Surface(ABC):
    """Pixel-addressed 2D drawing target. Origin top-left, y grows downwards."""

    @property
    @abstractmethod
    def width(self) -> int: ...

    @property
    @abstractmethod
    def height(self) -> int: ...

    @abstractmethod
    def clear(self) -> None: ...

    @abstractmethod
    def circle(self, x: float, y: float, r: float, fill: str,
               outline: str | None = None, width: float = 1) -> None: ...

    @abstractmethod
    def line(self, x1: float, y1: float, x2: float, y2: float, color: str, width: float = 1) -> None: ...

    @abstractmethod
    def text(self, x: float, y: float, text: str, color: str) -> None: ...
