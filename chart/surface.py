"""Drawing surface contract for the chart renderers.

The renderers draw through a small immediate-mode 2D API (paths,
rectangles, arcs, aligned text, and mutable style state). Two
implementations exist: QPainterSurface for the GUI, and RecordingSurface
here, which records every call and is what the tests draw into.

Conventions: pixel coordinates with y pointing down; arc angles in
radians, positive = clockwise on screen.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator, NamedTuple, Protocol


# Text alignment values
ALIGN_LEFT = "left"
ALIGN_CENTER = "center"
ALIGN_RIGHT = "right"

# Text baseline values
BASELINE_TOP = "top"
BASELINE_MIDDLE = "middle"
BASELINE_BOTTOM = "bottom"
BASELINE_ALPHABETIC = "alphabetic"


@dataclass(frozen=True)
class DrawingState:
    """Transient style state carried by a surface."""

    stroke_style: str = "#000000"
    fill_style: str = "#000000"
    line_width: float = 1.0
    text_align: str = ALIGN_LEFT
    text_baseline: str = BASELINE_ALPHABETIC


class DrawingSurface(Protocol):
    """Protocol for the immediate-mode surface the chart draws on."""

    width: float
    height: float
    stroke_style: str
    fill_style: str
    line_width: float
    text_align: str
    text_baseline: str

    def save(self) -> None:
        """Push the current style state."""
        ...

    def restore(self) -> None:
        """Pop the style state pushed by the matching save()."""
        ...

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def arc(
        self, x: float, y: float, radius: float,
        start_angle: float, end_angle: float,
    ) -> None: ...

    def stroke(self) -> None: ...

    def fill(self) -> None: ...

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def stroke_rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def fill_text(self, text: str, x: float, y: float) -> None: ...


@contextmanager
def saved_state(surface: DrawingSurface) -> Iterator[DrawingSurface]:
    """Scope style changes: save on entry, restore on every exit path."""
    surface.save()
    try:
        yield surface
    finally:
        surface.restore()


class DrawCall(NamedTuple):
    """One recorded surface call with the style in effect when it was made."""

    op: str
    args: tuple
    state: DrawingState


class RecordingSurface:
    """DrawingSurface that records calls instead of rasterizing them."""

    def __init__(self, width: float = 800, height: float = 500):
        self.width = width
        self.height = height
        self.calls: list[DrawCall] = []
        self._state = DrawingState()
        self._stack: list[DrawingState] = []

    # -- Style state --

    @property
    def state(self) -> DrawingState:
        return self._state

    @property
    def save_depth(self) -> int:
        return len(self._stack)

    def _set(self, **changes) -> None:
        self._state = replace(self._state, **changes)

    @property
    def stroke_style(self) -> str:
        return self._state.stroke_style

    @stroke_style.setter
    def stroke_style(self, value: str) -> None:
        self._set(stroke_style=value)

    @property
    def fill_style(self) -> str:
        return self._state.fill_style

    @fill_style.setter
    def fill_style(self, value: str) -> None:
        self._set(fill_style=value)

    @property
    def line_width(self) -> float:
        return self._state.line_width

    @line_width.setter
    def line_width(self, value: float) -> None:
        self._set(line_width=value)

    @property
    def text_align(self) -> str:
        return self._state.text_align

    @text_align.setter
    def text_align(self, value: str) -> None:
        self._set(text_align=value)

    @property
    def text_baseline(self) -> str:
        return self._state.text_baseline

    @text_baseline.setter
    def text_baseline(self, value: str) -> None:
        self._set(text_baseline=value)

    def save(self) -> None:
        self._stack.append(self._state)

    def restore(self) -> None:
        # Unbalanced restore is a no-op, as on an HTML canvas
        if self._stack:
            self._state = self._stack.pop()

    # -- Drawing --

    def _record(self, op: str, *args) -> None:
        self.calls.append(DrawCall(op, args, self._state))

    def clear_rect(self, x, y, w, h):
        self._record("clear_rect", x, y, w, h)

    def begin_path(self):
        self._record("begin_path")

    def move_to(self, x, y):
        self._record("move_to", x, y)

    def line_to(self, x, y):
        self._record("line_to", x, y)

    def arc(self, x, y, radius, start_angle, end_angle):
        self._record("arc", x, y, radius, start_angle, end_angle)

    def stroke(self):
        self._record("stroke")

    def fill(self):
        self._record("fill")

    def fill_rect(self, x, y, w, h):
        self._record("fill_rect", x, y, w, h)

    def stroke_rect(self, x, y, w, h):
        self._record("stroke_rect", x, y, w, h)

    def fill_text(self, text, x, y):
        self._record("fill_text", text, x, y)

    # -- Inspection --

    def calls_of(self, op: str) -> list[DrawCall]:
        """All recorded calls with the given op name, in order."""
        return [c for c in self.calls if c.op == op]

    def texts(self) -> list[str]:
        return [c.args[0] for c in self.calls_of("fill_text")]

    def reset(self) -> None:
        """Forget recorded calls (style state is kept)."""
        self.calls.clear()
