"""
controls.py — Input sampling.

Holds the single "current intent" record the simulation reads once per
step. Input handlers write to it whenever events arrive; nothing is queued,
only the latest state matters.

Two sources feed the four intents (up / down / left / right):
  - held keys   (the controller maps arrows and WASD onto intents)
  - one pointer drag, tracked by pointer id

No pygame here: the controller translates raw events into these calls.
"""

from .config import DRAG_DEAD_ZONE

INTENTS = ("up", "down", "left", "right")


class InputSampler:
    """Live directional intent from keyboard and pointer drag."""

    def __init__(self):
        self._keys: set[str] = set()
        self._drag: set[str] = set()
        self.pointer_id = None
        self._px: float = 0.0
        self._py: float = 0.0

    # ── Intent flags ─────────────────────────────────────────────
    @property
    def up(self) -> bool:
        return "up" in self._keys or "up" in self._drag

    @property
    def down(self) -> bool:
        return "down" in self._keys or "down" in self._drag

    @property
    def left(self) -> bool:
        return "left" in self._keys or "left" in self._drag

    @property
    def right(self) -> bool:
        return "right" in self._keys or "right" in self._drag

    @property
    def dragging(self) -> bool:
        return self.pointer_id is not None

    # ── Keyboard ─────────────────────────────────────────────────
    def press(self, intent: str) -> None:
        self._keys.add(_check(intent))

    def release(self, intent: str) -> None:
        self._keys.discard(_check(intent))

    # ── Pointer drag ─────────────────────────────────────────────
    def pointer_down(self, pointer_id, x: float, y: float) -> None:
        """Start tracking a drag; any previous drag is discarded."""
        self.pointer_id = pointer_id
        self._px, self._py = x, y
        self._drag.clear()

    def pointer_move(self, pointer_id, x: float, y: float) -> None:
        if self.pointer_id is None or pointer_id != self.pointer_id:
            return
        dx = x - self._px
        dy = y - self._py
        self._drag.clear()
        if dx < -DRAG_DEAD_ZONE:
            self._drag.add("left")
        if dx > DRAG_DEAD_ZONE:
            self._drag.add("right")
        if dy < -DRAG_DEAD_ZONE:
            self._drag.add("up")
        if dy > DRAG_DEAD_ZONE:
            self._drag.add("down")
        self._px, self._py = x, y

    def pointer_up(self, pointer_id=None) -> None:
        """End the drag. With no id given, whatever drag is active ends."""
        if pointer_id is not None and pointer_id != self.pointer_id:
            return
        self.pointer_id = None
        self._drag.clear()

    def clear(self) -> None:
        self._keys.clear()
        self.pointer_up()

    def __repr__(self):
        held = [name for name in INTENTS if getattr(self, name)]
        return f"InputSampler({', '.join(held) or '-'})"


def _check(intent: str) -> str:
    if intent not in INTENTS:
        raise ValueError(f"unknown intent {intent!r}")
    return intent
