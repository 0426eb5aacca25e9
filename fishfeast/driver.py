"""
driver.py — Frame scheduling and the shell commands.

FrameDriver stands in for a display-refresh callback chain: at most one
callback is pending, each pump() runs it once, and a callback that wants
another frame has to ask for it again. Stopping the chain is simply not
asking.

GameLoop is the callback itself plus the Start / Restart / Pause commands
the presentation shell exposes.
"""

from .config import MAX_DT


class FrameDriver:
    """Single-callback tick scheduler with a clamped frame delta."""

    def __init__(self, max_dt: float = MAX_DT):
        self.max_dt = max_dt
        self._pending = None
        self._now: float = 0.0
        self._last: float = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    @property
    def now(self) -> float:
        return self._now

    def request(self, callback) -> None:
        """Run `callback(timestamp_ms)` on the next tick. Replaces any pending one."""
        self._pending = callback

    def cancel(self) -> None:
        self._pending = None

    def pump(self, timestamp: float) -> bool:
        """Deliver one tick. Returns True if a callback ran."""
        # Timestamps only move forward
        self._now = max(self._now, timestamp)
        callback, self._pending = self._pending, None
        if callback is None:
            return False
        callback(self._now)
        return True

    def reset_clock(self) -> None:
        self._last = None

    def delta(self, timestamp: float) -> float:
        """Seconds since the previous delta() call, clamped to [0, max_dt]."""
        if self._last is None:
            self._last = timestamp
        dt = (timestamp - self._last) / 1000.0
        self._last = timestamp
        return min(max(dt, 0.0), self.max_dt)


class GameLoop:
    """Binds a GameModel and an InputSampler to a FrameDriver."""

    def __init__(self, model, controls, driver: FrameDriver = None):
        self.model = model
        self.controls = controls
        self.driver = driver or FrameDriver()

    # ── Shell commands ───────────────────────────────────────────
    def start(self) -> None:
        self.model.start()
        self._begin()

    def restart(self) -> None:
        self.model.restart()
        self._begin()

    def toggle_pause(self) -> None:
        if not self.model.running:
            return
        self.model.toggle_pause()

    # ── Frame callback ───────────────────────────────────────────
    def frame(self, timestamp: float) -> None:
        model = self.model
        if not model.running:
            return
        if model.paused:
            self.driver.request(self.frame)
            return
        dt = self.driver.delta(timestamp)
        model.update(dt, self.controls)
        if model.running:
            self.driver.request(self.frame)

    def _begin(self) -> None:
        self.driver.reset_clock()
        self.driver.request(self.frame)
