"""Frame-driven easing of displayed KPI values.

A FrameScheduler stands in for the browser's per-frame callback: the owner
calls ``tick()`` once per frame (optionally with a synthetic timestamp) and
every registered callback runs with that timestamp. AnimatedValue registers
one callback per in-flight animation and drops it when the animation ends,
is retargeted or is closed.
"""

import itertools
import logging
import math
import time

from flightmap.config import ANIMATION_DURATION_MS

log = logging.getLogger("flightmap")


def monotonic_ms():
    return time.monotonic() * 1000.0


def ease_out_cubic(t):
    t = max(0.0, min(1.0, t))
    return 1 - (1 - t) ** 3


class FrameScheduler:
    """Per-frame callback registry driven by an explicit clock."""

    def __init__(self, clock=None):
        self.clock = clock or monotonic_ms
        self._callbacks = {}
        self._ids = itertools.count(1)
        self.last_tick = None

    def now(self):
        return self.clock()

    @property
    def pending(self):
        return len(self._callbacks)

    def register(self, callback):
        handle = next(self._ids)
        self._callbacks[handle] = callback
        return handle

    def cancel(self, handle):
        self._callbacks.pop(handle, None)

    def tick(self, now=None):
        """Run every live callback once. Returns the number of callbacks run."""
        if now is None:
            now = self.clock()
        self.last_tick = now
        ran = 0
        for handle, callback in list(self._callbacks.items()):
            # An earlier callback in this tick may have cancelled this one.
            if handle not in self._callbacks:
                continue
            callback(now)
            ran += 1
        return ran


class AnimatedValue:
    """A displayed number that eases toward its target over ``duration`` ms."""

    def __init__(self, scheduler, value=0.0, duration=ANIMATION_DURATION_MS):
        if not duration > 0:
            raise ValueError(f"Animation duration must be positive, got {duration!r}")
        self.scheduler = scheduler
        self.duration = float(duration)
        self.value = float(value)
        self.target = float(value)
        self._start_value = self.value
        self._start_time = None
        self._last_frame = None
        self._handle = None

    @property
    def animating(self):
        return self._handle is not None

    def set_target(self, target, now=None):
        """Start easing toward ``target`` from wherever the value is right now."""
        target = float(target)
        if not math.isfinite(target):
            raise ValueError(f"Animation target must be finite, got {target!r}")
        if now is None:
            now = self.scheduler.now()
        if self._handle is not None:
            # Catch up on frames that were not ticked before restarting.
            if now > self._last_frame:
                self._on_frame(now)
            log.debug("Retargeting %r -> %.3f", self, target)
        self._release()
        self.target = target
        self._start_value = self.value
        self._start_time = now
        self._last_frame = now
        if self.value == target:
            return
        self._handle = self.scheduler.register(self._on_frame)

    def _on_frame(self, now):
        self._last_frame = now
        t = (now - self._start_time) / self.duration
        if t >= 1:
            self.value = self.target
            self._release()
            return
        eased = ease_out_cubic(t)
        self.value = self._start_value + (self.target - self._start_value) * eased

    def _release(self):
        if self._handle is not None:
            self.scheduler.cancel(self._handle)
            self._handle = None

    def close(self):
        self._release()

    def __repr__(self):
        return f"AnimatedValue(value={self.value:.3f}, target={self.target:.3f})"
