"""
FrameScheduler - periodic tick source for the pattern engine.

Architecture:
  - Clock abstraction supplies timestamps in milliseconds
    (MonotonicClock in production, ManualClock in tests)
  - FrameScheduler runs an asyncio loop at a target FPS and calls
    on_tick(timestamp_ms) once per frame
  - A tick that raises is logged and counted; the loop keeps running
  - step() delivers exactly one tick without a running loop (tests / CLI)

All drawing happens inside on_tick, so a frame is always complete before the
next tick is scheduled.
"""

from __future__ import annotations
import asyncio
import inspect
import time
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Callable, Deque, Dict, Optional

from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SCHEDULER)

TickCallback = Callable[[float], Any]


# === Clocks ===

class Clock(ABC):
    """Timestamp source in milliseconds"""

    @abstractmethod
    def now(self) -> float:
        ...


class MonotonicClock(Clock):
    def now(self) -> float:
        return time.perf_counter() * 1000.0


class ManualClock(Clock):
    """
    Test stepper clock.

    Example:
        clock = ManualClock()
        clock.advance(16.7)
        clock.now()  # 16.7
    """

    def __init__(self, start_ms: float = 0.0):
        self._now = float(start_ms)

    def now(self) -> float:
        return self._now

    def advance(self, ms: float) -> float:
        self._now += ms
        return self._now

    def set(self, ms: float) -> None:
        self._now = float(ms)


# === Scheduler ===

class FrameScheduler:
    """
    Fixed-rate tick loop.

    Manages:
    - start / stop of the loop task
    - pause / resume (no ticks delivered while paused)
    - per-tick error isolation
    - FPS metrics
    """

    MIN_FPS = 1
    MAX_FPS = 240

    def __init__(self, on_tick: TickCallback, fps: int = 60, clock: Optional[Clock] = None):
        """
        Args:
            on_tick: called with the tick timestamp (ms); may be sync or async
            fps: target tick frequency (1-240, default 60)
            clock: timestamp source (default MonotonicClock)
        """
        self.on_tick = on_tick
        self.fps = max(self.MIN_FPS, min(fps, self.MAX_FPS))
        self.clock = clock or MonotonicClock()

        self.running = False
        self.paused = False
        self.tick_task: Optional[asyncio.Task] = None

        self.frames_delivered = 0
        self.tick_errors = 0
        self.frame_times: Deque[float] = deque(maxlen=300)

    # === Control ===

    async def start(self) -> None:
        """Start the tick loop."""
        if self.running:
            log.warn("FrameScheduler already running")
            return
        self.running = True
        self.tick_task = asyncio.create_task(self._tick_loop())
        log.info(f"FrameScheduler started @ {self.fps} FPS")

    async def stop(self) -> None:
        """Stop the tick loop."""
        if not self.running:
            return
        self.running = False
        if self.tick_task:
            self.tick_task.cancel()
            try:
                await self.tick_task
            except asyncio.CancelledError:
                pass
            self.tick_task = None

        log.info(
            "FrameScheduler stopped",
            frames_delivered=self.frames_delivered,
            tick_errors=self.tick_errors,
        )

    def pause(self) -> None: self.paused = True

    def resume(self) -> None: self.paused = False

    def set_fps(self, fps: int) -> None:
        self.fps = max(self.MIN_FPS, min(fps, self.MAX_FPS))
        log.info("FPS changed", fps=self.fps)

    async def step(self, timestamp_ms: Optional[float] = None) -> bool:
        """Deliver exactly one tick. Returns False if the tick raised."""
        return await self._deliver(self.clock.now() if timestamp_ms is None else timestamp_ms)

    # === Metrics ===

    def get_actual_fps(self) -> float:
        """Measured FPS over recent ticks."""
        if len(self.frame_times) < 2:
            return 0.0
        duration = self.frame_times[-1] - self.frame_times[0]
        if duration <= 0:
            return 0.0
        return (len(self.frame_times) - 1) / duration

    def get_metrics(self) -> Dict:
        return {
            "fps_target": self.fps,
            "fps_actual": self.get_actual_fps(),
            "frames_delivered": self.frames_delivered,
            "tick_errors": self.tick_errors,
        }

    # === Core loop ===

    async def _deliver(self, timestamp_ms: float) -> bool:
        try:
            result = self.on_tick(timestamp_ms)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            self.tick_errors += 1
            log.error(f"Tick error: {e}", error_type=type(e).__name__)
            return False

        self.frames_delivered += 1
        self.frame_times.append(time.perf_counter())
        return True

    async def _tick_loop(self) -> None:
        """Main tick loop @ target FPS."""
        log.debug(f"Tick loop @ {self.fps} FPS (delay={1000 / self.fps:.2f}ms)")

        while self.running:
            if self.paused:
                await asyncio.sleep(0.01)
                continue

            started = time.perf_counter()
            await self._deliver(self.clock.now())

            # sleep the rest of the frame; always yield to the event loop
            elapsed = time.perf_counter() - started
            await asyncio.sleep(max(0.0, 1.0 / self.fps - elapsed))

    def __repr__(self) -> str:
        return f"<FrameScheduler fps={self.fps} running={self.running} frames={self.frames_delivered}>"
