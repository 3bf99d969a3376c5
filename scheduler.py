# scheduler.py

"""
Repeating per-frame task driving the effect.

The scheduler calls its tick function once per frame until cancelled. The
cancellation token is checked before each tick begins, so a cancel issued
from inside a tick, from an event handler, or from teardown prevents any
further tick from running.
"""

import logging
from typing import Callable, Optional

import pygame

import constants

logger = logging.getLogger(constants.LOGGER_NAME)


class CancellationToken:
    def __init__(self):
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self):
        self._cancelled = True


class AnimationScheduler:
    """
    Runs `tick()` once per frame at up to `fps` frames per second.

    Data Contract:
    - Inputs:
        - tick (callable): The per-frame work. Takes no arguments.
        - fps (int): Frame rate cap passed to the frame clock.
        - clock: Object with a pygame.time.Clock compatible tick(fps) method.
    - Side Effects: Calls tick() repeatedly; blocks until cancelled.
    - Invariants: At most one run() is active per scheduler. No tick starts
      after cancel() has been called.
    """
    def __init__(self, tick: Callable[[], None], fps: int = constants.FPS, clock=None):
        self.tick = tick
        self.fps = fps
        self.clock = clock if clock is not None else pygame.time.Clock()
        self.token = CancellationToken()
        self.ticks_run = 0
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def cancel(self):
        if not self.token.cancelled:
            logger.info(f"Animation cancelled after {self.ticks_run} ticks.")
        self.token.cancel()

    def run(self, max_ticks: Optional[int] = None) -> int:
        """
        Runs ticks until cancelled (or until `max_ticks` have run) and returns
        the number of ticks executed during this call.
        """
        if self._running:
            raise RuntimeError("AnimationScheduler is already running.")
        self._running = True
        executed = 0
        try:
            while not self.token.cancelled:
                if max_ticks is not None and executed >= max_ticks:
                    logger.info(f"Reached max_ticks ({max_ticks}). Stopping animation.")
                    break
                self.tick()
                executed += 1
                self.ticks_run += 1

                if not self.token.cancelled:
                    self.clock.tick(self.fps)
        finally:
            self._running = False
        return executed
