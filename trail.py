# trail.py

from collections import namedtuple

import constants

TrailPoint = namedtuple("TrailPoint", ["x", "y", "time"])


class TrailBuffer:
    """
    Ordered, time-stamped pointer positions used to draw the motion trail.

    Points are appended oldest to newest. Timestamps are in milliseconds on
    the same clock the renderer passes to prune().
    """
    def __init__(self):
        self.points = []

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def append(self, x: float, y: float, time_ms: float):
        self.points.append(TrailPoint(x, y, time_ms))

    @staticmethod
    def max_age(trail_length: float) -> float:
        """Lifetime of a trail point in milliseconds."""
        return trail_length * constants.TRAIL_TIME_UNIT_MS

    def prune(self, now_ms: float, trail_length: float) -> list:
        """
        Deletes every point whose age has reached the trail lifetime and
        returns the surviving points.
        """
        max_age = self.max_age(trail_length)
        self.points = [p for p in self.points if now_ms - p.time < max_age]
        return self.points
