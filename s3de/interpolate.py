"""Interpolation of positions along a curve of timed key points."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Sequence

__all__ = ["InterpolationError", "CurveInterpolate", "LinearInterpolate"]

Vec3 = tuple[float, float, float]


class InterpolationError(ValueError):
    """Raised when a curve cannot be evaluated."""


class CurveInterpolate(ABC):
    """A curve defined by key positions, evaluated at a point in time."""

    @abstractmethod
    def add_point(self, position: Sequence[float], time: float) -> None:
        """Append a key position that lasts ``time`` before the next one."""

    @abstractmethod
    def interpolated(self, total_time: float) -> Vec3:
        """Return the position on the curve at ``total_time``."""


class LinearInterpolate(CurveInterpolate):
    """Piecewise linear curve through its key positions.

    Each key point carries the duration of the segment that starts at it.
    When ``looped`` is set, time wraps around a period of the number of
    points times the duration of the first point.
    """

    def __init__(self, looped: bool = False) -> None:
        self.looped = looped
        self._positions: list[Vec3] = []
        self._times: list[float] = []

    def add_point(self, position: Sequence[float], time: float) -> None:
        x, y, z = position
        self._positions.append((float(x), float(y), float(z)))
        self._times.append(time)

    def interpolated(self, total_time: float) -> Vec3:
        count = len(self._positions)
        if count == 0:
            raise InterpolationError("error no key pos defined")

        if self.looped:
            period = count * self._times[0]
            if period <= 0:
                if total_time > period:
                    raise InterpolationError("error currenttime equal 0 , can't divide")
            elif total_time > period:
                total_time -= (math.ceil(total_time / period) - 1) * period

        current = 0
        last = 0
        index = 0
        for index, duration in enumerate(self._times):
            current += duration
            if total_time <= current:
                break
            last = current
        else:
            index = count

        if count == 1:
            return self._positions[0]
        if current == 0:
            raise InterpolationError("error currenttime equal 0 , can't divide")

        if index + 1 < count:
            t = (total_time - last) / self._times[index]
            start = self._positions[index]
            stop = self._positions[index + 1]
            return tuple(t * b + (1 - t) * a for a, b in zip(start, stop))
        return self._positions[-1]