"""First person camera driven by keyboard and mouse input."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Generic, Protocol, TypeVar

import numpy as np

__all__ = ["CameraKey", "InputEvent", "Camera"]

K = TypeVar("K")


class InputEvent(Protocol):
    """The input state a camera reads."""

    def is_pressed(self, key: Any) -> bool: ...

    def mouse_motion(self) -> bool: ...

    def x_rel(self) -> int: ...

    def y_rel(self) -> int: ...


@dataclass(frozen=True)
class CameraKey(Generic[K]):
    """Key codes that move the camera."""

    forward: K
    backward: K
    left: K
    right: K


def _vector(values: Sequence[float]) -> np.ndarray:
    return np.array(values, dtype=float).reshape(3)


def _normalize(vector: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(vector))
    return vector / length if length else np.zeros(3)


def _clamp_unit(value: float) -> float:
    return max(-1.0, min(1.0, value))


def _milliseconds(elapsed: float | timedelta) -> float:
    if isinstance(elapsed, timedelta):
        return elapsed / timedelta(milliseconds=1)
    return float(elapsed)


class Camera(Generic[K]):
    """Camera with yaw/pitch angles in degrees, around a world up axis.

    Built without position, target and up it sits at the origin with the
    z axis up and moves fast; given any of them it moves slowly.
    """

    def __init__(
        self,
        keys: CameraKey[K],
        position: Sequence[float] | None = None,
        target: Sequence[float] | None = None,
        up: Sequence[float] | None = None,
    ) -> None:
        defaults = position is None and target is None and up is None
        self._phi = 0.0
        self._theta = 0.0
        self._orientation = np.zeros(3)
        self._up = _vector(up if up is not None else (0.0, 0.0, 1.0))
        self._lateral = np.zeros(3)
        self._position = _vector(position if position is not None else (0.0, 0.0, 0.0))
        self._target = _vector(target if target is not None else (0.0, 0.0, 0.0))
        self._sensitive = 0.5
        self._speed = 10.0 if defaults else 0.1

        self.set_target(self._target)
        self._keyconf = {
            "forward": keys.forward,
            "backward": keys.backward,
            "left": keys.left,
            "right": keys.right,
        }
        self._keystat = {key: False for key in self._keyconf.values()}

    @property
    def sensitive(self) -> float:
        return self._sensitive

    @sensitive.setter
    def sensitive(self, value: float) -> None:
        self._sensitive = abs(value)

    @property
    def speed(self) -> float:
        return self._speed

    @speed.setter
    def speed(self, value: float) -> None:
        self._speed = abs(value)

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self._position = _vector(value)

    @property
    def target(self) -> np.ndarray:
        return self._target.copy()

    def _pressed(self, name: str) -> bool:
        return self._keystat[self._keyconf[name]]

    def orient(self, x_rel: int, y_rel: int) -> None:
        """Turn the camera by a relative mouse motion."""
        self._phi -= y_rel * self._sensitive
        self._theta -= x_rel * self._sensitive
        if self._theta >= 360 or self._theta <= -360:
            self._theta = 0.0
        self._phi = max(-89.0, min(89.0, self._phi))

        phi = math.radians(self._phi)
        theta = math.radians(self._theta)
        if self._up[0] == 1.0:
            orientation = (
                math.sin(phi),
                math.cos(phi) * math.cos(theta),
                math.cos(phi) * math.sin(theta),
            )
        elif self._up[1] == 1.0:
            orientation = (
                math.cos(phi) * math.sin(theta),
                math.sin(phi),
                math.cos(phi) * math.cos(theta),
            )
        else:
            orientation = (
                math.cos(phi) * math.cos(theta),
                math.cos(phi) * math.sin(theta),
                math.sin(phi),
            )
        self._orientation = np.array(orientation)
        self._lateral = _normalize(np.cross(self._up, self._orientation))
        self._target = self._position + self._orientation

    def keyboard_event(self, event: InputEvent) -> None:
        """Record which movement keys the event reports as pressed."""
        for key in self._keystat:
            self._keystat[key] = bool(event.is_pressed(key))

    def move(self, event: InputEvent, elapsed: float | timedelta) -> None:
        """Move by the pressed keys over ``elapsed`` milliseconds, then apply mouse motion."""
        step = self._speed * _milliseconds(elapsed)
        moves = (
            ("forward", self._orientation),
            ("left", self._lateral),
            ("backward", -self._orientation),
            ("right", -self._lateral),
        )
        for name, direction in moves:
            if self._pressed(name):
                self._position = self._position + direction * step
                self._target = self._position + self._orientation

        if event.mouse_motion():
            self.orient(event.x_rel(), event.y_rel())

    def set_target(self, target: Sequence[float]) -> None:
        """Point the camera at ``target`` and derive its angles."""
        self._target = _vector(target)
        self._orientation = _normalize(self._target - self._position)
        o = self._orientation
        if self._up[0] == 1.0:
            phi_source, theta_source = o[0], o[1]
        elif self._up[1] == 1.0:
            phi_source, theta_source = o[1], o[2]
        else:
            phi_source, theta_source = o[0], o[2]

        phi = math.asin(_clamp_unit(float(phi_source)))
        cos_phi = math.cos(phi)
        theta = math.acos(_clamp_unit(float(theta_source) / cos_phi)) if cos_phi else 0.0
        if o[1] < 0:
            theta = -theta
        self._phi = math.degrees(phi)
        self._theta = math.degrees(theta)

    def look_at(self) -> np.ndarray:
        """Return the 4x4 right-handed view matrix for the camera."""
        forward = _normalize(self._target - self._position)
        side = _normalize(np.cross(forward, self._up))
        upward = np.cross(side, forward)
        view = np.identity(4)
        view[0, :3] = side
        view[1, :3] = upward
        view[2, :3] = -forward
        view[0, 3] = -np.dot(side, self._position)
        view[1, 3] = -np.dot(upward, self._position)
        view[2, 3] = np.dot(forward, self._position)
        return view