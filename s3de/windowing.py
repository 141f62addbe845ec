"""Handles and a registry of created windows."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

__all__ = ["WindowHandle", "WindowManager"]

W = TypeVar("W")


@dataclass(frozen=True, order=True)
class WindowHandle:
    """Opaque identifier of a window, ordered by its name."""

    name: str = ""


class WindowManager(Generic[W]):
    """Creates windows through a factory and keeps them by handle."""

    def __init__(self, window_factory: Callable[..., W]) -> None:
        self._factory = window_factory
        self._windows: dict[WindowHandle, W] = {}
        self._counter = 0

    def new_window(self, *args: Any, **kwargs: Any) -> WindowHandle:
        """Build a window from the arguments and return its new handle."""
        handle = WindowHandle(str(self._counter))
        self._counter += 1
        self._windows[handle] = self._factory(*args, **kwargs)
        return handle

    def __iter__(self) -> Iterator[tuple[WindowHandle, W]]:
        return iter(sorted(self._windows.items(), key=lambda item: item[0]))

    def __len__(self) -> int:
        return len(self._windows)

    def __getitem__(self, handle: WindowHandle) -> W:
        return self._windows[handle]