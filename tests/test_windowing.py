from dataclasses import dataclass

import pytest

from s3de.windowing import WindowHandle, WindowManager


@dataclass
class FakeWindow:
    width: int
    height: int
    title: str = ""


def test_handles_compare_by_name():
    assert WindowHandle("a") < WindowHandle("b")
    assert WindowHandle("a") == WindowHandle("a")
    assert WindowHandle() == WindowHandle("")


def test_handles_are_hashable():
    assert len({WindowHandle("x"), WindowHandle("x"), WindowHandle("y")}) == 2


def test_first_handles_count_from_zero():
    manager = WindowManager(FakeWindow)
    assert manager.new_window(640, 480) == WindowHandle("0")
    assert manager.new_window(800, 600) == WindowHandle("1")


def test_window_built_from_arguments():
    manager = WindowManager(FakeWindow)
    handle = manager.new_window(640, 480, title="main")
    assert manager[handle] == FakeWindow(640, 480, "main")


def test_length_counts_windows():
    manager = WindowManager(FakeWindow)
    for size in range(3):
        manager.new_window(size, size)
    assert len(manager) == 3


def test_unknown_handle_raises():
    manager = WindowManager(FakeWindow)
    with pytest.raises(KeyError):
        manager[WindowHandle("missing")]


def test_iteration_is_ordered_by_handle():
    manager = WindowManager(FakeWindow)
    created = [manager.new_window(size, size) for size in range(12)]
    handles = [handle for handle, _ in manager]
    assert handles == sorted(created)
    assert set(handles) == set(created)


def test_iteration_pairs_handles_with_windows():
    manager = WindowManager(FakeWindow)
    handle = manager.new_window(10, 20)
    assert list(manager) == [(handle, FakeWindow(10, 20))]