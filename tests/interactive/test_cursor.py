from __future__ import annotations

from typing import Any

import pytest

from stylekit.core.control_style import ControlCategory, ControlStyle
from stylekit.core.paint import CursorShape
from stylekit.core.theme import Theme
from stylekit.interactive.cursor import apply_cursor, pyglet_cursor_attr


class _FakeWindow:
    """pyglet.window.Window のカーソル API だけを持つダミー。"""

    CURSOR_DEFAULT = None
    CURSOR_CROSSHAIR = "crosshair"
    CURSOR_HAND = "hand"
    CURSOR_HELP = "help"
    CURSOR_NO = "no"
    CURSOR_SIZE = "size"
    CURSOR_SIZE_LEFT_RIGHT = "size_left_right"
    CURSOR_SIZE_UP_DOWN = "size_up_down"
    CURSOR_TEXT = "text"
    CURSOR_WAIT = "wait"
    CURSOR_WAIT_ARROW = "wait_arrow"

    def __init__(self) -> None:
        self.cursor: Any = "unset"
        self.visible = True

    def get_system_mouse_cursor(self, name: str) -> tuple[str, str]:
        return ("system", name)

    def set_mouse_cursor(self, cursor: Any) -> None:
        self.cursor = cursor

    def set_mouse_visible(self, visible: bool) -> None:
        self.visible = visible


@pytest.mark.parametrize("shape", list(CursorShape))
def test_every_shape_maps_to_a_pyglet_constant(shape: CursorShape) -> None:
    assert hasattr(_FakeWindow, pyglet_cursor_attr(shape))


def test_apply_cursor_uses_builtin_normal_and_hover_shapes() -> None:
    window = _FakeWindow()
    style = ControlStyle().tagged(ControlCategory.BUTTON)

    assert apply_cursor(window, style, hovered=False, theme=Theme()) is CursorShape.DEFAULT
    assert window.cursor is None

    assert apply_cursor(window, style, hovered=True, theme=Theme()) is CursorShape.POINTER
    assert window.cursor == ("system", "hand")
    assert window.visible is True


def test_apply_cursor_follows_theme_category() -> None:
    window = _FakeWindow()
    theme = Theme(text_label=ControlStyle(hover_cursor_style=CursorShape.TEXT))

    shape = apply_cursor(
        window, ControlStyle().tagged(ControlCategory.TEXT_LABEL), hovered=True, theme=theme
    )

    assert shape is CursorShape.TEXT
    assert window.cursor == ("system", "text")


def test_cursor_none_hides_pointer_and_restores_later() -> None:
    window = _FakeWindow()
    style = ControlStyle(hover_cursor_style=CursorShape.NONE)

    apply_cursor(window, style, hovered=True, theme=Theme())
    assert window.visible is False

    apply_cursor(window, style, hovered=False, theme=Theme())
    assert window.visible is True
    assert window.cursor is None
