# どこで: `src/stylekit/interactive/cursor.py`。
# 何を: 解決済みの CursorShape を pyglet ウィンドウのマウスカーソルへ反映する。
# なぜ: style 解決（core）を pyglet に依存させず、カーソル適用だけを backend 側に分離するため。

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stylekit.core.control_style import ControlStyle
from stylekit.core.paint import CursorShape
from stylekit.core.theme import Theme

# pyglet は `interactive` extra。ここでは型注釈にだけ使い、定数は window から読む。
if TYPE_CHECKING:
    import pyglet

# CursorShape -> pyglet `Window.CURSOR_*` 定数名。
# pyglet に無い形状は近いものに寄せる。
_PYGLET_CURSOR_ATTRS: dict[CursorShape, str] = {
    CursorShape.DEFAULT: "CURSOR_DEFAULT",
    CursorShape.POINTER: "CURSOR_HAND",
    CursorShape.TEXT: "CURSOR_TEXT",
    CursorShape.CROSSHAIR: "CURSOR_CROSSHAIR",
    CursorShape.MOVE: "CURSOR_SIZE",
    CursorShape.WAIT: "CURSOR_WAIT",
    CursorShape.PROGRESS: "CURSOR_WAIT_ARROW",
    CursorShape.HELP: "CURSOR_HELP",
    CursorShape.NOT_ALLOWED: "CURSOR_NO",
    CursorShape.GRAB: "CURSOR_HAND",
    CursorShape.GRABBING: "CURSOR_HAND",
    CursorShape.EW_RESIZE: "CURSOR_SIZE_LEFT_RIGHT",
    CursorShape.NS_RESIZE: "CURSOR_SIZE_UP_DOWN",
    CursorShape.NONE: "CURSOR_DEFAULT",
}


def pyglet_cursor_attr(shape: CursorShape) -> str:
    """shape に対応する pyglet `Window.CURSOR_*` 定数名を返す。"""

    return _PYGLET_CURSOR_ATTRS[CursorShape(shape)]


def _system_cursor(window: Any, shape: CursorShape) -> Any:
    # CURSOR_DEFAULT は None（= 既定の矢印）なので get_system_mouse_cursor を呼ばない。
    name = getattr(window, pyglet_cursor_attr(shape))
    if name is None:
        return None
    return window.get_system_mouse_cursor(name)


def apply_cursor(
    window: pyglet.window.Window,
    style: ControlStyle,
    *,
    hovered: bool,
    theme: Theme | None = None,
) -> CursorShape:
    """style の通常/ホバー時カーソルを解決して window に反映し、適用した形状を返す。

    `CursorShape.NONE` はポインタを非表示にする。
    """

    attribute = "hover_cursor_style" if hovered else "normal_cursor_style"
    shape = CursorShape(style.resolve(attribute, theme))

    if shape is CursorShape.NONE:
        window.set_mouse_visible(False)
        return shape

    window.set_mouse_visible(True)
    window.set_mouse_cursor(_system_cursor(window, shape))
    return shape


__all__ = ["apply_cursor", "pyglet_cursor_attr"]
