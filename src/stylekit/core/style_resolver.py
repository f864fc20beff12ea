# どこで: `src/stylekit/core/style_resolver.py`。
# 何を: ControlStyle の全属性を 1 つの Theme で解決したスナップショット（ResolvedStyle）を作る。
# なぜ: 描画側が 1 フレーム内で一貫した値の組を参照できるようにするため。

from __future__ import annotations

from dataclasses import dataclass

from .control_style import STYLE_ATTRIBUTES, ControlStyle
from .paint import CursorShape, FillMode, FillStyle, StrokeStyle
from .theme import Theme
from .theme_context import active_theme


@dataclass(frozen=True, slots=True)
class ResolvedStyle:
    """1 コントロール分の style 解決結果（全属性が確定値）。"""

    font: str
    text_fill_mode: FillMode
    text_stroke_style: StrokeStyle
    text_fill_style: FillStyle
    foreground_stroke_style: StrokeStyle
    background_fill_style: FillStyle
    background_hover_fill_style: FillStyle
    rounding_percentage: float
    padding: int
    normal_cursor_style: CursorShape
    hover_cursor_style: CursorShape
    labels_display_enclosing_rect: bool

    def background_for(self, *, hovered: bool) -> FillStyle:
        return self.background_hover_fill_style if hovered else self.background_fill_style

    def cursor_for(self, *, hovered: bool) -> CursorShape:
        return self.hover_cursor_style if hovered else self.normal_cursor_style


def resolve_style(style: ControlStyle, theme: Theme | None = None) -> ResolvedStyle:
    """style の全属性を解決して返す。

    theme を 1 回だけ取得してから全属性を解決するので、途中で active theme が
    差し替えられても結果は 1 つの Theme に由来する。
    """

    if theme is None:
        theme = active_theme()
    values = {name: style.resolve(name, theme) for name in STYLE_ATTRIBUTES}
    return ResolvedStyle(**values)


__all__ = ["ResolvedStyle", "resolve_style"]
