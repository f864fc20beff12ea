# どこで: `src/stylekit/core/control_style.py`。
# 何を: ControlCategory と ControlStyle（コントロール単位の任意上書き + 解決アクセサ）を定義する。
# なぜ: コントロールが「どの段で値が決まったか」を知らずに描画属性を取得できるようにするため。

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from .paint import CursorShape, FillMode, FillStyle, StrokeStyle

if TYPE_CHECKING:
    from .theme import Theme


class ControlCategory(str, Enum):
    """Theme 参照用のコントロール種別（閉じた集合）。"""

    DEFAULT = "default"
    BUTTON = "button"
    PANEL = "panel"
    TEXT_LABEL = "text_label"


# 解決対象の属性名（宣言順 = GUI/ログ等の表示順）。
STYLE_ATTRIBUTES: tuple[str, ...] = (
    "font",
    "text_fill_mode",
    "text_stroke_style",
    "text_fill_style",
    "foreground_stroke_style",
    "background_fill_style",
    "background_hover_fill_style",
    "rounding_percentage",
    "padding",
    "normal_cursor_style",
    "hover_cursor_style",
    "labels_display_enclosing_rect",
)


def check_attribute(attribute: str) -> str:
    """属性名を検証して返す。未知の名前は KeyError。"""

    if attribute not in STYLE_ATTRIBUTES:
        raise KeyError(f"unknown style attribute: {attribute!r}")
    return attribute


@dataclass(frozen=True, slots=True)
class ControlStyle:
    """コントロールの描画属性の上書き集合。

    全属性は独立に省略可能で、None は「Theme に委ねる」を意味する。
    値の範囲（rounding_percentage は 0.0..0.5、padding は非負）は検証しない。

    `category` は所有コントロールが付与する参照キーで、引数からは指定できない。
    frozen なので、コントロールへ渡した後に元の値が書き換わることはない。
    """

    # Text
    font: str | None = None
    text_fill_mode: FillMode | None = None
    text_stroke_style: StrokeStyle | None = None
    text_fill_style: FillStyle | None = None

    # Foreground / Background
    foreground_stroke_style: StrokeStyle | None = None
    background_fill_style: FillStyle | None = None
    background_hover_fill_style: FillStyle | None = None

    # 0.0 は角なし、0.5 が最大
    rounding_percentage: float | None = None
    # 枠線と中身の間隔
    padding: int | None = None

    # Cursor
    normal_cursor_style: CursorShape | None = None
    hover_cursor_style: CursorShape | None = None

    labels_display_enclosing_rect: bool | None = None

    category: ControlCategory = field(
        default=ControlCategory.DEFAULT, init=False, repr=False, compare=False
    )

    # --- 構築 ---

    def replace(self, **changes: Any) -> ControlStyle:
        """指定属性だけ差し替えたコピーを返す（category は引き継ぐ）。"""

        for name in changes:
            check_attribute(name)
        new = dataclasses.replace(self, **changes)
        object.__setattr__(new, "category", self.category)
        return new

    def tagged(self, category: ControlCategory) -> ControlStyle:
        """category を付け替えたコピーを返す。所有コントロールだけが使う。"""

        new = dataclasses.replace(self)
        object.__setattr__(new, "category", ControlCategory(category))
        return new

    def overrides(self) -> dict[str, Any]:
        """設定済み（None でない）属性だけを dict で返す。"""

        out: dict[str, Any] = {}
        for name in STYLE_ATTRIBUTES:
            value = getattr(self, name)
            if value is not None:
                out[name] = value
        return out

    def is_empty(self) -> bool:
        return not self.overrides()

    def merged_over(self, base: ControlStyle) -> ControlStyle:
        """base の上に self の設定済み属性を重ねたスタイルを返す。"""

        merged = dataclasses.replace(base, **self.overrides())
        object.__setattr__(merged, "category", self.category)
        return merged

    # --- 解決 ---

    def resolve(self, attribute: str, theme: Theme | None = None) -> Any:
        """属性の確定値を返す。

        自身の値があればそれを、無ければ `theme.resolve(self.category, attribute)` を返す。
        theme が None の場合は現在の active theme を使う。
        """

        value = getattr(self, check_attribute(attribute))
        if value is not None:
            return value
        if theme is None:
            from .theme_context import active_theme

            theme = active_theme()
        return theme.resolve(self.category, attribute)

    @property
    def resolved_font(self) -> str:
        return self.resolve("font")

    @property
    def resolved_text_fill_mode(self) -> FillMode:
        return self.resolve("text_fill_mode")

    @property
    def resolved_text_stroke_style(self) -> StrokeStyle:
        return self.resolve("text_stroke_style")

    @property
    def resolved_text_fill_style(self) -> FillStyle:
        return self.resolve("text_fill_style")

    @property
    def resolved_foreground_stroke_style(self) -> StrokeStyle:
        return self.resolve("foreground_stroke_style")

    @property
    def resolved_background_fill_style(self) -> FillStyle:
        return self.resolve("background_fill_style")

    @property
    def resolved_background_hover_fill_style(self) -> FillStyle:
        return self.resolve("background_hover_fill_style")

    @property
    def resolved_rounding_percentage(self) -> float:
        return self.resolve("rounding_percentage")

    @property
    def resolved_padding(self) -> int:
        return self.resolve("padding")

    @property
    def resolved_normal_cursor_style(self) -> CursorShape:
        return self.resolve("normal_cursor_style")

    @property
    def resolved_hover_cursor_style(self) -> CursorShape:
        return self.resolve("hover_cursor_style")

    @property
    def resolved_labels_display_enclosing_rect(self) -> bool:
        return self.resolve("labels_display_enclosing_rect")


__all__ = ["ControlCategory", "ControlStyle", "STYLE_ATTRIBUTES", "check_attribute"]
