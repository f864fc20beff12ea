# どこで: `src/stylekit/core/theme.py`。
# 何を: コントロール種別ごとの ControlStyle を束ねる Theme と、組み込み既定値を定義する。
# なぜ: 「種別スタイル → default スタイル → 組み込み定数」の 3 段フォールバックを 1 箇所に閉じるため。

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from .control_style import ControlCategory, ControlStyle, check_attribute
from .paint import Color, CursorShape, FillMode, FillStyle, StrokeStyle

# Theme のどの段にも値が無いときの最終値。
BUILTIN_DEFAULTS: Mapping[str, Any] = MappingProxyType(
    {
        "font": "20px Arial",
        "text_fill_mode": FillMode.FILL,
        "text_stroke_style": StrokeStyle(color=Color.BLACK),
        "text_fill_style": FillStyle(color=Color.WHITE),
        "foreground_stroke_style": StrokeStyle(color=Color(0x9F, 0xB4, 0xF2)),
        "background_fill_style": FillStyle(color=Color(0x67, 0x85, 0xB4)),
        "background_hover_fill_style": FillStyle(color=Color(0x77, 0x95, 0xD4)),
        "rounding_percentage": 0.20,
        "padding": 5,
        "normal_cursor_style": CursorShape.DEFAULT,
        "hover_cursor_style": CursorShape.POINTER,
        "labels_display_enclosing_rect": False,
    }
)

_CATEGORY_FIELDS: Mapping[ControlCategory, str] = MappingProxyType(
    {
        ControlCategory.DEFAULT: "default",
        ControlCategory.BUTTON: "button",
        ControlCategory.PANEL: "panel",
        ControlCategory.TEXT_LABEL: "text_label",
    }
)


def builtin_default(attribute: str) -> Any:
    """属性の組み込み既定値を返す。"""

    return BUILTIN_DEFAULTS[check_attribute(attribute)]


def _coerce_category(category: object) -> ControlCategory:
    """未知の種別は DEFAULT として扱う（失敗させない）。"""

    try:
        return ControlCategory(category)  # type: ignore[arg-type]
    except ValueError:
        return ControlCategory.DEFAULT


@dataclass(frozen=True, slots=True)
class Theme:
    """コントロール種別ごとの既定スタイル集合。

    生成直後はすべての種別スタイルが空で、値は BUILTIN_DEFAULTS から供給される。
    frozen なので、方針を変えるときは Theme ごと作り直して差し替える。
    """

    default: ControlStyle = field(default_factory=ControlStyle)
    button: ControlStyle = field(default_factory=ControlStyle)
    panel: ControlStyle = field(default_factory=ControlStyle)
    text_label: ControlStyle = field(default_factory=ControlStyle)

    def __post_init__(self) -> None:
        # 各スタイルに自身の種別を付けておく（ログ/デバッグ表示用）。
        for category, name in _CATEGORY_FIELDS.items():
            style = getattr(self, name)
            if style is None:
                style = ControlStyle()
            object.__setattr__(self, name, style.tagged(category))

    def style_for(self, category: ControlCategory | str) -> ControlStyle:
        """種別に対応するスタイルを返す（表引き、種別間の継承は無い）。"""

        return getattr(self, _CATEGORY_FIELDS[_coerce_category(category)])

    def replace(self, **styles: ControlStyle | None) -> Theme:
        """指定した種別スタイルだけ差し替えた Theme を返す。

        キーは `default` / `button` / `panel` / `text_label`。
        """

        unknown = sorted(set(styles) - set(_CATEGORY_FIELDS.values()))
        if unknown:
            raise KeyError(f"unknown theme categories: {unknown}")
        return dataclasses.replace(self, **styles)

    def resolve(self, category: ControlCategory | str, attribute: str) -> Any:
        """種別スタイル → default スタイル → 組み込み定数 の順で属性値を返す。

        属性ごとに独立に解決するため、種別スタイルが一部の属性しか持たなくても
        他の属性は default 側から取得される。
        """

        check_attribute(attribute)
        value = getattr(self.style_for(category), attribute)
        if value is not None:
            return value
        value = getattr(self.default, attribute)
        if value is not None:
            return value
        return BUILTIN_DEFAULTS[attribute]

    def font(self, category: ControlCategory | str) -> str:
        return self.resolve(category, "font")

    def text_fill_mode(self, category: ControlCategory | str) -> FillMode:
        return self.resolve(category, "text_fill_mode")

    def text_stroke_style(self, category: ControlCategory | str) -> StrokeStyle:
        return self.resolve(category, "text_stroke_style")

    def text_fill_style(self, category: ControlCategory | str) -> FillStyle:
        return self.resolve(category, "text_fill_style")

    def foreground_stroke_style(self, category: ControlCategory | str) -> StrokeStyle:
        return self.resolve(category, "foreground_stroke_style")

    def background_fill_style(self, category: ControlCategory | str) -> FillStyle:
        return self.resolve(category, "background_fill_style")

    def background_hover_fill_style(self, category: ControlCategory | str) -> FillStyle:
        return self.resolve(category, "background_hover_fill_style")

    def rounding_percentage(self, category: ControlCategory | str) -> float:
        return self.resolve(category, "rounding_percentage")

    def padding(self, category: ControlCategory | str) -> int:
        return self.resolve(category, "padding")

    def normal_cursor_style(self, category: ControlCategory | str) -> CursorShape:
        return self.resolve(category, "normal_cursor_style")

    def hover_cursor_style(self, category: ControlCategory | str) -> CursorShape:
        return self.resolve(category, "hover_cursor_style")

    def labels_display_enclosing_rect(self, category: ControlCategory | str) -> bool:
        return self.resolve(category, "labels_display_enclosing_rect")


__all__ = ["BUILTIN_DEFAULTS", "Theme", "builtin_default"]
