# どこで: `src/stylekit/core/stylable.py`。
# 何を: ControlStyle を保持するコントロールの基底（Stylable）と、Button/Panel/TextLabel の種別を定義する。
# なぜ: 種別タグの付与をコントロール生成時の 1 箇所に固定し、呼び出し側に種別を意識させないため。

from __future__ import annotations

from typing import ClassVar

from .control_style import ControlCategory, ControlStyle
from .style_resolver import ResolvedStyle, resolve_style
from .theme import Theme


class Stylable:
    """ControlStyle を 1 つ持つコントロールの基底クラス。

    サブクラスは `category` だけを宣言する。描画/レイアウト/イベントは扱わない。
    """

    category: ClassVar[ControlCategory] = ControlCategory.DEFAULT

    def __init__(self, control_style: ControlStyle | None = None) -> None:
        self._control_style = self._adopt(control_style)

    def _adopt(self, control_style: ControlStyle | None) -> ControlStyle:
        style = ControlStyle() if control_style is None else control_style
        return style.tagged(type(self).category)

    @property
    def control_style(self) -> ControlStyle:
        return self._control_style

    @control_style.setter
    def control_style(self, control_style: ControlStyle | None) -> None:
        self._control_style = self._adopt(control_style)

    def resolved_style(self, theme: Theme | None = None) -> ResolvedStyle:
        """このコントロールの全属性を解決して返す。"""

        return resolve_style(self._control_style, theme)


class Button(Stylable):
    category = ControlCategory.BUTTON


class Panel(Stylable):
    category = ControlCategory.PANEL


class TextLabel(Stylable):
    category = ControlCategory.TEXT_LABEL


__all__ = ["Button", "Panel", "Stylable", "TextLabel"]
