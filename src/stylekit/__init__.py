# どこで: `src/stylekit/__init__.py`。
# 何を: ルート `stylekit` パッケージを定義し、style 解決の公開 API をまとめる。
# なぜ: import 起点を `stylekit` に統一するため。

from __future__ import annotations

from stylekit.core.control_style import STYLE_ATTRIBUTES, ControlCategory, ControlStyle
from stylekit.core.paint import Color, CursorShape, FillMode, FillStyle, StrokeStyle
from stylekit.core.runtime_config import install_configured_theme, set_config_path
from stylekit.core.stylable import Button, Panel, Stylable, TextLabel
from stylekit.core.style_resolver import ResolvedStyle, resolve_style
from stylekit.core.theme import BUILTIN_DEFAULTS, Theme
from stylekit.core.theme_codec import control_style_from_mapping, theme_from_mapping
from stylekit.core.theme_context import (
    active_theme,
    reset_active_theme,
    set_active_theme,
    theme_context,
)

__all__ = [
    "BUILTIN_DEFAULTS",
    "STYLE_ATTRIBUTES",
    "Button",
    "Color",
    "ControlCategory",
    "ControlStyle",
    "CursorShape",
    "FillMode",
    "FillStyle",
    "Panel",
    "ResolvedStyle",
    "StrokeStyle",
    "Stylable",
    "TextLabel",
    "Theme",
    "active_theme",
    "control_style_from_mapping",
    "install_configured_theme",
    "reset_active_theme",
    "resolve_style",
    "set_active_theme",
    "set_config_path",
    "theme_context",
    "theme_from_mapping",
]
