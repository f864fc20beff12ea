# どこで: `src/stylekit/core/theme_context.py`。
# 何を: プロセス全体で 1 つの active theme と、コンテキスト単位で差し替えるコンテキストマネージャを提供する。
# なぜ: 既定では単一の Theme を参照しつつ、テストや描画ループ側で独立した Theme を明示的に渡せるようにするため。

from __future__ import annotations

import contextlib
import contextvars
import logging
from typing import Iterator

from .theme import Theme

_logger = logging.getLogger(__name__)

# Theme は frozen なので、参照の差し替えだけで「途中まで更新された Theme」は観測されない。
_active_theme: Theme = Theme()
_theme_override_var: contextvars.ContextVar[Theme | None] = contextvars.ContextVar(
    "theme_override", default=None
)


def active_theme() -> Theme:
    """現在の Theme を返す（theme_context 内ならその Theme）。"""

    override = _theme_override_var.get()
    if override is not None:
        return override
    return _active_theme


def set_active_theme(theme: Theme) -> Theme:
    """プロセス全体の Theme を差し替え、直前の Theme を返す。"""

    global _active_theme
    if not isinstance(theme, Theme):
        raise TypeError(f"theme must be a Theme: got={type(theme).__name__}")
    previous = _active_theme
    _active_theme = theme
    _logger.debug("active theme replaced")
    return previous


def reset_active_theme() -> Theme:
    """組み込み既定値だけの Theme に戻し、直前の Theme を返す。"""

    return set_active_theme(Theme())


@contextlib.contextmanager
def theme_context(theme: Theme) -> Iterator[Theme]:
    """現在のコンテキストでだけ active theme を theme にするコンテキストマネージャ。"""

    if not isinstance(theme, Theme):
        raise TypeError(f"theme must be a Theme: got={type(theme).__name__}")
    token = _theme_override_var.set(theme)
    try:
        yield theme
    finally:
        _theme_override_var.reset(token)


__all__ = ["active_theme", "reset_active_theme", "set_active_theme", "theme_context"]
