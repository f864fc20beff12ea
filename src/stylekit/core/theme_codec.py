# どこで: `src/stylekit/core/theme_codec.py`。
# 何を: YAML 等から読んだ mapping を ControlStyle / Theme に decode する。
# なぜ: 組み込みアプリが設定ファイルから Theme を組み立てられるようにし、値の解釈を 1 箇所に閉じるため。

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping
from typing import Any

from .control_style import STYLE_ATTRIBUTES, ControlStyle
from .paint import Color, CursorShape, FillMode, FillStyle, StrokeStyle, coerce_rgb255
from .theme import Theme

_logger = logging.getLogger(__name__)

_THEME_CATEGORIES: tuple[str, ...] = ("default", "button", "panel", "text_label")


def _snake_to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


# camelCase の別名も受け付ける（例: textFillMode, labelsDisplayEnclosingRect）。
_ATTRIBUTE_ALIASES: dict[str, str] = {
    **{name: name for name in STYLE_ATTRIBUTES},
    **{_snake_to_camel(name): name for name in STYLE_ATTRIBUTES},
}
_CATEGORY_ALIASES: dict[str, str] = {
    **{name: name for name in _THEME_CATEGORIES},
    **{_snake_to_camel(name): name for name in _THEME_CATEGORIES},
}


def decode_color(value: Any, *, key: str) -> Color:
    """色指定を Color に変換して返す。

    受け付ける形式は `"#RRGGBB"` / `"#RRGGBBAA"` / `[r, g, b]` / `[r, g, b, a]` /
    `{red, green, blue, alpha}` / `{rgb01: [r, g, b], alpha}`（0..1 float）。
    """

    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        try:
            return Color.from_hex(value)
        except ValueError as exc:
            raise ValueError(f"{key} は色指定である必要があります: got={value!r}") from exc
    if isinstance(value, Mapping) and "rgb01" in value:
        alpha = _coerce_alpha(value.get("alpha", 255), key=key)
        try:
            return Color.from_rgb01(value["rgb01"], alpha)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"{key}.rgb01 は 0..1 の [r, g, b] 配列である必要があります: got={value!r}") from exc
    if isinstance(value, Mapping):
        try:
            rgb = (value["red"], value["green"], value["blue"])
        except KeyError as exc:
            raise ValueError(f"{key} は red/green/blue を持つ必要があります: got={value!r}") from exc
        alpha = value.get("alpha", 255)
        r, g, b = _coerce_rgb(rgb, key=key)
        return Color(r, g, b, _coerce_alpha(alpha, key=key))
    try:
        seq = list(value)
    except TypeError as exc:
        raise ValueError(f"{key} は色指定である必要があります: got={value!r}") from exc
    if len(seq) == 4:
        r, g, b = _coerce_rgb(seq[:3], key=key)
        return Color(r, g, b, _coerce_alpha(seq[3], key=key))
    r, g, b = _coerce_rgb(seq, key=key)
    return Color(r, g, b)


def _coerce_rgb(value: Any, *, key: str) -> tuple[int, int, int]:
    try:
        return coerce_rgb255(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{key} は [r, g, b] の整数配列である必要があります: got={value!r}") from exc


def _coerce_alpha(value: Any, *, key: str) -> int:
    try:
        iv = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{key} の alpha は整数である必要があります: got={value!r}") from exc
    return 0 if iv < 0 else 255 if iv > 255 else iv


def decode_fill_style(value: Any, *, key: str) -> FillStyle:
    if isinstance(value, FillStyle):
        return value
    if isinstance(value, Mapping) and "color" in value:
        return FillStyle(color=decode_color(value["color"], key=f"{key}.color"))
    return FillStyle(color=decode_color(value, key=key))


def decode_stroke_style(value: Any, *, key: str) -> StrokeStyle:
    if isinstance(value, StrokeStyle):
        return value
    if isinstance(value, Mapping) and "color" in value:
        color = decode_color(value["color"], key=f"{key}.color")
        width = value.get("width", 1.0)
        try:
            return StrokeStyle(color=color, width=float(width))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"{key}.width は数値である必要があります: got={width!r}") from exc
    return StrokeStyle(color=decode_color(value, key=key))


def decode_cursor_shape(value: Any, *, key: str) -> CursorShape:
    """CSS の cursor 名（"pointer"）または列挙名（"POINTER"）を受け付ける。"""

    if isinstance(value, CursorShape):
        return value
    text = str(value).strip()
    try:
        return CursorShape(text.lower())
    except ValueError:
        pass
    try:
        return CursorShape[text.upper().replace("-", "_")]
    except KeyError as exc:
        raise ValueError(f"{key} は未知の cursor です: got={value!r}") from exc


def decode_fill_mode(value: Any, *, key: str) -> FillMode:
    if isinstance(value, FillMode):
        return value
    try:
        return FillMode(str(value).strip().lower())
    except ValueError as exc:
        raise ValueError(f"{key} は fill/stroke のいずれかである必要があります: got={value!r}") from exc


def _decode_font(value: Any, *, key: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{key} は文字列である必要があります: got={value!r}")
    return value


def _decode_rounding(value: Any, *, key: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{key} は数値である必要があります: got={value!r}")
    try:
        out = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{key} は数値である必要があります: got={value!r}") from exc
    if not math.isfinite(out):
        raise ValueError(f"{key} は有限の数値である必要があります: got={value!r}")
    if not 0.0 <= out <= 0.5:
        # 範囲外でも保持する（描画が崩れるだけでエラーにはしない）。
        _logger.warning("%s が 0.0..0.5 の範囲外です（そのまま使います）: %r", key, out)
    return out


def _decode_padding(value: Any, *, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key} は整数である必要があります: got={value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"{key} は整数である必要があります: got={value!r}")
    if int(value) != value:
        raise ValueError(f"{key} は整数である必要があります: got={value!r}")
    out = int(value)
    if out < 0:
        _logger.warning("%s が負の値です（そのまま使います）: %r", key, out)
    return out


def _decode_bool(value: Any, *, key: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{key} は true/false である必要があります: got={value!r}")
    return value


_DECODERS: dict[str, Callable[..., Any]] = {
    "font": _decode_font,
    "text_fill_mode": decode_fill_mode,
    "text_stroke_style": decode_stroke_style,
    "text_fill_style": decode_fill_style,
    "foreground_stroke_style": decode_stroke_style,
    "background_fill_style": decode_fill_style,
    "background_hover_fill_style": decode_fill_style,
    "rounding_percentage": _decode_rounding,
    "padding": _decode_padding,
    "normal_cursor_style": decode_cursor_shape,
    "hover_cursor_style": decode_cursor_shape,
    "labels_display_enclosing_rect": _decode_bool,
}


def control_style_from_mapping(data: Mapping[str, Any] | None, *, key: str = "style") -> ControlStyle:
    """mapping を ControlStyle に変換して返す。

    None の値は「未設定」として扱う。未知のキーや不正な値は ValueError。
    """

    if data is None:
        return ControlStyle()
    if not isinstance(data, Mapping):
        raise ValueError(f"{key} は mapping である必要があります: got={data!r}")

    values: dict[str, Any] = {}
    seen: set[str] = set()
    for raw_name, raw_value in data.items():
        name = _ATTRIBUTE_ALIASES.get(str(raw_name))
        if name is None:
            raise ValueError(f"{key} に未知の属性があります: {raw_name!r}")
        if name in seen:
            raise ValueError(f"{key} に属性が重複しています: {raw_name!r}")
        seen.add(name)
        if raw_value is None:
            continue
        values[name] = _DECODERS[name](raw_value, key=f"{key}.{raw_name}")
    return ControlStyle(**values)


def theme_from_mapping(data: Mapping[str, Any] | None, *, key: str = "theme") -> Theme:
    """mapping を Theme に変換して返す。

    キーは `default` / `button` / `panel` / `text_label`（`textLabel` も可）。
    無い種別は空のスタイルになる。
    """

    if data is None:
        return Theme()
    if not isinstance(data, Mapping):
        raise ValueError(f"{key} は mapping である必要があります: got={data!r}")

    styles: dict[str, ControlStyle] = {}
    for raw_name, raw_style in data.items():
        name = _CATEGORY_ALIASES.get(str(raw_name))
        if name is None:
            raise ValueError(f"{key} に未知の種別があります: {raw_name!r}")
        if name in styles:
            raise ValueError(f"{key} に種別が重複しています: {raw_name!r}")
        styles[name] = control_style_from_mapping(raw_style, key=f"{key}.{raw_name}")
    return Theme(**styles)


__all__ = [
    "control_style_from_mapping",
    "decode_color",
    "decode_cursor_shape",
    "decode_fill_mode",
    "decode_fill_style",
    "decode_stroke_style",
    "theme_from_mapping",
]
