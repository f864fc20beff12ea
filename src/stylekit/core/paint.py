"""
どこで: `src/stylekit/core/paint.py`。
何を: コントロールの描画属性で使う値型（色/塗り/線/塗りモード/カーソル形状）と色変換ユーティリティを定義する。
なぜ: Theme と ControlStyle が同じ値型を共有し、描画側の実装に依存せず比較できるようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, cast


def coerce_rgb255(value: object) -> tuple[int, int, int]:
    """値を RGB255 タプル `(r, g, b)`（0..255）に正規化して返す。

    Parameters
    ----------
    value : object
        `(r, g, b)` の 3 要素シーケンス。

    Returns
    -------
    tuple[int, int, int]
        `int()` 化 + 0..255 clamp 済みの RGB。

    Raises
    ------
    ValueError
        長さ 3 のシーケンスでない場合。
    """

    r: object
    g: object
    b: object
    try:
        r, g, b = value  # type: ignore[misc]
    except Exception as exc:
        raise ValueError(f"rgb value must be a length-3 sequence: {value!r}") from exc

    def _clamp(v: object) -> int:
        iv = int(cast(Any, v))
        return 0 if iv < 0 else 255 if iv > 255 else iv

    return _clamp(r), _clamp(g), _clamp(b)


def rgb01_to_rgb255(rgb: tuple[float, float, float]) -> tuple[int, int, int]:
    """0..1 float の RGB を 0..255 int の RGB に変換して返す。"""

    r, g, b = rgb
    out: list[int] = []
    for v in (r, g, b):
        fv = float(v)
        fv = 0.0 if fv < 0.0 else 1.0 if fv > 1.0 else fv
        out.append(int(round(fv * 255.0)))
    return int(out[0]), int(out[1]), int(out[2])


def rgb255_to_rgb01(rgb: tuple[int, int, int]) -> tuple[float, float, float]:
    """0..255 int の RGB を 0..1 float の RGB に変換して返す。"""

    r, g, b = rgb
    return float(r) / 255.0, float(g) / 255.0, float(b) / 255.0


@dataclass(frozen=True, slots=True)
class Color:
    """RGBA 色（各成分 0..255 の int）。

    値の妥当性（0..255 の範囲）は検証しない。描画側へそのまま渡す。
    """

    red: int
    green: int
    blue: int
    alpha: int = 255

    BLACK: ClassVar[Color]
    WHITE: ClassVar[Color]

    @classmethod
    def from_rgb(cls, value: object) -> Color:
        """`(r, g, b)` シーケンスから不透明色を作る（成分は clamp される）。"""

        r, g, b = coerce_rgb255(value)
        return cls(r, g, b)

    @classmethod
    def from_rgb01(cls, rgb: tuple[float, float, float], alpha: int = 255) -> Color:
        """0..1 float の `(r, g, b)` から色を作る（GUI の color picker 値向け）。"""

        r, g, b = rgb01_to_rgb255(rgb)
        return cls(r, g, b, alpha)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """`#RRGGBB` / `#RRGGBBAA` 形式の文字列から色を作る。

        Raises
        ------
        ValueError
            形式が不正な場合。
        """

        s = str(text).strip()
        if s.startswith("#"):
            s = s[1:]
        if len(s) not in (6, 8):
            raise ValueError(f"hex color must be #RRGGBB or #RRGGBBAA: {text!r}")
        try:
            parts = [int(s[i : i + 2], 16) for i in range(0, len(s), 2)]
        except ValueError as exc:
            raise ValueError(f"hex color must be #RRGGBB or #RRGGBBAA: {text!r}") from exc
        return cls(*parts)

    def rgb255(self) -> tuple[int, int, int]:
        return self.red, self.green, self.blue

    def rgba01(self) -> tuple[float, float, float, float]:
        """0..1 float の RGBA を返す（GL 系の描画側向け）。"""

        r, g, b = rgb255_to_rgb01(self.rgb255())
        return r, g, b, float(self.alpha) / 255.0

    def css(self) -> str:
        """canvas 系の描画側向けに CSS の色文字列を返す。"""

        if self.alpha == 255:
            return f"rgb({self.red}, {self.green}, {self.blue})"
        return f"rgba({self.red}, {self.green}, {self.blue}, {self.alpha / 255.0:.3f})"


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)


@dataclass(frozen=True, slots=True)
class FillStyle:
    """塗りの指定（色のみ）。"""

    color: Color


@dataclass(frozen=True, slots=True)
class StrokeStyle:
    """線の指定（色 + 線幅）。"""

    color: Color
    width: float = 1.0


class FillMode(str, Enum):
    """テキストのグリフを塗るか、輪郭線で描くか。"""

    FILL = "fill"
    STROKE = "stroke"


class CursorShape(str, Enum):
    """マウスカーソル形状。値は CSS の cursor 名。"""

    DEFAULT = "default"
    POINTER = "pointer"
    TEXT = "text"
    CROSSHAIR = "crosshair"
    MOVE = "move"
    WAIT = "wait"
    PROGRESS = "progress"
    HELP = "help"
    NOT_ALLOWED = "not-allowed"
    GRAB = "grab"
    GRABBING = "grabbing"
    EW_RESIZE = "ew-resize"
    NS_RESIZE = "ns-resize"
    NONE = "none"


__all__ = [
    "Color",
    "CursorShape",
    "FillMode",
    "FillStyle",
    "StrokeStyle",
    "coerce_rgb255",
    "rgb01_to_rgb255",
    "rgb255_to_rgb01",
]
