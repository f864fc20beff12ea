# どこで: `src/stylekit/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）と、設定済み Theme の適用を提供する。
# なぜ: 組み込みアプリが Theme をコードを書き換えずに差し替えられるようにするため。

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from .theme import Theme
from .theme_codec import theme_from_mapping
from .theme_context import set_active_theme

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """stylekit の実行時設定。"""

    config_path: Path | None
    theme: Theme


_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """以降の設定探索で使う明示 config パスを設定する。

    Notes
    -----
    `path` を None にすると明示指定を解除し、既定の探索に戻る。
    """

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    if path is None:
        _EXPLICIT_CONFIG_PATH = None
        _CONFIG_CACHE = None
        return
    p = Path(str(path)).expanduser()
    _EXPLICIT_CONFIG_PATH = p
    _CONFIG_CACHE = None


def _default_config_candidates() -> tuple[Path, ...]:
    cwd = Path.cwd()
    home = Path.home()
    return (
        cwd / ".stylekit" / "config.yaml",
        home / ".config" / "stylekit" / "config.yaml",
    )


def _load_yaml_text(text: str, *, source: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")

    return dict(data)


def _load_yaml_config(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    return _load_yaml_text(text, source=str(path))


def _load_packaged_default_config() -> dict[str, Any]:
    """同梱デフォルト config をロードして dict を返す。"""

    try:
        blob = (
            resources.files("stylekit")
            .joinpath("resource", "default_config.yaml")
            .read_text(encoding="utf-8")
        )
    except OSError as exc:  # pragma: no cover
        raise RuntimeError(
            "同梱 default_config.yaml の読み込みに失敗しました"
            "（パッケージ配布物の package-data を確認してください）"
        ) from exc

    return _load_yaml_text(blob, source="stylekit/resource/default_config.yaml")


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。

    上書き順（後勝ち）:
    1) 同梱 default_config.yaml
    2) `./.stylekit/config.yaml` / `~/.config/stylekit/config.yaml`
    3) `set_config_path()` で指定したパス

    `theme` はトップレベルキー単位で後勝ちになる（種別スタイル同士はマージしない）。
    """

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit_path = _EXPLICIT_CONFIG_PATH
    if explicit_path is not None and not explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit_path}")

    discovered_path: Path | None = None
    for p in _default_config_candidates():
        if p.is_file():
            discovered_path = p
            break

    payload = _load_packaged_default_config()
    if discovered_path is not None:
        _logger.debug("config.yaml を検出しました: %s", discovered_path)
        payload.update(_load_yaml_config(discovered_path))
    if explicit_path is not None:
        payload.update(_load_yaml_config(explicit_path))

    version = payload.get("version")
    if version is None:
        raise RuntimeError(
            "config.yaml の version が未設定です（同梱 default_config.yaml を確認してください）"
        )
    try:
        version_i = int(version)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"config.yaml の version は整数である必要があります: got={version!r}") from exc
    if version_i != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version_i}")

    try:
        theme = theme_from_mapping(payload.get("theme"), key="theme")
    except ValueError as exc:
        raise RuntimeError(f"config.yaml の theme が不正です: {exc}") from exc

    cfg = RuntimeConfig(
        config_path=explicit_path or discovered_path,
        theme=theme,
    )
    _CONFIG_CACHE = cfg
    return cfg


def install_configured_theme() -> Theme:
    """config.yaml の theme を active theme にして返す。"""

    cfg = runtime_config()
    set_active_theme(cfg.theme)
    _logger.info("theme を適用しました: config=%s", cfg.config_path or "<packaged default>")
    return cfg.theme


__all__ = ["RuntimeConfig", "install_configured_theme", "runtime_config", "set_config_path"]
