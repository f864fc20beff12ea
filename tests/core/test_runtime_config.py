from pathlib import Path

import pytest

from stylekit.core.control_style import ControlCategory, ControlStyle
from stylekit.core.runtime_config import install_configured_theme, runtime_config, set_config_path
from stylekit.core.theme import Theme
from stylekit.core.theme_context import active_theme, reset_active_theme


@pytest.fixture(autouse=True)
def _reset_runtime_config() -> None:
    set_config_path(None)
    reset_active_theme()
    yield
    set_config_path(None)
    reset_active_theme()


def _isolate_config_discovery(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


def test_packaged_defaults_give_builtin_only_theme(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    cfg = runtime_config()
    assert cfg.config_path is None
    assert cfg.theme == Theme()


def test_discovered_config_overrides_packaged_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    discovered = tmp_path / ".stylekit" / "config.yaml"
    discovered.parent.mkdir(parents=True, exist_ok=True)
    discovered.write_text(
        "theme:\n  default:\n    padding: 10\n  button:\n    padding: 3\n",
        encoding="utf-8",
    )

    cfg = runtime_config()
    assert cfg.config_path == discovered
    assert cfg.theme.padding(ControlCategory.BUTTON) == 3
    assert cfg.theme.padding(ControlCategory.PANEL) == 10


def test_home_config_is_discovered(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    home_cfg = tmp_path / ".config" / "stylekit" / "config.yaml"
    home_cfg.parent.mkdir(parents=True, exist_ok=True)
    home_cfg.write_text('theme:\n  panel:\n    font: "Courier"\n', encoding="utf-8")

    cfg = runtime_config()
    assert cfg.config_path == home_cfg
    assert cfg.theme.font(ControlCategory.PANEL) == "Courier"


def test_explicit_config_overrides_discovered_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    discovered = tmp_path / ".stylekit" / "config.yaml"
    discovered.parent.mkdir(parents=True, exist_ok=True)
    discovered.write_text("theme:\n  default:\n    padding: 10\n", encoding="utf-8")

    explicit = tmp_path / "explicit.yaml"
    explicit.write_text(
        "theme:\n  default:\n    font: \"18px Helvetica\"\n",
        encoding="utf-8",
    )
    set_config_path(explicit)

    cfg = runtime_config()
    assert cfg.config_path == explicit
    # theme はトップレベル単位で後勝ち（discovered の padding は残らない）
    assert cfg.theme.font(ControlCategory.BUTTON) == "18px Helvetica"
    assert cfg.theme.padding(ControlCategory.BUTTON) == 5


def test_runtime_config_is_cached_until_path_changes(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    first = runtime_config()
    assert runtime_config() is first

    explicit = tmp_path / "explicit.yaml"
    explicit.write_text("theme:\n  button:\n    padding: 1\n", encoding="utf-8")
    set_config_path(explicit)

    assert runtime_config() is not first
    assert runtime_config().theme.padding(ControlCategory.BUTTON) == 1


def test_missing_explicit_config_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)
    set_config_path(tmp_path / "missing.yaml")

    with pytest.raises(FileNotFoundError):
        runtime_config()


@pytest.mark.parametrize(
    "text",
    [
        "version: 2\n",
        "version: one\n",
        "- just\n- a list\n",
        "theme: [\n",
        "theme:\n  slider:\n    padding: 1\n",
        "theme:\n  button:\n    padding: wide\n",
        "theme:\n  default:\n    padding: .inf\n",
        "theme:\n  default:\n    padding: .nan\n",
    ],
)
def test_invalid_config_raises_runtime_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, text: str
):
    _isolate_config_discovery(tmp_path, monkeypatch)
    explicit = tmp_path / "bad.yaml"
    explicit.write_text(text, encoding="utf-8")
    set_config_path(explicit)

    with pytest.raises(RuntimeError):
        runtime_config()


def test_install_configured_theme_replaces_active_theme(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)
    explicit = tmp_path / "theme.yaml"
    explicit.write_text(
        "theme:\n  textLabel:\n    labelsDisplayEnclosingRect: true\n",
        encoding="utf-8",
    )
    set_config_path(explicit)

    installed = install_configured_theme()

    assert active_theme() is installed
    label_style = ControlStyle().tagged(ControlCategory.TEXT_LABEL)
    assert label_style.resolved_labels_display_enclosing_rect is True
    assert ControlStyle().tagged(ControlCategory.BUTTON).resolved_labels_display_enclosing_rect is False
