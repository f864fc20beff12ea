"""依存境界（core/interactive）の破りを検出するテスト。"""

from __future__ import annotations

import ast
import tomllib
from pathlib import Path


def _repo_root() -> Path:
    path = Path(__file__).resolve()
    for parent in path.parents:
        if (parent / "src").is_dir() and (parent / "tests").is_dir():
            return parent
    raise RuntimeError("repo root が見つからない")


def _imported_names(node: ast.AST) -> list[str]:
    """import 文が参照するモジュール名を絶対名に寄せて返す（core からの相対 import 用）。"""

    if isinstance(node, ast.Import):
        return [alias.name for alias in node.names]
    if not isinstance(node, ast.ImportFrom):
        return []
    if node.level == 0:
        return [node.module or ""]
    # core 直下からの `..` は stylekit を指す
    if node.level >= 2:
        if node.module:
            return [f"stylekit.{node.module}"]
        return [f"stylekit.{alias.name}" for alias in node.names]
    return []


def test_core_does_not_depend_on_interactive() -> None:
    root = _repo_root()
    core_root = root / "src" / "stylekit" / "core"
    violations: list[str] = []
    for path in sorted(core_root.rglob("*.py")):
        tree = ast.parse(path.read_text(encoding="utf-8"))
        for node in ast.walk(tree):
            for name in _imported_names(node):
                if name.startswith(("stylekit.interactive", "pyglet")):
                    violations.append(f"{path.relative_to(root)}:{node.lineno}: {name}")
    assert violations == []


def test_relative_import_of_interactive_is_detected() -> None:
    node = ast.parse("from ..interactive import cursor\n").body[0]
    assert _imported_names(node) == ["stylekit.interactive"]
    node = ast.parse("from .. import interactive\n").body[0]
    assert _imported_names(node) == ["stylekit.interactive"]
    node = ast.parse("from .theme import Theme\n").body[0]
    assert _imported_names(node) == []


def test_interactive_imports_pyglet_only_for_type_checking() -> None:
    root = _repo_root()
    src_root = root / "src"
    for path in sorted((src_root / "stylekit" / "interactive").rglob("*.py")):
        tree = ast.parse(path.read_text(encoding="utf-8"))
        for node in tree.body:
            for name in _imported_names(node):
                assert not name.startswith("pyglet"), path.relative_to(src_root)


def test_pyglet_is_an_optional_extra() -> None:
    data = tomllib.loads((_repo_root() / "pyproject.toml").read_text(encoding="utf-8"))
    project = data["project"]

    assert not any(dep.startswith("pyglet") for dep in project["dependencies"])
    assert any(dep.startswith("pyglet") for dep in project["optional-dependencies"]["interactive"])
