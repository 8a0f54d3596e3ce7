from __future__ import annotations

import ast
import os
from pathlib import Path

import pytest


def _require_arch_checks_enabled() -> None:
    if os.getenv("RELKIT_ARCH_CHECKS") != "1":
        pytest.skip("architecture checks are opt-in; set RELKIT_ARCH_CHECKS=1 to enable")


def _package_root() -> Path:
    return Path(__file__).resolve().parents[2]


def _iter_source_files(root: Path) -> list[Path]:
    files: list[Path] = []
    for path in sorted(root.rglob("*.py")):
        rel = path.relative_to(root)
        if rel.parts[0] == "test" or "__pycache__" in rel.parts:
            continue
        files.append(path)
    return files


def _imports(tree: ast.AST) -> list[tuple[str, int]]:
    found: list[tuple[str, int]] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            found.extend((alias.name, node.lineno) for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and not node.level:
            found.append((node.module, node.lineno))
    return found


def _matches_prefix(module: str, prefix: str) -> bool:
    return module == prefix or module.startswith(prefix + ".")


def _parse(path: Path) -> ast.AST:
    return ast.parse(path.read_text(encoding="utf-8"), filename=str(path))


def test_subprocess_is_only_used_by_platform_process() -> None:
    _require_arch_checks_enabled()

    root = _package_root()
    offenders: list[str] = []
    for path in _iter_source_files(root):
        rel = path.relative_to(root).as_posix()
        if rel == "platform/process.py":
            continue
        for module, line in _imports(_parse(path)):
            if _matches_prefix(module, "subprocess"):
                offenders.append(f"{rel}:{line}: direct subprocess import")

    assert not offenders, "Subprocess policy violations:\n" + "\n".join(offenders)


def test_rich_is_only_imported_by_console() -> None:
    _require_arch_checks_enabled()

    root = _package_root()
    offenders: list[str] = []
    for path in _iter_source_files(root):
        rel = path.relative_to(root).as_posix()
        if rel == "output/console.py":
            continue
        for module, line in _imports(_parse(path)):
            if _matches_prefix(module, "rich"):
                offenders.append(f"{rel}:{line}: direct rich import '{module}'")

    assert not offenders, "Direct rich usage policy violations:\n" + "\n".join(offenders)


def test_services_do_not_import_cli() -> None:
    _require_arch_checks_enabled()

    root = _package_root()
    offenders: list[str] = []
    for path in _iter_source_files(root / "services"):
        rel = path.relative_to(root).as_posix()
        for module, line in _imports(_parse(path)):
            if _matches_prefix(module, "relkit.cli"):
                offenders.append(f"{rel}:{line}: forbidden import '{module}'")

    assert not offenders, "services -> cli dependency violations:\n" + "\n".join(offenders)


def test_mathops_stays_free_of_cli_dependencies() -> None:
    _require_arch_checks_enabled()

    root = _package_root()
    offenders: list[str] = []
    for path in _iter_source_files(root / "mathops"):
        rel = path.relative_to(root).as_posix()
        for module, line in _imports(_parse(path)):
            if any(_matches_prefix(module, p) for p in ("typer", "rich", "relkit.cli")):
                offenders.append(f"{rel}:{line}: forbidden import '{module}'")

    assert not offenders, "mathops dependency violations:\n" + "\n".join(offenders)
