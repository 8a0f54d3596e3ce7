from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from relkit.cli.context import CLIContext
from relkit.core.config import Config
from relkit.core.project import Project
from relkit.output.console import MockConsole


@pytest.fixture
def ctx(tmp_path: Path) -> CLIContext:
    """CLI context rooted at tmp_path with default config and a MockConsole."""
    return CLIContext(project=Project(root=tmp_path), config=Config(), console=MockConsole())


@pytest.fixture
def use_ctx(monkeypatch: pytest.MonkeyPatch, ctx: CLIContext) -> Callable[[object], MockConsole]:
    """Make a command module's build_context() return ``ctx``."""

    def patch(module: object) -> MockConsole:
        monkeypatch.setattr(module, "build_context", lambda: ctx)
        assert isinstance(ctx.console, MockConsole)
        return ctx.console

    return patch


@pytest.fixture
def version_file(tmp_path: Path) -> Path:
    path = tmp_path / "relkit" / "__init__.py"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text('__version__ = "0.1.0"\n', encoding="utf-8")
    return path


@pytest.fixture
def github_output(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "github_output"
    monkeypatch.setenv("GITHUB_OUTPUT", str(path))
    return path


@pytest.fixture(autouse=True)
def _clean_ci_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GITHUB_OUTPUT", "GITHUB_BASE_REF", "CI", "RELKIT_ROOT"):
        monkeypatch.delenv(name, raising=False)
