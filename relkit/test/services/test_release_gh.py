from __future__ import annotations

from pathlib import Path

import pytest

from relkit.core.result import Err, Ok, Result
from relkit.platform.process import ProcessError
from relkit.services.release import gh as gh_mod


class _Call:
    def __init__(self, cmd: list[str], input: str | None) -> None:
        self.cmd = cmd
        self.input = input


def _patch_run(
    monkeypatch: pytest.MonkeyPatch, response: Result[str, ProcessError]
) -> list[_Call]:
    calls: list[_Call] = []

    def fake_run(
        cmd: list[str],
        *,
        cwd: Path,
        timeout: float | None = None,
        input: str | None = None,
    ) -> Result[str, ProcessError]:
        del cwd
        del timeout
        calls.append(_Call(cmd, input))
        return response

    monkeypatch.setattr(gh_mod, "run_process", fake_run)
    return calls


def _err(stderr: str) -> Err[ProcessError]:
    return Err(ProcessError(command=("gh",), returncode=1, stdout="", stderr=stderr))


def test_create_release_passes_notes_on_stdin(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    calls = _patch_run(monkeypatch, Ok("https://github.com/o/r/releases/tag/v1.2.0\n"))

    result = gh_mod.create_release(project_root=tmp_path, version="1.2.0", notes="- change")

    assert result == Ok(gh_mod.GhRelease(tag="v1.2.0", status="created"))
    assert calls[0].cmd == [
        "gh",
        "release",
        "create",
        "v1.2.0",
        "--title",
        "Release v1.2.0",
        "--notes-file",
        "-",
    ]
    assert calls[0].input == "- change"


def test_create_release_with_repository_and_default_body(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    calls = _patch_run(monkeypatch, Ok(""))

    gh_mod.create_release(
        project_root=tmp_path, version="1.2.0", notes=None, repository="owner/repo"
    )

    assert calls[0].cmd[6:8] == ["--repo", "owner/repo"]
    assert calls[0].input == "Release v1.2.0"


def test_create_release_already_exists_is_ok(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    _patch_run(monkeypatch, _err("a release with the same tag name already exists: v1.2.0"))

    result = gh_mod.create_release(project_root=tmp_path, version="1.2.0", notes=None)

    assert result == Ok(gh_mod.GhRelease(tag="v1.2.0", status="exists"))


def test_create_release_failure(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _patch_run(monkeypatch, _err("HTTP 401: Bad credentials\n"))

    result = gh_mod.create_release(project_root=tmp_path, version="1.2.0", notes=None)

    assert isinstance(result, Err)
    assert result.error.kind == "gh_failed"
    assert result.error.hint == "HTTP 401: Bad credentials"


def test_ensure_gh_available(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(gh_mod.shutil, "which", lambda _name: None)
    result = gh_mod.ensure_gh_available()
    assert isinstance(result, Err)
    assert result.error.kind == "gh_missing"

    monkeypatch.setattr(gh_mod.shutil, "which", lambda _name: "/usr/bin/gh")
    assert gh_mod.ensure_gh_available() == Ok(None)
