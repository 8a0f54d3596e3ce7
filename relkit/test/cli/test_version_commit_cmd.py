from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
import typer

import relkit.cli.commands.version_commit as version_commit_cmd
from relkit.core.errors import ErrorCode
from relkit.core.result import Err, Ok, Result
from relkit.output.console import MockConsole
from relkit.services.release.errors import ReleaseError
from relkit.services.release.workflow import ReleaseOutcome, ReleasePaths, ReleaseRequest

OUTCOME = ReleaseOutcome(
    previous="0.1.0", version="0.2.0", tag="v0.2.0", bump="minor", committed=True, pushed=True
)


class _FakeWorkflow:
    def __init__(self, result: Result[ReleaseOutcome | None, ReleaseError]) -> None:
        self.result = result
        self.requests: list[ReleaseRequest] = []
        self.paths: list[ReleasePaths] = []

    def __call__(self, **kwargs: object) -> Result[ReleaseOutcome | None, ReleaseError]:
        request = kwargs["request"]
        paths = kwargs["paths"]
        assert isinstance(request, ReleaseRequest)
        assert isinstance(paths, ReleasePaths)
        self.requests.append(request)
        self.paths.append(paths)
        return self.result


@pytest.fixture
def workflow(
    monkeypatch: pytest.MonkeyPatch,
) -> Callable[[Result[ReleaseOutcome | None, ReleaseError]], _FakeWorkflow]:
    def install(result: Result[ReleaseOutcome | None, ReleaseError]) -> _FakeWorkflow:
        fake = _FakeWorkflow(result)
        monkeypatch.setattr(version_commit_cmd, "run_workflow", fake)
        return fake

    return install


def test_instant_release_emits_outputs(
    use_ctx: Callable[[object], MockConsole],
    workflow: Callable[[Result[ReleaseOutcome | None, ReleaseError]], _FakeWorkflow],
    github_output: Path,
    tmp_path: Path,
) -> None:
    use_ctx(version_commit_cmd)
    fake = workflow(Ok(OUTCOME))

    version_commit_cmd.version_and_commit(bump_type="minor", mode="instant", dry_run=False)

    assert fake.requests == [ReleaseRequest(mode="instant", bump="minor", dry_run=False, ci=False)]
    assert fake.paths[0].version_file == tmp_path / "relkit" / "__init__.py"
    assert fake.paths[0].fragments_dir == tmp_path / "changelog.d"
    assert github_output.read_text(encoding="utf-8") == "new_version=0.2.0\ntag=v0.2.0\n"


def test_ci_flag_comes_from_environment(
    use_ctx: Callable[[object], MockConsole],
    workflow: Callable[[Result[ReleaseOutcome | None, ReleaseError]], _FakeWorkflow],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    use_ctx(version_commit_cmd)
    monkeypatch.setenv("CI", "true")
    fake = workflow(Ok(OUTCOME))

    version_commit_cmd.version_and_commit(bump_type=None, mode="changeset", dry_run=False)

    assert fake.requests[0].ci is True
    assert fake.requests[0].mode == "changeset"
    assert fake.requests[0].bump is None


def test_nothing_to_release_writes_no_outputs(
    use_ctx: Callable[[object], MockConsole],
    workflow: Callable[[Result[ReleaseOutcome | None, ReleaseError]], _FakeWorkflow],
    github_output: Path,
) -> None:
    use_ctx(version_commit_cmd)
    workflow(Ok(None))

    version_commit_cmd.version_and_commit(bump_type=None, mode="changeset", dry_run=False)

    assert not github_output.exists()


def test_dry_run_writes_no_outputs(
    use_ctx: Callable[[object], MockConsole],
    workflow: Callable[[Result[ReleaseOutcome | None, ReleaseError]], _FakeWorkflow],
    github_output: Path,
) -> None:
    use_ctx(version_commit_cmd)
    fake = workflow(Ok(OUTCOME))

    version_commit_cmd.version_and_commit(bump_type="patch", mode="instant", dry_run=True)

    assert fake.requests[0].dry_run is True
    assert not github_output.exists()


def test_push_failure_exits_with_network_error(
    use_ctx: Callable[[object], MockConsole],
    workflow: Callable[[Result[ReleaseOutcome | None, ReleaseError]], _FakeWorkflow],
) -> None:
    console = use_ctx(version_commit_cmd)
    workflow(Err(ReleaseError(kind="push_failed", message="git push failed", hint="rejected")))

    with pytest.raises(typer.Exit) as exc:
        version_commit_cmd.version_and_commit(bump_type="patch", mode="instant", dry_run=False)

    assert exc.value.exit_code == int(ErrorCode.NETWORK_ERROR)
    assert console.find("git push failed")


@pytest.mark.parametrize(
    ("bump_type", "mode", "message"),
    [
        ("patch", "weekly", "--mode must be changeset or instant"),
        ("tiny", "instant", "--bump-type must be major, minor, or patch"),
    ],
)
def test_rejects_bad_options(
    use_ctx: Callable[[object], MockConsole],
    workflow: Callable[[Result[ReleaseOutcome | None, ReleaseError]], _FakeWorkflow],
    bump_type: str,
    mode: str,
    message: str,
) -> None:
    console = use_ctx(version_commit_cmd)
    fake = workflow(Ok(OUTCOME))

    with pytest.raises(typer.Exit) as exc:
        version_commit_cmd.version_and_commit(bump_type=bump_type, mode=mode, dry_run=False)

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)
    assert console.find(message)
    assert fake.requests == []
