from __future__ import annotations

from pathlib import Path

from relkit.core.result import Err, Ok, Result
from relkit.platform.process import run as run_process
from relkit.release.errors import ReleaseError


def release_create_command(*, tag: str, title: str, notes: str) -> list[str]:
    return ["gh", "release", "create", tag, "--title", title, "--notes", notes]


def create_release(
    *,
    repo_root: Path,
    tag: str,
    title: str,
    notes: str,
    env: dict[str, str] | None = None,
) -> Result[None, ReleaseError]:
    """Create a GitHub release for an already-pushed tag.

    Runs once; a failure is reported, never retried.
    """
    cmd = release_create_command(tag=tag, title=title, notes=notes)
    result = run_process(cmd, cwd=repo_root, env=env)
    if isinstance(result, Err):
        e = result.error
        return Err(
            ReleaseError(
                kind="external_command_failed",
                message=f"gh release create {tag} failed (exit {e.returncode})",
                hint=e.detail or "Check `gh auth status` and GH_TOKEN in your env file.",
            )
        )
    return Ok(None)
