"""Preconditions checked before anything is tagged or pushed."""

from __future__ import annotations

from collections.abc import Sequence

from relkit.core.result import Err, Ok, Result
from relkit.git.repository import Repository
from relkit.platform.process import which
from relkit.release.constants import GH_INSTALL_HINT, GIT_INSTALL_HINT
from relkit.release.errors import ReleaseError, from_git_error

REQUIRED_TOOLS = ("git", "gh")

_INSTALL_HINTS = {
    "git": GIT_INSTALL_HINT,
    "gh": GH_INSTALL_HINT,
}


def ensure_tools_available(
    *,
    tools: Sequence[str] = REQUIRED_TOOLS,
    search_path: str | None = None,
) -> Result[None, ReleaseError]:
    for tool in tools:
        if which(tool, path=search_path) is None:
            return Err(
                ReleaseError(
                    kind="tool_missing",
                    message=f"{tool}: missing",
                    hint=_INSTALL_HINTS.get(tool),
                )
            )
    return Ok(None)


def ensure_clean_tree(repo: Repository) -> Result[None, ReleaseError]:
    clean = repo.is_clean()
    if isinstance(clean, Err):
        return Err(from_git_error(clean.error))

    if not clean.value:
        return Err(
            ReleaseError(
                kind="dirty_working_tree",
                message="you have uncommitted changes",
                hint="Commit or stash them, then retry.",
            )
        )
    return Ok(None)


def ensure_synced(repo: Repository, *, remote: str = "origin") -> Result[None, ReleaseError]:
    upstream = repo.upstream()
    if isinstance(upstream, Err):
        return Err(from_git_error(upstream.error))

    if upstream.value is None:
        branch = repo.current_branch() or "<branch>"
        return Err(
            ReleaseError(
                kind="no_upstream",
                message=f"branch has no upstream tracking branch: {branch}",
                hint=f"Run: git push -u {remote} {branch}",
            )
        )

    ahead = repo.unpushed_commits()
    if isinstance(ahead, Err):
        return Err(from_git_error(ahead.error))

    if ahead.value:
        n = len(ahead.value)
        return Err(
            ReleaseError(
                kind="unpushed_commits",
                message=f"local branch is {n} commit(s) ahead of {upstream.value}",
                hint="Push your changes first.",
            )
        )
    return Ok(None)
