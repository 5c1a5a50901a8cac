"""Git repository abstraction.

This module provides the Repository class for the git operations a release
run needs: cleanliness and upstream checks, tag listing, tag creation and
tag push. All operations return Result types.

Usage:
    repo = Repository(Path("."))

    match repo.list_tags():
        case Ok(tags):
            print(f"{len(tags)} tags")
        case Err(e):
            print(f"Error: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from relkit.core.result import Err, Ok, Result
from relkit.platform.process import ProcessError
from relkit.platform.process import run as run_process

__all__ = [
    "GitError",
    "Repository",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git subcommand that failed (e.g. "fetch --tags origin")
        message: Error message (git's stderr when available)
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


def _git_error(command: str, error: ProcessError, fallback: str) -> GitError:
    return GitError(
        command=command,
        message=error.detail or fallback,
        returncode=error.returncode,
    )


class Repository:
    """Git repository abstraction.

    Attributes:
        path: Path to the repository working directory
        env: Environment for git child processes (None inherits ours)
    """

    def __init__(self, path: Path, env: dict[str, str] | None = None) -> None:
        self.path = path
        self.env = env

    def is_clean(self) -> Result[bool, GitError]:
        """Check that the index and working tree match HEAD.

        Untracked files do not count as changes.

        Returns:
            Ok(True) if clean, Ok(False) if there are uncommitted changes,
            Err(GitError) if git could not answer (e.g. no commits yet).
        """
        # Stat-only changes (touched but identical files) are not modifications.
        self._run(["update-index", "-q", "--refresh"])

        result = self._run(["diff-index", "--quiet", "HEAD", "--"])
        match result:
            case Ok(_):
                return Ok(True)
            case Err(e) if e.returncode == 1:
                return Ok(False)
            case Err(e):
                return Err(_git_error("diff-index HEAD", e, "cannot compare working tree to HEAD"))

    def upstream(self) -> Result[str | None, GitError]:
        """Get the upstream tracking branch of HEAD.

        Returns:
            Ok("origin/main"), Ok(None) when no upstream is configured,
            or Err(GitError) when git itself fails.
        """
        # Decided from exit codes and plumbing output only; git translates
        # its error messages under non-English locales.
        head = self._run(["symbolic-ref", "-q", "HEAD"])
        if isinstance(head, Err):
            # Exit 1 is a detached HEAD: no branch, so no upstream.
            if head.error.returncode == 1:
                return Ok(None)
            return Err(_git_error("symbolic-ref HEAD", head.error, "cannot resolve current branch"))

        result = self._run(["for-each-ref", "--format=%(upstream:short)", head.value.strip()])
        match result:
            case Ok(stdout):
                name = stdout.strip()
                return Ok(name or None)
            case Err(e):
                return Err(_git_error("for-each-ref", e, "cannot resolve upstream branch"))

    def unpushed_commits(self) -> Result[list[str], GitError]:
        """List commits on HEAD that its upstream does not have.

        Returns:
            Ok(["<sha> <subject>", ...]) (empty when in sync)
            Err(GitError) on failure (including a missing upstream)
        """
        result = self._run(["log", "--oneline", "@{u}.."])
        match result:
            case Err(e):
                return Err(_git_error("log @{u}..", e, "cannot compare with upstream"))
            case Ok(stdout):
                return Ok([ln for ln in stdout.splitlines() if ln.strip()])

    def current_branch(self) -> str | None:
        """Get current branch name.

        Returns None if detached HEAD or error.
        """
        result = self._run(["rev-parse", "--abbrev-ref", "HEAD"])
        match result:
            case Ok(stdout):
                branch = stdout.strip()
                return None if branch == "HEAD" else branch
            case Err(_):
                return None

    def fetch_tags(self, remote: str) -> Result[None, GitError]:
        """Fetch all tags from ``remote``."""
        result = self._run(["fetch", "--tags", remote])
        if isinstance(result, Err):
            return Err(_git_error(f"fetch --tags {remote}", result.error, "fetch failed"))
        return Ok(None)

    def list_tags(self) -> Result[list[str], GitError]:
        """List local tag names, in git's (lexicographic) order."""
        result = self._run(["tag", "-l"])
        match result:
            case Err(e):
                return Err(_git_error("tag -l", e, "cannot list tags"))
            case Ok(stdout):
                return Ok([ln.strip() for ln in stdout.splitlines() if ln.strip()])

    def create_tag(self, tag: str) -> Result[None, GitError]:
        """Create a lightweight tag on HEAD."""
        result = self._run(["tag", tag])
        if isinstance(result, Err):
            return Err(_git_error(f"tag {tag}", result.error, f"cannot create tag {tag}"))
        return Ok(None)

    def push_tag(self, remote: str, tag: str) -> Result[None, GitError]:
        """Push a single tag to ``remote``."""
        result = self._run(["push", remote, f"refs/tags/{tag}"])
        if isinstance(result, Err):
            return Err(_git_error(f"push {remote} refs/tags/{tag}", result.error, "push failed"))
        return Ok(None)

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        """Run a git command in this repository."""
        return run_process(["git", "-C", str(self.path), *args], cwd=self.path, env=self.env)
