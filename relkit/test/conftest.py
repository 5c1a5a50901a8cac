"""Shared fixtures: throwaway git repositories with a bare remote."""

from __future__ import annotations

import os
import shutil
import subprocess
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest

_GIT_ENV = {
    "GIT_AUTHOR_NAME": "Release Bot",
    "GIT_AUTHOR_EMAIL": "release-bot@example.com",
    "GIT_COMMITTER_NAME": "Release Bot",
    "GIT_COMMITTER_EMAIL": "release-bot@example.com",
    "GIT_CONFIG_GLOBAL": os.devnull,
    "GIT_CONFIG_NOSYSTEM": "1",
}

type GitRunner = Callable[..., str]


def _git(cwd: Path, *args: str) -> str:
    proc = subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        env={**os.environ, **_GIT_ENV},
        capture_output=True,
        text=True,
        check=True,
    )
    return proc.stdout


@dataclass(frozen=True, slots=True)
class RepoPair:
    """A working clone tracking ``origin/main`` in a local bare repository."""

    work: Path
    remote: Path

    def commit(self, name: str = "change.txt", content: str = "change\n") -> None:
        (self.work / name).write_text(content, encoding="utf-8")
        _git(self.work, "add", name)
        _git(self.work, "commit", "-q", "-m", f"update {name}")

    def local_tags(self) -> set[str]:
        return set(_git(self.work, "tag", "-l").split())

    def remote_tags(self) -> set[str]:
        return set(_git(self.remote, "tag", "-l").split())

    def seed_remote_tags(self, *tags: str) -> None:
        """Create tags on the remote only (the clone must fetch them)."""
        for tag in tags:
            _git(self.work, "tag", tag)
            _git(self.work, "push", "-q", "origin", f"refs/tags/{tag}")
            _git(self.work, "tag", "-d", tag)


@pytest.fixture
def git() -> GitRunner:
    if shutil.which("git") is None:
        pytest.skip("git not installed")
    return _git


@pytest.fixture
def repo_pair(tmp_path: Path, git: GitRunner) -> RepoPair:
    remote = tmp_path / "remote.git"
    work = tmp_path / "work"

    git(tmp_path, "init", "-q", "--bare", "-b", "main", str(remote))
    git(tmp_path, "init", "-q", "-b", "main", str(work))
    (work / "README.md").write_text("hello\n", encoding="utf-8")
    git(work, "add", "README.md")
    git(work, "commit", "-q", "-m", "initial")
    git(work, "remote", "add", "origin", str(remote))
    git(work, "push", "-q", "-u", "origin", "main")

    return RepoPair(work=work, remote=remote)
