"""Error types for the release pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from relkit.git.repository import GitError

type ReleaseErrorKind = Literal[
    "tool_missing",
    "dirty_working_tree",
    "unpushed_commits",
    "no_upstream",
    "invalid_tag",
    "external_command_failed",
]


@dataclass(frozen=True, slots=True)
class ReleaseError:
    """Why a release run stopped.

    Every kind is fatal; ``kind`` exists for callers and tests, the exit
    status is the same for all of them.
    """

    kind: ReleaseErrorKind
    message: str
    hint: str | None = None


def from_git_error(error: GitError) -> ReleaseError:
    return ReleaseError(
        kind="external_command_failed",
        message=f"git {error.command} failed (exit {error.returncode})",
        hint=error.message or None,
    )
