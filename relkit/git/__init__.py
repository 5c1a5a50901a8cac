"""Git operations.

Usage:
    from relkit.git import Repository

    repo = Repository(Path("."))
    tags = repo.list_tags()
"""

from relkit.git.repository import GitError, Repository

__all__ = [
    "GitError",
    "Repository",
]
