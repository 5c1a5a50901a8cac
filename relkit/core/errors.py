"""Process exit codes.

Every failure of the release pipeline maps to the same exit status; the
diagnostic printed on stderr tells the operator which step failed.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    - 0: Success
    - 1: Any precondition or external-tool failure
    """

    OK = 0
    FAILURE = 1

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK
