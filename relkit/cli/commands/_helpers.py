"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import typer

from relkit.core.errors import ErrorCode
from relkit.core.result import Err, Result

if TYPE_CHECKING:
    from relkit.cli.context import CLIContext


T = TypeVar("T")
E = TypeVar("E")


def exit_on_error[T, E](
    result: Result[T, E],
    ctx: CLIContext,
    error_code: ErrorCode = ErrorCode.FAILURE,
) -> T:
    """Return the value of an Ok, or report the error and exit.

    Expects error objects to have 'message' and optional 'hint' attributes.
    """
    if isinstance(result, Err):
        error = result.error
        message: str = getattr(error, "message", str(error))
        hint: str | None = getattr(error, "hint", None)
        ctx.console.error(message, hint=hint)
        raise typer.Exit(code=int(error_code))
    return result.value
