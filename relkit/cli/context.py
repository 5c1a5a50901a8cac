from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from relkit.core.config import DEFAULT_REMOTE, ReleaseConfig, load_release_config
from relkit.core.errors import ErrorCode
from relkit.core.result import Err
from relkit.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: ReleaseConfig
    console: ConsoleProtocol


def build_context(
    *,
    repo: Path | None = None,
    remote: str = DEFAULT_REMOTE,
    env_file: Path | None = None,
) -> CLIContext:
    console = RichConsole()

    try:
        root = (repo or Path.cwd()).expanduser().resolve()
    except OSError as e:
        console.error(f"invalid --repo: {e}")
        raise typer.Exit(code=int(ErrorCode.FAILURE))

    if not root.is_dir():
        console.error(f"not a directory: {root}")
        raise typer.Exit(code=int(ErrorCode.FAILURE))

    config_result = load_release_config(repo_root=root, remote=remote, env_file=env_file)
    if isinstance(config_result, Err):
        console.error(config_result.error.message)
        raise typer.Exit(code=int(ErrorCode.FAILURE))

    return CLIContext(config=config_result.value, console=console)
