from __future__ import annotations

from pathlib import Path

import typer

from relkit.cli.commands._helpers import exit_on_error
from relkit.cli.context import build_context
from relkit.core.config import DEFAULT_REMOTE
from relkit.release.service import plan_next_release


def next_version(
    remote: str = typer.Option(DEFAULT_REMOTE, "--remote", help="Remote to fetch tags from."),
    env_file: Path | None = typer.Option(None, "--env-file", help="KEY=VALUE env file."),
    repo: Path | None = typer.Option(None, "--repo", help="Repository directory (default: cwd)."),
    no_fetch: bool = typer.Option(False, "--no-fetch", help="Use local tags only."),
) -> None:
    """Print the tag the next release would get."""
    ctx = build_context(repo=repo, remote=remote, env_file=env_file)
    plan = exit_on_error(plan_next_release(config=ctx.config, fetch=not no_fetch), ctx)
    typer.echo(plan.next_tag)
