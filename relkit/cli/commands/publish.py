from __future__ import annotations

from pathlib import Path

import typer

from relkit.cli.commands._helpers import exit_on_error
from relkit.cli.context import build_context
from relkit.core.config import DEFAULT_REMOTE
from relkit.release.service import publish_release


def publish(
    remote: str = typer.Option(DEFAULT_REMOTE, "--remote", help="Remote to fetch and push tags."),
    env_file: Path | None = typer.Option(
        None,
        "--env-file",
        help="KEY=VALUE file for gh credentials (default: .env if present).",
    ),
    repo: Path | None = typer.Option(None, "--repo", help="Repository directory (default: cwd)."),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Check and compute the tag, but create nothing."
    ),
) -> None:
    """Tag the next patch version, push it and create the GitHub release."""
    ctx = build_context(repo=repo, remote=remote, env_file=env_file)
    if ctx.config.env_file is not None:
        ctx.console.print(f"loaded {len(ctx.config.env)} variable(s) from {ctx.config.env_file}")
    result = publish_release(config=ctx.config, console=ctx.console, dry_run=dry_run)
    outcome = exit_on_error(result, ctx)

    ctx.console.newline()
    if outcome.dry_run:
        ctx.console.info(f"dry run: release {outcome.tag} was not created")
        return
    ctx.console.success(f"created GitHub release {outcome.tag} ({outcome.title})")
