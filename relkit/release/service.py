"""Release orchestration.

``publish_release`` is a straight pipeline: each step runs after the previous
one succeeded, and the first failure ends the run. Nothing is rolled back;
if the tag push succeeds and ``gh release create`` fails, the pushed tag
stays and the error says so.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass

from relkit.core.config import ReleaseConfig
from relkit.core.result import Err, Ok, Result
from relkit.git.repository import Repository
from relkit.output.console import ConsoleProtocol, Style
from relkit.release.checks import ensure_clean_tree, ensure_synced, ensure_tools_available
from relkit.release.constants import RELEASE_NOTES, RELEASE_TITLE_TEMPLATE
from relkit.release.errors import ReleaseError, from_git_error
from relkit.release.gh import create_release, release_create_command
from relkit.release.planner import TagPlan, compute_next_tag


@dataclass(frozen=True, slots=True)
class ReleaseOutcome:
    tag: str
    previous: str | None
    title: str
    dry_run: bool = False


def release_title(tag: str) -> str:
    return RELEASE_TITLE_TEMPLATE.format(tag=tag)


def _open_repo(config: ReleaseConfig) -> Repository:
    return Repository(config.repo_root, env=config.subprocess_env())


def refresh_and_plan(
    *,
    repo: Repository,
    remote: str,
    console: ConsoleProtocol | None = None,
    fetch: bool = True,
) -> Result[TagPlan, ReleaseError]:
    """Fetch remote tags (optional) and compute the next patch tag."""
    if fetch:
        if console is not None:
            console.print(f"git fetch --tags {remote}", Style.DIM)
        fetched = repo.fetch_tags(remote)
        if isinstance(fetched, Err):
            return Err(from_git_error(fetched.error))

    tags = repo.list_tags()
    if isinstance(tags, Err):
        return Err(from_git_error(tags.error))

    return compute_next_tag(tags.value)


def plan_next_release(
    *,
    config: ReleaseConfig,
    fetch: bool = True,
) -> Result[TagPlan, ReleaseError]:
    """Compute the next tag without checking or changing anything."""
    ok = ensure_tools_available(tools=("git",), search_path=config.search_path)
    if isinstance(ok, Err):
        return ok

    return refresh_and_plan(repo=_open_repo(config), remote=config.remote, fetch=fetch)


def publish_release(
    *,
    config: ReleaseConfig,
    console: ConsoleProtocol,
    dry_run: bool = False,
) -> Result[ReleaseOutcome, ReleaseError]:
    """Tag the next patch version, push it and create the GitHub release.

    Args:
        config: Repository root, remote and env-file variables.
        console: Progress output.
        dry_run: Stop after computing the tag; print what would run.

    Returns:
        Ok(ReleaseOutcome) on success, Err(ReleaseError) at the first failure.
    """
    ok = ensure_tools_available(search_path=config.search_path)
    if isinstance(ok, Err):
        return ok

    repo = _open_repo(config)

    ok = ensure_clean_tree(repo)
    if isinstance(ok, Err):
        return ok

    ok = ensure_synced(repo, remote=config.remote)
    if isinstance(ok, Err):
        return ok

    console.print("git state is clean, ready to release")

    planned = refresh_and_plan(repo=repo, remote=config.remote, console=console)
    if isinstance(planned, Err):
        return planned
    plan = planned.value
    tag = plan.next_tag

    if plan.latest is None:
        console.print(f"no tags found, starting at {tag}")
    else:
        console.print(f"latest tag is {plan.latest}, next version is {tag}")

    title = release_title(tag)
    gh_cmd = release_create_command(tag=tag, title=title, notes=RELEASE_NOTES)
    outcome = ReleaseOutcome(tag=tag, previous=plan.latest, title=title, dry_run=dry_run)

    if dry_run:
        console.print(f"git tag {tag}", Style.DIM)
        console.print(f"git push {config.remote} refs/tags/{tag}", Style.DIM)
        console.print(shlex.join(gh_cmd), Style.DIM)
        return Ok(outcome)

    console.print(f"git tag {tag}", Style.DIM)
    created = repo.create_tag(tag)
    if isinstance(created, Err):
        return Err(from_git_error(created.error))

    console.print(f"git push {config.remote} refs/tags/{tag}", Style.DIM)
    pushed = repo.push_tag(config.remote, tag)
    if isinstance(pushed, Err):
        return Err(from_git_error(pushed.error))

    console.print(f"gh release create {tag}", Style.DIM)
    released = create_release(
        repo_root=config.repo_root,
        tag=tag,
        title=title,
        notes=RELEASE_NOTES,
        env=config.subprocess_env(),
    )
    if isinstance(released, Err):
        e = released.error
        return Err(
            ReleaseError(
                kind=e.kind,
                message=f"{e.message}; tag {tag} was already pushed",
                hint=e.hint,
            )
        )

    return Ok(outcome)
