from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from relkit.core.result import Err, Ok, Result
from relkit.release.constants import INITIAL_TAG
from relkit.release.errors import ReleaseError
from relkit.release.semver import latest_tag, parse_version


@dataclass(frozen=True, slots=True)
class TagPlan:
    latest: str | None
    next_tag: str

    @property
    def is_initial(self) -> bool:
        return self.latest is None


def compute_next_tag(tags: Iterable[str]) -> Result[TagPlan, ReleaseError]:
    """Next patch tag after the greatest existing tag.

    With no tags the plan starts at ``0.0.1``. The greatest tag must be a
    plain ``MAJOR.MINOR.PATCH``; prefixed or pre-release tags are refused
    rather than guessed at.
    """
    latest = latest_tag(tags)
    if latest is None:
        return Ok(TagPlan(latest=None, next_tag=INITIAL_TAG))

    version = parse_version(latest)
    if version is None:
        return Err(
            ReleaseError(
                kind="invalid_tag",
                message=f"latest tag is not MAJOR.MINOR.PATCH: {latest}",
                hint="Delete or rename the tag, or create the next version tag manually.",
            )
        )

    return Ok(TagPlan(latest=latest, next_tag=version.next_patch().to_tag()))
