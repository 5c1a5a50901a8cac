from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass


_VERSION_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)$")
_DIGITS_RE = re.compile(r"(\d+)")


@dataclass(frozen=True, slots=True, order=True)
class SemVer:
    major: int
    minor: int
    patch: int

    def to_tag(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def next_patch(self) -> "SemVer":
        return SemVer(self.major, self.minor, self.patch + 1)

    def __str__(self) -> str:
        return self.to_tag()


def parse_version(tag: str) -> SemVer | None:
    """Parse ``MAJOR.MINOR.PATCH``; anything else (prefixes, suffixes) is None."""
    m = _VERSION_RE.match(tag)
    if m is None:
        return None
    return SemVer(int(m.group(1)), int(m.group(2)), int(m.group(3)))


def version_sort_key(tag: str) -> tuple[str | int, ...]:
    """Natural ordering key: digit runs compare as numbers, text as text.

    ``re.split`` with a capturing group alternates text and digit parts, so
    two keys always hold the same type at the same position.
    """
    parts = _DIGITS_RE.split(tag)
    return tuple(int(p) if i % 2 else p for i, p in enumerate(parts))


def latest_tag(tags: Iterable[str]) -> str | None:
    """Greatest tag under version ordering (``1.10.0`` > ``1.9.0``)."""
    ordered = sorted(tags, key=version_sort_key)
    return ordered[-1] if ordered else None
