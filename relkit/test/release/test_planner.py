from __future__ import annotations

import pytest

from relkit.core.result import Err, Ok
from relkit.release.planner import TagPlan, compute_next_tag


def test_no_tags_starts_at_initial_version() -> None:
    result = compute_next_tag([])

    assert result == Ok(TagPlan(latest=None, next_tag="0.0.1"))
    assert isinstance(result, Ok)
    assert result.value.is_initial


@pytest.mark.parametrize(
    ("tags", "latest", "expected"),
    [
        (["0.1.0", "0.1.1", "0.2.0"], "0.2.0", "0.2.1"),
        (["1.9.0", "1.10.0"], "1.10.0", "1.10.1"),
        (["2.3.9"], "2.3.9", "2.3.10"),
        (["0.0.1", "0.0.2", "0.0.10"], "0.0.10", "0.0.11"),
    ],
)
def test_increments_patch_of_greatest_tag(tags: list[str], latest: str, expected: str) -> None:
    assert compute_next_tag(tags) == Ok(TagPlan(latest=latest, next_tag=expected))


def test_order_of_input_does_not_matter() -> None:
    assert compute_next_tag(["0.2.0", "0.1.1", "0.1.0"]) == compute_next_tag(
        ["0.1.0", "0.2.0", "0.1.1"]
    )


@pytest.mark.parametrize("bad", ["v1.0.0", "1.2.3-beta.1", "release-candidate"])
def test_rejects_greatest_tag_with_other_shape(bad: str) -> None:
    result = compute_next_tag(["0.1.0", bad])

    assert isinstance(result, Err)
    assert result.error.kind == "invalid_tag"
    assert bad in result.error.message


def test_lower_nonconforming_tag_is_ignored() -> None:
    # "1.0" sorts below "1.0.0", so the greatest tag is still well formed.
    assert compute_next_tag(["1.0", "1.0.0"]) == Ok(TagPlan(latest="1.0.0", next_tag="1.0.1"))
