"""Release pipeline.

- checks: preconditions (tools, clean tree, upstream sync)
- semver / planner: next patch tag from existing tags
- gh: GitHub release creation
- service: the ordered, fail-fast pipeline
"""

from __future__ import annotations
