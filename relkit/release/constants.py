from __future__ import annotations

# Tag used when the repository has no tags yet
INITIAL_TAG = "0.0.1"

RELEASE_TITLE_TEMPLATE = "Version {tag}"

RELEASE_NOTES = (
    "Patch release. Package manifest, binary URLs and checksums are unchanged "
    "from the previous version."
)

GH_INSTALL_HINT = "Install GitHub CLI: https://cli.github.com/"
GIT_INSTALL_HINT = "Install git: https://git-scm.com/downloads"
