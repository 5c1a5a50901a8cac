"""Release configuration.

Settings for a release run are gathered into one immutable ``ReleaseConfig``
that is handed to every step needing them. Variables read from the ``.env``
file are layered over the inherited environment of each subprocess;
``os.environ`` of this process is never modified.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result

__all__ = [
    "DEFAULT_ENV_FILE",
    "DEFAULT_REMOTE",
    "ConfigError",
    "ReleaseConfig",
    "load_env_file",
    "load_release_config",
    "parse_env_text",
]

DEFAULT_REMOTE = "origin"
DEFAULT_ENV_FILE = ".env"

_QUOTES = ("'", '"')


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when the env file cannot be read or parsed."""

    message: str
    path: Path | None = None


def _empty_env() -> dict[str, str]:
    return {}


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Settings for one release run.

    Attributes:
        repo_root: Working directory of the git repository to release.
        remote: Remote that tags are fetched from and pushed to.
        env: Variables loaded from the env file (credentials for ``gh``).
        env_file: The file ``env`` was loaded from, if any.
    """

    repo_root: Path
    remote: str = DEFAULT_REMOTE
    env: dict[str, str] = field(default_factory=_empty_env)
    env_file: Path | None = None

    def subprocess_env(self) -> dict[str, str] | None:
        """Environment for child processes, or None to inherit unchanged."""
        if not self.env:
            return None
        return {**os.environ, **self.env}

    @property
    def search_path(self) -> str | None:
        """PATH used to resolve external tools (env file wins)."""
        return self.env.get("PATH")


def parse_env_text(text: str, *, path: Path | None = None) -> Result[dict[str, str], ConfigError]:
    """Parse ``KEY=VALUE`` lines.

    Blank lines and lines starting with ``#`` are skipped. One pair of
    matching surrounding quotes is stripped from values, and a leading
    ``export`` is dropped from names. Names containing whitespace are
    rejected.

    Args:
        text: File contents.
        path: Source path, reported in errors.

    Returns:
        Ok(mapping) on success, Err(ConfigError) on a malformed line.
    """
    out: dict[str, str] = {}
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            return Err(ConfigError(f"line {lineno}: expected KEY=VALUE, got {line!r}", path=path))

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        # Shell-style "export KEY=VALUE"
        if key.startswith("export") and key[6:7].isspace():
            key = key[6:].strip()
        if not key:
            return Err(ConfigError(f"line {lineno}: empty variable name", path=path))
        if any(c.isspace() for c in key):
            return Err(ConfigError(f"line {lineno}: invalid variable name {key!r}", path=path))

        if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
            value = value[1:-1]

        out[key] = value

    return Ok(out)


def load_env_file(path: Path) -> Result[dict[str, str], ConfigError]:
    """Read and parse an env file."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Err(ConfigError(f"env file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"permission denied reading: {path}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"error reading env file: {e}", path=path))
    except IsADirectoryError:
        return Err(ConfigError(f"env file is a directory: {path}", path=path))

    return parse_env_text(text, path=path)


def load_release_config(
    *,
    repo_root: Path,
    remote: str = DEFAULT_REMOTE,
    env_file: Path | None = None,
) -> Result[ReleaseConfig, ConfigError]:
    """Build the config for a release run.

    When ``env_file`` is None, ``.env`` in ``repo_root`` is loaded if it
    exists. An explicit ``env_file`` must exist.

    Args:
        repo_root: Repository working directory.
        remote: Remote name for tag fetch and push.
        env_file: Explicit env file path.

    Returns:
        Ok(ReleaseConfig) on success, Err(ConfigError) on failure
    """
    if env_file is None:
        candidate = repo_root / DEFAULT_ENV_FILE
        if not candidate.is_file():
            return Ok(ReleaseConfig(repo_root=repo_root, remote=remote))
    else:
        candidate = env_file

    env = load_env_file(candidate)
    if isinstance(env, Err):
        return env

    return Ok(ReleaseConfig(repo_root=repo_root, remote=remote, env=env.value, env_file=candidate))
