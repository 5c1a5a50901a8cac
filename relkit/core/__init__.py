"""Core types: results, exit codes, configuration."""

from .config import (
    DEFAULT_ENV_FILE,
    DEFAULT_REMOTE,
    ConfigError,
    ReleaseConfig,
    load_env_file,
    load_release_config,
    parse_env_text,
)
from .errors import ErrorCode
from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    # config
    "DEFAULT_ENV_FILE",
    "DEFAULT_REMOTE",
    "ConfigError",
    "ReleaseConfig",
    "load_env_file",
    "load_release_config",
    "parse_env_text",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]
