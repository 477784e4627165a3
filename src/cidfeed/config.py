"""Shell configuration for cidfeed."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any

import appdirs

from cidfeed._constants import APP_IDENTIFIER, NODE_STATE_FILE, SECURITY_STATE_FILE
from cidfeed.exceptions import CidfeedConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def default_data_dir(identifier: str = APP_IDENTIFIER) -> Path:
    """Return the per-user application data directory for *identifier*.

    Falls back to the current working directory when no home directory
    can be resolved.
    """
    path = Path(appdirs.user_data_dir(identifier, appauthor=False))
    if not path.is_absolute():
        return Path.cwd()
    return path


def _check_file_name(field_name: str, value: str) -> None:
    if not value.strip():
        raise CidfeedConfigError(f"{field_name} must be non-empty")
    if "/" in value or "\\" in value:
        raise CidfeedConfigError(f"{field_name} must be a bare file name, got {value!r}")


@dataclasses.dataclass(frozen=True)
class ShellConfig:
    """Backend shell configuration.

    Parameters
    ----------
    data_dir : Path
        Directory holding the persisted state files.  Defaults to the
        platform application data directory.
    node_state_file : str
        File name of the private node state mirror.
    security_state_file : str
        File name of the security state mirror.
    persist : bool
        Mirror state to disk.  When ``False`` the shell is purely
        in-memory and nothing is loaded at startup either.
    """

    data_dir: Path = dataclasses.field(default_factory=default_data_dir)
    node_state_file: str = NODE_STATE_FILE
    security_state_file: str = SECURITY_STATE_FILE
    persist: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.data_dir, Path):
            object.__setattr__(self, "data_dir", Path(self.data_dir))
        _check_file_name("node_state_file", self.node_state_file)
        _check_file_name("security_state_file", self.security_state_file)

    @property
    def node_state_path(self) -> Path:
        return self.data_dir / self.node_state_file

    @property
    def security_state_path(self) -> Path:
        return self.data_dir / self.security_state_file

    @classmethod
    def from_env(cls, **overrides: Any) -> ShellConfig:
        """Create configuration from environment variables.

        Reads ``CIDFEED_DATA_DIR``, ``CIDFEED_NODE_STATE_FILE``,
        ``CIDFEED_SECURITY_STATE_FILE`` and ``CIDFEED_PERSIST``.  Explicit
        keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        ShellConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "CIDFEED_NODE_STATE_FILE": "node_state_file",
            "CIDFEED_SECURITY_STATE_FILE": "security_state_file",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        data_dir_env = env.get("CIDFEED_DATA_DIR")
        if data_dir_env and "data_dir" not in overrides:
            config_kwargs["data_dir"] = Path(data_dir_env).expanduser()

        if "persist" not in overrides:
            config_kwargs["persist"] = _env_bool(env.get("CIDFEED_PERSIST"), True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
