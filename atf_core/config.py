"""Resolution of the framework's installation-path configuration.

Each recognized key can be overridden through an environment variable named
after the key in uppercase (``atf_shell`` is overridden by ``ATF_SHELL``).
Keys without an override resolve to their built-in default.
"""

import logging
import os
from collections.abc import Mapping

from atf_core.defaults import BUILTIN_DEFAULTS
from atf_core.models.config import ConfigValues

log = logging.getLogger(__name__)

KEYS: tuple[str, ...] = tuple(sorted(ConfigValues.model_fields))


class ConfigKeyNotFoundError(Exception):
    """Raised when a configuration key is not recognized."""

    def __init__(self, key: str) -> None:
        super().__init__(
            f"Configuration variable '{key}' not found. "
            f"Available variables: {list(KEYS)}"
        )
        self.key = key


def env_var_name(key: str) -> str:
    """Return the name of the environment variable overriding ``key``."""
    return key.upper()


class Config:
    """Resolved configuration read from an environment mapping.

    The environment is read lazily on first access and cached until
    ``reload`` is called. Instances do no locking; share one across threads
    only under external synchronization.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        defaults: Mapping[str, str] | None = None,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._defaults = BUILTIN_DEFAULTS if defaults is None else defaults
        self._values: ConfigValues | None = None

    def reload(self) -> None:
        """Recompute every value from the environment as it is now."""
        self._values = self._resolve()

    def _resolve(self) -> ConfigValues:
        # A variable set to the empty string still counts as an override.
        resolved: dict[str, str] = {}
        for key in KEYS:
            name = env_var_name(key)
            if name in self._environ:
                log.debug("Configuration variable %s overridden by %s", key, name)
                resolved[key] = self._environ[name]
            else:
                resolved[key] = self._defaults[key]
        return ConfigValues(**resolved)

    def _resolved(self) -> ConfigValues:
        if self._values is None:
            self._values = self._resolve()
        return self._values

    def has(self, key: str) -> bool:
        """Check if ``key`` is a recognized configuration key.

        Matching is exact and case-sensitive.
        """
        return key in KEYS

    def get(self, key: str) -> str:
        """Get the resolved value of a configuration key.

        Raises:
            ConfigKeyNotFoundError: If ``key`` is not a recognized key

        """
        if not self.has(key):
            raise ConfigKeyNotFoundError(key)
        return self.get_all()[key]

    def get_all(self) -> dict[str, str]:
        """Get every recognized key mapped to its resolved value."""
        return self._resolved().model_dump()


_config: Config | None = None


def _process_config() -> Config:
    global _config
    if _config is None:
        _config = Config()
    return _config


def get(key: str) -> str:
    """Get a value from the process-wide configuration."""
    return _process_config().get(key)


def has(key: str) -> bool:
    """Check a key against the process-wide configuration."""
    return _process_config().has(key)


def get_all() -> dict[str, str]:
    """Get all values from the process-wide configuration."""
    return _process_config().get_all()


def reinit() -> None:
    """Re-read the process-wide configuration from ``os.environ``."""
    _process_config().reload()
