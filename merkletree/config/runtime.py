"""
Runtime Configuration

Central configuration for tree construction and diagnostic logging.
"""

from __future__ import annotations

import codecs
import copy
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from merkletree.schemas.errors import ConfigException

load_dotenv()


_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class LoggingConfig:
    """Configuration for library logging."""
    level: str = "WARNING"
    # Log every leaf, layer and root digest while building
    trace_build: bool = False

    def __post_init__(self):
        self.level = str(self.level).upper()
        if self.level not in _LOG_LEVELS:
            raise ConfigException(
                f"Unknown log level: {self.level}",
                key="logging.level",
            )


@dataclass
class TreeConfig:
    """Configuration for tree construction."""
    record_encoding: str = "utf-8"

    def __post_init__(self):
        try:
            codecs.lookup(self.record_encoding)
        except LookupError as e:
            raise ConfigException(
                f"Unknown record encoding: {self.record_encoding}",
                key="tree.record_encoding",
            ) from e


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration for the Merkle tree library.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    tree: TreeConfig = field(default_factory=TreeConfig)
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - MERKLETREE_LOG_LEVEL: Log level for the merkletree logger, applied
          only when the caller passes the config to configure_logging()
        - MERKLETREE_TRACE_BUILD: Log every digest during construction (true/false)
        - MERKLETREE_RECORD_ENCODING: Text encoding applied to records before hashing
        """
        overrides: dict[str, Any] = {}

        if os.getenv("MERKLETREE_LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv("MERKLETREE_LOG_LEVEL")
        if os.getenv("MERKLETREE_TRACE_BUILD"):
            overrides.setdefault("logging", {})["trace_build"] = (
                os.getenv("MERKLETREE_TRACE_BUILD", "false").lower() == "true"
            )

        if os.getenv("MERKLETREE_RECORD_ENCODING"):
            overrides.setdefault("tree", {})["record_encoding"] = os.getenv(
                "MERKLETREE_RECORD_ENCODING"
            )

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        overrides = cls._get_env_overrides()
        return cls.from_dict(overrides)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise ConfigException(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        logging_data = data.get("logging", {})
        tree_data = data.get("tree", {})

        try:
            logging_config = LoggingConfig(**logging_data) if logging_data else LoggingConfig()
            tree = TreeConfig(**tree_data) if tree_data else TreeConfig()
        except TypeError as e:
            raise ConfigException(f"Invalid configuration: {e}") from e

        return cls(
            logging=logging_config,
            tree=tree,
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)

        if "logging" in overrides:
            for key, value in overrides["logging"].items():
                setattr(new_config.logging, key, value)
            new_config.logging.__post_init__()

        if "tree" in overrides:
            for key, value in overrides["tree"].items():
                setattr(new_config.tree, key, value)
            new_config.tree.__post_init__()

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "logging": {
                "level": self.logging.level,
                "trace_build": self.logging.trace_build,
            },
            "tree": {
                "record_encoding": self.tree.record_encoding,
            },
            "extra": self.extra,
        }


def configure_logging(config: RuntimeConfig) -> logging.Logger:
    """Apply the configured level to the ``merkletree`` logger."""
    logger = logging.getLogger("merkletree")
    logger.setLevel(config.logging.level)
    return logger


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.from_env()
    return _default_config


def set_default_config(config: Optional[RuntimeConfig]) -> None:
    """Set the default runtime configuration (None resets to env loading)."""
    global _default_config
    _default_config = config
