"""
Runtime Configuration Module

Provides configuration loading and management for the Merkle tree library.
"""

from .runtime import (
    LoggingConfig,
    RuntimeConfig,
    TreeConfig,
    configure_logging,
    get_default_config,
    set_default_config,
)

__all__ = [
    "LoggingConfig",
    "RuntimeConfig",
    "TreeConfig",
    "configure_logging",
    "get_default_config",
    "set_default_config",
]
