"""ContextVar-based scan configuration for minilex.

Provides context-local configuration using Python's ContextVars (PEP 567).
A Scanner reads the active config once, at construction.

Thread Safety:
    ContextVars are context-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from minilex.config import ScanConfig, UnrecognizedPolicy, scan_config_context

    with scan_config_context(ScanConfig(on_unrecognized=UnrecognizedPolicy.SKIP)):
        tokens = Scanner(source).tokenize()

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum
from typing import Any


class UnrecognizedPolicy(Enum):
    """What the scanner does with a character no rule matches.

    - STOP: consume it and emit END_OF_INPUT (scanner becomes exhausted)
    - SKIP: consume it and continue with the next token
    - ERROR: consume it and raise UnrecognizedCharacterError

    """

    STOP = "stop"
    SKIP = "skip"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Note: source_file is not configuration. It is per-call state and
    stays on the Scanner instance.

    Attributes:
        on_unrecognized: Policy applied to unrecognized characters

    """

    on_unrecognized: UnrecognizedPolicy = UnrecognizedPolicy.STOP

    def __post_init__(self) -> None:
        if not isinstance(self.on_unrecognized, UnrecognizedPolicy):
            object.__setattr__(
                self, "on_unrecognized", UnrecognizedPolicy(self.on_unrecognized)
            )

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> ScanConfig:
        """Create ScanConfig from dictionary.

        Unknown keys are silently ignored. Policies may be given as enum
        members or by value ("stop", "skip", "error").

        Example:
            >>> ScanConfig.from_dict({"on_unrecognized": "skip", "other": 1})
            ScanConfig(on_unrecognized=<UnrecognizedPolicy.SKIP: 'skip'>)

        Raises:
            ValueError: If a policy name is not recognized.
        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (context-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context."""
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(on_unrecognized=UnrecognizedPolicy.ERROR)):
        ...     Scanner("x = 1").tokenize()
        >>> # Previous config is active again

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "UnrecognizedPolicy",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
