"""ContextVar-based render configuration for join_lazy_fmt.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The config is read when a lazy object is rendered, not when it is built,
so the same join behaves according to the context it is rendered in.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from join_lazy_fmt import Join
    from join_lazy_fmt.config import FormatConfig, format_config_context

    joined = Join(", ").join(range(3))
    with format_config_context(FormatConfig(strict_single_use=True)):
        str(joined)  # "0, 1, 2"
        str(joined)  # raises AlreadyConsumedError

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Immutable render configuration.

    Attributes:
        strict_single_use: Raise AlreadyConsumedError when a DisplayableJoin is
            rendered a second time, instead of silently writing nothing.

    """

    strict_single_use: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "FormatConfig":
        """Create FormatConfig from dictionary.

        Only includes keys that are valid FormatConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> FormatConfig.from_dict({"strict_single_use": True, "x": 1})
            FormatConfig(strict_single_use=True)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: FormatConfig = FormatConfig()

_format_config: ContextVar[FormatConfig] = ContextVar(
    "format_config",
    default=_DEFAULT_CONFIG,
)


def get_format_config() -> FormatConfig:
    """Get current render configuration (thread-local)."""
    return _format_config.get()


def set_format_config(config: FormatConfig) -> None:
    """Set render configuration for current context.

    Args:
        config: FormatConfig instance to use for this context.

    """
    _format_config.set(config)


def reset_format_config() -> None:
    """Reset to the module-level default configuration."""
    _format_config.set(_DEFAULT_CONFIG)


@contextmanager
def format_config_context(config: FormatConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: FormatConfig to use within the context.

    """
    previous = _format_config.get()
    _format_config.set(config)
    try:
        yield
    finally:
        _format_config.set(previous)


__all__ = [
    "FormatConfig",
    "format_config_context",
    "get_format_config",
    "reset_format_config",
    "set_format_config",
]
