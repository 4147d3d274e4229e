"""ContextVar-based compile configuration for marklet.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The knobs here only affect diagnostics (debug tracing, error message detail);
they never change the HTML that ``compile()`` produces.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from marklet.config import CompileConfig, compile_config_context

    with compile_config_context(CompileConfig(trace=True)):
        html = compile("# Hello")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CompileConfig:
    """Immutable compile configuration.

    Attributes:
        trace: Log every emitted token and every dispatched top-level block
            at DEBUG level
        error_context: Number of upcoming tokens dumped into parse error
            messages

    """

    trace: bool = False
    error_context: int = 5

    @classmethod
    def from_dict(cls, config_dict: dict) -> "CompileConfig":
        """Create CompileConfig from dictionary.

        Only includes keys that are valid CompileConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = CompileConfig.from_dict({"trace": True, "unknown_key": 1})
            >>> config.trace
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: CompileConfig = CompileConfig()

_compile_config: ContextVar[CompileConfig] = ContextVar(
    "compile_config",
    default=_DEFAULT_CONFIG,
)


def get_compile_config() -> CompileConfig:
    """Get current compile configuration (thread-local)."""
    return _compile_config.get()


def set_compile_config(config: CompileConfig) -> None:
    """Set compile configuration for the current context."""
    _compile_config.set(config)


def reset_compile_config() -> None:
    """Reset to the module-level default configuration."""
    _compile_config.set(_DEFAULT_CONFIG)


@contextmanager
def compile_config_context(config: CompileConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    Example:
        >>> with compile_config_context(CompileConfig(error_context=0)):
        ...     tokens = tokenize("* a")
        >>> # Automatically reset to previous config

    """
    previous = _compile_config.get()
    _compile_config.set(config)
    try:
        yield
    finally:
        _compile_config.set(previous)


__all__ = [
    "CompileConfig",
    "compile_config_context",
    "get_compile_config",
    "reset_compile_config",
    "set_compile_config",
]
