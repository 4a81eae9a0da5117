"""Error kinds raised by continuum_mechanics_base.

Unspecialised hooks raise the builtin ``NotImplementedError``; the classes
below cover the remaining failure modes. They subclass ``ValueError`` so that
callers already catching ``ValueError`` keep working.
"""

from __future__ import annotations

__all__ = ["ShapeError", "DomainError", "ConfigError"]


class ShapeError(ValueError):
    """A tensor or history snapshot has the wrong rank or shape."""


class DomainError(ValueError):
    """Input outside the mathematical domain of an operation."""


class ConfigError(ValueError):
    """Inconsistent parameter names or bounds."""
