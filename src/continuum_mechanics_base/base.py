"""Capability taxonomy shared by material-model packages."""

from __future__ import annotations

from abc import ABC

__all__ = [
    "AbstractMaterialModel",
    "AbstractMaterialState",
    "AbstractMaterialTest",
]


class AbstractMaterialModel(ABC):
    """A constitutive law. Only its class is used, to pick implementations."""


class AbstractMaterialState(ABC):
    """A value produced or consumed while evaluating a model."""


class AbstractMaterialTest(ABC):
    """An experimental protocol (loading path, observed response, ...)."""
