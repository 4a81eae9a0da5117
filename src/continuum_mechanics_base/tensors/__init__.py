"""Tensor hooks + registry."""

from __future__ import annotations

from typing import Dict

from . import deformation, energy, kinematics, strain, stress
from .common import TensorHook
from .deformation import *  # noqa: F401,F403
from .energy import *  # noqa: F401,F403
from .kinematics import *  # noqa: F401,F403
from .strain import *  # noqa: F401,F403
from .stress import *  # noqa: F401,F403

HOOKS: Dict[str, TensorHook] = {
    h.name: h
    for module in (energy, stress, deformation, strain, kinematics)
    for h in module.HOOKS
}


def get_hook(name: str) -> TensorHook:
    """Return a tensor hook by name."""
    try:
        return HOOKS[name]
    except KeyError as e:
        raise ValueError(
            f"Unknown tensor hook {name!r}. Available: {tuple(HOOKS.keys())}"
        ) from e


AVAILABLE_HOOKS = tuple(HOOKS.keys())

__all__ = ["HOOKS", "AVAILABLE_HOOKS", "TensorHook", "get_hook"] + list(AVAILABLE_HOOKS)
