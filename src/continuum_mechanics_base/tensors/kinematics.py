"""Rate-of-deformation hooks for time-dependent models."""

from __future__ import annotations

from .common import hook_pair

velocity_gradient_tensor, velocity_gradient_tensor_inplace = hook_pair(
    "velocity_gradient_tensor",
    "Spatial velocity gradient L = dF/dt F^-1.",
)

HOOKS = (velocity_gradient_tensor, velocity_gradient_tensor_inplace)

__all__ = [h.name for h in HOOKS]
