"""Strain tensor hooks."""

from __future__ import annotations

from .common import hook_pair

green_strain_tensor, green_strain_tensor_inplace = hook_pair(
    "green_strain_tensor",
    "Green-Lagrange strain E = (C - I) / 2.",
)
almansi_strain_tensor, almansi_strain_tensor_inplace = hook_pair(
    "almansi_strain_tensor",
    "Euler-Almansi strain e = (I - B^-1) / 2.",
)

HOOKS = (
    green_strain_tensor,
    almansi_strain_tensor,
    green_strain_tensor_inplace,
    almansi_strain_tensor_inplace,
)

__all__ = [h.name for h in HOOKS]
