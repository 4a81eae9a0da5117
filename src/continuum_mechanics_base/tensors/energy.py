"""Strain-energy density hooks."""

from __future__ import annotations

from .common import hook_pair

strain_energy_density, strain_energy_density_inplace = hook_pair(
    "strain_energy_density",
    "Strain-energy density W(model, state, ps).",
)

HOOKS = (strain_energy_density, strain_energy_density_inplace)

__all__ = [h.name for h in HOOKS]
