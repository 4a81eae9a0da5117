"""Stress tensor hooks."""

from __future__ import annotations

from .common import hook_pair

first_piola_kirchhoff_stress_tensor, first_piola_kirchhoff_stress_tensor_inplace = hook_pair(
    "first_piola_kirchhoff_stress_tensor",
    "First Piola-Kirchhoff stress P.",
)
second_piola_kirchhoff_stress_tensor, second_piola_kirchhoff_stress_tensor_inplace = hook_pair(
    "second_piola_kirchhoff_stress_tensor",
    "Second Piola-Kirchhoff stress S.",
)
cauchy_stress_tensor, cauchy_stress_tensor_inplace = hook_pair(
    "cauchy_stress_tensor",
    "Cauchy (true) stress sigma.",
)

HOOKS = (
    first_piola_kirchhoff_stress_tensor,
    second_piola_kirchhoff_stress_tensor,
    cauchy_stress_tensor,
    first_piola_kirchhoff_stress_tensor_inplace,
    second_piola_kirchhoff_stress_tensor_inplace,
    cauchy_stress_tensor_inplace,
)

__all__ = [h.name for h in HOOKS]
