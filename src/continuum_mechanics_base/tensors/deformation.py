"""Deformation tensor hooks."""

from __future__ import annotations

from .common import hook_pair

deformation_gradient_tensor, deformation_gradient_tensor_inplace = hook_pair(
    "deformation_gradient_tensor",
    "Deformation gradient F.",
)
inverse_deformation_gradient_tensor, inverse_deformation_gradient_tensor_inplace = hook_pair(
    "inverse_deformation_gradient_tensor",
    "Inverse deformation gradient F^-1.",
)
right_cauchy_green_deformation_tensor, right_cauchy_green_deformation_tensor_inplace = hook_pair(
    "right_cauchy_green_deformation_tensor",
    "Right Cauchy-Green tensor C = F^T F.",
)
left_cauchy_green_deformation_tensor, left_cauchy_green_deformation_tensor_inplace = hook_pair(
    "left_cauchy_green_deformation_tensor",
    "Left Cauchy-Green tensor B = F F^T.",
)
(
    inverse_left_cauchy_green_deformation_tensor,
    inverse_left_cauchy_green_deformation_tensor_inplace,
) = hook_pair(
    "inverse_left_cauchy_green_deformation_tensor",
    "Inverse left Cauchy-Green tensor B^-1.",
)

HOOKS = (
    deformation_gradient_tensor,
    inverse_deformation_gradient_tensor,
    right_cauchy_green_deformation_tensor,
    left_cauchy_green_deformation_tensor,
    inverse_left_cauchy_green_deformation_tensor,
    deformation_gradient_tensor_inplace,
    inverse_deformation_gradient_tensor_inplace,
    right_cauchy_green_deformation_tensor_inplace,
    left_cauchy_green_deformation_tensor_inplace,
    inverse_left_cauchy_green_deformation_tensor_inplace,
)

__all__ = [h.name for h in HOOKS]
