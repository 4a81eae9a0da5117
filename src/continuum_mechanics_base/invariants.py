"""Principal invariants of rank-2 tensors."""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from .errors import DomainError
from .util import as_square_matrix, safe_float

__all__ = ["I1", "I2", "I3", "J"]


def I1(T: Any) -> float:
    """First invariant, tr(T)."""
    return safe_float(np.trace(as_square_matrix(T)))


def I2(T: Any) -> float:
    """Second invariant, (tr(T)^2 - tr(T @ T)) / 2."""
    arr = as_square_matrix(T)
    tr = np.trace(arr)
    return safe_float(0.5 * (tr**2 - np.trace(arr @ arr)))


def I3(T: Any) -> float:
    """Third invariant, det(T)."""
    return safe_float(np.linalg.det(as_square_matrix(T)))


def J(T: Any) -> float:
    """Volume ratio sqrt(det(T)).

    Raises DomainError for a negative determinant instead of returning a
    complex value.
    """
    det = I3(T)
    if det < 0.0:
        raise DomainError(
            f"J is undefined for a tensor with negative determinant ({det!r})."
        )
    return math.sqrt(det)
