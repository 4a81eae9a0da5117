from __future__ import annotations

from typing import Any, List, Tuple
from warnings import warn

import numpy as np

from .base import AbstractMaterialState
from .errors import ShapeError
from .util import safe_float

__all__ = ["MaterialHistory", "update_history", "update_history_inplace"]


def _snapshot(value: Any) -> np.ndarray:
    """Copy value into a fresh vector/matrix array."""
    try:
        arr = np.array(value, copy=True)
    except ValueError as e:
        raise ShapeError(f"History snapshot is not a regular array: {e}") from e
    if arr.dtype == object:
        raise ShapeError("History snapshot is not a regular numeric array.")
    if arr.ndim not in (1, 2):
        raise ShapeError(
            f"History snapshots must be vectors or matrices, got shape {arr.shape}."
        )
    return arr


def _timestamp(time: Any) -> float:
    if np.ndim(time) != 0:
        raise ShapeError(f"History time stamps must be scalars, got {time!r}.")
    return safe_float(time)


class MaterialHistory(AbstractMaterialState):
    """Time-indexed record of a material state, for time-dependent models.

    The first snapshot fixes the shape every later snapshot must have.
    ``value`` and ``time`` always have the same length and only grow through
    :meth:`append`.

    Not safe for concurrent writers.
    """

    def __init__(self, value: Any, time: Any):
        first = _snapshot(value)
        self._shape: Tuple[int, ...] = tuple(first.shape)
        self.value: List[np.ndarray] = [first]
        self.time: List[float] = [_timestamp(time)]

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._shape

    def __len__(self) -> int:
        return len(self.time)

    def __repr__(self) -> str:
        return (
            f"MaterialHistory(n={len(self)}, shape={self._shape}, "
            f"t=[{self.time[0]!r}, {self.time[-1]!r}])"
        )

    def append(self, value: Any, time: Any) -> "MaterialHistory":
        """Append one (state, time) pair in place and return self."""
        arr = _snapshot(value)
        if tuple(arr.shape) != self._shape:
            raise ShapeError(
                f"History snapshot shape {arr.shape} does not match "
                f"established shape {self._shape}."
            )
        t = _timestamp(time)
        if t < self.time[-1]:
            warn(
                f"History time went backwards: {t!r} < {self.time[-1]!r}.",
                UserWarning,
                stacklevel=2,
            )
        self.value.append(arr)
        self.time.append(t)
        return self

    def latest(self) -> Tuple[np.ndarray, float]:
        """Return the most recent (state, time) pair."""
        return self.value[-1], self.time[-1]

    def states(self) -> np.ndarray:
        """Snapshots stacked along a new last axis, shape ``shape + (n,)``."""
        return np.stack(self.value, axis=-1)

    def times(self) -> np.ndarray:
        return np.asarray(self.time, dtype=float)

    def copy(self) -> "MaterialHistory":
        out = type(self).__new__(type(self))
        out._shape = self._shape
        out.value = [v.copy() for v in self.value]
        out.time = list(self.time)
        return out


def update_history(history: MaterialHistory, value: Any, time: Any) -> MaterialHistory:
    """Return a new history with (value, time) appended; `history` is untouched."""
    return history.copy().append(value, time)


def update_history_inplace(
    history: MaterialHistory, value: Any, time: Any
) -> MaterialHistory:
    """Append (value, time) to `history` and return it."""
    return history.append(value, time)
