from __future__ import annotations

from typing import Any

import numpy as np

from .errors import ShapeError


def is_sequence(x: Any) -> bool:
    return isinstance(x, (list, tuple))


def safe_float(x: Any) -> float:
    """Convert numpy scalar / 0-d array to python float."""
    if isinstance(x, np.ndarray) and x.shape == ():
        return float(x.item())
    return float(x)


def type_name(obj: Any) -> str:
    """Qualified class name of obj (or of obj itself if it is a class)."""
    cls = obj if isinstance(obj, type) else type(obj)
    module = getattr(cls, "__module__", "")
    if module in ("builtins", "__main__", ""):
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"


def as_square_matrix(T: Any) -> np.ndarray:
    """Return T as a 2-D square ndarray, raising ShapeError otherwise."""
    arr = np.asarray(T)
    if arr.ndim != 2:
        raise ShapeError(f"Expected a 2-D tensor, got array with shape {arr.shape}.")
    if arr.shape[0] != arr.shape[1]:
        raise ShapeError(f"Expected a square tensor, got shape {arr.shape}.")
    return arr
