from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
)
from warnings import warn

import numpy as np
from scipy.optimize import Bounds as ScipyBounds

from .base import AbstractMaterialModel
from .errors import ConfigError
from .registry import DispatchRegistry
from .util import is_sequence, safe_float, type_name

__all__ = [
    "Bounds",
    "aggregate_bounds",
    "clip_to_bounds",
    "has_parameters",
    "parameter_bounds",
    "parameter_dict",
    "parameters",
    "register_parameter_bounds",
    "register_parameters",
]

_PARAMETERS = DispatchRegistry("parameters", arity=1)
_PARAMETER_BOUNDS = DispatchRegistry("parameter_bounds", arity=2)


def _as_bound_map(side: Optional[Mapping[str, Any]]) -> Optional[Dict[str, float]]:
    if side is None:
        return None
    return {str(k): safe_float(v) for k, v in side.items()}


@dataclass(frozen=True, eq=True)
class Bounds:
    """Admissible lower/upper limits per named parameter.

    A side that is None is unconstrained (-inf / +inf for every parameter).
    When both sides are given they must cover the same names, with
    ``lb[n] <= ub[n]``. Bounds hold dicts and are therefore unhashable.
    """

    __hash__ = None  # type: ignore[assignment]

    lb: Optional[Mapping[str, float]] = None
    ub: Optional[Mapping[str, float]] = None

    def __post_init__(self) -> None:
        lb = _as_bound_map(self.lb)
        ub = _as_bound_map(self.ub)
        if lb is not None and ub is not None:
            if set(lb) != set(ub):
                raise ConfigError(
                    "Lower and upper bounds cover different parameters: "
                    f"lb={tuple(lb)}, ub={tuple(ub)}."
                )
            bad = [n for n in lb if lb[n] > ub[n]]
            if bad:
                detail = ", ".join(f"{n}: {lb[n]!r} > {ub[n]!r}" for n in bad)
                raise ConfigError(f"Inconsistent bounds (lb > ub) for {detail}.")
        object.__setattr__(self, "lb", lb)
        object.__setattr__(self, "ub", ub)

    @property
    def names(self) -> Tuple[str, ...]:
        """Names covered by the bounds (empty when fully unconstrained)."""
        side = self.lb if self.lb is not None else self.ub
        return () if side is None else tuple(side)

    @property
    def is_unconstrained(self) -> bool:
        return self.lb is None and self.ub is None

    def to_arrays(self, names: Sequence[str]) -> Tuple[np.ndarray, np.ndarray]:
        """Return (lo, hi) arrays ordered like `names`; absent sides are -inf/+inf."""
        names = tuple(names)
        covered = set(self.names)
        if covered:
            missing = [n for n in names if n not in covered]
            if missing:
                raise ConfigError(f"Bounds do not define parameters: {missing}")
        lo: List[float] = []
        hi: List[float] = []
        for n in names:
            lo.append(-np.inf if self.lb is None else float(self.lb[n]))
            hi.append(np.inf if self.ub is None else float(self.ub[n]))
        return (np.array(lo, dtype=float), np.array(hi, dtype=float))

    def to_scipy(self, names: Sequence[str]) -> ScipyBounds:
        """Return the admissible region as a scipy.optimize.Bounds."""
        lo, hi = self.to_arrays(names)
        return ScipyBounds(lo, hi)


def _coerce_bounds(value: Any, where: str) -> Bounds:
    if isinstance(value, Bounds):
        return value
    if isinstance(value, tuple) and len(value) == 2:
        return Bounds(lb=value[0], ub=value[1])
    raise TypeError(f"{where} must return Bounds or an (lb, ub) pair, got {value!r}.")


# ---- parameter names -------------------------------------------------------


def register_parameters(model_type: type) -> Callable:
    """Register ``fn(model) -> iterable of names`` for a model class."""
    return _PARAMETERS.register(model_type)


def has_parameters(model: Any) -> bool:
    return _PARAMETERS.supports(model)


def parameters(model: AbstractMaterialModel) -> Tuple[str, ...]:
    """Ordered parameter names accepted by `model`."""
    fn = _PARAMETERS.resolve(model)
    if fn is None:
        raise NotImplementedError(
            f"parameters not implemented for model {type_name(model)}."
        )
    names = tuple(str(n) for n in fn(model))
    if len(set(names)) != len(names):
        raise ConfigError(
            f"Duplicate parameter names declared by {type_name(model)}: {names}"
        )
    return names


def parameter_dict(model: AbstractMaterialModel, ps: Any) -> Dict[str, Any]:
    """Return ps as a name -> value dict ordered like ``parameters(model)``.

    ps may be a mapping with exactly the declared names, or a sequence /
    1-D array with one value per declared name.
    """
    names = parameters(model)
    if isinstance(ps, Mapping):
        extra = [k for k in ps if k not in names]
        missing = [n for n in names if n not in ps]
        if extra or missing:
            raise ConfigError(
                f"Parameters for {type_name(model)} do not match {names}: "
                f"missing={missing}, unexpected={extra}"
            )
        return {n: ps[n] for n in names}

    values = list(np.asarray(ps).reshape(-1)) if isinstance(ps, np.ndarray) else list(ps)
    if len(values) != len(names):
        raise ConfigError(
            f"{type_name(model)} expects {len(names)} parameters {names}, "
            f"got {len(values)}."
        )
    return dict(zip(names, values))


# ---- bounds ----------------------------------------------------------------


def register_parameter_bounds(model_type: type, test_type: type = object) -> Callable:
    """Register ``fn(model, test) -> Bounds | (lb, ub)`` for a (model, test) pair.

    test_type defaults to ``object``: the bounds then apply under any test.
    """
    return _PARAMETER_BOUNDS.register(model_type, test_type)


def _combine_side(
    sides: Sequence[Optional[Dict[str, float]]],
    reduce: Callable[[Iterable[float]], float],
    label: str,
) -> Optional[Dict[str, float]]:
    """Reduce the present per-test maps of one side name by name."""
    present = [(i, s) for i, s in enumerate(sides) if s is not None]
    if not present:
        return None
    i0, ref = present[0]
    names = tuple(ref)
    for i, s in present[1:]:
        if set(s) != set(names):
            missing_here = [n for n in names if n not in s]
            missing_ref = [n for n in s if n not in ref]
            raise ConfigError(
                f"Inconsistent {label} bound names between test {i0} and test {i}: "
                f"missing in test {i}: {missing_here}, missing in test {i0}: {missing_ref}"
            )
    return {n: float(reduce(s[n] for _, s in present)) for n in names}


def aggregate_bounds(bounds: Sequence[Bounds]) -> Bounds:
    """Intersect per-test bounds: max of lower bounds, min of upper bounds.

    A side that is None for every entry stays None. Entries whose side is
    None impose no constraint on that side. Raises ConfigError when the
    present maps disagree on parameter names or the result has lb > ub.
    """
    bounds = [_coerce_bounds(b, "aggregate_bounds") for b in bounds]
    lb = _combine_side([b.lb for b in bounds], max, "lower")
    ub = _combine_side([b.ub for b in bounds], min, "upper")
    return Bounds(lb=lb, ub=ub)


def _check_declared(model: Any, combined: Bounds) -> None:
    if not has_parameters(model):
        return
    declared = parameters(model)
    for label, side in (("lower", combined.lb), ("upper", combined.ub)):
        if side is not None and set(side) != set(declared):
            raise ConfigError(
                f"{label.capitalize()} bounds {tuple(side)} do not match parameters "
                f"{declared} declared by {type_name(model)}."
            )


def parameter_bounds(model: AbstractMaterialModel, test: Any) -> Bounds:
    """Admissible parameter region of `model` under `test`.

    Without a registered implementation the region is unconstrained. For a
    list/tuple of tests the per-test regions are intersected with
    :func:`aggregate_bounds` and checked against ``parameters(model)`` when
    the model declares names.
    """
    if not isinstance(model, AbstractMaterialModel):
        raise TypeError(
            f"parameter_bounds expects an AbstractMaterialModel, got {type_name(model)}."
        )

    if not is_sequence(test):
        fn = _PARAMETER_BOUNDS.resolve(model, test)
        if fn is None:
            return Bounds(lb=None, ub=None)
        bounds = _coerce_bounds(fn(model, test), "parameter_bounds")
        _check_declared(model, bounds)
        return bounds

    per_test = [parameter_bounds(model, t) for t in test]
    combined = aggregate_bounds(per_test)
    _check_declared(model, combined)
    return combined


def clip_to_bounds(ps: Mapping[str, Any], bounds: Bounds) -> Dict[str, float]:
    """Return ps with every value clipped into its [lb, ub] interval.

    Names not covered by the bounds pass through unchanged. Warns listing
    the clipped names.
    """
    out: Dict[str, float] = {}
    clipped: List[str] = []
    for n, v in ps.items():
        v = safe_float(v)
        v0 = v
        if bounds.lb is not None and n in bounds.lb:
            v = max(v, bounds.lb[n])
        if bounds.ub is not None and n in bounds.ub:
            v = min(v, bounds.ub[n])
        if v != v0:
            clipped.append(n)
        out[n] = v
    if clipped:
        warn("Clipped parameter values into bounds for: " + ", ".join(clipped), UserWarning)
    return out
