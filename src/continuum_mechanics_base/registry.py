"""Type-keyed implementation registry."""

from __future__ import annotations

from itertools import product
from typing import Any, Callable, Dict, Optional, Tuple

__all__ = ["DispatchRegistry"]

Impl = Callable[..., Any]


class DispatchRegistry:
    """Map tuples of classes to implementations.

    Lookup walks the MRO of each argument's class. Earlier arguments take
    precedence: a more-derived first argument beats a more-derived second
    argument.
    """

    def __init__(self, name: str, arity: int = 1):
        if arity < 1:
            raise ValueError("arity must be >= 1.")
        self.name = name
        self.arity = int(arity)
        self._impls: Dict[Tuple[type, ...], Impl] = {}

    def _key(self, types: Tuple[Any, ...]) -> Tuple[type, ...]:
        if len(types) != self.arity:
            raise TypeError(
                f"{self.name}: expected {self.arity} type(s) to register, got {len(types)}."
            )
        for t in types:
            if not isinstance(t, type):
                raise TypeError(f"{self.name}: can only register classes, got {t!r}.")
        return tuple(types)

    def register(self, *types: type) -> Callable[[Impl], Impl]:
        """Decorator registering `fn` for the given classes."""
        key = self._key(types)

        def deco(fn: Impl) -> Impl:
            self._impls[key] = fn
            return fn

        return deco

    def unregister(self, *types: type) -> None:
        self._impls.pop(self._key(types), None)

    def resolve(self, *objs: Any) -> Optional[Impl]:
        """Return the most specific implementation for objs, or None."""
        if len(objs) != self.arity:
            raise TypeError(
                f"{self.name}: expected {self.arity} argument(s), got {len(objs)}."
            )
        if not self._impls:
            return None
        mros = [type(o).__mro__ for o in objs]
        for key in product(*mros):
            fn = self._impls.get(key)
            if fn is not None:
                return fn
        return None

    def supports(self, *objs: Any) -> bool:
        return self.resolve(*objs) is not None

    def registered(self) -> Tuple[Tuple[type, ...], ...]:
        return tuple(self._impls.keys())
