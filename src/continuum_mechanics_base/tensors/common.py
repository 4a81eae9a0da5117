from __future__ import annotations

from typing import Any, Callable

from ..base import AbstractMaterialModel
from ..registry import DispatchRegistry
from ..util import type_name

__all__ = ["TensorHook"]


class TensorHook:
    """Named extension point that model packages specialise per model class.

    Plain hooks are called as ``hook(model, state, ps, **kwargs)``. In-place
    hooks are called as ``hook(out, model, state, ps, **kwargs)``. The
    implementation fills `out`, and `out` is returned.
    """

    def __init__(self, name: str, *, inplace: bool = False, doc: str = ""):
        self.name = name
        self.inplace = bool(inplace)
        self.__doc__ = doc or f"{name}(model, state, ps, **kwargs)"
        self._registry = DispatchRegistry(name, arity=1)

    def __repr__(self) -> str:
        kind = "inplace " if self.inplace else ""
        return f"<{kind}TensorHook {self.name}>"

    def register(self, model_type: type) -> Callable:
        """Decorator registering an implementation for `model_type`."""
        return self._registry.register(model_type)

    def supports(self, model: Any) -> bool:
        return self._registry.supports(model)

    def _resolve(self, model: Any) -> Callable:
        if not isinstance(model, AbstractMaterialModel):
            raise TypeError(
                f"{self.name} expects an AbstractMaterialModel, got {type_name(model)}."
            )
        fn = self._registry.resolve(model)
        if fn is None:
            raise NotImplementedError(
                f"{self.name} not implemented for model {type_name(model)}."
            )
        return fn

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if self.inplace:
            if len(args) != 4:
                raise TypeError(f"{self.name}(out, model, state, ps) takes 4 positional arguments.")
            out, model, state, ps = args
            self._resolve(model)(out, model, state, ps, **kwargs)
            return out
        if len(args) != 3:
            raise TypeError(f"{self.name}(model, state, ps) takes 3 positional arguments.")
        model, state, ps = args
        return self._resolve(model)(model, state, ps, **kwargs)


def hook_pair(name: str, doc: str) -> tuple:
    """Return (hook, inplace hook) sharing a name stem."""
    return (
        TensorHook(name, doc=doc),
        TensorHook(f"{name}_inplace", inplace=True, doc=doc + " In-place form."),
    )
