from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, List, Literal, Optional, Sequence, Union

from .base import AbstractMaterialModel, AbstractMaterialTest
from .registry import DispatchRegistry
from .util import is_sequence, type_name

__all__ = ["predict", "register_predict", "has_predict"]

Parallel = Optional[Union[Literal["auto"], int]]

_PREDICT = DispatchRegistry("predict", arity=2)


def register_predict(model_type: type, test_type: type) -> Callable:
    """Register ``fn(model, test, ps, **options)`` for a (model, test) pair.

    Example::

        @register_predict(NeoHookean, UniaxialLoad)
        def _(model, test, ps, **options):
            ...
    """
    return _PREDICT.register(model_type, test_type)


def has_predict(model: Any, test: Any) -> bool:
    return _PREDICT.supports(model, test)


def _check_model(model: Any) -> None:
    if not isinstance(model, AbstractMaterialModel):
        raise TypeError(
            f"predict expects an AbstractMaterialModel, got {type_name(model)}."
        )


def _check_test(test: Any) -> None:
    if not isinstance(test, AbstractMaterialTest):
        raise TypeError(
            f"predict expects an AbstractMaterialTest, got {type_name(test)}."
        )


def _predict_one(model: Any, test: Any, ps: Any, options: dict) -> Any:
    fn = _PREDICT.resolve(model, test)
    if fn is None:
        raise NotImplementedError(
            f"predict not implemented for model {type_name(model)} "
            f"and test {type_name(test)}."
        )
    return fn(model, test, ps, **options)


def _max_workers(parallel: Parallel) -> Optional[int]:
    if parallel == "auto":
        return None
    if isinstance(parallel, bool) or not isinstance(parallel, int):
        raise ValueError(f"parallel must be None, 'auto' or an int, got {parallel!r}.")
    if parallel < 1:
        raise ValueError(f"parallel worker count must be >= 1, got {parallel}.")
    return parallel


def predict(
    model: AbstractMaterialModel,
    test: Union[AbstractMaterialTest, Sequence[AbstractMaterialTest]],
    ps: Any,
    *,
    parallel: Parallel = None,
    **options: Any,
) -> Any:
    """Predict the response of `model` under `test` with parameters `ps`.

    `test` may be a single test or a list/tuple of tests. For a sequence the
    single-test prediction is applied to each test independently and a list
    is returned in input order.

    parallel:
        None evaluates a sequence serially. "auto" or an int evaluates it on a
        thread pool (int = worker count). Ignored for a single test.

    Extra keyword options are passed through to the registered
    implementation. Raises NotImplementedError if no implementation is
    registered for a (model, test) pair.
    """
    _check_model(model)
    workers = None if parallel is None else _max_workers(parallel)

    if not is_sequence(test):
        _check_test(test)
        return _predict_one(model, test, ps, options)

    tests = list(test)
    for t in tests:
        _check_test(t)

    def f(t: Any) -> Any:
        return _predict_one(model, t, ps, options)

    if parallel is None or len(tests) < 2:
        return [f(t) for t in tests]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        results: List[Any] = list(pool.map(f, tests))
    return results
