"""continuum_mechanics_base public API."""
from .base import AbstractMaterialModel, AbstractMaterialState, AbstractMaterialTest
from .errors import ConfigError, DomainError, ShapeError
from .history import MaterialHistory, update_history, update_history_inplace
from .invariants import I1, I2, I3, J
from .params import (
    Bounds,
    aggregate_bounds,
    clip_to_bounds,
    has_parameters,
    parameter_bounds,
    parameter_dict,
    parameters,
    register_parameter_bounds,
    register_parameters,
)
from .predict import has_predict, predict, register_predict
from . import tensors

__all__ = [
    "AbstractMaterialModel",
    "AbstractMaterialState",
    "AbstractMaterialTest",
    "ConfigError",
    "DomainError",
    "ShapeError",
    "MaterialHistory",
    "update_history",
    "update_history_inplace",
    "I1",
    "I2",
    "I3",
    "J",
    "Bounds",
    "aggregate_bounds",
    "clip_to_bounds",
    "has_parameters",
    "parameter_bounds",
    "parameter_dict",
    "parameters",
    "register_parameter_bounds",
    "register_parameters",
    "has_predict",
    "predict",
    "register_predict",
    "tensors",
]
