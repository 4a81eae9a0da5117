import numpy as np
import pytest

from continuum_mechanics_base import AbstractMaterialModel, tensors
from continuum_mechanics_base.tensors import (
    AVAILABLE_HOOKS,
    HOOKS,
    get_hook,
    green_strain_tensor,
    green_strain_tensor_inplace,
    strain_energy_density,
)


class Bare(AbstractMaterialModel):
    pass


class StVenant(AbstractMaterialModel):
    pass


class StVenantVariant(StVenant):
    pass


@green_strain_tensor.register(StVenant)
def _green(model, F, ps):
    F = np.asarray(F, dtype=float)
    return 0.5 * (F.T @ F - np.eye(F.shape[0]))


@green_strain_tensor_inplace.register(StVenant)
def _green_inplace(out, model, F, ps):
    out[...] = _green(model, F, ps)


@strain_energy_density.register(StVenant)
def _energy(model, F, ps, scale=1.0):
    E = _green(model, F, ps)
    lam, mu = ps["lambda"], ps["mu"]
    return scale * (0.5 * lam * np.trace(E) ** 2 + mu * np.trace(E @ E))


def test_vocabulary_is_complete():
    expected = {
        "strain_energy_density",
        "first_piola_kirchhoff_stress_tensor",
        "second_piola_kirchhoff_stress_tensor",
        "cauchy_stress_tensor",
        "deformation_gradient_tensor",
        "inverse_deformation_gradient_tensor",
        "right_cauchy_green_deformation_tensor",
        "left_cauchy_green_deformation_tensor",
        "inverse_left_cauchy_green_deformation_tensor",
        "green_strain_tensor",
        "almansi_strain_tensor",
        "velocity_gradient_tensor",
    }
    expected |= {n + "_inplace" for n in expected}
    assert set(AVAILABLE_HOOKS) == expected
    for name in expected:
        assert getattr(tensors, name) is HOOKS[name]


@pytest.mark.parametrize("name", AVAILABLE_HOOKS)
def test_unspecialised_hook_is_not_implemented(name):
    hook = get_hook(name)
    args = (np.zeros((3, 3)), Bare(), np.eye(3), {}) if hook.inplace else (Bare(), np.eye(3), {})
    assert not hook.supports(Bare())
    with pytest.raises(NotImplementedError, match=f"{name} not implemented for model .*Bare"):
        hook(*args)


def test_registered_hook_dispatches_on_model_class():
    F = np.diag([2.0, 1.0, 1.0])
    E = green_strain_tensor(StVenant(), F, {})
    assert np.allclose(E, np.diag([1.5, 0.0, 0.0]))

    assert green_strain_tensor.supports(StVenantVariant())
    assert np.allclose(green_strain_tensor(StVenantVariant(), F, {}), E)


def test_hook_passes_keyword_options():
    F = np.diag([2.0, 1.0, 1.0])
    ps = {"lambda": 1.0, "mu": 1.0}
    w = strain_energy_density(StVenant(), F, ps)
    assert w == pytest.approx(0.5 * 1.5**2 + 1.5**2)
    assert strain_energy_density(StVenant(), F, ps, scale=2.0) == pytest.approx(2 * w)


def test_inplace_hook_fills_and_returns_out():
    out = np.full((3, 3), np.nan)
    res = green_strain_tensor_inplace(out, StVenant(), np.eye(3), {})
    assert res is out
    assert np.allclose(out, 0.0)


def test_hook_argument_checks():
    with pytest.raises(TypeError):
        green_strain_tensor(object(), np.eye(3), {})
    with pytest.raises(TypeError):
        green_strain_tensor(StVenant(), np.eye(3))
    with pytest.raises(TypeError):
        green_strain_tensor_inplace(StVenant(), np.eye(3), {})


def test_get_hook_unknown_name():
    assert get_hook("cauchy_stress_tensor") is tensors.cauchy_stress_tensor
    with pytest.raises(ValueError, match="Unknown tensor hook"):
        get_hook("kirchhoff_stress_tensor")
