import numpy as np
from scipy.optimize import minimize

from continuum_mechanics_base import (
    AbstractMaterialModel,
    AbstractMaterialTest,
    Bounds,
    parameter_bounds,
    parameters,
    predict,
    register_parameter_bounds,
    register_parameters,
    register_predict,
)


class LinearViscous(AbstractMaterialModel):
    pass


class RampTest(AbstractMaterialTest):
    def __init__(self, rate, strain, stress, max_modulus):
        self.rate = rate
        self.strain = np.asarray(strain, dtype=float)
        self.stress = np.asarray(stress, dtype=float)
        self.max_modulus = max_modulus


@register_parameters(LinearViscous)
def _names(model):
    return ("E", "eta")


@register_parameter_bounds(LinearViscous, RampTest)
def _bounds(model, test):
    # Each ramp only constrains the modulus range it can resolve.
    return Bounds(lb={"E": 0.0, "eta": 0.0}, ub={"E": test.max_modulus, "eta": 100.0})


@register_predict(LinearViscous, RampTest)
def _ramp(model, test, ps):
    E, eta = ps
    return E * test.strain + eta * test.rate


rng = np.random.default_rng(0)
true = (12.0, 0.8)
tests = []
for rate, cap in [(0.1, 50.0), (1.0, 30.0), (5.0, 40.0)]:
    eps = np.linspace(0.0, 0.05, 20)
    sig = true[0] * eps + true[1] * rate + rng.normal(0.0, 0.01, size=eps.size)
    tests.append(RampTest(rate, eps, sig, cap))

names = parameters(LinearViscous())
region = parameter_bounds(LinearViscous(), tests)
print("admissible region:", region)


def objective(theta):
    preds = predict(LinearViscous(), tests, theta, parallel="auto")
    return sum(float(np.sum((p - t.stress) ** 2)) for p, t in zip(preds, tests))


res = minimize(objective, x0=[1.0, 1.0], bounds=region.to_scipy(names), method="L-BFGS-B")
print(dict(zip(names, res.x)))
assert np.allclose(res.x, true, atol=0.5)
