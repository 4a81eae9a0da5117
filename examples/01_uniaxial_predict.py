import numpy as np

from continuum_mechanics_base import (
    AbstractMaterialModel,
    AbstractMaterialTest,
    J,
    MaterialHistory,
    parameter_dict,
    parameters,
    predict,
    register_parameters,
    register_predict,
)


class IncompressibleNeoHookean(AbstractMaterialModel):
    pass


class UniaxialTension(AbstractMaterialTest):
    def __init__(self, stretch):
        self.stretch = np.asarray(stretch, dtype=float)


@register_parameters(IncompressibleNeoHookean)
def _names(model):
    return ("mu",)


@register_predict(IncompressibleNeoHookean, UniaxialTension)
def _uniaxial(model, test, ps):
    mu = parameter_dict(model, ps)["mu"]
    lam = test.stretch
    return mu * (lam - lam**-2)


model = IncompressibleNeoHookean()
print("parameters:", parameters(model))

tests = [UniaxialTension(np.linspace(1.0, 2.0, 5)), UniaxialTension([1.0, 3.0])]
for t, p in zip(tests, predict(model, tests, [0.5])):
    print(t.stretch, "->", p)

# Track the deformation gradient along the first loading path.
history = None
for t, lam in enumerate(tests[0].stretch):
    F = np.diag([lam, lam**-0.5, lam**-0.5])
    assert abs(J(F) - 1.0) < 1e-12
    if history is None:
        history = MaterialHistory(F, float(t))
    else:
        history.append(F, float(t))

print(history)
print("F11 over time:", history.states()[0, 0, :])
