import numpy as np
import pytest

from continuum_mechanics_base import I1, I2, I3, J, DomainError, ShapeError


def _orthogonal(seed: int) -> np.ndarray:
    rng = np.random.default_rng(seed)
    q, _ = np.linalg.qr(rng.normal(size=(3, 3)))
    return q


def test_identity_invariants():
    F = np.eye(3)
    assert I1(F) == 3
    assert I2(F) == 3
    assert I3(F) == pytest.approx(1.0)
    assert J(F) == pytest.approx(1.0)


def test_invariants_accept_nested_lists():
    T = [[2.0, 0.0], [0.0, 3.0]]
    assert I1(T) == pytest.approx(5.0)
    assert I2(T) == pytest.approx(6.0)
    assert I3(T) == pytest.approx(6.0)
    assert J(T) == pytest.approx(np.sqrt(6.0))


def test_invariants_match_eigenvalues_for_symmetric_tensor():
    rng = np.random.default_rng(3)
    A = rng.normal(size=(3, 3))
    C = A.T @ A + np.eye(3)
    lam = np.linalg.eigvalsh(C)

    assert I1(C) == pytest.approx(lam.sum())
    assert I2(C) == pytest.approx(lam[0] * lam[1] + lam[1] * lam[2] + lam[2] * lam[0])
    assert I3(C) == pytest.approx(np.prod(lam))
    assert J(C) == pytest.approx(np.sqrt(np.prod(lam)))


@pytest.mark.parametrize("seed", range(8))
def test_orthogonal_tensor_volume_ratio(seed):
    Q = _orthogonal(seed)
    det = I3(Q)
    assert abs(det) == pytest.approx(1.0)
    if det < 0:
        with pytest.raises(DomainError):
            J(Q)
    else:
        assert J(Q) == pytest.approx(1.0)


def test_reflection_has_no_volume_ratio():
    R = np.diag([1.0, 1.0, -1.0])
    assert I3(R) == pytest.approx(-1.0)
    with pytest.raises(DomainError, match="negative determinant"):
        J(R)


@pytest.mark.parametrize("bad", [np.ones((2, 3)), np.ones(3), np.ones((2, 2, 2))])
@pytest.mark.parametrize("fn", [I1, I2, I3, J])
def test_non_square_input_is_rejected(fn, bad):
    with pytest.raises(ShapeError):
        fn(bad)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        I1(np.ones((2, 3)))
    with pytest.raises(ValueError):
        J(-np.eye(3))
