# qregsim/tests/test_linalg.py
import math
import numpy as np
import pytest
from qregsim import complex_math as cm
from qregsim import linalg
from qregsim.errors import DimensionMismatch

def close(a, b, tol=1e-12):
    return np.allclose(a, b, atol=tol, rtol=0)

def test_complex_field_ops():
    a, b = cm.create(1, 2), cm.create(3, -1)
    assert cm.isclose(cm.add(a, b), 4 + 1j)
    assert cm.isclose(cm.subtract(a, b), -2 + 3j)
    assert cm.isclose(cm.multiply(a, b), 5 + 5j)
    assert cm.isclose(cm.conjugate(a), 1 - 2j)
    assert cm.isclose(cm.scale(a, 0.5), 0.5 + 1j)
    assert math.isclose(cm.magnitude(cm.create(3, 4)), 5.0)
    assert math.isclose(cm.magnitude_squared(cm.create(3, 4)), 25.0)

def test_polar_round_trip():
    c = cm.from_polar(2.0, math.pi / 3)
    assert math.isclose(cm.magnitude(c), 2.0)
    assert math.isclose(cm.phase(c), math.pi / 3)
    assert cm.isclose(cm.from_polar(1, math.pi), -1)

def test_complex_to_string():
    assert cm.to_string(cm.create(0.5, -0.25)) == "0.5000 - 0.2500i"
    assert cm.to_string(cm.create(1, 0), precision=2) == "1.00 + 0.00i"

def test_multiply_2x2():
    a = [[1, 2], [3, 4]]
    b = [[5, 6], [7, 8]]
    assert close(linalg.multiply(a, b), [[19, 22], [43, 50]])

def test_multiply_shape_mismatch():
    with pytest.raises(DimensionMismatch):
        linalg.multiply(np.ones((2, 3)), np.ones((2, 3)))

def test_tensor_product_block_order():
    a = [[1, 2], [3, 4]]
    b = [[0, 5], [6, 7]]
    assert close(linalg.tensor_product(a, b), [
        [0, 5, 0, 10],
        [6, 7, 12, 14],
        [0, 15, 0, 20],
        [18, 21, 24, 28],
    ])

def test_tensor_product_rectangular_shape():
    out = linalg.tensor_product(np.ones((2, 3)), np.ones((1, 2)))
    assert out.shape == (2, 6)

def test_identity():
    assert close(linalg.identity(3), np.eye(3))

def test_apply_to_vector():
    out = linalg.apply_to_vector([[1, 2], [3, 4]], [5, 6])
    assert close(out, [17, 39])

def test_apply_to_vector_mismatch():
    with pytest.raises(DimensionMismatch):
        linalg.apply_to_vector(np.eye(4), np.ones(2))
    with pytest.raises(DimensionMismatch):
        linalg.apply_to_vector(np.eye(2), np.ones((2, 1)))

def test_conjugate_transpose():
    m = [[1 + 1j, 2 - 1j], [3, 4 + 4j]]
    assert close(linalg.conjugate_transpose(m), [[1 - 1j, 3], [2 + 1j, 4 - 4j]])

def test_is_unitary():
    s = 1 / np.sqrt(2)
    assert linalg.is_unitary([[s, s], [s, -s]])
    assert not linalg.is_unitary([[1, 1], [0, 1]])
    assert not linalg.is_unitary(np.ones((2, 3)))
