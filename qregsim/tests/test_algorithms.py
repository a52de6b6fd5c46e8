# qregsim/tests/test_algorithms.py
import numpy as np
import pytest
from qregsim import algorithms as A
from qregsim.circuit import Circuit
from qregsim.errors import InvalidArgument

def test_ghz_state():
    p = A.ghz_state(4).execute().probabilities()
    assert p == pytest.approx({"0000": 0.5, "1111": 0.5})

def test_qft_on_zero_is_uniform():
    psi = A.qft(3).execute().as_numpy()
    assert np.allclose(psi, np.full(8, 1/np.sqrt(8)))

@pytest.mark.parametrize("x", [1, 5, 6])
def test_qft_matches_dft(x):
    n = 3
    N = 1 << n
    psi = A.qft(n).execute(initial_index=x).as_numpy()
    expect = np.exp(2j*np.pi*x*np.arange(N)/N) / np.sqrt(N)
    assert np.allclose(psi, expect, atol=1e-10)

def test_inverse_qft_undoes_qft():
    c = A.qft(3).compose(A.inverse_qft(3))
    psi = c.execute(initial_index=6).as_numpy()
    expect = np.zeros(8); expect[6] = 1
    assert np.allclose(psi, expect, atol=1e-10)

def test_deutsch_jozsa_constant_and_balanced():
    n = 3
    const = A.deutsch_jozsa(lambda c: None, n).execute().probabilities()
    assert all(k[1:] == "000" for k in const)
    balanced = A.deutsch_jozsa(lambda c: c.cnot(0, n), n).execute().probabilities()
    assert all(k[-1] == "1" for k in balanced)

def test_grover_two_qubits_is_exact():
    p = A.grover_search([3], 2).execute().probabilities()
    assert p["11"] == pytest.approx(1.0)

def test_grover_three_qubits_amplifies_target():
    p = A.grover_search([5], 3).execute().probabilities()
    assert p["101"] > 0.9

def test_grover_rejects_unsupported_sizes():
    with pytest.raises(InvalidArgument):
        A.grover_search([1], 4)
    with pytest.raises(InvalidArgument):
        A.grover_search([8], 3)

def test_teleportation_moves_qubit_zero():
    theta = 1.1
    c = Circuit.empty(3).ry(0, theta).compose(A.teleportation())
    probs = c.execute().probabilities_array()
    p1_on_q2 = sum(p for i, p in enumerate(probs) if i & 4)
    assert p1_on_q2 == pytest.approx(np.sin(theta/2)**2)

@pytest.mark.parametrize("message", ["00", "01", "10", "11"])
def test_superdense_coding(message):
    p = A.superdense_coding(message).execute().probabilities()
    assert p == pytest.approx({message: 1.0})

def test_superdense_rejects_bad_message():
    with pytest.raises(InvalidArgument):
        A.superdense_coding("2")
