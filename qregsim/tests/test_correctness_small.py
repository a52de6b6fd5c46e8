# qregsim/tests/test_correctness_small.py
import numpy as np
from qregsim.circuit import Circuit
from qregsim.state import StateRegister
from qregsim import gates as G

def almost(p, q, tol=1e-9):
    return np.allclose(p, q, atol=tol, rtol=0)

def probs(psi):
    return np.abs(psi)**2

def test_h_on_zero():
    st = Circuit.empty(1).h(0).execute()
    assert almost(probs(st.as_numpy()), [0.5, 0.5])

def test_x_flips():
    # |0> -> X -> |1>
    st = Circuit.empty(1).x(0).execute()
    assert almost(probs(st.as_numpy()), [0.0, 1.0])

def test_cnot_control_off_noop():
    # |00> --(CNOT c=1,t=0)--> stays |00>
    st = Circuit.empty(2).cnot(1,0).execute()
    expect = np.zeros(4); expect[0]=1.0
    assert almost(probs(st.as_numpy()), expect)

def test_cnot_control_on_flips():
    # Prepare |10> by X on qubit 1 (control), then CNOT(1->0): |10> -> |11>
    st = Circuit.empty(2).x(1).cnot(1,0).execute()
    expect = np.zeros(4); expect[3]=1.0
    assert almost(probs(st.as_numpy()), expect)

def test_cnot_from_initial_basis_index():
    # start directly in index 2 (qubit 1 set)
    st = Circuit.empty(2).cnot(1,0).execute(initial_index=2)
    expect = np.zeros(4); expect[3]=1.0
    assert almost(st.as_numpy(), expect)

def test_bell_amplitudes_and_probabilities():
    st = Circuit.empty(2).h(0).cnot(0,1).execute()
    s = 1/np.sqrt(2)
    assert almost(st.as_numpy(), [s, 0, 0, s])
    p = st.probabilities()
    assert set(p) == {"00", "11"}
    assert abs(p["00"] - 0.5) < 1e-9 and abs(p["11"] - 0.5) < 1e-9

def test_toffoli_110_to_111():
    # qubits 0 and 1 set -> index 3; toffoli flips qubit 2 -> index 7
    st = Circuit.empty(3).x(0).x(1).toffoli(0,1,2).execute()
    expect = np.zeros(8); expect[7]=1.0
    assert almost(st.as_numpy(), expect)

def test_toffoli_one_control_noop():
    st = Circuit.empty(3).x(0).toffoli(0,1,2).execute()
    expect = np.zeros(8); expect[1]=1.0
    assert almost(st.as_numpy(), expect)

def test_fredkin_swaps_when_control_set():
    # control 0 set, qubit 2 set (index 5) -> swap 1,2 -> index 3
    st = Circuit.empty(3).x(0).x(2).fredkin(0,1,2).execute()
    expect = np.zeros(8); expect[3]=1.0
    assert almost(st.as_numpy(), expect)

def test_swap_non_adjacent():
    st = Circuit.empty(3).x(0).swap(0,2).execute()
    expect = np.zeros(8); expect[4]=1.0
    assert almost(st.as_numpy(), expect)

def test_normalization():
    c = Circuit.empty(3).h(0).h(1).cnot(1,0).rx(2, 0.3).ry(0, 1.1).t(1).iswap(2,0).toffoli(2,0,1)
    st = c.execute()
    assert abs(1.0 - st.norm2()) < 1e-9
    st.check_normalized()

def test_every_builtin_gate_round_trips():
    rng = np.random.default_rng(7)
    psi = rng.normal(size=8) + 1j*rng.normal(size=8)
    psi /= np.linalg.norm(psi)
    gates_1q = [f() for f in G.ONE_QUBIT.values()] + [G.RX(0.7), G.RY(-1.3), G.RZ(2.1), G.PHASE(0.4)]
    gates_2q = [f() for f in G.TWO_QUBIT.values()] + [G.CPHASE(0.9)]
    for U in gates_1q:
        st = StateRegister(3, psi.copy())
        st.apply_operator(U, [1]).apply_operator(U.conj().T, [1])
        assert almost(st.as_numpy(), psi)
    for U in gates_2q:
        st = StateRegister(3, psi.copy())
        st.apply_operator(U, [2, 0]).apply_operator(U.conj().T, [2, 0])
        assert almost(st.as_numpy(), psi)
