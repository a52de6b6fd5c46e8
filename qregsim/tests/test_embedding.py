# qregsim/tests/test_embedding.py
import numpy as np
import pytest
from qregsim import gates as G
from qregsim.embedding import embed_operator, gather_indices, local_offsets, validate_operation
from qregsim.errors import DimensionMismatch, InvalidQubitIndex
from qregsim.linalg import identity, is_unitary, tensor_product

def test_single_target_matches_kron():
    # qubit 0 is the least significant bit, so it is the right-most factor
    U = G.H()
    full = embed_operator(U, [0], 3)
    assert np.allclose(full, tensor_product(identity(4), U))
    full = embed_operator(U, [2], 3)
    assert np.allclose(full, tensor_product(U, identity(4)))

def test_contiguous_ascending_targets_match_kron():
    # targets (0,1): local bit 1 = qubit 1 is the more significant factor
    U = G.CNOT()
    assert np.allclose(embed_operator(U, [0, 1], 2), U)
    assert np.allclose(embed_operator(U, [0, 1], 3), tensor_product(identity(2), U))

def test_reversed_targets_permute():
    # CNOT with control=1, target=0 acts on |q1 q0> as the textbook CNOT
    full = embed_operator(G.CNOT(), [1, 0], 2)
    expect = np.eye(4)[[0, 1, 3, 2]]
    assert np.allclose(full, expect)

def test_non_contiguous_targets():
    # CNOT control 0, target 2 on 3 qubits: flips bit 2 whenever bit 0 is set
    full = embed_operator(G.CNOT(), [0, 2], 3)
    for j in range(8):
        i = j ^ 4 if j & 1 else j
        col = np.zeros(8); col[i] = 1
        assert np.allclose(full[:, j], col)

def test_embedded_is_block_diagonal_and_unitary():
    U = G.TOFFOLI()
    full = embed_operator(U, [3, 0, 2], 4)
    assert full.shape == (16, 16)
    assert is_unitary(full)
    # spectator qubit 1 never changes
    rows, cols = np.nonzero(np.abs(full) > 0)
    assert np.all((rows & 2) == (cols & 2))

def test_gather_indices():
    local, rest = gather_indices([2, 0], 3)
    # index 5 = 0b101: qubit 2 -> local bit 0, qubit 0 -> local bit 1
    assert local[5] == 3 and rest[5] == 0
    assert local[2] == 0 and rest[2] == 2
    assert local[4] == 1 and rest[4] == 0

def test_local_offsets():
    assert list(local_offsets([2, 0])) == [0, 4, 1, 5]

def test_validate_operation_errors():
    with pytest.raises(InvalidQubitIndex):
        validate_operation(G.X(), [3], 3)
    with pytest.raises(InvalidQubitIndex):
        validate_operation(G.X(), [-1], 3)
    with pytest.raises(InvalidQubitIndex):
        validate_operation(G.CNOT(), [1, 1], 3)
    with pytest.raises(InvalidQubitIndex):
        validate_operation(G.X(), [0.5], 3)
    with pytest.raises(DimensionMismatch):
        validate_operation(G.CNOT(), [0], 3)
    with pytest.raises(DimensionMismatch):
        validate_operation(np.ones((2, 4)), [0], 3)
    with pytest.raises(DimensionMismatch):
        validate_operation(np.eye(3), [0, 1], 3)

def test_validate_returns_tuple():
    U, tgt = validate_operation(G.CZ(), [np.int64(2), 0], 3)
    assert tgt == (2, 0)
    assert U.shape == (4, 4)
