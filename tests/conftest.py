"""
Shared fixtures for the sampler tests.
"""

import numpy as np
import pytest


@pytest.fixture
def small_counts():
    """Two documents over three terms: doc0=[2,0,1], doc1=[0,3,1]."""
    return np.array([[2, 0, 1],
                     [0, 3, 1]])


@pytest.fixture
def block_counts():
    """Six documents drawn from two disjoint vocabularies of three terms each."""
    return np.array([[5, 4, 6, 0, 0, 0],
                     [6, 5, 4, 0, 0, 0],
                     [4, 6, 5, 0, 0, 0],
                     [0, 0, 0, 5, 6, 4],
                     [0, 0, 0, 4, 5, 6],
                     [0, 0, 0, 6, 4, 5]])


def assert_counts_match(state, counts):
    """Check the four count tables against the corpus they were built from."""
    counts = np.asarray(counts)
    np.testing.assert_array_equal(state.DT.sum(1), state.sum_D)
    np.testing.assert_array_equal(state.sum_D, counts.sum(1))
    np.testing.assert_array_equal(state.TW.sum(1), state.sum_T)
    np.testing.assert_array_equal(state.TW.sum(0), counts.sum(0))
    assert state.sum_T.sum() == counts.sum()
    state.check_consistency()
