"""Tests for random generators and random reference inputs."""

import numpy as np
import pytest

from sigmutsim.constants import canonical_types_order
from sigmutsim.utils import make_rng
from sigmutsim.utils import random_process_weights
from sigmutsim.utils import random_signature_matrix


def test_make_rng_passes_generator_through():
    rng = np.random.default_rng(1)
    assert make_rng(rng) is rng


def test_make_rng_seed_is_reproducible():
    assert make_rng(5).integers(1000) == make_rng(5).integers(1000)


def test_random_signature_matrix():
    W = random_signature_matrix(5, random_state=135)
    assert W.shape == (96, 5)
    assert W.index.tolist() == canonical_types_order
    assert W.columns.tolist() == ["SBS1", "SBS2", "SBS3", "SBS4", "SBS5"]
    np.testing.assert_allclose(W.sum(axis=0).to_numpy(), 1.0)


def test_random_signature_matrix_invalid_size():
    with pytest.raises(ValueError):
        random_signature_matrix(0)


def test_random_process_weights():
    h = random_process_weights(["SBS1", "SBS5", "SBS13"], random_state=1)
    assert h.index.tolist() == ["SBS1", "SBS5", "SBS13"]
    assert h.sum() == pytest.approx(1.0)
    assert (h > 0).all()
