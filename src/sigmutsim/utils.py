"""Utility functions for sigmutsim.

This module contains general utility functions used across the
package: construction of random number generators and random
reference inputs (signature matrices and process weights) drawn from
Dirichlet distributions.
"""

from collections.abc import Sequence

import numpy as np
import pandas as pd

from .constants import canonical_types_order
from .constants import random_seed
from .constants import sbs_signatures


def make_rng(random_state=None) -> np.random.Generator:
    """Return a numpy random generator.

    Parameters
    ----------
    random_state : None, int, or numpy.random.Generator
        Seed or generator. If None, :data:`constants.random_seed` is
        used (which is itself None unless set, giving fresh entropy).
        A Generator is returned unchanged.

    Returns
    -------
    numpy.random.Generator
    """
    if random_state is None:
        random_state = random_seed
    return np.random.default_rng(random_state)


def random_signature_matrix(
    n_signatures: int,
    concentration: float = 1.0,
    *,
    random_state=None,
) -> pd.DataFrame:
    """Draw a random 96-channel SBS signature matrix.

    Each signature is an independent draw from a symmetric Dirichlet
    distribution over the 96 trinucleotide mutation types, so every
    column sums to 1.

    Parameters
    ----------
    n_signatures : int
        Number of signatures (columns). Columns are named after the
        first `n_signatures` COSMIC SBS signatures.
    concentration : float, default 1.0
        Dirichlet concentration shared by all mutation types.
    random_state : None, int, or numpy.random.Generator
        See :func:`make_rng`.

    Returns
    -------
    pd.DataFrame
        Mutation types (index named 'type', canonical order) ×
        signatures.

    Examples
    --------
    >>> W = random_signature_matrix(5, random_state=135)
    >>> W.shape
    (96, 5)
    """
    if not 0 < n_signatures <= len(sbs_signatures):
        raise ValueError(
            f"n_signatures must be between 1 and {len(sbs_signatures)}, "
            f"got {n_signatures}")

    rng = make_rng(random_state)
    values = rng.dirichlet(
        np.full(len(canonical_types_order), concentration),
        size=n_signatures)

    W = pd.DataFrame(values.T,
                     index=canonical_types_order,
                     columns=sbs_signatures[:n_signatures])
    W.index.name = "type"
    return W


def random_process_weights(
    names: Sequence[str],
    concentration: float = 5.0,
    *,
    random_state=None,
) -> pd.Series:
    """Draw average process proportions from a Dirichlet distribution.

    Parameters
    ----------
    names : sequence of str
        Process (signature) names, used as the index of the result.
    concentration : float, default 5.0
        Dirichlet concentration shared by all processes.
    random_state : None, int, or numpy.random.Generator
        See :func:`make_rng`.

    Returns
    -------
    pd.Series
        Proportions summing to 1, indexed by `names`.
    """
    names = list(names)
    rng = make_rng(random_state)
    weights = rng.dirichlet(np.full(len(names), concentration))
    return pd.Series(weights, index=names, name="h")
