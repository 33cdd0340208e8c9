"""Dilution of ultra-mutated samples.

A few samples with an extreme mutation burden can dominate the
inference of signatures. Following Kim et al. DOI: 10.1038/ng.3557,
each such sample is replaced by two samples carrying half of its
counts, and the procedure is repeated until no sample is an outlier.

"""

import logging
import warnings

import pandas as pd

from .compute_mutation_burden import count_mutation_burden
from .compute_mutation_burden import ultra_mutated_threshold
from .constants import default_max_iter


logger = logging.getLogger(__name__)


def find_ultra_mutated(X: pd.DataFrame) -> pd.Series:
    """Return a boolean mask of the ultra-mutated samples of `X`.

    A sample is ultra-mutated when its burden is strictly above
    :func:`compute_mutation_burden.ultra_mutated_threshold`.
    """
    totals = count_mutation_burden(X)
    return totals > ultra_mutated_threshold(totals)


def _has_positional_columns(X):
    return X.columns.equals(pd.RangeIndex(X.shape[1]))


def dilute_ultra_mutated(X, max_iter: int = default_max_iter) -> pd.DataFrame:
    """Split ultra-mutated samples until none is left.

    In every round the samples whose burden exceeds
    ``median + 1.5 * IQR`` are removed and each is replaced by two
    samples with half of its counts, named ``<sample>__1`` and
    ``<sample>__2``. The halves are appended after the remaining
    samples. Halves of odd counts are kept fractional.

    Parameters
    ----------
    X : pd.DataFrame or array-like
        Catalog matrix (mutation types × samples). Samples without
        labels (a default positional index, e.g. from an array) are
        labelled 1..N before the first round.
    max_iter : int, default 100
        Maximum number of rounds.

    Returns
    -------
    pd.DataFrame
        A new catalog matrix. `X` is not modified.

    Warns
    -----
    RuntimeWarning
        If ultra-mutated samples remain after `max_iter` rounds. The
        matrix reached so far is returned.

    Examples
    --------
    >>> X = pd.DataFrame({'a': [5, 5], 'b': [5, 5], 'c': [5, 5],
    ...                   'd': [500, 500]})
    >>> dilute_ultra_mutated(X).columns.tolist()
    ['a', 'b', 'c', 'd__1', 'd__2']
    """
    if max_iter < 1:
        raise ValueError(f"max_iter must be at least 1, got {max_iter}")

    X = pd.DataFrame(X).copy()
    if _has_positional_columns(X):
        X.columns = pd.RangeIndex(1, X.shape[1] + 1)

    n_start = X.shape[1]
    for iteration in range(1, max_iter + 1):
        ultra = find_ultra_mutated(X).to_numpy()
        if not ultra.any():
            logger.info(
                "Dilution converged after %d round(s): %d -> %d samples",
                iteration - 1, n_start, X.shape[1])
            return X

        logger.debug("Round %d: diluting %d ultra-mutated sample(s)",
                     iteration, ultra.sum())
        halves = X.loc[:, ultra] / 2
        X = pd.concat([X.loc[:, ~ultra],
                       halves.add_suffix("__1"),
                       halves.add_suffix("__2")], axis=1)

    if find_ultra_mutated(X).any():
        msg = (f"Maximum number of iterations ({max_iter}) reached while "
               "diluting ultra-mutated samples")
        logger.warning(msg)
        warnings.warn(msg, RuntimeWarning, stacklevel=2)
    return X
