"""Mutation burden.

Total mutation burden per sample of a catalog matrix and the upper
fence used to call a sample ultra-mutated.

"""

import logging
import pandas as pd


logger = logging.getLogger(__name__)


def count_mutation_burden(X):
    """Count total mutations per sample.

    Parameters
    ----------
    X : pd.DataFrame
        Catalog matrix with mutation types as rows and samples as
        columns.

    Returns
    -------
    total_mutations : pd.Series
        Column sums of `X`, indexed by sample.

    """
    return X.sum(axis=0).rename('total_mutations')


def ultra_mutated_threshold(totals):
    """Return the burden above which a sample is ultra-mutated.

    The fence is ``median + 1.5 * (q3 - q1)``, i.e. a Tukey fence
    anchored at the median instead of at the third quartile, as in
    Kim et al. DOI: 10.1038/ng.3557. Quartiles are linearly
    interpolated.

    Parameters
    ----------
    totals : pd.Series
        Mutation burden per sample, as returned by
        :func:`count_mutation_burden`.

    Returns
    -------
    float
        The threshold. NaN if `totals` is empty.

    Examples
    --------
    >>> ultra_mutated_threshold(pd.Series([10, 10, 10, 1000]))
    381.25
    """
    q1 = totals.quantile(0.25)
    q3 = totals.quantile(0.75)
    return totals.median() + 1.5 * (q3 - q1)
