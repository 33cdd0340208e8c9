"""Reformat catalog matrices to the sample-major layout.

Tools such as Mutation-Signatures expect one row per sample and one
column per mutation class, with classes written as 4-letter tokens
(previous nucleotide, reference, alternative, next nucleotide) in a
fixed order.
"""

import logging

import pandas as pd

from .constants import canonical_class_tokens
from .constants import extract_class_token
from .constants import sample_id_column


logger = logging.getLogger(__name__)


def row_to_column(X: pd.DataFrame) -> pd.DataFrame:
    """Transpose a catalog matrix into canonical sample-major form.

    Parameters
    ----------
    X : pd.DataFrame
        Catalog matrix with mutation types as index (e.g. 'A[C>A]A';
        the class token is made of characters 1, 3, 5 and 7) and
        samples as columns. Rows whose token is not one of the 96
        canonical classes are ignored.

    Returns
    -------
    pd.DataFrame
        Samples as rows (indexed by sample id). The first column,
        'Tumor_Sample_Barcode', repeats the sample ids, followed by the
        96 class tokens in :data:`constants.canonical_class_tokens`
        order.

    Raises
    ------
    ValueError
        If a canonical class has no row or more than one row in `X`,
        or if a mutation type cannot be parsed.

    """
    tokens = pd.Index([extract_class_token(t) for t in X.index])
    counts = tokens.value_counts()

    missing = [t for t in canonical_class_tokens if t not in counts.index]
    duplicated = [t for t in canonical_class_tokens
                  if counts.get(t, 0) > 1]
    if missing or duplicated:
        msg = "Mutation types of X do not map one-to-one onto the 96 classes"
        if missing:
            msg += f"; missing: {missing}"
        if duplicated:
            msg += f"; duplicated: {duplicated}"
        logger.error(msg)
        raise ValueError(msg)

    position = {t: i for i, t in enumerate(tokens)}
    positions = [position[t] for t in canonical_class_tokens]
    reordered = X.iloc[positions].T
    reordered.columns = canonical_class_tokens

    reordered.insert(0, sample_id_column, reordered.index)
    return reordered
