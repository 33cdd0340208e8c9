"""Load mutational signature matrices and mean exposures.

- Functions
  ----------
  - load_signature_matrix :
      Load a signature matrix with mutation types as index and
      signatures as columns. Supports COSMIC-formatted or
      SigProfiler-derived files.
  - load_process_weights :
      Load the average proportion of mutations per signature for one
      cancer type, to be used as process weights in a simulation.

Usage
-----
>>> from sigmutsim.load_signature_matrix import load_signature_matrix
>>> W = load_signature_matrix("/path/to/matrix.txt")

Notes
-----
- Signature matrices must contain either a 'MutationType' or 'Type'
  column for indexing.
- The returned DataFrames will always have index name 'type'.
"""

import os
import logging
import pandas as pd

from .locations import check_data_file
from .locations import location_mean_exposures


logger = logging.getLogger(__name__)


def load_signature_matrix(location, signatures=None) -> pd.DataFrame:
    """Load a mutational signature matrix from file.

    Parameters
    ----------
    location : str or Path
        Path to the signature matrix file. Must be a tab-delimited
        file with either a 'MutationType' or 'Type' column as index.
    signatures : list of str, optional
        Keep only these signatures, in this order.

    Returns
    -------
    pd.DataFrame
        Signature matrix with mutation types as index (named 'type' to
        avoid confusion) and signature names as columns.

    Raises
    ------
    ValueError
        If the file does not exist, lacks the required columns, or
        lacks any of the requested signatures.

    """
    if not os.path.exists(location):
        msg = f"Signature matrix file does not exist: {location}"
        logger.error(msg)
        raise ValueError(msg)

    df = pd.read_csv(location, sep="\t")

    if "MutationType" in df.columns:
        df = df.set_index("MutationType")
    elif "Type" in df.columns:
        df = df.set_index("Type")
    else:
        msg = ("Signature matrix must contain either a 'MutationType' "
               "or 'Type' column.")
        logger.error(msg)
        raise ValueError(msg)

    df.index.name = "type"

    if signatures is not None:
        missing = [s for s in signatures if s not in df.columns]
        if missing:
            msg = f"Signatures not found in {location}: {missing}"
            logger.error(msg)
            raise ValueError(msg)
        df = df[list(signatures)]

    return df


def load_process_weights(cancer_type, location=None) -> pd.Series:
    """Load the mean signature proportions of a cancer type.

    Parameters
    ----------
    cancer_type : str
        Row to return (e.g. 'Breast').
    location : str or Path, optional
        Tab-delimited file whose first column holds cancer types and
        whose remaining columns are signatures. Defaults to
        :data:`locations.location_mean_exposures`.

    Returns
    -------
    pd.Series
        Mean proportion of mutations per signature, indexed by
        signature name.

    Raises
    ------
    ValueError
        If the file does not exist or has no row for `cancer_type`.
    FileNotFoundError
        If `location` is None and the default file is missing.

    """
    if location is None:
        location = check_data_file(location_mean_exposures,
                                   "mean exposures by cancer type")
        logger.info("Loading mean exposures from %s", location)

    if not os.path.exists(location):
        msg = f"Mean exposures file does not exist: {location}"
        logger.error(msg)
        raise ValueError(msg)

    df = pd.read_csv(location, sep="\t", index_col=0)

    if cancer_type not in df.index:
        msg = (f"Cancer type {cancer_type!r} not found in {location}. "
               f"Available: {list(df.index)}")
        logger.error(msg)
        raise ValueError(msg)

    return df.loc[cancer_type].rename(cancer_type)
