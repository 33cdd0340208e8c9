"""Simulation of mutational spectra.

Synthetic mutation catalogs are generated with the zero-inflated
model of Omichessan et al. DOI: 10.1371/journal.pone.0221235:

1. Exposures: for every signature (process) and sample, the process
   is active with probability ``1 - pzero``. Active processes get a
   count drawn from a Poisson or a "fat" negative binomial whose mean
   is inflated by ``1 / (1 - pzero)``, so that on average a process
   contributes ``h * nmut`` mutations per sample.
2. Catalog: mutation counts per mutation type are Poisson with mean
   given by the product of the signature and exposure matrices.

Samples with too few mutations can be discarded, and ultra-mutated
samples can be diluted with :func:`dilution.dilute_ultra_mutated`.

"""

from collections.abc import Mapping
from dataclasses import dataclass
import logging

import numpy as np
import pandas as pd

from .constants import default_alpha
from .constants import default_distribution
from .constants import default_max_iter
from .constants import default_min_mut
from .constants import default_n_samples
from .constants import default_nmut
from .constants import default_pzero
from .constants import distributions
from .dilution import dilute_ultra_mutated
from .dispersed_counts import sample_fat_nbinom
from .load_signature_matrix import load_signature_matrix
from .locations import check_data_file
from .locations import location_cosmic_signatures
from .utils import make_rng


logger = logging.getLogger(__name__)


@dataclass(repr=False)
class SimulatedSpectra:
    """Output of :func:`simulate_spectra`.

    Attributes
    ----------
    catalog : pd.DataFrame
        Simulated mutation counts (mutation types × samples).
    signatures : pd.DataFrame
        Signature matrix restricted to the simulated processes, in
        the order of the process weights (mutation types ×
        signatures).
    exposures : pd.DataFrame
        Simulated exposure counts (signatures × samples). Columns
        match those of `catalog` unless the catalog was diluted.
    """
    catalog: pd.DataFrame
    signatures: pd.DataFrame
    exposures: pd.DataFrame

    @property
    def n_samples(self):
        """Number of samples in the catalog."""
        return self.catalog.shape[1]

    def __repr__(self):
        return (f"SimulatedSpectra(n_types={self.catalog.shape[0]}, "
                f"n_signatures={self.signatures.shape[1]}, "
                f"n_samples={self.n_samples})")


def _as_signature_matrix(W):
    if W is None:
        location = check_data_file(location_cosmic_signatures,
                                   "COSMIC SBS signature matrix")
        logger.info("No signature matrix given, loading %s", location)
        W = load_signature_matrix(location)

    W = pd.DataFrame(W)
    if W.columns.equals(pd.RangeIndex(W.shape[1])):
        raise ValueError("W must have column (signature) names")
    return W


def _as_numeric(W):
    try:
        return W.astype(float)
    except (TypeError, ValueError) as err:
        raise ValueError("W must be a numeric matrix") from err


def _as_process_weights(h):
    if isinstance(h, Mapping):
        h = pd.Series(h, dtype=float)
    elif isinstance(h, pd.DataFrame):
        if h.shape[0] != 1:
            raise ValueError(
                "h must be a single vector of weights, got a DataFrame "
                f"with shape {h.shape}")
        h = h.iloc[0]
    elif not isinstance(h, pd.Series):
        if np.ndim(h) != 1:
            raise ValueError(
                "h must be a one-dimensional vector of weights, got "
                f"{np.ndim(h)} dimensions")
        raise ValueError("h must have element names")

    if len(h) > 0 and h.index.equals(pd.RangeIndex(len(h))):
        raise ValueError("h must have element names")
    h = h.astype(float)
    return h[h > 0]


def align_signatures(W, h):
    """Restrict the signature matrix to the processes of `h`.

    Parameters
    ----------
    W : pd.DataFrame
        Signature matrix (mutation types × signatures).
    h : pd.Series
        Positive process weights indexed by signature name.

    Returns
    -------
    W_aligned : pd.DataFrame
        Columns of `W` named in `h`, in the order of `h`.
    h : pd.Series
        The weights, unchanged.

    Raises
    ------
    ValueError
        If the names of `h` are duplicated, are not all columns of
        `W`, or match more than one column of `W`.
    """
    names = h.index
    duplicated = names[names.duplicated()].unique().tolist()
    missing = [name for name in names if name not in W.columns]
    ambiguous = W.columns[W.columns.duplicated()
                          & W.columns.isin(names)].unique().tolist()

    if duplicated or missing or ambiguous:
        msg = "names of h do not match reference signature names"
        if duplicated:
            msg += f"; duplicated in h: {duplicated}"
        if missing:
            msg += f"; not in W: {missing}"
        if ambiguous:
            msg += f"; duplicated in W: {ambiguous}"
        raise ValueError(msg)

    return W.loc[:, list(names)], h


def generate_exposures(h, *, nmut, N, pzero, distribution, alpha, rng):
    """Draw a zero-inflated exposure matrix.

    Each process `k` is active in a sample with probability
    ``1 - pzero``; active samples get a count with mean
    ``h[k] * nmut / (1 - pzero)`` drawn from a Poisson
    (``distribution='pois'``) or from :func:`sample_fat_nbinom` with
    SD/mean ratio `alpha` (``distribution='nbinom'``).

    Returns
    -------
    pd.DataFrame
        Integer counts, processes × samples. Samples are labelled
        1..N.
    """
    scale = nmut / (1 - pzero) if pzero < 1 else np.inf
    lsk = h * scale

    H = np.zeros((len(h), N), dtype=np.int64)
    for k, (name, mu) in enumerate(lsk.items()):
        active = rng.binomial(n=1, p=1 - pzero, size=N).astype(bool)
        n_active = int(active.sum())
        if n_active == 0:
            continue
        logger.debug("%s active in %d of %d samples (mean %.2f)",
                     name, n_active, N, mu)
        if distribution == "pois":
            H[k, active] = rng.poisson(lam=mu, size=n_active)
        else:
            H[k, active] = sample_fat_nbinom(n_active, mu, alpha,
                                             random_state=rng)

    return pd.DataFrame(H, index=h.index,
                        columns=pd.RangeIndex(1, N + 1))


def filter_low_burden(H, min_mut):
    """Drop samples whose total exposure is below `min_mut`."""
    if min_mut <= 0:
        return H
    keep = H.sum(axis=0) >= min_mut
    if not keep.all():
        logger.info("Discarding %d of %d samples with fewer than %s "
                    "mutations", (~keep).sum(), len(keep), min_mut)
    return H.loc[:, keep]


def generate_catalog(W, H, rng):
    """Draw Poisson mutation counts with mean ``W @ H``.

    Returns
    -------
    pd.DataFrame
        Mutation types (rows of `W`) × samples (columns of `H`).
    """
    xmean = W.to_numpy() @ H.to_numpy()
    X = rng.poisson(lam=xmean)
    return pd.DataFrame(X, index=W.index, columns=H.columns)


def simulate_spectra(
        W,
        h,
        pzero: float = default_pzero,
        nmut: float = default_nmut,
        N: int = default_n_samples,
        *,
        dilute_ultra: bool = False,
        min_mut: float = default_min_mut,
        distribution: str = default_distribution,
        alpha: float = default_alpha,
        max_iter: int = default_max_iter,
        random_state=None,
        ) -> SimulatedSpectra:
    """Simulate mutational spectra with a zero-inflated model.

    Parameters
    ----------
    W : pd.DataFrame or None
        Signature matrix (mutation types × signatures) with named
        columns. If None, the COSMIC matrix at
        :data:`locations.location_cosmic_signatures` is loaded.
    h : pd.Series or mapping
        Average proportion of mutations in each process, indexed by
        signature name. Non-positive entries are dropped; the
        remaining names must be columns of `W`.
    pzero : float, default 0.3
        Probability that a process is inactive in a sample.
    nmut : float, default 100
        Mean number of mutations per sample.
    N : int, default 10
        Number of samples simulated (before filtering).
    dilute_ultra : bool, default False
        Dilute ultra-mutated samples of the catalog with
        :func:`dilution.dilute_ultra_mutated`.
    min_mut : float, default 1
        Samples whose total exposure is below this value are
        discarded. No filtering if 0.
    distribution : {'nbinom', 'pois'}, default 'nbinom'
        Distribution of the exposure counts of active processes.
    alpha : float, default 0.2
        Standard deviation to mean ratio of the negative binomial.
        Ignored for 'pois'.
    max_iter : int, default 100
        Maximum number of dilution rounds.
    random_state : None, int, or numpy.random.Generator
        See :func:`utils.make_rng`.

    Returns
    -------
    SimulatedSpectra
        Catalog, aligned signatures and exposures.

    Raises
    ------
    ValueError
        If `h` has no names or names not matching `W`, or any
        parameter is out of range.

    Examples
    --------
    >>> from sigmutsim.utils import random_signature_matrix
    >>> from sigmutsim.utils import random_process_weights
    >>> W = random_signature_matrix(5, random_state=135)
    >>> h = random_process_weights(W.columns, random_state=135)
    >>> sim = simulate_spectra(W, h, N=100, random_state=135)
    >>> sim.catalog.shape[0]
    96
    """
    if not 0 <= pzero <= 1:
        raise ValueError(f"Invalid pzero value: {pzero}")
    if distribution not in distributions:
        raise ValueError(
            f"Unknown distribution {distribution!r}; expected one of "
            f"{distributions}")
    if nmut <= 0:
        raise ValueError(f"nmut must be positive, got {nmut}")
    if N < 0:
        raise ValueError(f"N must be non-negative, got {N}")
    if min_mut < 0:
        raise ValueError(f"min_mut must be non-negative, got {min_mut}")

    W = _as_signature_matrix(W)
    h = _as_process_weights(h)
    if h.empty:
        raise ValueError("h has no positive entries")
    W, h = align_signatures(W, h)
    W = _as_numeric(W)

    logger.info(
        "Simulating %d samples from %d signatures (pzero=%s, nmut=%s, "
        "distribution=%s)...", N, len(h), pzero, nmut, distribution)
    rng = make_rng(random_state)

    H = generate_exposures(h, nmut=nmut, N=int(N), pzero=pzero,
                           distribution=distribution, alpha=alpha,
                           rng=rng)
    H = filter_low_burden(H, min_mut)

    X = generate_catalog(W, H, rng)
    if dilute_ultra:
        X = dilute_ultra_mutated(X, max_iter=max_iter)

    logger.info("... done.")
    return SimulatedSpectra(catalog=X, signatures=W, exposures=H)
