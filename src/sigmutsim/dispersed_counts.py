"""Exposure counts with tunable over-dispersion.

Exposure counts are drawn from a "fat" negative binomial: a negative
binomial whose `size` is chosen so that the standard deviation to mean
ratio equals a requested `alpha`. Since a negative binomial with mean
`mu` cannot be less dispersed than a Poisson with the same mean, whose
ratio is ``1/sqrt(mu)``, requests below that floor fall back to
Poisson draws.

"""

import logging

import numpy as np

from .utils import make_rng


logger = logging.getLogger(__name__)


def poisson_dispersion(mu):
    """Return the standard deviation to mean ratio of Poisson(mu)."""
    if mu <= 0:
        raise ValueError(f"mu must be positive, got {mu}")
    return 1 / np.sqrt(mu)


def sample_fat_nbinom(n, mu, alpha, *, random_state=None):
    """Draw counts with mean `mu` and SD/mean ratio `alpha`.

    With mean `mu` and size `r`, the negative binomial variance is
    ``mu + mu**2 / r``, hence its SD/mean ratio is
    ``sqrt(1/mu + 1/r)``. Solving for `r` gives
    ``r = 1 / (alpha**2 - 1/mu)``. When `alpha` is below the Poisson
    ratio ``1/sqrt(mu)`` no such `r` exists and Poisson draws with
    mean `mu` are returned instead.

    Parameters
    ----------
    n : int
        Number of observations.
    mu : float
        Mean of the distribution. Must be positive.
    alpha : float
        Target standard deviation to mean ratio.
    random_state : None, int, or numpy.random.Generator
        See :func:`utils.make_rng`.

    Returns
    -------
    numpy.ndarray
        `n` non-negative integer draws.

    Raises
    ------
    ValueError
        If `mu` is not positive or `n` is negative.

    Examples
    --------
    >>> x = sample_fat_nbinom(1000, mu=100, alpha=0.5, random_state=1)
    >>> x.shape
    (1000,)
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    floor = poisson_dispersion(mu)
    rng = make_rng(random_state)

    excess = alpha**2 - 1 / mu
    if alpha < floor or excess <= 0:
        logger.debug(
            "alpha=%s below Poisson ratio %.4f for mu=%s; "
            "drawing Poisson counts", alpha, floor, mu)
        return rng.poisson(lam=mu, size=n)

    size = 1 / excess
    # Gamma-Poisson mixture keeps the mean exact when size is huge, where
    # the success probability size / (size + mu) rounds to 1
    return rng.poisson(lam=rng.gamma(shape=size, scale=mu / size, size=n))
