"""
Descriptive statistics written as small user-defined functions.

This module provides functions for:
- Computing the sample variance and standard deviation
- Computing a symmetrically trimmed mean
- Converting a trimming proportion to a count of values per end

Every function accepts any one-dimensional array_like sample (list, tuple,
numpy array, polars Series) and converts it to a float array on entry.

Examples
--------
>>> round(sample_variance([1, 2, 2, 4, 5]), 10)
2.7
>>> trimmed_mean([1, 2, 2, 4, 50], trim=1)
2.6666666666666665
"""

import logging
import math

import numpy as np

from . import config

logger = logging.getLogger(__name__)


def as_sample(x):
    """
    Convert an array_like sample to a one-dimensional float array.

    Parameters
    ----------
    x : array_like
        Sample values

    Returns
    -------
    numpy.ndarray
        One-dimensional float array

    Raises
    ------
    ValueError
        If the input has more than one dimension
    """
    if hasattr(x, "to_numpy"):
        x = x.to_numpy()
    sample = np.asarray(x, dtype=float)
    if sample.ndim == 0:
        sample = sample.reshape(1)
    if sample.ndim != 1:
        raise ValueError(
            f"Expected a one-dimensional sample, got an array of shape {sample.shape}"
        )
    return sample


def sample_variance(x) -> float:
    """
    Calculate the sample variance.

    Parameters
    ----------
    x : array_like
        Sample values

    Returns
    -------
    float
        Sum of squared deviations from the mean divided by ``n - 1``

    Raises
    ------
    ValueError
        If the sample has fewer than two values
    """
    x = as_sample(x)
    n = x.size
    if n < 2:
        raise ValueError(f"Sample variance needs at least 2 values, got {n}")

    deviations = x - x.mean()
    return float(np.sum(deviations**2) / (n - 1))


def sample_sd(x) -> float:
    """Square root of ``sample_variance(x)``."""
    return math.sqrt(sample_variance(x))


def trim_fraction_to_count(n, fraction):
    """
    Convert a trimming proportion to the number of values dropped per end.

    Parameters
    ----------
    n : int
        Sample size
    fraction : float
        Proportion of the sample to drop from each end, in ``[0, 0.5)``

    Returns
    -------
    int
        ``floor(n * fraction)``

    Raises
    ------
    ValueError
        If ``fraction`` is outside ``[0, 0.5)``
    """
    if not 0.0 <= fraction < 0.5:
        raise ValueError(f"Trim fraction must lie in [0, 0.5), got {fraction}")
    return int(math.floor(n * fraction))


def trimmed_mean(x, trim=None) -> float:
    """
    Calculate the mean after discarding ``trim`` values from each end.

    Parameters
    ----------
    x : array_like
        Sample values
    trim : int, optional
        Number of values removed from each end of the sorted sample. Defaults
        to the configured ``trimmed_mean.trim`` (1 unless overridden).

    Returns
    -------
    float
        Mean of the remaining ``n - 2 * trim`` values

    Raises
    ------
    ValueError
        If ``trim`` is not a whole number, is negative, or leaves no values

    Notes
    -----
    The trimming is symmetric: the same number of values is dropped from the
    low and the high end. ``trim=0`` gives the ordinary mean.
    """
    if trim is None:
        trim = config.get_config()["trimmed_mean"]["trim"]
    if trim != int(trim):
        raise ValueError(
            f"Trim must be a whole number of values per end, got {trim}; "
            "use trim_fraction_to_count to convert a proportion"
        )
    trim = int(trim)

    x = np.sort(as_sample(x))
    n = x.size
    if trim < 0:
        raise ValueError(f"Trim count must be non-negative, got {trim}")
    if 2 * trim >= n:
        raise ValueError(
            f"Cannot trim {trim} values from each end of a sample of size {n}"
        )

    logger.debug("Trimming %d values from each end of %d", trim, n)
    return float(x[trim : n - trim].mean())
