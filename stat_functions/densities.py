"""
Density functions with default parameter values.

``normal_density`` shows defaults that callers override by keyword;
``uniform_density`` is the chapter exercise, with support on ``[a, b]``.

Examples
--------
>>> float(normal_density(0.0))
0.3989422804014327
>>> uniform_density([0.5, 2.0], a=0, b=1).tolist()
[1.0, 0.0]
"""

import numpy as np


def _evaluate_at(x, values):
    # Scalars in, scalar out
    if np.ndim(x) == 0:
        return float(values)
    return values


def normal_density(x, mean=0.0, sd=1.0):
    """
    Evaluate the normal probability density.

    Parameters
    ----------
    x : float or array_like
        Points at which to evaluate the density
    mean : float, optional
        Mean of the distribution, by default 0.0
    sd : float, optional
        Standard deviation, by default 1.0

    Returns
    -------
    float or numpy.ndarray
        ``exp(-(x - mean)^2 / (2 sd^2)) / (sd * sqrt(2 pi))``

    Raises
    ------
    ValueError
        If ``sd`` is not positive
    """
    if not sd > 0:
        raise ValueError(f"Standard deviation must be positive, got {sd}")

    z = (np.asarray(x, dtype=float) - mean) / sd
    values = np.exp(-0.5 * z**2) / (sd * np.sqrt(2 * np.pi))
    return _evaluate_at(x, values)


def uniform_density(x, a=0.0, b=1.0):
    """
    Evaluate the uniform probability density on ``[a, b]``.

    Parameters
    ----------
    x : float or array_like
        Points at which to evaluate the density
    a : float, optional
        Lower bound of the support, by default 0.0
    b : float, optional
        Upper bound of the support, by default 1.0

    Returns
    -------
    float or numpy.ndarray
        ``1 / (b - a)`` for ``a <= x <= b`` and 0 elsewhere

    Raises
    ------
    ValueError
        If ``a >= b``
    """
    if not a < b:
        raise ValueError(f"Lower bound must be below upper bound, got a={a}, b={b}")

    x_arr = np.asarray(x, dtype=float)
    values = np.where((x_arr >= a) & (x_arr <= b), 1.0 / (b - a), 0.0)
    return _evaluate_at(x, values)
