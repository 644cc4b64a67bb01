"""
Plotting helpers that forward variadic arguments to an inner call.

``plot_xy`` passes its extra positional and keyword arguments straight to
``matplotlib.axes.Axes.plot``. ``plot_function`` passes them to the function
being plotted instead, and takes styling through ``plot_kwargs``.

Examples
--------
>>> from stat_functions.densities import normal_density
>>> ax = plot_function(normal_density, -4, 4, mean=1.0, sd=0.5,
...                    plot_kwargs={"color": "red"})
"""

import logging

import matplotlib.pyplot as plt
import numpy as np

from . import config

logger = logging.getLogger(__name__)


def _styled(kwargs):
    # Caller keywords override the configured style
    style = dict(config.get_config()["plot"]["style"])
    style.update(kwargs)
    return style


def plot_xy(x, y, *args, ax=None, **kwargs):
    """
    Draw ``y`` against ``x`` with configured defaults.

    Parameters
    ----------
    x, y : array_like
        Coordinates
    *args
        Forwarded to ``Axes.plot`` after ``x`` and ``y`` (e.g. a format string)
    ax : matplotlib.axes.Axes, optional
        Axes to draw on; a new figure is created if omitted
    **kwargs
        Forwarded to ``Axes.plot``, overriding the configured style

    Returns
    -------
    matplotlib.axes.Axes
        The axes that were drawn on
    """
    if ax is None:
        _, ax = plt.subplots()

    style = _styled(kwargs)
    if args and "color" not in kwargs:
        # A format string may carry its own colour
        style.pop("color", None)

    logger.debug("plot_xy forwarding args=%s kwargs=%s", args, sorted(style))
    ax.plot(x, y, *args, **style)
    return ax


def plot_function(
    func, lower, upper, *args, n_points=None, ax=None, plot_kwargs=None, **kwargs
):
    """
    Plot ``func`` over ``[lower, upper]``.

    Parameters
    ----------
    func : callable
        Vectorised function called as ``func(grid, *args, **kwargs)``
    lower, upper : float
        Plotting range
    *args, **kwargs
        Forwarded to ``func``
    n_points : int, optional
        Grid size; defaults to the configured ``plot.n_points``
    ax : matplotlib.axes.Axes, optional
        Axes to draw on; a new figure is created if omitted
    plot_kwargs : dict, optional
        Keyword arguments for ``Axes.plot``

    Returns
    -------
    matplotlib.axes.Axes
        The axes that were drawn on

    Raises
    ------
    ValueError
        If ``lower >= upper``
    """
    if not lower < upper:
        raise ValueError(f"Expected lower < upper, got lower={lower}, upper={upper}")
    if n_points is None:
        n_points = config.get_config()["plot"]["n_points"]

    grid = np.linspace(lower, upper, int(n_points))
    values = func(grid, *args, **kwargs)
    return plot_xy(grid, values, ax=ax, **(plot_kwargs or {}))
