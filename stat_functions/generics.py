"""
Generic functions overloaded by the runtime type of their first argument.

Each generic is a ``functools.singledispatch`` function with one method per
supported type:

- ``summarize`` : numeric summary of a sample, a data frame, or a test result
- ``describe``  : one-line human-readable description
- ``plot``      : draw the object with the helpers in ``plotting``

``method_table`` lists which (generic, type) pairs are registered, and
``register_method`` adds new ones by generic name.

Examples
--------
>>> import numpy as np
>>> summarize(np.array([1.0, 2.0, 2.0, 4.0, 5.0])).n
5
>>> describe([1, 2, 3])
'numeric sample of 3 values: mean=2, sd=1'
"""

import logging
from dataclasses import dataclass, field
from functools import singledispatch

import numpy as np
import polars as po
import polars.selectors as cs

from . import plotting
from .compute import as_sample, sample_sd, sample_variance
from .t_test import TTestResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Summary:
    """
    Numeric summary returned by ``summarize``.

    Undefined statistics (the mean of an empty sample, the variance of a
    single value) are ``nan``.
    """

    kind: str
    n: int
    mean: float
    variance: float
    minimum: float
    maximum: float
    extra: dict = field(default_factory=dict)


def _numeric_summary(values, kind, extra=None):
    x = as_sample(values)
    n = int(x.size)
    return Summary(
        kind=kind,
        n=n,
        mean=float(x.mean()) if n else float("nan"),
        variance=sample_variance(x) if n >= 2 else float("nan"),
        minimum=float(x.min()) if n else float("nan"),
        maximum=float(x.max()) if n else float("nan"),
        extra=extra or {},
    )


def _describe_values(values, label):
    x = as_sample(values)
    if x.size == 0:
        return f"{label} with no values"
    if x.size == 1:
        return f"{label} of 1 value: {x[0]:g}"
    return f"{label} of {x.size} values: mean={x.mean():g}, sd={sample_sd(x):g}"


def _index_for(values):
    return np.arange(1, len(values) + 1)


# summarize


@singledispatch
def summarize(obj):
    """
    Summarize ``obj`` using the method registered for its type.

    Raises
    ------
    TypeError
        If no method is registered for ``type(obj)``
    """
    raise TypeError(f"summarize() has no method for type {type(obj).__name__!r}")


@summarize.register(np.ndarray)
def _summarize_array(obj):
    return _numeric_summary(obj, "ndarray")


@summarize.register(list)
@summarize.register(tuple)
def _summarize_sequence(obj):
    return _numeric_summary(obj, type(obj).__name__)


@summarize.register(po.Series)
def _summarize_series(obj):
    return _numeric_summary(
        obj.drop_nulls(),
        "Series",
        extra={"name": obj.name, "null_count": obj.null_count()},
    )


@summarize.register(po.DataFrame)
def _summarize_frame(obj):
    numeric = obj.select(cs.numeric())
    return {name: summarize(numeric[name]) for name in numeric.columns}


@summarize.register(TTestResult)
def _summarize_t_test(obj):
    return {
        "statistic": obj.statistic,
        "df": obj.df,
        "p_value": obj.p_value,
        "estimate": obj.estimate,
        "mu": obj.mu,
        "alternative": obj.alternative,
        "reject_at_5_percent": bool(obj.p_value < 0.05),
    }


# describe


@singledispatch
def describe(obj):
    """Describe ``obj`` in one line; falls back to its ``repr``."""
    return f"{type(obj).__name__}: {obj!r}"


@describe.register(np.ndarray)
@describe.register(list)
@describe.register(tuple)
def _describe_sample(obj):
    return _describe_values(obj, "numeric sample")


@describe.register(po.Series)
def _describe_series(obj):
    return _describe_values(obj.drop_nulls(), f"Series {obj.name!r}")


@describe.register(po.DataFrame)
def _describe_frame(obj):
    n_numeric = len(obj.select(cs.numeric()).columns)
    return (
        f"DataFrame with {obj.height} rows and {obj.width} columns "
        f"({n_numeric} numeric)"
    )


@describe.register(TTestResult)
def _describe_t_test(obj):
    return (
        f"t = {obj.statistic:.4g}, df = {obj.df}, p-value = {obj.p_value:.4g} "
        f"({obj.alternative}, mu = {obj.mu:g})"
    )


# plot


@singledispatch
def plot(obj, **kwargs):
    """
    Plot ``obj``; keyword arguments are forwarded to the plotting helper.

    Raises
    ------
    TypeError
        If no method is registered for ``type(obj)``
    """
    raise TypeError(f"plot() has no method for type {type(obj).__name__!r}")


@plot.register(np.ndarray)
@plot.register(list)
@plot.register(tuple)
def _plot_sample(obj, **kwargs):
    x = as_sample(obj)
    return plotting.plot_xy(_index_for(x), x, **kwargs)


@plot.register(po.Series)
def _plot_series(obj, **kwargs):
    kwargs.setdefault("label", obj.name)
    x = as_sample(obj)
    return plotting.plot_xy(_index_for(x), x, **kwargs)


@plot.register(po.DataFrame)
def _plot_frame(obj, ax=None, **kwargs):
    numeric = obj.select(cs.numeric())
    if not numeric.columns:
        raise TypeError("plot() needs a DataFrame with at least one numeric column")

    kwargs.pop("label", None)
    # One colour per column unless the caller fixes one
    if "color" not in kwargs:
        kwargs["color"] = None
    for name in numeric.columns:
        x = as_sample(numeric[name])
        ax = plotting.plot_xy(_index_for(x), x, ax=ax, label=name, **kwargs)
    ax.legend()
    return ax


GENERICS = {
    "summarize": summarize,
    "describe": describe,
    "plot": plot,
}


def register_method(generic, cls):
    """
    Decorator registering a method for ``cls`` on the generic named ``generic``.

    Parameters
    ----------
    generic : str
        One of the keys of ``GENERICS``
    cls : type
        Type the method handles

    Raises
    ------
    KeyError
        If ``generic`` is not a known generic
    """
    if generic not in GENERICS:
        raise KeyError(
            f"Unknown generic {generic!r}. Available generics: {sorted(GENERICS)}"
        )

    def decorator(func):
        logger.debug("Registering %s.%s", generic, cls.__name__)
        GENERICS[generic].register(cls, func)
        return func

    return decorator


def method_table() -> po.DataFrame:
    """
    List the registered methods of every generic.

    Returns
    -------
    polars.DataFrame
        Columns ``generic`` and ``type``, one row per registered pair. The
        fallback method is listed under type ``object``.
    """
    rows = {"generic": [], "type": []}
    for name, generic in GENERICS.items():
        type_names = sorted(cls.__name__ for cls in generic.registry)
        rows["generic"].extend([name] * len(type_names))
        rows["type"].extend(type_names)
    return po.DataFrame(rows)
