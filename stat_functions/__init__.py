"""
stat-functions

Worked statistical examples written as reusable functions: sample variance,
a trimmed mean, a one-sample t-test, density functions with default
arguments, plotting helpers that forward variadic arguments, generic
functions overloaded by argument type, and tools for inspecting lexical
scope.
"""

from beartype.claw import beartype_this_package

# Must run before the submodule imports below for them to be type-checked
beartype_this_package()

from .compute import sample_sd, sample_variance, trim_fraction_to_count, trimmed_mean
from .densities import normal_density, uniform_density
from .generics import describe, method_table, plot, register_method, summarize
from .plotting import plot_function, plot_xy
from .scoping import (
    Environment,
    check_free_names,
    leaks_globals,
    make_scaler,
    resolve_free_names,
)
from .t_test import TTestResult, one_sample_t_test, t_statistic

__version__ = "1.0.0"

__all__ = [
    "Environment",
    "TTestResult",
    "check_free_names",
    "describe",
    "leaks_globals",
    "make_scaler",
    "method_table",
    "normal_density",
    "one_sample_t_test",
    "plot",
    "plot_function",
    "plot_xy",
    "register_method",
    "resolve_free_names",
    "sample_sd",
    "sample_variance",
    "summarize",
    "t_statistic",
    "trim_fraction_to_count",
    "trimmed_mean",
    "uniform_density",
]
