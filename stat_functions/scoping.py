"""
Lexical scoping: environments that resolve names outward, and checks on
which enclosing scope a function's free names come from.

A name used inside a function that is neither a parameter nor a local is
looked up in the scope where the function was *defined*, then in each scope
enclosing that one. Two things can go wrong. If no scope defines the name, the
call fails with ``NameError``. If some outer scope happens to define it, the
call quietly uses that value. ``check_free_names`` catches the first case
before the function is called and ``leaks_globals`` reports the second.

Examples
--------
>>> outer = Environment({"n": 10})
>>> inner = outer.extend(x=2)
>>> inner.lookup("n")
10
>>> inner.where("n") is outer
True
"""

import builtins
import dis
import inspect
import logging
from collections import ChainMap

from .compute import as_sample

logger = logging.getLogger(__name__)


class Environment:
    """
    A frame of name bindings with a link to its enclosing frame.

    Parameters
    ----------
    bindings : dict, optional
        Initial bindings of this frame
    parent : Environment, optional
        Enclosing environment; ``None`` for the outermost one
    """

    def __init__(self, bindings=None, parent=None):
        self.bindings = dict(bindings or {})
        self.parent = parent

    def __repr__(self):
        return f"Environment({sorted(self.bindings)}, depth={self.depth})"

    def __contains__(self, name):
        return any(name in env.bindings for env in self.chain())

    @property
    def depth(self):
        """Number of environments enclosing this one."""
        return sum(1 for _ in self.chain()) - 1

    def chain(self):
        """Yield this environment and then each enclosing one, innermost first."""
        env = self
        while env is not None:
            yield env
            env = env.parent

    def define(self, name: str, value):
        """Bind ``name`` in this environment, shadowing any outer binding."""
        self.bindings[name] = value
        return value

    def where(self, name: str):
        """
        Find the environment that binds ``name``.

        Raises
        ------
        NameError
            If neither this environment nor any enclosing one binds ``name``
        """
        for env in self.chain():
            if name in env.bindings:
                return env
        raise NameError(
            f"name {name!r} is not defined in this environment or any enclosing one"
        )

    def lookup(self, name: str):
        """Value of ``name``, searching outward from this environment."""
        return self.where(name).bindings[name]

    def assign(self, name: str, value):
        """
        Rebind ``name`` in the environment that already defines it.

        Unlike ``define``, this never creates a new binding: it updates the
        nearest enclosing one, as ``nonlocal`` does.

        Raises
        ------
        NameError
            If ``name`` is not bound anywhere in the chain
        """
        self.where(name).bindings[name] = value
        return value

    def extend(self, **bindings):
        """Return a child environment enclosed by this one."""
        return Environment(bindings, parent=self)

    def names(self):
        """Every name visible from this environment, innermost binding winning."""
        return dict(ChainMap(*(env.bindings for env in self.chain())))


def make_scaler(factor):
    """
    Return a function that multiplies a sample by ``factor``.

    ``factor`` is resolved from the scope in which the returned function was
    defined, so a caller's own variable named ``factor`` has no effect.

    Examples
    --------
    >>> double = make_scaler(2)
    >>> factor = 100
    >>> double([1, 2]).tolist()
    [2.0, 4.0]
    """

    def scale(x):
        return factor * as_sample(x)

    return scale


def _global_names(code):
    names = set()
    for instruction in dis.get_instructions(code):
        if instruction.opname in ("LOAD_GLOBAL", "LOAD_NAME"):
            names.add(instruction.argval)
    # Comprehensions, lambdas and inner functions compile to nested code objects
    for const in code.co_consts:
        if inspect.iscode(const):
            names |= _global_names(const)
    return names


def resolve_free_names(func):
    """
    Classify each name ``func`` uses but does not define itself.

    Parameters
    ----------
    func : callable
        A Python function

    Returns
    -------
    dict
        Maps each free name to ``"nonlocal"`` (an enclosing function's
        variable), ``"global"`` (a module-level name), ``"builtin"``, or
        ``"unbound"`` (nothing defines it, so calling ``func`` would raise
        ``NameError`` when that line runs)

    Raises
    ------
    TypeError
        If ``func`` is not a plain Python function (a builtin, a
        ``functools.partial`` or a callable instance has no code to inspect)
    """
    func = inspect.unwrap(func)
    if not inspect.isfunction(func):
        raise TypeError(
            f"resolve_free_names() needs a Python function, got {type(func).__name__!r}"
        )

    resolution = {}
    for name, cell in zip(func.__code__.co_freevars, func.__closure__ or ()):
        try:
            cell.cell_contents
        except ValueError:
            # The enclosing function never assigned it
            resolution[name] = "unbound"
        else:
            resolution[name] = "nonlocal"

    for name in _global_names(func.__code__):
        if name in resolution:
            continue
        if name in func.__globals__:
            resolution[name] = "global"
        elif hasattr(builtins, name):
            resolution[name] = "builtin"
        else:
            resolution[name] = "unbound"

    return dict(sorted(resolution.items()))


def check_free_names(func, allowed=()):
    """
    Raise if ``func`` refers to a name that no enclosing scope defines.

    Parameters
    ----------
    func : callable
        A Python function
    allowed : iterable of str, optional
        Unbound names to tolerate, e.g. globals defined later at runtime

    Returns
    -------
    dict
        The resolution from ``resolve_free_names``

    Raises
    ------
    NameError
        Listing the unbound names
    """
    resolution = resolve_free_names(func)
    allowed = set(allowed)
    unbound = [
        name
        for name, kind in resolution.items()
        if kind == "unbound" and name not in allowed
    ]
    if unbound:
        raise NameError(
            f"{func.__qualname__} refers to names that no enclosing scope defines: "
            f"{unbound}"
        )
    return resolution


def leaks_globals(func):
    """
    Names that ``func`` reads as plain data from module globals.

    Functions, classes and modules are expected to come from the module
    scope and are not reported. What remains are values the function picks
    up silently instead of taking them as parameters.

    Returns
    -------
    list of str
        Sorted names of the leaked globals
    """
    func = inspect.unwrap(func)
    leaked = []
    for name, kind in resolve_free_names(func).items():
        if kind != "global":
            continue
        value = func.__globals__[name]
        if callable(value) or inspect.ismodule(value):
            continue
        leaked.append(name)

    if leaked:
        logger.debug("%s reads globals %s", func.__qualname__, leaked)
    return leaked
