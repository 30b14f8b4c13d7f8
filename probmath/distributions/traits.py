"""
Deciding which terms of a log density to compute in proportional (propto) mode.

With ``propto=True`` a log density only needs to be correct up to an additive constant, so any term that
depends only on constant data can be dropped. Plain numbers and plain numeric numpy arrays count as constant
data. Every other type, such as the scalar type of an automatic differentiation package, or a subclass of float
or of ndarray used to mark a parameter, is a varying argument.
"""
import numpy as np

_CONSTANT_TYPES = (bool, int, float)
_CONSTANT_KINDS = 'biuf'


def is_constant(x):
    """
    Whether x is constant data rather than a varying argument.

    Parameters
    ----------
    x : object
        A scalar, an array, or a list or tuple of those

    Returns
    -------
    bool
        True for plain ints, floats and bools, numpy numeric scalars, plain numpy arrays of numeric dtype, and
        lists and tuples containing only those
    """
    if type(x) in _CONSTANT_TYPES:
        return True
    if isinstance(x, np.generic):
        return x.dtype.kind in _CONSTANT_KINDS
    if type(x) is np.ndarray:
        return x.dtype.kind in _CONSTANT_KINDS
    if isinstance(x, (list, tuple)):
        return all(is_constant(v) for v in x)
    return False


def is_varying(x):
    return not is_constant(x)


def include_summand(propto, *args):
    """
    Whether a term depending on args belongs in the log density.

    Every term is included when propto is False. In proportional mode a term is included only if at least one
    of the arguments it depends on is varying; a term that depends on no arguments is never included.
    """
    if not propto:
        return True
    return any(is_varying(x) for x in args)
