"""
Read-only numerical constants, with zero-argument accessors.
"""
import numpy as np

PI = np.pi
E = np.e
SQRT_2 = np.sqrt(2.0)
LOG_2 = np.log(2.0)
LOG_10 = np.log(10.0)
INFTY = np.inf
NEGATIVE_INFTY = -np.inf
NOT_A_NUMBER = np.nan
EPSILON = np.finfo(np.float64).eps
NEGATIVE_EPSILON = -EPSILON

NEG_LOG_TWO_OVER_TWO = -LOG_2 / 2.0
LOG_PI = np.log(PI)


def pi():
    return PI


def e():
    """Base of the natural logarithm."""
    return E


def sqrt2():
    return SQRT_2


def log2():
    """Natural logarithm of two."""
    return LOG_2


def log10():
    """Natural logarithm of ten."""
    return LOG_10


def positive_infinity():
    return INFTY


def negative_infinity():
    return NEGATIVE_INFTY


def not_a_number():
    """Quiet NaN."""
    return NOT_A_NUMBER


def epsilon():
    """Machine epsilon, the gap between 1.0 and the next representable double."""
    return EPSILON


def negative_epsilon():
    return NEGATIVE_EPSILON
