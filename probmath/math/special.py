"""
Scalar special functions, written to stay accurate near singularities and at extreme arguments.

Functions here work with any scalar type numpy's elementary functions accept, and raise directly on a
domain violation; they have no sentinel protocol.
"""
import numbers
import logging
import numpy as np
from scipy.special import gammaln, erf, betainc

from probmath.constants import LOG_2, LOG_PI, SQRT_2, NEGATIVE_INFTY, INFTY
from probmath.errors import DomainError, SizeMismatchError, EmptyInputError

logger = logging.getLogger(__name__)

BINOMIAL_COEFFICIENT_CUTOFF = 1000
LOG_PI_OVER_FOUR = LOG_PI / 4.0
INV_SQRT_TWO = 1.0 / SQRT_2


# C99

def exp2(y):
    """
    Exponent base 2 of the argument, ``exp2(y) = 2**y``.
    """
    return np.power(2.0, y)


def log2(a):
    """
    Base 2 logarithm of the argument, ``log2(a) = log(a) / log(2)``.
    """
    return np.log(a) / LOG_2


def fdim(a, b):
    """
    The positive difference function.

    Returns ``a - b`` when ``a > b`` and the literal 0.0 otherwise. Note that C99 describes the result as
    ``max(a - b, 0)``; the two agree except for NaN arguments, where this function returns 0.0.
    """
    return (a - b) if a > b else 0.0


def fma(a, b, c):
    """
    Multiply-add, ``a * b + c``. No fused rounding is performed.
    """
    return (a * b) + c


# OTHER BASIC FUNCTIONS

def int_step(y):
    """
    The integer step function: 1 if y is strictly greater than 0, and 0 otherwise.
    """
    return 1 if y > 0 else 0


def step(y):
    """
    The Heaviside step function: 0 if y is strictly less than 0, and 1 otherwise (including at 0).
    """
    return 0 if y < 0.0 else 1


def square(x):
    return x * x


def if_else(c, y_true, y_false):
    """Functional form of the conditional expression ``y_true if c else y_false``."""
    return y_true if c else y_false


def as_bool(x):
    """
    Integer with the same truth value as x; integers are returned unchanged, anything else maps to 1 if it is
    unequal to zero and 0 otherwise.
    """
    if isinstance(x, numbers.Integral):
        return int(x)
    return int(x != 0.0)


def value_of(x):
    """
    Return x as a plain float. Plain floats are returned as they are.
    """
    if type(x) is float:
        return x
    return float(x)


# PROBABILITY-RELATED FUNCTIONS

def lbeta(a, b):
    r"""
    Log of the beta function,

    .. math::

        \log B(a, b) = \log \Gamma(a) + \log \Gamma(b) - \log \Gamma(a + b)
    """
    return gammaln(a) + gammaln(b) - gammaln(a + b)


def binomial_coefficient_log(N, n):
    r"""
    Log of the binomial coefficient "N choose n", generalized to real arguments through the gamma function.

    .. math::

        \log {N \choose n} = \log \Gamma(N+1) - \log \Gamma(n+1) - \log \Gamma(N-n+1)

    When both N and N - n are at least BINOMIAL_COEFFICIENT_CUTOFF, a Stirling-type expansion of the first and
    last terms is used instead, which avoids losing precision to the cancellation of two very large log-gamma
    values.

    Parameters
    ----------
    N : float
        Total number of objects, N >= 0
    n : float
        Number of objects chosen, 0 <= n <= N

    Returns
    -------
    float
        log (N choose n)
    """
    if N < BINOMIAL_COEFFICIENT_CUTOFF or N - n < BINOMIAL_COEFFICIENT_CUTOFF:
        return gammaln(N + 1.0) - gammaln(n + 1.0) - gammaln(N - n + 1.0)

    logger.debug("binomial_coefficient_log(%s, %s): using the asymptotic expansion", N, n)
    return (n * np.log(N - n) + (N + 0.5) * np.log(N / (N - n))
            + 1.0 / (12.0 * N) - n - 1.0 / (12.0 * (N - n)) - gammaln(n + 1.0))


def lmgamma(k, x):
    r"""
    Log of the multivariate gamma function of dimension k,

    .. math::

        \log \Gamma_k(x) = \frac{k(k-1)}{4} \log \pi + \sum_{j=1}^k \log \Gamma\left(x + \frac{1-j}{2}\right)

    Parameters
    ----------
    k : int
        Number of dimensions
    x : float
        Function argument

    Returns
    -------
    float
        The natural log of the multivariate gamma function
    """
    result = k * (k - 1) * LOG_PI_OVER_FOUR
    for j in range(1, k + 1):
        result += gammaln(x + (1.0 - j) / 2.0)
    return result


def inv_logit(a):
    r"""
    The inverse logit (logistic) function, :math:`1 / (1 + \exp(-a))`. Inverse of logit.
    """
    with np.errstate(over='ignore'):
        return 1.0 / (1.0 + np.exp(-a))


def logit(a):
    r"""
    The log odds of a treated as a probability, :math:`\log(a / (1 - a))`. Inverse of inv_logit.
    """
    with np.errstate(divide='ignore'):
        return np.log(np.divide(a, 1.0 - a))


def Phi(x):
    """
    The standard normal cumulative distribution function.

    Parameters
    ----------
    x : float
        Argument

    Returns
    -------
    float
        Probability that a standard normal variate is less than or equal to x
    """
    return 0.5 * (1.0 + erf(INV_SQRT_TWO * x))


def Phi_approx(x):
    """
    Logistic approximation to the standard normal CDF, ``inv_logit(0.07056 x^3 + 1.5976 x)``.

    Cheaper than Phi, and less accurate (absolute error below 1.4e-4). See
    http://www.jiem.org/index.php/jiem/article/download/60/27
    """
    return inv_logit(0.07056 * np.power(x, 3.0) + 1.5976 * x)


def inv_cloglog(x):
    """
    The inverse complementary log-log function, ``exp(-exp(x))``.
    """
    return np.exp(-np.exp(x))


def binary_log_loss(y, y_hat):
    """
    Log loss of the prediction y_hat for the binary outcome y.

    Parameters
    ----------
    y : int
        The reference value, 0 or 1
    y_hat : float
        The predicted probability that y is 1, in [0, 1]

    Returns
    -------
    float
        -log(y_hat) if y is 1, and -log(1 - y_hat) if y is 0
    """
    if y not in (0, 1):
        raise DomainError("binary_log_loss: y must be 0 or 1, but is {}".format(y))
    with np.errstate(divide='ignore'):
        return -np.log(y_hat if y == 1 else (1.0 - y_hat))


def _maximum(x):
    if len(x) == 0:
        raise EmptyInputError("x must have at least one element")
    max_x = x[0]
    for i in range(1, len(x)):
        if x[i] > max_x:
            max_x = x[i]
    return max_x


def softmax(x, out=None):
    r"""
    Map a vector of unbounded values onto a simplex,

    .. math::

        \mathrm{softmax}(x)_i = \frac{\exp(x_i)}{\sum_k \exp(x_k)}

    The maximum element is subtracted before exponentiating, so no intermediate overflows.
    inverse_softmax inverts this function up to an additive constant.

    Parameters
    ----------
    x : array_like
        Vector of unbounded values
    out : ndarray, optional
        Vector to write the simplex into. Must have the same length as x.

    Returns
    -------
    ndarray
        The simplex, which is `out` if it was given

    Raises
    ------
    SizeMismatchError
        If `out` is given and its length differs from that of x
    EmptyInputError
        If x has no elements
    """
    x = np.asarray(x)
    if out is not None and len(out) != len(x):
        raise SizeMismatchError("x.size() != simplex.size()")

    max_x = _maximum(x)
    simplex = np.exp(x - max_x)
    simplex = simplex / np.sum(simplex)

    if out is None:
        return simplex
    out[:] = simplex
    return out


def inverse_softmax(simplex, out=None):
    """
    Elementwise natural log of a simplex; an inverse of softmax up to an additive constant.

    Values of 0.0 map to negative infinity and values of 1.0 map to 0.0. There is no check that the input
    is a valid simplex.

    Parameters
    ----------
    simplex : array_like
        The simplex
    out : ndarray, optional
        Vector to write the result into. Must have the same length as simplex.

    Returns
    -------
    ndarray
        The unbounded values, which is `out` if it was given
    """
    simplex = np.asarray(simplex)
    if out is not None and len(out) != len(simplex):
        raise SizeMismatchError("simplex.size() != y.size()")

    with np.errstate(divide='ignore'):
        y = np.log(simplex)

    if out is None:
        return y
    out[:] = y
    return out


def log1p(x):
    """
    Natural log of one plus x.

    Close to zero, where ``1 + x`` would lose the low-order digits of x, a Taylor expansion is used
    instead: second order for 1e-16 < abs(x) <= 1e-9, and first order (x itself) below that.

    Raises
    ------
    DomainError
        If x is less than -1
    """
    if x < -1.0:
        raise DomainError("x can not be less than -1, but is {}".format(x))

    if x > 1e-9 or x < -1e-9:
        with np.errstate(divide='ignore'):
            return np.log(1.0 + x)
    elif x > 1e-16 or x < -1e-16:
        return x - 0.5 * x * x
    else:
        return x


def log1m(x):
    """
    Natural log of one minus x.

    Raises
    ------
    DomainError
        If x is greater than 1
    """
    return log1p(-x)


def multiply_log(a, b):
    """
    ``a * log(b)``, taking ``0 * log(0)`` to be 0 instead of NaN.
    """
    if b == 0.0 and a == 0.0:
        return 0.0
    with np.errstate(divide='ignore'):
        return a * np.log(b)


def log1p_exp(a):
    """
    ``log(1 + exp(a))`` without overflow for large a.
    """
    # same as log_sum_exp(0, a)
    if a > 0.0:
        return a + log1p(np.exp(-a))
    return log1p(np.exp(a))


def log_inv_logit(u):
    """
    Natural log of the inverse logit of u.
    """
    if u < 0.0:
        return u - log1p(np.exp(u))  # prevent underflow
    return -log1p(np.exp(-u))


def log1m_inv_logit(u):
    """
    Natural log of one minus the inverse logit of u.
    """
    if u > 0.0:
        return -u - log1p(np.exp(-u))  # prevent underflow
    return -log1p(np.exp(u))


def log_sum_exp(a, b=None):
    r"""
    Log of the sum of exponentials, without overflow.

    Called with two scalars, returns :math:`\log(\exp(a) + \exp(b))`. Called with a single sequence x, returns

    .. math::

        \log \sum_n \exp(x_n) = \max(x) + \log \sum_n \exp(x_n - \max(x))

    where elements equal to negative infinity contribute nothing. A sequence of negative infinities (or an
    empty sequence) gives negative infinity.

    Parameters
    ----------
    a : float or array_like
        First value, or the sequence of values if b is not given
    b : float, optional
        Second value

    Returns
    -------
    float
        The log of the sum of the exponentiated values
    """
    if b is None:
        return _log_sum_exp_sequence(a)

    if a == NEGATIVE_INFTY and b == NEGATIVE_INFTY:
        return NEGATIVE_INFTY
    if a > b:
        return a + log1p(np.exp(b - a))
    return b + log1p(np.exp(a - b))


def _log_sum_exp_sequence(x):
    x = np.asarray(x, dtype=float)
    if x.size == 0:
        return NEGATIVE_INFTY

    max_x = np.max(x)
    if max_x == NEGATIVE_INFTY or max_x == INFTY:
        return max_x

    terms = x[x != NEGATIVE_INFTY]
    return max_x + np.log(np.sum(np.exp(terms - max_x)))


def ibeta(a, b, x):
    """
    The regularized incomplete beta function I_x(a, b), the CDF of the beta distribution.

    Parameters
    ----------
    a : float
        First shape parameter
    b : float
        Second shape parameter
    x : float
        Random variate, in [0, 1]

    Returns
    -------
    float
        The regularized incomplete beta function
    """
    return betainc(a, b, x)
