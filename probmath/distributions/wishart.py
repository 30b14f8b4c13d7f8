"""
The Wishart distribution over symmetric positive definite matrices.
"""
import numpy as np

from probmath.checks import (
    check_greater_or_equal, check_square, check_size_match, check_symmetric, check_pos_definite
)
from probmath.constants import NEG_LOG_TWO_OVER_TWO
from probmath.math.special import lmgamma, multiply_log
from probmath.math.matrix import determinant, inverse, multiply, trace
from probmath.distributions.traits import include_summand

FUNCTION = 'probmath.distributions.wishart_log'


def wishart_log(W, nu, S, propto=False, policy=None):
    r"""
    Log of the Wishart density of the matrix W, given the degrees of freedom nu and the scale matrix S.

    .. math::

        \log \mathrm{Wishart}(W | \nu, S) = -\frac{\nu k}{2} \log 2 - \log \Gamma_k\left(\frac{\nu}{2}\right)
            - \frac{\nu}{2} \log |S| + \frac{\nu - k - 1}{2} \log |W| - \frac{1}{2} \mathrm{tr}(S^{-1} W)

    where k is the number of rows of W, and :math:`\Gamma_k` is the multivariate gamma function.

    The :math:`\log |W|` term is skipped when nu = k + 1, where its coefficient vanishes. The trace term enters
    with its absolute value.

    Parameters
    ----------
    W : ndarray
        A k x k symmetric positive definite matrix
    nu : float
        Degrees of freedom, nu >= k - 1
    S : ndarray
        The k x k symmetric positive definite scale matrix
    propto : bool, optional
        If True, drop the terms that do not depend on a varying argument.
    policy : Policy, optional
        The Policy applied when an argument is out of its domain. If None, the configured default.

    Returns
    -------
    float
        The log density, or the sentinel of a failed check
    """
    lp = 0.0
    W_values = np.asarray(W)
    S_values = np.asarray(S)
    k = W_values.shape[0] if W_values.ndim > 0 else 0

    result = check_greater_or_equal(FUNCTION, nu, k - 1, "Degrees of freedom, nu,", policy)
    if not result:
        return result.value
    result = check_square(FUNCTION, W_values, "random variable, W,", policy)
    if not result:
        return result.value
    result = check_square(FUNCTION, S_values, "scale parameter, S,", policy)
    if not result:
        return result.value
    result = check_size_match(FUNCTION, W_values.shape[0], "rows of W", S_values.shape[0], "rows of S", policy)
    if not result:
        return result.value
    result = check_symmetric(FUNCTION, S_values, "scale parameter, S,", policy)
    if not result:
        return result.value
    result = check_pos_definite(FUNCTION, S_values, "scale parameter, S,", policy)
    if not result:
        return result.value
    result = check_symmetric(FUNCTION, W_values, "random variable, W,", policy)
    if not result:
        return result.value
    result = check_pos_definite(FUNCTION, W_values, "random variable, W,", policy)
    if not result:
        return result.value

    if include_summand(propto, nu):
        lp += nu * k * NEG_LOG_TWO_OVER_TWO

    if include_summand(propto, nu):
        lp -= lmgamma(k, 0.5 * nu)

    if include_summand(propto, nu, S):
        lp -= multiply_log(0.5 * nu, determinant(S_values))

    if include_summand(propto, S, W):
        lp -= 0.5 * abs(trace(multiply(inverse(S_values), W_values)))

    if include_summand(propto, W, nu):
        if nu != k + 1:
            lp += multiply_log(0.5 * (nu - (k + 1.0)), determinant(W_values))

    return lp
