from probmath.checks import check_bounded, check_nonnegative, check_finite
from probmath.math.special import binomial_coefficient_log, multiply_log, log1m
from probmath.distributions.traits import include_summand

FUNCTION = 'probmath.distributions.binomial_log'


def binomial_log(n, N, theta, propto=False, policy=None):
    r"""
    Log of the binomial probability mass function,

    .. math::

        \log \mathrm{Binomial}(n | N, \theta) = \log {N \choose n} + n \log \theta + (N - n) \log (1 - \theta)

    :param n: The number of successes, 0 <= n <= N.
    :param N: The population size, N >= 0.
    :param theta: The probability of success, in [0, 1].
    :param propto: If True, drop the terms that do not depend on a varying argument. The binomial coefficient
        depends only on the (integer) data n and N, so it is always dropped; the likelihood term is kept if theta
        is varying.
    :param policy: The Policy applied when an argument is out of its domain. If None, the configured default.
    :return: The log probability, or the sentinel of a failed check.
    """
    lp = 0.0
    result = check_bounded(FUNCTION, n, 0, N, "Successes, n,", policy)
    if not result:
        return result.value
    result = check_nonnegative(FUNCTION, N, "Population size, N,", policy)
    if not result:
        return result.value
    result = check_finite(FUNCTION, theta, "Probability, theta,", policy)
    if not result:
        return result.value
    result = check_bounded(FUNCTION, theta, 0.0, 1.0, "Probability, theta,", policy)
    if not result:
        return result.value

    if include_summand(propto):
        lp += binomial_coefficient_log(N, n)
    if include_summand(propto, theta):
        lp += multiply_log(n, theta)
        # skipped when n == N, where it would be 0 * log(0) at theta == 1
        if N != n:
            lp += (N - n) * log1m(theta)
    return lp
