from scipy.special import gammaln

from probmath.checks import check_positive, check_finite, check_not_nan
from probmath.constants import LOG_2, NEGATIVE_INFTY
from probmath.math.special import multiply_log
from probmath.distributions.traits import include_summand

FUNCTION = 'probmath.distributions.inv_chi_square_log'


def inv_chi_square_log(y, nu, propto=False, policy=None):
    r"""
    Log of the inverse chi-square density,

    .. math::

        \log \mathrm{InvChiSquare}(y | \nu) = -\frac{\nu}{2} \log 2 - \log \Gamma\left(\frac{\nu}{2}\right)
            - \left(\frac{\nu}{2} + 1\right) \log y - \frac{1}{2y}

    :param y: The random variate. The density is zero (log density negative infinity) for y <= 0.
    :param nu: The degrees of freedom, positive and finite.
    :param propto: If True, drop the terms that do not depend on a varying argument.
    :param policy: The Policy applied when an argument is out of its domain. If None, the configured default.
    :return: The log density, or the sentinel of a failed check.
    """
    lp = 0.0
    result = check_finite(FUNCTION, nu, "Degrees of freedom, nu,", policy)
    if not result:
        return result.value
    result = check_positive(FUNCTION, nu, "Degrees of freedom, nu,", policy)
    if not result:
        return result.value
    result = check_not_nan(FUNCTION, y, "Random variate, y,", policy)
    if not result:
        return result.value

    if y <= 0:
        return NEGATIVE_INFTY

    if include_summand(propto, nu):
        lp -= nu * LOG_2 / 2.0 + gammaln(0.5 * nu)
    if include_summand(propto, y, nu):
        lp -= multiply_log(0.5 * nu + 1.0, y)
    if include_summand(propto, y):
        lp -= 0.5 / y
    return lp
