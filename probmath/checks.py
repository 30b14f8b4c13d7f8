"""
Argument checks run by the distribution functions before any numerical work.

Every check takes the name of the calling function and of the checked variable, for error messages, and an
optional Policy deciding what a failure does. A check returns a CheckResult, which is truthy when the check
passed. A failed result carries the sentinel value the caller must return straight away::

    result = check_nonnegative(function, N, 'Population size, N,', policy)
    if not result:
        return result.value
"""
import logging
from collections import namedtuple
import numpy as np

from probmath.config import settings
from probmath.constants import NOT_A_NUMBER
from probmath.errors import DomainError, SizeMismatchError
from probmath.math import matrix

logger = logging.getLogger(__name__)

POLICY_ACTIONS = ('raise', 'warn', 'ignore')


class CheckResult(namedtuple('CheckResult', ['ok', 'value'])):
    """
    Outcome of a check: whether it passed, and on failure the value the caller should return.
    """
    __slots__ = ()

    def __bool__(self):
        return bool(self.ok)


PASSED = CheckResult(True, None)


class Policy(object):
    """
    What to do when a check fails.

    Parameters
    ----------
    domain_error : str, optional
        One of 'raise' (raise a DomainError, or the more specific error for the check), 'warn' (log a warning and
        return NaN) or 'ignore' (return NaN). Defaults to 'raise'.
    """

    def __init__(self, domain_error='raise'):
        if domain_error not in POLICY_ACTIONS:
            raise ValueError("domain_error must be one of {}, not {!r}".format(POLICY_ACTIONS, domain_error))
        self.domain_error = domain_error

    def fail(self, function, message, error_class=DomainError):
        """
        Handle a failed check in the calling function.

        Returns
        -------
        CheckResult
            A failed result carrying NaN, unless the action is 'raise'
        """
        message = "{}: {}".format(function, message)
        if self.domain_error == 'raise':
            raise error_class(message)
        if self.domain_error == 'warn':
            logger.warning(message)
        else:
            logger.debug(message)
        return CheckResult(False, NOT_A_NUMBER)

    def __repr__(self):
        return "Policy(domain_error={!r})".format(self.domain_error)


def default_policy():
    """The Policy named by the error_policy section of the package settings."""
    return Policy(settings['error_policy']['domain_error'])


def _policy(policy):
    return default_policy() if policy is None else policy


def _holds(condition):
    return bool(np.all(condition))


def check_bounded(function, y, low, high, name, policy=None):
    """
    Check that y lies in the closed interval [low, high]. NaN is never in bounds.
    """
    if _holds(np.logical_and(low <= y, y <= high)):
        return PASSED
    return _policy(policy).fail(function, "{} is {}, but must be between ({}, {})".format(name, y, low, high))


def check_nonnegative(function, y, name, policy=None):
    if _holds(y >= 0):
        return PASSED
    return _policy(policy).fail(function, "{} is {}, but must be >= 0".format(name, y))


def check_positive(function, y, name, policy=None):
    if _holds(y > 0):
        return PASSED
    return _policy(policy).fail(function, "{} is {}, but must be > 0".format(name, y))


def check_greater_or_equal(function, y, low, name, policy=None):
    if _holds(y >= low):
        return PASSED
    return _policy(policy).fail(function, "{} is {}, but must be >= {}".format(name, y, low))


def check_finite(function, y, name, policy=None):
    """
    Check that y (a scalar or an array) is finite: neither infinite nor NaN.
    """
    if _holds(np.isfinite(np.asarray(y, dtype=float))):
        return PASSED
    return _policy(policy).fail(function, "{} is {}, but must be finite".format(name, y))


def check_not_nan(function, y, name, policy=None):
    if not np.any(np.isnan(np.asarray(y, dtype=float))):
        return PASSED
    return _policy(policy).fail(function, "{} is {}, but must not be nan".format(name, y))


def check_size_match(function, i, name_i, j, name_j, policy=None):
    """
    Check that two sizes are equal.
    """
    if i == j:
        return PASSED
    return _policy(policy).fail(
        function, "size of {} ({}) must match size of {} ({})".format(name_i, i, name_j, j),
        error_class=SizeMismatchError
    )


def check_square(function, M, name, policy=None):
    M = np.asarray(M)
    if M.ndim != 2:
        return _policy(policy).fail(function, "{} must be a matrix, but has {} dimension(s)".format(name, M.ndim))
    return check_size_match(function, M.shape[0], 'rows of ' + name, M.shape[1], 'columns of ' + name, policy)


def check_symmetric(function, M, name, policy=None):
    if matrix.is_symmetric(M):
        return PASSED
    return _policy(policy).fail(function, "{} is not symmetric".format(name))


def check_pos_definite(function, M, name, policy=None):
    """
    Check that the symmetric matrix M is positive definite.
    """
    if matrix.is_pos_definite(M):
        return PASSED
    return _policy(policy).fail(function, "{} is not positive definite".format(name))
