"""
Exceptions raised by special functions and, under the 'raise' policy, by argument checks.
"""


class ProbMathError(Exception):
    """Base class for all errors raised by this package."""


class DomainError(ProbMathError, ValueError):
    """
    An argument lies outside the domain on which a function is defined.
    """


class InvalidArgumentError(ProbMathError, ValueError):
    """
    An argument has the wrong shape or size for the operation.
    """


class SizeMismatchError(InvalidArgumentError):
    """Two arguments that must have the same size do not."""


class EmptyInputError(InvalidArgumentError):
    """A sequence argument that must have at least one element is empty."""
