"""
Logical and relational functions returning the integers 1 and 0.

Truth follows the C convention: a value is true if it is unequal to zero.
"""


def logical_negation(x):
    """1 if x is equal to zero, and 0 otherwise."""
    return int(x == 0)


def logical_or(x1, x2):
    """1 if either argument is unequal to zero, and 0 otherwise."""
    return int((x1 != 0) or (x2 != 0))


def logical_and(x1, x2):
    """1 if both arguments are unequal to zero, and 0 otherwise."""
    return int((x1 != 0) and (x2 != 0))


def logical_eq(x1, x2):
    return int(x1 == x2)


def logical_neq(x1, x2):
    return int(x1 != x2)


def logical_lt(x1, x2):
    return int(x1 < x2)


def logical_lte(x1, x2):
    return int(x1 <= x2)


def logical_gt(x1, x2):
    return int(x1 > x2)


def logical_gte(x1, x2):
    return int(x1 >= x2)
