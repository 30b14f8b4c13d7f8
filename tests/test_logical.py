from unittest import TestCase
import numpy as np

from probmath.math.logical import (
    logical_negation, logical_or, logical_and, logical_eq, logical_neq,
    logical_lt, logical_lte, logical_gt, logical_gte
)


class LogicalTestCase(TestCase):

    def test_negation(self):
        self.assertEqual(logical_negation(0), 1)
        self.assertEqual(logical_negation(0.0), 1)
        self.assertEqual(logical_negation(-2), 0)
        self.assertEqual(logical_negation(0.5), 0)

    def test_or_and(self):
        self.assertEqual(logical_or(0, 0), 0)
        self.assertEqual(logical_or(0, 2.5), 1)
        self.assertEqual(logical_or(-1, 0.0), 1)
        self.assertEqual(logical_and(1, 0.0), 0)
        self.assertEqual(logical_and(3, -0.5), 1)
        self.assertEqual(logical_and(0, 0), 0)

    def test_comparisons(self):
        self.assertEqual(logical_eq(1, 1.0), 1)
        self.assertEqual(logical_eq(1, 2), 0)
        self.assertEqual(logical_neq(1, 2), 1)
        self.assertEqual(logical_neq(2.0, 2), 0)
        self.assertEqual(logical_lt(1, 2), 1)
        self.assertEqual(logical_lt(2, 2), 0)
        self.assertEqual(logical_lte(2, 2), 1)
        self.assertEqual(logical_lte(3, 2), 0)
        self.assertEqual(logical_gt(3, 2.5), 1)
        self.assertEqual(logical_gt(2.5, 2.5), 0)
        self.assertEqual(logical_gte(2.5, 2.5), 1)
        self.assertEqual(logical_gte(2, 2.5), 0)

    def test_results_are_ints(self):
        for result in [logical_negation(np.float64(0.0)), logical_or(np.int64(1), 0), logical_lt(np.float32(1), 2)]:
            self.assertIs(type(result), int)

    def test_nan(self):
        nan = float('nan')
        self.assertEqual(logical_eq(nan, nan), 0)
        self.assertEqual(logical_neq(nan, nan), 1)
        # NaN is unequal to zero, and so true
        self.assertEqual(logical_negation(nan), 0)
