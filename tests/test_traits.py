from unittest import TestCase
import numpy as np

from probmath.distributions.traits import is_constant, is_varying, include_summand


class Parameter(float):
    """A float marked as a varying parameter."""


class ParameterMatrix(np.ndarray):
    """An array marked as a varying parameter."""


class TraitsTestCase(TestCase):

    def test_constants(self):
        for x in [1, 2.5, True, np.float64(1.0), np.int32(3), np.array([1.0, 2.0]), np.eye(2), [1, 2.0], (0.5,)]:
            self.assertTrue(is_constant(x), x)

    def test_varying(self):
        varying = [
            Parameter(0.5),
            np.eye(2).view(ParameterMatrix),
            np.array([Parameter(1.0)], dtype=object),
            [1.0, Parameter(2.0)],
            object(),
        ]
        for x in varying:
            self.assertTrue(is_varying(x), x)

    def test_include_summand(self):
        self.assertTrue(include_summand(False))
        self.assertTrue(include_summand(False, 1.0, 2.0))
        self.assertFalse(include_summand(True))
        self.assertFalse(include_summand(True, 1.0, np.eye(2)))
        self.assertTrue(include_summand(True, 1.0, Parameter(2.0)))
