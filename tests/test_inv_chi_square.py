from unittest import TestCase
import numpy as np
from scipy.stats import invgamma

from probmath.checks import Policy
from probmath.distributions import inv_chi_square_log
from probmath.errors import DomainError


class Parameter(float):
    """A float marked as a varying parameter."""


class InvChiSquareTestCase(TestCase):

    def test_inv_chi_square_log(self):
        self.assertAlmostEqual(inv_chi_square_log(0.5, 2.0), -0.3068528, places=6)
        self.assertAlmostEqual(inv_chi_square_log(3.2, 9.1), -12.28905, delta=1e-5)

    def test_against_scipy(self):
        for y, nu in [(0.5, 2.0), (3.2, 9.1), (0.01, 0.5), (100.0, 40.0)]:
            self.assertAlmostEqual(inv_chi_square_log(y, nu), invgamma.logpdf(y, 0.5 * nu, scale=0.5))

    def test_propto(self):
        self.assertEqual(inv_chi_square_log(0.5, 2.0, propto=True), 0.0)
        self.assertEqual(inv_chi_square_log(3.2, 9.1, propto=True), 0.0)

        y = Parameter(3.2)
        expected = -(0.5 * 9.1 + 1.0) * np.log(3.2) - 0.5 / 3.2
        self.assertAlmostEqual(inv_chi_square_log(y, 9.1, propto=True), expected)

    def test_outside_support(self):
        self.assertEqual(inv_chi_square_log(0.0, 2.0), -np.inf)
        self.assertEqual(inv_chi_square_log(-1.0, 2.0), -np.inf)

    def test_invalid_arguments(self):
        self.assertRaises(DomainError, inv_chi_square_log, 0.5, 0.0)
        self.assertRaises(DomainError, inv_chi_square_log, 0.5, -2.0)
        self.assertRaises(DomainError, inv_chi_square_log, 0.5, np.inf)
        self.assertRaises(DomainError, inv_chi_square_log, np.nan, 2.0)
        self.assertTrue(np.isnan(inv_chi_square_log(np.nan, 2.0, policy=Policy('ignore'))))
