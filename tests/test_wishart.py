from unittest import TestCase
import numpy as np
from scipy.stats import wishart

from probmath.checks import Policy
from probmath.distributions import wishart_log
from probmath.errors import DomainError, SizeMismatchError


class ParameterMatrix(np.ndarray):
    """An array marked as a varying parameter."""


class WishartTestCase(TestCase):

    def setUp(self):
        self.W = np.array([
            [3.412, 2.143, 2.531],
            [2.143, 5.321, 0.531],
            [2.531, 0.531, 2.316]
        ])
        self.S = np.array([
            [2.0, 0.3, 0.1],
            [0.3, 1.0, 0.2],
            [0.1, 0.2, 1.5]
        ])

    def test_against_scipy(self):
        for nu in [2.5, 3.0, 4.0, 5.0, 12.7]:
            expected = wishart.logpdf(self.W, df=nu, scale=self.S)
            self.assertAlmostEqual(wishart_log(self.W, nu, self.S), expected)

    def test_one_dimensional(self):
        W, S = np.array([[2.5]]), np.array([[1.5]])
        self.assertAlmostEqual(wishart_log(W, 3.0, S), wishart.logpdf(2.5, df=3.0, scale=1.5))

    def test_propto(self):
        self.assertEqual(wishart_log(self.W, 5.0, self.S, propto=True), 0.0)

        k, nu = 3, 5.0
        trace_term = -0.5 * np.trace(np.dot(np.linalg.inv(self.S), self.W))
        W = self.W.view(ParameterMatrix)
        expected = trace_term + 0.5 * (nu - k - 1) * np.log(np.linalg.det(self.W))
        self.assertAlmostEqual(wishart_log(W, nu, self.S, propto=True), expected)

        S = self.S.view(ParameterMatrix)
        expected = trace_term - 0.5 * nu * np.log(np.linalg.det(self.S))
        self.assertAlmostEqual(wishart_log(self.W, nu, S, propto=True), expected)

    def test_vanishing_log_det_term(self):
        # With nu == k + 1 the log |W| term is skipped
        nu = 4.0
        expected = wishart.logpdf(self.W, df=nu, scale=self.S)
        self.assertAlmostEqual(wishart_log(self.W.view(ParameterMatrix), nu, self.S), expected)

    def test_invalid_degrees_of_freedom(self):
        self.assertRaises(DomainError, wishart_log, self.W, 1.9, self.S)
        self.assertTrue(np.isnan(wishart_log(self.W, 1.0, self.S, policy=Policy('ignore'))))

    def test_invalid_shapes(self):
        self.assertRaises(SizeMismatchError, wishart_log, np.ones((2, 3)), 5.0, np.eye(2))
        self.assertRaises(SizeMismatchError, wishart_log, np.eye(2), 5.0, np.ones((2, 3)))
        self.assertRaises(SizeMismatchError, wishart_log, np.eye(2), 5.0, np.eye(3))
        self.assertTrue(np.isnan(wishart_log(np.eye(2), 5.0, np.eye(3), policy=Policy('ignore'))))

    def test_invalid_matrices(self):
        not_pd = np.array([
            [1.0, 2.0, 0.0],
            [2.0, 1.0, 0.0],
            [0.0, 0.0, 1.0]
        ])
        not_symmetric = self.W.copy()
        not_symmetric[0, 1] += 1.0
        self.assertRaises(DomainError, wishart_log, self.W, 5.0, not_pd)
        self.assertRaises(DomainError, wishart_log, not_pd, 5.0, self.S)
        self.assertRaises(DomainError, wishart_log, not_symmetric, 5.0, self.S)
        self.assertRaises(DomainError, wishart_log, self.W, 5.0, not_symmetric)
