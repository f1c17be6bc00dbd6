#!/usr/bin/env python3
"""
Unit tests for the root-finding strategies, the quadrature wrapper, the
configuration objects and the logging helpers.
"""

import logging
import math
import unittest

import flrwtoolkit as flrw
from flrwtoolkit import PLANCK18
from flrwtoolkit.core import (
    RootResult, IntegrationConfig, InvalidParameterError, IntegrationError, NumericalError,
    FLRWToolkitError, DEFAULT_INTEGRATION
)
from flrwtoolkit.core.solvers import bisection, brent, get_root_finder, integrate_quad, ROOT_FINDERS
from flrwtoolkit.util import log_util


class TestRootFinders(unittest.TestCase):

    def setUp(self):
        self.finders = [bisection, brent]

    def test_simple_root(self):
        for finder in self.finders:
            with self.subTest(finder=finder.__name__):
                result = finder(lambda x: x * x - 2.0, (0.0, 2.0), 1e-12, 200)
                self.assertTrue(result.ok)
                self.assertIsNone(result.failure)
                self.assertAlmostEqual(result.root, math.sqrt(2.0), places=11)
                self.assertGreater(result.iterations, 0)

    def test_no_sign_change_fails_closed(self):
        for finder in self.finders:
            with self.subTest(finder=finder.__name__):
                result = finder(lambda x: x * x + 1.0, (-1.0, 1.0), 1e-12, 200)
                self.assertFalse(result.ok)
                self.assertIsNone(result.root)
                self.assertEqual(result.failure, 'no_sign_change')
                self.assertIn('no sign change', result.message)

    def test_non_finite_bracket_end(self):
        result = bisection(lambda x: math.inf if x > 0 else -1.0, (-1.0, 1.0), 1e-12, 200)
        self.assertEqual(result.failure, 'no_sign_change')

    def test_iteration_budget(self):
        result = bisection(lambda x: x - 0.123456789, (0.0, 1.0), 1e-14, 3)
        self.assertFalse(result.ok)
        self.assertEqual(result.failure, 'not_converged')
        self.assertIsNone(result.root)

    def test_registry(self):
        self.assertIs(get_root_finder('bisect'), bisection)
        self.assertIs(get_root_finder('brentq'), brent)
        self.assertEqual(sorted(ROOT_FINDERS), ['bisect', 'brentq'])

        custom = lambda func, bracket, xtol, maxiter: RootResult.found(0.0)
        self.assertIs(get_root_finder(custom), custom)

        with self.assertRaises(InvalidParameterError):
            get_root_finder('secant')


class TestQuadrature(unittest.TestCase):

    def test_known_integral(self):
        value = integrate_quad(math.sin, 0.0, math.pi, epsrel=1e-10)
        self.assertAlmostEqual(value, 2.0, places=9)

    def test_integrable_endpoint_singularity(self):
        value = integrate_quad(lambda x: 1 / math.sqrt(x) if x > 0 else 0.0, 0.0, 1.0, epsrel=1e-8)
        self.assertAlmostEqual(value, 2.0, places=7)

    def test_options_forwarded(self):
        value = integrate_quad(lambda x, k: k * x, 0.0, 1.0, args=(4.0,))
        self.assertAlmostEqual(value, 2.0, places=12)

    def test_budget_exhausted(self):
        with self.assertRaises(IntegrationError) as cm:
            integrate_quad(lambda x: math.sin(1 / x) if x > 0 else 0.0, 0.0, 1.0,
                           epsrel=1e-12, epsabs=0.0, limit=2)
        self.assertEqual(cm.exception.lower, 0.0)
        self.assertEqual(cm.exception.upper, 1.0)
        self.assertIn('did not converge', str(cm.exception))

    def test_unreachable_tolerance(self):
        with self.assertRaises(IntegrationError) as cm:
            integrate_quad(math.sin, 0.0, math.pi, epsrel=1e-16, epsabs=0.0)
        self.assertIsInstance(cm.exception.__cause__, ValueError)
        self.assertEqual(cm.exception.upper, math.pi)

        with self.assertRaises(IntegrationError):
            flrw.age(0, PLANCK18, epsrel=1e-16)

    def test_error_hierarchy(self):
        self.assertTrue(issubclass(IntegrationError, NumericalError))
        self.assertTrue(issubclass(NumericalError, FLRWToolkitError))
        self.assertTrue(issubclass(InvalidParameterError, ValueError))
        self.assertFalse(issubclass(IntegrationError, ValueError))

    def test_integration_config(self):
        self.assertEqual(DEFAULT_INTEGRATION.as_quad_kwargs(),
                         {'epsrel': 1e-3, 'epsabs': 0.0, 'limit': 50})
        config = IntegrationConfig(epsrel=1e-6, limit=100)
        self.assertEqual(config.as_quad_kwargs()['limit'], 100)


class TestLogUtil(unittest.TestCase):

    def test_levels_registered(self):
        self.assertEqual(logging.FLRW_WARN, 37)
        self.assertEqual(logging.FLRW_INFO, 35)
        self.assertEqual(logging.FLRW_DEBUG, 25)
        self.assertEqual(logging.getLevelName(37), 'FLRW_WARN')

    def test_register_twice(self):
        log_util.addLoggingLevel('FLRW_WARN', 37)
        with self.assertRaises(AttributeError):
            log_util.addLoggingLevel('FLRW_WARN', 38)

    def test_log_wrapper_levels(self):
        logger = logging.getLogger('flrwtoolkit.tests.log_wrapper')
        with self.assertLogs(logger, level='DEBUG') as cm:
            log_util.log_wrapper(logger, 'equality %s', 'z_eq_mr')
            log_util.log_wrapper(logger, 'solved', level='flrw_debug')
            log_util.log_wrapper(logger, 'plain', level='INFO')
        self.assertEqual([r.levelname for r in cm.records], ['FLRW_WARN', 'FLRW_DEBUG', 'INFO'])
        self.assertEqual(cm.records[0].getMessage(), 'equality z_eq_mr')

    def test_logger_method(self):
        logger = logging.getLogger('flrwtoolkit.tests.method')
        with self.assertLogs(logger, level='FLRW_INFO') as cm:
            logger.flrw_info('derived %d quantities', 8)
        self.assertEqual(cm.output, ['FLRW_INFO:flrwtoolkit.tests.method:derived 8 quantities'])

    def test_unknown_level(self):
        with self.assertRaises(ValueError):
            log_util.log_wrapper(logging.getLogger('flrwtoolkit.tests'), 'x', level='loud')


if __name__ == '__main__':
    unittest.main()
