import unittest

import numpy as np

from bpnn.activation import sigmoid, sigmoid_derivative


class TestSigmoid(unittest.TestCase):

    def test_known_values(self):
        self.assertEqual(sigmoid(0.0), 0.5)
        self.assertAlmostEqual(sigmoid(2.0), 0.8807970779778823, places=15)
        self.assertAlmostEqual(sigmoid(-2.0), 1 - 0.8807970779778823,
                               places=15)

    def test_monotonic_and_bounded(self):
        x = np.linspace(-30, 30, 1001)
        y = sigmoid(x)

        self.assertTrue((np.diff(y) >= 0).all())
        self.assertTrue(((y > 0) & (y < 1)).all())

    def test_derivative_from_output(self):
        # Compare against a centered finite difference
        h = 1e-6
        for x in [-3.0, -0.5, 0.0, 1.0, 4.0]:
            numeric = (sigmoid(x + h) - sigmoid(x - h)) / (2 * h)
            self.assertAlmostEqual(sigmoid_derivative(sigmoid(x)), numeric,
                                   places=8)


if __name__ == '__main__':
    unittest.main()
