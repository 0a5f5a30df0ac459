import numpy as np
import pytest

from poly_regression.gradient import cost, estimate, gradient
from poly_regression.sample import Sample


@pytest.fixture
def line():
	# augmented samples of y = 1 + 2x
	return [Sample([1., x], 1. + 2. * x) for x in (0., 1., 2., 3.)]


def test_cost_is_zero_on_exact_fit(line):
	assert cost(line, np.array([1., 2.])) == 0.


def test_cost_is_mean_squared_error(line):
	# predictions are all 0, squared targets 1, 9, 25, 49
	assert cost(line, np.zeros(2)) == pytest.approx(84 / 4)


def test_cost_is_non_negative():
	rng = np.random.default_rng(1)
	data = [Sample(rng.normal(size=3), rng.normal()) for _ in range(25)]

	for _ in range(10):
		assert cost(data, rng.normal(size=3)) >= 0.


def test_cost_of_empty_data_is_nan():
	assert np.isnan(cost([], np.zeros(2)))


@pytest.mark.parametrize("coordinate", [0, 1, 2])
def test_gradient_of_empty_data_is_zero(coordinate):
	assert gradient([], np.array([3., -1., 2.]), coordinate) == 0.


def test_gradient_matches_formula(line):
	weights = np.array([0.5, 1.])
	deltas = np.array([0.5 + 1. * x - (1. + 2. * x) for x in (0., 1., 2., 3.)])

	assert gradient(line, weights, 0) == pytest.approx(2 * np.sum(deltas) / 4)
	assert gradient(line, weights, 1) == pytest.approx(2 * np.sum(deltas * np.array([0., 1., 2., 3.])) / 4)


def test_gradient_vanishes_at_minimum(line):
	weights = np.array([1., 2.])

	assert gradient(line, weights, 0) == 0.
	assert gradient(line, weights, 1) == 0.


def test_gradient_points_uphill(line):
	# stepping against the gradient lowers the cost
	weights = np.zeros(2)
	step = np.array([gradient(line, weights, k) for k in range(2)])

	assert cost(line, weights - 0.01 * step) < cost(line, weights)


def test_estimate():
	features = np.array([[1., 2.], [1., -1.]])

	assert estimate(np.array([3., 0.5]), features).tolist() == [4., 2.5]
