from typing import Sequence
import numpy as np

from poly_regression.sample import Sample, stack


def _sum_squared(values: np.ndarray) -> np.float64:
	return np.sum(np.pow(values, 2, dtype=np.float64), dtype=np.float64)


def estimate(weights: np.ndarray, features: np.ndarray) -> np.ndarray:
	return np.dot(features, weights)


def cost_arrays(features: np.ndarray, targets: np.ndarray, weights: np.ndarray) -> np.float64:
	N: int = len(targets)
	if not N:
		return np.float64(np.nan)

	deltas: np.ndarray = estimate(weights, features) - targets
	return _sum_squared(deltas) / N


def gradient_arrays(features: np.ndarray, targets: np.ndarray, weights: np.ndarray, coordinate: int) -> np.float64:
	N: int = len(targets)
	if not N:
		return np.float64(0.)

	deltas: np.ndarray = estimate(weights, features) - targets
	return 2. * np.sum(features[:, coordinate] * deltas, dtype=np.float64) / N


def cost(data: Sequence[Sample], weights: np.ndarray) -> np.float64:
	"""Mean squared error of the model over the samples, NaN when there are none."""
	features, targets = stack(data)
	return cost_arrays(features, targets, weights)


def gradient(data: Sequence[Sample], weights: np.ndarray, coordinate: int) -> np.float64:
	"""Partial derivative of the MSE with respect to weights[coordinate].

	The sign is such that descending means subtracting learning_rate * gradient.
	An empty group of samples contributes a zero gradient.
	"""
	features, targets = stack(data)
	return gradient_arrays(features, targets, weights, coordinate)
