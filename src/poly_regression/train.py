from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence
import numpy as np
import time

from poly_regression.gradient import cost_arrays, gradient_arrays
from poly_regression.log import get_logger
from poly_regression.partition import batch
from poly_regression.sample import Sample, stack

DELTA_COST_LIMIT: np.float64 = np.float64(1e-10)

logger = get_logger(__name__)


class TrainingError(Exception):
	pass


class StopCondition(Enum):
	RUNNING = "running"
	CONVERGED = "converged"
	EPOCH_LIMIT_REACHED = "epoch limit reached"


@dataclass(frozen=True)
class EpochSnapshot:
	epoch: int
	iterations: int
	cost: np.float64
	weights: np.ndarray


@dataclass(frozen=True)
class TrainingResult:
	weights: np.ndarray
	epochs: int
	iterations: int
	stop_condition: StopCondition
	cost: np.float64
	elapsed: float

	@property
	def converged(self) -> bool:
		return self.stop_condition is StopCondition.CONVERGED

	@property
	def ms_per_iteration(self) -> float:
		if not self.iterations:
			return 0.
		return self.elapsed * 1000. / self.iterations


class Trainer:
	"""Mini-batch gradient descent over augmented samples.

	Inside a batch the weights are updated one coordinate at a time and the
	gradient of coordinate k + 1 is taken with the already updated value of
	coordinate k. Every call to fit() starts from zero weights with its own
	counters, so a Trainer can be reused across folds and degrees.
	"""

	def __init__(self, learning_rate: np.float64, epoch_limit: int, batch_size: int = 0, randomize: bool = False, rng: np.random.Generator | None = None) -> None:
		if not (learning_rate > 0):
			raise TrainingError(f"invalid learning rate: {learning_rate}, expected greater than 0")
		if not (epoch_limit > 0):
			raise TrainingError(f"invalid epoch limit: {epoch_limit}, expected greater than 0")

		self.learning_rate: np.float64 = np.float64(learning_rate)
		self.epoch_limit: int = int(epoch_limit)
		# a batch size of 0 behaves like 1: the whole dataset in a single batch
		self.batch_size: int = max(int(batch_size), 1)
		self.randomize: bool = randomize
		self.rng: np.random.Generator | None = rng

	def fit(self, data: Sequence[Sample], on_epoch: Callable[[EpochSnapshot], None] | None = None) -> TrainingResult:
		if not len(data):
			raise TrainingError("no training data, cannot fit an empty dataset")

		start: float = time.perf_counter()
		features, targets = stack(data)
		weights: np.ndarray = np.zeros(features.shape[1], dtype=np.float64)
		state: StopCondition = StopCondition.RUNNING
		converging: bool = False
		epoch: int = 0
		iterations: int = 0
		cost_after: np.float64 = cost_arrays(features, targets, weights)

		if on_epoch:
			on_epoch(EpochSnapshot(epoch, iterations, cost_after, weights.copy()))

		while state is StopCondition.RUNNING:
			cost_before: np.float64 = cost_after
			for group in self._batches(data, features, targets):
				self._step(*group, weights)
				iterations += 1
			epoch += 1

			cost_after = cost_arrays(features, targets, weights)
			if on_epoch:
				on_epoch(EpochSnapshot(epoch, iterations, cost_after, weights.copy()))

			# once the threshold is met, one more epoch runs before stopping
			if converging:
				state = StopCondition.CONVERGED
			elif cost_after < DELTA_COST_LIMIT or np.abs(cost_after - cost_before) < DELTA_COST_LIMIT:
				converging = True
				if epoch >= self.epoch_limit:
					state = StopCondition.CONVERGED
			elif epoch >= self.epoch_limit:
				state = StopCondition.EPOCH_LIMIT_REACHED

		elapsed: float = time.perf_counter() - start
		logger.debug("fit stopped (%s) after %d epochs, %d iterations, cost %.9f", state.value, epoch, iterations, cost_after)

		return TrainingResult(weights, epoch, iterations, state, cost_after, elapsed)

	def _batches(self, data: Sequence[Sample], features: np.ndarray, targets: np.ndarray) -> list[tuple[np.ndarray, np.ndarray]]:
		if self.batch_size <= 1:
			return [(features, targets)]

		indexes: list[list[int]] = batch(range(len(data)), self.batch_size, self.randomize, self.rng)
		return [(features[group], targets[group]) for group in indexes]

	def _step(self, features: np.ndarray, targets: np.ndarray, weights: np.ndarray) -> None:
		for k in range(len(weights)):
			weights[k] -= self.learning_rate * gradient_arrays(features, targets, weights, k)
