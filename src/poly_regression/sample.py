from typing import Sequence
import numpy as np


class Sample:
	__slots__ = ("_features", "_target")

	def __init__(self, features: Sequence[float] | np.ndarray, target: np.float64) -> None:
		_features: np.ndarray = np.array(features, dtype=np.float64)
		_features.setflags(write=False)
		object.__setattr__(self, "_features", _features)
		object.__setattr__(self, "_target", np.float64(target))

	def __setattr__(self, name: str, value) -> None:
		raise AttributeError(f"Sample is immutable, cannot set '{name}'")

	@property
	def features(self) -> np.ndarray:
		return self._features

	@property
	def target(self) -> np.float64:
		return self._target

	def __len__(self) -> int:
		return len(self._features)

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Sample):
			return NotImplemented
		return self._target == other._target and np.array_equal(self._features, other._features)

	def __repr__(self) -> str:
		return f"Sample(features={self._features.tolist()}, target={float(self._target)})"


def augment(sample: Sample, degree: int) -> Sample:
	"""Return a new sample with features [1, x, x^2, ..., x^degree].

	Powers are grouped by degree: all raw features at power 1, then all at
	power 2, and so on. The power-1 block is the raw values, not x ** 1.
	"""
	raw: np.ndarray = sample.features
	blocks: list[np.ndarray] = [np.ones(1, dtype=np.float64), raw]
	for power in range(2, degree + 1):
		blocks.append(np.power(raw, power, dtype=np.float64))

	return Sample(np.concatenate(blocks), sample.target)


def augment_data(data: Sequence[Sample], degree: int) -> list[Sample]:
	return [augment(sample, degree) for sample in data]


def stack(data: Sequence[Sample]) -> tuple[np.ndarray, np.ndarray]:
	# design matrix (n x m) and target vector (n) of a group of samples
	if not len(data):
		return np.empty((0, 0), dtype=np.float64), np.empty(0, dtype=np.float64)

	features: np.ndarray = np.vstack([sample.features for sample in data])
	targets: np.ndarray = np.fromiter((sample.target for sample in data), dtype=np.float64, count=len(data))
	return features, targets
