from typing import Sequence, TypeVar
import numpy as np

T = TypeVar("T")


def _shuffled(data: Sequence[T], rng: np.random.Generator | None) -> list[T]:
	if rng is None:
		rng = np.random.default_rng()
	order: np.ndarray = rng.permutation(len(data))
	return [data[i] for i in order]


def fold(data: Sequence[T], k: int, randomize: bool = False, rng: np.random.Generator | None = None) -> list[list[T]]:
	"""Deal the samples round-robin into k folds, sample i going to fold i % k.

	A fold is only created once a sample lands in it, so fewer than k folds
	come back when there are fewer than k samples.
	"""
	if k < 1:
		raise ValueError(f"invalid number of folds: {k}, expected at least 1")

	working: Sequence[T] = _shuffled(data, rng) if randomize else data
	folds: list[list[T]] = []
	for index, item in enumerate(working):
		if len(folds) <= index % k:
			folds.append([])
		folds[index % k].append(item)

	return folds


def batch(data: Sequence[T], batch_size: int, randomize: bool = False, rng: np.random.Generator | None = None) -> list[list[T]]:
	# batch size of 0 or 1 means a single batch holding the whole dataset
	if batch_size <= 1:
		return [list(data)]

	working: Sequence[T] = _shuffled(data, rng) if randomize else data
	n_batches: int = -(-len(working) // batch_size)

	return [list(working[i * batch_size:(i + 1) * batch_size]) for i in range(n_batches)]


def training_split(folds: Sequence[Sequence[T]], index: int) -> list[T]:
	# every fold except the one held out for validation, in fold order
	return [item for i, group in enumerate(folds) if i != index for item in group]
