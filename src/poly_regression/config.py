from dataclasses import dataclass
import numpy as np


class ConfigurationError(Exception):
	pass


@dataclass(frozen=True)
class TrainingConfig:
	dataset_path: str
	folds: int = 1
	min_degree: int = 1
	max_degree: int | None = None
	learning_rate: np.float64 = 0.005
	epoch_limit: int = 10_000
	batch_size: int = 0
	randomize: bool = False
	verbosity: int = 1
	seed: int | None = None
	plot: bool = False

	@property
	def top_degree(self) -> int:
		return self.min_degree if self.max_degree is None else self.max_degree

	def validate(self) -> "TrainingConfig":
		if self.folds < 1:
			raise ConfigurationError(f"invalid number of folds: {self.folds}, expected at least 1")
		if self.min_degree < 1:
			raise ConfigurationError(f"invalid polynomial degree: {self.min_degree}, expected at least 1")
		if self.top_degree < self.min_degree:
			raise ConfigurationError(f"max polynomial degree ({self.top_degree}) cannot be less than the min polynomial degree ({self.min_degree})")
		if not (self.learning_rate > 0):
			raise ConfigurationError(f"invalid learning rate: {self.learning_rate}, expected greater than 0")
		if self.epoch_limit < 1:
			raise ConfigurationError(f"invalid epoch limit: {self.epoch_limit}, expected greater than 0")
		if self.batch_size < 0:
			raise ConfigurationError(f"invalid batch size: {self.batch_size}, expected 0 or more")
		if not (1 <= self.verbosity <= 5):
			raise ConfigurationError(f"{self.verbosity} is not a valid verbosity level, valid levels: [1 | 2 | 3 | 4 | 5]")
		return self

	def make_rng(self) -> np.random.Generator:
		return np.random.default_rng(self.seed)
