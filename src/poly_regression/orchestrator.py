from dataclasses import dataclass, field
from typing import Sequence
import numpy as np
import pandas as pd

from poly_regression.gradient import cost
from poly_regression.log import get_logger
from poly_regression.partition import fold, training_split
from poly_regression.sample import Sample, augment_data
from poly_regression.train import EpochSnapshot, StopCondition, Trainer, TrainingResult

logger = get_logger(__name__)


@dataclass(frozen=True)
class FoldResult:
	degree: int
	fold: int | None
	train_size: int
	weights: np.ndarray
	train_cost: np.float64
	validation_cost: np.float64 | None
	epochs: int
	iterations: int
	stop_condition: StopCondition


@dataclass
class SweepReport:
	folds: int
	results: list[FoldResult] = field(default_factory=list)

	def to_frame(self) -> pd.DataFrame:
		return pd.DataFrame([{
			"degree": result.degree,
			"fold": result.fold,
			"train_size": result.train_size,
			"train_cost": result.train_cost,
			"validation_cost": np.nan if result.validation_cost is None else result.validation_cost,
			"epochs": result.epochs,
			"iterations": result.iterations,
			"stop_condition": result.stop_condition.name,
		} for result in self.results])

	def summary(self) -> pd.DataFrame:
		# mean costs per degree, averaged over the folds
		frame: pd.DataFrame = self.to_frame()
		return frame.groupby("degree")[["train_cost", "validation_cost", "epochs"]].mean()

	def best_degree(self) -> int:
		summary: pd.DataFrame = self.summary()
		column: str = "validation_cost" if self.folds > 1 else "train_cost"
		return int(summary[column].idxmin())


class Reporter:
	"""Receives the progress of a sweep, every hook is a no-op by default."""

	def cross_validation(self, k: int) -> None:
		pass

	def degree_started(self, degree: int) -> None:
		pass

	def training_set(self, fold: int | None, size: int) -> None:
		pass

	def fit_started(self, learning_rate: np.float64, epoch_limit: int, batch_size: int) -> None:
		pass

	def epoch(self, snapshot: EpochSnapshot, degree: int) -> None:
		pass

	def fit_finished(self, result: TrainingResult, degree: int) -> None:
		pass

	def errors(self, result: FoldResult) -> None:
		pass


class CrossValidator:
	def __init__(self, trainer: Trainer, folds: int = 1, randomize: bool = False, rng: np.random.Generator | None = None, reporter: Reporter | None = None) -> None:
		if folds < 1:
			raise ValueError(f"invalid number of folds: {folds}, expected at least 1")

		self.trainer: Trainer = trainer
		self.folds: int = folds
		self.randomize: bool = randomize
		self.rng: np.random.Generator | None = rng
		self.reporter: Reporter = reporter if reporter is not None else Reporter()

	def run(self, data: Sequence[Sample], min_degree: int, max_degree: int | None = None) -> SweepReport:
		if max_degree is None:
			max_degree = min_degree
		report: SweepReport = SweepReport(self.folds)

		folds: list[list[Sample]] | None = None
		if self.folds > 1:
			folds = fold(data, self.folds, self.randomize, self.rng)
		self.reporter.cross_validation(self.folds)

		for degree in range(min_degree, max_degree + 1):
			self.reporter.degree_started(degree)
			if folds is None:
				report.results.append(self._train(data, None, degree, None))
				continue
			for index, held_out in enumerate(folds):
				report.results.append(self._train(training_split(folds, index), held_out, degree, index))

		return report

	def _train(self, train_data: Sequence[Sample], validation_data: Sequence[Sample] | None, degree: int, index: int | None) -> FoldResult:
		self.reporter.training_set(index, len(train_data))
		augmented: list[Sample] = augment_data(train_data, degree)

		self.reporter.fit_started(self.trainer.learning_rate, self.trainer.epoch_limit, self.trainer.batch_size)
		result: TrainingResult = self.trainer.fit(augmented, lambda snapshot: self.reporter.epoch(snapshot, degree))
		self.reporter.fit_finished(result, degree)

		validation_cost: np.float64 | None = None
		if validation_data is not None:
			validation_cost = cost(augment_data(validation_data, degree), result.weights)

		fold_result: FoldResult = FoldResult(
			degree=degree,
			fold=index,
			train_size=len(train_data),
			weights=result.weights,
			train_cost=cost(augmented, result.weights),
			validation_cost=validation_cost,
			epochs=result.epochs,
			iterations=result.iterations,
			stop_condition=result.stop_condition)
		logger.info("degree %d fold %s: train cost %.6f validation cost %s", degree, index, fold_result.train_cost, validation_cost)
		self.reporter.errors(fold_result)

		return fold_result
