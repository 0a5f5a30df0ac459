import numpy as np
import pandas as pd

from poly_regression.orchestrator import FoldResult, Reporter, SweepReport
from poly_regression.train import EpochSnapshot, StopCondition, TrainingResult

_STOP_CONDITIONS: dict[StopCondition, str] = {
	StopCondition.RUNNING: "Running",
	StopCondition.EPOCH_LIMIT_REACHED: "Epoch Limit",
	StopCondition.CONVERGED: "DeltaCost ~= 0",
}


def format_model(weights: np.ndarray, degree: int, padding: int = 0) -> str:
	"""Render the weights as 'Model: Y = w0 + w1 X1 - w2 X1^2 ...'.

	Terms are laid out like the augmented features: one block of raw
	features per power, so X<i> is the raw feature and ^p its power.
	"""
	n_features: int = max((len(weights) - 1) // degree, 1)
	model: str = " " * padding + f"Model: Y = {weights[0]:.4f}"
	for i in range(1, len(weights)):
		weight: np.float64 = weights[i]
		feature: int = (i - 1) % n_features + 1
		power: int = (i - 1) // n_features + 1
		if weight < 0:
			model += f" - {-weight:.4f} X{feature}"
		else:
			model += f" + {weight:.4f} X{feature}"
		if power > 1:
			model += f"^{power}"

	return model


class ConsoleReporter(Reporter):
	def __init__(self, verbosity: int = 1) -> None:
		self.verbosity: int = verbosity

	def cross_validation(self, k: int) -> None:
		if k > 1:
			print(f"Using {k}-fold cross-validation.")
		else:
			print("Skipping cross-validation.")

	def degree_started(self, degree: int) -> None:
		print("----------------------------------")
		print(f"* Using a model of degree {degree}")

	def training_set(self, fold: int | None, size: int) -> None:
		if fold is None:
			print(f"  * Training on all data ({size} examples):")
		else:
			print(f"  * Training on all data except Fold {fold + 1} ({size} examples):")

	def fit_started(self, learning_rate: np.float64, epoch_limit: int, batch_size: int) -> None:
		if self.verbosity >= 2:
			print("    * Beginning mini-batch gradient descent")
			print(f"      (alpha={learning_rate:.6f}, epochLimit={epoch_limit}, batchSize={batch_size})")

	def epoch(self, snapshot: EpochSnapshot, degree: int) -> None:
		if self.verbosity < 3:
			return
		if snapshot.epoch == 0 or snapshot.epoch % 1000 == 0 or self.verbosity >= 5:
			self._write_cost(snapshot.epoch, snapshot.iterations, snapshot.cost, snapshot.weights, degree)

	def fit_finished(self, result: TrainingResult, degree: int) -> None:
		if 3 <= self.verbosity < 5:
			self._write_cost(result.epochs, result.iterations, result.cost, result.weights, degree)
		if self.verbosity >= 2:
			print("    * Done with fitting!")
			print(f"      Training took {result.elapsed * 1000:.0f}ms, {result.epochs} epochs, {result.iterations} iterations ({result.ms_per_iteration:.4f}ms / iteration)")
			print(f"      GD Stop condition: {_STOP_CONDITIONS[result.stop_condition]}")
			print(format_model(result.weights, degree, 6))

	def errors(self, result: FoldResult) -> None:
		if result.validation_cost is None:
			print(f"  * Training error{result.train_cost:15.6f}\n")
		else:
			print(f"  * Training and validation errors{result.train_cost:15.6f}{result.validation_cost:14.6f}\n")

	def summary(self, report: SweepReport) -> None:
		if self.verbosity < 2 or not report.results:
			return
		summary: pd.DataFrame = report.summary()
		if report.folds <= 1:
			summary = summary.drop(columns="validation_cost")
		print("==================================")
		print(summary.to_string(float_format=lambda v: f"{v:.6f}"))
		print(f"best fit degree: {report.best_degree()}")

	def _write_cost(self, epochs: int, iterations: int, cost: np.float64, weights: np.ndarray, degree: int) -> None:
		if epochs == 0:
			line: str = "      Initial model with zero weights   :"
		else:
			line = f"      After {epochs:>6} epochs ({iterations:>6} iter.):"
		line += f" Cost{cost:15.9f}"
		if self.verbosity >= 4:
			line += format_model(weights, degree, 3)
		print(line)
