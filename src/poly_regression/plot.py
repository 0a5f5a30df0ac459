from typing import Callable, Sequence
import matplotlib
import matplotlib.pyplot as plt
from matplotlib import collections
import numpy as np
import os

from poly_regression.gradient import estimate
from poly_regression.orchestrator import FoldResult, SweepReport
from poly_regression.sample import Sample, augment, stack


class LayoutGraphError(Exception):
	pass


class Plotter:
	def __init__(self, mosaic: list, **plot_args) -> None:
		self.fig, self.axes = plt.subplot_mosaic(mosaic, **plot_args)

	def _axes(self, name: str) -> plt.Axes:
		try:
			return self.axes[name]
		except KeyError:
			raise LayoutGraphError(f"graph with name {name} not found") from None

	def draw_fit_line(self, x_data: np.ndarray, y_data: np.ndarray, estimator: Callable[[np.ndarray], np.ndarray], name: str, title: str = "", **plot_args) -> None:
		ax: plt.Axes = self._axes(name)
		# data points are drawn once, under the first curve
		if not any(isinstance(c, collections.PathCollection) for c in ax.get_children()):
			ax.scatter(x_data, y_data, color="black", s=12)
			ax.set_title(title)
			ax.grid(True)

		x_grid: np.ndarray = np.linspace(np.min(x_data), np.max(x_data), 200)
		ax.plot(x_grid, estimator(x_grid), **plot_args)
		ax.legend()

	def draw_cost_line(self, degrees: np.ndarray, cost_values: np.ndarray, name: str, label: str = "") -> None:
		ax: plt.Axes = self._axes(name)
		ax.plot(degrees, cost_values, marker="o", label=label)
		ax.set_title("Cost (MSE)")
		ax.set_yscale("log")
		ax.set_xlabel("polynomial degree")
		ax.set_xticks(degrees)
		ax.grid(True)
		ax.legend()

	def add_info(self, pos_x: float, pos_y: float, info: str) -> None:
		self.fig.text(pos_x, pos_y,
			info,
			ha="left", va="top",
			fontsize=10,
			bbox=dict(facecolor="white", alpha=0.8))

	def show(self, file_name: str = "train.pdf") -> str | None:
		if matplotlib.get_backend().lower() == "agg":
			print(f"non interactive backend for matplotlib - saving plot results in {os.getcwd()}/{file_name}")
			self.fig.savefig(file_name)
			plt.close(self.fig)
			return file_name
		plt.show()
		return None


def _best_fits(report: SweepReport) -> dict[int, FoldResult]:
	# per degree, the fold whose model did best on its held out data
	best: dict[int, FoldResult] = {}
	for result in report.results:
		score: np.float64 = result.train_cost if result.validation_cost is None else result.validation_cost
		current: FoldResult | None = best.get(result.degree)
		if current is None or score < (current.train_cost if current.validation_cost is None else current.validation_cost):
			best[result.degree] = result
	return best


def plot_report(report: SweepReport, data: Sequence[Sample], file_name: str = "train.pdf") -> str | None:
	summary = report.summary()
	degrees: np.ndarray = summary.index.to_numpy()
	one_feature: bool = len(data) > 0 and len(data[0]) == 1

	layout: list = [["fit", "cost"]] if one_feature else [["cost"]]
	plotter: Plotter = Plotter(mosaic=layout, figsize=(14, 6), layout="constrained")

	if one_feature:
		features, targets = stack(data)
		for degree, result in _best_fits(report).items():
			weights: np.ndarray = result.weights
			plotter.draw_fit_line(
				features[:, 0],
				targets,
				lambda x, weights=weights, degree=degree: estimate(weights, stack([augment(Sample([v], 0.), degree) for v in x])[0]),
				"fit",
				title="Regression curves",
				label=f"degree {degree}")

	plotter.draw_cost_line(degrees, summary["train_cost"].to_numpy(), "cost", label="training cost")
	if report.folds > 1:
		plotter.draw_cost_line(degrees, summary["validation_cost"].to_numpy(), "cost", label="validation cost")

	plotter.add_info(0.01, 0.99, f"folds: {report.folds}\nbest degree: {report.best_degree()}")
	return plotter.show(file_name)
