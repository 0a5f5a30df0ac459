import pytest

from poly_regression.orchestrator import CrossValidator
from poly_regression.plot import LayoutGraphError, Plotter, plot_report
from poly_regression.sample import Sample
from poly_regression.train import Trainer


def test_plot_report_one_feature(tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)
	data = [Sample([x], 1. + x * x) for x in (-1., -0.5, 0., 0.5, 1., 1.5)]
	report = CrossValidator(Trainer(0.05, 100), folds=2).run(data, 1, 2)

	assert plot_report(report, data, "sweep.pdf") == "sweep.pdf"
	assert (tmp_path / "sweep.pdf").exists()


def test_plot_report_many_features(tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)
	data = [Sample([x, 2. * x], x) for x in (0., 1., 2., 3.)]
	report = CrossValidator(Trainer(0.01, 20)).run(data, 1)

	assert plot_report(report, data) == "train.pdf"
	assert (tmp_path / "train.pdf").exists()


def test_unknown_panel():
	plotter = Plotter(mosaic=[["cost"]])

	with pytest.raises(LayoutGraphError):
		plotter.draw_cost_line([1, 2], [0.5, 0.1], "fit")


def test_cost_panel_is_saved(tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)
	plotter = Plotter(mosaic=[["cost"]])
	plotter.draw_cost_line([1, 2, 3], [0.5, 0.2, 0.1], "cost", label="training cost")

	assert plotter.show("cost.pdf") == "cost.pdf"
	assert (tmp_path / "cost.pdf").exists()
