import argparse
import numpy as np

from poly_regression.config import ConfigurationError, TrainingConfig
from poly_regression.console import ConsoleReporter
from poly_regression.load_data import DatasetFormatError, load_dataset
from poly_regression.log import get_logger, set_verbosity
from poly_regression.orchestrator import CrossValidator, SweepReport
from poly_regression.plot import plot_report
from poly_regression.sample import Sample
from poly_regression.train import Trainer, TrainingError

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description="Fit polynomial regression models with mini-batch gradient descent")
	parser.add_argument("-f", dest="dataset_path", required=True, help="dataset file, one sample per line, target last")
	parser.add_argument("-k", dest="folds", type=int, default=1, help="number of folds for cross-validation (1 skips it)")
	parser.add_argument("-d", dest="min_degree", type=int, default=1, help="minimum polynomial degree")
	parser.add_argument("-D", dest="max_degree", type=int, default=None, help="maximum polynomial degree (defaults to -d)")
	parser.add_argument("-a", dest="learning_rate", type=np.float64, default=0.005, help="learning rate")
	parser.add_argument("-e", dest="epoch_limit", type=int, default=10_000, help="maximum number of epochs per fit")
	parser.add_argument("-m", dest="batch_size", type=int, default=0, help="batch size, 0 or 1 for full batch")
	parser.add_argument("-r", dest="randomize", action="store_true", help="shuffle data when folding and batching")
	parser.add_argument("-v", dest="verbosity", type=int, default=1, help="verbosity level [1-5]")
	parser.add_argument("--seed", type=int, default=None, help="seed for the shuffling")
	parser.add_argument("--plot", action="store_true", help="plot costs and fitted curves")
	return parser


def run(config: TrainingConfig) -> SweepReport:
	config.validate()
	data: list[Sample] = load_dataset(config.dataset_path)

	rng: np.random.Generator = config.make_rng()
	reporter: ConsoleReporter = ConsoleReporter(config.verbosity)
	trainer: Trainer = Trainer(config.learning_rate, config.epoch_limit, config.batch_size, config.randomize, rng)
	validator: CrossValidator = CrossValidator(trainer, config.folds, config.randomize, rng, reporter)

	report: SweepReport = validator.run(data, config.min_degree, config.top_degree)
	reporter.summary(report)
	if config.plot:
		plot_report(report, data)

	return report


def main(argv: list[str] | None = None) -> int:
	# parse arguments
	try:
		args = build_parser().parse_args(argv)
	except SystemExit as error:
		return error.code
	set_verbosity(args.verbosity)

	try:
		run(TrainingConfig(**vars(args)))
	except ConfigurationError as error:
		logger.error("invalid configuration: %s", error)
		return 1
	except DatasetFormatError as error:
		logger.error("cannot load dataset: %s", error)
		return 1
	except TrainingError as error:
		logger.error("training failed: %s", error)
		return 1

	return 0
