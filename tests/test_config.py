import pytest

from poly_regression.config import ConfigurationError, TrainingConfig


def test_defaults():
	config = TrainingConfig("data.txt").validate()

	assert config.folds == 1
	assert config.top_degree == 1
	assert config.learning_rate == 0.005
	assert config.epoch_limit == 10_000


def test_degree_range_is_inclusive():
	config = TrainingConfig("data.txt", min_degree=2, max_degree=4)

	assert config.top_degree == 4


@pytest.mark.parametrize("options", [
	{"folds": 0},
	{"min_degree": 0},
	{"min_degree": 3, "max_degree": 2},
	{"learning_rate": 0.},
	{"learning_rate": -1.},
	{"epoch_limit": 0},
	{"batch_size": -1},
	{"verbosity": 0},
	{"verbosity": 6},
])
def test_invalid_configuration(options):
	with pytest.raises(ConfigurationError):
		TrainingConfig("data.txt", **options).validate()


def test_seeded_rng_is_reproducible():
	config = TrainingConfig("data.txt", seed=42)

	assert config.make_rng().permutation(10).tolist() == config.make_rng().permutation(10).tolist()
