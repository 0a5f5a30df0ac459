from pathlib import Path
import numpy as np
import pandas as pd

from poly_regression.log import get_logger
from poly_regression.sample import Sample

logger = get_logger(__name__)


class DatasetFormatError(Exception):
	pass


def _check_path(path: Path) -> None:
	if not path.exists():
		raise DatasetFormatError(f"no file named {path} exists")
	if path.is_dir():
		raise DatasetFormatError(f"{path} must be a text file, not a directory")


def _parse_line(line: str, line_num: int, path: Path) -> Sample:
	tokens: list[str] = line.split()
	if len(tokens) < 2:
		raise DatasetFormatError(f"{path}:{line_num}: illegal data format, expected at least one feature and a target")

	values: list[np.float64] = []
	for token in tokens:
		try:
			values.append(np.float64(token))
		except ValueError:
			raise DatasetFormatError(f"{path}:{line_num}: invalid data format: '{token}' is not a number") from None

	return Sample(values[:-1], values[-1])


def load_text(path: Path) -> list[Sample]:
	data: list[Sample] = []
	with open(path, "rb") as f:
		for line_num, raw in enumerate(f, start=1):
			try:
				line: str = raw.decode("utf-8")
			except UnicodeDecodeError:
				raise DatasetFormatError(f"{path}:{line_num}: invalid data format: not a utf-8 text line") from None
			if line.startswith("#") or not line.strip():
				continue
			sample: Sample = _parse_line(line, line_num, path)
			if data and len(sample) != len(data[0]):
				raise DatasetFormatError(f"{path}:{line_num}: expected {len(data[0])} features, found {len(sample)}")
			data.append(sample)

	return data


def load_csv(path: Path) -> list[Sample]:
	# header row, target in the last column, every other column is a feature
	try:
		df: pd.DataFrame = pd.read_csv(path, delimiter=",", header=0, comment="#")
	except pd.errors.EmptyDataError:
		raise DatasetFormatError(f"{path}: no samples found") from None
	except (pd.errors.ParserError, UnicodeDecodeError) as error:
		raise DatasetFormatError(f"{path}: invalid data format: {error}") from None
	if df.shape[1] < 2:
		raise DatasetFormatError(f"{path}: expected at least one feature column and a target column")

	try:
		values: np.ndarray = df.apply(pd.to_numeric, errors="raise").to_numpy(dtype=np.float64)
	except ValueError as error:
		raise DatasetFormatError(f"{path}: invalid data format: {error}") from None
	if np.isnan(values).any():
		row_num: int = int(np.argwhere(np.isnan(values))[0][0])
		raise DatasetFormatError(f"{path}: missing value in data row {row_num + 1}")

	return [Sample(row[:-1], row[-1]) for row in values]


def load_dataset(path: str | Path) -> list[Sample]:
	"""Read samples from a whitespace separated text file or a .csv file."""
	path = Path(path)
	_check_path(path)

	if path.suffix.lower() == ".csv":
		data: list[Sample] = load_csv(path)
	else:
		data = load_text(path)

	if not data:
		raise DatasetFormatError(f"{path}: no samples found")

	logger.info("loaded %d samples with %d features from %s", len(data), len(data[0]), path)
	return data
