import pytest

from poly_regression.load_data import DatasetFormatError, load_dataset


def _write(tmp_path, text, name="data.txt"):
	path = tmp_path / name
	path.write_text(text)
	return path


def test_load_text_dataset(tmp_path):
	path = _write(tmp_path, "# x1 x2 y\n1 2 3\n4.5  -1e-2\t6\n\n# trailing comment\n")
	data = load_dataset(path)

	assert len(data) == 2
	assert data[0].features.tolist() == [1., 2.]
	assert data[0].target == 3.
	assert data[1].features.tolist() == [4.5, -0.01]
	assert data[1].target == 6.


def test_single_token_line_is_an_error(tmp_path):
	path = _write(tmp_path, "1 2\n3\n")

	with pytest.raises(DatasetFormatError, match=":2:"):
		load_dataset(path)


def test_bad_token_is_reported(tmp_path):
	path = _write(tmp_path, "1 2\n3 abc 4\n")

	with pytest.raises(DatasetFormatError, match="'abc'"):
		load_dataset(path)


def test_bad_target_is_reported(tmp_path):
	path = _write(tmp_path, "1 x\n")

	with pytest.raises(DatasetFormatError, match="'x'"):
		load_dataset(path)


def test_ragged_rows_are_an_error(tmp_path):
	path = _write(tmp_path, "1 2\n1 2 3\n")

	with pytest.raises(DatasetFormatError, match="expected 1 features"):
		load_dataset(path)


def test_missing_file(tmp_path):
	with pytest.raises(DatasetFormatError, match="no file named"):
		load_dataset(tmp_path / "nope.txt")


def test_directory_is_rejected(tmp_path):
	with pytest.raises(DatasetFormatError, match="directory"):
		load_dataset(tmp_path)


def test_empty_dataset(tmp_path):
	path = _write(tmp_path, "# only comments\n")

	with pytest.raises(DatasetFormatError, match="no samples"):
		load_dataset(path)


def test_load_csv_dataset(tmp_path):
	path = _write(tmp_path, "km,age,price\n240000,10,3650\n139800,5,3800\n", name="cars.csv")
	data = load_dataset(path)

	assert len(data) == 2
	assert data[0].features.tolist() == [240000., 10.]
	assert data[1].target == 3800.


def test_load_csv_bad_value(tmp_path):
	path = _write(tmp_path, "km,price\n240000,cheap\n", name="cars.csv")

	with pytest.raises(DatasetFormatError):
		load_dataset(path)


def test_load_csv_needs_two_columns(tmp_path):
	path = _write(tmp_path, "price\n3650\n", name="cars.csv")

	with pytest.raises(DatasetFormatError):
		load_dataset(path)


def test_load_csv_ragged_row(tmp_path):
	path = _write(tmp_path, "x,y\n1,2\n1,2,3\n", name="ragged.csv")

	with pytest.raises(DatasetFormatError, match="invalid data format"):
		load_dataset(path)


def test_text_with_invalid_bytes_reports_line(tmp_path):
	path = tmp_path / "binary.txt"
	path.write_bytes(b"1 2\n\xff\xfe 3\n")

	with pytest.raises(DatasetFormatError, match=":2:"):
		load_dataset(path)
