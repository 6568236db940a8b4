# tests/test_dataset.py
from __future__ import annotations

import pytest
import torch

from linreg.dataset import MAX_LINE_LENGTH, RegressionDataset, build_dataset_from_file


def _assert_consistent(ds: RegressionDataset) -> None:
    n = len(ds)
    assert len(ds.train_in) == len(ds.train_out) == len(ds.train_order) == n
    assert sorted(ds.train_order) == list(range(n))


def test_ingest_from_text_adds_one_pair():
    ds = RegressionDataset()
    assert ds.ingest_from_text("1,5 -2\n") is True
    assert len(ds) == 1
    assert ds.train_in == [1.5]
    assert ds.train_out == [-2.0]
    assert ds.train_order == [0]


@pytest.mark.parametrize("line", ["", "\n", "12\n", "1 2 3\n", "text only\n"])
def test_ingest_from_text_ignores_lines_without_a_pair(line):
    ds = RegressionDataset()
    ds.ingest_from_text("0 0")
    assert ds.ingest_from_text(line) is False
    assert len(ds) == 1
    _assert_consistent(ds)


def test_ingest_from_arrays_appends_in_order():
    ds = RegressionDataset()
    ds.ingest_from_text("9 9")
    added = ds.ingest_from_arrays([1, 2, 3], [10, 20, 30])

    assert added == 3
    assert ds.train_in == [9.0, 1.0, 2.0, 3.0]
    assert ds.train_out == [9.0, 10.0, 20.0, 30.0]
    assert ds.train_order == [0, 1, 2, 3]


def test_ingest_from_arrays_keeps_existing_order():
    ds = RegressionDataset()
    ds.ingest_from_arrays([0, 1, 2], [0, 1, 2])
    ds.train_order[:] = [2, 0, 1]

    ds.ingest_from_arrays([3, 4], [3, 4])

    assert ds.train_order == [2, 0, 1, 3, 4]
    _assert_consistent(ds)


def test_ingest_from_arrays_accepts_tensors():
    ds = RegressionDataset()
    ds.ingest_from_arrays(torch.tensor([1.0, 2.0]), torch.tensor([3.0, 4.0]))
    assert ds.train_in == [1.0, 2.0]
    assert ds.train_out == [3.0, 4.0]


def test_ingest_from_arrays_rejects_length_mismatch():
    ds = RegressionDataset()
    ds.ingest_from_arrays([1], [2])
    with pytest.raises(ValueError):
        ds.ingest_from_arrays([1, 2, 3], [1, 2])
    assert len(ds) == 1
    _assert_consistent(ds)


def test_load_from_source_reads_pairs(data_file):
    ds = RegressionDataset()
    added = ds.load_from_source(data_file)

    assert added == 5
    assert ds.train_in == [-2.0, -1.0, 0.0, 1.0, 2.0]
    assert ds.train_out == [-1.0, 1.0, 3.0, 5.0, 7.0]
    _assert_consistent(ds)


def test_load_from_source_missing_file_reports_and_keeps_data(tmp_path, capsys):
    ds = RegressionDataset()
    ds.ingest_from_text("1 2")
    missing = tmp_path / "nope.txt"

    assert ds.load_from_source(missing) == 0

    err = capsys.readouterr().err
    assert "Could not open file at path" in err
    assert str(missing) in err
    assert ds.train_in == [1.0]
    _assert_consistent(ds)


def test_load_from_source_consumes_long_lines_in_chunks(tmp_path):
    first = "1" + " " * (MAX_LINE_LENGTH - 2) + "2"
    assert len(first) == MAX_LINE_LENGTH
    path = tmp_path / "long.txt"
    path.write_text(first + " 3 4\n", encoding="utf-8")

    ds = build_dataset_from_file(path)

    assert list(zip(ds.train_in, ds.train_out)) == [(1.0, 2.0), (3.0, 4.0)]


def test_getitem_returns_float64_tensors():
    ds = RegressionDataset()
    ds.ingest_from_arrays([1.5], [4.0])
    x, y = ds[0]
    assert x.dtype == torch.float64 and y.dtype == torch.float64
    assert x.item() == 1.5 and y.item() == 4.0


def test_reset_clears_everything():
    ds = RegressionDataset()
    ds.ingest_from_arrays([1, 2], [3, 4])
    ds.reset()
    assert len(ds) == 0
    _assert_consistent(ds)
