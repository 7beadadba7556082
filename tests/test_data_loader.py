"""变量取值表加载测试"""
import logging

import pytest

from data.data_loader import check_missing_values, load_bindings


@pytest.fixture
def bindings_csv(tmp_path):
    path = tmp_path / "bindings.csv"
    path.write_text("x,label,y\n1,a,2\n3,b,4.5\n")
    return path


def test_load_keeps_numeric_columns(bindings_csv, caplog):
    with caplog.at_level(logging.WARNING):
        frame = load_bindings(str(bindings_csv))
    assert list(frame.columns) == ["x", "y"]
    assert frame["y"].tolist() == [2.0, 4.5]
    assert "label" in caplog.text


def test_load_selected_columns_in_order(bindings_csv):
    frame = load_bindings(str(bindings_csv), columns=["y", "x"])
    assert list(frame.columns) == ["y", "x"]


def test_load_unknown_column(bindings_csv):
    with pytest.raises(KeyError):
        load_bindings(str(bindings_csv), columns=["z"])


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_bindings(str(tmp_path / "nope.csv"))


def test_check_missing_values(tmp_path):
    path = tmp_path / "gaps.csv"
    path.write_text("x,y\n1,\n,2\n3,4\n")
    frame = load_bindings(str(path))
    assert check_missing_values(frame) == 2
