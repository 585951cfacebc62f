import numpy as np
from mpi4py import MPI

from BINSEARCHpy import __version__
from BINSEARCHpy.io.log_module import log_sequence_data, log_startup


def test_startup(capfd):
    size = MPI.COMM_WORLD.Get_size()
    log_startup("test")
    out, _ = capfd.readouterr()
    assert "Program <test>" in out
    assert f"v. {__version__}" in out
    assert f"Number of MPI processes:    {size}" in out


def test_log_sequence_data():
    lines = log_sequence_data(np.array([1.0, 2.0, 4.0]), np.array([0.5, 3.0]))
    assert "    length   :        3" in lines
    assert "    nqueries :        2" in lines
    assert any(line.startswith("    last") and "4.000000" in line for line in lines)


def test_log_sequence_data_without_queries():
    lines = log_sequence_data(np.array([1.0, 2.0]), np.array([]))
    assert lines[-1] == "    nqueries :        0"


def test_log_sequence_data_ignores_nan_queries():
    lines = log_sequence_data(np.array([1.0, 2.0]), np.array([np.nan, 0.5, 3.0]))
    assert "    nqueries :        3" in lines
    assert any(line.startswith("    min") and "0.500000" in line for line in lines)
    assert any(line.startswith("    max") and "3.000000" in line for line in lines)
    assert lines[-1] == "    nan      :        1"
    assert not any("nan" in line for line in lines[:-1])


def test_log_sequence_data_all_nan_queries():
    lines = log_sequence_data(np.array([1.0, 2.0]), np.array([np.nan]))
    assert not any(line.startswith("    min") for line in lines)
    assert lines[-1] == "    nan      :        1"
