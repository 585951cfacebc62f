import pytest
from mpi4py import MPI

from BINSEARCHpy.main import main, parse_args


def test_parse_args():
    assert parse_args(["binsearch-locate", "locate.yaml"]) == "locate.yaml"


def test_parse_args_usage(capfd):
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["binsearch-locate"])
    assert excinfo.value.code == 1
    out, _ = capfd.readouterr()
    assert "Usage: binsearch-locate <yaml_file>" in out


@pytest.mark.skipif(MPI.COMM_WORLD.rank != 0, reason="only rank 0 writes output")
def test_main_writes_positions(tmp_path, capfd):
    yaml_file = tmp_path / "locate.yaml"
    yaml_file.write_text(
        "input_locate:\n"
        "  sequence: [1.0, 3.0, 5.0, 7.0, 9.0]\n"
        "  queries: [0.0, 5.0, 9.0]\n"
        f"  work_dir: {tmp_path}\n"
        "  output_dir: output\n"
        "  prefix: cli\n"
        "  check_sorted: true\n"
        "  precision: 1\n"
    )

    main(["binsearch-locate", str(yaml_file)])

    output = tmp_path / "output" / "cli_positions.dat"
    assert output.read_text().splitlines() == ["# query position", " 0.0 1", " 5.0 3", " 9.0 6"]

    out, _ = capfd.readouterr()
    assert "INPUT Summary" in out
    assert "Locate Initialization" in out
    assert "binsearch :" in out


def test_main_skips_output(tmp_path):
    yaml_file = tmp_path / "locate.yaml"
    yaml_file.write_text(
        "input_locate:\n"
        "  sequence: [1.0, 2.0]\n"
        "  queries: [1.5]\n"
        f"  work_dir: {tmp_path}\n"
        "  write_output: false\n"
    )

    main(["binsearch-locate", str(yaml_file)])

    assert not (tmp_path / "output").exists()
