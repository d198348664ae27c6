import pytest

from gatesim.cli import main

LIBRARY = "AND2, 2, i1&i2, 5\nNOT, 1, ~i1, 2\n"
CIRCUIT = "INPUTS:\nA\nB\nCOMPONENTS:\nG0: AND2, w1, A, B\nG1: NOT, Y, w1\n"
STIMULI = "0, A, 1\n10, B, 1\n"


@pytest.fixture
def files(tmp_path):
    paths = {
        "lib": tmp_path / "cells.lib",
        "cir": tmp_path / "c.cir",
        "stim": tmp_path / "c.stim",
        "out": tmp_path / "out.sim",
    }
    paths["lib"].write_text(LIBRARY)
    paths["cir"].write_text(CIRCUIT)
    paths["stim"].write_text(STIMULI)
    return paths


def _args(files):
    return [str(files[k]) for k in ("lib", "cir", "stim", "out")]


def test_main_writes_output_and_prints(files, capsys):
    assert main(_args(files)) == 0
    printed = capsys.readouterr().out.splitlines()
    written = files["out"].read_text().splitlines()
    assert printed == written
    assert written[0] == "0, A, 1"


def test_main_verbose_prints_library(files, capsys):
    assert main(["--verbose", *_args(files)]) == 0
    out = capsys.readouterr().out
    assert "AND2  Input variables = 2" in out


def test_main_missing_file(files, capsys):
    files["lib"].unlink()
    assert main(_args(files)) == 1
    assert "cannot read" in capsys.readouterr().err
    assert not files["out"].exists()


def test_main_wrong_argument_count():
    with pytest.raises(SystemExit) as info:
        main(["only-one"])
    assert info.value.code == 2