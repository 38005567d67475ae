import argparse

import pytest

import main


def test_parse_vehicle():
    assert main.parse_vehicle("5:2") == (5, 2)
    with pytest.raises(argparse.ArgumentTypeError):
        main.parse_vehicle("5")


def test_config_from_args():
    args = main.build_parser().parse_args(
        ["--length", "30", "--steps", "4", "--delay-ms", "0",
         "--vehicle", "1:0", "--vehicle", "9:3", "--backend", "numba"]
    )
    cfg = main.config_from_args(args)
    assert cfg.road_length == 30
    assert cfg.total_steps == 4
    assert cfg.vehicles == [(1, 0), (9, 3)]
    assert cfg.backend == "numba"


def test_main_runs_and_saves(tmp_path, capsys):
    result = main.main(
        ["--steps", "2", "--delay-ms", "0", "--save", "--output-dir", str(tmp_path)]
    )
    out = capsys.readouterr().out
    assert "Number of steps: 2" in out
    assert "vehicle1(8) from vehicle1(8)" in out
    assert result.final_vehicles[0][0] == 5
    assert len(list(tmp_path.glob("*.json"))) == 1
