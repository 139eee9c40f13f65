"""
Tests for the command line front end.
"""
import json

import pytest

from olympus.cli import build_parser, config_from_args, main


def parse(*argv):
    return config_from_args(build_parser().parse_args(list(argv)))


def test_defaults():
    cfg = parse()
    assert cfg.initial_distance == 573_851_000.0
    assert cfg.width == 0.279
    assert cfg.mass == 117.0
    assert cfg.time_step == 0.01
    assert cfg.tartarus is False
    assert cfg.depth_aware_gravity is True


def test_short_flags():
    cfg = parse("-d", "1000", "-w", "0.5", "-m", "50", "-i", "0.1", "-t")
    assert cfg.initial_distance == 1000.0
    assert cfg.width == 0.5
    assert cfg.mass == 50.0
    assert cfg.time_step == 0.1
    assert cfg.tartarus is True


def test_long_flags():
    cfg = parse("--distance", "2000", "--integration_time", "0.05", "--shallow-gravity", "--max-steps", "7")
    assert cfg.initial_distance == 2000.0
    assert cfg.time_step == 0.05
    assert cfg.depth_aware_gravity is False
    assert cfg.max_steps == 7
    assert parse("--integration-time", "0.2").time_step == 0.2


def test_config_file_with_override(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"distance": 3000.0, "mass": 10.0, "tartarus": True}))
    cfg = parse("--config", str(path), "-m", "20")
    assert cfg.initial_distance == 3000.0
    assert cfg.mass == 20.0
    assert cfg.tartarus is True


def test_main_prints_report(capsys):
    assert main(["-d", "1000"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0] == "distance=1000.0, width=0.279, mass=117.0"
    assert "moonunits" in lines[1]
    assert "will strike after" in out


def test_main_rejects_bad_config(capsys):
    assert main(["-m", "0"]) == 2
    err = capsys.readouterr().err
    assert "mass must be positive" in err


def test_main_iteration_cap(capsys):
    assert main(["-d", "1000", "--max-steps", "5"]) == 2
    assert "max_steps=5" in capsys.readouterr().err


def test_main_csv_and_history(tmp_path, capsys):
    csv_path = tmp_path / "reports.csv"
    history_path = tmp_path / "history.csv"
    assert main(["-d", "500", "--csv", str(csv_path), "--history", str(history_path)]) == 0
    assert csv_path.read_text().startswith("t,velocity,distance")
    assert history_path.read_text().startswith("t,distance,velocity")


def test_unknown_flag_exits():
    with pytest.raises(SystemExit):
        main(["--colour", "black"])


def test_main_zero_altitude_history(tmp_path, capsys):
    history_path = tmp_path / "history.csv"
    assert main(["-d", "0", "--history", str(history_path)]) == 0
    assert "will strike after 0" in capsys.readouterr().out
    assert history_path.read_text().splitlines() == ["t,distance,velocity"]


def test_main_rejects_string_flag_in_config(tmp_path, capsys):
    path = tmp_path / "anvil.json"
    path.write_text(json.dumps({"distance": 1000.0, "tartarus": "false"}))
    assert main(["--config", str(path)]) == 2
    assert "tartarus must be true or false" in capsys.readouterr().err
