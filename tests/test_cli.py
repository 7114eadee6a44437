import json

import pytest

from maze_racer.cli import main

SCENARIO = "3,3\n@,.,.\n.,#,.\n.,.,X\n"


def write_maze(tmp_path, text=SCENARIO, name="maze.csv"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_race_prints_maze_and_report(tmp_path, capsys):
    assert main([write_maze(tmp_path), "--trials", "3"]) == 0
    out = capsys.readouterr().out
    assert "@ . . \n. # . \n. . X \n" in out
    assert "== depth_first ==" in out
    assert "== dijkstra ==" in out
    assert "path: 4 moves" in out
    assert "over 3 trials" in out


def test_single_agent_and_config(tmp_path, capsys):
    cfg = tmp_path / "race.json"
    cfg.write_text(json.dumps({"trials": 2, "show_maze": False, "show_paths": False}), encoding="utf-8")
    assert main([write_maze(tmp_path), "--config", str(cfg), "--agents", "dijkstra"]) == 0
    out = capsys.readouterr().out
    assert "== depth_first ==" not in out
    assert "over 2 trials" in out
    assert "*" not in out


def test_unreachable_destination_is_not_an_error(tmp_path, capsys):
    assert main([write_maze(tmp_path, "2,2\n@,#\n#,X\n"), "--trials", "1"]) == 0
    assert "no path found" in capsys.readouterr().out


def test_malformed_maze_exits_with_error(tmp_path):
    assert main([write_maze(tmp_path, "2,3\n@,.,.\n.,X\n"), "--trials", "1"]) == 1


def test_missing_maze_file(tmp_path):
    assert main([str(tmp_path / "missing.csv")]) == 1


def test_bad_extension(tmp_path):
    assert main([write_maze(tmp_path, name="maze.dat")]) == 1


def test_bad_config(tmp_path):
    cfg = tmp_path / "race.json"
    cfg.write_text(json.dumps({"trials": 0}), encoding="utf-8")
    assert main([write_maze(tmp_path), "--config", str(cfg)]) == 1


def test_usage_errors():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2
    with pytest.raises(SystemExit) as info:
        main(["a.csv", "b.csv"])
    assert info.value.code == 2


def test_single_byte_encoded_maze(tmp_path, capsys):
    path = tmp_path / "excel.csv"
    path.write_bytes(b"1,3\n@,\xa7,X\n")
    assert main([str(path), "--trials", "1"]) == 0
    assert "no path found" in capsys.readouterr().out


def test_maze_path_is_a_directory(tmp_path):
    folder = tmp_path / "mazes.csv"
    folder.mkdir()
    assert main([str(folder), "--trials", "1"]) == 1


@pytest.mark.parametrize("payload", ["[1, 2]", "7", "{not json"])
def test_config_not_an_object(tmp_path, payload):
    cfg = tmp_path / "race.json"
    cfg.write_text(payload, encoding="utf-8")
    assert main([write_maze(tmp_path), "--config", str(cfg)]) == 1
