import json
import logging
from pathlib import Path

import pytest

from augflow import cli

EDGE_LIST = "4 5\n0 1 2\n0 2 1\n1 2 1\n1 3 1\n2 3 2\n"


@pytest.fixture
def network_file(tmp_path: Path) -> Path:
    path = tmp_path / "net.txt"
    path.write_text(EDGE_LIST)
    return path


def test_solve_prints_value_with_default_endpoints(network_file, capsys) -> None:
    cli.main(["--quiet", "solve", str(network_file)])
    out = capsys.readouterr().out
    assert out.strip().splitlines()[-1] == "3"


@pytest.mark.parametrize("strategy", ["bfs", "dfs", "DFS"])
def test_solve_strategies_agree(network_file, capsys, strategy) -> None:
    cli.main(["--quiet", "solve", str(network_file), "--strategy", strategy])
    assert capsys.readouterr().out.strip() == "3"


def test_solve_explicit_endpoints(network_file, capsys) -> None:
    cli.main(["--quiet", "solve", str(network_file), "-s", "1", "-t", "3"])
    assert capsys.readouterr().out.strip() == "2"


def test_solve_min_cut_output(network_file, capsys) -> None:
    cli.main(["--quiet", "solve", str(network_file), "--min-cut"])
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0] == "3"
    cut = {tuple(map(int, line.split())) for line in lines[1:]}
    assert sum(c for _, _, c in cut) == 3


def test_solve_json(network_file, capsys) -> None:
    cli.main(["solve", str(network_file), "--json"])
    captured = capsys.readouterr()
    payload = json.loads(captured.out)
    assert "Max flow 0->3 = 3" in captured.err

    assert payload["source"] == 0
    assert payload["sink"] == 3
    assert payload["total_flow"] == 3
    assert payload["is_maximum"] is True
    assert payload["strategy"] == "bfs"
    assert 3 not in payload["reachable"]


def test_solve_yaml_network(tmp_path: Path, capsys) -> None:
    path = tmp_path / "net.yaml"
    path.write_text("num_nodes: 3\nedges:\n  - [0, 1, 10]\n  - [1, 2, 2]\n")
    cli.main(["--quiet", "solve", str(path)])
    assert capsys.readouterr().out.strip() == "2"


def test_solve_max_rounds_warns(network_file, capsys, caplog) -> None:
    caplog.set_level(logging.WARNING, logger="augflow.cli")
    cli.main(["solve", str(network_file), "--max-rounds", "1"])
    assert capsys.readouterr().out.strip().splitlines()[-1] == "1"
    assert any("lower bound" in r.getMessage() for r in caplog.records)


def test_solve_missing_file_exits_1(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["solve", str(tmp_path / "nope.txt")])
    assert exc_info.value.code == 1
    assert "not found" in capsys.readouterr().err


def test_solve_invalid_network_exits_1(tmp_path: Path, capsys) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("2 1\n0 0 1\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["solve", str(path)])
    assert exc_info.value.code == 1
    assert "InvalidNetworkError" in capsys.readouterr().err


@pytest.mark.parametrize("command", ["solve", "inspect"])
def test_undecodable_file_exits_1(tmp_path: Path, capsys, command) -> None:
    path = tmp_path / "net.txt"
    path.write_bytes(b"2 1\n0 1 \xff\xfe\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main([command, str(path)])
    assert exc_info.value.code == 1
    assert "not valid UTF-8" in capsys.readouterr().err


@pytest.mark.parametrize("command", ["solve", "inspect"])
def test_directory_path_exits_1(tmp_path: Path, capsys, command) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([command, str(tmp_path)])
    assert exc_info.value.code == 1
    assert "Cannot read network file" in capsys.readouterr().err


def test_solve_sink_out_of_range_exits_1(network_file) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["solve", str(network_file), "-t", "9"])
    assert exc_info.value.code == 1


def test_solve_unknown_strategy_is_usage_error(network_file) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["solve", str(network_file), "--strategy", "dinic"])
    assert exc_info.value.code == 2


def test_inspect(network_file, capsys) -> None:
    cli.main(["--quiet", "inspect", str(network_file)])
    out = capsys.readouterr().out
    assert "nodes: 4" in out
    assert "edges: 5" in out
    assert "total capacity: 7" in out


def test_inspect_invalid_exits_1(tmp_path: Path) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("nonsense\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(path)])
    assert exc_info.value.code == 1


def test_no_args_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: augflow" in capsys.readouterr().out


def test_verbose_enables_debug(network_file, caplog) -> None:
    caplog.set_level(logging.DEBUG)
    cli.main(["--verbose", "solve", str(network_file)])
    assert logging.getLogger("augflow").level == logging.DEBUG
    assert any("Debug logging enabled" in r.getMessage() for r in caplog.records)


def test_format_duration() -> None:
    assert cli._format_duration(0.123) == "123.0 ms"
    assert cli._format_duration(1.234) == "1.23 s"
    assert cli._format_duration(75.2) == "1m 15.2s"


def test_plain_output_keeps_logs_on_stdout(network_file, capsys) -> None:
    cli.main(["solve", str(network_file), "--json"])
    capsys.readouterr()
    cli.main(["solve", str(network_file)])
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[-1] == "3"
    assert any("Max flow 0->3 = 3" in line for line in lines[:-1])


def test_log_level_from_environment(network_file, monkeypatch, capsys) -> None:
    monkeypatch.setenv("AUGFLOW_LOG_LEVEL", "WARNING")
    cli.main(["solve", str(network_file)])
    assert logging.getLogger("augflow").level == logging.WARNING
    assert capsys.readouterr().out.strip() == "3"
