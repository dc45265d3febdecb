import csv
import json
import logging

import pytest

import batch
import main


def test_quiet_run_prints_only_moves(farms_dir, capsys) -> None:
    assert main.main([str(farms_dir / "bottleneck.txt"), "--quiet"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["L1-1", "L1-end L2-1", "L2-end"]


def test_default_run_echoes_farm_then_moves(farms_dir, capsys) -> None:
    assert main.main([str(farms_dir / "bottleneck.txt")]) == 0
    lines = capsys.readouterr().out.splitlines()
    blank = lines.index("")
    assert lines[0] == "2"
    assert lines[blank - 1] == "1-end"
    assert lines[blank + 1:] == ["L1-1", "L1-end L2-1", "L2-end"]


def test_structural_error_halts_before_solving(tmp_path, capsys) -> None:
    farm = tmp_path / "broken.txt"
    farm.write_text("0\n##start\ns 0 0\n##end\ne 1 0\ns-e\n", encoding="utf-8")
    assert main.main([str(farm)]) == 1
    assert capsys.readouterr().out == ""


def test_missing_file_is_reported(tmp_path, capsys) -> None:
    assert main.main([str(tmp_path / "nope.txt")]) == 1
    assert capsys.readouterr().out == ""


def test_unsolvable_farm_prints_no_schedule(farms_dir, capsys) -> None:
    assert main.main([str(farms_dir / "no_tunnels.txt"), "--quiet"]) == 1
    assert capsys.readouterr().out == ""


def test_save_writes_artifacts(farms_dir, tmp_path, capsys) -> None:
    out_root = tmp_path / "out"
    code = main.main([str(farms_dir / "example.txt"), "--quiet", "--save", "--output-root", str(out_root)])
    assert code == 0
    run_dir = out_root / "farm_example_ants_10_greedy"
    plan = json.loads((run_dir / "plan.json").read_text(encoding="utf-8"))
    assert plan["config"]["strategy"] == "greedy"
    assert plan["plan"]["stats"]["turns"] == 7
    schedule = json.loads((run_dir / "schedule.json").read_text(encoding="utf-8"))
    assert schedule[0] == {"turn": 1, "moves": ["L1-a1", "L2-b1", "L3-c1"]}
    assert (run_dir / "run.log").exists()
    with (out_root / "result.csv").open(newline="", encoding="utf-8") as handle:
        rows = list(csv.DictReader(handle))
    assert rows[-1]["turns"] == "7"


def test_batch_sweeps_ant_counts(farms_dir, tmp_path) -> None:
    out = tmp_path / "batch.csv"
    farms = ",".join(str(farms_dir / name) for name in ("bottleneck.txt", "no_tunnels.txt"))
    assert batch.main(["--farms", farms, "--ants", "1-3", "--out", str(out)]) == 0
    with out.open(newline="", encoding="utf-8") as handle:
        rows = list(csv.DictReader(handle))
    bottleneck = [row for row in rows if row["farm"] == "bottleneck"]
    assert [row["turns"] for row in bottleneck] == ["2", "3", "4"]
    unsolvable = [row for row in rows if row["farm"] == "no_tunnels"]
    assert len(unsolvable) == 3
    assert all("no tunnels" in row["error"] for row in unsolvable)


def test_parse_list_or_range() -> None:
    assert batch._parse_list_or_range("1-4") == [1, 2, 3, 4]
    assert batch._parse_list_or_range("2,5,9") == [2, 5, 9]
    assert batch._parse_list_or_range("7") == [7]


def test_batch_records_non_positive_ant_counts_as_errors(farms_dir, tmp_path) -> None:
    out = tmp_path / "batch.csv"
    farms = str(farms_dir / "bottleneck.txt")
    assert batch.main(["--farms", farms, "--ants", "0,2", "--out", str(out)]) == 0
    with out.open(newline="", encoding="utf-8") as handle:
        rows = list(csv.DictReader(handle))
    assert [row["ants"] for row in rows] == ["0", "2"]
    assert "number of ants must be positive" in rows[0]["error"]
    assert rows[0]["turns"] == ""
    assert rows[1]["error"] == ""
    assert rows[1]["turns"] == "3"


def test_batch_rejects_unknown_strategy(farms_dir, tmp_path) -> None:
    farms = str(farms_dir / "bottleneck.txt")
    with pytest.raises(SystemExit) as excinfo:
        batch.main(["--farms", farms, "--ants", "1", "--strategy", "fast", "--out", str(tmp_path / "b.csv")])
    assert excinfo.value.code == 2


def test_batch_rejects_unknown_strategy_from_env(farms_dir, tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("STRATEGY", "fast")
    with pytest.raises(SystemExit):
        batch.main(["--farms", str(farms_dir / "bottleneck.txt"), "--out", str(tmp_path / "b.csv")])


def test_run_log_is_detached_after_save(farms_dir, tmp_path, capsys) -> None:
    out_root = tmp_path / "out"
    args = [str(farms_dir / "bottleneck.txt"), "--quiet", "--save", "--output-root", str(out_root)]
    assert main.main(args) == 0
    logger = logging.getLogger("AntFarm")
    assert not [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    run_log = out_root / "farm_bottleneck_ants_2_greedy" / "run.log"
    size = run_log.stat().st_size
    assert main.main([str(farms_dir / "example.txt"), "--quiet"]) == 0
    assert run_log.stat().st_size == size
    assert "Run summary" in run_log.read_text(encoding="utf-8")


def test_all_routes_help_mentions_the_search_cap(capsys) -> None:
    with pytest.raises(SystemExit):
        main.parse_args(["--help"])
    assert "partial paths" in " ".join(capsys.readouterr().out.split())
