from pathlib import Path

import pytest

from taynguyen.campaign import (
    ConfigError,
    gather_forces,
    manage_logistics,
    plan_attack,
    read_config,
    resupply,
)
from taynguyen.runner import (
    Task,
    compare_files,
    format_lf,
    main,
    read_battlefield,
    read_supply,
    read_target,
    run_output,
    run_test,
    write_output,
)

LF1 = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5, 8, 9, 7, 9, 3, 2]
LF2 = [2, 7, 1, 8, 2, 8, 1, 8, 2, 8, 4, 5, 9, 0, 4, 5, 2]


def _config_text():
    return (
        "[" + ",".join(map(str, LF1)) + "]\n"
        + "[" + ",".join(map(str, LF2)) + "]\n"
        + "350 400\n"
        + "100 200\n"
        + "15\n"
    )


def _setup(root: Path, index: int = 0) -> None:
    cfg = root / "input" / "input_config"
    cfg.mkdir(parents=True)
    (cfg / f"config{index}.txt").write_text(_config_text())
    fake = root / "input" / "input_fake_target"
    fake.mkdir(parents=True)
    (fake / f"ftarget{index}.txt").write_text("go to 5 now\nignored 9\n")
    true = root / "input" / "input_true_target"
    true.mkdir(parents=True)
    (true / f"ttarget{index}.txt").write_text("kcL kaD\n")
    field = root / "input" / "input_battlefield"
    field.mkdir(parents=True)
    rows = [" ".join(str(r + c) for c in range(10)) for r in range(10)]
    (field / f"battlefield{index}.txt").write_text("\n".join(rows) + "\n")
    supply = root / "input" / "input_supply"
    supply.mkdir(parents=True)
    grid = [" ".join(str(r * 5 + c + 1) for c in range(5)) for r in range(5)]
    (supply / f"supply{index}.txt").write_text("\n".join(grid) + "\n40\n")


def test_task_paths_follow_layout(tmp_path):
    assert Task.GATHER_FORCES.output_path(3, tmp_path) == (
        tmp_path / "output" / "output_gather_forces" / "gforces3.txt"
    )
    assert Task.SUPPLY.expected_path(2, tmp_path) == (
        tmp_path / "expected" / "expected_supply" / "supply2.txt"
    )
    assert Task.FAKE_TARGET.input_path(1, tmp_path) == (
        tmp_path / "input" / "input_fake_target" / "ftarget1.txt"
    )


def test_all_expands_to_seven_tasks_in_order():
    tasks = Task.ALL.expand()
    assert [t.value for t in tasks] == [
        "TASK0", "TASK1", "TASK2_1", "TASK2_2", "TASK3", "TASK4", "TASK5"
    ]
    assert Task.LOGISTICS.expand() == (Task.LOGISTICS,)


def test_unknown_task_rejected():
    with pytest.raises(ValueError):
        Task("TASK9")
    with pytest.raises(ValueError):
        Task.ALL.output_path(0)


def test_format_lf():
    values = list(range(17))
    assert format_lf(values, 2) == "LF2=[" + ",".join(map(str, values)) + "]\n"


def test_read_target_first_line_only(tmp_path):
    path = tmp_path / "t.txt"
    path.write_text("  abc 12 \nsecond\n")
    assert read_target(path) == "  abc 12 "


def test_read_battlefield(tmp_path):
    path = tmp_path / "b.txt"
    path.write_text(" ".join(str(i) for i in range(100)))
    grid = read_battlefield(path)
    assert len(grid) == 10
    assert all(len(row) == 10 for row in grid)
    assert grid[3][7] == 37


def test_read_battlefield_too_short(tmp_path):
    path = tmp_path / "b.txt"
    path.write_text("1 2 3")
    with pytest.raises(ValueError):
        read_battlefield(path)


def test_read_supply(tmp_path):
    path = tmp_path / "s.txt"
    path.write_text(" ".join(str(i) for i in range(25)) + "\n99\n")
    grid, shortfall = read_supply(path)
    assert shortfall == 99
    assert grid[4] == [20, 21, 22, 23, 24]


def test_write_output_config(tmp_path):
    _setup(tmp_path)
    written = write_output(0, Task.CONFIG, tmp_path)
    assert written == [Task.CONFIG.output_path(0, tmp_path)]
    content = written[0].read_text()
    assert content == (
        format_lf(LF1, 1)
        + format_lf(LF2, 2)
        + "EXP1=350, EXP2=400\nT1=100, T2=200\nE=15\n"
    )


def test_write_output_gather_forces(tmp_path):
    _setup(tmp_path)
    (path,) = write_output(0, "TASK1", tmp_path)
    assert path.read_text() == f"GATHER_FORCES: {gather_forces(LF1, LF2)}\n"


def test_write_output_targets(tmp_path):
    _setup(tmp_path)
    (fake,) = write_output(0, Task.FAKE_TARGET, tmp_path)
    assert fake.read_text() == "DETERMINE_RIGHT_TARGET: Dak Lak\n"
    (true,) = write_output(0, Task.TRUE_TARGET, tmp_path)
    assert true.read_text().startswith("DECODE_TARGET: ")


def test_write_output_logistics_uses_unit_sums(tmp_path):
    _setup(tmp_path)
    (path,) = write_output(0, Task.LOGISTICS, tmp_path)
    t1, t2 = manage_logistics(sum(LF1), sum(LF2), 350, 400, 100, 200, 15)
    assert path.read_text() == f"MANAGE_LOGISTICS: T1={t1}, T2={t2}\n"


def test_write_output_battlefield_and_supply(tmp_path):
    _setup(tmp_path)
    cfg = read_config(tmp_path / "input" / "input_config" / "config0.txt")
    field = read_battlefield(Task.BATTLEFIELD.input_path(0, tmp_path))
    expected_attack = plan_attack(
        sum(cfg.lf1), sum(cfg.lf2), cfg.exp1, cfg.exp2, cfg.t1, cfg.t2, field
    )
    (attack,) = write_output(0, Task.BATTLEFIELD, tmp_path)
    assert attack.read_text() == f"PLAN_ATTACK: {expected_attack}\n"

    grid, shortfall = read_supply(Task.SUPPLY.input_path(0, tmp_path))
    (supply,) = write_output(0, Task.SUPPLY, tmp_path)
    assert supply.read_text() == f"RESUPPLY: {resupply(shortfall, grid)}\n"


def test_write_output_all(tmp_path):
    _setup(tmp_path)
    written = write_output(0, Task.ALL, tmp_path)
    assert len(written) == 7
    assert all(path.is_file() for path in written)


def test_write_output_missing_config(tmp_path):
    with pytest.raises(ConfigError):
        write_output(0, Task.CONFIG, tmp_path)


def test_run_output_reports_missing_config(tmp_path, capsys):
    written = run_output(0, 2, Task.CONFIG, tmp_path)
    assert written == []
    assert capsys.readouterr().out.count("ReadFile can't run") == 2


def test_run_output_reports_missing_input(tmp_path, capsys):
    cfg = tmp_path / "input" / "input_config"
    cfg.mkdir(parents=True)
    (cfg / "config0.txt").write_text(_config_text())
    written = run_output(0, 1, Task.SUPPLY, tmp_path)
    assert written == []
    assert "is not opened" in capsys.readouterr().out


def test_compare_files(tmp_path):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    a.write_text("x\ny\n")
    b.write_text("x\ny\n")
    assert compare_files(a, b) is True
    b.write_text("x\nz\n")
    assert compare_files(a, b) is False


def test_compare_files_stops_at_shorter(tmp_path):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    a.write_text("x\n")
    b.write_text("x\nmore\n")
    assert compare_files(a, b) is True


def test_compare_files_missing(tmp_path):
    a = tmp_path / "a.txt"
    a.write_text("x\n")
    with pytest.raises(FileNotFoundError):
        compare_files(a, tmp_path / "missing.txt")


def test_run_test_results(tmp_path, capsys):
    _setup(tmp_path)
    run_output(0, 1, Task.GATHER_FORCES, tmp_path)
    out = Task.GATHER_FORCES.output_path(0, tmp_path)
    exp = Task.GATHER_FORCES.expected_path(0, tmp_path)
    exp.parent.mkdir(parents=True)
    exp.write_text(out.read_text())

    results = run_test(0, 2, Task.GATHER_FORCES, tmp_path)
    assert results == [(Task.GATHER_FORCES, 0, True), (Task.GATHER_FORCES, 1, None)]
    captured = capsys.readouterr()
    assert "TESTCASE TASK1 0: PASS" in captured.out
    assert "OPENNING OUTPUT TASK1 1 ERROR!" in captured.err


def test_run_test_failure(tmp_path, capsys):
    _setup(tmp_path)
    run_output(0, 1, Task.CONFIG, tmp_path)
    exp = Task.CONFIG.expected_path(0, tmp_path)
    exp.parent.mkdir(parents=True)
    exp.write_text("LF1=[]\n")
    results = run_test(0, 1, Task.CONFIG, tmp_path)
    assert results == [(Task.CONFIG, 0, False)]
    assert "TESTCASE TASK0 0: FAILED" in capsys.readouterr().out


def test_main_round_trip(tmp_path, monkeypatch, capsys):
    _setup(tmp_path)
    monkeypatch.chdir(tmp_path)
    assert main(["RunOutput", "TASK1", "0", "1"]) == 0
    out = Task.GATHER_FORCES.output_path(0, tmp_path)
    assert out.read_text() == f"GATHER_FORCES: {gather_forces(LF1, LF2)}\n"
    exp = Task.GATHER_FORCES.expected_path(0, tmp_path)
    exp.parent.mkdir(parents=True)
    exp.write_text(out.read_text())
    assert main(["RunTest", "TASK1", "0", "1"]) == 0
    assert "TESTCASE TASK1 0: PASS" in capsys.readouterr().out


def test_main_invalid_task(capsys):
    assert main(["RunOutput", "TASK7"]) == 1
    assert "INCORRECTED TASK" in capsys.readouterr().out


def test_main_without_mode(capsys):
    assert main([]) == 2
    assert "usage" in capsys.readouterr().err