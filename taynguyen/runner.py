"""Batch runner: produce task outputs from input files and check them against expected files."""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path
from typing import Sequence

from taynguyen.campaign import (
    Config,
    ConfigError,
    decode_target,
    determine_right_target,
    gather_forces,
    manage_logistics,
    plan_attack,
    read_config,
    resupply,
)

GREEN = "\033[1;32m"
RED = "\033[1;31m"
YELLOW = "\033[1;33m"
RESET = "\033[0m"
BLUE = "\033[0;34m"

BATTLEFIELD_SIZE = 10
SUPPLY_SIZE = 5

_ENCODING = "latin-1"


class Task(str, Enum):
    """A task whose results are written to and checked from its own folder."""

    ALL = "ALL"
    CONFIG = "TASK0"
    GATHER_FORCES = "TASK1"
    FAKE_TARGET = "TASK2_1"
    TRUE_TARGET = "TASK2_2"
    LOGISTICS = "TASK3"
    BATTLEFIELD = "TASK4"
    SUPPLY = "TASK5"

    def expand(self) -> tuple["Task", ...]:
        """The concrete tasks this task stands for."""
        if self is Task.ALL:
            return tuple(task for task in Task if task is not Task.ALL)
        return (self,)

    def _location(self) -> tuple[str, str]:
        try:
            return _LOCATIONS[self]
        except KeyError:
            raise ValueError(f"{self.value} has no files of its own") from None

    def input_path(self, index: int, root: str | Path = ".") -> Path:
        folder, prefix = self._location()
        return Path(root) / "input" / f"input_{folder}" / f"{prefix}{index}.txt"

    def output_path(self, index: int, root: str | Path = ".") -> Path:
        folder, prefix = self._location()
        return Path(root) / "output" / f"output_{folder}" / f"{prefix}{index}.txt"

    def expected_path(self, index: int, root: str | Path = ".") -> Path:
        folder, prefix = self._location()
        return Path(root) / "expected" / f"expected_{folder}" / f"{prefix}{index}.txt"


_LOCATIONS = {
    Task.CONFIG: ("config", "config"),
    Task.GATHER_FORCES: ("gather_forces", "gforces"),
    Task.FAKE_TARGET: ("fake_target", "ftarget"),
    Task.TRUE_TARGET: ("true_target", "ttarget"),
    Task.LOGISTICS: ("logistic", "logistic"),
    Task.BATTLEFIELD: ("battlefield", "battlefield"),
    Task.SUPPLY: ("supply", "supply"),
}


def _read_ints(path: str | Path, count: int) -> list[int]:
    tokens = Path(path).read_text(encoding=_ENCODING).split()
    if len(tokens) < count:
        raise ValueError(f"{path}: expected {count} numbers, found {len(tokens)}")
    return [int(token) for token in tokens[:count]]


def _grid(values: Sequence[int], size: int) -> list[list[int]]:
    return [list(values[row * size:(row + 1) * size]) for row in range(size)]


def read_target(path: str | Path) -> str:
    """First line of a target file, without its line break."""
    text = Path(path).read_bytes().decode(_ENCODING)
    return text.split("\n", 1)[0]


def read_battlefield(path: str | Path) -> list[list[int]]:
    """Read a 10x10 grid of whitespace-separated integers."""
    values = _read_ints(path, BATTLEFIELD_SIZE * BATTLEFIELD_SIZE)
    return _grid(values, BATTLEFIELD_SIZE)


def read_supply(path: str | Path) -> tuple[list[list[int]], int]:
    """Read a 5x5 supply grid followed by the shortfall."""
    values = _read_ints(path, SUPPLY_SIZE * SUPPLY_SIZE + 1)
    return _grid(values, SUPPLY_SIZE), values[-1]


def format_lf(lf: Sequence[int], n: int) -> str:
    """Render a force list as one output line."""
    return f"LF{n}=[{','.join(str(v) for v in lf)}]\n"


def _render(task: Task, index: int, config: Config, root: Path) -> str:
    lf1_total = sum(config.lf1)
    lf2_total = sum(config.lf2)
    if task is Task.CONFIG:
        return (
            format_lf(config.lf1, 1)
            + format_lf(config.lf2, 2)
            + f"EXP1={config.exp1}, EXP2={config.exp2}\n"
            + f"T1={config.t1}, T2={config.t2}\n"
            + f"E={config.e}\n"
        )
    if task is Task.GATHER_FORCES:
        return f"GATHER_FORCES: {gather_forces(config.lf1, config.lf2)}\n"
    if task is Task.FAKE_TARGET:
        target = read_target(task.input_path(index, root))
        return f"DETERMINE_RIGHT_TARGET: {determine_right_target(target)}\n"
    if task is Task.TRUE_TARGET:
        message = read_target(task.input_path(index, root))
        return f"DECODE_TARGET: {decode_target(message, config.exp1, config.exp2)}\n"
    if task is Task.LOGISTICS:
        t1, t2 = manage_logistics(
            lf1_total, lf2_total, config.exp1, config.exp2, config.t1, config.t2, config.e
        )
        return f"MANAGE_LOGISTICS: T1={t1}, T2={t2}\n"
    if task is Task.BATTLEFIELD:
        field = read_battlefield(task.input_path(index, root))
        result = plan_attack(
            lf1_total, lf2_total, config.exp1, config.exp2, config.t1, config.t2, field
        )
        return f"PLAN_ATTACK: {result}\n"
    if task is Task.SUPPLY:
        grid, shortfall = read_supply(task.input_path(index, root))
        return f"RESUPPLY: {resupply(shortfall, grid)}\n"
    raise ValueError(f"unknown task {task!r}")


def write_output(index: int, task: Task | str = Task.ALL, root: str | Path = ".") -> list[Path]:
    """Compute the result of one test case for a task and write it; return the files written."""
    task = Task(task)
    root = Path(root)
    config = read_config(Path(root) / "input" / "input_config" / f"config{index}.txt")
    written = []
    for concrete in task.expand():
        content = _render(concrete, index, config, root)
        path = concrete.output_path(index, root)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding=_ENCODING)
        written.append(path)
    return written


def run_output(
    start: int = 0, stop: int = 10, task: Task | str = Task.ALL, root: str | Path = "."
) -> list[Path]:
    """Write outputs for the test cases in [start, stop); report cases that cannot run."""
    task = Task(task)
    written: list[Path] = []
    for index in range(start, stop):
        try:
            written.extend(write_output(index, task, root))
        except ConfigError:
            print("ReadFile can't run")
        except OSError as exc:
            print(f"{YELLOW}File {exc.filename} is not opened{RESET}")
    return written


def _lines(path: str | Path) -> list[str]:
    text = Path(path).read_bytes().decode(_ENCODING)
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def compare_files(output: str | Path, expected: str | Path) -> bool:
    """True when the two files agree on every line they both have."""
    output_lines = _lines(output)
    expected_lines = _lines(expected)
    return all(a == b for a, b in zip(output_lines, expected_lines))


def run_test(
    start: int = 0, stop: int = 10, task: Task | str = Task.ALL, root: str | Path = "."
) -> list[tuple[Task, int, bool | None]]:
    """Check outputs against expected files; None marks a case whose files are missing."""
    task = Task(task)
    results: list[tuple[Task, int, bool | None]] = []
    for concrete in task.expand():
        print(f"{BLUE}__________START TESTING {concrete.value}__________{RESET}")
        for index in range(start, stop):
            output = concrete.output_path(index, root)
            expected = concrete.expected_path(index, root)
            label = f"{concrete.value} {index}"
            try:
                passed: bool | None = compare_files(output, expected)
            except FileNotFoundError:
                which = "OUTPUT" if not output.is_file() else "EXPECTED"
                print(f"{YELLOW}OPENNING {which} {label} ERROR!{RESET}", file=sys.stderr)
                passed = None
            else:
                if passed:
                    print(f"{GREEN}TESTCASE {label}: PASS{RESET}")
                else:
                    print(f"{RED}TESTCASE {label}: FAILED{RESET}")
            results.append((concrete, index, passed))
        print(f"{BLUE}__________END TESTING {concrete.value}__________{RESET}")
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """Command line: MODE [TASK [START STOP]] with MODE RunOutput or RunTest."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("usage: MODE [TASK [START STOP]]", file=sys.stderr)
        return 2
    mode = args[0]
    task_name = "TASK1"
    start, stop = 0, 1000
    if len(args) == 2:
        task_name = args[1]
    elif len(args) == 4:
        task_name = args[1]
        start, stop = int(args[2]), int(args[3])

    try:
        task = Task(task_name)
    except ValueError:
        print("INCORRECTED TASK")
        return 1

    if mode == "RunOutput":
        run_output(start, stop, task)
    elif mode == "RunTest":
        run_test(start, stop, task)
    return 0


if __name__ == "__main__":
    sys.exit(main())