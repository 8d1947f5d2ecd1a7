# taynguyen

A small simulation of the Tay Nguyen campaign. The package has two modules:

- `taynguyen.campaign` holds the calculations.
- `taynguyen.runner` runs them over numbered input files and checks the results
  against expected files.

## Installation

```
pip install .
```

## The calculations

All of these live in `taynguyen.campaign`.

- `parse_config(text)` and `read_config(path)` read a five-line configuration and
  return a frozen `Config` with the fields `lf1`, `lf2` (tuples of 17 unit counts),
  `exp1`, `exp2`, `t1`, `t2` and `e`. Each value is clamped to its range: unit
  counts to 0–1000, experience to 0–600, supplies to 0–3000 and `e` to 0–99.
  `ConfigError` (a `ValueError`) is raised in these cases:
  - the file cannot be opened;
  - there are fewer than five lines;
  - one of the first five lines is 100 characters or longer;
  - a value is missing or is not a number.
- `force_power(lf)` gives the weighted strength of one force, and
  `gather_forces(lf1, lf2)` gives the sum of both forces' strengths.
- `determine_right_target(target)` reads the runs of digits in a message.
  - One number from 3 to 7 names the target directly.
  - One number of 2 or less gives `"DECOY"`.
  - With two numbers the target is their sum modulo 5, plus 3.
  - With three numbers the target is their largest modulo 5, plus 3.
  - Anything else gives `"INVALID"`.

  The targets are `Buon Ma Thuot`, `Duc Lap`, `Dak Lak`, `National Route 21` and
  `National Route 14`.
- `decode_target(message, exp1, exp2)` first collapses repeated spaces with
  `normalize_spaces`.
  - When both experience values are at least 300, it shifts the letters forward by
    `(exp1 + exp2) % 26`. A character other than a letter, a digit or a space gives
    `"INVALID"`.
  - Otherwise it reverses the text.

  The result is then capitalised word by word. It is returned when it names a known
  target, and `"INVALID"` otherwise.
- `manage_logistics(lf1_power, lf2_power, exp1, exp2, t1, t2, e)` returns the
  adjusted supplies `(t1, t2)` for the event code `e`. The results are rounded up
  and limited to 0–3000.
- `plan_attack(lf1_power, lf2_power, exp1, exp2, t1, t2, battlefield)` returns the
  strength left after a 10×10 battlefield.
  - Cells in even rows cost 2/3 of their value.
  - Cells in odd rows cost 3/2 of their value.
  - A positive fractional result is rounded up.
- `resupply(shortfall, supply)` returns the smallest sum of five cells of a 5×5
  grid that covers the shortfall, or `-1` when no five cells do.

```python
from taynguyen.campaign import read_config, gather_forces, decode_target, resupply

config = read_config("input/input_config/config0.txt")
print(gather_forces(config.lf1, config.lf2))
print(decode_target("touht am noub", 100, 100))   # Buon Ma Thuot
```

A configuration file has five lines:

```
[200,150,100,80,50,30,20,10,5,2,1,1,1,1,0,0,0]
[...17 values...]
EXP1 EXP2
T1 T2
E
```

## Running the task suite

The `taynguyen` command, `taynguyen.runner.main`, processes numbered input files
laid out under the current directory:

- `input/input_config/config<i>.txt`
- `input/input_fake_target/ftarget<i>.txt`
- `input/input_true_target/ttarget<i>.txt`
- `input/input_battlefield/battlefield<i>.txt`
- `input/input_supply/supply<i>.txt`

To write results into `output/`:

```
taynguyen RunOutput
taynguyen RunOutput TASK1
taynguyen RunOutput TASK4 0 20
```

To compare the results in `output/` with the files in `expected/`:

```
taynguyen RunTest ALL
taynguyen RunTest TASK5 0 20
```

The task names are `TASK0`, `TASK1`, `TASK2_1`, `TASK2_2`, `TASK3`, `TASK4`,
`TASK5` and `ALL`; they are the values of the `Task` enum.

- Without a task, `TASK1` is used.
- Without a range, cases 0 to 999 are run.
- An unknown task prints `INCORRECTED TASK` and the command exits with status 1.
- With no arguments at all, the command prints a usage line and exits with status 2.

The same work is available from Python:

- `run_output(start, stop, task, root)` writes the outputs and returns the paths
  written. It prints `ReadFile can't run` for a case whose configuration cannot be
  read.
- `write_output(index, task, root)` does the same for a single case.
- `run_test(start, stop, task, root)` prints PASS or FAILED for each case. It
  returns `(task, index, passed)` tuples, with `passed` set to `None` when a file is
  missing.
- `compare_files(output, expected)` is true when the two files agree on every line
  that both of them have.

`read_target`, `read_battlefield`, `read_supply` and `format_lf` are the file
readers and the line formatter that the runner uses.

## Running the tests

```
pip install .[test]
pytest
```