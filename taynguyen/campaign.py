"""Campaign calculations: configuration, forces, targets, logistics, attack and resupply."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from itertools import combinations
from pathlib import Path
from typing import Sequence

MAX_LINES = 5
MAX_LINE_LENGTH = 100
FORCE_UNITS = 17

LF_LIMIT = 1000
EXP_LIMIT = 600
T_LIMIT = 3000
E_LIMIT = 99

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

FORCE_WEIGHTS = (1, 2, 3, 4, 5, 7, 8, 9, 10, 12, 15, 18, 20, 30, 40, 50, 70)

TARGETS = {
    3: "Buon Ma Thuot",
    4: "Duc Lap",
    5: "Dak Lak",
    6: "National Route 21",
    7: "National Route 14",
}

INVALID = "INVALID"
DECOY = "DECOY"


class ConfigError(ValueError):
    """Raised when a campaign configuration cannot be read."""


@dataclass(frozen=True)
class Config:
    """Clamped campaign configuration."""

    lf1: tuple[int, ...]
    lf2: tuple[int, ...]
    exp1: int
    exp2: int
    t1: int
    t2: int
    e: int


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def _parse_leading_int(token: str) -> int:
    """Parse an integer prefix the way the configuration format expects."""
    text = token.lstrip()
    end = 0
    if text[:1] in ("+", "-"):
        end = 1
    digits_start = end
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    if end == digits_start:
        raise ConfigError(f"not a number: {token!r}")
    value = int(text[:end])
    if not _INT_MIN <= value <= _INT_MAX:
        raise ConfigError(f"number out of range: {token!r}")
    return value


def _parse_force_list(line: str) -> tuple[int, ...]:
    inner = line[1:-1]
    values = tuple(_parse_leading_int(part) for part in inner.split(","))
    if len(values) != FORCE_UNITS:
        raise ConfigError(
            f"expected {FORCE_UNITS} force values, got {len(values)}"
        )
    return tuple(_clamp(v, 0, LF_LIMIT) for v in values)


def _field(line: str, index: int) -> int:
    tokens = line.split()
    if len(tokens) <= index:
        raise ConfigError(f"missing value {index + 1} in line {line!r}")
    return _parse_leading_int(tokens[index])


def parse_config(text: str) -> Config:
    """Parse the five configuration lines and clamp every value to its range."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    lines = lines[:MAX_LINES]
    for line in lines:
        if len(line) >= MAX_LINE_LENGTH:
            raise ConfigError("configuration line too long")
    if len(lines) < MAX_LINES:
        raise ConfigError(f"expected {MAX_LINES} lines, got {len(lines)}")

    lf1 = _parse_force_list(lines[0])
    lf2 = _parse_force_list(lines[1])
    return Config(
        lf1=lf1,
        lf2=lf2,
        exp1=_clamp(_field(lines[2], 0), 0, EXP_LIMIT),
        exp2=_clamp(_field(lines[2], 1), 0, EXP_LIMIT),
        t1=_clamp(_field(lines[3], 0), 0, T_LIMIT),
        t2=_clamp(_field(lines[3], 1), 0, T_LIMIT),
        e=_clamp(_field(lines[4], 0), 0, E_LIMIT),
    )


def read_config(path: str | Path) -> Config:
    """Read and parse a configuration file."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise ConfigError(f"cannot open {path}: {exc}") from exc
    return parse_config(text)


def force_power(lf: Sequence[int]) -> int:
    """Weighted strength of one force."""
    if len(lf) != FORCE_UNITS:
        raise ValueError(f"expected {FORCE_UNITS} force values, got {len(lf)}")
    return sum(count * weight for count, weight in zip(lf, FORCE_WEIGHTS))


def gather_forces(lf1: Sequence[int], lf2: Sequence[int]) -> int:
    """Combined strength of both forces."""
    return force_power(lf1) + force_power(lf2)


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


def _is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def normalize_spaces(text: str) -> str:
    """Collapse runs of spaces and trim; a text with no words gains a trailing space."""
    words = [word for word in text.split(" ") if word]
    if not words:
        return text + " "
    return " ".join(words)


def _digit_runs(text: str) -> list[str]:
    runs: list[str] = []
    current = ""
    for ch in text:
        if _is_digit(ch):
            current += ch
        elif current:
            runs.append(current)
            current = ""
    if current:
        runs.append(current)
    return runs


def determine_right_target(target: str) -> str:
    """Identify the real target from the numbers embedded in a message."""
    runs = _digit_runs(target)
    if not runs or len(runs) > 3:
        return INVALID
    numbers = [int(run) for run in runs]
    if any(n > _INT_MAX for n in numbers):
        raise ValueError("number out of range in target")

    if len(numbers) == 1:
        (number,) = numbers
        if 3 <= number <= 7:
            target_id = number
        elif number <= 2:
            return DECOY
        else:
            return INVALID
    elif len(numbers) == 2:
        target_id = sum(numbers) % 5 + 3
    else:
        target_id = max(numbers) % 5 + 3
    return TARGETS.get(target_id, INVALID)


def _shift_letter(ch: str, shift: int) -> str:
    if _is_lower(ch):
        return chr((ord(ch) - ord("a") + shift) % 26 + ord("a"))
    if _is_upper(ch):
        return chr((ord(ch) - ord("A") + shift) % 26 + ord("A"))
    return ch


def _title_words(text: str) -> str:
    chars = list(text)
    if chars and _is_lower(chars[0]):
        chars[0] = chars[0].upper()
    for i in range(1, len(chars)):
        after_space = chars[i - 1] == " "
        if _is_upper(chars[i]) and not after_space:
            chars[i] = chars[i].lower()
        elif _is_lower(chars[i]) and after_space:
            chars[i] = chars[i].upper()
    return "".join(chars)


def decode_target(message: str, exp1: int, exp2: int) -> str:
    """Decode a target name by Caesar shift or reversal, depending on experience."""
    text = normalize_spaces(message)
    if exp1 >= 300 and exp2 >= 300:
        shift = (exp1 + exp2) % 26
        for ch in text:
            if not (_is_digit(ch) or _is_lower(ch) or _is_upper(ch) or ch == " "):
                return INVALID
        text = "".join(_shift_letter(ch, shift) for ch in text)
    else:
        text = text[::-1]
    text = _title_words(text)
    return text if text in TARGETS.values() else INVALID


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _bump_fraction(value: float) -> float:
    truncated = int(value)
    return float(truncated + 1) if truncated != value else value


def manage_logistics(
    lf1_power: int,
    lf2_power: int,
    exp1: int,
    exp2: int,
    t1: int,
    t2: int,
    e: int,
) -> tuple[int, int]:
    """Return the adjusted supplies (t1, t2) after the environment effect e."""
    new_t1 = _f32(t1)
    new_t2 = _f32(t2)
    if e == 0:
        total = _f32(new_t1 + new_t2)
        share = _f32(_f32(_f32(lf1_power) * total) / _f32(lf1_power + lf2_power))
        factor = _f32(1 + _f32(_f32(exp1 - exp2) / 100))
        delta1 = _f32(share * factor)
        delta2 = _f32(total - delta1)
        new_t1 = _f32(new_t1 + delta1)
        new_t2 = _f32(new_t2 + delta2)
    elif 1 <= e <= 9:
        delta1 = _f32(new_t1 * _f32(e / 100))
        delta2 = _f32(new_t2 * _f32(e / 200))
        new_t1 = _f32(new_t1 - delta1)
        new_t2 = _f32(new_t2 - delta2)
    elif 10 <= e <= 29:
        new_t1 = _f32(new_t1 + e * 50)
        new_t2 = _f32(new_t2 + e * 50)
    elif 30 <= e <= 59:
        new_t1 = _f32(new_t1 + _f32(_f32(new_t1 * e) / 200))
        new_t2 = _f32(new_t2 + _f32(_f32(new_t2 * e) / 500))

    new_t1 = _bump_fraction(new_t1)
    new_t2 = _bump_fraction(new_t2)
    return (
        _clamp(int(new_t1), 0, T_LIMIT),
        _clamp(int(new_t2), 0, T_LIMIT),
    )


def _check_grid(grid: Sequence[Sequence[int]], size: int, name: str) -> None:
    if len(grid) != size or any(len(row) != size for row in grid):
        raise ValueError(f"{name} must be a {size}x{size} grid")


def plan_attack(
    lf1_power: int,
    lf2_power: int,
    exp1: int,
    exp2: int,
    t1: int,
    t2: int,
    battlefield: Sequence[Sequence[int]],
) -> int:
    """Remaining strength after crossing a 10x10 battlefield, rounded up."""
    _check_grid(battlefield, 10, "battlefield")
    strength = lf1_power + lf2_power + (t1 + t2) * 2 + (exp1 + exp2) * 5
    remaining = _f32(strength)
    for row_index, row in enumerate(battlefield):
        for cell in row:
            if row_index % 2 == 0:
                loss = _f32(_f32(_f32(cell) * 2) / 3)
            else:
                loss = _f32(_f32(_f32(cell) * 3) / 2)
            remaining = _f32(remaining - loss)
    truncated = int(remaining)
    if truncated != remaining and remaining >= 0:
        return truncated + 1
    return truncated


def resupply(shortfall: int, supply: Sequence[Sequence[int]]) -> int:
    """Smallest total of five supply points covering the shortfall, or -1."""
    _check_grid(supply, 5, "supply")
    values = sorted(value for row in supply for value in row)
    best = 1_000_000
    for combo in combinations(values, 5):
        total = sum(combo)
        if shortfall <= total < best:
            best = total
    return -1 if best == 1_000_000 else best