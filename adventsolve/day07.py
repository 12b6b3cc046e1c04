"""Decide which calibration equations can be made true with operators."""

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

_NUMBER = r"[+-]?[0-9]+"
_EQUATION = rf"({_NUMBER}): ({_NUMBER}(?:[ \t]+{_NUMBER})*)"
_FIRST = re.compile(_EQUATION)
_NEXT = re.compile(rf"\r?\n{_EQUATION}")
_I64_MIN, _I64_MAX = -(2**63), 2**63 - 1

_Operator = Callable[[int, int], int]


@dataclass(frozen=True)
class _Equation:
    test_value: int
    numbers: tuple[int, ...]


def _to_equation(match: "re.Match[str]") -> "_Equation | None":
    values = [int(match[1]), *(int(field) for field in match[2].split())]
    if not all(_I64_MIN <= value <= _I64_MAX for value in values):
        return None
    return _Equation(values[0], tuple(values[1:]))


def _parse(text: str) -> list[_Equation]:
    match = _FIRST.match(text)
    first = _to_equation(match) if match is not None else None
    if match is None or first is None:
        raise ValueError("expected at least one equation of the form 'value: a b ...'")
    equations = [first]
    pos = match.end()
    while (match := _NEXT.match(text, pos)) is not None:
        equation = _to_equation(match)
        if equation is None:
            break
        equations.append(equation)
        pos = match.end()
    return equations


def _multiply(a: int, b: int) -> int:
    return a * b


def _add(a: int, b: int) -> int:
    return a + b


def _concat(a: int, b: int) -> int:
    return int(f"{a}{b}")


def _reachable(
    target: int, current: int, numbers: Sequence[int], operators: Sequence[_Operator]
) -> bool:
    if not numbers:
        return current == target
    if current > target:
        return False
    head, rest = numbers[0], numbers[1:]
    return any(_reachable(target, op(current, head), rest, operators) for op in operators)


def _calibration_total(text: str, operators: Sequence[_Operator]) -> str:
    return str(
        sum(
            equation.test_value
            for equation in _parse(text)
            if _reachable(equation.test_value, 0, equation.numbers, operators)
        )
    )


def process_part1(text: str) -> str:
    """Sum test values reachable with multiplication and addition."""
    return _calibration_total(text, (_multiply, _add))


def process_part2(text: str) -> str:
    """Sum test values reachable with multiplication, addition and concatenation."""
    return _calibration_total(text, (_multiply, _add, _concat))