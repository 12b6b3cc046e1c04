"""Add up the products of well-formed multiply instructions in corrupted memory."""

import re

_MUL = re.compile(r"mul\(([+-]?[0-9]+),([+-]?[0-9]+)\)")
_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1
_DISABLE = "don't()"
_ENABLE = "do()"


def _fits_i32(value: int) -> bool:
    return _I32_MIN <= value <= _I32_MAX


def process_part1(text: str) -> str:
    """Sum x*y over every exact ``mul(x,y)`` with 32-bit signed operands."""
    total = 0
    for match in _MUL.finditer(text):
        x, y = int(match[1]), int(match[2])
        if _fits_i32(x) and _fits_i32(y):
            total += x * y
    return str(total)


def _strip_disabled(text: str) -> str:
    """Cut each ``don't()`` up to the next ``do()``; stop when none is left to cut."""
    while (start := text.find(_DISABLE)) != -1:
        end = text.find(_ENABLE, start)
        if end == -1:
            break
        text = text[:start] + text[end:]
    return text


def process_part2(text: str) -> str:
    """Like part 1, ignoring instructions between ``don't()`` and the next ``do()``."""
    return process_part1(_strip_disabled(text))