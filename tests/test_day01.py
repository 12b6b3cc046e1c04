import pytest

from adventsolve.day01 import process_part1, process_part2

EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def test_part1_example():
    assert process_part1(EXAMPLE) == "11"


def test_part2_example():
    assert process_part2(EXAMPLE) == "31"


def test_part1_identical_columns_have_no_distance():
    assert process_part1("1 1\n2 2\n7 7\n") == "0"


def test_part1_ignores_line_order():
    reordered = "\n".join(reversed(EXAMPLE.splitlines()))
    assert process_part1(reordered) == process_part1(EXAMPLE)


def test_part2_ignores_line_order():
    reordered = "\n".join(reversed(EXAMPLE.splitlines()))
    assert process_part2(reordered) == process_part2(EXAMPLE)


def test_part1_symmetric_in_columns():
    swapped = "\n".join(" ".join(reversed(line.split())) for line in EXAMPLE.splitlines())
    assert process_part1(swapped) == process_part1(EXAMPLE)


def test_part2_without_overlap_equals_identical_zero_case():
    assert process_part2("1 2\n3 4\n") == process_part1("5 5\n")


def test_part1_nonnegative():
    assert int(process_part1("10 1\n1 10\n")) >= 0


def test_part1_trailing_newline_irrelevant():
    assert process_part1(EXAMPLE.rstrip("\n")) == process_part1(EXAMPLE)


def test_missing_column_raises():
    with pytest.raises(ValueError):
        process_part1("3 4\n5\n")


def test_non_numeric_raises():
    with pytest.raises(ValueError):
        process_part2("a b\n")