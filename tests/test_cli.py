import pytest

from adventsolve import day01, day02, day03
from adventsolve.cli import main, solve

WORD_SEARCH = (
    "MMMSXXMASM\n"
    "MSAMXMSMSA\n"
    "AMXSXMAAMM\n"
    "MSAMASMSMX\n"
    "XMASAMXAMM\n"
    "XXAMMXXAMA\n"
    "SMSMSASXSS\n"
    "SAXAMASAAA\n"
    "MAMMMXMMMM\n"
    "MXMXAXMASX\n"
)

EQUATIONS = (
    "190: 10 19\n"
    "3267: 81 40 27\n"
    "83: 17 5\n"
    "156: 15 6\n"
    "7290: 6 8 6 15\n"
    "161011: 16 10 13\n"
    "192: 17 8 14\n"
    "21037: 9 7 18 13\n"
    "292: 11 6 16 20\n"
)

DISK_MAP = "2333133121414131402"

LOCATIONS = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"
REPORTS = "7 6 4 2 1\n1 2 7 8 9\n9 7 6 2 1\n1 3 2 4 5\n8 6 4 4 1\n1 3 6 7 9\n"
MEMORY = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


@pytest.mark.parametrize(
    ("day", "part", "text", "expected"),
    [
        (4, 1, WORD_SEARCH, "18"),
        (4, 2, WORD_SEARCH, "9"),
        (7, 1, EQUATIONS, "3749"),
        (7, 2, EQUATIONS, "11387"),
        (9, 1, DISK_MAP, "1928"),
    ],
)
def test_solve_worked_examples(day, part, text, expected):
    assert solve(day, part, text) == expected


@pytest.mark.parametrize(
    ("day", "text", "module"),
    [(1, LOCATIONS, day01), (2, REPORTS, day02), (3, MEMORY, day03)],
)
def test_solve_dispatches_to_day_module(day, text, module):
    assert solve(day, 1, text) == module.process_part1(text)
    assert solve(day, 2, text) == module.process_part2(text)


@pytest.mark.parametrize("day", [0, 10, -1])
def test_solve_rejects_unknown_day(day):
    with pytest.raises(ValueError, match="no solver"):
        solve(day, 1, "")


@pytest.mark.parametrize("part", [0, 3])
def test_solve_rejects_unknown_part(part):
    with pytest.raises(ValueError, match="part must be"):
        solve(1, part, LOCATIONS)


def test_main_reads_input_file_and_prints_answer(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(WORD_SEARCH)
    assert main(["4", "1", "--input", str(path)]) == 0
    assert capsys.readouterr().out == "18\n"


def test_main_defaults_to_input_txt_in_working_directory(tmp_path, monkeypatch, capsys):
    (tmp_path / "input.txt").write_text(EQUATIONS)
    monkeypatch.chdir(tmp_path)
    assert main(["7", "2"]) == 0
    assert capsys.readouterr().out == "11387\n"


def test_main_day9_part2_prints_sections_then_works(tmp_path, capsys):
    path = tmp_path / "disk.txt"
    path.write_text("12345")
    assert main(["9", "2", "-i", str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "works"
    assert len(lines) == 3


def test_main_missing_file_exits_with_usage_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["1", "1", "--input", str(tmp_path / "absent.txt")])
    assert excinfo.value.code == 2
    assert "cannot read" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [["11", "1"], ["1", "3"], ["one", "1"], []])
def test_main_rejects_bad_arguments(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2