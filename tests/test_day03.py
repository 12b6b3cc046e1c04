from adventsolve.day03 import process_part1, process_part2

EXAMPLE1 = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_part1_example():
    assert process_part1(EXAMPLE1) == "161"


def test_part2_example():
    assert process_part2(EXAMPLE2) == "48"


def test_no_instructions_gives_zero():
    assert process_part1("nothing to see here") == "0"


def test_surrounding_noise_ignored():
    assert process_part1("xx%mul(2,3)yy") == process_part1("mul(2,3)")


def test_malformed_instructions_ignored():
    for broken in ("mul( 2,3)", "mul(2,3]", "mul[2,3)", "mul(2 ,3)", "mul(2,)", "MUL(2,3)"):
        assert process_part1(broken) == process_part1("")


def test_results_add_over_concatenation():
    a, b = "mul(7,8)junk", "mul(3,4)mul(1,9)"
    assert int(process_part1(a + b)) == int(process_part1(a)) + int(process_part1(b))


def test_negative_operand():
    assert int(process_part1("mul(-2,3)")) == -int(process_part1("mul(2,3)"))


def test_operand_out_of_i32_range_ignored():
    assert process_part1("mul(2147483648,1)mul(2,3)") == process_part1("mul(2,3)")


def test_part2_without_conditionals_matches_part1():
    assert process_part2(EXAMPLE1) == process_part1(EXAMPLE1)


def test_part2_skips_disabled_region():
    assert process_part2("don't()mul(4,5)do()mul(2,3)") == process_part1("mul(2,3)")


def test_part2_multiple_disabled_regions():
    text = "mul(1,2)don't()mul(9,9)do()mul(3,4)don't()mul(8,8)do()mul(5,6)"
    assert process_part2(text) == process_part1("mul(1,2)mul(3,4)mul(5,6)")


def test_part2_trailing_disable_without_enable_is_kept():
    text = "mul(2,3)don't()mul(4,5)"
    assert process_part2(text) == process_part1(text)


def test_part2_never_exceeds_part1_for_positive_products():
    assert int(process_part2(EXAMPLE2)) <= int(process_part1(EXAMPLE2))