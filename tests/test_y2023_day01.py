import pytest

from adventkit.y2023_day01 import (
    DIGIT_WORDS,
    digit_calibration,
    find_digit,
    main,
    spelled_calibration,
    total_calibration,
    total_spelled_calibration,
)

PART_ONE = ["1abc2", "pqr3stu8vwx", "a1b2c3d4e5f", "treb7uchet"]
PART_TWO = [
    "two1nine",
    "eightwothree",
    "abcone2threexyz",
    "xtwone3four",
    "4nineeightseven2",
    "zoneight234",
    "7pqrstsixteen",
]


def test_part_one_example():
    assert total_calibration(PART_ONE) == 142


def test_part_two_example():
    assert total_spelled_calibration(PART_TWO) == 281


@pytest.mark.parametrize("value, word", list(enumerate(DIGIT_WORDS)))
def test_each_word_is_found_from_both_ends(value, word):
    assert find_digit(f"x{word}x", True) == value
    assert find_digit(f"x{word}x", False) == value


def test_overlapping_words_last_digit_found_by_end():
    assert find_digit("eightwo", False) == find_digit("two", True)
    assert find_digit("eightwo", True) == find_digit("eight", True)


def test_no_digit_gives_none():
    assert find_digit("abcxyz", True) is None
    assert find_digit("", False) is None
    assert digit_calibration("abc") is None
    assert spelled_calibration("qqq") is None


def test_single_digit_is_used_twice():
    value = digit_calibration("treb7uchet")
    assert value // 10 == value % 10 == find_digit("7", True)


def test_spelled_matches_plain_for_numerals_only():
    for line in ["1abc2", "a1b2c3d4e5f", "9"]:
        assert spelled_calibration(line) == digit_calibration(line)


def test_plain_calibration_ignores_words():
    assert digit_calibration("one2three") == spelled_calibration("2")


def test_lines_without_digits_add_nothing():
    assert total_calibration(["abc", "a1b", ""]) == digit_calibration("a1b")
    assert total_spelled_calibration(["xyz", "two"]) == spelled_calibration("two")


def test_main_prints_totals(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(PART_TWO) + "\n", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert str(total_calibration(PART_TWO)) in out
    assert str(total_spelled_calibration(PART_TWO)) in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "could not open" in capsys.readouterr().err