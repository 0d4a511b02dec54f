import pytest

from adventkit.y2024_day19 import can_make, count_arrangements, parse_towels

EXAMPLE = """\
r, wr, b, g, bwu, rb, gb, br

brwrr
bggr
gbbr
rrbgbr
ubwu
bwurrg
brgr
bbrwb
"""


@pytest.fixture
def towels():
    return parse_towels(EXAMPLE)


def test_parse_patterns_and_designs(towels):
    patterns, designs = towels
    assert patterns == ["r", "wr", "b", "g", "bwu", "rb", "gb", "br"]
    assert designs[0] == "brwrr"
    assert designs[-1] == "bbrwb"
    assert len(designs) == 8


def test_parse_strips_whitespace_inside_patterns():
    patterns, designs = parse_towels("a b, ,c\nd\n\nabc\n\n")
    assert patterns == ["ab", "c", "d"]
    assert designs == ["abc"]


def test_example_possible_count(towels):
    patterns, designs = towels
    assert sum(can_make(design, patterns) for design in designs) == 6


def test_example_total_arrangements(towels):
    patterns, designs = towels
    assert sum(count_arrangements(design, patterns) for design in designs) == 16


def test_impossible_design(towels):
    patterns, _ = towels
    assert not can_make("ubwu", patterns)
    assert count_arrangements("ubwu", patterns) == 0


def test_can_make_agrees_with_count(towels):
    patterns, designs = towels
    for design in designs:
        assert can_make(design, patterns) == (count_arrangements(design, patterns) > 0)


def test_empty_design_has_one_arrangement():
    assert count_arrangements("", ["a"]) == 1
    assert can_make("", [])


def test_single_pattern_repeated_has_one_way():
    assert count_arrangements("aaaa", ["a"]) == 1


def test_empty_patterns_are_ignored():
    assert count_arrangements("ab", ["", "a", "b"]) == count_arrangements("ab", ["a", "b"])


def test_concatenation_keeps_design_possible(towels):
    patterns, designs = towels
    makeable = [design for design in designs if can_make(design, patterns)]
    assert can_make("".join(makeable), patterns)
    product = 1
    for design in makeable[:2]:
        product *= count_arrangements(design, patterns)
    assert count_arrangements("".join(makeable[:2]), patterns) >= product