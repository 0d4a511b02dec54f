import pytest

from adventkit.y2024_day11 import DEFAULT_STONES, main, stone_growth, total_stones


@pytest.mark.parametrize("stone", [0, 5, 12, 1629, 138983])
def test_no_blinks_keeps_one_stone(stone):
    assert stone_growth(stone, 0) == 1


@pytest.mark.parametrize("blinks", [1, 3, 10])
def test_zero_and_odd_digit_stones_stay_single(blinks):
    assert stone_growth(0, blinks) == 1
    assert stone_growth(5, blinks) == 1
    assert stone_growth(960, blinks) == 1


@pytest.mark.parametrize("stone", [65, 1629, 138983])
@pytest.mark.parametrize("blinks", [0, 1, 4, 20])
def test_even_digit_stones_double_each_blink(stone, blinks):
    assert stone_growth(stone, blinks + 1) == 2 * stone_growth(stone, blinks)


def test_total_is_sum_of_stones():
    stones = [65, 5, 0, 1629]
    assert total_stones(stones, 7) == sum(stone_growth(s, 7) for s in stones)
    assert total_stones([], 7) == 0


def test_default_stones_after_75_blinks():
    assert total_stones(DEFAULT_STONES, 75) == 3 * 2**75 + 5


def test_main_with_arguments(capsys):
    assert main(["--blinks", "0", "1", "22"]) == 0
    out = capsys.readouterr().out
    assert "Number of stones after 0 blinks: 2" in out