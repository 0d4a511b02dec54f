from adventkit.y2023_day03 import gear_ratio_sum, main, part_number_sum

EXAMPLE = [
    "467..114..",
    "...*......",
    "..35..633.",
    "......#...",
    "617*......",
    ".....+.58.",
    "..592.....",
    "......755.",
    "...$.*....",
    ".664.598..",
]


def test_example_part_numbers():
    assert part_number_sum(EXAMPLE) == 4361


def test_example_gear_ratios():
    assert gear_ratio_sum(EXAMPLE) == 467835


def test_isolated_number_is_not_a_part():
    assert part_number_sum(["12.", "...", "..."]) == 0


def test_number_touching_symbol_counts_in_full():
    assert part_number_sum(["12#"]) == 12
    assert part_number_sum(["...", ".#.", "..45"[:3]]) == part_number_sum(["#4"])


def test_diagonal_symbol_counts():
    assert part_number_sum(["7..", ".$."]) == part_number_sum(["7$"])


def test_empty_schematic():
    assert part_number_sum([]) == gear_ratio_sum([]) == part_number_sum(["..."])


def test_star_with_one_number_is_not_a_gear():
    assert gear_ratio_sum(["12*.."]) == gear_ratio_sum(["....."])


def test_star_with_three_numbers_is_not_a_gear():
    assert gear_ratio_sum(["1.2", ".*.", "3.."]) == gear_ratio_sum(["..."])


def test_gear_product_of_two_numbers():
    assert gear_ratio_sum(["1*7"]) == 7


def test_number_touching_star_twice_counts_once():
    # 11 touches the star through two cells but is one number.
    assert gear_ratio_sum(["11.", "*..", "1.."]) == 11


def test_main_prints_results(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert str(part_number_sum(EXAMPLE)) in out
    assert str(gear_ratio_sum(EXAMPLE)) in out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "gone.txt")]) == 1