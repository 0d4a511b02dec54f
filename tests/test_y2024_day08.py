from adventkit.y2024_day08 import (
    antinodes,
    main,
    parse_antennas,
    resonant_antinodes,
)

EXAMPLE = [
    "............",
    "........0...",
    ".....0......",
    ".......0....",
    "....0.......",
    "......A.....",
    "............",
    "............",
    "........A...",
    ".........A..",
    "............",
    "............",
]


def test_parse_antennas_groups_by_frequency():
    antennas = parse_antennas(["a.b", ".a."])
    assert antennas == {"a": [(0, 0), (1, 1)], "b": [(2, 0)]}


def test_example_antinodes():
    assert len(antinodes(EXAMPLE)) == 14


def test_example_resonant_antinodes():
    assert len(resonant_antinodes(EXAMPLE)) == 34


def test_antinodes_are_resonant_antinodes():
    assert antinodes(EXAMPLE) <= resonant_antinodes(EXAMPLE)


def test_antinodes_stay_inside_grid():
    width, height = len(EXAMPLE[0]), len(EXAMPLE)
    for x, y in resonant_antinodes(EXAMPLE):
        assert 0 <= x < width and 0 <= y < height


def test_points_between_antennas_count():
    assert (1, 0) in antinodes(["a..a......"])


def test_lone_antennas_make_no_antinodes():
    grid = ["a...", "..b.", "...."]
    assert antinodes(grid) == set()
    assert resonant_antinodes(grid) == set()


def test_paired_antennas_are_resonant():
    grid = ["a...", "....", "..a."]
    assert {(0, 0), (2, 2)} <= resonant_antinodes(grid)


def test_main_prints_count(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert f"antinode: {len(antinodes(EXAMPLE))}" in out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1