from adventkit.y2024_day10 import (
    main,
    parse_topography,
    total_rating,
    total_score,
    trailhead_rating,
    trailhead_score,
)

EXAMPLE = """\
89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732
"""


def test_parse_skips_non_digits_and_empty_rows():
    assert parse_topography("0a1\n\n23\n") == [[0, 1], [2, 3]]


def test_example_total_score():
    assert total_score(parse_topography(EXAMPLE)) == 36


def test_example_total_rating():
    assert total_rating(parse_topography(EXAMPLE)) == 81


def test_rating_never_below_score():
    grid = parse_topography(EXAMPLE)
    for x, row in enumerate(grid):
        for y, height in enumerate(row):
            if height == 0:
                assert trailhead_rating(grid, (x, y)) >= trailhead_score(grid, (x, y))


def test_straight_trail():
    grid = parse_topography("0123456789")
    assert trailhead_score(grid, (0, 0)) == 1
    assert trailhead_rating(grid, (0, 0)) == trailhead_score(grid, (0, 0))


def test_broken_trail_reaches_nothing():
    grid = parse_topography("0123556789")
    assert total_score(grid) == 0
    assert total_rating(grid) == 0


def test_two_routes_to_one_summit():
    grid = parse_topography("01234\n12345\n23456\n34567\n45678\n56789")
    assert trailhead_score(grid, (0, 0)) < trailhead_rating(grid, (0, 0))


def test_main_prints_totals(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    grid = parse_topography(EXAMPLE)
    assert f"scores: {total_score(grid)}" in out
    assert f"ratings: {total_rating(grid)}" in out


def test_main_empty_map(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "Failed to read map." in capsys.readouterr().out