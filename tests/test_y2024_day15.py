import pytest

from adventkit.y2024_day15 import box_gps_sum, main, parse_warehouse, run_moves

EXAMPLE = """\
########
#..O.O.#
##@.O..#
#...O..#
#.#.O..#
#...O..#
#......#
########

<^^>>>v
v<v>>v<<
"""


def test_parse_splits_map_and_joins_moves():
    warehouse, moves = parse_warehouse(EXAMPLE)
    assert warehouse == EXAMPLE.split("\n\n")[0].splitlines()
    assert moves == "<^^>>>vv<v>>v<<"


def test_example_gps_sum():
    warehouse, moves = parse_warehouse(EXAMPLE)
    assert box_gps_sum(run_moves(warehouse, moves)) == 2028


def test_boxes_and_robot_are_conserved():
    warehouse, moves = parse_warehouse(EXAMPLE)
    after = run_moves(warehouse, moves)
    assert "".join(after).count("O") == "".join(warehouse).count("O")
    assert "".join(after).count("@") == 1
    assert [len(row) for row in after] == [len(row) for row in warehouse]


def test_push_moves_box_line():
    warehouse = ["######", "#@O..#", "######"]
    assert run_moves(warehouse, ">") == ["######", "#.@O.#", "######"]


def test_blocked_push_changes_nothing():
    warehouse = ["#####", "#@OO#", "#####"]
    assert run_moves(warehouse, ">>") == warehouse


def test_wall_stops_robot():
    warehouse = ["####", "#@.#", "####"]
    assert run_moves(warehouse, "<^v") == warehouse


def test_no_moves_keeps_gps_sum():
    warehouse, _ = parse_warehouse(EXAMPLE)
    assert box_gps_sum(run_moves(warehouse, "")) == box_gps_sum(warehouse)


def test_unknown_move_raises():
    with pytest.raises(ValueError):
        run_moves(["###", "#@#", "###"], "x")


def test_missing_robot_raises():
    with pytest.raises(ValueError):
        run_moves(["###", "#.#", "###"], "<")


def test_empty_warehouse_has_no_boxes():
    assert box_gps_sum([]) == 0


def test_main_prints_result(tmp_path, capsys):
    path = tmp_path / "warehouse.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    assert "Result:2028" in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1