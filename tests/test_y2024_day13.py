import pytest

from adventkit.y2024_day13 import ClawMachine, main, parse_machines, solve_machine

EXAMPLE = """\
Button A: X+94, Y+34
Button B: X+22, Y+67
Prize: X=8400, Y=5400

Button A: X+26, Y+66
Button B: X+67, Y+21
Prize: X=12748, Y=12176

Button A: X+17, Y+86
Button B: X+84, Y+37
Prize: X=7870, Y=6450
"""


def test_parse_machines_reads_values():
    machines = parse_machines(EXAMPLE)
    assert len(machines) == 3
    assert machines[0] == ClawMachine(ax=94, ay=34, bx=22, by=67, px=8400, py=5400)
    assert machines[2].px == 7870 and machines[2].py == 6450


def test_example_first_machine():
    assert solve_machine(parse_machines(EXAMPLE)[0]) == 280


def test_example_second_machine_unsolvable():
    assert solve_machine(parse_machines(EXAMPLE)[1]) is None


def test_example_third_machine():
    assert solve_machine(parse_machines(EXAMPLE)[2]) == 200


def test_known_presses_cost():
    machine = ClawMachine(ax=3, ay=1, bx=1, by=2, px=3 * 4 + 5, py=4 + 2 * 5)
    assert solve_machine(machine) == 3 * 4 + 5


def test_prize_at_origin_costs_nothing():
    assert solve_machine(ClawMachine(ax=2, ay=3, bx=4, by=5, px=0, py=0)) == 0


def test_missing_coordinate_raises():
    with pytest.raises(ValueError):
        parse_machines("Button A: Y+3\n")


def test_prize_before_buttons_raises():
    with pytest.raises(ValueError):
        parse_machines("Prize: X=1, Y=2\n")


def test_main_reports_totals(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    costs = [solve_machine(m) for m in parse_machines(EXAMPLE)]
    total = sum(cost for cost in costs if cost is not None)
    assert f"Minimum tokens needed: {total}" in out
    assert "Machine 2 is not solvable" in out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1