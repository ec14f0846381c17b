import pytest

from puzzlebox.navigation import (
    EAST,
    FORWARD,
    LEFT,
    NORTH,
    RIGHT,
    SOUTH,
    WEST,
    Move,
    Ship,
    Waypoint,
    main,
    parse,
)

EXAMPLE = """\
F10
N3
F7
R90
F11"""


def test_manhattan_after_moves():
    assert Ship(0, 0, EAST).moves(parse(EXAMPLE)).manhattan() == 25


def test_manhattan_direct():
    assert Ship(214, -72, EAST).manhattan() == 286


def test_parse():
    assert parse(EXAMPLE) == [
        Move(FORWARD, 10),
        Move(NORTH, 3),
        Move(FORWARD, 7),
        Move(RIGHT, 90),
        Move(FORWARD, 11),
    ]


def test_parse_skips_garbage():
    assert parse("F10\nnonsense\nX4\nS2") == [Move(FORWARD, 10), Move(SOUTH, 2)]


def test_ship_move_forward():
    assert Ship(0, 0, EAST).move(parse(EXAMPLE)[0]) == Ship(10, 0, EAST)


@pytest.mark.parametrize(
    "move, heading",
    [
        (Move(RIGHT, 90), SOUTH),
        (Move(LEFT, 90), NORTH),
        (Move(RIGHT, 180), WEST),
        (Move(LEFT, 270), SOUTH),
        (Move(RIGHT, 360), EAST),
    ],
)
def test_ship_turns(move, heading):
    assert Ship(3, 4, EAST).move(move) == Ship(3, 4, heading)


def test_ship_moves_in_absolute_directions():
    moves = [Move(NORTH, 3), Move(WEST, 5), Move(SOUTH, 1), Move(EAST, 2)]
    assert Ship(0, 0, NORTH).moves(moves) == Ship(-3, 2, NORTH)


@pytest.mark.parametrize(
    "start, move, want",
    [
        (Waypoint(10, 1, Ship(0, 0, EAST)), Move(FORWARD, 10), Waypoint(10, 1, Ship(100, 10, EAST))),
        (Waypoint(10, 1, Ship(100, 10, EAST)), Move(NORTH, 3), Waypoint(10, 4, Ship(100, 10, EAST))),
        (Waypoint(10, 4, Ship(100, 10, EAST)), Move(FORWARD, 7), Waypoint(10, 4, Ship(170, 38, EAST))),
        (Waypoint(10, 4, Ship(170, 38, EAST)), Move(RIGHT, 90), Waypoint(4, -10, Ship(170, 38, EAST))),
        (Waypoint(4, -10, Ship(170, 38, EAST)), Move(FORWARD, 11), Waypoint(4, -10, Ship(214, -72, EAST))),
    ],
)
def test_waypoint_move(start, move, want):
    assert start.move(move) == want


def test_waypoint_rotations_cancel():
    start = Waypoint(10, 4, Ship())
    assert start.move(Move(LEFT, 90)).move(Move(RIGHT, 90)) == start
    assert start.move(Move(LEFT, 270)) == start.move(Move(RIGHT, 90))


def test_waypoint_moves():
    assert Waypoint(10, 1, Ship(0, 0, EAST)).moves(parse(EXAMPLE)).ship.manhattan() == 286


def test_main(tmp_path, capsys):
    path = tmp_path / "moves.txt"
    path.write_text(EXAMPLE + "\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.split() == ["25", "286"]