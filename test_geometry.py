"""
Testes da geometria da grelha: shift, distance e towards.
"""

import itertools

from consts import ALL_MOVES, Move
from geometry import Point, distance, shift, towards


def test_shift():
    one_one = Point(1, 1)

    assert shift(one_one, Move.UP) == Point(1, 2)
    assert shift(one_one, Move.DOWN) == Point(1, 0)
    assert shift(one_one, Move.LEFT) == Point(0, 1)
    assert shift(one_one, Move.RIGHT) == Point(2, 1)
    print("✓ shift")


def test_distance():
    assert distance(Point(3, 3), Point(5, 0)) == 5
    assert Point(-2, 4).distance(Point(-2, 4)) == 0
    print("✓ distance")


def test_towards():
    three_three = Point(3, 3)

    assert towards(three_three, Point(0, 0)) == [Move.DOWN, Move.LEFT]
    assert towards(three_three, Point(0, 3)) == [Move.LEFT]
    assert towards(three_three, Point(0, 5)) == [Move.UP, Move.LEFT]
    assert towards(three_three, Point(3, 5)) == [Move.UP]
    assert towards(three_three, Point(5, 5)) == [Move.UP, Move.RIGHT]
    assert towards(three_three, Point(5, 3)) == [Move.RIGHT]
    assert towards(three_three, Point(5, 0)) == [Move.DOWN, Move.RIGHT]
    assert towards(three_three, Point(3, 0)) == [Move.DOWN]
    print("✓ towards")


def test_towards_same_point():
    # all four moves tie, the first two in enumeration order win
    assert towards(Point(2, 2), Point(2, 2)) == [Move.UP, Move.DOWN]


def test_towards_gets_closer():
    cells = [Point(x, y) for x in range(-2, 3) for y in range(-2, 3)]

    for a, b in itertools.product(cells, cells):
        if a == b:
            continue

        moves = towards(a, b)
        for move in moves:
            assert distance(shift(a, move), b) == distance(a, b) - 1

        best = min(distance(shift(a, m), b) for m in ALL_MOVES)
        ties = [m for m in ALL_MOVES if distance(shift(a, m), b) == best]
        assert len(moves) == (2 if len(ties) >= 2 else 1)
        assert moves == ties[:2]
    print("✓ towards always closes the distance")


def test_point_is_a_value():
    assert Point(1, 2) == Point(1, 2)
    assert Point(1, 2) != Point(2, 1)
    assert len({Point(1, 2), Point(1, 2)}) == 1
    assert Point(4, 5).to_tuple() == (4, 5)
    assert Point(4, 5).json == {"x": 4, "y": 5}


def test_move_tokens():
    assert [m.token for m in ALL_MOVES] == ["up", "down", "left", "right"]
    assert Move.from_token("left") is Move.LEFT


def run_all_tests():
    test_shift()
    test_distance()
    test_towards()
    test_towards_same_point()
    test_towards_gets_closer()
    test_point_is_a_value()
    test_move_tokens()
    print("✅ TODOS OS TESTES PASSARAM!")


if __name__ == "__main__":
    run_all_tests()
