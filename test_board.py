"""
Testes das consultas ao tabuleiro e do flood fill de bolsas livres.
"""

from board import Board
from game import Snake
from geometry import Point


def pts(*coords):
    return [Point(x, y) for x, y in coords]


def test_in_bounds():
    board = Board(height=10, width=10)

    assert board.in_bounds(Point(0, 0)) == True
    assert board.in_bounds(Point(-1, 0)) == False
    assert board.in_bounds(Point(9, 9)) == True
    assert board.in_bounds(Point(9, 10)) == False
    assert board.in_bounds(Point(10, 10)) == False
    print("✓ in_bounds")


def test_closest_food():
    board = Board(height=10, width=10, food=pts((1, 2), (1, 5)))

    assert board.closest_food(Point(0, 0)) == Point(1, 2)
    assert board.closest_food(Point(2, 3)) == Point(1, 2)
    assert board.closest_food(Point(4, 4)) == Point(1, 5)
    print("✓ closest_food")


def test_closest_food_ties_keep_first():
    board = Board(height=5, width=5, food=pts((0, 2), (2, 0)))
    assert board.closest_food(Point(0, 0)) == Point(0, 2)

    board = Board(height=5, width=5, food=pts((2, 0), (0, 2)))
    assert board.closest_food(Point(0, 0)) == Point(2, 0)


def test_closest_food_without_food():
    assert Board(height=5, width=5).closest_food(Point(0, 0)) is None


def test_lookups():
    a = Snake("a", 100, pts((1, 1), (1, 2)))
    b = Snake("b", 100, pts((3, 3), (1, 2)))
    board = Board(
        height=5, width=5, food=pts((0, 4)), hazards=pts((4, 0)), snakes=[a, b]
    )

    assert board.food_at(Point(0, 4))
    assert not board.food_at(Point(4, 0))
    assert board.hazard_at(Point(4, 0))
    assert not board.hazard_at(Point(0, 4))

    assert board.snake_at(Point(3, 3)) == b
    # overlapping cell reports the first snake listed
    assert board.snake_at(Point(1, 2)) == a
    assert board.snake_at(Point(2, 2)) is None
    print("✓ food/hazard/snake lookups")


def test_pocket_sizes_open_board():
    sizes = Board(height=3, width=3).pocket_sizes()

    assert len(sizes) == 9
    assert set(sizes.values()) == {9}


def test_pocket_sizes_split_by_snake():
    wall = Snake("wall", 100, pts((2, 0), (2, 1), (2, 2)))
    sizes = Board(height=3, width=6, snakes=[wall]).pocket_sizes()

    for x in (0, 1):
        for y in range(3):
            assert sizes[Point(x, y)] == 6
    for x in (3, 4, 5):
        for y in range(3):
            assert sizes[Point(x, y)] == 9
    for segment in wall.body:
        assert segment not in sizes
    print("✓ pockets split by a snake wall")


def test_pocket_sizes_enclosed_cell():
    # a single free cell boxed in by a coiled snake
    ring = Snake("ring", 100, pts((1, 0), (2, 1), (1, 2), (0, 1)))
    sizes = Board(height=3, width=3, snakes=[ring]).pocket_sizes()

    assert sizes[Point(1, 1)] == 1
    assert sizes[Point(0, 0)] == 1
    assert sizes.get(Point(1, 0), 0) == 0


def test_pocket_sizes_single_cell_board():
    assert Board(height=1, width=1).pocket_sizes() == {Point(0, 0): 1}

    you = Snake("you", 100, pts((0, 0)))
    assert Board(height=1, width=1, snakes=[you]).pocket_sizes() == {}


def test_render():
    you = Snake("you", 100, pts((1, 1), (2, 1)))
    board = Board(height=2, width=3, food=pts((0, 0)), hazards=pts((2, 0)), snakes=[you])

    assert board.render() == "1  . @ #\n0  $ . !\n\n   0 1 2\n"
    print("✓ render")


def run_all_tests():
    test_in_bounds()
    test_closest_food()
    test_closest_food_ties_keep_first()
    test_closest_food_without_food()
    test_lookups()
    test_pocket_sizes_open_board()
    test_pocket_sizes_split_by_snake()
    test_pocket_sizes_enclosed_cell()
    test_pocket_sizes_single_cell_board()
    test_render()
    print("✅ TODOS OS TESTES PASSARAM!")


if __name__ == "__main__":
    run_all_tests()
