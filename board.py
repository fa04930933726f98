import logging
from collections import deque
from typing import Dict, List, Optional, Set

from consts import TILE_SYMBOLS, Tiles
from geometry import Point

logger = logging.getLogger("Board")
logger.setLevel(logging.DEBUG)


class Board:
    """Static queries over one board snapshot"""

    def __init__(
        self,
        height: int,
        width: int,
        food: Optional[List[Point]] = None,
        hazards: Optional[List[Point]] = None,
        snakes: Optional[list] = None,
    ):
        self._height = height
        self._width = width
        self._food = list(food or [])
        self._hazards = list(hazards or [])
        self._snakes = list(snakes or [])

    @property
    def height(self):
        return self._height

    @property
    def width(self):
        return self._width

    @property
    def size(self):
        return (self._width, self._height)

    @property
    def food(self):
        return self._food

    @property
    def hazards(self):
        return self._hazards

    @property
    def snakes(self):
        return self._snakes

    @property
    def json(self):
        return {
            "height": self._height,
            "width": self._width,
            "food": [f.json for f in self._food],
            "hazards": [h.json for h in self._hazards],
            "snakes": [s.json for s in self._snakes],
        }

    def in_bounds(self, point: Point) -> bool:
        return 0 <= point.x < self._width and 0 <= point.y < self._height

    def food_at(self, point: Point) -> bool:
        return point in self._food

    def hazard_at(self, point: Point) -> bool:
        return point in self._hazards

    def snake_at(self, point: Point):
        """First snake whose body covers `point`, or None"""
        for snake in self._snakes:
            if point in snake.body:
                return snake
        return None

    def closest_food(self, point: Point) -> Optional[Point]:
        # min() keeps the first of equally distant candidates
        if not self._food:
            return None
        return min(self._food, key=point.distance)

    def occupied(self) -> Set[Point]:
        return {segment for snake in self._snakes for segment in snake.body}

    def pocket_sizes(self) -> Dict[Point, int]:
        """
        Size of the free region each unoccupied cell belongs to.

        Cells covered by any snake have no entry; callers read them as 0.
        """
        blocked = self.occupied()
        sizes: Dict[Point, int] = {}
        pockets = 0

        for x in range(self._width):
            for y in range(self._height):
                point = Point(x, y)
                if point in sizes or point in blocked:
                    continue

                pocket = self._pocket_at(point, blocked)
                pockets += 1
                for member in pocket:
                    sizes[member] = len(pocket)

        logger.debug("%s free cells in %s pockets", len(sizes), pockets)
        return sizes

    def _pocket_at(self, start: Point, blocked: Set[Point]) -> Set[Point]:
        pocket = {start}
        queue = deque([start])

        while queue:
            current = queue.popleft()
            for neighbor in current.neighbors():
                if neighbor in pocket or neighbor in blocked:
                    continue
                if not self.in_bounds(neighbor):
                    continue
                pocket.add(neighbor)
                queue.append(neighbor)

        return pocket

    def tile(self, point: Point) -> Tiles:
        if self.food_at(point):
            return Tiles.FOOD
        snake = self.snake_at(point)
        if snake is not None:
            return Tiles.HEAD if point == snake.head else Tiles.BODY
        if self.hazard_at(point):
            return Tiles.HAZARD
        return Tiles.PASSAGE

    def render(self) -> str:
        """Text picture of the board, highest row first"""
        lines = []
        for y in reversed(range(self._height)):
            cells = " ".join(
                TILE_SYMBOLS[self.tile(Point(x, y))] for x in range(self._width)
            )
            lines.append(f"{y}  {cells}")

        bottom = " ".join(str(x) for x in range(self._width))
        lines.append("")
        lines.append(f"   {bottom}")
        return "\n".join(lines) + "\n"
