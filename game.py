"""
Per-turn game snapshot: snakes, the game/ruleset header and the full State.

A State is built fresh from every incoming message and thrown away once a
move has been decided; nothing here outlives a single turn.
"""

from typing import List

from board import Board
from consts import MAX_HEALTH
from geometry import INT16_MAX, INT16_MIN, Point


UINT16_MAX = 2**16 - 1


class InvalidSnapshot(ValueError):
    """The incoming snapshot is missing fields or holds impossible values"""


def _require(data: dict, key: str, kind, where: str):
    if not isinstance(data, dict):
        raise InvalidSnapshot(f"{where}: expected an object, got {type(data).__name__}")
    if key not in data:
        raise InvalidSnapshot(f"{where}: missing field '{key}'")
    value = data[key]
    # bool is an int subclass, never a valid coordinate or counter
    if isinstance(value, bool) or not isinstance(value, kind):
        raise InvalidSnapshot(f"{where}.{key}: unexpected value {value!r}")
    return value


def _ranged(value: int, low: int, high: int, where: str) -> int:
    if not low <= value <= high:
        raise InvalidSnapshot(f"{where}: {value} outside {low}..{high}")
    return value


def point_from_json(data: dict, where: str = "point") -> Point:
    x = _ranged(_require(data, "x", int, where), INT16_MIN, INT16_MAX, f"{where}.x")
    y = _ranged(_require(data, "y", int, where), INT16_MIN, INT16_MAX, f"{where}.y")
    return Point(x, y)


def points_from_json(data: list, where: str) -> List[Point]:
    if not isinstance(data, list):
        raise InvalidSnapshot(f"{where}: expected a list")
    return [point_from_json(p, f"{where}[{i}]") for i, p in enumerate(data)]


class Snake:
    def __init__(self, snake_id: str, health: int, body: List[Point], head: Point = None):
        self._id = snake_id
        self._health = health
        self._body = list(body)
        self._head = head if head is not None else self._body[0]

    @classmethod
    def from_json(cls, data: dict, where: str = "snake"):
        snake_id = _require(data, "id", str, where)
        health = _ranged(_require(data, "health", int, where), 0, MAX_HEALTH, f"{where}.health")
        body = points_from_json(_require(data, "body", list, where), f"{where}.body")
        if not body:
            raise InvalidSnapshot(f"{where}.body: snake {snake_id} has no body")

        head = point_from_json(data["head"], f"{where}.head") if "head" in data else body[0]
        if head != body[0]:
            raise InvalidSnapshot(f"{where}: head {head} is not the first body segment {body[0]}")

        return cls(snake_id, health, body, head)

    @property
    def id(self):
        return self._id

    @property
    def health(self):
        return self._health

    @property
    def body(self):
        return self._body

    @property
    def head(self):
        return self._head

    @property
    def length(self):
        return len(self._body)

    def tail(self) -> Point:
        return self._body[-1]

    def occupies(self, point: Point, ignore_tail: bool = False) -> bool:
        """
        True when `point` is covered by this snake.

        With `ignore_tail`, the tail cell counts as free: it is vacated by
        the time the next move resolves, unless the snake has just grown.
        """
        if ignore_tail and point == self.tail():
            return False
        return point in self._body

    def __eq__(self, other):
        return isinstance(other, Snake) and self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __repr__(self):
        return f"Snake({self.id}, health={self.health}, length={self.length})"

    @property
    def json(self):
        return {
            "id": self._id,
            "health": self._health,
            "body": [p.json for p in self._body],
            "head": self._head.json,
            "length": self.length,
        }


def board_from_json(data: dict, where: str = "board") -> Board:
    height = _ranged(_require(data, "height", int, where), 0, INT16_MAX, f"{where}.height")
    width = _ranged(_require(data, "width", int, where), 0, INT16_MAX, f"{where}.width")
    food = points_from_json(_require(data, "food", list, where), f"{where}.food")
    hazards = points_from_json(data.get("hazards", []), f"{where}.hazards")
    snakes = [
        Snake.from_json(s, f"{where}.snakes[{i}]")
        for i, s in enumerate(_require(data, "snakes", list, where))
    ]
    return Board(height, width, food, hazards, snakes)


class Ruleset:
    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return f"Ruleset({self.name})"


class Game:
    def __init__(self, game_id: str, ruleset: Ruleset):
        self.id = game_id
        self.ruleset = ruleset

    @classmethod
    def from_json(cls, data: dict, where: str = "game"):
        game_id = _require(data, "id", str, where)
        ruleset = _require(data, "ruleset", dict, where)
        name = _require(ruleset, "name", str, f"{where}.ruleset")
        return cls(game_id, Ruleset(name))


class State:
    """Full per-turn snapshot handed to the decision engine"""

    def __init__(self, game: Game, turn: int, board: Board, you: Snake):
        self.game = game
        self.turn = turn
        self.board = board
        self.you = you

    @classmethod
    def from_json(cls, data: dict):
        """Validate a raw snapshot; raises InvalidSnapshot"""
        game = Game.from_json(_require(data, "game", dict, "state"))
        turn = _ranged(_require(data, "turn", int, "state"), 0, UINT16_MAX, "state.turn")
        board = board_from_json(_require(data, "board", dict, "state"))
        you = Snake.from_json(_require(data, "you", dict, "state"), "you")

        if you not in board.snakes:
            raise InvalidSnapshot(f"you ({you.id}) is not one of the snakes on the board")

        return cls(game, turn, board, you)

    @property
    def json(self):
        return {
            "game": {"id": self.game.id, "ruleset": {"name": self.game.ruleset.name}},
            "turn": self.turn,
            "board": self.board.json,
            "you": self.you.json,
        }
