from enum import IntEnum

VERSION = "0.1.0"

MAX_HEALTH = 100
STARVING_HEALTH = 10  # below this we always go for food

# your own tail is only treated as vacating after this turn
TAIL_VACANCY_TURN = 2

DEFAULT_HUNGER_COEFFICIENT = 1.5

ROYALE = "royale"

GULP = "gulp"

CUSTOMIZATION = {
    "apiversion": "1",
    "author": "",
    "color": "#888888",
    "head": "tongue",
    "tail": "block-bum",
    "version": VERSION,
}


class Move(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @property
    def token(self):
        return self.name.lower()

    @classmethod
    def from_token(cls, token: str):
        return cls[token.upper()]


# enumeration order matters for tie output
ALL_MOVES = (Move.UP, Move.DOWN, Move.LEFT, Move.RIGHT)

FALLBACK_MOVE = Move.UP


class Tiles(IntEnum):
    PASSAGE = 0
    FOOD = 1
    HAZARD = 2
    HEAD = 3
    BODY = 4


TILE_SYMBOLS = {
    Tiles.PASSAGE: ".",
    Tiles.FOOD: "$",
    Tiles.HAZARD: "!",
    Tiles.HEAD: "@",
    Tiles.BODY: "#",
}
