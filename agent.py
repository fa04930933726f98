"""
Battlesnake heuristic agent

Architecture:
- Perception: parse and validate the per-turn snapshot (game.State)
- Board analysis: bounds, occupancy and free-pocket flood fill (board.Board)
- Decision: an ordered pipeline of narrowing stages over the four moves
- Transport: websocket client loop answering one move per snapshot

Narrowing rule
==============
Every stage filters the surviving candidate moves by a predicate on the
destination cell. If the predicate would reject every candidate, the stage
is skipped and the candidates are left untouched. Starting from all four
moves, the candidate set can therefore never become empty, and a move is
always produced, even on a lost board.

Stage order:
1. in bounds
2. snake collisions (tails of other snakes, and our own after turn 2, count as free)
3. threatened (cell next to the head of an equal or longer snake)
4. hazards (royale ruleset only)
5. largest pocket
6. food moves (when hungry, or when we are not strictly the longest)
7. kill moves (cell next to the head of a shorter snake)
8. seek kill (close in on the nearest shorter snake)
9. circle (chase our own tail)

The final move is picked at random among the survivors.
"""

import asyncio
import getpass
import json
import logging
import os
import random
from typing import Callable, Dict, List, Optional, Tuple

from consts import (
    ALL_MOVES,
    CUSTOMIZATION,
    DEFAULT_HUNGER_COEFFICIENT,
    FALLBACK_MOVE,
    GULP,
    ROYALE,
    STARVING_HEALTH,
    TAIL_VACANCY_TURN,
    Move,
)
from game import InvalidSnapshot, State
from geometry import Point

logger = logging.getLogger("Agent")
logger.setLevel(logging.DEBUG)

# Process-wide generator for the final tie-break
RNG = random.Random()

Moves = Tuple[Move, ...]


class HeuristicAgent:
    """
    Greedy single-ply move selection over one State
    """

    def __init__(self, state: State, rng: Optional[random.Random] = None):
        self.state = state
        self.rng = rng if rng is not None else RNG
        self.debug_info = {"stages": [], "reason": None}

    @property
    def you(self):
        return self.state.you

    @property
    def board(self):
        return self.state.board

    def destination(self, move: Move) -> Point:
        return self.you.head.shift(move)

    def narrow(self, stage: str, moves: Moves, keep: Callable[[Point], bool]) -> Moves:
        """Apply one stage; an empty result leaves `moves` unchanged"""
        after = tuple(move for move in moves if keep(self.destination(move)))
        prefix = f"game {self.state.game.id}, turn {self.state.turn}, {stage}"

        if not after:
            logger.debug(f"{prefix}: skipping because empty")
            after = moves
        elif after == moves:
            logger.debug(f"{prefix}: no changes")
        else:
            logger.debug(f"{prefix}: {_tokens(moves)} -> {_tokens(after)}")
            self.debug_info["reason"] = stage

        self.debug_info["stages"].append((stage, moves, after))
        return after

    def decide(self, hunger_coefficient: float = DEFAULT_HUNGER_COEFFICIENT) -> Tuple[Move, str]:
        """
        Run the whole pipeline once and return (move, shout)
        """
        state = self.state
        you = self.you
        board = self.board

        logger.debug(f"game {state.game.id}, turn {state.turn}\n{board.render()}")

        moves: Moves = ALL_MOVES

        moves = self.narrow("in bounds", moves, board.in_bounds)
        moves = self.narrow("snake collisions", moves, lambda p: not self.collides(p))
        moves = self.narrow("threatened", moves, lambda p: not self.threatened(p))

        if state.game.ruleset.name == ROYALE:
            moves = self.narrow("hazards", moves, lambda p: not board.hazard_at(p))

        pocket_sizes = board.pocket_sizes()
        largest = max(pocket_sizes.get(self.destination(move), 0) for move in moves)
        moves = self.narrow(
            "select largest pocket", moves, lambda p: pocket_sizes.get(p, 0) == largest
        )

        closest_food = board.closest_food(you.head)
        if closest_food is not None:
            food_distance = closest_food.distance(you.head)
            if self.need_food(food_distance, hunger_coefficient) or self.compete_for_biggest():
                moves = self.narrow(
                    "food moves", moves, lambda p: closest_food.distance(p) < food_distance
                )

        moves = self.narrow("kill moves", moves, self.kill_chance)

        prey = self.closest_smaller_snake()
        if prey is not None:
            prey_distance = you.head.distance(prey.head)
            moves = self.narrow(
                "seek kill", moves, lambda p: p.distance(prey.head) < prey_distance
            )

        tail = you.tail()
        tail_distance = you.head.distance(tail)
        moves = self.narrow("circle", moves, lambda p: p.distance(tail) < tail_distance)

        assert moves, "candidate moves can never be empty"
        logger.debug(
            f"game {state.game.id}, turn {state.turn}, selecting move from {_tokens(moves)}"
        )

        move = self.rng.choice(moves)
        shout = GULP if board.food_at(self.destination(move)) else ""
        return move, shout

    def collides(self, point: Point) -> bool:
        late = self.state.turn > TAIL_VACANCY_TURN
        return any(
            snake.occupies(point, ignore_tail=(snake != self.you or late))
            for snake in self.board.snakes
        )

    def need_food(self, distance: int, hunger_coefficient: float) -> bool:
        health = self.you.health
        return health < STARVING_HEALTH or distance > health * hunger_coefficient

    def compete_for_biggest(self) -> bool:
        """True unless we are strictly the longest snake"""
        others = [snake.length for snake in self.board.snakes if snake != self.you]
        return bool(others) and self.you.length <= max(others)

    def _heads_next_to(self, point: Point, qualifies: Callable) -> bool:
        heads = {snake.head for snake in self.board.snakes if qualifies(snake)}
        for neighbor in point.neighbors():
            if not self.board.in_bounds(neighbor) or neighbor == self.you.head:
                continue
            if neighbor in heads:
                return True
        return False

    def threatened(self, point: Point) -> bool:
        """An equal or longer head could reach `point` next turn"""
        return self._heads_next_to(point, lambda snake: snake.length >= self.you.length)

    def kill_chance(self, point: Point) -> bool:
        """A strictly shorter head could reach `point` next turn"""
        return self._heads_next_to(point, lambda snake: snake.length < self.you.length)

    def closest_smaller_snake(self):
        smaller = [snake for snake in self.board.snakes if snake.length < self.you.length]
        if not smaller:
            return None
        return min(smaller, key=lambda snake: self.you.head.distance(snake.head))


def _tokens(moves: Moves) -> List[str]:
    return [move.token for move in moves]


def decide(
    state: State,
    hunger_coefficient: float = DEFAULT_HUNGER_COEFFICIENT,
    rng: Optional[random.Random] = None,
) -> Tuple[Move, str]:
    return HeuristicAgent(state, rng).decide(hunger_coefficient)


def handle_snapshot(
    data: dict,
    hunger_coefficient: float = DEFAULT_HUNGER_COEFFICIENT,
    rng: Optional[random.Random] = None,
) -> Dict[str, str]:
    """Answer one raw snapshot with a move command"""
    try:
        state = State.from_json(data)
    except InvalidSnapshot as e:
        logger.error(f"Invalid snapshot, answering {FALLBACK_MOVE.token}: {e}")
        return {"move": FALLBACK_MOVE.token, "shout": ""}

    move, shout = decide(state, hunger_coefficient, rng)
    logger.info(f"turn {state.turn} move={move.token} shout={shout!r}")
    return {"move": move.token, "shout": shout}


def hunger_coefficient_from_env(environ=None) -> float:
    environ = os.environ if environ is None else environ
    raw = environ.get("HUNGER")
    if raw is None or raw == "":
        return DEFAULT_HUNGER_COEFFICIENT

    value = float(raw)
    if not value > 0:
        raise ValueError(f"HUNGER must be a positive number, got {raw!r}")
    return value


async def agent_loop(
    server_address="localhost:8000",
    agent_name="snake",
    hunger_coefficient: float = DEFAULT_HUNGER_COEFFICIENT,
):
    """Main agent loop"""
    import websockets

    async with websockets.connect(f"ws://{server_address}/player") as websocket:
        await websocket.send(
            json.dumps({"cmd": "join", "name": agent_name, "customization": CUSTOMIZATION})
        )
        logger.info(f"Agent {agent_name} joined the game")

        while True:
            try:
                message = json.loads(await websocket.recv())

                if not isinstance(message, dict) or "board" not in message:
                    logger.info(f"Ignoring message: {message}")
                    continue

                try:
                    command = handle_snapshot(message, hunger_coefficient)
                except Exception as decide_error:
                    # answer the fallback move and stay connected
                    logger.error(f"Error deciding move: {decide_error}", exc_info=True)
                    command = {"move": FALLBACK_MOVE.token, "shout": ""}

                await websocket.send(json.dumps({"cmd": "move", **command}))

            except websockets.exceptions.ConnectionClosedOK:
                logger.info("Server has cleanly disconnected us")
                return
            except Exception as e:
                logger.error(f"Error in agent loop: {e}", exc_info=True)
                break


def setup_logging(log_file="agent_debug.log"):
    # Configure logging with both file and console output
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.FileHandler(log_file), logging.StreamHandler()],
    )
    logging.getLogger("websockets").setLevel(logging.WARN)


# Entry point
if __name__ == "__main__":
    setup_logging()

    SERVER = os.environ.get("SERVER", "localhost")
    PORT = os.environ.get("PORT", "8000")
    NAME = os.environ.get("NAME", getpass.getuser())
    HUNGER = hunger_coefficient_from_env()

    try:
        asyncio.run(agent_loop(f"{SERVER}:{PORT}", NAME, HUNGER))
    except KeyboardInterrupt:
        logger.info("Agent stopped by user")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
