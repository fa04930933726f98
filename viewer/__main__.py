import argparse
import asyncio
import json
import logging
import os

import pygame
import websockets

from game import InvalidSnapshot, State
from viewer.sprites import (
    BACKGROUND_COLOR,
    FOOD_COLOR,
    HAZARD_COLOR,
    CellsSprite,
    GameInfoSprite,
    GridSprite,
    Info,
    SnakeSprite,
)

logging.basicConfig(level=logging.DEBUG)
logger_websockets = logging.getLogger("websockets")
logger_websockets.setLevel(logging.WARN)

logger = logging.getLogger("Viewer")
logger.setLevel(logging.DEBUG)


def should_quit():
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            pygame.quit()
            raise SystemExit
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                pygame.quit()
                raise SystemExit


async def next_state(q: asyncio.Queue, timeout: float) -> State:
    """Wait for the next snapshot that parses"""
    while True:
        should_quit()
        try:
            raw = q.get_nowait()
        except asyncio.QueueEmpty:
            await asyncio.sleep(timeout)
            continue

        try:
            return State.from_json(json.loads(raw))
        except (json.JSONDecodeError, InvalidSnapshot) as e:
            logger.warning("Skipping message: %s", e)


async def main_loop(q: asyncio.Queue, SCALE):
    logger.info("Waiting for the first board from server")
    state = await next_state(q, 0.1)

    size = None
    display = None
    game_info = Info(text="Turn: 0")

    while True:
        WIDTH, HEIGHT = state.board.width, state.board.height
        if size != (WIDTH, HEIGHT):
            size = (WIDTH, HEIGHT)
            display = pygame.display.set_mode((int(SCALE * WIDTH), int(SCALE * HEIGHT)))

        game_info.text = f"Turn: {state.turn}"

        all_sprites = pygame.sprite.Group()
        all_sprites.add(GridSprite(WIDTH, HEIGHT, SCALE))
        all_sprites.add(CellsSprite(state.board.hazards, HAZARD_COLOR, WIDTH, HEIGHT, SCALE))
        all_sprites.add(CellsSprite(state.board.food, FOOD_COLOR, WIDTH, HEIGHT, SCALE))
        all_sprites.add(
            [
                SnakeSprite(snake, index, WIDTH, HEIGHT, SCALE)
                for index, snake in enumerate(state.board.snakes)
            ]
        )
        all_sprites.add(GameInfoSprite(game_info, 0, 0, WIDTH, SCALE))

        # Render Window
        display.fill(BACKGROUND_COLOR)
        all_sprites.update()
        all_sprites.draw(display)
        pygame.display.flip()

        state = await next_state(q, 0.05)


async def messages_handler(ws_path, queue):
    async with websockets.connect(ws_path) as websocket:
        await websocket.send(json.dumps({"cmd": "join"}))

        while True:
            r = await websocket.recv()
            queue.put_nowait(r)


async def run(ws_path, SCALE):
    q: asyncio.Queue = asyncio.Queue()
    await asyncio.gather(messages_handler(ws_path, q), main_loop(q, SCALE=SCALE))


if __name__ == "__main__":
    SERVER = os.environ.get("SERVER", "localhost")
    PORT = os.environ.get("PORT", "8000")

    parser = argparse.ArgumentParser()
    parser.add_argument("--server", help="IP address of the server", default=SERVER)
    parser.add_argument(
        "--scale", help="reduce size of window by x times", type=int, default=1
    )
    parser.add_argument("--port", help="TCP port", type=int, default=PORT)
    args = parser.parse_args()
    SCALE = max(1, 32 // args.scale)

    pygame.init()
    pygame.font.init()

    ws_path = f"ws://{args.server}:{args.port}/viewer"

    try:
        asyncio.run(run(ws_path, SCALE))
    finally:
        pygame.quit()
