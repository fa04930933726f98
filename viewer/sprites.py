import pygame

from dataclasses import dataclass

from geometry import Point

BACKGROUND_COLOR = "black"
GRID_COLOR = (40, 40, 40)
FOOD_COLOR = "green"
HAZARD_COLOR = (90, 90, 90)

SNAKE_COLORS = ["blue", "red", "yellow", "purple", "cyan"]


@dataclass
class Info:
    text: str


def cell_rect(point: Point, board_height: int, scale):
    """Screen rect of a board cell; board y grows up, screen y grows down"""
    return pygame.Rect(
        int(point.x * scale),
        int((board_height - 1 - point.y) * scale),
        int(scale),
        int(scale),
    )


def snake_color(index: int):
    return SNAKE_COLORS[index % len(SNAKE_COLORS)]


def head_color(index: int):
    color = pygame.Color(snake_color(index))
    return color.lerp(pygame.Color("white"), 0.5)


class GameInfoSprite(pygame.sprite.Sprite):
    def __init__(self, info: Info, column: int, line: int, WIDTH, SCALE):
        self.font = pygame.font.Font(None, int(SCALE))
        super().__init__()

        self.info = info
        self.line = line
        self.column = column
        self.image = pygame.Surface([WIDTH * SCALE, (self.line + 1) * SCALE])
        self.image.set_colorkey(BACKGROUND_COLOR)
        self.rect = self.image.get_rect()
        self.SCALE = SCALE

    def update(self):
        self.image.fill(BACKGROUND_COLOR)
        self.image.set_colorkey(BACKGROUND_COLOR)

        self.image.blit(
            self.font.render(
                self.info.text,
                True,
                "purple",
                BACKGROUND_COLOR,
            ),
            (self.column * self.SCALE, self.line * self.SCALE),
        )


class GridSprite(pygame.sprite.Sprite):
    def __init__(self, WIDTH, HEIGHT, SCALE):
        super().__init__()

        self.WIDTH = WIDTH
        self.HEIGHT = HEIGHT
        self.SCALE = SCALE

        self.image = pygame.Surface([WIDTH * SCALE, HEIGHT * SCALE])
        self.rect = self.image.get_rect()
        self.update()

    def update(self):
        self.image.fill(BACKGROUND_COLOR)

        for x in range(self.WIDTH):
            for y in range(self.HEIGHT):
                pygame.draw.rect(
                    self.image, GRID_COLOR, cell_rect(Point(x, y), self.HEIGHT, self.SCALE), 1
                )


class CellsSprite(pygame.sprite.Sprite):
    """Fills a set of cells (food, hazards) with one color"""

    def __init__(self, cells, color, WIDTH, HEIGHT, SCALE):
        super().__init__()

        self.cells = list(cells)
        self.color = color
        self.HEIGHT = HEIGHT
        self.SCALE = SCALE

        self.image = pygame.Surface([WIDTH * SCALE, HEIGHT * SCALE])
        self.rect = self.image.get_rect()
        self.update()

    def update(self):
        self.image.fill(BACKGROUND_COLOR)
        self.image.set_colorkey(BACKGROUND_COLOR)

        for cell in self.cells:
            pygame.draw.rect(self.image, self.color, cell_rect(cell, self.HEIGHT, self.SCALE))


class SnakeSprite(pygame.sprite.Sprite):
    def __init__(self, snake, index: int, WIDTH, HEIGHT, SCALE):
        super().__init__()

        self.snake = snake
        self.index = index
        self.HEIGHT = HEIGHT
        self.SCALE = SCALE

        self.image = pygame.Surface([WIDTH * SCALE, HEIGHT * SCALE])
        self.rect = self.image.get_rect()
        self.update()

    def update(self):
        self.image.fill(BACKGROUND_COLOR)
        self.image.set_colorkey(BACKGROUND_COLOR)

        # walk from tail to head so the head ends up on top
        for segment in reversed(self.snake.body):
            rect = cell_rect(segment, self.HEIGHT, self.SCALE).inflate(-2, -2)
            pygame.draw.rect(self.image, snake_color(self.index), rect)

        pygame.draw.rect(
            self.image,
            head_color(self.index),
            cell_rect(self.snake.head, self.HEIGHT, self.SCALE),
        )
