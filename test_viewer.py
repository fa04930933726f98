"""
Testes das funções auxiliares do viewer (sem janela).
"""

import pygame

from geometry import Point
from viewer.sprites import SNAKE_COLORS, cell_rect, head_color, snake_color


def test_cell_rect_flips_rows():
    # board y grows up, screen y grows down
    assert cell_rect(Point(0, 0), 11, 10) == pygame.Rect(0, 100, 10, 10)
    assert cell_rect(Point(0, 10), 11, 10) == pygame.Rect(0, 0, 10, 10)
    assert cell_rect(Point(3, 4), 5, 32) == pygame.Rect(96, 0, 32, 32)


def test_snake_colors_cycle():
    assert snake_color(0) == SNAKE_COLORS[0]
    assert snake_color(len(SNAKE_COLORS)) == SNAKE_COLORS[0]
    assert snake_color(6) == SNAKE_COLORS[1]


def test_head_is_brighter():
    body = pygame.Color(snake_color(0))
    head = head_color(0)

    assert sum(head[:3]) > sum(body[:3])
