import unittest

import numpy as np
import pygame

from blockfall.game import Action, Tetromino
from blockfall.visualization.human_play import KEY_TO_ACTION, build_parser
from blockfall.visualization.palette import PALETTE, color_for_value
from blockfall.visualization.renderer import Renderer


class TestPalette(unittest.TestCase):

    def test_every_kind_has_a_color(self):
        for kind in Tetromino:
            self.assertEqual(color_for_value(int(kind)), PALETTE[kind])
        self.assertEqual(color_for_value(0), PALETTE[0])


class TestRenderer(unittest.TestCase):

    def test_window_size(self):
        renderer = Renderer(cell_size=10, margin=5)
        self.assertEqual(renderer.window_size(np.zeros((20, 10), dtype=np.int8)), (110, 210))


class TestHumanPlay(unittest.TestCase):

    def test_key_bindings(self):
        self.assertEqual(KEY_TO_ACTION[pygame.K_h], Action.MOVE_LEFT)
        self.assertEqual(KEY_TO_ACTION[pygame.K_l], Action.MOVE_RIGHT)
        self.assertEqual(KEY_TO_ACTION[pygame.K_j], Action.MOVE_DOWN)
        self.assertEqual(KEY_TO_ACTION[pygame.K_k], Action.DROP)
        self.assertEqual(KEY_TO_ACTION[pygame.K_p], Action.ROTATE_LEFT)
        self.assertEqual(KEY_TO_ACTION[pygame.K_n], Action.ROTATE_RIGHT)

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        self.assertIsNone(args.seed)
        self.assertEqual(args.gravity_ms, 1000)
        self.assertEqual(args.log_level, "WARNING")


if __name__ == '__main__':
    unittest.main()
