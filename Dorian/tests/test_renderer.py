import os
import random
import sys
import tempfile
import unittest

import numpy as np

# Add the project directory to the Python path to allow importing 'dorian'
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from dorian.emotions import EmotionKind
from dorian.grid import Grid
from dorian.renderer import (
    RasterSink,
    cell_size_for,
    display_color,
    draw_batches,
    emit_frame,
    render_ascii,
    render_ppm,
    render_raster,
)
from helpers import RecordingSink


class TestDisplayColor(unittest.TestCase):

    def test_fade(self):
        self.assertEqual(display_color((200, 100, 50), 1.0), (200, 100, 50))
        self.assertEqual(display_color((200, 100, 50), 0.5), (150, 75, 37))
        self.assertEqual(display_color((200, 100, 50), 0.1), (30, 15, 7))

    def test_channels_never_exceed_255(self):
        self.assertEqual(display_color((255, 255, 255), 1.0, gain=3.0), (255, 255, 255))


class TestDrawBatches(unittest.TestCase):

    def setUp(self):
        self.grid = Grid(4, 4, rng=random.Random(0))

    def revive(self, x, y, kind, intensity=1.0):
        cell = self.grid.cell_at(x, y)
        cell.revive(kind, self.grid.rules)
        cell.intensity = intensity

    def test_groups_by_resolved_color(self):
        self.revive(0, 0, EmotionKind.JOY)
        self.revive(3, 3, EmotionKind.JOY)
        self.revive(1, 0, EmotionKind.JOY, intensity=0.2)
        self.revive(2, 2, EmotionKind.ANGER)

        batches = draw_batches(self.grid, cell_size=4.0)

        self.assertEqual(len(batches), 3)
        self.assertEqual(batches[0].color, (255, 230, 70))
        self.assertEqual(batches[0].rects, [(0.0, 0.0, 4.0, 4.0), (12.0, 12.0, 4.0, 4.0)])
        self.assertEqual(batches[1].color, display_color((255, 230, 70), 0.2))
        self.assertEqual(batches[2].color, (255, 60, 60))
        self.assertEqual(sum(len(b.rects) for b in batches), 4)

    def test_dead_grid_draws_nothing(self):
        self.assertEqual(draw_batches(self.grid), [])

    def test_emit_frame_clears_then_fills(self):
        self.revive(1, 1, EmotionKind.CALM)
        sink = RecordingSink()
        count = emit_frame(self.grid, sink, cell_size_for(self.grid, 40))
        self.assertEqual(count, 1)
        self.assertEqual(sink.calls[0], ("clear", (0, 0, 0)))
        self.assertEqual(sink.calls[1], ("fill", (100, 255, 180), [(10.0, 10.0, 10.0, 10.0)]))


class TestRasterOutput(unittest.TestCase):

    def setUp(self):
        self.grid = Grid(3, 3, rng=random.Random(0))
        self.grid.cell_at(1, 1).revive(EmotionKind.JOY, self.grid.rules)

    def test_raster_sink(self):
        sink = RasterSink(6, 6)
        sink.clear((9, 9, 9))
        sink.fill_rects((1, 2, 3), [(2.0, 2.0, 2.0, 2.0)])
        self.assertEqual(sink.pixels.shape, (6, 6, 3))
        self.assertEqual(sink.pixels.dtype, np.uint8)
        self.assertEqual(tuple(sink.pixels[3, 3]), (1, 2, 3))
        self.assertEqual(tuple(sink.pixels[0, 0]), (9, 9, 9))
        self.assertEqual(int(np.sum(np.all(sink.pixels == (1, 2, 3), axis=2))), 4)

    def test_render_raster(self):
        pixels = render_raster(self.grid, scale=2)
        self.assertEqual(pixels.shape, (6, 6, 3))
        self.assertEqual(tuple(pixels[2, 2]), (255, 230, 70))
        self.assertEqual(tuple(pixels[0, 0]), (0, 0, 0))

    def test_render_ascii(self):
        self.assertEqual(render_ascii(self.grid), "...\n.J.\n...")

    def test_render_ascii_downsamples(self):
        grid = Grid(10, 4, rng=random.Random(0))
        text = render_ascii(grid, max_width=5, max_height=2)
        self.assertEqual(text.splitlines(), [".....", "....."])

    def test_render_ppm(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "frame.ppm")
            render_ppm(self.grid, path, scale=2)
            with open(path, encoding="ascii") as handle:
                lines = handle.read().splitlines()
        self.assertEqual(lines[:3], ["P3", "6 6", "255"])
        self.assertEqual(len(lines), 3 + 6)
        self.assertTrue(lines[5].startswith("0 0 0 0 0 0 255 230 70"))


if __name__ == '__main__':
    unittest.main()
