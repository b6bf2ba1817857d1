import unittest
from scene import (RasterCache, build_raster_cache, point_counter_label,
                   SEQUENCE_PANELS, INFO_PANELS)
from algorithms import bresenham_circle, midpoint_circle


class RasterCacheTest(unittest.TestCase):
    def test_default_scene(self):
        cache = build_raster_cache()
        self.assertEqual(len(cache.dda), 251)
        self.assertEqual(len(cache.bresenham_line), 251)
        self.assertEqual(cache.dda[0], (100, 630))
        self.assertEqual(cache.bresenham_line[-1], (750, 720))
        self.assertEqual(cache.bresenham_circle, bresenham_circle(225, 385, 80))
        self.assertEqual(cache.midpoint_circle, midpoint_circle(625, 385, 80))

    def test_overrides(self):
        cache = build_raster_cache(dda=(0, 0, 0, 0), line=(0, 0, 4, 0),
                                   bresenham=(0, 0, 0), midpoint=(1, 1, 3))
        self.assertEqual(cache.dda, ((0, 0),))
        self.assertEqual(len(cache.bresenham_line), 5)
        self.assertEqual(len(cache.bresenham_circle), 8)

    def test_invalid_radius_propagates(self):
        with self.assertRaises(ValueError):
            build_raster_cache(midpoint=(0, 0, -4))

    def test_rebuild_is_identical(self):
        self.assertEqual(build_raster_cache(), build_raster_cache())


class PanelTest(unittest.TestCase):
    def test_every_sequence_has_a_panel(self):
        self.assertEqual([p.key for p in SEQUENCE_PANELS], list(RasterCache._fields))

    def test_panels_have_colors_and_rects(self):
        for panel in SEQUENCE_PANELS + INFO_PANELS:
            self.assertEqual(len(panel.rect), 4)
            self.assertTrue(all(0.0 <= c <= 1.0 for c in panel.color))

    def test_counter_label(self):
        self.assertEqual(point_counter_label(12, 251), "Points: 12/251")


if __name__ == "__main__":
    unittest.main()
