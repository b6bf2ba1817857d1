import unittest
from animation import (AnimationState, new_state, advance, toggle_pause, reset,
                       progress, revealed_count, TickClock)


class AnimationStateTest(unittest.TestCase):
    def test_new_state(self):
        self.assertEqual(new_state(150), AnimationState(0, 150, False))
        with self.assertRaises(ValueError):
            new_state(0)

    def test_advance(self):
        s = new_state(150)
        self.assertEqual(advance(s).step, 1)
        self.assertEqual(advance(s, 10).step, 10)
        self.assertEqual(s.step, 0)

    def test_advance_wraps_after_max(self):
        s = AnimationState(149, 150, False)
        s = advance(s)
        self.assertEqual(s.step, 150)
        s = advance(s)
        self.assertEqual(s.step, 0)
        self.assertEqual(advance(AnimationState(140, 150, False), 20).step, 9)

    def test_paused_does_not_move(self):
        s = AnimationState(42, 150, True)
        self.assertIs(advance(s, 5), s)

    def test_negative_ticks(self):
        with self.assertRaises(ValueError):
            advance(new_state(), -1)

    def test_toggle_and_reset(self):
        s = toggle_pause(AnimationState(30, 150, False))
        self.assertTrue(s.paused)
        self.assertFalse(toggle_pause(s).paused)
        r = reset(s)
        self.assertEqual(r, AnimationState(0, 150, True))

    def test_progress(self):
        self.assertEqual(progress(AnimationState(0, 150, False)), 0.0)
        self.assertEqual(progress(AnimationState(75, 150, False)), 0.5)
        self.assertEqual(progress(AnimationState(150, 150, False)), 1.0)


class RevealedCountTest(unittest.TestCase):
    def test_floor_of_fraction(self):
        self.assertEqual(revealed_count(AnimationState(0, 150, False), 251), 0)
        self.assertEqual(revealed_count(AnimationState(75, 150, False), 251), 125)
        self.assertEqual(revealed_count(AnimationState(1, 150, False), 100), 0)
        self.assertEqual(revealed_count(AnimationState(150, 150, False), 251), 251)

    def test_monotonic(self):
        counts = [revealed_count(AnimationState(i, 150, False), 648) for i in range(151)]
        self.assertEqual(counts, sorted(counts))

    def test_empty_sequence(self):
        self.assertEqual(revealed_count(AnimationState(80, 150, False), 0), 0)


class TickClockTest(unittest.TestCase):
    def test_accumulates(self):
        c = TickClock(50)
        self.assertEqual(c.update(30), 0)
        self.assertEqual(c.update(30), 1)
        self.assertEqual(c.update(100), 2)
        self.assertEqual(c.pending_ms, 10)

    def test_reset(self):
        c = TickClock(50)
        c.update(49)
        c.reset()
        self.assertEqual(c.update(49), 0)

    def test_bad_interval(self):
        with self.assertRaises(ValueError):
            TickClock(0)


if __name__ == "__main__":
    unittest.main()
