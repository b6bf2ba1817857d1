# animation.py
from collections import namedtuple

from config import MAX_STEPS, TICK_MS

AnimationState = namedtuple("AnimationState", ["step", "max_steps", "paused"])


def new_state(max_steps=MAX_STEPS, paused=False):
    if max_steps <= 0:
        raise ValueError(f"max_steps must be positive, got {max_steps}")
    return AnimationState(0, max_steps, paused)


def advance(state, elapsed_ticks=1):
    """Return the state after elapsed_ticks animation ticks.
    step runs 0..max_steps and then wraps to 0. Paused states don't move."""
    if elapsed_ticks < 0:
        raise ValueError(f"elapsed_ticks must be >= 0, got {elapsed_ticks}")
    if state.paused or elapsed_ticks == 0:
        return state
    step = (state.step + elapsed_ticks) % (state.max_steps + 1)
    return state._replace(step=step)


def toggle_pause(state):
    return state._replace(paused=not state.paused)


def reset(state):
    return state._replace(step=0)


def progress(state):
    return state.step / state.max_steps


def revealed_count(state, length):
    """Number of leading points of a length-long sequence to show."""
    n = state.step * length // state.max_steps
    return max(0, min(length, n))


class TickClock:
    """Turns frame times (ms) into whole animation ticks at a fixed cadence."""

    def __init__(self, tick_ms=TICK_MS):
        if tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {tick_ms}")
        self.tick_ms = tick_ms
        self.pending_ms = 0

    def update(self, dt_ms):
        self.pending_ms += dt_ms
        ticks = int(self.pending_ms // self.tick_ms)
        self.pending_ms -= ticks * self.tick_ms
        return ticks

    def reset(self):
        self.pending_ms = 0
