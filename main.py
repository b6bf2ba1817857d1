# main.py
import sys, pygame
from pygame.locals import *

from config import SCREEN_W, SCREEN_H, FPS, WINDOW_TITLE, MAX_STEPS, TICK_MS, \
    PAUSED_COLOR, CONTROLS_COLOR, ACCENT
from scene import (build_raster_cache, point_counter_label, SEQUENCE_PANELS,
                   SECTION_HEADINGS, INFO_PANELS)
from animation import new_state, advance, toggle_pause, reset, progress, \
    revealed_count, TickClock
from renderer_opengl import GLRenderer


def init_pygame():
    pygame.init()
    pygame.display.set_mode((SCREEN_W, SCREEN_H), DOUBLEBUF | OPENGL)
    pygame.display.set_caption(WINDOW_TITLE)


def draw_frame(renderer, cache, state):
    renderer.clear()

    renderer.draw_text(550, 870, WINDOW_TITLE.upper(), ACCENT, big=True)
    renderer.draw_progress_bar(progress(state))

    for x, y, text, col in SECTION_HEADINGS:
        renderer.draw_text(x, y, text, col, big=True)

    for panel in SEQUENCE_PANELS:
        points = getattr(cache, panel.key)
        shown = revealed_count(state, len(points))
        renderer.draw_grid_box(panel.rect, panel.title, panel.color)
        renderer.draw_animated_points(points, shown, panel.color)
        x, y, _, _ = panel.rect
        renderer.draw_text(x + 10, y + 8, point_counter_label(shown, len(points)), panel.color)

    for info in INFO_PANELS:
        x, y, w, h = info.rect
        renderer.draw_panel(info.rect, info.color)
        renderer.draw_text(x + w / 2 - 90, y + h - 32, info.title, info.color, big=True)
        for i, (text, col, indent) in enumerate(info.lines):
            renderer.draw_text(x + indent, y + h - 70 - i * 22, text, col)

    renderer.draw_text(80, 70, "Controls: SPACE = Pause/Resume | R = Reset | ESC = Exit",
                       CONTROLS_COLOR)
    if state.paused:
        renderer.draw_text(720, 440, "PAUSED", PAUSED_COLOR, big=True)


def main():
    init_pygame()
    renderer = GLRenderer(SCREEN_W, SCREEN_H)

    cache = build_raster_cache()
    for panel in SEQUENCE_PANELS:
        print(f"{panel.title}: {len(getattr(cache, panel.key))} points")

    state = new_state(MAX_STEPS)
    ticker = TickClock(TICK_MS)
    clock = pygame.time.Clock()
    running = True

    while running:
        dt_ms = clock.tick(FPS)

        for ev in pygame.event.get():
            if ev.type == QUIT:
                running = False
            elif ev.type == KEYDOWN:
                if ev.key == K_ESCAPE:
                    running = False
                elif ev.key == K_SPACE:
                    state = toggle_pause(state)
                    ticker.reset()
                elif ev.key == K_r:
                    state = reset(state)
                    ticker.reset()

        ticks = ticker.update(dt_ms)
        state = advance(state, ticks)

        draw_frame(renderer, cache, state)
        pygame.display.flip()

    pygame.quit()
    sys.exit()

if __name__ == "__main__":
    main()
