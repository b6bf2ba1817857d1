# renderer_opengl.py
import numpy as np
import pygame
from OpenGL.GL import *
from OpenGL.GLU import *
from config import (BACKGROUND, GRID_BG, GRID_LINE, GRID_DIVISIONS, PANEL_BG,
                    PROGRESS_BG, ACCENT, PROGRESS_BAR, POINT_SIZE, HEAD_POINT_SIZE,
                    GLOW_ALPHA, TRAIL_ALPHA, FONT_SMALL, FONT_BIG)


class GLRenderer:
    """2D orthographic renderer, origin at the bottom-left corner.
    pygame must be initialised (display + font) before construction."""

    def __init__(self, w, h):
        self.w = w
        self.h = h
        self.font = pygame.font.Font(None, FONT_SMALL)
        self.big_font = pygame.font.Font(None, FONT_BIG)
        self._text_cache = {}
        self._init_gl()

    def _init_gl(self):
        glViewport(0, 0, self.w, self.h)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        gluOrtho2D(0, self.w, 0, self.h)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

        glEnable(GL_POINT_SMOOTH)
        glHint(GL_POINT_SMOOTH_HINT, GL_NICEST)
        glPixelStorei(GL_UNPACK_ALIGNMENT, 1)

    def clear(self):
        glClearColor(BACKGROUND[0], BACKGROUND[1], BACKGROUND[2], 1.0)
        glClear(GL_COLOR_BUFFER_BIT)

    # primitives
    def _quad(self, x, y, w, h, col):
        glColor3f(*col)
        glBegin(GL_QUADS)
        glVertex2f(x, y)
        glVertex2f(x + w, y)
        glVertex2f(x + w, y + h)
        glVertex2f(x, y + h)
        glEnd()

    def _outline(self, x, y, w, h, col, width):
        glColor3f(*col)
        glLineWidth(width)
        glBegin(GL_LINE_LOOP)
        glVertex2f(x, y)
        glVertex2f(x + w, y)
        glVertex2f(x + w, y + h)
        glVertex2f(x, y + h)
        glEnd()

    def draw_panel(self, rect, col):
        """Dark filled panel with a colored 2px border."""
        x, y, w, h = rect
        self._quad(x, y, w, h, PANEL_BG)
        self._outline(x, y, w, h, col, 2)

    def draw_grid_box(self, rect, title, col):
        x, y, w, h = rect
        self._quad(x, y, w, h, GRID_BG)

        glColor3f(*GRID_LINE)
        glLineWidth(1)
        glBegin(GL_LINES)
        for i in range(GRID_DIVISIONS + 1):
            gx = x + i * w / GRID_DIVISIONS
            gy = y + i * h / GRID_DIVISIONS
            glVertex2f(gx, y)
            glVertex2f(gx, y + h)
            glVertex2f(x, gy)
            glVertex2f(x + w, gy)
        glEnd()

        self._outline(x, y, w, h, col, 3)

        # title badge
        self._quad(x + 5, y + h - 35, 245, 30, col)
        self.draw_text(x + 15, y + h - 27, title, (1.0, 1.0, 1.0), big=True)

    def draw_progress_bar(self, fraction):
        x, y, w, h = PROGRESS_BAR
        self._quad(x, y, w, h, PROGRESS_BG)
        fraction = max(0.0, min(1.0, fraction))
        if fraction > 0.0:
            self._quad(x, y, w * fraction, h, ACCENT)

    def _draw_point_array(self, arr, size, col, alpha):
        glColor4f(col[0], col[1], col[2], alpha)
        glPointSize(size)
        glVertexPointer(2, GL_INT, 0, arr)
        glDrawArrays(GL_POINTS, 0, len(arr))

    def draw_animated_points(self, points, count, col):
        """Draw the first `count` points with a glow; the newest one is bigger."""
        count = min(count, len(points))
        if count <= 0:
            return
        arr = np.array(points[:count], dtype=np.int32).reshape(-1, 2)
        trail, head = arr[:-1], arr[-1:]

        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glEnableClientState(GL_VERTEX_ARRAY)
        if len(trail):
            self._draw_point_array(trail, POINT_SIZE, col, TRAIL_ALPHA)
            self._draw_point_array(trail, POINT_SIZE * 2, col, GLOW_ALPHA)
        self._draw_point_array(head, HEAD_POINT_SIZE, col, 1.0)
        self._draw_point_array(head, HEAD_POINT_SIZE * 2, col, GLOW_ALPHA)
        glDisableClientState(GL_VERTEX_ARRAY)
        glDisable(GL_BLEND)

    # text
    def _text_surface(self, text, col, big):
        key = (text, col, big)
        if key not in self._text_cache:
            font = self.big_font if big else self.font
            rgb = tuple(int(c * 255) for c in col)
            surf = font.render(text, True, rgb)
            data = pygame.image.tobytes(surf,"RGBA", True)
            self._text_cache[key] = (surf.get_width(), surf.get_height(), data)
        return self._text_cache[key]

    def draw_text(self, x, y, text, col, big=False):
        """Blit a pygame-rendered string with its lower-left corner at (x, y)."""
        w, h, data = self._text_surface(text, col, big)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glRasterPos2i(int(x), int(y))
        glDrawPixels(w, h, GL_RGBA, GL_UNSIGNED_BYTE, data)
        glDisable(GL_BLEND)
