"""Small immediate-mode drawing layer on top of pygame.

Coordinates follow the mathematical convention used throughout the
application: the origin is the bottom-left corner of the window and the
y axis points up.
"""

from __future__ import annotations

import math
import time
from collections.abc import Callable, Iterable, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from enum import IntEnum
from itertools import product
from pathlib import Path
from typing import Iterator, Optional, Protocol

import pygame

MAX_TIMERS = 10
NO_IGNORE_COLOR = -1

Point = tuple[float, float]


class MouseButton(IntEnum):
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


class ButtonState(IntEnum):
    DOWN = 0
    UP = 1


KEY_END = pygame.K_END


class TimerLimitError(RuntimeError):
    """Raised when more timers are registered than the registry allows."""


@dataclass
class _Timer:
    interval: float
    callback: Callable[[], None]
    next_due: float
    paused: bool = False


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class TimerRegistry:
    """Periodic callbacks, driven by explicit calls to :meth:`fire_due`."""

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock or _monotonic_ms
        self._timers: list[_Timer] = []

    def __len__(self) -> int:
        return len(self._timers)

    def add(self, msec: float, callback: Callable[[], None]) -> int:
        """Register *callback* to run every *msec* milliseconds; return its index."""
        if len(self._timers) >= MAX_TIMERS:
            raise TimerLimitError("maximum number of timers already in use")
        if msec <= 0:
            raise ValueError("timer interval must be positive")
        self._timers.append(_Timer(msec, callback, self._clock() + msec))
        return len(self._timers) - 1

    def pause(self, index: int) -> None:
        if 0 <= index < len(self._timers):
            self._timers[index].paused = True

    def resume(self, index: int) -> None:
        if 0 <= index < len(self._timers):
            self._timers[index].paused = False

    def fire_due(self, now: float) -> list[int]:
        """Run every timer due at *now* (milliseconds); return the indices run.

        An overdue timer runs once however many periods it missed. A paused
        timer keeps its schedule but its callback is skipped.
        """
        fired = []
        for index, timer in enumerate(self._timers):
            if timer.next_due > now:
                continue
            missed = math.floor((now - timer.next_due) / timer.interval) + 1
            timer.next_due += missed * timer.interval
            if not timer.paused:
                timer.callback()
                fired.append(index)
        return fired


def scale_color(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Map 0-255 colour components onto the 0-1 range."""
    return r / 255, g / 255, b / 255


def _to_byte(component: float) -> int:
    return round(min(max(component, 0.0), 1.0) * 255)


def ellipse_points(
    x: float, y: float, a: float, b: float, slices: int = 100
) -> list[Point]:
    """Points on an ellipse with semi-axes *a* and *b*, starting at angle 0."""
    if slices <= 0:
        raise ValueError("slices must be positive")
    step = 2 * math.pi / slices
    points = []
    t = 0.0
    while t <= 2 * math.pi:
        points.append((x + a * math.cos(t), y + b * math.sin(t)))
        t += step
    return points


def circle_points(x: float, y: float, r: float, slices: int = 100) -> list[Point]:
    """Points on a circle of radius *r*, starting at angle 0."""
    return ellipse_points(x, y, r, r, slices)


def rectangle_corners(
    left: float, bottom: float, dx: float, dy: float
) -> list[Point]:
    """Corners of an axis-aligned rectangle, counter-clockwise from bottom-left."""
    right, top = left + dx, bottom + dy
    return [(left, bottom), (right, bottom), (right, top), (left, top)]


def mask_pixels(
    pixels: Iterable[Sequence[int]], ignore_color: int = NO_IGNORE_COLOR
) -> list[tuple[int, int, int, int]]:
    """Give every pixel an alpha: 0 where it matches *ignore_color*, else 255.

    *ignore_color* is packed as ``0xBBGGRR``; -1 disables masking.
    """
    masked = []
    for r, g, b, *_ in pixels:
        packed = (b << 16) | (g << 8) | r
        alpha = 0 if packed == ignore_color else 255
        masked.append((r, g, b, alpha))
    return masked


def _rotate_about(point: Point, cx: float, cy: float, degree: float) -> Point:
    rad = math.radians(degree)
    dx, dy = point[0] - cx, point[1] - cy
    cos_t, sin_t = math.cos(rad), math.sin(rad)
    return cx + dx * cos_t - dy * sin_t, cy + dx * sin_t + dy * cos_t


class Canvas:
    """Drawing primitives on a pygame surface with a bottom-left origin."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.color: tuple[int, int, int] = (255, 255, 255)
        self._rotations: list[tuple[float, float, float]] = []
        self._images: dict[tuple[str, int], pygame.Surface] = {}
        self._fonts: dict[int, pygame.font.Font] = {}

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def _transform(self, x: float, y: float) -> Point:
        point = (x, y)
        for cx, cy, degree in reversed(self._rotations):
            point = _rotate_about(point, cx, cy, degree)
        return point

    def _screen(self, x: float, y: float) -> Point:
        tx, ty = self._transform(x, y)
        return tx, self.height - ty

    def set_color(self, r: float, g: float, b: float) -> None:
        self.color = tuple(_to_byte(c) for c in scale_color(r, g, b))

    def clear(self) -> None:
        self.surface.fill((0, 0, 0))

    def _plot(self, x: float, y: float) -> None:
        tx, ty = self._transform(x, y)
        col, row = round(tx), self.height - 1 - round(ty)
        if 0 <= col < self.surface.get_width() and 0 <= row < self.height:
            self.surface.set_at((col, row), self.color)

    def point(self, x: float, y: float, size: int = 0) -> None:
        self._plot(x, y)
        xs = range(math.ceil(x - size), math.ceil(x + size))
        ys = range(math.ceil(y - size), math.ceil(y + size))
        for px, py in product(xs, ys):
            self._plot(px, py)

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        pygame.draw.line(
            self.surface, self.color, self._screen(x1, y1), self._screen(x2, y2)
        )

    def _outline(self, points: Sequence[Point]) -> None:
        for (x1, y1), (x2, y2) in zip(points, points[1:]):
            self.line(x1, y1, x2, y2)

    def polygon(self, xs: Sequence[float], ys: Sequence[float]) -> None:
        points = list(zip(xs, ys))
        if len(points) < 3:
            return
        self._outline(points + points[:1])

    def filled_polygon(self, xs: Sequence[float], ys: Sequence[float]) -> None:
        points = list(zip(xs, ys))
        if len(points) < 3:
            return
        pygame.draw.polygon(
            self.surface, self.color, [self._screen(px, py) for px, py in points]
        )

    def rectangle(self, left: float, bottom: float, dx: float, dy: float) -> None:
        corners = rectangle_corners(left, bottom, dx, dy)
        self._outline(corners + corners[:1])

    def filled_rectangle(
        self, left: float, bottom: float, dx: float, dy: float
    ) -> None:
        xs, ys = zip(*rectangle_corners(left, bottom, dx, dy))
        self.filled_polygon(xs, ys)

    def circle(self, x: float, y: float, r: float, slices: int = 100) -> None:
        self.ellipse(x, y, r, r, slices)

    def filled_circle(self, x: float, y: float, r: float, slices: int = 100) -> None:
        self.filled_ellipse(x, y, r, r, slices)

    def ellipse(
        self, x: float, y: float, a: float, b: float, slices: int = 100
    ) -> None:
        self._outline([(x + a, y), *ellipse_points(x, y, a, b, slices)])

    def filled_ellipse(
        self, x: float, y: float, a: float, b: float, slices: int = 100
    ) -> None:
        points = ellipse_points(x, y, a, b, slices)
        xs, ys = zip(*points)
        self.filled_polygon(xs, ys)

    def _font(self, size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def text(self, x: float, y: float, text: str, size: int = 13) -> None:
        """Draw *text* with its baseline starting at (x, y)."""
        font = self._font(size)
        rendered = font.render(text, True, self.color)
        sx, sy = self._screen(x, y)
        self.surface.blit(rendered, (round(sx), round(sy) - font.get_ascent()))

    def _masked_image(self, path: str, ignore_color: int) -> pygame.Surface:
        key = (path, ignore_color)
        if key not in self._images:
            image = pygame.image.load(path)
            width, height = image.get_size()
            coords = [(cx, cy) for cy, cx in product(range(height), range(width))]
            pixels = mask_pixels((image.get_at(c) for c in coords), ignore_color)
            result = pygame.Surface((width, height), pygame.SRCALPHA)
            for coord, pixel in zip(coords, pixels):
                result.set_at(coord, pixel)
            self._images[key] = result
        return self._images[key]

    def show_image(
        self, x: float, y: float, path: str | Path, ignore_color: int = NO_IGNORE_COLOR
    ) -> None:
        """Draw an image with its bottom-left corner at (x, y).

        Pixels whose colour equals *ignore_color* (``0xBBGGRR``) are left out.
        """
        image = self._masked_image(str(path), ignore_color)
        sx, sy = self._screen(x, y)
        self.surface.blit(image, (round(sx), round(sy) - image.get_height()))

    def pixel_color(self, x: int, y: int) -> tuple[int, int, int]:
        color = self.surface.get_at((x, self.height - 1 - y))
        return color.r, color.g, color.b

    def rotate(self, x: float, y: float, degree: float) -> None:
        """Rotate everything drawn afterwards by *degree* about (x, y)."""
        self._rotations.append((x, y, degree))

    def unrotate(self) -> None:
        if not self._rotations:
            raise RuntimeError("unrotate called without a matching rotate")
        self._rotations.pop()

    @contextmanager
    def rotated(self, x: float, y: float, degree: float) -> Iterator["Canvas"]:
        self.rotate(x, y, degree)
        try:
            yield self
        finally:
            self.unrotate()


class EventHandler(Protocol):
    def draw(self, canvas: Canvas) -> None: ...

    def mouse(self, button: int, state: int, x: int, y: int) -> None: ...

    def mouse_move(self, x: int, y: int) -> None: ...

    def keyboard(self, key: str) -> None: ...

    def special_keyboard(self, key: int) -> None: ...


class Window:
    """A pygame window that feeds input to a handler and redraws it."""

    def __init__(self, width: int = 500, height: int = 500, title: str = "iGraphics"):
        self.width = width
        self.height = height
        self.title = title

    def run(self, handler: EventHandler, timers: Optional[TimerRegistry] = None) -> None:
        """Open the window and dispatch events until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(self.title)
            canvas = Canvas(screen)
            canvas.clear()
            clock = pygame.time.Clock()
            while self._dispatch(handler):
                if timers is not None:
                    timers.fire_due(_monotonic_ms())
                canvas.clear()
                handler.draw(canvas)
                pygame.display.flip()
                clock.tick(60)
        finally:
            pygame.quit()

    def _dispatch(self, handler: EventHandler) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if len(event.unicode) == 1 and event.unicode.isprintable():
                    handler.keyboard(event.unicode)
                else:
                    handler.special_keyboard(event.key)
            elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                state = (
                    ButtonState.DOWN
                    if event.type == pygame.MOUSEBUTTONDOWN
                    else ButtonState.UP
                )
                x, y = event.pos
                handler.mouse(event.button, state, x, self.height - y)
            elif event.type == pygame.MOUSEMOTION and any(event.buttons):
                x, y = event.pos
                handler.mouse_move(x, self.height - y)
        return True