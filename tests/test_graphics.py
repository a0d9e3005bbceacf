import math

import pygame
import pytest

from prayerclock.graphics import (
    Canvas,
    TimerLimitError,
    TimerRegistry,
    Window,
    circle_points,
    ellipse_points,
    mask_pixels,
    rectangle_corners,
    scale_color,
)


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def canvas():
    return Canvas(pygame.Surface((100, 100)))


def test_timer_indices_are_sequential():
    registry = TimerRegistry(clock=FakeClock())
    indices = [registry.add(1000, lambda: None) for _ in range(3)]
    assert indices == [0, 1, 2]


def test_timer_limit():
    registry = TimerRegistry(clock=FakeClock())
    for _ in range(10):
        registry.add(1000, lambda: None)
    with pytest.raises(TimerLimitError):
        registry.add(1000, lambda: None)


def test_timer_fires_when_due():
    calls = []
    registry = TimerRegistry(clock=FakeClock())
    registry.add(1000, lambda: calls.append("a"))
    assert registry.fire_due(999) == []
    assert registry.fire_due(1000) == [0]
    assert registry.fire_due(1500) == []
    assert registry.fire_due(2000) == [0]
    assert calls == ["a", "a"]


def test_overdue_timer_fires_once():
    calls = []
    registry = TimerRegistry(clock=FakeClock())
    registry.add(1000, lambda: calls.append(1))
    registry.fire_due(5500)
    assert calls == [1]
    assert registry.fire_due(5900) == []


def test_pause_and_resume():
    calls = []
    registry = TimerRegistry(clock=FakeClock())
    registry.add(1000, lambda: calls.append(1))
    registry.pause(0)
    assert registry.fire_due(1000) == []
    registry.resume(0)
    assert registry.fire_due(2000) == [0]
    assert calls == [1]


def test_pause_out_of_range_is_ignored():
    registry = TimerRegistry(clock=FakeClock())
    registry.add(1000, lambda: None)
    registry.pause(5)
    registry.pause(-1)
    assert registry.fire_due(1000) == [0]


def test_scale_color():
    assert scale_color(255, 0, 255) == (1.0, 0.0, 1.0)
    assert scale_color(0, 0, 0) == (0.0, 0.0, 0.0)


@pytest.mark.parametrize("radius", [1, 20, 205])
def test_circle_points_lie_on_circle(radius):
    points = circle_points(256, 256, radius, 100)
    assert points[0] == (256 + radius, 256)
    for px, py in points:
        assert math.isclose(math.hypot(px - 256, py - 256), radius)
    assert len(points) in (100, 101)


def test_ellipse_points_on_ellipse():
    for px, py in ellipse_points(10, 20, 4, 2, 50):
        assert math.isclose(((px - 10) / 4) ** 2 + ((py - 20) / 2) ** 2, 1.0)


def test_ellipse_rejects_zero_slices():
    with pytest.raises(ValueError):
        ellipse_points(0, 0, 1, 1, 0)


def test_rectangle_corners():
    assert rectangle_corners(0, 50, 512, 155) == [
        (0, 50),
        (512, 50),
        (512, 205),
        (0, 205),
    ]


def test_mask_pixels():
    pixels = [(1, 2, 3), (0, 0, 0, 255)]
    assert mask_pixels(pixels, 0x030201) == [(1, 2, 3, 0), (0, 0, 0, 255)]
    assert mask_pixels(pixels, 0) == [(1, 2, 3, 255), (0, 0, 0, 0)]
    assert [p[3] for p in mask_pixels(pixels, -1)] == [255, 255]


def test_filled_rectangle(canvas):
    canvas.set_color(255, 0, 0)
    canvas.filled_rectangle(10, 10, 20, 20)
    assert canvas.pixel_color(20, 20) == (255, 0, 0)
    assert canvas.pixel_color(50, 50) == (0, 0, 0)


def test_clear(canvas):
    canvas.set_color(255, 255, 255)
    canvas.filled_rectangle(0, 0, 100, 100)
    canvas.clear()
    assert canvas.pixel_color(50, 50) == (0, 0, 0)


def test_point_uses_bottom_left_origin(canvas):
    canvas.set_color(0, 255, 0)
    canvas.point(5, 7)
    assert canvas.surface.get_at((5, 100 - 1 - 7))[:3] == (0, 255, 0)


def test_polygon_needs_three_points(canvas):
    canvas.set_color(255, 255, 255)
    canvas.polygon([10, 90], [50, 50])
    canvas.filled_polygon([10, 90], [50, 50])
    assert canvas.pixel_color(50, 50) == (0, 0, 0)


def test_filled_circle_covers_centre(canvas):
    canvas.set_color(20, 50, 210)
    canvas.filled_circle(50, 50, 20)
    assert canvas.pixel_color(50, 50) == (20, 50, 210)
    assert canvas.pixel_color(5, 5) == (0, 0, 0)


def test_rotate_moves_points(canvas):
    canvas.set_color(255, 255, 255)
    canvas.rotate(50, 50, 90)
    canvas.point(60, 50)
    canvas.unrotate()
    assert canvas.pixel_color(50, 60) == (255, 255, 255)
    assert canvas.pixel_color(60, 50) == (0, 0, 0)


def test_unrotate_without_rotate(canvas):
    with pytest.raises(RuntimeError):
        canvas.unrotate()


def test_rotated_context_restores(canvas):
    canvas.set_color(255, 255, 255)
    with canvas.rotated(50, 50, 90):
        pass
    canvas.point(60, 50)
    assert canvas.pixel_color(60, 50) == (255, 255, 255)


def test_show_image_and_ignore_color(canvas, tmp_path):
    image = pygame.Surface((4, 4))
    image.fill((1, 2, 3))
    path = tmp_path / "tile.bmp"
    pygame.image.save(image, str(path))

    canvas.show_image(10, 10, path)
    assert canvas.pixel_color(11, 11) == (1, 2, 3)

    canvas.clear()
    canvas.show_image(10, 10, path, 0x030201)
    assert canvas.pixel_color(11, 11) == (0, 0, 0)


def test_text_draws_something(canvas):
    canvas.set_color(255, 255, 255)
    canvas.text(10, 40, "Back", 30)
    colors = {
        canvas.pixel_color(px, py) for px in range(100) for py in range(100)
    }
    assert (0, 0, 0) in colors
    assert len(colors) > 1


def test_window_keeps_settings():
    window = Window(512, 512, "Muslims Day")
    assert (window.width, window.height, window.title) == (512, 512, "Muslims Day")