import pygame
import pytest

from prayerclock.demo import DemoApp
from prayerclock.graphics import KEY_END, ButtonState, Canvas, MouseButton


def test_starts_at_source_position():
    app = DemoApp()
    assert (app.x, app.y, app.r) == (300, 300, 20)


def test_left_click_moves_up_right():
    app = DemoApp()
    app.mouse(MouseButton.LEFT, ButtonState.DOWN, 0, 0)
    assert (app.x, app.y) == (310, 310)


def test_left_then_right_click_round_trips():
    app = DemoApp(x=50, y=60)
    app.mouse(MouseButton.LEFT, ButtonState.DOWN, 0, 0)
    app.mouse(MouseButton.RIGHT, ButtonState.DOWN, 0, 0)
    assert (app.x, app.y) == (50, 60)


def test_button_release_is_ignored():
    app = DemoApp(x=50, y=60)
    app.mouse(MouseButton.LEFT, ButtonState.UP, 0, 0)
    app.mouse(MouseButton.RIGHT, ButtonState.UP, 0, 0)
    assert (app.x, app.y) == (50, 60)


def test_middle_button_is_ignored():
    app = DemoApp(x=50, y=60)
    app.mouse(MouseButton.MIDDLE, ButtonState.DOWN, 0, 0)
    assert (app.x, app.y) == (50, 60)


def test_mouse_move_prints_position(capsys):
    DemoApp().mouse_move(5, 7)
    assert capsys.readouterr().out == "x = 5, y= 7\n"


def test_q_quits():
    with pytest.raises(SystemExit):
        DemoApp().keyboard("q")


def test_end_key_quits():
    with pytest.raises(SystemExit):
        DemoApp().special_keyboard(KEY_END)


def test_draw_places_circle_at_position():
    canvas = Canvas(pygame.Surface((400, 400)))
    app = DemoApp(x=100, y=150)
    app.draw(canvas)
    assert canvas.pixel_color(100, 150) == (20, 200, 200)
    assert canvas.pixel_color(300, 300) == (0, 0, 0)


def test_draw_follows_click():
    canvas = Canvas(pygame.Surface((400, 400)))
    app = DemoApp(x=100, y=150, r=5)
    app.mouse(MouseButton.LEFT, ButtonState.DOWN, 0, 0)
    app.draw(canvas)
    assert canvas.pixel_color(app.x, app.y) == (20, 200, 200)
    assert canvas.pixel_color(100, 150) == (0, 0, 0)