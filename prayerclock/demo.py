"""A minimal window: a circle that moves with mouse clicks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from prayerclock.graphics import KEY_END, ButtonState, Canvas, MouseButton, Window

STEP = 10


@dataclass
class DemoApp:
    """Draws a circle that left clicks move up-right and right clicks down-left."""

    x: int = 300
    y: int = 300
    r: int = 20

    def draw(self, canvas: Canvas) -> None:
        canvas.set_color(20, 200, 200)
        canvas.filled_circle(self.x, self.y, self.r)
        canvas.set_color(20, 200, 0)
        canvas.text(40, 40, "Hi, I am iGraphics")

    def mouse(self, button: int, state: int, x: int, y: int) -> None:
        if state != ButtonState.DOWN:
            return
        if button == MouseButton.LEFT:
            self.x += STEP
            self.y += STEP
        elif button == MouseButton.RIGHT:
            self.x -= STEP
            self.y -= STEP

    def mouse_move(self, x: int, y: int) -> None:
        print(f"x = {x}, y= {y}")

    def keyboard(self, key: str) -> None:
        if key == "q":
            raise SystemExit(0)

    def special_keyboard(self, key: int) -> None:
        if key == KEY_END:
            raise SystemExit(0)


def main(argv: Optional[list[str]] = None) -> int:
    Window(400, 400, "demo").run(DemoApp())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())