"""The prayer clock application: an analogue clock, prayer times and rules."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from prayerclock.graphics import (
    KEY_END,
    ButtonState,
    Canvas,
    MouseButton,
    Point,
    TimerRegistry,
    Window,
)

WINDOW_SIZE = 512
TITLE = "Muslims Day"
TICK_MS = 1000

CENTER = 256.0
SECOND_LENGTH = 206.0
MINUTE_LENGTH = 176.0
HOUR_LENGTH = 156.0
# Degrees per radian as the clock face has always approximated it.
DEGREES_PER_RADIAN = 57.29
UTC_OFFSET_HOURS = 6

SECOND_STEP = 6.0
MINUTE_STEP = 0.1

FONT_SMALL = 12
FONT_MEDIUM = 18
FONT_LARGE = 24

BUTTON_IMAGE = "button-_1_.bmp"
RULE_BAR_IMAGE = "360_F_638282823_MzZXu0oFqwBsazulhUhogz8Ay2qjnDpF_512x50.bmp"
RULE1_TITLE_IMAGE = "Screenshot_2024-02-23_193917_512x50.bmp"
RULE2_TITLE_IMAGE = "Screenshot_2024-02-23_200155_2_50.bmp"
RULE3_TITLE_IMAGE = "Screenshot_2024-02-25_220928_50.bmp"


class Page(Enum):
    """Screens of the application, in the order they take precedence."""

    HOME = "home"
    CLOCK = "clock"
    PRAYER_TIMES = "prayer_times"
    RULES = "rules"
    ABOUT = "about"
    RULES_1 = "rules_1"
    RULES_2 = "rules_2"
    RULES_3 = "rules_3"


_PAGE_ORDER = list(Page)
_MAIN_PAGES = frozenset({Page.CLOCK, Page.PRAYER_TIMES, Page.RULES, Page.ABOUT})
_RULE_PAGES = frozenset({Page.RULES_1, Page.RULES_2, Page.RULES_3})

_HOME_BUTTONS = (
    (0, 128, Page.CLOCK),
    (128, 256, Page.PRAYER_TIMES),
    (256, 384, Page.RULES),
    (384, 512, Page.ABOUT),
)
_RULE_BANDS = (
    (362, 412, Page.RULES_1),
    (292, 342, Page.RULES_2),
    (222, 272, Page.RULES_3),
)


def _in_home_button_row(y: int) -> bool:
    return 10 <= y <= 60


def _in_back_button(x: int, y: int) -> bool:
    return 0 < x < 128 and 462 <= y <= 512


class Navigator:
    """Tracks which pages are open; the first open one in page order is shown."""

    def __init__(self) -> None:
        self.active: set[Page] = {Page.HOME}

    @property
    def current(self) -> Optional[Page]:
        """The page on screen, or None when every page has been dismissed."""
        return next((page for page in Page if page in self.active), None)

    def _open(self, page: Page) -> None:
        position = _PAGE_ORDER.index(page)
        self.active.difference_update(_PAGE_ORDER[:position])
        self.active.add(page)

    def _back_home(self) -> None:
        self.active -= _MAIN_PAGES
        self.active.add(Page.HOME)

    def _back_to_rules(self) -> None:
        self.active -= _RULE_PAGES
        self.active.add(Page.RULES)

    def click(self, x: int, y: int) -> None:
        """Handle a left-button press at (x, y)."""
        if Page.HOME in self.active and _in_home_button_row(y):
            for low, high, page in _HOME_BUTTONS:
                if low < x < high:
                    self._open(page)
                    return
        if self.active & _MAIN_PAGES and _in_back_button(x, y):
            self._back_home()
            return
        # Every band that misses closes the rules page before the next is tried.
        for low, high, page in _RULE_BANDS:
            if 0 < x < WINDOW_SIZE and low < y < high:
                self._open(page)
                return
            self.active.discard(Page.RULES)

    def drag(self, x: int, y: int) -> None:
        """Handle the mouse being dragged to (x, y)."""
        if self.active & _RULE_PAGES and _in_back_button(x, y):
            self._back_to_rules()


def _tip(angle: float, length: float) -> Point:
    radians = angle / DEGREES_PER_RADIAN
    return CENTER + length * math.cos(radians), CENTER + length * math.sin(radians)


@dataclass
class ClockHands:
    """Angles (degrees, counter-clockwise from 3 o'clock) and tips of the hands."""

    second_angle: float
    minute_angle: float
    hour_angle: float
    second_tip: Point = field(default=(CENTER, CENTER + SECOND_LENGTH))
    minute_tip: Point = field(default=(CENTER, CENTER + MINUTE_LENGTH))
    hour_tip: Point = field(default=(CENTER, CENTER + HOUR_LENGTH))

    @classmethod
    def from_time(cls, moment: datetime) -> "ClockHands":
        """Hands set for *moment* (UTC, shown six hours ahead), ticked once."""
        if moment.tzinfo is not None:
            moment = moment.astimezone(timezone.utc)
        hour = (moment.hour + UTC_OFFSET_HOURS) % 24
        minute = moment.minute
        second = moment.second + 2
        hands = cls(
            second_angle=(15 - second) * 6.0 + 6 + 360,
            minute_angle=(15 - minute) * 6.0 - second / 60.0 + 0.1 + 360,
            hour_angle=(3 - hour) * 30.0
            - 30 * minute / 60.0
            - 30 * second / 3600.0
            + 0.1 / 600
            + 360,
        )
        hands.tick_second()
        hands.tick_minute()
        hands.tick_hour()
        return hands

    def tick_second(self) -> None:
        self.second_tip = _tip(self.second_angle, SECOND_LENGTH)
        self.second_angle -= SECOND_STEP

    def tick_minute(self) -> None:
        self.minute_tip = _tip(self.minute_angle, MINUTE_LENGTH)
        self.minute_angle -= MINUTE_STEP

    def tick_hour(self) -> None:
        """Recompute the hour hand's tip; its angle stays where it was set."""
        self.hour_tip = _tip(self.hour_angle, HOUR_LENGTH)


PRAYER_TIMES = (
    "Fajar Prayer Time ---   05:05 AM",
    "Dhuhur Prayer Time ---  12:11 PM",
    "Asr Prayer Time  ---    03:31 PM",
    "Maghrib Prayer Time ---  06:02 PM",
    "Isha Prayer Time ---    07:18 PM",
)
FORBIDDEN_TIMES = (
    "The Forbidden Prayer Times",
    "Bhor : 6:16 - 6:31 AM  ",
    "Dhupur : 12:06 - 12:13 PM  ",
    "Sondha : 5:48 - 6:03 PM  ",
)


class PrayerApp:
    """Event handler and painter for the prayer clock window."""

    def __init__(
        self, image_dir: str | Path = "image", now: Optional[datetime] = None
    ) -> None:
        self.image_dir = Path(image_dir)
        self.navigator = Navigator()
        self.hands = ClockHands.from_time(now or datetime.now(timezone.utc))
        self._painters: dict[Page, Callable[[Canvas], None]] = {
            Page.HOME: self._draw_home,
            Page.CLOCK: self._draw_clock,
            Page.PRAYER_TIMES: self._draw_prayer_times,
            Page.RULES: self._draw_rules,
            Page.ABOUT: self._draw_about,
            Page.RULES_1: self._draw_rules_1,
            Page.RULES_2: self._draw_rules_2,
            Page.RULES_3: self._draw_rules_3,
        }

    def _image(self, canvas: Canvas, x: float, y: float, name: str) -> None:
        canvas.show_image(x, y, self.image_dir / name, 0)

    def _white_background(self, canvas: Canvas) -> None:
        canvas.set_color(255, 255, 255)
        canvas.filled_rectangle(0, 0, WINDOW_SIZE, WINDOW_SIZE)

    def _back_button(self, canvas: Canvas) -> None:
        self._image(canvas, 0, 462, BUTTON_IMAGE)
        canvas.set_color(0, 255, 0)
        canvas.text(45, 480, "Back", FONT_MEDIUM)

    def draw(self, canvas: Canvas) -> None:
        page = self.navigator.current
        if page is not None:
            self._painters[page](canvas)

    def _draw_home(self, canvas: Canvas) -> None:
        canvas.set_color(128, 128, 128)
        canvas.filled_rectangle(0, 0, WINDOW_SIZE, WINDOW_SIZE)
        self._image(canvas, 0, 0, "Muslim-Day.bmp")
        for left, _, _ in _HOME_BUTTONS:
            self._image(canvas, left, 10, BUTTON_IMAGE)
        canvas.set_color(0, 255, 0)
        canvas.text(40, 28, "Clock", FONT_MEDIUM)
        canvas.text(158, 28, "Prayer Time", FONT_SMALL)
        canvas.text(276, 28, "Rules of Prayer", FONT_SMALL)
        canvas.text(424, 28, "About", FONT_MEDIUM)

    def _draw_clock(self, canvas: Canvas) -> None:
        canvas.set_color(10, 10, 10)
        canvas.filled_circle(CENTER, CENTER, 200)
        canvas.set_color(0, 255, 0)
        canvas.circle(CENTER, CENTER, 205)
        canvas.set_color(0, 0, 255)
        canvas.circle(CENTER, CENTER, 185)

        canvas.set_color(255, 0, 0)
        for mark in range(1, 61):
            if mark % 5:
                angle = mark * (6 / DEGREES_PER_RADIAN)
                canvas.filled_circle(
                    CENTER + 195 * math.cos(angle), CENTER + 195 * math.sin(angle), 4
                )

        hands = (
            ((255, 0, 0), self.hands.second_tip),
            ((0, 120, 120), self.hands.minute_tip),
            ((20, 200, 40), self.hands.hour_tip),
        )
        for color, (tx, ty) in hands:
            canvas.set_color(*color)
            canvas.line(CENTER, CENTER, tx, ty)

        canvas.set_color(255, 0, 0)
        canvas.text(251, 55, "6", FONT_MEDIUM)
        canvas.text(56, 250, "9", FONT_MEDIUM)
        canvas.text(445, 250, "3", FONT_MEDIUM)
        canvas.text(245, 445, "12", FONT_MEDIUM)

        canvas.set_color(20, 50, 210)
        canvas.filled_circle(CENTER, CENTER, 20)
        self._back_button(canvas)

    def _draw_prayer_times(self, canvas: Canvas) -> None:
        self._white_background(canvas)

        canvas.set_color(200, 200, 200)
        canvas.filled_rectangle(0, 250, WINDOW_SIZE, 200)
        canvas.set_color(20, 200, 0)
        for offset, line in enumerate(PRAYER_TIMES):
            canvas.text(50, 420 - 40 * offset, line, FONT_LARGE)

        canvas.set_color(200, 200, 200)
        canvas.filled_rectangle(0, 50, WINDOW_SIZE, 155)
        canvas.set_color(20, 200, 0)
        for offset, line in enumerate(FORBIDDEN_TIMES):
            canvas.text(50, 180 - 40 * offset, line, FONT_LARGE)

        self._back_button(canvas)

    def _draw_rules(self, canvas: Canvas) -> None:
        self._white_background(canvas)
        self._image(canvas, 0, 362, RULE_BAR_IMAGE)
        self._image(canvas, 0, 362, RULE1_TITLE_IMAGE)
        self._image(canvas, 0, 292, RULE_BAR_IMAGE)
        self._image(canvas, 35, 302, RULE2_TITLE_IMAGE)
        self._image(canvas, 0, 222, RULE_BAR_IMAGE)
        self._image(canvas, 40, 232, RULE3_TITLE_IMAGE)
        self._back_button(canvas)

    def _draw_about(self, canvas: Canvas) -> None:
        self._white_background(canvas)
        self._image(canvas, 0, 200, "Screenshot-2024-03-05-011437.bmp")
        self._back_button(canvas)

    def _draw_rules_1(self, canvas: Canvas) -> None:
        self._white_background(canvas)
        self._image(canvas, 0, 412, RULE1_TITLE_IMAGE)
        self._image(canvas, 0, 45, "Screenshot-2024-02-23-193837.bmp")
        self._back_button(canvas)

    def _draw_rules_2(self, canvas: Canvas) -> None:
        self._white_background(canvas)
        self._image(canvas, 35, 432, RULE2_TITLE_IMAGE)
        self._image(canvas, 0, 190, "Screenshot 2024-02-26 221036.bmp")
        self._back_button(canvas)

    def _draw_rules_3(self, canvas: Canvas) -> None:
        self._white_background(canvas)
        self._image(canvas, 0, 200, "Screenshot-2024-02-23-194456.bmp")
        self._image(canvas, 0, 0, "Screenshot-2024-02-23-194514.bmp")
        self._back_button(canvas)

    def mouse(self, button: int, state: int, x: int, y: int) -> None:
        if button == MouseButton.LEFT and state == ButtonState.DOWN:
            self.navigator.click(x, y)

    def mouse_move(self, x: int, y: int) -> None:
        print(f"x = {x}, y= {y}")
        self.navigator.drag(x, y)

    def keyboard(self, key: str) -> None:
        if key == "q":
            raise SystemExit(0)

    def special_keyboard(self, key: int) -> None:
        if key == KEY_END:
            raise SystemExit(0)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Prayer clock")
    parser.add_argument(
        "--images", default="image", help="directory holding the BMP images"
    )
    args = parser.parse_args(argv)

    app = PrayerApp(args.images)
    timers = TimerRegistry()
    timers.add(TICK_MS, app.hands.tick_second)
    timers.add(TICK_MS, app.hands.tick_minute)
    timers.add(TICK_MS, app.hands.tick_hour)
    Window(WINDOW_SIZE, WINDOW_SIZE, TITLE).run(app, timers)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())