# prayerclock

prayerclock is a small windowed application. It has an analogue clock, a table
of daily prayer times, illustrated rules of prayer and an about page. It is
built on a compact drawing canvas over pygame. The canvas uses a bottom-left
origin and includes repeating timers, so other small programs can use it too.

## Installation

```
pip install .
```

To install the test requirements as well:

```
pip install ".[test]"
```

## Running

```
prayerclock
```

This command opens a 512×512 window titled "Muslims Day". The window starts on
the home page, which has four buttons along the bottom:

- **Clock** shows an analogue clock. The hands are set from the current UTC
  time shifted six hours ahead. Once per second the second hand advances by 6
  degrees and the minute hand by 0.1 degree. The hour hand stays at the angle
  it was set to at start-up.
- **Prayer Time** lists five daily prayer times and the forbidden prayer
  times. These are fixed texts, not calculated.
- **Rules of Prayer** opens a list of three rule pages.
- **About** shows an information image.

Every page except the home page has a **Back** button in its top-left corner.
On the main pages, clicking Back returns you to the home page. On a rule page,
you return to the rules list by dragging with a mouse button held down over
the Back button.

To quit, press `q` or the End key, or close the window.

The pages draw bitmap images that are loaded from an image directory. By
default this is `image` in the current working directory. Use `--images` to
choose another directory:

```
prayerclock --images path/to/image
```

The package does not include any of these images. A page whose images cannot
be found fails when it is drawn.

The package also includes a minimal demonstration of the canvas:

```
prayerclock-demo
```

The demonstration opens a 400×400 window that shows a circle and a line of
text. A left click moves the circle 10 pixels up and to the right. A right
click moves it back. Dragging prints the pointer position.

## Using the canvas

`prayerclock.graphics` provides the following:

- `Canvas` wraps a pygame surface. It draws with the colour chosen by
  `set_color(r, g, b)`, which takes components from 0 to 255. It provides
  `point`, `line`, `polygon`, `filled_polygon`, `rectangle`,
  `filled_rectangle`, `circle`, `filled_circle`, `ellipse`, `filled_ellipse`,
  `text` and `show_image`.
  - `show_image` can leave out pixels of one colour, given packed as
    `0xBBGGRR`.
  - `pixel_color` reads a pixel back.
  - `rotate` and `unrotate` rotate everything drawn between them, and the
    context manager `rotated` does the same for a `with` block.
- `Window(width, height, title).run(handler, timers)` opens the window and
  passes events to the handler until the window is closed. Each frame it
  clears the canvas and calls the handler's `draw`. The handler provides
  `draw`, `mouse`, `mouse_move`, `keyboard` and `special_keyboard`.
- `TimerRegistry` holds up to ten repeating timers.
  - `add(msec, callback)` registers a timer and returns its index. Adding an
    eleventh timer raises `TimerLimitError`.
  - `pause(index)` and `resume(index)` stop and restart a timer.
  - `fire_due(now)` runs every timer that is due. It runs an overdue timer
    only once, however many periods it missed.

The module also provides helpers that do not need a window: `circle_points`,
`ellipse_points`, `rectangle_corners`, `scale_color` and `mask_pixels`.