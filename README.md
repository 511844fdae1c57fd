# cursus

Three small programs in one package:

- **push-swap** sorts a list of distinct integers with two stacks and a
  fixed set of operations (`sa`, `sb`, `ss`, `pa`, `pb`, `ra`, `rb`, `rr`,
  `rra`, `rrb`, `rrr`). It prints the operations it used, one per line.
- **fdf** reads a height map from a text file and shows it as an isometric
  wireframe in a window.
- **fractol** opens a window with the Mandelbrot set, which you can zoom with
  the mouse wheel.

## Installation

```
pip install .
```

The windows are drawn with `pygame`, which is installed with the package.
Python 3.10 or later is required.

## push-swap

Pass the numbers as separate arguments or as one quoted string. A single
argument is split on whitespace:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

The output lists the operations, one per line. Nothing is printed if the
input is already sorted, and nothing is printed when no arguments are given.
For invalid input the command prints `Error` to standard output and exits
with status 1. Input is invalid when:

- an argument is not an optionally signed decimal number,
- a value lies outside the 32-bit signed range,
- a number appears twice (`5` and `+5` count as the same number), or
- more than one argument is zero.

From Python, `solve` returns the operations as a list of strings and raises
`cursus.stack.PushSwapError` for invalid input:

```python
from cursus.pushswap_cli import solve

ops = solve(["3", "2", "1"])   # ["ra", "sa"]
```

The building blocks can be used on their own:

- `cursus.stack.PushSwap` holds stacks `a` and `b` as deques of `Node`
  objects (top on the left) and has one method per operation. Each method
  writes the operation's name to the text stream given as `out`, which
  defaults to standard output. `is_sorted` and `format_stack` inspect a stack.
- `cursus.pushswap_input` has `split_words`, `validate`, `atol`,
  `parse_values` and `assign_indices`.
- `cursus.pushswap_sort` has `sort_three` for three elements and
  `sort_stacks` for larger inputs, along with the cost helpers they use.

## fdf

A map file has one row per line. Each row holds integer heights separated by
spaces, and every row must hold the same number of values:

```
0 0 0 0
0 5 5 0
0 0 0 0
```

Only digits, spaces and a `+` or `-` directly before a digit (and not directly
after another character) are accepted.

```
fdf path/to/map.fdf
```

The window is 800 by 800 pixels and stays open until it is closed. The exit
status is:

| status | meaning                                  |
|--------|------------------------------------------|
| 0      | the window was closed                    |
| 1      | not exactly one argument                 |
| 2      | the map cannot be read or is malformed   |
| 3      | the display cannot be started            |
| 4      | the window cannot be opened              |

From Python:

```python
from cursus.canvas import Canvas
from cursus.fdf_map import load_map
from cursus.fdf_render import draw_map

height_map = load_map("path/to/map.fdf")   # raises cursus.fdf_map.MapError
canvas = Canvas(800, 800)
draw_map(canvas, height_map)
```

`cursus.fdf_map` also has `map_width`, `map_height`, `count_numbers` and
`atoi`. `cursus.fdf_render` has `project_point`, `draw_line` (Bresenham,
both ends included) and `height_color`. A `Canvas` stores 32-bit pixels. It
has `put_pixel`, which ignores coordinates outside the canvas, `get_pixel`,
`clear` and `to_rgb_bytes`.

## fractol

```
fractol
```

Scroll up to zoom in by a factor of 1.1 and scroll down to zoom out by a
factor of 0.9. The point under the cursor stays fixed. Escape or closing the
window quits. The command exits with status 1 if the display or window cannot
be opened.

From Python, `cursus.mandelbrot` has `View`, `escape_iterations`
(at most 255 iterations), `pixel_color`, `render_mandelbrot` and `zoom_at`.

## What is not provided

- The fdf wireframe is drawn once, at a fixed 45° projection. It is not
  scaled or centred, so parts of the map that project to negative screen
  coordinates fall outside the window and are not drawn.
- The fdf window has no keyboard or mouse controls: no zoom, rotation,
  panning or Escape key.
- fractol shows only the Mandelbrot set. It takes no arguments and offers no
  other fractals.

## Tests

```
pip install .[test]
pytest
```