# egedemos

A set of small, self-contained animated graphics demos. Each one opens a
pygame window and runs until you close it (most also stop on a key press).
Some are fractals, some are physics toys, some are screensavers and a few
are small games.

The simulation logic of every demo (fractal iteration, collisions, springs,
game rules) lives in plain Python classes and functions that can be used and
tested without opening a window. Drawing and input go through pygame.

## Installation

```
pip install egedemos
```

To run the test suite as well:

```
pip install "egedemos[test]"
pytest
```

## The demos

| Command               | What it shows                                                            |
|-----------------------|--------------------------------------------------------------------------|
| `egedemos-mandelbrot` | Mandelbrot set. Drag with the left button to zoom (the selection is stretched to 4:3), right-click to reset. |
| `egedemos-julia`      | Julia sets drawn progressively, with a new parameter, rotation and palette each round. |
| `egedemos-lines`      | Two bouncing polygon trails that slowly change colour.                   |
| `egedemos-triangles`  | Three triangles filled with colour gradients drifting around the screen. |
| `egedemos-balls`      | Balls under gravity colliding elastically with each other.               |
| `egedemos-mouseball`  | Balls with friction that you can grab and throw with the mouse.          |
| `egedemos-fireworks`  | Bursts of sparks falling under light gravity, with a blurred trail.      |
| `egedemos-net`        | A spring net that ripples when you drag a point with the left button.    |
| `egedemos-tetris`     | Falling blocks. Left/Right move, Up rotates, keypad 0 rotates back, Down drops faster, F2 restarts after game over. |
| `egedemos-snake`      | Snake on a 40x30 grid. Steer with W, A, S, D; Esc quits.                 |
| `egedemos-starfield`  | A horizontally scrolling starfield.                                      |
| `egedemos-typegame`   | Letters fall from the top; type them to clear them.                      |
| `egedemos-clock`      | An analogue clock with the current date and time underneath.             |
| `egedemos-shapes`     | Drawings: a rotating star, an arrow, translucent shapes and transformed images. |
| `egedemos-input`      | Shows what you type on screen and prints the character codes to the console. |

### Options

- `--seed N` fixes the random generator for `julia`, `lines`, `triangles`,
  `balls`, `mouseball`, `fireworks`, `tetris`, `snake`, `starfield` and
  `typegame`.
- `--width` and `--height` set the window size for `julia`, `lines` and
  `triangles`.
- `egedemos-mandelbrot --iterations N --colors N` sets the iteration limit
  (default 1000) and palette size (default 300).
- `egedemos-balls --count N` sets the number of balls (default 8).
- `egedemos-net --base N` sets the net size to `4N` by `3N` points (default 20).
- `egedemos-shapes [star|arrow|alpha|triangles|rotated]` picks the drawing;
  `star` (the default) is the only animated one.
- `egedemos-input --utf-8` decodes typed bytes as UTF-8, `--utf-16` keeps the
  characters as they are; without either, bytes are decoded as Latin-1.
- `egedemos-starfield` takes a screensaver-style first argument: none or `/s`
  runs full screen (and quits when the mouse moves more than 20 pixels or a key
  is pressed), `/p` opens a small 320x240 preview with fewer stars, and any
  other argument prints a notice that there are no settings and exits.

## Using the pieces directly

The building blocks are importable. For example, the Mandelbrot escape count
for a single point:

```python
from egedemos.mandelbrot import escape_count

print(escape_count(complex(-0.5, 0.5), 1000))
```

Other entry points:

- `egedemos.colors`: `rgb`, `channels`, `hsv_to_rgb`, `hsl_to_rgb`, `blend`
  and `scale`, all working on packed `0xRRGGBB` integers.
- `egedemos.mandelbrot`: `Viewport`, `fit_selection`, `make_palette`,
  `pixel_color` and `render`, which returns every pixel colour as rows.
- `egedemos.julia`: `JuliaField` (one `step()` per call, returning the pixels
  that escaped), `ColorScheme` and `SeedMap`.
- `egedemos.tetris.Tetris`: feed it `press`/`release` with `Key` values and call
  `update()` once per frame; `merge()` returns the number of cleared lines.
- `egedemos.snake.SnakeGame`: `steer("w")`, `forward()` and `place_fruit()`;
  moves return `False` when the snake dies.
- `egedemos.balls.BallWorld`, `egedemos.mouseball.DragController`,
  `egedemos.net.SpringNet`, `egedemos.starfield.Starfield`,
  `egedemos.typegame.TypingGame` and `egedemos.fireworks.Firework` each advance
  their simulation one frame per `update()` or `step()` call.
- `egedemos.shapes`: `star_points`, `arrow_points` and the `render_*`
  functions, which return pygame surfaces.

## What is not included

The demos only draw to a window. There is no option to save a picture or a
recording, the tetris and typing games keep no score, and the starfield is a
plain program: it is not installed as a system screensaver.

## Requirements

Python 3.10 or newer and pygame.