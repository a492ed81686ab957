# solong

`solong` holds the rules of a small tile-map puzzle game. The player walks a
grid of walls (`1`), floor (`0`), coins (`C`) and an exit (`E`), starting on
the `P` tile. Every coin must be collected before the exit ends the game;
stepping onto the exit with coins left just walks over it. Under the bonus
rules the grid may also hold enemies (`X`), and walking into one ends the
game.

The package also contains the helpers the game is built on: string and
character utilities, byte-buffer functions, a singly linked list, a buffered
line reader and a small `printf`-style formatter.

It has no dependencies outside the standard library. The `test` extra
installs pytest.

## Playing a map

```python
import io
from solong.game import Game, GameMap, Direction, Outcome

grid = [
    "11111",
    "1PC01",
    "100E1",
    "11111",
]
out = io.StringIO()
game = Game(GameMap(grid), output=out)

game.move(Direction.RIGHT)   # Outcome.MOVED, coin collected
game.handle_key("s")         # Outcome.MOVED
game.handle_key("d")         # Outcome.WON
print(out.getvalue())        # "Moves: 1\nMoves: 2\nTotal moves: 3\n"
```

`solong.game` provides:

- `GameMap(grid, player=None, coin_count=None, name="")` – the tile grid.
  The player's position defaults to the `P` tile (a `ValueError` is raised
  if there is none) and `coin_count` to the number of `C` tiles.
  `GameMap.cell(row, col)` returns a tile and raises `IndexError` outside
  the grid.
- `Game(game_map, bonus=False, output=None, render=None)` – one session.
  Creating it turns the start tile into floor. Messages go to `output`
  (standard output by default). `render(game, direction)` is called when
  the view should be redrawn; under the base rules `direction` is `None`,
  under the bonus rules it is the `Direction` the player faces.
- `Game.handle_key(keycode)` – takes a key code or a one-character string:
  `w`/`z`/Up move up, `s`/Down down, `a`/`q`/Left left, `d`/Right right,
  Escape quits; other keys give `Outcome.IGNORED`.
- `Game.move(direction)` – one step, returning an `Outcome`
  (`BLOCKED`, `MOVED`, `WON`, `DIED`). Under the base rules each step
  prints `Moves: N`; winning prints `Total moves: N`. Under the bonus
  rules walls still trigger a redraw, enemies print a death message, and
  winning prints a congratulation with the total. Moving after the game has
  ended raises `RuntimeError`.
- `Game.quit()` – ends the session and returns `Outcome.QUIT`.
- `Game.moves`, `Game.finished` – the step count and whether the game is
  over.

## Keys, textures and errors

- `solong.config.Key` lists the key codes for Escape and the arrow keys.
- `solong.config.texture_paths(size, bonus=False)` maps texture names
  (`wall`, `floor`, `coin`, `exit_open`, `exit_closed`, `player_right`, and
  in bonus mode `player_left`, `player_up`, `player_down`, `enemy`) to
  `textures/<name><size>.xpm` files. The base set exists in size 32 only;
  the bonus set in 8, 16, 32, 64, 128 and 256.
- `solong.config.load_textures(loader, size)` calls `loader(path)` for each
  bonus texture of size 256, 128, 64, 32 or 16 and returns a `Textures`
  record, raising `OSError` naming the files the loader could not load.
- `solong.errors.error_message(location, code, bonus=False)` builds the
  report for an error number; `fail(location, code, bonus=False)` prints it
  and raises `GameError`, a `SystemExit` whose exit status is `code`.

## The toolkit

```python
import io
from solong.strings import split, strtrim
from solong.printf import format_string
from solong.lines import LineReader

split("11111\n10C01\n11111", "\n")   # ['11111', '10C01', '11111']
strtrim("  map  ", " ")              # 'map'
format_string("Moves: %d", 3)        # 'Moves: 3'

for line in LineReader(io.StringIO("111\n1P1\n111\n"), 1):
    print(line, end="")
```

- `solong.strings` – `strlen`, `strchr`, `strrchr`, `strnstr`, `strncmp`,
  `strlcpy`, `strlcat`, `substr`, `strjoin`, `strtrim`, `split`, `strdup`,
  `strmapi`, `striteri`. A NUL character ends a string; positions are
  returned as indexes, or `None` when nothing is found.
- `solong.chars` – `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper`, `atoi` (wraps to 32 bits) and `itoa`.
- `solong.memory` – `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
  `memcpy` and `memmove` over `bytearray` buffers.
- `solong.linked` – `LinkedList` of `Node`s with `push_front`, `push_back`,
  `last`, `len()`, iteration, `iterate`, `map` and `clear`.
- `solong.lines` – `LineReader(stream, buffer_size=1)` returns lines with
  their newline through `next_line()` or iteration; `get_next_line(fd)`
  does the same for an operating-system file descriptor, returning bytes.
- `solong.printf` – `format_string` and `printf` understand
  `%c %s %p %d %i %u %x %X %%`; `put_char`, `put_str`, `put_endl` and
  `put_nbr` write to a stream.

## What the package does not do

`solong` does not read map files or check that a map is valid (closed by
walls, one start, one exit, reachable coins). It opens no window and draws
nothing itself: drawing is left to the `render` callback and image loading
to the loader passed to `load_textures`. There is no command-line program;
the game is driven from Python code.