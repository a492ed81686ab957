"""Game state and movement rules for the tile-map puzzle."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TextIO

from .config import Key
from .printf import format_string

WALL = "1"
FLOOR = "0"
COIN = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "X"

DIED_MESSAGE = "\033[1;31mYOU DIED💀\033[0m\n"


class Direction(IntEnum):
    """Directions of movement; the value is the side the player faces."""

    LEFT = 1
    UP = 2
    RIGHT = 3
    DOWN = 4


_DELTAS = {
    Direction.LEFT: (0, -1),
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
}

_KEY_DIRECTIONS = {
    ord("w"): Direction.UP,
    ord("z"): Direction.UP,
    int(Key.ARROW_UP): Direction.UP,
    ord("s"): Direction.DOWN,
    int(Key.ARROW_DOWN): Direction.DOWN,
    ord("a"): Direction.LEFT,
    ord("q"): Direction.LEFT,
    int(Key.ARROW_LEFT): Direction.LEFT,
    ord("d"): Direction.RIGHT,
    int(Key.ARROW_RIGHT): Direction.RIGHT,
}


class Outcome(Enum):
    """What came of a key press or a move."""

    IGNORED = "ignored"
    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"
    DIED = "died"
    QUIT = "quit"


@dataclass
class GameMap:
    """The tile grid, the player's position and the coins left to collect.

    ``player`` defaults to the position of the ``P`` tile and
    ``coin_count`` to the number of ``C`` tiles.
    """

    grid: list[list[str]]
    player: tuple[int, int] | None = None
    coin_count: int | None = None
    name: str = ""

    def __post_init__(self) -> None:
        self.grid = [list(row) for row in self.grid]
        if self.player is None:
            found = [
                (row, col)
                for row, line in enumerate(self.grid)
                for col, tile in enumerate(line)
                if tile == PLAYER
            ]
            if not found:
                raise ValueError("map has no player start")
            self.player = found[0]
        else:
            self.player = tuple(self.player)  # type: ignore[assignment]
        if self.coin_count is None:
            self.coin_count = sum(line.count(COIN) for line in self.grid)

    def cell(self, row: int, col: int) -> str:
        """The tile at ``row``, ``col``."""
        if not 0 <= row < len(self.grid) or not 0 <= col < len(self.grid[row]):
            raise IndexError(f"position ({row}, {col}) lies outside the map")
        return self.grid[row][col]

    def _set(self, row: int, col: int, tile: str) -> None:
        self.cell(row, col)
        self.grid[row][col] = tile


RenderHook = Callable[["Game", "Direction | None"], object]


class Game:
    """One play session on a :class:`GameMap`.

    The base game prints the move count after every step; the bonus game
    adds enemies and reports the facing side to ``render``.
    """

    def __init__(
        self,
        game_map: GameMap,
        bonus: bool = False,
        output: TextIO | None = None,
        render: RenderHook | None = None,
    ) -> None:
        self.map = game_map
        self.bonus = bonus
        self.moves = 0
        self.finished = False
        self._output = output
        self._render = render
        row, col = game_map.player  # type: ignore[misc]
        game_map._set(row, col, FLOOR)

    def _write(self, text: str) -> None:
        stream = sys.stdout if self._output is None else self._output
        stream.write(text)
        stream.flush()

    def _draw(self, direction: Direction | None) -> None:
        if self._render is not None:
            self._render(self, direction)

    def handle_key(self, keycode: int | str) -> Outcome:
        """React to a key press the way the key hook does."""
        code = ord(keycode) if isinstance(keycode, str) else int(keycode)
        if code == Key.ESC:
            return self.quit()
        direction = _KEY_DIRECTIONS.get(code)
        if direction is None:
            return Outcome.IGNORED
        return self.move(direction)

    def move(self, direction: Direction) -> Outcome:
        """Try to step the player one tile in ``direction``."""
        if self.finished:
            raise RuntimeError("the game is over")
        direction = Direction(direction)
        drow, dcol = _DELTAS[direction]
        row, col = self.map.player  # type: ignore[misc]
        target = (row + drow, col + dcol)
        tile = self.map.cell(*target)
        if self.bonus:
            return self._move_bonus(direction, target, tile)
        return self._move_base(target, tile)

    def _move_base(self, target: tuple[int, int], tile: str) -> Outcome:
        if tile == WALL:
            return Outcome.BLOCKED
        outcome = Outcome.BLOCKED
        if tile == COIN:
            self._collect(target)
            outcome = Outcome.MOVED
        elif tile == FLOOR:
            self._step(target)
            outcome = Outcome.MOVED
        elif tile == EXIT:
            if self.map.coin_count == 0:
                self.moves += 1
                self._write(format_string("Total moves: %d\n", self.moves))
                self.quit()
                return Outcome.WON
            self._step(target)
            outcome = Outcome.MOVED
        self._write(format_string("Moves: %d\n", self.moves))
        self._draw(None)
        return outcome

    def _move_bonus(
        self, direction: Direction, target: tuple[int, int], tile: str
    ) -> Outcome:
        if tile == WALL:
            self._draw(direction)
            return Outcome.BLOCKED
        if tile == ENEMY:
            self._write(DIED_MESSAGE)
            self.quit()
            return Outcome.DIED
        outcome = Outcome.BLOCKED
        if tile == COIN:
            self.map._set(*target, FLOOR)
            self.map.player = target
            self.map.coin_count -= 1  # type: ignore[operator]
            outcome = Outcome.MOVED
        elif tile == FLOOR:
            self.map.player = target
            outcome = Outcome.MOVED
        elif tile == EXIT:
            if self.map.coin_count == 0:
                greeting = (
                    "Congratulations" if direction is Direction.RIGHT else "Conglaturation"
                )
                self.moves += 1
                self._write(
                    format_string("\033[1;36m%s🥳\nTotal moves: %d\n", greeting, self.moves)
                )
                self.quit()
                return Outcome.WON
            self.map.player = target
            outcome = Outcome.MOVED
        self.moves += 1
        self._draw(direction)
        return outcome

    def _step(self, target: tuple[int, int]) -> None:
        self.map.player = target
        self.moves += 1

    def _collect(self, target: tuple[int, int]) -> None:
        self.map._set(*target, FLOOR)
        self.map.coin_count -= 1  # type: ignore[operator]
        self._step(target)

    def quit(self) -> Outcome:
        """End the session."""
        self.finished = True
        return Outcome.QUIT


def _rows(lines: Iterable[str]) -> list[list[str]]:
    return [list(line) for line in lines]