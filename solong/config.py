"""Key codes and texture files used by the game."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

TEXTURE_DIR = "textures"

BASE_SIZES = (32,)
BONUS_SIZES = (8, 16, 32, 64, 128, 256)
LOADABLE_SIZES = (256, 128, 64, 32, 16)

_BASE_STEMS = {
    "coin": "coin",
    "wall": "wall",
    "player_right": "kirbyR",
    "floor": "ground",
    "exit_open": "exitOpen",
    "exit_closed": "exitClose",
}

_BONUS_STEMS = {
    **_BASE_STEMS,
    "player_left": "kirbyL",
    "player_up": "kirbyU",
    "player_down": "kirbyD",
    "enemy": "enemy",
}


class Key(IntEnum):
    """X11 key codes the game reacts to besides letters."""

    ESC = 65307
    ARROW_LEFT = 65361
    ARROW_UP = 65362
    ARROW_RIGHT = 65363
    ARROW_DOWN = 65364


@dataclass
class Textures:
    """The loaded images of one tile size."""

    size: int
    wall: Any
    floor: Any
    exit_open: Any
    exit_closed: Any
    coin: Any
    player_right: Any
    player_left: Any = None
    player_up: Any = None
    player_down: Any = None
    enemy: Any = None


def texture_paths(size: int, bonus: bool = False) -> dict[str, str]:
    """Map each texture name to its file for tiles of ``size`` pixels.

    The base game ships 32-pixel textures only; the bonus game has more
    images and sizes.
    """
    sizes, stems = (BONUS_SIZES, _BONUS_STEMS) if bonus else (BASE_SIZES, _BASE_STEMS)
    if size not in sizes:
        raise ValueError(f"no textures of size {size}; available: {sizes}")
    return {name: f"{TEXTURE_DIR}/{stem}{size}.xpm" for name, stem in stems.items()}


def load_textures(loader: Callable[[str], Any], size: int) -> Textures:
    """Load every bonus texture of ``size`` through ``loader``.

    ``loader`` takes a file path and returns an image, or ``None`` when the
    file cannot be loaded. Raises ``OSError`` naming the files that failed.
    """
    if size not in LOADABLE_SIZES:
        raise ValueError(f"cannot load textures of size {size}; loadable: {LOADABLE_SIZES}")
    paths = texture_paths(size, bonus=True)
    images = {name: loader(path) for name, path in paths.items()}
    failed = [paths[name] for name, image in images.items() if not image]
    if failed:
        raise OSError(f"cannot load textures: {', '.join(failed)}")
    return Textures(size=size, **images)