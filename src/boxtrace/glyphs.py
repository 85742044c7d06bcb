"""
Glyph adjacency rules.

Each box-drawing glyph is a connector segment that can be entered or left
through some of its four sides. A cell with any other character is
impassable, so decorative text can sit anywhere in a diagram.

    ,---.     ,  corner that opens down and right
    |   |     .  corner that opens down and left
    '---'     '  bottom corner or tee, opens up, left and right
"""

from typing import Dict, FrozenSet, Optional

from .models import Direction

GLYPH_DIRECTIONS: Dict[str, FrozenSet[Direction]] = {
    "|": frozenset({Direction.UP, Direction.DN}),
    "-": frozenset({Direction.LT, Direction.RT}),
    ".": frozenset({Direction.DN, Direction.LT}),
    ",": frozenset({Direction.DN, Direction.RT}),
    "'": frozenset({Direction.UP, Direction.LT, Direction.RT}),
    "<": frozenset({Direction.RT}),
    ">": frozenset({Direction.LT}),
}

GLYPHS: FrozenSet[str] = frozenset(GLYPH_DIRECTIONS)

_NONE: FrozenSet[Direction] = frozenset()


def can_go(glyph: Optional[str], direction: Direction) -> bool:
    """Check whether ``glyph`` connects through its ``direction`` side."""
    if glyph is None:
        return False
    return direction in GLYPH_DIRECTIONS.get(glyph, _NONE)
