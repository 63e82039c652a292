from types import MappingProxyType
from typing import List, Mapping, Tuple

GLYPH_HEIGHT = 7
FILL = "█"

# Each glyph is GLYPH_HEIGHT rows separated by spaces; "#" is ink, "." blank.
_SOURCE = {
    "0": ".###. #...# #..## #.#.# ##..# #...# .###.",
    "1": "..#.. .##.. ..#.. ..#.. ..#.. ..#.. .###.",
    "2": ".###. #...# ....# ...#. ..#.. .#... #####",
    "3": "##### ...#. ..#.. ...#. ....# #...# .###.",
    "4": "...#. ..##. .#.#. #..#. ##### ...#. ...#.",
    "5": "##### #.... ####. ....# ....# #...# .###.",
    "6": "..##. .#... #.... ####. #...# #...# .###.",
    "7": "##### ....# ...#. ..#.. .#... .#... .#...",
    "8": ".###. #...# #...# .###. #...# #...# .###.",
    "9": ".###. #...# #...# .#### ....# ...#. .##..",
    ":": "... ... .#. ... .#. ... ...",
    "-": "..... ..... ..... ##### ..... ..... .....",
    "+": "..... ..#.. ..#.. ##### ..#.. ..#.. .....",
    ".": "... ... ... ... ... ... .#.",
    "!": ".#. .#. .#. .#. .#. ... .#.",
    "?": ".###. #...# ....# ...#. ..#.. ..... ..#..",
    " ": "..... ..... ..... ..... ..... ..... .....",
    "A": ".###. #...# #...# ##### #...# #...# #...#",
    "B": "####. #...# #...# ####. #...# #...# ####.",
    "C": ".###. #...# #.... #.... #.... #...# .###.",
    "D": "####. #...# #...# #...# #...# #...# ####.",
    "E": "##### #.... #.... ####. #.... #.... #####",
    "F": "##### #.... #.... ####. #.... #.... #....",
    "G": ".###. #...# #.... #.### #...# #...# .####",
    "H": "#...# #...# #...# ##### #...# #...# #...#",
    "I": ".###. ..#.. ..#.. ..#.. ..#.. ..#.. .###.",
    "J": "..### ...#. ...#. ...#. ...#. #..#. .##..",
    "K": "#...# #..#. #.#.. ##... #.#.. #..#. #...#",
    "L": "#.... #.... #.... #.... #.... #.... #####",
    "M": "#...# ##.## #.#.# #.#.# #...# #...# #...#",
    "N": "#...# #...# ##..# #.#.# #..## #...# #...#",
    "O": ".###. #...# #...# #...# #...# #...# .###.",
    "P": "####. #...# #...# ####. #.... #.... #....",
    "Q": ".###. #...# #...# #...# #.#.# #..#. .##.#",
    "R": "####. #...# #...# ####. #.#.. #..#. #...#",
    "S": ".#### #.... #.... .###. ....# ....# ####.",
    "T": "##### ..#.. ..#.. ..#.. ..#.. ..#.. ..#..",
    "U": "#...# #...# #...# #...# #...# #...# .###.",
    "V": "#...# #...# #...# #...# #...# .#.#. ..#..",
    "W": "#...# #...# #...# #.#.# #.#.# #.#.# .#.#.",
    "X": "#...# #...# .#.#. ..#.. .#.#. #...# #...#",
    "Y": "#...# #...# .#.#. ..#.. ..#.. ..#.. ..#..",
    "Z": "##### ....# ...#. ..#.. .#... #.... #####",
}


def _build(source: str) -> Tuple[str, ...]:
    # trailing blank column separates adjacent glyphs
    return tuple(row.replace("#", FILL).replace(".", " ") + " " for row in source.split())


GLYPHS: Mapping[str, Tuple[str, ...]] = MappingProxyType({ch: _build(src) for ch, src in _SOURCE.items()})
BLANK = GLYPHS[" "]


def glyph_for(ch: str) -> Tuple[str, ...]:
    glyph = GLYPHS.get(ch)
    if glyph is None:
        glyph = GLYPHS.get(ch.upper(), BLANK)
    return glyph


def glyph_width(ch: str) -> int:
    return len(glyph_for(ch)[0])


def text_width(text: str, block_font: bool = True) -> int:
    if not block_font:
        return len(text)
    return sum(glyph_width(ch) for ch in text)


def render(text: str, block_font: bool) -> List[str]:
    if not block_font:
        return [text]
    lines = [""] * GLYPH_HEIGHT
    for ch in text:
        glyph = glyph_for(ch)
        for i in range(GLYPH_HEIGHT):
            lines[i] += glyph[i]
    return lines
