from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator, List, Optional, Union

# Board geometry: index = row * 8 + column, A1 = 0, H8 = 63
SIZE = 8
NUM_CELLS = SIZE * SIZE

Bitboard = int

BB_EMPTY: Bitboard = 0
BB_ALL: Bitboard = 0xFFFF_FFFF_FFFF_FFFF
BB_FILE_A: Bitboard = 0x0101_0101_0101_0101
BB_FILE_H: Bitboard = 0x8080_8080_8080_8080

FILE_NAMES = "ABCDEFGH"
RANK_NAMES = "12345678"

NOT_FOUND = -1
INVALID_COORD = "XX"

START = "START"
PASS = "PASS"

LastMove = Union[int, str]


class Color(Enum):
    BLACK = "black"
    WHITE = "white"

    @property
    def other(self) -> "Color":
        return Color.WHITE if self is Color.BLACK else Color.BLACK


BLACK = Color.BLACK
WHITE = Color.WHITE


def bb_square(index: int) -> Bitboard:
    return 1 << index


def scan_forward(bb: Bitboard) -> Iterator[int]:
    """Yield the indices of set bits in ascending order."""
    while bb:
        lsb = bb & -bb
        yield lsb.bit_length() - 1
        bb ^= lsb


def squares(bb: Bitboard) -> List[int]:
    return list(scan_forward(bb))


def count(bb: Bitboard) -> int:
    return bin(bb).count("1")


def coord_to_index(coord: object) -> int:
    """Parse text such as ``"d3"`` or ``"D3"`` into a cell index.

    Returns NOT_FOUND for anything that is not exactly a file letter A-H
    followed by a rank digit 1-8.
    """
    if not isinstance(coord, str) or len(coord) != 2:
        return NOT_FOUND
    file_char = coord[0].upper()
    rank_char = coord[1]
    if file_char not in FILE_NAMES or rank_char not in RANK_NAMES:
        return NOT_FOUND
    return RANK_NAMES.index(rank_char) * SIZE + FILE_NAMES.index(file_char)


def index_to_coord(index: int) -> str:
    if not 0 <= index < NUM_CELLS:
        return INVALID_COORD
    return FILE_NAMES[index % SIZE] + RANK_NAMES[index // SIZE]


@dataclass(frozen=True)
class Position:
    """Immutable snapshot of one Othello position.

    Occupancy is kept as one bitboard per colour. Every rule operation returns
    a new Position; history belongs to whoever holds the snapshots.
    """

    black: Bitboard
    white: Bitboard
    current_player: Color = BLACK
    pass_count: int = 0
    last_move: LastMove = START

    def __post_init__(self) -> None:
        if self.black & self.white:
            raise ValueError("Black and white discs overlap")
        if (self.black | self.white) & ~BB_ALL or self.black < 0 or self.white < 0:
            raise ValueError("Disc outside the 64-cell board")
        if self.pass_count < 0:
            raise ValueError("pass_count must be non-negative")

    @classmethod
    def initial(cls) -> "Position":
        # D4 and E5 black, E4 and D5 white
        return cls(
            black=bb_square(27) | bb_square(36),
            white=bb_square(28) | bb_square(35),
        )

    def discs(self, color: Color) -> Bitboard:
        return self.black if color is BLACK else self.white

    @property
    def own(self) -> Bitboard:
        return self.discs(self.current_player)

    @property
    def opponent(self) -> Bitboard:
        return self.discs(self.current_player.other)

    @property
    def occupied(self) -> Bitboard:
        return self.black | self.white

    @property
    def empty(self) -> Bitboard:
        return ~self.occupied & BB_ALL

    def total_discs(self) -> int:
        return count(self.occupied)

    def with_player(self, color: Color) -> "Position":
        """Same occupancy with ``color`` to move."""
        if color is self.current_player:
            return self
        return replace(self, current_player=color)

    def color_at(self, index: int) -> Optional[Color]:
        mask = bb_square(index)
        if self.black & mask:
            return BLACK
        if self.white & mask:
            return WHITE
        return None

    def to_rows(self) -> List[str]:
        """Rows from rank 1 to rank 8 using ``B``, ``W`` and ``.``."""
        chars = {BLACK: "B", WHITE: "W", None: "."}
        return [
            "".join(chars[self.color_at(row * SIZE + col)] for col in range(SIZE))
            for row in range(SIZE)
        ]

    def __str__(self) -> str:  # pragma: no cover (cosmetic)
        lines = ["  " + " ".join(FILE_NAMES)]
        for rank, row in enumerate(self.to_rows()):
            lines.append(f"{RANK_NAMES[rank]} " + " ".join(row))
        lines.append(f"B={count(self.black)} W={count(self.white)} to move: {self.current_player.value}")
        return "\n".join(lines)
