"""Board - piece placement on a rectangular grid of any size."""

from __future__ import annotations

from collections.abc import Iterator

from gridchess.core.enums import Color, PieceType, SquareColor
from gridchess.core.piece import Piece
from gridchess.core.types import Coord, column_letters

_COLOR_COUNT = 2

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class OutOfBoundsError(IndexError):
    """Raised when a coordinate lies outside the board."""


class MissingKingError(ValueError):
    """Raised when a side has no king on the board."""


class Board:
    """Mutable width x height board stored as a flat ``row * width + col`` list."""

    __slots__ = ("_width", "_height", "_squares", "_king_squares")

    def __init__(self, width: int = 8, height: int = 8) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive: {width}x{height}")
        self._width = width
        self._height = height
        self._squares: list[Piece | None] = [None] * (width * height)
        # [color] -> king coordinate cache (None if unknown).
        self._king_squares: list[Coord | None] = [None] * _COLOR_COUNT

    # -- Geometry -----------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self._width and 0 <= row < self._height

    def _index(self, col: int, row: int) -> int:
        if not (0 <= col < self._width and 0 <= row < self._height):
            raise OutOfBoundsError(
                f"Square ({col}, {row}) outside {self._width}x{self._height} board"
            )
        return row * self._width + col

    def square_color(self, col: int, row: int) -> SquareColor:
        """Display shade of a square; a1 is dark."""
        self._index(col, row)
        return SquareColor((col + row) % 2)

    # -- Element access -----------------------------------------------------

    def get(self, col: int, row: int) -> Piece | None:
        return self._squares[self._index(col, row)]

    def place(self, piece: Piece, col: int, row: int) -> None:
        """Put *piece* on ``(col, row)``, replacing any occupant."""
        self._set(self._index(col, row), col, row, piece)

    def remove(self, col: int, row: int) -> Piece | None:
        """Clear ``(col, row)`` and return the piece that stood there."""
        idx = self._index(col, row)
        piece = self._squares[idx]
        self._set(idx, col, row, None)
        return piece

    def is_empty(self, col: int, row: int) -> bool:
        return self._squares[self._index(col, row)] is None

    def __getitem__(self, coord: Coord) -> Piece | None:
        return self.get(*coord)

    def __setitem__(self, coord: Coord, piece: Piece | None) -> None:
        col, row = coord
        self._set(self._index(col, row), col, row, piece)

    def _set(self, idx: int, col: int, row: int, piece: Piece | None) -> None:
        old_piece = self._squares[idx]
        if old_piece is not None and old_piece.is_king:
            if self._king_squares[int(old_piece.color)] == (col, row):
                self._king_squares[int(old_piece.color)] = None

        self._squares[idx] = piece

        if piece is not None and piece.is_king:
            self._king_squares[int(piece.color)] = (col, row)

    # -- Query helpers ------------------------------------------------------

    def squares(self) -> Iterator[tuple[int, int, Piece | None]]:
        """Every ``(col, row, occupant)`` from row 0 upwards, left to right."""
        width = self._width
        for idx, piece in enumerate(self._squares):
            yield idx % width, idx // width, piece

    def occupied(self, color: Color | None = None) -> list[tuple[Coord, Piece]]:
        """Occupied squares, optionally restricted to *color*."""
        width = self._width
        return [
            ((idx % width, idx // width), piece)
            for idx, piece in enumerate(self._squares)
            if piece is not None and (color is None or piece.color == color)
        ]

    def pieces(self, color: Color) -> list[Piece]:
        """All pieces of *color* still on the board."""
        return [p for p in self._squares if p is not None and p.color == color]

    def king_square(self, color: Color) -> Coord:
        """Return the king square for *color*."""
        sq = self._king_squares[int(color)]
        if sq is not None:
            return sq
        king = Piece(color, PieceType.KING)
        for coord, piece in self.occupied(color):
            if piece == king:
                self._king_squares[int(color)] = coord
                return coord
        raise MissingKingError(f"No {color.name} king on board")

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board.__new__(Board)
        b._width = self._width
        b._height = self._height
        b._squares = self._squares.copy()
        b._king_squares = self._king_squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * (self._width * self._height)
        self._king_squares = [None] * _COLOR_COUNT

    # -- Factory ------------------------------------------------------------

    @classmethod
    def standard(cls) -> Board:
        """Standard 8x8 starting position."""
        b = cls(8, 8)
        for f in range(8):
            b.place(Piece(Color.WHITE, PieceType.PAWN), f, 1)
            b.place(Piece(Color.BLACK, PieceType.PAWN), f, 6)

        for f, pt in enumerate(_BACK_RANK):
            b.place(Piece(Color.WHITE, pt), f, 0)
            b.place(Piece(Color.BLACK, pt), f, 7)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._squares == other._squares
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        label_width = len(str(self._height))
        for row in range(self._height - 1, -1, -1):
            cells = []
            for col in range(self._width):
                p = self.get(col, row)
                cells.append(str(p) if p else ".")
            rows.append(f"{row + 1:>{label_width}} {' '.join(cells)}")
        files = " ".join(column_letters(col) for col in range(self._width))
        rows.append(f"{' ' * label_width} {files}")
        return "\n".join(rows)
