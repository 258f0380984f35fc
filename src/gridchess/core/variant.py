"""Rule parameters that differ between variants."""

from __future__ import annotations

from dataclasses import dataclass

from gridchess.core.enums import PieceType

_STANDARD_PROMOTIONS: tuple[PieceType, ...] = (
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.ROOK,
    PieceType.QUEEN,
)


@dataclass(frozen=True, slots=True)
class Variant:
    """Immutable rule parameters.

    Args:
        promotion_types: Piece types a pawn may become on the farthest row.
        fifty_move_halfmoves: Half-moves without capture or pawn move after
            which the fifty-move rule can be triggered.
    """

    promotion_types: tuple[PieceType, ...] = _STANDARD_PROMOTIONS
    fifty_move_halfmoves: int = 100

    def __post_init__(self) -> None:
        if not self.promotion_types:
            raise ValueError("At least one promotion piece type is required")
        for ptype in self.promotion_types:
            if ptype in (PieceType.PAWN, PieceType.KING):
                raise ValueError(f"Cannot promote to {ptype.name}")
        if self.fifty_move_halfmoves <= 0:
            raise ValueError(
                f"fifty_move_halfmoves must be positive: {self.fifty_move_halfmoves!r}"
            )

    # Presets
    @classmethod
    def standard(cls) -> Variant:
        return cls()

    @classmethod
    def queen_only(cls) -> Variant:
        """Pawns always promote to a queen."""
        return cls(promotion_types=(PieceType.QUEEN,))
