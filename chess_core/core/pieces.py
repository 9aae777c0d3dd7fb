from __future__ import annotations

from typing import Dict, Tuple

from .abilities import Ability, StepAbility, SlideAbility, PawnAbility, KING8, ORTH, DIAG, KNIGHT_DELTAS
from .piece import PieceType

# Movement rules shared by both colors; direction-dependent rules read the
# piece's color at generation time.
MOVEMENT: Dict[PieceType, Tuple[Ability, ...]] = {
    PieceType.PAWN: (PawnAbility(),),
    PieceType.KNIGHT: (StepAbility(KNIGHT_DELTAS),),
    PieceType.BISHOP: (SlideAbility(DIAG),),
    PieceType.ROOK: (SlideAbility(ORTH),),
    PieceType.QUEEN: (SlideAbility(KING8),),
    PieceType.KING: (StepAbility(KING8),),
}


def abilities_for(kind: PieceType) -> Tuple[Ability, ...]:
    return MOVEMENT.get(kind, ())
