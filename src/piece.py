from typing import NamedTuple

import numpy as np

import global_vars as gv


class Piece(NamedTuple):
    kind: str
    id: int


def generate_piece(piece_id: int, rng: np.random.Generator) -> Piece:
    kind = gv.piece_kinds[rng.integers(len(gv.piece_kinds))]
    return Piece(kind=kind, id=piece_id)


def kind_code(kind: str) -> int:
    return gv.piece_kinds.index(kind)
