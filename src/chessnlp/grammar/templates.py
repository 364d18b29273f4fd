"""Base rule templates for both conversion directions.

Templates are lark grammars in which every configurable word is referenced by
the rule generated for its alias slot (``piece_king``, ``file_a``,
``kw_capture`` …). :func:`chessnlp.grammar.assembler.assemble` appends those
rules before compiling.

Alternatives are listed most specific first. The parser resolves ambiguous
input in favour of the earliest alternative, so promotion and en-passant
phrasing must precede plain destination phrasing.
"""

from __future__ import annotations

# ── Text → SAN ───────────────────────────────────────────────────────────────

_FORWARD_MOVES = r"""
start: move

move: piece_move suffix
    | pawn_move suffix
    | castle suffix
    | piece_move
    | pawn_move
    | castle
    | resign
    | outcome

piece_move: piece departure action destination
          | piece departure destination
          | piece action destination
          | piece destination

pawn_move: kw_pawn kw_move pawn_body
         | kw_pawn pawn_body
         | pawn_body

pawn_body: en_passant
         | pawn_capture promotion
         | destination promotion
         | pawn_capture
         | destination

en_passant: file kw_capture file rank kw_en_passant

pawn_capture: file kw_capture destination

promotion: kw_promote promotion_piece

suffix: kw_checkmate
      | kw_check

resign: side kw_resign

outcome: side kw_win
       | kw_draw
"""

_FORWARD_TERMINALS = r"""
action: kw_capture
      | kw_move

departure: square
         | file
         | rank

destination: square

square: file "-" rank
      | file rank

piece: piece_king | piece_queen | piece_rook | piece_bishop | piece_knight

promotion_piece: piece_queen | piece_rook | piece_bishop | piece_knight

file: file_a | file_b | file_c | file_d | file_e | file_f | file_g | file_h

rank: rank_1 | rank_2 | rank_3 | rank_4 | rank_5 | rank_6 | rank_7 | rank_8

side: side_white | side_black

castle_side: castle_kingside | castle_queenside

%import common.WS
%ignore WS
"""

FORWARD_ENGLISH = (
    _FORWARD_MOVES
    + r"""
castle: kw_castle castle_side
"""
    + _FORWARD_TERMINALS
)

# Russian speakers put the side first as often as last ("короткая рокировка").
FORWARD_RUSSIAN = (
    _FORWARD_MOVES
    + r"""
castle: kw_castle castle_side
      | castle_side kw_castle
"""
    + _FORWARD_TERMINALS
)

# ── SAN → text ───────────────────────────────────────────────────────────────

SAN_GRAMMAR = r"""
start: result
     | castle suffix
     | castle
     | piece_move suffix
     | piece_move
     | pawn_move suffix
     | pawn_move

result: WHITE_WINS | BLACK_WINS | DRAW

castle: QUEENSIDE | KINGSIDE

piece_move: PIECE departure CAPTURE square
          | PIECE departure square
          | PIECE CAPTURE square
          | PIECE square

pawn_move: FILE CAPTURE square promotion
         | square promotion
         | FILE CAPTURE square
         | square

?departure: square | FILE | RANK

promotion: "=" PROMOTION_PIECE

suffix: CHECKMATE | CHECK

square: FILE RANK

WHITE_WINS: "1-0"
BLACK_WINS: "0-1"
DRAW: "1/2-1/2" | "½-½"
QUEENSIDE: "O-O-O" | "0-0-0"
KINGSIDE: "O-O" | "0-0"
PIECE: "K" | "Q" | "R" | "B" | "N"
PROMOTION_PIECE: "Q" | "R" | "B" | "N"
FILE: /[a-h]/
RANK: /[1-8]/
CAPTURE: "x"
CHECKMATE: "#" | "++"
CHECK: "+"
"""
