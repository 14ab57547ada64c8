"""Hand arithmetic and bit-set lookups over the ranks held in one suit.

A suit holding ("aggr") is a 13-bit set in which bit 0 is the two and
bit 12 is the ace, so rank ``r`` (2..14) is bit ``r - 2``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

HANDS = 4
SUITS = 4
STRAINS = 5

_RANK_BITS = 13
_AGGR_LIMIT = 1 << _RANK_BITS

CARD_RANK = "xx23456789TJQKA-"
CARD_SUIT = "SHDCN"
CARD_HAND = "NESW"


class Hand(IntEnum):
    """The four seats, in playing order."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


class Strain(IntEnum):
    """The four suits and no-trump, in solver order."""

    SPADES = 0
    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3
    NOTRUMP = 4


@dataclass(frozen=True)
class MoveGroup:
    """A suit holding split into runs of adjacent ranks, lowest run first.

    For each run: ``rank`` is its top rank, ``sequence`` its bits without
    the top one, ``fullseq`` all its bits and ``gap`` the bits between it
    and the run below (0 for the lowest run).
    """

    rank: tuple[int, ...] = ()
    sequence: tuple[int, ...] = ()
    fullseq: tuple[int, ...] = ()
    gap: tuple[int, ...] = ()

    @property
    def last_group(self) -> int:
        """Index of the highest run, or -1 for an empty holding."""
        return len(self.rank) - 1


def hand_id(first: int, relative: int) -> int:
    """The hand that sits ``relative`` places after ``first``."""
    return (first + relative) & 3


def lho(hand: int) -> int:
    """Left-hand opponent of ``hand``."""
    return hand_id(hand, 1)


def rho(hand: int) -> int:
    """Right-hand opponent of ``hand``."""
    return hand_id(hand, 3)


def partner(hand: int) -> int:
    """Partner of ``hand``."""
    return hand_id(hand, 2)


def _check_aggr(aggr: int) -> None:
    if not 0 <= aggr < _AGGR_LIMIT:
        raise ValueError(f"suit holding must lie in 0 .. 8191, not {aggr}")


def _held_bits_descending(aggr: int):
    for bit in reversed(range(_RANK_BITS)):
        if aggr >> bit & 1:
            yield bit


def highest_rank(aggr: int) -> int:
    """Highest rank (2..14) in the holding, or 0 if it is empty."""
    _check_aggr(aggr)
    return aggr.bit_length() + 1 if aggr else 0


def lowest_rank(aggr: int) -> int:
    """Lowest rank (2..14) in the holding, or 0 if it is empty."""
    _check_aggr(aggr)
    return (aggr & -aggr).bit_length() + 1 if aggr else 0


def count_bits(aggr: int) -> int:
    """Number of cards in the holding."""
    _check_aggr(aggr)
    return bin(aggr).count("1")


def rel_rank(aggr: int, rank: int) -> int:
    """Position of ``rank`` in the holding counted from the top (1 = highest).

    Returns 0 when the rank is not held.
    """
    _check_aggr(aggr)
    if not 0 <= rank <= 14:
        raise ValueError(f"rank must lie in 0 .. 14, not {rank}")
    if rank < 2 or not aggr >> (rank - 2) & 1:
        return 0
    return count_bits(aggr >> (rank - 1)) + 1


def win_ranks(aggr: int, least_win: int) -> int:
    """The holding limited to its top ``least_win`` cards."""
    _check_aggr(aggr)
    if not 0 <= least_win <= _RANK_BITS:
        raise ValueError(f"least_win must lie in 0 .. 13, not {least_win}")
    result = 0
    for count, bit in enumerate(_held_bits_descending(aggr)):
        if count >= least_win:
            break
        result |= 1 << bit
    return result


def move_group(ris: int) -> MoveGroup:
    """Split a suit holding into runs of adjacent ranks."""
    _check_aggr(ris)
    runs: list[tuple[int, int]] = []
    bit = 0
    while bit < _RANK_BITS:
        if ris >> bit & 1:
            start = bit
            while bit < _RANK_BITS and ris >> bit & 1:
                bit += 1
            runs.append((start, bit - 1))
        else:
            bit += 1

    ranks, sequences, fullseqs, gaps = [], [], [], []
    prev_top = None
    for start, top in runs:
        fullseq = ((1 << (top + 1)) - 1) ^ ((1 << start) - 1)
        ranks.append(top + 2)
        sequences.append(fullseq & ~(1 << top))
        fullseqs.append(fullseq)
        if prev_top is None:
            gaps.append(0)
        else:
            gaps.append(((1 << start) - 1) & ~((1 << (prev_top + 1)) - 1))
        prev_top = top

    return MoveGroup(tuple(ranks), tuple(sequences), tuple(fullseqs),
                     tuple(gaps))