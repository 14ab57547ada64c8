"""Par score and par contracts of a deal, independent of the dealer."""

from __future__ import annotations

from dataclasses import dataclass, field

from .ddtable import DDTable

DENOMS = 5

# Par denomination order (NT, S, H, D, C) to table strain (S, H, D, C, NT).
_DENOM_CONV = (4, 0, 1, 2, 3)
_STRAIN_CHARS = "SHDCN"
_SEAT_TEXT = ("N ", "E ", "S ", "W ", "NS ", "EW ")

# Index 1: 0 = NT, 1 = major, 2 = minor; index 2: contract level 1..7.
_MAX_LOW = (
    (0, 0, 1, 0, 1, 2, 0, 0),
    (0, 0, 1, 2, 0, 1, 0, 0),
    (0, 0, 1, 2, 3, 0, 0, 0),
)

# Highest number of levels a making contract may be lowered, by level.
_LOWER_LIMIT = {5: 3, 4: 3, 3: 2, 2: 1}


@dataclass(frozen=True)
class ParContract:
    """One par contract.

    ``denom`` is 0 NT, 1 S, 2 H, 3 D, 4 C; ``seats`` is 0 N, 1 E, 2 S,
    3 W, 4 NS, 5 EW.
    """

    denom: int
    level: int
    seats: int
    under_tricks: int = 0
    over_tricks: int = 0


@dataclass(frozen=True)
class SideParResult:
    """Par score seen from one side, with the contracts that reach it."""

    score: int
    contracts: tuple[ParContract, ...] = field(default_factory=tuple)

    @property
    def number(self) -> int:
        """Number of par contracts."""
        return len(self.contracts)


@dataclass(frozen=True)
class ParResult:
    """Par scores and contract lists as text, for NS and for EW."""

    score: tuple[str, str]
    contracts: tuple[str, str]


def _check_vulnerable(vulnerable: int) -> None:
    if not 0 <= vulnerable <= 3:
        raise ValueError(
            f"vulnerability must lie in 0 .. 3, not {vulnerable}")


def raw_score(denom: int, tricks: int, vulnerable: bool | int) -> int:
    """Score of an undoubled making contract or a doubled sacrifice.

    ``denom`` is 0 NT, 1 S, 2 H, 3 D, 4 C, with ``tricks`` the tricks
    taken (7..13); or ``denom`` is -1 and ``tricks`` the undertricks,
    giving a negative score.
    """
    if denom == -1:
        if vulnerable:
            return -300 * tricks + 100
        if tricks <= 3:
            return -200 * tricks + 100
        return -300 * tricks + 400

    level = tricks - 6
    if denom == 0:
        score = 10 + 30 * level
        game = level >= 3
    elif denom in (1, 2):
        score = 30 * level
        game = level >= 4
    else:
        score = 20 * level
        game = level >= 5

    if game:
        score += 500 if vulnerable else 300
    else:
        score += 50

    if level == 6:
        score += 750 if vulnerable else 500
    elif level == 7:
        score += 1500 if vulnerable else 1000
    return score


def multi_contracts(max_lower: int, tricks: int) -> int:
    """The levels at which a contract makes par, as digits of one number.

    For instance 345 means the contract may be bid at level 3, 4 or 5.
    """
    level = tricks - 6
    limit = _LOWER_LIMIT.get(level)
    if limit is None:
        return level
    if 1 <= max_lower <= limit:
        return int("".join(str(lv) for lv in range(level - max_lower, level + 1)))
    return level


def _vulner_def_side(side: bool, vulnerable: int) -> int:
    if vulnerable == 0:
        return 0
    if vulnerable == 1:
        return 1
    if side:
        return 0 if vulnerable == 2 else 1
    return 0 if vulnerable == 3 else 1


def _side_seats(dr: int, i: int, t1: int, t2: int) -> int:
    if (dr + i) % 2:
        if t1 == t2:
            return 4
        return 0 if t1 > t2 else 2
    if t1 == t2:
        return 5
    return 1 if t1 > t2 else 3


def _over_tricks(max_lower: int, tricks: int) -> int:
    limit = _LOWER_LIMIT.get(tricks - 6, 0)
    return max_lower if 1 <= max_lower <= limit else 0


def _tricks(table: DDTable, denom: int, hand: int) -> int:
    return table.tricks(_DENOM_CONV[denom], hand)


def _search_side(
    table: DDTable, i: int, vulnerable: int
) -> tuple[int, int, list[tuple[int, int]]]:
    """Alternate bidding between the sides to find the par for side ``i``.

    Returns the best score, the undertricks of a sacrifice (0 if the par
    contract makes) and the (denomination, tricks) of each par contract.
    """
    par_denom, par_tricks, par_score, par_sacut = -1, 6, 0, 0
    denom_filter = [False] * DENOMS
    no_filtered = 0
    best_score = 0
    best_sacut = 0
    best: list[tuple[int, int]] = []
    current_side = 0
    both_sides_once = False
    ut = 0

    while True:
        k = (i + current_side) % 2
        isvul = vulnerable == 1 or (vulnerable == 3 if k else vulnerable == 2)
        new_score = False
        prev_denom, prev_tricks = par_denom, par_tricks

        suits = []
        for j in range(DENOMS):
            if denom_filter[j]:
                continue
            tt = max(_tricks(table, j, k), _tricks(table, j, k + 2))
            if tt > par_tricks or (tt == par_tricks and j < par_denom):
                score = raw_score(j, tt, isvul)
            else:
                score = raw_score(-1, prev_tricks - tt, isvul)
            suits.append((j, tt, score))
        suits.sort(key=lambda item: -item[2])

        for j, tt, _ in suits:
            if tt > par_tricks or (tt == par_tricks and j < par_denom):
                score = raw_score(j, tt, isvul)
            else:
                ut = prev_tricks - tt
                if j >= prev_denom:
                    # No sacrifice may go above 7NT.
                    if prev_tricks == 13:
                        continue
                    ut += 1
                if ut <= 0:
                    continue
                score = raw_score(-1, ut, isvul)

            if current_side == 1:
                score = -score

            if (current_side == 0 and score > par_score) or (
                    current_side == 1 and score < par_score):
                new_score = True
                par_score = score
                par_denom = j
                if (current_side == 0 and score > 0) or (
                        current_side == 1 and score < 0):
                    par_tricks = tt
                    par_sacut = 0
                else:
                    par_tricks = tt + ut
                    par_sacut = ut

        if not new_score and both_sides_once:
            if no_filtered == 0:
                best_score = par_score
                if best_score == 0:
                    break
                best_sacut = par_sacut
                best = []
            elif best_score != par_score:
                break
            if no_filtered >= DENOMS:
                break
            denom_filter[par_denom] = True
            no_filtered += 1
            best.append((par_denom, par_tricks))
            both_sides_once = False
            current_side = 0
            par_denom, par_tricks, par_score, par_sacut = -1, 6, 0, 0
        else:
            both_sides_once = True
            current_side = 1 - current_side

    return best_score, best_sacut, best


def _sacrifice_contracts(
    table: DDTable, i: int, score: int, sacut: int,
    best: list[tuple[int, int]],
) -> list[ParContract]:
    dr = 0 if score > 0 else 1
    hand = 0 if (dr + i) % 2 else 1
    contracts = []
    for j, tricks in sorted(best, key=lambda item: item[0]):
        t1 = _tricks(table, j, hand)
        t2 = _tricks(table, j, hand + 2)
        contracts.append(ParContract(
            denom=j, level=tricks - 6, seats=_side_seats(dr, i, t1, t2),
            under_tricks=sacut, over_tricks=0))
    return contracts


def _making_contracts(
    table: DDTable, i: int, score: int, ns_score: int, vulnerable: int,
    best: list[tuple[int, int]],
) -> list[ParContract]:
    dr = 0 if score < 0 else 1
    near = 0 if (dr + i) % 2 == 0 else 1
    far = 1 - near

    t3 = [_tricks(table, m, near) for m in range(DENOMS)]
    t4 = [_tricks(table, m, near + 2) for m in range(DENOMS)]
    tu_max = 0
    denom_max = 0
    for m in range(DENOMS):
        tu = max(t3[m], t4[m])
        if tu > tu_max:
            tu_max = tu
            denom_max = m

    def_vul = _vulner_def_side(ns_score > 0, vulnerable)
    sc2 = abs(score)
    contracts = []
    for j, tricks in best:
        t1 = _tricks(table, j, far)
        t2 = _tricks(table, j, far + 2)
        seats = _side_seats(dr, i, t1, t2)

        step = 1 if denom_max < j else 0
        max_lower = tricks - tu_max - step

        # Lower the contract only while the opponents' sacrifice stays
        # more expensive than the score that would be given up.
        while max_lower > 0:
            sc1 = -raw_score(-1, tricks - max_lower - tu_max + 1 - step,
                             def_vul)
            if sc2 < sc1:
                break
            max_lower -= 1

        opp_tricks = max(t3[j], t4[j])
        while max_lower > 0:
            sc3 = -raw_score(-1, tricks - max_lower - opp_tricks, def_vul)
            if sc2 > sc3 and score < 0:
                max_lower -= 1
            else:
                break

        kind = 0 if j == 0 else (1 if j in (1, 2) else 2)
        max_lower = min(_MAX_LOW[kind][tricks - 6], max_lower)
        over = _over_tricks(max_lower, tricks)
        contracts.append(ParContract(
            denom=j, level=tricks - 6 - over, seats=seats,
            under_tricks=0, over_tricks=over))
    return contracts


def _drop_dominated(
    sides: list[list[ParContract]],
) -> list[list[ParContract]]:
    """Drop contracts that the other side can outbid."""
    dom_denom = [-1, -1]
    dom_level = [-1, -1]
    for i in (0, 1):
        opp = 1 - i
        for c in sides[opp]:
            height = c.level + c.over_tricks
            if height > dom_level[opp] or (
                    height == dom_level[opp] and c.denom < dom_denom[opp]):
                if (i == 0 and c.seats % 2 != 0) or (
                        i == 1 and c.seats % 2 == 0):
                    dom_denom[opp] = c.denom
                    dom_level[opp] = height

    if dom_denom[0] == -1 or dom_denom[1] == -1:
        return sides

    kept = []
    for i in (0, 1):
        opp = 1 - i
        remove = {
            c.denom for c in sides[i]
            if c.level + c.over_tricks < dom_level[opp]
            or (c.level + c.over_tricks == dom_level[opp]
                and dom_denom[opp] < c.denom)
        }
        kept.append([c for c in sides[i] if c.denom not in remove])
    return kept


def sides_par_bin(
    table: DDTable, vulnerable: int
) -> tuple[SideParResult, SideParResult]:
    """Par for North-South and for East-West, each from its own view.

    ``vulnerable`` is 0 none, 1 both, 2 NS, 3 EW.
    """
    _check_vulnerable(vulnerable)

    searched = [_search_side(table, i, vulnerable) for i in (0, 1)]
    scores = [s[0] for s in searched]

    if scores[0] == 0:
        empty = ParContract(denom=0, level=0, seats=0)
        return (SideParResult(scores[0], (empty,)),
                SideParResult(scores[1], (empty,)))

    sides = []
    for i, (score, sacut, best) in enumerate(searched):
        if sacut > 0:
            sides.append(_sacrifice_contracts(table, i, score, sacut, best))
        else:
            sides.append(_making_contracts(
                table, i, score, scores[0], vulnerable, best))

    sides = _drop_dominated(sides)
    return (SideParResult(scores[0], tuple(sides[0])),
            SideParResult(scores[1], tuple(sides[1])))


def _contract_list(result: SideParResult) -> str:
    if not result.contracts:
        return ""
    texts = []
    if result.contracts[0].under_tricks > 0:
        for c in result.contracts:
            suit = _STRAIN_CHARS[_DENOM_CONV[c.denom]]
            texts.append(f"{_SEAT_TEXT[c.seats]}{c.level}{suit}x")
    else:
        for c in result.contracts:
            suit = _STRAIN_CHARS[_DENOM_CONV[c.denom]]
            levels = multi_contracts(
                c.over_tricks, c.over_tricks + c.level + 6)
            texts.append(f"{_SEAT_TEXT[c.seats]}{levels}{suit}")
    return ",".join(texts)


def par(table: DDTable, vulnerable: int) -> ParResult:
    """Par scores and par contracts as text, e.g. ``"NS -110"``, ``"NS:EW 2S"``."""
    ns, ew = sides_par_bin(table, vulnerable)
    score = (f"NS {ns.score}", f"EW {ew.score}")
    if ns.score == 0:
        return ParResult(score, ("NS:", "EW:"))
    return ParResult(
        score, ("NS:" + _contract_list(ns), "EW:" + _contract_list(ew)))