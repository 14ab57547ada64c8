"""Par score and par contracts of a deal, taking the dealer into account."""

from __future__ import annotations

from dataclasses import dataclass, field

from .ddtable import DDTable

STRAINS = 5

# First index: 0 non-vulnerable, 1 vulnerable. Second index: tricks down.
DOUBLED_SCORES = (
    (0, 100, 300, 500, 800, 1100, 1400, 1700,
     2000, 2300, 2600, 2900, 3200, 3500),
    (0, 200, 500, 800, 1100, 1400, 1700, 2000,
     2300, 2600, 2900, 3200, 3500, 3800),
)

# Index is the contract number (0 pass, 1 = 1C, ..., 35 = 7NT);
# each entry is (non-vulnerable, vulnerable).
SCORES = (
    (0, 0),
    (70, 70), (70, 70), (80, 80), (80, 80), (90, 90),
    (90, 90), (90, 90), (110, 110), (110, 110), (120, 120),
    (110, 110), (110, 110), (140, 140), (140, 140), (400, 600),
    (130, 130), (130, 130), (420, 620), (420, 620), (430, 630),
    (400, 600), (400, 600), (450, 650), (450, 650), (460, 660),
    (920, 1370), (920, 1370), (980, 1430), (980, 1430), (990, 1440),
    (1440, 2140), (1440, 2140), (1510, 2210), (1510, 2210), (1520, 2220),
)

# Index is the contract number; each entry is indexed by the
# vulnerability case: none, only defender, only declarer, both.
DOWN_TARGET = (
    (0, 0, 0, 0),
    (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0),
    (0, 0, 0, 0), (0, 0, 0, 0), (1, 0, 1, 0), (1, 0, 1, 0), (1, 0, 1, 0),
    (1, 0, 1, 0), (1, 0, 1, 0), (1, 0, 1, 0), (1, 0, 1, 0), (2, 1, 3, 2),
    (1, 0, 1, 0), (1, 0, 1, 0), (2, 1, 3, 2), (2, 1, 3, 2), (2, 1, 3, 2),
    (2, 1, 3, 2), (2, 1, 3, 2), (2, 1, 3, 2), (2, 1, 3, 2), (2, 1, 3, 2),
    (4, 3, 5, 4), (4, 3, 5, 4), (4, 3, 6, 5), (4, 3, 6, 5), (4, 3, 6, 5),
    (6, 5, 8, 7), (6, 5, 8, 7), (6, 5, 8, 7), (6, 5, 8, 7), (6, 5, 8, 7),
)

FLOOR_CONTRACT = (
    0, 1, 2, 3, 4, 5, 1, 2, 3, 4, 5,
    1, 2, 3, 4, 15, 1, 2, 18, 19, 15,
    21, 22, 18, 19, 15, 26, 27, 28, 29, 30,
    31, 32, 33, 34, 35,
)

NUMBER_TO_CONTRACT = (
    "0",
    "1C", "1D", "1H", "1S", "1N",
    "2C", "2D", "2H", "2S", "2N",
    "3C", "3D", "3H", "3S", "3N",
    "4C", "4D", "4H", "4S", "4N",
    "5C", "5D", "5H", "5S", "5N",
    "6C", "6D", "6H", "6S", "6N",
    "7C", "7D", "7H", "7S", "7N",
)

NUMBER_TO_PLAYER = ("N", "E", "S", "W")

# Vulnerability code (none, both, NS, EW) -> vulnerable flags for NS, EW.
VUL_LOOKUP = ((0, 0), (1, 1), (1, 0), (0, 1))

# [declarer vulnerable][defender vulnerable] -> DOWN_TARGET column.
VUL_TO_NO = ((0, 1), (2, 3))

# Par denomination order (C, D, H, S, NT) to table strain (S, H, D, C, NT).
DENOM_ORDER = (3, 2, 1, 0, 4)

_BIGNUM = 9999


@dataclass(frozen=True)
class DealerParResult:
    """Par score (from North-South's view) and the par contracts as text."""

    score: int
    contracts: tuple[str, ...] = field(default_factory=tuple)

    @property
    def number(self) -> int:
        """Number of par contracts."""
        return len(self.contracts)


@dataclass
class _Entry:
    score: int
    dno: int
    no: int
    tricks: int
    down: int = 0


@dataclass
class _Survey:
    primacy: int
    vul_no: int = 0
    num_candidates: int = 0


def _div_trunc(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _strain_row(table: DDTable, dno: int) -> tuple[int, ...]:
    return table.row(DENOM_ORDER[dno])


def _survey_scores(
    table: DDTable,
    dealer: int,
    vul_by_side: tuple[int, int],
    lists: list[list[_Entry]],
) -> _Survey:
    stats = []
    for side in (0, 1):
        highest_making_no = 0
        dearest_making_no = 0
        dearest_score = 0
        for dno in range(STRAINS):
            t = _strain_row(table, dno)
            best = max(t[side], t[side + 2])
            no = 5 * (best - 7) + dno + 1
            if best < 7:
                lists[side].append(_Entry(0, dno, no, best))
                continue
            score = SCORES[no][vul_by_side[side]]
            lists[side].append(_Entry(score, dno, no, best))
            if score > dearest_score:
                dearest_score = score
                dearest_making_no = no
            elif score == dearest_score and no < dearest_making_no:
                dearest_making_no = no
            highest_making_no = max(highest_making_no, no)
        stats.append((highest_making_no, dearest_making_no))

    s0 = stats[0][0]
    s1 = stats[1][0]
    if s0 > s1:
        primacy = 0
    elif s0 < s1:
        primacy = 1
    elif s0 == 0:
        return _Survey(primacy=-1)
    else:
        # Both sides reach the same contract: whoever can bid it first.
        primacy = 0
        dno = (s0 - 1) % 5
        t_max = lists[0][dno].tricks
        t = _strain_row(table, dno)
        for pno in range(dealer, dealer + 4):
            if t[pno % 4] == t_max:
                primacy = pno % 2
                break

    dm_no = stats[primacy][1]
    vul_no = VUL_TO_NO[vul_by_side[primacy]][vul_by_side[1 - primacy]]

    lists[primacy].sort(key=lambda entry: entry.no, reverse=True)
    num_candidates = sum(1 for entry in lists[primacy] if entry.no >= dm_no)
    return _Survey(primacy, vul_no, num_candidates)


def _best_sacrifice(
    table: DDTable,
    side: int,
    no: int,
    dno: int,
    dealer: int,
    lists: list[list[_Entry]],
    sacr: list[list[int]],
) -> int:
    sacr_list = lists[1 - side]
    best_down = _BIGNUM
    for eno in range(STRAINS):
        sacr_no = sacr_list[eno].no
        down = _BIGNUM
        if eno == dno:
            t_max = _div_trunc(no + 34, 5)
            t = _strain_row(table, dno)
            incr_flag = 0
            for pno in range(dealer, dealer + 4):
                diff = t_max - t[pno % 4]
                if pno % 2 == side:
                    if diff == 0:
                        incr_flag = 1
                else:
                    down = min(down, diff + incr_flag)
            if sacr_no + 5 * down > 35:
                down = _BIGNUM
        else:
            down = _div_trunc(no - sacr_no + 4, 5)
            if sacr_no + 5 * down > 35:
                down = _BIGNUM
        sacr[dno][eno] = down
        best_down = min(best_down, down)
    return best_down


def _contract_as_text(
    table: DDTable, side: int, no: int, dno: int, delta: int
) -> str:
    t = _strain_row(table, dno)
    ta = t[side]
    tb = t[side + 2]
    t_max = max(ta, tb)
    return (
        NUMBER_TO_CONTRACT[no]
        + ("*-" if delta < 0 else "-")
        + (NUMBER_TO_PLAYER[side] if ta == t_max else "")
        + (NUMBER_TO_PLAYER[side + 2] if tb == t_max else "")
        + ("+" if delta > 0 else "")
        + ("" if delta == 0 else str(delta))
    )


def _sacrifice_as_text(no: int, pno: int, down: int) -> str:
    return f"{NUMBER_TO_CONTRACT[no]}-{NUMBER_TO_PLAYER[pno]}-{down}"


def _sacrifices_as_text(
    table: DDTable,
    side: int,
    dealer: int,
    best_down: int,
    no_decl: int,
    dno: int,
    lists: list[list[_Entry]],
    sacr: list[list[int]],
) -> list[str]:
    other = 1 - side
    sacr_list = lists[other]
    results = []
    for eno in range(STRAINS):
        if sacr[dno][eno] != best_down:
            continue

        if eno != dno:
            no_sac = sacr_list[eno].no + 5 * best_down
            results.append(
                _contract_as_text(table, other, no_sac, eno, -best_down))
            continue

        t_max = _div_trunc(no_decl + 34, 5)
        t = _strain_row(table, dno)
        incr_flag = 0
        hits: list[tuple[int, int]] = []
        for pno in range(dealer, dealer + 4):
            pno_mod = pno % 4
            diff = t_max - t[pno_mod]
            if pno % 2 == side:
                if diff == 0:
                    incr_flag = 1
            elif diff + incr_flag == best_down:
                hits.append((pno_mod, no_decl + 5 * incr_flag))

        if len(hits) == 1:
            pno0, ns0 = hits[0]
            results.append(_sacrifice_as_text(ns0, pno0, best_down))
            continue

        (pno0, ns0), (pno1, ns1) = hits[0], hits[1]
        if ns0 == ns1:
            results.append(
                _contract_as_text(table, other, ns0, eno, -best_down))
            continue

        pno_p, ns_p = (pno0, ns0) if ns0 < ns1 else (pno1, ns1)
        results.append(_sacrifice_as_text(ns_p, pno_p, best_down))
    return results


def _reduce_contract(no: int, sac_gap: int) -> tuple[int, int]:
    """Lower a contract as far as the opponents' sacrifice allows.

    Returns the new contract number and the number of overtricks.
    """
    if sac_gap >= -1:
        return no, 0
    flr = FLOOR_CONTRACT[no]
    no_sac_level = no + 5 * (sac_gap + 1)
    new_no = max(no_sac_level, flr)
    return new_no, (no - new_no) // 5


def dealer_par(table: DDTable, dealer: int, vulnerable: int) -> DealerParResult:
    """Compute the par result when ``dealer`` (0..3, N E S W) opens.

    ``vulnerable`` is 0 none, 1 both, 2 NS, 3 EW.  The score is seen
    from North-South; a passed-out deal gives score 0 and ``"pass"``.
    """
    if not 0 <= dealer <= 3:
        raise ValueError(f"dealer must lie in 0 .. 3, not {dealer}")
    if not 0 <= vulnerable <= 3:
        raise ValueError(f"vulnerability must lie in 0 .. 3, not {vulnerable}")

    vul_by_side = VUL_LOOKUP[vulnerable]
    lists: list[list[_Entry]] = [[], []]
    survey = _survey_scores(table, dealer, vul_by_side, lists)
    side = survey.primacy

    if side == -1:
        return DealerParResult(0, ("pass",))

    candidates = lists[side][:survey.num_candidates]
    best_plus = 0
    sac_found = False
    best_down = 0
    kinds: list[int] = []
    sac_gaps: list[int] = []
    sacr = [[0] * STRAINS for _ in range(STRAINS)]

    for entry in candidates:
        target = DOWN_TARGET[entry.no][survey.vul_no]
        down = _best_sacrifice(
            table, side, entry.no, entry.dno, dealer, lists, sacr)
        if down <= target:
            best_down = max(best_down, down)
            if sac_found:
                # A lower contract can never draw a higher sacrifice.
                kinds.append(-1)
            else:
                sac_found = True
                kinds.append(0)
                entry.down = down
            sac_gaps.append(0)
        else:
            best_plus = max(best_plus, entry.score)
            kinds.append(1)
            sac_gaps.append(target - down)

    sac = DOUBLED_SCORES[vul_by_side[1 - side]][best_down]
    contracts: list[str] = []

    if not sac_found or best_plus > sac:
        score = best_plus if side == 0 else -best_plus
        for entry, kind, gap in zip(candidates, kinds, sac_gaps):
            if kind != 1 or entry.score != best_plus:
                continue
            no, plus = _reduce_contract(entry.no, gap)
            contracts.append(
                _contract_as_text(table, side, no, entry.dno, plus))
    else:
        score = sac if side == 0 else -sac
        for entry, kind in zip(candidates, kinds):
            if kind != 0 or entry.down != best_down:
                continue
            contracts.extend(_sacrifices_as_text(
                table, side, dealer, best_down,
                entry.no, entry.dno, lists, sacr))

    return DealerParResult(score, tuple(contracts))