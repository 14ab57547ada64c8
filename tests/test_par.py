import pytest

from ddpar.ddtable import DDTable
from ddpar.dealer_par import DOUBLED_SCORES, SCORES
from ddpar.par import (
    ParContract,
    ParResult,
    SideParResult,
    multi_contracts,
    par,
    raw_score,
    sides_par_bin,
)

TABLES = [
    [5, 8, 5, 8, 6, 6, 6, 6, 5, 7, 5, 7, 7, 5, 7, 5, 6, 6, 6, 6],
    [4, 9, 4, 9, 10, 2, 10, 2, 8, 3, 8, 3, 6, 7, 6, 7, 9, 3, 9, 3],
    [3, 10, 3, 10, 9, 4, 9, 4, 8, 4, 8, 4, 3, 9, 3, 9, 4, 8, 4, 8],
]
VUL = [0, 2, 0]
PAR_SCORE = [
    ("NS -110", "EW 110"),
    ("NS 100", "EW -100"),
    ("NS -300", "EW 300"),
]
PAR_STRING = [
    ("NS:EW 2S", "EW:EW 2S"),
    ("NS:EW 4Sx", "EW:EW 4Sx"),
    ("NS:NS 5Hx", "EW:NS 5Hx"),
]


def _table(index):
    return DDTable.from_flat(TABLES[index])


def _rotate(table):
    """Move every seat one place clockwise: the new East is the old North."""
    return DDTable(tuple(
        tuple(row[(h + 3) % 4] for h in range(4)) for row in table.rows
    ))


@pytest.mark.parametrize("index", [0, 1, 2])
def test_par_matches_example_hands(index):
    result = par(_table(index), VUL[index])
    assert result == ParResult(PAR_SCORE[index], PAR_STRING[index])


@pytest.mark.parametrize("no", range(1, 36))
@pytest.mark.parametrize("vul", [0, 1])
def test_raw_score_agrees_with_contract_score_table(no, vul):
    level = (no - 1) // 5 + 1
    denom = 4 - (no - 1) % 5
    assert raw_score(denom, level + 6, vul) == SCORES[no][vul]


@pytest.mark.parametrize("down", range(1, 14))
@pytest.mark.parametrize("vul", [0, 1])
def test_raw_score_agrees_with_doubled_penalties(down, vul):
    assert -raw_score(-1, down, bool(vul)) == DOUBLED_SCORES[vul][down]


def test_raw_score_sacrifices_are_negative():
    for down in range(1, 14):
        assert raw_score(-1, down, False) < 0
        assert raw_score(-1, down, True) <= raw_score(-1, down, False)


@pytest.mark.parametrize(
    "max_lower, tricks, expected",
    [
        (3, 11, 2345),
        (2, 11, 345),
        (1, 11, 45),
        (0, 11, 5),
        (3, 10, 1234),
        (2, 10, 234),
        (1, 10, 34),
        (2, 9, 123),
        (1, 9, 23),
        (1, 8, 12),
        (0, 8, 2),
        (0, 13, 7),
    ],
)
def test_multi_contracts(max_lower, tricks, expected):
    assert multi_contracts(max_lower, tricks) == expected


def test_sides_par_bin_sacrifice_contract():
    ns, ew = sides_par_bin(_table(1), 2)
    assert isinstance(ns, SideParResult)
    assert ns.score == 100
    assert ew.score == -100
    assert ns.number == 1
    contract = ns.contracts[0]
    assert contract.denom == 1
    assert contract.level == 4
    assert contract.seats == 5
    assert contract.under_tricks > 0
    assert contract.over_tricks == 0
    assert ew.contracts == ns.contracts


def test_sides_par_bin_making_contract():
    ns, ew = sides_par_bin(_table(0), 0)
    assert ns.score == -110
    assert ew.score == 110
    assert ns.contracts == (ParContract(denom=1, level=2, seats=5),)
    assert ew.contracts == ns.contracts


def test_passed_out_deal():
    table = DDTable.from_flat([6] * 20)
    ns, ew = sides_par_bin(table, 0)
    assert ns.score == 0
    assert ns.contracts == (ParContract(denom=0, level=0, seats=0),)
    assert par(table, 0) == ParResult(("NS 0", "EW 0"), ("NS:", "EW:"))


@pytest.mark.parametrize("index", [0, 1, 2])
def test_scores_of_the_two_sides_are_opposite(index):
    ns, ew = sides_par_bin(_table(index), VUL[index])
    assert ns.score == -ew.score


@pytest.mark.parametrize("index", [0, 1, 2])
def test_rotating_seats_swaps_the_sides(index):
    swap_vul = {0: 0, 1: 1, 2: 3, 3: 2}
    ns, ew = sides_par_bin(_table(index), VUL[index])
    rns, rew = sides_par_bin(_rotate(_table(index)), swap_vul[VUL[index]])
    assert rew.score == ns.score
    assert rns.score == ew.score


@pytest.mark.parametrize("vulnerable", [-1, 4])
def test_bad_vulnerability_is_rejected(vulnerable):
    with pytest.raises(ValueError):
        par(_table(0), vulnerable)
    with pytest.raises(ValueError):
        sides_par_bin(_table(0), vulnerable)