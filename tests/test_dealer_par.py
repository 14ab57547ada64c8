import re

import pytest

from ddpar.ddtable import DDTable
from ddpar.dealer_par import DealerParResult, dealer_par

TABLES = [
    (5, 8, 5, 8, 6, 6, 6, 6, 5, 7, 5, 7, 7, 5, 7, 5, 6, 6, 6, 6),
    (4, 9, 4, 9, 10, 2, 10, 2, 8, 3, 8, 3, 6, 7, 6, 7, 9, 3, 9, 3),
    (3, 10, 3, 10, 9, 4, 9, 4, 8, 4, 8, 4, 3, 9, 3, 9, 4, 8, 4, 8),
]
DEALERS = [0, 1, 0]
VULS = [0, 2, 0]
SCORES = [-110, 100, -300]
CONTRACTS = [("2S-EW",), ("4S*-EW-1",), ("5H*-NS-2",)]

_PATTERN = re.compile(r"^[1-7][CDHSN]\*?-(N|E|S|W|NS|EW)(-[0-9]+|\+[0-9]+)?$")


def _rotate(table):
    rows = tuple(tuple(row[(h - 1) % 4] for h in range(4)) for row in table.rows)
    return DDTable(rows)


@pytest.mark.parametrize("index", range(3))
def test_example_hands(index):
    table = DDTable.from_flat(TABLES[index])
    result = dealer_par(table, DEALERS[index], VULS[index])
    assert result.score == SCORES[index]
    assert result.contracts == CONTRACTS[index]
    assert result.number == 1


@pytest.mark.parametrize("index", range(3))
def test_contract_text_shape(index):
    table = DDTable.from_flat(TABLES[index])
    for dealer in range(4):
        for vul in range(4):
            result = dealer_par(table, dealer, vul)
            assert result.number == len(result.contracts) >= 1
            for text in result.contracts:
                assert _PATTERN.match(text), text


@pytest.mark.parametrize("index", range(3))
def test_rotation_negates_score(index):
    table = DDTable.from_flat(TABLES[index])
    swap = {0: 0, 1: 1, 2: 3, 3: 2}
    for dealer in range(4):
        for vul in range(4):
            here = dealer_par(table, dealer, vul)
            there = dealer_par(_rotate(table), (dealer + 1) % 4, swap[vul])
            assert there.score == -here.score
            assert there.number == here.number


def test_passed_out_deal():
    table = DDTable.from_flat([6] * 20)
    result = dealer_par(table, 0, 0)
    assert result.contracts == ("pass",)
    assert result.score == 0


def test_result_number_property():
    result = DealerParResult(-110, ("2S-EW",))
    assert result.number == 1


@pytest.mark.parametrize("dealer", [-1, 4])
def test_bad_dealer(dealer):
    table = DDTable.from_flat(TABLES[0])
    with pytest.raises(ValueError):
        dealer_par(table, dealer, 0)


@pytest.mark.parametrize("vul", [-1, 4])
def test_bad_vulnerability(vul):
    table = DDTable.from_flat(TABLES[0])
    with pytest.raises(ValueError):
        dealer_par(table, 0, vul)