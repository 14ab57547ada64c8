import pytest

from ddpar.ddtable import DDTable

TABLES = [
    [5, 8, 5, 8, 6, 6, 6, 6, 5, 7, 5, 7, 7, 5, 7, 5, 6, 6, 6, 6],
    [4, 9, 4, 9, 10, 2, 10, 2, 8, 3, 8, 3, 6, 7, 6, 7, 9, 3, 9, 3],
    [3, 10, 3, 10, 9, 4, 9, 4, 8, 4, 8, 4, 3, 9, 3, 9, 4, 8, 4, 8],
]


@pytest.mark.parametrize("values", TABLES)
def test_from_flat_layout(values):
    table = DDTable.from_flat(values)
    for strain in range(5):
        for hand in range(4):
            assert table.tricks(strain, hand) == values[4 * strain + hand]


def test_row():
    table = DDTable.from_flat(TABLES[1])
    assert table.row(1) == (10, 2, 10, 2)
    assert table.row(4) == (9, 3, 9, 3)


def test_rows_are_tuples_and_equal_tables_compare_equal():
    a = DDTable.from_flat(TABLES[2])
    b = DDTable([TABLES[2][i:i + 4] for i in range(0, 20, 4)])
    assert a == b
    assert a.rows[0] == (3, 10, 3, 10)


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        DDTable.from_flat(TABLES[0][:19])


def test_out_of_range_rejected():
    values = list(TABLES[0])
    values[3] = 14
    with pytest.raises(ValueError):
        DDTable.from_flat(values)


def test_wrong_shape_rejected():
    with pytest.raises(ValueError):
        DDTable(((1, 2, 3),) * 5)