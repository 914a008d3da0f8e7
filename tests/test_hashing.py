import pytest

from dsalgo.hashing import (
    HashTable,
    TableFullError,
    double_probe,
    linear_probe,
    make_double_probe,
    quadratic_probe,
)


def test_empty_table_format():
    assert str(HashTable(3)) == "[0: 0] [1: 0] [2: 0] end"


@pytest.mark.parametrize("probe", [linear_probe, quadratic_probe, make_double_probe(11, 1, "+")])
def test_first_insert_uses_first_probe(probe):
    table = HashTable(13, probe)
    index = table.insert(46)
    assert index == probe(46, 0, 13)
    assert f"[{index}: 46]" in str(table)


def test_linear_collision_moves_to_next_probe():
    table = HashTable(13, linear_probe)
    first = table.insert(10)
    second = table.insert(23)
    assert second == linear_probe(23, 1, 13)
    assert first != second


def test_double_probe_matches_factory():
    probe = make_double_probe(7, 7, "-")
    for value in (12, 44, 88):
        for i in range(4):
            assert probe(value, i, 11) == double_probe(value, i, 11, 7, 7, "-")


def test_insert_positions_are_distinct():
    values = [12, 44, 13, 88, 23, 94, 11, 39, 20, 16, 5]
    for probe in (linear_probe, quadratic_probe, make_double_probe(7, 7, "-")):
        table = HashTable(11, probe)
        indexes = [table.insert(v) for v in values]
        assert sorted(indexes) == list(range(11))


def test_full_table_raises():
    table = HashTable(2)
    table.insert(1)
    table.insert(2)
    with pytest.raises(TableFullError):
        table.insert(3)


def test_quadratic_probe_can_run_out_of_reachable_slots():
    table = HashTable(4, quadratic_probe)
    table.insert(0)
    table.insert(4)
    with pytest.raises(TableFullError):
        table.insert(8)


def test_clear_empties_table():
    table = HashTable(5)
    table.insert(7)
    table.clear()
    assert str(table) == str(HashTable(5))


def test_unknown_operator_rejected():
    with pytest.raises(ValueError):
        double_probe(1, 0, 11, 7, 7, "*")
    with pytest.raises(ValueError):
        make_double_probe(7, 7, "/")


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        HashTable(0)


def test_main_prints_six_tables(capsys):
    from dsalgo.hashing import main

    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 6
    assert all(line.endswith("end") for line in lines)
    for line in lines[:3]:
        for value in (10, 20, 30, 40, 33, 46, 50, 60):
            assert f": {value}]" in line
    for line in lines[3:]:
        assert " 0]" not in line