from utils.params import parse_int, coerce_limit, coerce_offset


def test_parse_int():
    assert parse_int("20") == 20
    assert parse_int(" 15 ") == 15
    assert parse_int("20abc") == 20
    assert parse_int("-4") == -4
    assert parse_int("abc") is None
    assert parse_int("") is None
    assert parse_int(None) is None


def test_coerce_limit():
    assert coerce_limit(None, 20) == 20
    assert coerce_limit("5", 20) == 5
    assert coerce_limit("abc", 20) == 20
    assert coerce_limit("0", 20) == 20
    assert coerce_limit("-1", 20) == 20
    assert coerce_limit("1000", 20) == 100
    assert coerce_limit("30", 10, maximum=25) == 25


def test_coerce_offset():
    assert coerce_offset(None) == 0
    assert coerce_offset("40") == 40
    assert coerce_offset("-10") == 0
    assert coerce_offset("xyz") == 0


def test_coerce_offset_stays_in_64bit_range():
    assert coerce_offset("99999999999999999999") == 2**63 - 1
