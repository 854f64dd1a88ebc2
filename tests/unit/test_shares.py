import json
import logging

import pytest

from robustshamir.errors import InvalidDigit, MalformedShareFile
from robustshamir.reconstruct import Point
from robustshamir.shares import load_shares, parse_base, read_shares


@pytest.mark.parametrize(
    ("literal", "base", "expected"),
    [
        ("7", 10, 7),
        ("1001", 2, 9),
        ("3e7", 16, 999),
        ("3E7", 16, 999),
        ("zz", 36, 1295),
        ("1_000 000", 10, 1000000),
        ("", 10, 0),
    ],
)
def test_parse_base(literal, base, expected):
    assert parse_base(literal, base) == expected


@pytest.mark.parametrize(("literal", "base"), [("12", 2), ("1g", 16), ("1-0", 10)])
def test_invalid_digit(literal, base):
    with pytest.raises(InvalidDigit):
        parse_base(literal, base)


@pytest.mark.parametrize("base", [0, 1, 37])
def test_invalid_base(base):
    with pytest.raises(ValueError):
        parse_base("1", base)


def test_load_shares():
    data = {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "7"},
        "2": {"base": 2, "value": "1001"},
        "4": {"base": "16", "value": "d"},
        "extra": "ignored",
    }
    points, k = load_shares(data)
    assert k == 3
    assert points == [Point(1, 7), Point(2, 9), Point(4, 13)]


def test_missing_share_is_skipped(caplog):
    data = {"n": 3, "k": 2, "1": {"base": "10", "value": "1"}}
    with caplog.at_level(logging.WARNING):
        points, _ = load_shares(data)
    assert points == [Point(1, 1)]
    assert "Share 2 is missing" in caplog.text


def test_overrides():
    data = {"keys": {"n": 3, "k": 3}}
    data.update({str(i): {"base": "10", "value": str(i)} for i in range(1, 4)})
    points, k = load_shares(data, n=2, k=1)
    assert k == 1
    assert [p.x for p in points] == [1, 2]


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"keys": {"k": 2}},
        {"keys": {"n": 2}},
        {"keys": {"n": "two", "k": 2}},
        {"keys": {"n": 1, "k": 1}, "1": {"value": "1"}},
        {"keys": {"n": 1, "k": 1}, "1": {"base": "x", "value": "1"}},
        {"keys": {"n": 1, "k": 1}, "1": {"base": "36", "value": None}},
        {"keys": {"n": 1, "k": 1}, "1": {"base": "36", "value": True}},
        {"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": 7}},
        {"keys": {"n": 1, "k": 1}, "1": {"base": True, "value": "1"}},
        {"keys": {"n": 1, "k": 1}, "1": {"base": None, "value": "1"}},
    ],
)
def test_malformed(data):
    with pytest.raises(MalformedShareFile):
        load_shares(data)


def test_read_shares(tmp_path):
    path = tmp_path / "shares.json"
    path.write_text(
        json.dumps({"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": "42"}})
    )
    assert read_shares(path) == ([Point(1, 42)], 1)
