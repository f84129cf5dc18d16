"""Tests for version normalization."""

import pytest

from browsergate.versioning.parser import normalize_version


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("10", "10.0.0"),
        ("10.2", "10.2.0"),
        ("10.2.3", "10.2.3"),
        ("91.0.4472.124", "91.0.4472"),
        (10, "10.0.0"),
        (10.2, "10.2.0"),
        ("1.2.3-beta.1", "1.2.3"),
        ("01.02", "1.2.0"),
        ("13_3", "13.0.0"),
        ("5abc.7", "5.7.0"),
        ("all", "0.0.0"),
        ("", "0.0.0"),
        (None, "0.0.0"),
        ("..", "0.0.0"),
        ("-1.2", "0.2.0"),
    ],
)
def test_normalize_version(value, expected):
    assert normalize_version(value) == expected


def test_normalize_version_default_argument():
    assert normalize_version() == "0.0.0"


@pytest.mark.parametrize("value", ["", "garbage", "TP", "1", "4.4.4.4.4", "12.x", " 7 . 1 ", 3, 2.5, "1.2.3+build"])
def test_normalization_is_total_and_idempotent(value):
    """Every input yields three non-negative integers, and normalizing twice changes nothing."""
    once = normalize_version(value)
    parts = once.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)
    assert normalize_version(once) == once
