from __future__ import annotations

import sys

import pytest

from openfront_client.infra.openfront import normalize_big_integers
from openfront_client.infra.openfront.bigint import is_digit_string


def test_scalars_pass_through() -> None:
    assert normalize_big_integers(None) is None
    assert normalize_big_integers(True) is True
    assert normalize_big_integers(123) == 123
    assert normalize_big_integers(1.5) == 1.5
    assert normalize_big_integers("string") == "string"


def test_digit_string_becomes_exact_int() -> None:
    result = normalize_big_integers({"id": "9007199254740995"})

    assert result == {"id": 9007199254740995}
    assert isinstance(result["id"], int)
    assert result["id"] != int(float("9007199254740995"))


@pytest.mark.parametrize("value", ["abc", "12.3", "-5", "+5", " 12", "", "１２", "1e5"])
def test_non_digit_strings_unchanged(value: str) -> None:
    assert normalize_big_integers({"value": value}) == {"value": value}
    assert not is_digit_string(value)


def test_nested_structures_are_walked() -> None:
    payload = {
        "data": {"id": "9876543210", "meta": {"count": "42", "name": "test"}},
        "items": ["123", {"id": "456"}, "abc", ["7", False, None]],
    }

    assert normalize_big_integers(payload) == {
        "data": {"id": 9876543210, "meta": {"count": 42, "name": "test"}},
        "items": [123, {"id": 456}, "abc", [7, False, None]],
    }


def test_normalization_is_idempotent_and_does_not_mutate_input() -> None:
    payload = {"info": {"config": {"id": "12345678901234567890"}}, "turns": [{"hash": "1"}]}

    once = normalize_big_integers(payload)
    twice = normalize_big_integers(once)

    assert once == twice
    assert payload["info"]["config"]["id"] == "12345678901234567890"


def test_conversion_failure_keeps_original_string() -> None:
    original_limit = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(640)
    try:
        huge = "9" * 1000
        result = normalize_big_integers({"val": huge, "other": "123"})
    finally:
        sys.set_int_max_str_digits(original_limit)

    assert result == {"val": huge, "other": 123}
