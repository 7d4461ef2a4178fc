"""
Movie Library API - Path Id Parsing Tests
=========================================

What:  parse_id / require_id / lookup_id decide between "is an id",
       400 and 404 for every path parameter.
"""

import pytest

from movielib.dependencies import lookup_id, parse_id, require_id
from movielib.exceptions import MalformedInputError, NotFoundError


class TestParseId:

    @pytest.mark.parametrize("raw, expected", [
        ("1", 1),
        ("42", 42),
        ("007", 7),
        ("-3", -3),
        ("+5", 5),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ])
    def test_valid_ids(self, raw, expected):
        assert parse_id(raw) == expected

    @pytest.mark.parametrize("raw", [
        "", "abc", "1.5", " 1", "1 ", "1_000", "0x10", "１２", "2147483648", "-2147483649", "-",
    ])
    def test_invalid_ids(self, raw):
        assert parse_id(raw) is None


class TestRequireId:

    def test_returns_parsed_value(self):
        assert require_id("12") == 12

    def test_malformed_raises_malformed_input(self):
        with pytest.raises(MalformedInputError, match="must be an integer") as exc_info:
            require_id("abc")
        assert exc_info.value.status_code == 400
        assert exc_info.value.context["field"] == "id"


class TestLookupId:

    def test_returns_parsed_value(self):
        assert lookup_id("3", resource="movie") == 3

    def test_malformed_raises_not_found(self):
        with pytest.raises(NotFoundError) as exc_info:
            lookup_id("abc", resource="review")
        assert exc_info.value.status_code == 404
        assert exc_info.value.context == {"resource": "review", "resource_id": "abc"}
