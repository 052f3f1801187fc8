from __future__ import annotations

import math

import pytest

from awards.records import CanonicalRecord, decade_of, normalize, normalize_rows, parse_year, winner_flag


class TestParseYear:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("1939", 1939),
            (" 1939 ", 1939),
            ("2003/2004", 2003),
            ("1927 (1st)", 1927),
            ("1939.0", 1939),
            ("812", 812),
            (1950, 1950),
            ("1e3", 1000),
        ],
    )
    def test_parses(self, value, expected):
        assert parse_year(value) == expected

    @pytest.mark.parametrize("value", [None, "", "   ", "unknown", "19x9", "12.5", "nan", "inf", "1_939", "1e999", math.nan])
    def test_unparseable_is_none(self, value):
        assert parse_year(value) is None

    def test_leading_year_wins_over_coercion(self):
        assert parse_year("1999abc") == 1999


class TestDecade:
    def test_floor_to_decade(self):
        assert decade_of(1939) == 1930
        assert decade_of(1940) == 1940
        assert decade_of(2009) == 2000

    def test_none(self):
        assert decade_of(None) is None


class TestWinnerFlag:
    @pytest.mark.parametrize("value", ["1", "true", "TRUE", " Winner ", "yes", "Yes"])
    def test_truthy_tokens(self, value):
        assert winner_flag(value) == 1

    @pytest.mark.parametrize("value", [None, "", "0", "false", "no", "nominee", "2"])
    def test_everything_else_is_zero(self, value):
        assert winner_flag(value) == 0


class TestNormalize:
    def test_worked_example(self, two_rows):
        assert [r.year_parsed for r in two_rows] == [1939, 1939]
        assert [r.decade for r in two_rows] == [1930, 1930]
        assert [r.winner_flag for r in two_rows] == [1, 0]
        assert [r.is_winner for r in two_rows] == [True, False]
        assert all(r.cat == "Best Picture" for r in two_rows)

    def test_canonical_category_overrides(self):
        rec = normalize({"Category": "OUTSTANDING PRODUCTION", "CanonicalCategory": "Best Picture"})
        assert rec.cat == "Best Picture"
        assert rec.category == "OUTSTANDING PRODUCTION"

    def test_blank_canonical_category_falls_back(self):
        rec = normalize({"Category": "Directing", "CanonicalCategory": "  "})
        assert rec.cat == "Directing"

    def test_empty_row_never_fails(self):
        rec = normalize({})
        assert rec == CanonicalRecord(year=None, year_parsed=None, decade=None, winner_flag=0, cat=None)

    def test_unparseable_year_keeps_raw(self):
        rec = normalize({"Year": "unknown"})
        assert rec.year == "unknown"
        assert rec.year_parsed is None
        assert rec.decade is None

    def test_records_are_frozen(self, records):
        with pytest.raises(AttributeError):
            records[0].cat = "Other"  # type: ignore[misc]

    def test_normalize_rows_returns_tuple(self, sample_rows):
        out = normalize_rows(sample_rows)
        assert isinstance(out, tuple)
        assert len(out) == len(sample_rows)

    def test_decade_invariant(self, records):
        for r in records:
            if r.year_parsed is None:
                assert r.decade is None
            else:
                assert r.decade == (r.year_parsed // 10) * 10
