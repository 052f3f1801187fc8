"""Shared fixtures: a small nominations table covering winners, blanks and composite years."""

from __future__ import annotations

import pytest

from awards.data import build_context
from awards.records import normalize_rows

SAMPLE_ROWS = [
    {"Year": "1939", "Category": "Best Picture", "Film": "Gone with the Wind", "Name": "Selznick", "Winner": "1", "Class": "Title"},
    {"Year": "1939", "Category": "Best Picture", "Film": "Wuthering Heights", "Name": "Goldwyn", "Winner": "0", "Class": "Title"},
    {"Year": "1939", "Category": "Directing", "Film": "Gone with the Wind", "Name": "Victor Fleming", "Winner": "True", "Class": "Directing"},
    {"Year": "1940", "Category": "Best Picture", "Film": "Rebecca", "Name": "Selznick", "Winner": "winner", "Class": "Title"},
    {"Year": "1932/1933", "Category": "OUTSTANDING PRODUCTION", "CanonicalCategory": "Best Picture", "Film": "Cavalcade", "Name": "Fox", "Winner": "yes", "Class": "Title"},
    {"Year": "1950", "Category": "Directing", "Film": "All About Eve", "Name": "Joseph L. Mankiewicz", "Winner": "1", "Class": "Directing"},
    {"Year": "1950", "Category": "Best Picture", "Film": "All About Eve", "Name": "Zanuck", "Winner": "1", "Class": "Title"},
    {"Year": "1950", "Category": "Best Picture", "Film": "Sunset Boulevard", "Name": "Brackett", "Winner": "", "Class": "Title"},
    {"Year": "unknown", "Category": "Writing", "Film": "", "Name": "", "Winner": None, "Class": ""},
]


@pytest.fixture
def sample_rows():
    return [dict(r) for r in SAMPLE_ROWS]


@pytest.fixture
def records(sample_rows):
    return normalize_rows(sample_rows)


@pytest.fixture
def ctx(records):
    return build_context(records, files=["oscars.csv"])


@pytest.fixture
def two_rows():
    return normalize_rows(
        [
            {"Year": "1939", "Category": "Best Picture", "Film": "Gone with the Wind", "Winner": "1"},
            {"Year": "1939", "Category": "Best Picture", "Film": "Wuthering Heights", "Winner": "0"},
        ]
    )
