from __future__ import annotations

import pytest

from awards import data
from awards.data import RECORD_COLUMNS, load_dashboard_data, read_rows, records_frame

CSV_TEXT = """Year,Category,CanonicalCategory,Film,Name,Winner,Class
1939,Best Picture,,Gone with the Wind,Selznick,True,Title
1939,Best Picture,,Wuthering Heights,Goldwyn,False,Title
1932/1933,OUTSTANDING PRODUCTION,Best Picture,Cavalcade,Fox,True,Title
,Writing,,,,,
"""


@pytest.fixture(autouse=True)
def _clear_cache():
    data._load_dashboard_data_cached.cache_clear()
    yield
    data._load_dashboard_data_cached.cache_clear()


@pytest.fixture
def csv_path(tmp_path):
    path = tmp_path / "oscars.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")
    return path


class TestReadRows:
    def test_raw_strings(self, csv_path):
        rows = read_rows(csv_path)
        assert len(rows) == 4
        assert rows[0]["Year"] == "1939"
        assert rows[3]["Film"] == ""

    def test_missing_columns_added(self, tmp_path):
        path = tmp_path / "slim.csv"
        path.write_text("Year,Category\n1950,Directing\n", encoding="utf-8")
        rows = read_rows(path)
        assert rows[0]["Winner"] is None
        assert rows[0]["Class"] is None


class TestLoadDashboardData:
    def test_loads_and_normalizes(self, csv_path):
        ctx = load_dashboard_data(csv_path)
        assert ctx["files"] == ["oscars.csv"]
        assert len(ctx["records"]) == 4
        assert ctx["categories"] == ["Best Picture", "Writing"]
        assert ctx["decades"] == [1930]
        assert ctx["classes"] == ["Title"]
        assert [r.winner_flag for r in ctx["records"]] == [1, 0, 1, 0]

    def test_memoized_per_file_signature(self, csv_path):
        first = load_dashboard_data(csv_path)
        second = load_dashboard_data(csv_path)
        assert first is second

    def test_missing_file_gives_empty_context(self, tmp_path):
        ctx = load_dashboard_data(tmp_path / "absent.csv")
        assert ctx["files"] == []
        assert ctx["records"] == ()
        assert ctx["categories"] == []


class TestRecordsFrame:
    def test_columns(self, records):
        df = records_frame(records)
        assert list(df.columns) == RECORD_COLUMNS
        assert len(df) == len(records)

    def test_empty(self):
        df = records_frame(())
        assert df.empty
        assert list(df.columns) == RECORD_COLUMNS
