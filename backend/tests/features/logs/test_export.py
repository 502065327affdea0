"""
Tests for the CSV export formatter.
"""

from datetime import datetime
from types import SimpleNamespace

from tracklog.features.logs import CSV_HEADER, content_disposition, export_filename, iter_csv_lines, render_csv


def entry(id, session_id="s1", user_id="u1", latitude=1.0, longitude=2.0, elevation=10.0, second=0):
    return SimpleNamespace(
        id=id,
        session_id=session_id,
        user_id=user_id,
        latitude=latitude,
        longitude=longitude,
        elevation=elevation,
        timestamp=datetime(2026, 5, 1, 8, 0, second, 250000),
    )


class TestRenderCsv:
    """Tests for render_csv / iter_csv_lines."""

    def test_header(self):
        assert CSV_HEADER == "id,session_id,user_id,latitude,longitude,elevation,timestamp"

    def test_rows_in_given_order(self):
        body = render_csv([entry(1), entry(2, latitude=1.1, longitude=2.1, elevation=12.0, second=5)])

        assert body.splitlines() == [
            CSV_HEADER,
            "1,s1,u1,1.0,2.0,10.0,2026-05-01T08:00:00.250000",
            "2,s1,u1,1.1,2.1,12.0,2026-05-01T08:00:05.250000",
        ]
        assert body.endswith("\n")

    def test_parses_back_to_entries(self):
        entries = [entry(i, elevation=100.0 + i, second=i) for i in range(1, 6)]

        lines = render_csv(entries).splitlines()
        header, rows = lines[0].split(","), [line.split(",") for line in lines[1:]]

        assert len(rows) == len(entries)
        for row, original in zip(rows, entries):
            record = dict(zip(header, row))
            assert int(record["id"]) == original.id
            assert record["session_id"] == original.session_id
            assert float(record["elevation"]) == original.elevation
            assert datetime.fromisoformat(record["timestamp"]) == original.timestamp

    def test_values_are_not_quoted(self):
        """Commas in values are written as-is."""
        body = render_csv([entry(1, user_id="doe, jane")])
        assert body.splitlines()[1].startswith("1,s1,doe, jane,")

    def test_lines_are_lazy(self):
        lines = iter_csv_lines(iter([entry(1)]))
        assert next(lines) == CSV_HEADER + "\n"
        assert next(lines).startswith("1,s1,u1,")

    def test_empty_sequence_is_header_only(self):
        assert render_csv([]) == CSV_HEADER + "\n"


def test_export_filename():
    assert export_filename("ride-42") == "ride-42.csv"


class TestContentDisposition:
    """Tests for content_disposition."""

    def test_ascii_id(self):
        assert content_disposition("ride-42") == "attachment; filename=ride-42.csv"

    def test_non_ascii_id(self):
        header = content_disposition("café")

        assert header == "attachment; filename=caf_.csv; filename*=UTF-8''caf%C3%A9.csv"
        header.encode("latin-1")

