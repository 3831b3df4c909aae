"""
CSV rendering: quoting and empty datasets.
"""
import csv
import io
from datetime import datetime
from types import SimpleNamespace

from storefront.services.csv_export_service import ORDER_COLUMNS, render_csv, students_csv


def test_comma_and_apostrophe_survive_quoting():
    row = SimpleNamespace(name="O'Brien, Jr.", college="St. Xavier's")
    output = render_csv([row], [("Name", "name"), ("College", "college")])

    assert output.splitlines() == ['"Name","College"', '"O\'Brien, Jr.","St. Xavier\'s"']
    parsed = list(csv.reader(io.StringIO(output)))
    assert parsed[1] == ["O'Brien, Jr.", "St. Xavier's"]


def test_embedded_quotes_are_doubled():
    row = SimpleNamespace(name='The "Java" Guy')
    output = render_csv([row], [("Name", "name")])
    assert output.splitlines()[1] == '"The ""Java"" Guy"'


def test_empty_dataset_is_header_only():
    output = render_csv([], ORDER_COLUMNS)
    lines = output.splitlines()
    assert len(lines) == 1
    assert lines[0].split(",")[0] == '"Order ID"'


def test_missing_values_and_dates():
    profile = SimpleNamespace(
        id=7,
        full_name="Asha Rao",
        email="asha@example.com",
        mobile=None,
        college_name=None,
        year="2nd",
        created_at=datetime(2024, 5, 1, 10, 30, 15, 123456),
    )
    line = students_csv([profile]).splitlines()[1]
    assert line == '"7","Asha Rao","asha@example.com","","","2nd","2024-05-01 10:30:15"'
