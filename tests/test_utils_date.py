import pytest
from datetime import datetime

from newsdigest.utils.date import format_compiled_date, to_long_date


@pytest.mark.parametrize("value,expected", [
    ("2026-02-21T10:00:00.000Z", "February 21, 2026"),
    ("2026-02-01", "February 1, 2026"),
    ("2025-12-09T23:59:00+02:00", "December 9, 2025"),
    (datetime(2024, 7, 4), "July 4, 2024"),
    ("not a date", None),
    ("", None),
    (None, None),
    (20260221, None),
    (True, None),
    ({"@value": "2026-02-21"}, None),
    (["2026-02-21"], None),
])
def test_to_long_date(value, expected):
    assert to_long_date(value) == expected


def test_format_compiled_date():
    assert format_compiled_date(datetime(2026, 2, 21)) == "Saturday, February 21, 2026"
