"""
storefront/services/csv_export_service.py
CSV rendering for the back-office downloads.

Every field is quoted, so names like O'Brien, Jr. survive spreadsheet
import intact. An empty dataset still yields the header row.
"""
import csv
import io
from datetime import datetime
from typing import Any, Iterable, List, Sequence, Tuple

from storefront.orm.profile import Profile
from storefront.schemas.admin import AdminOrderRow

# (header, attribute)
ORDER_COLUMNS: List[Tuple[str, str]] = [
    ("Order ID", "id"),
    ("Student Name", "student_name"),
    ("Email", "student_email"),
    ("Mobile", "student_mobile"),
    ("College", "college_name"),
    ("Course", "course_title"),
    ("Amount Paid", "amount_paid"),
    ("Payment Status", "payment_status"),
    ("Payment ID", "payment_id"),
    ("Purchased At", "purchased_at"),
]

STUDENT_COLUMNS: List[Tuple[str, str]] = [
    ("Student ID", "id"),
    ("Full Name", "full_name"),
    ("Email", "email"),
    ("Mobile", "mobile"),
    ("College", "college_name"),
    ("Year", "year"),
    ("Joined At", "created_at"),
]


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.isoformat(sep=" ", timespec="seconds")
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)


def render_csv(rows: Iterable[Any], columns: Sequence[Tuple[str, str]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow([header for header, _ in columns])
    for row in rows:
        writer.writerow([_cell(getattr(row, attr, None)) for _, attr in columns])
    return buffer.getvalue()


def orders_csv(rows: Iterable[AdminOrderRow]) -> str:
    return render_csv(rows, ORDER_COLUMNS)


def students_csv(profiles: Iterable[Profile]) -> str:
    return render_csv(profiles, STUDENT_COLUMNS)
