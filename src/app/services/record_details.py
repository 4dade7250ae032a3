"""
Finance Record Details

Turns a raw finance record row into the human-readable description and
metadata attached to edit request notifications. Pure functions; the row
itself comes from IRecordRepository.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from src.domain.entities import EditRequestTable

# Fallback label when a record carries no descriptive field
DEFAULT_LABELS = {
    EditRequestTable.income: "Income",
    EditRequestTable.expense: "Expense",
    EditRequestTable.pledge_payment: "Pledge Payment",
    EditRequestTable.pledge_record: "Pledge",
}

# (column, metadata label) pairs shown per record kind
METADATA_FIELDS = {
    EditRequestTable.income: [
        ("description", "Description"),
        ("source", "Source"),
        ("category", "Category"),
        ("payment_method", "Payment Method"),
    ],
    EditRequestTable.expense: [
        ("description", "Description"),
        ("vendor", "Vendor"),
        ("category", "Category"),
    ],
    EditRequestTable.pledge_payment: [("note", "Note")],
    EditRequestTable.pledge_record: [
        ("campaign_name", "Campaign"),
        ("pledge_type", "Pledge Type"),
    ],
}


def format_amount(amount: Any, currency: str) -> str:
    return f"{currency} {Decimal(str(amount)):,.2f}"


def format_date(value: Any) -> str:
    """M/D/YYYY for dates, datetimes and ISO strings; other strings pass through"""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value
    if isinstance(value, (date, datetime)):
        return f"{value.month}/{value.day}/{value.year}"
    return str(value)


def _record_date(record: Dict[str, Any]) -> Optional[Any]:
    return record.get("date") or record.get("payment_date") or record.get("created_at")


def describe_record(
    table_name: EditRequestTable, record: Optional[Dict[str, Any]], currency: str
) -> str:
    """One-line summary: "<description> - <amount> (<date>)", or "" if unknown"""
    if not record:
        return ""

    amount = format_amount(record["amount"], currency) if record.get("amount") else ""
    record_date = _record_date(record)
    formatted_date = format_date(record_date) if record_date else ""

    if table_name == EditRequestTable.income:
        label = record.get("description") or record.get("source") or record.get("category")
    elif table_name == EditRequestTable.expense:
        label = record.get("description") or record.get("vendor")
    elif table_name == EditRequestTable.pledge_record:
        label = record.get("campaign_name") or record.get("pledge_type")
    else:
        label = None

    return f"{label or DEFAULT_LABELS[table_name]} - {amount} ({formatted_date})"


def record_metadata(
    table_name: EditRequestTable, record: Optional[Dict[str, Any]], currency: str
) -> Dict[str, str]:
    """Labelled fields shown alongside a notification"""
    if not record:
        return {}

    metadata: Dict[str, str] = {}
    if record.get("amount"):
        metadata["Amount"] = format_amount(record["amount"], currency)

    record_date = _record_date(record)
    if record_date:
        metadata["Date"] = format_date(record_date)

    if table_name == EditRequestTable.pledge_payment:
        metadata["Type"] = "Pledge Payment"

    for column, label in METADATA_FIELDS[table_name]:
        if record.get(column):
            metadata[label] = str(record[column])

    return metadata
