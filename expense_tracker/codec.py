"""Conversion between transaction records and lines of the data file.

The format has no quoting: delimiter characters are replaced with spaces on
the way out and are not restored on the way in.
"""

import math
import re
from decimal import Decimal
from typing import Any

from .logging_setup import get_logger
from .logic import coerce_amount
from .models import Transaction

FIELDS = ("id", "date", "category", "payee", "amount", "notes")
DELIMITER = ","
HEADER = DELIMITER.join(FIELDS) + "\n"

_DELIMITERS = re.compile(r"[,\r\n]")

logger = get_logger(__name__)


def format_amount(value: float) -> str:
    if not math.isfinite(value):
        value = 0.0
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def clean_field(value: Any) -> str:
    if value is None:
        text = ""
    elif isinstance(value, bool):
        text = "true" if value else "false"
    elif isinstance(value, float):
        text = format_amount(value)
    else:
        text = str(value)
    return _DELIMITERS.sub(" ", text).strip()


def encode_line(record: Transaction) -> str:
    values = [
        clean_field(record.id),
        clean_field(record.date),
        clean_field(record.category),
        clean_field(record.payee),
        format_amount(coerce_amount(record.amount)),
        clean_field(record.notes),
    ]
    return DELIMITER.join(values) + "\n"


def decode_line(line: str) -> Transaction:
    parts = line.split(DELIMITER)[: len(FIELDS)]
    parts += [None] * (len(FIELDS) - len(parts))
    record_id, date, category, payee, raw_amount, notes = parts

    # An absent amount column is corrupt; an empty one reads as zero.
    amount = math.nan if raw_amount is None else coerce_amount(raw_amount)
    if math.isnan(amount):
        logger.warning("unreadable amount %r in row %r", raw_amount, record_id)

    return Transaction(
        id=record_id,
        date=date or "",
        category=category or "",
        payee=payee or "",
        amount=amount,
        notes=notes or "",
    )
