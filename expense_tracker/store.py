import threading
from pathlib import Path

from .codec import HEADER, clean_field, decode_line, encode_line
from .ids import IdFactory, uuid_id
from .logging_setup import get_logger
from .logic import coerce_amount
from .models import Transaction

logger = get_logger(__name__)


def ensure_exists(data_file: str | Path) -> None:
    data_file = Path(data_file)
    data_file.parent.mkdir(parents=True, exist_ok=True)
    if not data_file.exists():
        data_file.write_text(HEADER, encoding="utf-8")
        logger.info("created data file %s", data_file)


def load_all(data_file: str | Path) -> list[Transaction]:
    ensure_exists(data_file)
    # Only "\n" separates records; fields may hold other line-break characters.
    lines = Path(data_file).read_text(encoding="utf-8").split("\n")
    return [decode_line(line.rstrip("\r")) for line in lines[1:] if line.strip()]


def append_one(data_file: str | Path, record: Transaction) -> None:
    with open(data_file, "a", encoding="utf-8", newline="") as fh:
        fh.write(encode_line(record))


class Ledger:
    """In-memory, append-ordered mirror of the data file.

    The cache is built once by ``open`` and is authoritative until restart;
    edits made to the file by hand are not picked up. ``add`` updates memory
    and then the file under one lock so request threads cannot interleave.
    """

    def __init__(
        self,
        data_file: str | Path,
        records: list[Transaction],
        *,
        id_factory: IdFactory = uuid_id,
    ):
        self.data_file = Path(data_file)
        self._records = list(records)
        self._id_factory = id_factory
        self._lock = threading.Lock()

    @classmethod
    def open(cls, data_file: str | Path, *, id_factory: IdFactory = uuid_id) -> "Ledger":
        records = load_all(data_file)
        logger.info("loaded %d transactions from %s", len(records), data_file)
        return cls(data_file, records, id_factory=id_factory)

    def records(self) -> list[Transaction]:
        with self._lock:
            return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def add(self, *, date, category, amount, payee="", notes="") -> Transaction:
        with self._lock:
            record = Transaction(
                id=clean_field(self._id_factory()),
                date=clean_field(date),
                category=clean_field(category),
                payee=clean_field(payee),
                amount=coerce_amount(amount),
                notes=clean_field(notes),
            )
            self._records.append(record)
            append_one(self.data_file, record)
        logger.info("added transaction %s (%s %s)", record.id, record.date, record.category)
        return record
