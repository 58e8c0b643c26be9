import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Transaction:
    id: str
    date: str
    category: str
    payee: str
    amount: float
    notes: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date,
            "category": self.category,
            "payee": self.payee,
            "amount": self.amount if math.isfinite(self.amount) else None,
            "notes": self.notes,
        }
