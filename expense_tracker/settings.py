import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    port: int
    static_dir: Path
    data_file: Path
    host: str = "127.0.0.1"
    index_page: str = "expenseTracker.html"

    @property
    def index_path(self) -> Path:
        return self.static_dir / self.index_page


def get_settings() -> Settings:
    base_dir = Path.cwd()
    return Settings(
        port=int(os.getenv("EXPENSE_TRACKER_PORT", "3000")),
        static_dir=Path(
            os.getenv("EXPENSE_TRACKER_STATIC_DIR", base_dir / "frontend")
        ),
        data_file=Path(
            os.getenv(
                "EXPENSE_TRACKER_DATA_FILE", base_dir / "data" / "transactions.csv"
            )
        ),
        host=os.getenv("EXPENSE_TRACKER_HOST", "127.0.0.1"),
    )
