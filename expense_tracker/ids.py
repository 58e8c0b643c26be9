import time
import uuid
from typing import Callable

IdFactory = Callable[[], str]


def uuid_id() -> str:
    return str(uuid.uuid4())


def timestamp_id() -> str:
    # Millisecond resolution; two calls in the same millisecond collide.
    return str(time.time_ns() // 1_000_000)
