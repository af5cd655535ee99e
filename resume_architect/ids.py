"""ids.py
Id generators for list items in ResumeData.

Any zero-argument callable returning a str can be used as an ``IdGenerator``.
"""
import itertools
import uuid
from typing import Callable

IdGenerator = Callable[[], str]


def uuid_id_generator() -> str:
    """Return a random unique id (uuid4 as a 32 char hex string)."""
    return uuid.uuid4().hex


class SequentialIdGenerator:
    """
    Deterministic id generator producing ``<prefix>1``, ``<prefix>2``, ...

    Useful in tests where generated ids need to be known up front.

    Example:
        >>> next_id = SequentialIdGenerator(prefix="exp-")
        >>> next_id(), next_id()
        ('exp-1', 'exp-2')
    """

    def __init__(self, prefix: str = "id-", start: int = 1):
        self.prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self) -> str:
        return f"{self.prefix}{next(self._counter)}"
