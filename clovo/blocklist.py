"""
clovo.blocklist
Common-password blocklist: an optional external word list plus a fixed
built-in fallback that is always consulted.

A BlocklistStore is created once (see generator.init_generator), passed to
the generator explicitly and released at shutdown. Lookups never mutate it,
so concurrent readers are safe once loading has finished.
"""

import logging
from typing import Iterator, List, Optional

from .errors import FileAccessError, NullInputError
from .storage import read_lines

logger = logging.getLogger(__name__)

BUILTIN_COMMON_PASSWORDS = frozenset({
    "111111", "123123", "12345", "123456", "12345678", "123456789",
    "1234567890", "abc123", "admin", "football", "letmein", "monkey",
    "password", "password1", "qwert", "qwerty", "welcome",
})


class BlocklistStore:
    def __init__(self, entries: Optional[List[str]] = None):
        self._entries: List[str] = [e.lower() for e in entries or []]
        self._lookup = frozenset(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    @property
    def loaded(self) -> bool:
        return bool(self._entries)

    def load(self, path: Optional[str]) -> int:
        """
        Load one password per line from path, replacing any previous list.
        Order and duplicates are kept; blank lines are skipped.
        Returns the number of entries loaded.
        """
        if path is None:
            raise NullInputError("blocklist path is required")
        try:
            lines = read_lines(path)
        except OSError as e:
            raise FileAccessError(f"cannot read common passwords file {path}: {e}") from e
        if not lines:
            raise FileAccessError(f"common passwords file is empty: {path}")
        self._entries = [line.lower() for line in lines]
        self._lookup = frozenset(self._entries)
        logger.info("loaded %d common passwords from %s", len(self._entries), path)
        return len(self._entries)

    def release(self) -> None:
        self._entries = []
        self._lookup = frozenset()

    def is_common(self, password: Optional[str]) -> bool:
        if password is None:
            return False
        lower = password.lower()
        return lower in self._lookup or lower in BUILTIN_COMMON_PASSWORDS
