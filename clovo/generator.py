"""
clovo.generator
Secure password and passphrase generator.

Every character (or word) is drawn from a SecureRandomSource with rejection
sampling, so the distribution is uniform whatever the charset size. When
options.check_common is set, candidates found in the blocklist are redrawn,
at most MAX_COMMON_ATTEMPTS times in total.
"""

import logging
import os
import string
from dataclasses import dataclass
from typing import Optional, Sequence

from .blocklist import BlocklistStore
from .errors import (
    BufferTooSmallError,
    CommonPasswordError,
    FileAccessError,
    InvalidLengthError,
    NoCharsetError,
    NullInputError,
    RandomFailedError,
)
from .randomsource import RandomSourceError, SecureRandomSource
from .wordlist import WORDS

logger = logging.getLogger(__name__)

SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?/~`'"

HARD_MAX_LENGTH = 256
MAX_COMMON_ATTEMPTS = 5
COMMON_PASSWORDS_FILE = "common_passwords.txt"

MIN_PASSPHRASE_WORDS = 2
MAX_PASSPHRASE_WORDS = 10
PASSPHRASE_SEPARATOR = "-"


@dataclass
class GeneratorOptions:
    min_length: int = 8
    max_length: int = 64
    include_lowercase: bool = True
    include_uppercase: bool = True
    include_digits: bool = True
    include_symbols: bool = True
    check_common: bool = True


def default_options() -> GeneratorOptions:
    return GeneratorOptions()


def build_charset(options: GeneratorOptions) -> str:
    """Concatenate the enabled pools in fixed order: lower, upper, digits, symbols."""
    pools = []
    if options.include_lowercase:
        pools.append(string.ascii_lowercase)
    if options.include_uppercase:
        pools.append(string.ascii_uppercase)
    if options.include_digits:
        pools.append(string.digits)
    if options.include_symbols:
        pools.append(SYMBOLS)
    if not pools:
        raise NoCharsetError("at least one character set must be enabled")
    return "".join(pools)


def _draw(source: SecureRandomSource, n: int) -> int:
    try:
        return source.randbelow(n)
    except RandomSourceError as e:
        raise RandomFailedError(str(e)) from e


def _check_buffer(needed: int, buffer_size: Optional[int]) -> None:
    # needed excludes the terminator slot
    if buffer_size is not None and buffer_size < needed + 1:
        raise BufferTooSmallError(
            f"buffer of {buffer_size} cannot hold {needed} characters plus terminator"
        )


def _draw_until_uncommon(draw_one, options: GeneratorOptions, store: BlocklistStore) -> str:
    for attempt in range(1, MAX_COMMON_ATTEMPTS + 1):
        candidate = draw_one()
        if not (options.check_common and store.is_common(candidate)):
            return candidate
        logger.debug("candidate %d of %d was a common password; redrawing", attempt, MAX_COMMON_ATTEMPTS)
    raise CommonPasswordError()


def generate_password(
    length: Optional[int],
    options: Optional[GeneratorOptions] = None,
    *,
    store: Optional[BlocklistStore] = None,
    source: Optional[SecureRandomSource] = None,
    buffer_size: Optional[int] = None,
) -> str:
    """
    Generate a cryptographically secure password of exactly `length`
    characters drawn from the charsets enabled in `options`.

    Raises a GeneratorError subclass on failure; no partial or blocklisted
    password is ever returned. Without a store only the built-in blocklist
    is consulted.
    """
    if length is None:
        raise NullInputError("length is required")
    _check_buffer(length, buffer_size)
    options = options or default_options()
    charset = build_charset(options)
    if length < options.min_length or length > options.max_length:
        raise InvalidLengthError(
            f"length {length} outside [{options.min_length}, {options.max_length}]"
        )
    if length > HARD_MAX_LENGTH:
        raise InvalidLengthError(f"length {length} exceeds hard limit {HARD_MAX_LENGTH}")
    store = store if store is not None else BlocklistStore()
    source = source or SecureRandomSource()

    def draw_one() -> str:
        return "".join(charset[_draw(source, len(charset))] for _ in range(length))

    return _draw_until_uncommon(draw_one, options, store)


def generate_passphrase(
    word_count: Optional[int] = 4,
    options: Optional[GeneratorOptions] = None,
    *,
    store: Optional[BlocklistStore] = None,
    source: Optional[SecureRandomSource] = None,
    words: Optional[Sequence[str]] = None,
    buffer_size: Optional[int] = None,
) -> str:
    """
    Generate a passphrase of `word_count` words (2-10).

    Words are drawn uniformly with replacement, capitalized when uppercase
    is enabled (lowercase otherwise) and joined with '-'. When digits are
    enabled a single random digit is appended. At least one charset flag
    must be enabled. min_length/max_length do not apply; the hard length
    cap and buffer_size do, checked against the shortest possible phrase
    before any word is drawn and again on each candidate.
    """
    if word_count is None:
        raise NullInputError("word_count is required")
    if not MIN_PASSPHRASE_WORDS <= word_count <= MAX_PASSPHRASE_WORDS:
        raise InvalidLengthError(
            f"word count must be between {MIN_PASSPHRASE_WORDS} and {MAX_PASSPHRASE_WORDS}"
        )
    options = options or default_options()
    build_charset(options)
    wordlist = list(words) if words is not None else list(WORDS)
    if not wordlist:
        raise NullInputError("word list is empty")
    shortest = (
        word_count * min(len(w) for w in wordlist)
        + (word_count - 1) * len(PASSPHRASE_SEPARATOR)
        + (1 if options.include_digits else 0)
    )
    if shortest > HARD_MAX_LENGTH:
        raise InvalidLengthError(f"passphrase exceeds hard limit {HARD_MAX_LENGTH}")
    _check_buffer(shortest, buffer_size)
    store = store if store is not None else BlocklistStore()
    source = source or SecureRandomSource()

    def draw_one() -> str:
        chosen = []
        for _ in range(word_count):
            word = wordlist[_draw(source, len(wordlist))].lower()
            chosen.append(word.capitalize() if options.include_uppercase else word)
        phrase = PASSPHRASE_SEPARATOR.join(chosen)
        if options.include_digits:
            phrase += string.digits[_draw(source, len(string.digits))]
        if len(phrase) > HARD_MAX_LENGTH:
            raise InvalidLengthError(f"passphrase exceeds hard limit {HARD_MAX_LENGTH}")
        _check_buffer(len(phrase), buffer_size)
        return phrase

    return _draw_until_uncommon(draw_one, options, store)


def init_generator(data_dir: Optional[str]) -> BlocklistStore:
    """
    Create the blocklist store, loading <data_dir>/common_passwords.txt.
    A missing or unreadable file is logged and the store falls back to the
    built-in list only.
    """
    if data_dir is None:
        raise NullInputError("data_dir is required")
    store = BlocklistStore()
    path = os.path.join(data_dir, COMMON_PASSWORDS_FILE)
    try:
        store.load(path)
    except FileAccessError as e:
        logger.warning("failed to load external common passwords list: %s", e)
    return store


def cleanup_generator(store: Optional[BlocklistStore]) -> None:
    if store is not None:
        store.release()
