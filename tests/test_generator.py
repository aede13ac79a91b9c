import logging
import string

import pytest

from clovo.blocklist import BlocklistStore
from clovo.errors import (
    BufferTooSmallError,
    CommonPasswordError,
    GeneratorStatus,
    InvalidLengthError,
    NoCharsetError,
    NullInputError,
    RandomFailedError,
    generator_error_string,
)
from clovo.generator import (
    HARD_MAX_LENGTH,
    MAX_COMMON_ATTEMPTS,
    SYMBOLS,
    GeneratorOptions,
    build_charset,
    cleanup_generator,
    generate_passphrase,
    generate_password,
    init_generator,
)
from clovo.randomsource import RandomSourceError, SecureRandomSource


class ScriptedSource(SecureRandomSource):
    """Replays a fixed byte sequence, cycling when exhausted."""

    def __init__(self, script):
        super().__init__()
        self.script = list(script)
        self.pos = 0
        self.reads = 0

    def read(self, n):
        out = bytearray()
        for _ in range(n):
            out.append(self.script[self.pos % len(self.script)])
            self.pos += 1
        self.reads += 1
        return bytes(out)


class BrokenSource(SecureRandomSource):
    def read(self, n):
        raise RandomSourceError("entropy device unavailable")


def _lower_only(**kw):
    return GeneratorOptions(include_uppercase=False, include_digits=False, include_symbols=False, **kw)


def _indices(word):
    return [string.ascii_lowercase.index(c) for c in word]


def test_length_and_charset():
    opts = GeneratorOptions()
    charset = build_charset(opts)
    for length in (8, 16, 64):
        pw = generate_password(length, opts)
        assert len(pw) == length
        assert all(c in charset for c in pw)


def test_charset_order_and_size():
    charset = build_charset(GeneratorOptions())
    assert charset.startswith(string.ascii_lowercase + string.ascii_uppercase + string.digits)
    assert charset.endswith(SYMBOLS)
    assert len(SYMBOLS) == 30
    assert len(set(charset)) == len(charset) == 92


def test_no_symbols():
    opts = GeneratorOptions(include_symbols=False)
    pw = generate_password(20, opts)
    assert not any(c in SYMBOLS for c in pw)


def test_no_charset_for_any_length():
    opts = GeneratorOptions(
        include_lowercase=False, include_uppercase=False,
        include_digits=False, include_symbols=False,
    )
    for length in (1, 10, 64, 500):
        with pytest.raises(NoCharsetError):
            generate_password(length, opts)


def test_invalid_length():
    opts = GeneratorOptions(min_length=8, max_length=64)
    for length in (3, 7, 65, 999):
        with pytest.raises(InvalidLengthError) as exc:
            generate_password(length, opts)
        assert exc.value.status is GeneratorStatus.INVALID_LENGTH

    wide = GeneratorOptions(min_length=1, max_length=1000)
    with pytest.raises(InvalidLengthError):
        generate_password(HARD_MAX_LENGTH + 1, wide)
    assert len(generate_password(HARD_MAX_LENGTH, wide)) == HARD_MAX_LENGTH


def test_null_length():
    with pytest.raises(NullInputError):
        generate_password(None)


def test_buffer_too_small_before_sampling():
    source = ScriptedSource([0])
    with pytest.raises(BufferTooSmallError):
        generate_password(10, buffer_size=5, source=source)
    with pytest.raises(BufferTooSmallError):
        generate_password(10, buffer_size=10, source=source)
    assert source.reads == 0
    assert len(generate_password(10, buffer_size=11)) == 10


def test_rejection_sampling_discards_biased_bytes():
    # 26 letters: bytes >= 234 fall into the biased residual bucket
    source = ScriptedSource([234, 255] + [0, 1, 2, 3, 4, 5, 6, 7])
    pw = generate_password(8, _lower_only(check_common=False), source=source)
    assert pw == "abcdefgh"


def test_random_failure_aborts():
    with pytest.raises(RandomFailedError):
        generate_password(16, source=BrokenSource())


def test_common_password_is_redrawn():
    source = ScriptedSource(_indices("password") + _indices("zebrazeb"))
    pw = generate_password(8, _lower_only(), source=source)
    assert pw == "zebrazeb"


def test_common_password_retries_are_bounded():
    source = ScriptedSource(_indices("password"))
    with pytest.raises(CommonPasswordError):
        generate_password(8, _lower_only(), source=source)
    assert source.pos == 8 * MAX_COMMON_ATTEMPTS


def test_check_common_disabled_returns_candidate():
    source = ScriptedSource(_indices("password"))
    assert generate_password(8, _lower_only(check_common=False), source=source) == "password"


def test_loaded_blocklist_is_consulted():
    store = BlocklistStore(["Zebrazeb"])
    source = ScriptedSource(_indices("zebrazeb") + _indices("abcdefgh"))
    assert generate_password(8, _lower_only(), store=store, source=source) == "abcdefgh"


def test_passphrase_policy():
    words = ["alpha", "bravo", "charlie"]
    source = ScriptedSource([0, 1, 2, 7])
    phrase = generate_passphrase(3, GeneratorOptions(), source=source, words=words)
    assert phrase == "Alpha-Bravo-Charlie7"

    source = ScriptedSource([2, 2])
    opts = GeneratorOptions(include_uppercase=False, include_digits=False)
    assert generate_passphrase(2, opts, source=source, words=words) == "charlie-charlie"


def test_passphrase_default_wordlist():
    phrase = generate_passphrase(5)
    words = phrase[:-1].split("-")
    assert len(words) == 5
    assert phrase[-1].isdigit()
    assert all(w[0].isupper() for w in words)


def test_passphrase_word_count_bounds():
    for count in (0, 1, 11):
        with pytest.raises(InvalidLengthError):
            generate_passphrase(count)


def test_passphrase_requires_a_charset():
    opts = GeneratorOptions(
        include_lowercase=False, include_uppercase=False,
        include_digits=False, include_symbols=False,
    )
    source = ScriptedSource([0])
    with pytest.raises(NoCharsetError):
        generate_passphrase(3, opts, source=source)
    assert source.reads == 0

    symbols_only = GeneratorOptions(
        include_lowercase=False, include_uppercase=False, include_digits=False,
    )
    assert generate_passphrase(2, symbols_only, source=ScriptedSource([0]), words=["ok"]) == "ok-ok"


def test_passphrase_buffer():
    with pytest.raises(BufferTooSmallError):
        generate_passphrase(4, buffer_size=8)


def test_passphrase_buffer_checked_before_drawing():
    # shortest phrase: 5 + 1 + 5 letters plus one digit
    source = ScriptedSource([0])
    with pytest.raises(BufferTooSmallError):
        generate_passphrase(2, source=source, words=["alpha", "bravo"], buffer_size=12)
    assert source.reads == 0


def test_passphrase_buffer_checked_per_candidate():
    source = ScriptedSource([1, 1, 3])
    with pytest.raises(BufferTooSmallError):
        generate_passphrase(2, source=source, words=["ab", "charlie"], buffer_size=8)
    assert source.reads > 0


def test_init_generator_missing_file_is_not_fatal(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="clovo.generator"):
        store = init_generator(str(tmp_path))
    assert not store.loaded
    assert "failed to load" in caplog.text
    assert store.is_common("password")
    cleanup_generator(store)


def test_init_generator_loads_file(tmp_path):
    (tmp_path / "common_passwords.txt").write_text("Hunter2\ncorrecthorse\n", encoding="utf-8")
    store = init_generator(str(tmp_path))
    assert len(store) == 2
    assert store.is_common("HUNTER2")
    cleanup_generator(store)
    assert not store.is_common("hunter2")
    cleanup_generator(store)


def test_init_generator_requires_dir():
    with pytest.raises(NullInputError):
        init_generator(None)


def test_error_strings():
    assert generator_error_string(GeneratorStatus.SUCCESS) == "Success"
    assert generator_error_string(GeneratorStatus.NO_CHARSET) == "No character sets selected"
    assert str(CommonPasswordError()) == GeneratorStatus.COMMON_PASSWORD.description
    for status in GeneratorStatus:
        assert generator_error_string(status)
