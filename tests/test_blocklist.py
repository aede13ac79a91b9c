import pytest

from clovo.blocklist import BUILTIN_COMMON_PASSWORDS, BlocklistStore
from clovo.errors import FileAccessError, NullInputError


def test_builtin_fallback_without_load():
    store = BlocklistStore()
    assert not store.loaded
    assert len(BUILTIN_COMMON_PASSWORDS) == 17
    assert store.is_common("PassWord")
    assert store.is_common("qwerty")
    assert not store.is_common("N0tInList123!")
    assert not store.is_common(None)


def test_load_keeps_order_and_duplicates(tmp_path):
    path = tmp_path / "common.txt"
    path.write_bytes(b"Dragon\r\n\r\nshadow\n\ndragon\nMonkey")
    store = BlocklistStore()
    assert store.load(str(path)) == 4
    assert list(store) == ["dragon", "shadow", "dragon", "monkey"]
    assert store.is_common("SHADOW")


def test_match_is_exact_not_substring(tmp_path):
    path = tmp_path / "common.txt"
    path.write_text("shadow\n", encoding="utf-8")
    store = BlocklistStore()
    store.load(str(path))
    assert not store.is_common("shadow1")


def test_load_failures(tmp_path):
    store = BlocklistStore()
    with pytest.raises(FileAccessError):
        store.load(str(tmp_path / "missing.txt"))
    empty = tmp_path / "empty.txt"
    empty.write_text("\n\n", encoding="utf-8")
    with pytest.raises(FileAccessError):
        store.load(str(empty))
    with pytest.raises(NullInputError):
        store.load(None)


def test_release_is_idempotent():
    store = BlocklistStore(["shadow"])
    assert store.is_common("shadow")
    store.release()
    store.release()
    assert not store.loaded
    assert not store.is_common("shadow")
    assert store.is_common("letmein")
