import os
from typing import List


def ensure_dir_exists(path: str) -> None:
    d = os.path.dirname(path)
    if d and not os.path.exists(d):
        os.makedirs(d, exist_ok=True)


def atomic_write_bytes(path: str, data: bytes) -> None:
    """
    Atomically write bytes to 'path' by writing to a temp file and renaming.
    """
    ensure_dir_exists(path)
    tmp = path + ".tmp"
    with open(tmp, "wb") as f:
        f.write(data)
        f.flush()
        os.fsync(f.fileno())
    os.replace(tmp, path)


def atomic_write_text(path: str, text: str) -> None:
    atomic_write_bytes(path, text.encode("utf-8"))


def atomic_read_bytes(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def read_lines(path: str) -> List[str]:
    """
    Read a whole text file and return its non-blank lines in order, with
    trailing CR/LF stripped. Undecodable bytes are replaced, not fatal.
    """
    text = atomic_read_bytes(path).decode("utf-8", errors="replace")
    out = []
    for line in text.split("\n"):
        line = line.rstrip("\r\n")
        if line:
            out.append(line)
    return out


def default_data_dir() -> str:
    """Directory holding the bundled word lists (clovo/data)."""
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")
