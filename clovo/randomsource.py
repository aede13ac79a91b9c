"""
clovo.randomsource
Cryptographically secure byte source for the generator.

Bytes come from Python's secrets module (the platform CSPRNG). If the
platform call is unavailable the only fallback is a direct read of the OS
entropy device; there is no pseudo-random fallback.
"""

import logging
import secrets

logger = logging.getLogger(__name__)

URANDOM_DEVICE = "/dev/urandom"


class RandomSourceError(OSError):
    """The secure random source could not deliver the requested bytes."""


class SecureRandomSource:
    def __init__(self, device: str = URANDOM_DEVICE):
        self.device = device

    def read(self, n: int) -> bytes:
        """Return exactly n random bytes or raise RandomSourceError."""
        try:
            return secrets.token_bytes(n)
        except (OSError, NotImplementedError) as e:
            logger.warning("platform CSPRNG unavailable (%s); reading %s", e, self.device)
        try:
            with open(self.device, "rb") as f:
                data = f.read(n)
        except OSError as e:
            raise RandomSourceError(f"cannot read {self.device}: {e}") from e
        if len(data) != n:
            raise RandomSourceError(f"short read from {self.device}: {len(data)} of {n} bytes")
        return data

    def randbelow(self, n: int) -> int:
        """
        Uniform integer in [0, n) via rejection sampling.

        Draws one byte for n <= 256 (two big-endian bytes up to 65536) and
        discards values in the top residual bucket that would bias the
        modulo reduction.
        """
        if n <= 0:
            raise ValueError("n must be > 0")
        if n <= 256:
            width = 1
        elif n <= 65536:
            width = 2
        else:
            raise ValueError("n must be <= 65536")
        space = 256 ** width
        limit = space - (space % n)
        while True:
            value = int.from_bytes(self.read(width), "big")
            if value < limit:
                return value % n
