# Area: Core
"""
fair_rps._core.commitment - Keyed move commitment
=================================================

The computer commits to its move by publishing
HMAC-SHA256(key, move) before the user plays, and reveals the key
afterwards. Anyone holding the key and the move can recompute the
digest and compare it with the one shown earlier.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import secrets
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..errors import RandomSourceUnavailableError

logger = logging.getLogger("fair_rps.commitment")

KEY_BYTES = 32  # 256 bits


def generate_key(num_bytes: int = KEY_BYTES) -> bytes:
    """
    Draw a fresh secret key from the OS secure random source.

    Raises:
        RandomSourceUnavailableError: If no secure source exists
    """
    try:
        return secrets.token_bytes(num_bytes)
    except NotImplementedError as e:
        raise RandomSourceUnavailableError(str(e) or "os.urandom unavailable") from e


def random_index(upper: int) -> int:
    """Uniform integer in [0, upper) from the secure random source."""
    try:
        return secrets.randbelow(upper)
    except NotImplementedError as e:
        raise RandomSourceUnavailableError(str(e) or "os.urandom unavailable") from e


def compute_digest(key: bytes, move: str) -> str:
    """HMAC-SHA256 of the UTF-8 move label, as uppercase hex."""
    return hmac.new(key, move.encode("utf-8"), hashlib.sha256).hexdigest().upper()


def key_from_hex(key: Union[bytes, str]) -> bytes:
    """Accept a key as raw bytes or as the hex string printed on screen."""
    if isinstance(key, bytes):
        return key
    return bytes.fromhex(key.strip())


def verify_digest(digest: str, key: Union[bytes, str], move: str) -> bool:
    """
    Check that ``digest`` was produced from ``key`` and ``move``.

    The hex digest is compared case-insensitively. Malformed input of
    any kind is a mismatch, never an exception.
    """
    try:
        raw_key = key_from_hex(key)
    except ValueError:
        logger.debug("Key is not valid hex")
        return False
    try:
        expected = compute_digest(raw_key, move).encode("ascii")
        given = digest.strip().upper().encode("utf-8")
    except UnicodeEncodeError:
        logger.debug("Digest or move is not encodable as UTF-8")
        return False
    return hmac.compare_digest(expected, given)


class Commitment(BaseModel):
    """
    A move bound to a secret key.

    Attributes:
        key: Secret HMAC key, disclosed only after the round is played
        move: The committed move label
        digest: Uppercase hex HMAC-SHA256(key, move), safe to publish at once
    """

    model_config = ConfigDict(frozen=True)

    key: bytes = Field(repr=False)
    move: str = Field(repr=False)
    digest: str

    @model_validator(mode="after")
    def _digest_matches(self) -> "Commitment":
        if not hmac.compare_digest(compute_digest(self.key, self.move), self.digest):
            raise ValueError("digest does not match key and move")
        return self

    @property
    def key_hex(self) -> str:
        return self.key.hex().upper()

    def verify(self, move: str) -> bool:
        return verify_digest(self.digest, self.key, move)


def commit(move: str, key: Optional[bytes] = None) -> Commitment:
    """
    Commit to ``move`` under ``key`` (a fresh random key if omitted).

    Args:
        move: Move label to commit to
        key: Optional fixed key, used by tests

    Returns:
        Commitment holding the key, the move and the published digest
    """
    if key is None:
        key = generate_key()
    return Commitment(key=key, move=move, digest=compute_digest(key, move))
