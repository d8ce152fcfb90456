from __future__ import annotations

import hashlib
import hmac
import secrets
from typing import Final

from errors import EntropyUnavailable

KEY_BYTES: Final[int] = 32
DIGEST: Final = hashlib.sha256


def generate_key(num_bytes: int = KEY_BYTES) -> bytes:
    try:
        return secrets.token_bytes(num_bytes)
    except (OSError, NotImplementedError) as exc:
        raise EntropyUnavailable(f"secure random source unavailable: {exc}") from exc


def commit(key: bytes, move: str) -> str:
    """HMAC-SHA256 of the move name, as 64 lowercase hex characters."""
    return hmac.new(key, move.encode("utf-8"), DIGEST).hexdigest()


def reveal(key: bytes) -> str:
    return key.hex()


def verify_commitment(*, expected_commitment: str, key_hex: str, move: str) -> bool:
    """Recompute the commitment from a revealed key and compare it to the one shown earlier."""
    try:
        key = bytes.fromhex(key_hex.strip())
    except ValueError:
        return False
    computed = commit(key, move)
    return secrets.compare_digest(expected_commitment.strip().lower().encode("utf-8"), computed.encode("ascii"))
