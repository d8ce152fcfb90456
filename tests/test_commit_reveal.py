from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "app"
sys.path.insert(0, str(APP_DIR))

import hashlib  # noqa: E402
import hmac  # noqa: E402
import re  # noqa: E402

import pytest  # noqa: E402

import commit_reveal  # type: ignore[import-not-found]  # noqa: E402
from commit_reveal import commit, generate_key, reveal, verify_commitment  # type: ignore[import-not-found]  # noqa: E402
from errors import EntropyUnavailable  # type: ignore[import-not-found]  # noqa: E402

KEY = bytes(range(32))


def test_generate_key_is_32_fresh_bytes() -> None:
    k1 = generate_key()
    k2 = generate_key()
    assert isinstance(k1, bytes)
    assert len(k1) == 32
    assert k1 != k2


def test_generate_key_reports_missing_entropy(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(num_bytes: int) -> bytes:
        raise NotImplementedError("no urandom")

    monkeypatch.setattr(commit_reveal.secrets, "token_bytes", broken)
    with pytest.raises(EntropyUnavailable):
        generate_key()


def test_commit_is_hmac_sha256_hex() -> None:
    digest = commit(KEY, "ROCK")
    assert digest == hmac.new(KEY, b"ROCK", hashlib.sha256).hexdigest()
    assert re.fullmatch(r"[0-9a-f]{64}", digest)


def test_commit_is_deterministic() -> None:
    assert commit(KEY, "PAPER") == commit(KEY, "PAPER")


def test_commit_changes_with_key_or_move() -> None:
    base = commit(KEY, "PAPER")
    assert commit(KEY, "SCISSORS") != base
    assert commit(bytes(32), "PAPER") != base


def test_commit_encodes_move_as_utf8() -> None:
    assert commit(KEY, "Ножницы") == hmac.new(KEY, "Ножницы".encode("utf-8"), hashlib.sha256).hexdigest()


def test_reveal_is_lowercase_hex() -> None:
    key_hex = reveal(KEY)
    assert len(key_hex) == 64
    assert key_hex == KEY.hex()
    assert bytes.fromhex(key_hex) == KEY


def test_commitment_roundtrip() -> None:
    commitment = commit(KEY, "LIZARD")
    assert verify_commitment(expected_commitment=commitment, key_hex=reveal(KEY), move="LIZARD")
    assert verify_commitment(expected_commitment=commitment.upper(), key_hex=reveal(KEY), move="LIZARD")


def test_verify_rejects_wrong_move_or_key() -> None:
    commitment = commit(KEY, "LIZARD")
    assert not verify_commitment(expected_commitment=commitment, key_hex=reveal(KEY), move="SPOCK")
    assert not verify_commitment(expected_commitment=commitment, key_hex=bytes(32).hex(), move="LIZARD")


def test_verify_rejects_malformed_input() -> None:
    commitment = commit(KEY, "ROCK")
    assert not verify_commitment(expected_commitment=commitment, key_hex="not-hex", move="ROCK")
    assert not verify_commitment(expected_commitment="ünïcode", key_hex=reveal(KEY), move="ROCK")
