from __future__ import annotations

import hashlib
import string

from src.infrastructure.auth import tokens
from src.infrastructure.auth.tokens import generate_bearer_token, tokens_match


def test_token_is_sha512_hex():
    token = generate_bearer_token()
    assert len(token) == 128
    assert set(token) <= set(string.hexdigits.lower())


def test_tokens_are_unique():
    assert generate_bearer_token() != generate_bearer_token()


def test_token_digests_timestamp_and_random_hex(monkeypatch):
    monkeypatch.setattr(tokens.time, "time", lambda: 1_700_000_000.5)
    monkeypatch.setattr(tokens.secrets, "token_bytes", lambda n: b"\x01" * n)
    expected = hashlib.sha512(f"1700000000500.{'01' * 128}".encode()).hexdigest()
    assert generate_bearer_token() == expected


def test_tokens_match_requires_exact_value():
    assert tokens_match("abc", "abc")
    assert not tokens_match("abc", "abcd")
    assert not tokens_match("ABC", "abc")


