from __future__ import annotations

import hashlib
import secrets
import time


def generate_bearer_token(*, random_bytes: int = 128) -> str:
    """SHA-512 hex digest of ``"<ms timestamp>.<random hex>"``. For operators, not requests."""
    timestamp = int(time.time() * 1000)
    random_hex = secrets.token_bytes(random_bytes).hex()
    return hashlib.sha512(f"{timestamp}.{random_hex}".encode("utf-8")).hexdigest()


def tokens_match(candidate: str, expected: str) -> bool:
    return secrets.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))
