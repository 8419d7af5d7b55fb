from __future__ import annotations

from uuid import uuid4

from src.domain.value_objects.filename import normalize_filename

# Length of a canonical UUID string; every generated id is longer than this.
MIN_PUBLIC_ID_LENGTH = 36


def build_public_id(filename: str) -> str:
    return f"{normalize_filename(filename)}-{uuid4()}"


def ensure_public_id(value: str) -> str:
    if len(value) < MIN_PUBLIC_ID_LENGTH:
        raise ValueError(f"publicId must be at least {MIN_PUBLIC_ID_LENGTH} characters long")
    return value
