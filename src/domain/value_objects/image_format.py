from __future__ import annotations

ALLOWED_FORMATS: tuple[str, ...] = ("png", "jpg", "jpeg")


def ensure_allowed_format(value: str) -> str:
    fmt = value.strip().lower()
    if fmt not in ALLOWED_FORMATS:
        raise ValueError(f"Invalid file format! allow: {','.join(ALLOWED_FORMATS)}")
    return fmt
