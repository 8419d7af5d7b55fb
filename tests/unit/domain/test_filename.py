from __future__ import annotations

import pytest

from src.domain.value_objects.filename import normalize_filename
from src.domain.value_objects.image_format import ensure_allowed_format
from src.domain.value_objects.public_id import (
    MIN_PUBLIC_ID_LENGTH,
    build_public_id,
    ensure_public_id,
)

BLOCKED = "`~!@#$%^&*()_|+=?;:'\",.<>{}[]\\/"

SAMPLES = [
    "my photo.png",
    "holiday   in  (Rome) [2024].jpeg",
    "a\tb\nc.txt",
    "no_extension",
    "tar.gz.archive.tar",
    "weird`~!@#$%^&*()_|+=?;:'\",.<>{}[]\\/name.png",
    "",
    "   ",
]


@pytest.mark.parametrize("filename", SAMPLES)
def test_output_contains_no_blocked_characters(filename):
    result = normalize_filename(filename)
    assert not any(char in result for char in BLOCKED)
    assert not any(char.isspace() for char in result)


@pytest.mark.parametrize("filename", SAMPLES)
def test_normalize_is_idempotent(filename):
    once = normalize_filename(filename)
    assert normalize_filename(once) == once


def test_strips_extension_and_hyphenates_spaces():
    assert normalize_filename("my photo.png") == "my-photo"


def test_collapses_whitespace_runs_before_hyphenating():
    assert normalize_filename("a   b  c.jpg") == "a-b-c"


def test_only_last_extension_is_stripped():
    assert normalize_filename("archive.tar.gz") == "archivetar"


def test_hyphens_are_kept():
    assert normalize_filename("already-normal.png") == "already-normal"


def test_all_special_characters_yield_empty_string():
    assert normalize_filename("(!!!).png") == ""


def test_public_id_has_normalized_prefix_and_random_suffix():
    first = build_public_id("My Photo.png".lower())
    second = build_public_id("My Photo.png".lower())
    assert first.startswith("my-photo-")
    assert first != second
    assert len(first) > MIN_PUBLIC_ID_LENGTH


def test_public_id_from_empty_name_is_only_the_suffix():
    public_id = build_public_id("***")
    assert public_id.startswith("-")
    assert len(public_id) == 37


def test_short_public_id_is_rejected():
    with pytest.raises(ValueError):
        ensure_public_id("x" * (MIN_PUBLIC_ID_LENGTH - 1))
    assert ensure_public_id("x" * MIN_PUBLIC_ID_LENGTH) == "x" * MIN_PUBLIC_ID_LENGTH


def test_unknown_format_is_rejected_with_allowed_list():
    with pytest.raises(ValueError, match="png,jpg,jpeg"):
        ensure_allowed_format("bmp")
    assert ensure_allowed_format(" PNG ") == "png"
