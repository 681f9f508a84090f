import pytest

from ardan.utils import item_name, sanitize_filename


def test_sanitize_replaces_separators():
    assert sanitize_filename("a/b:c") == "a_b_c"


def test_sanitize_replaces_every_invalid_char():
    assert sanitize_filename('/\\:*?"<>|') == "_" * 9


@pytest.mark.parametrize("text", ["a/b:c", "What? <Really>", "Go | Rust", "plain name", ""])
def test_sanitize_is_idempotent(text):
    once = sanitize_filename(text)
    assert sanitize_filename(once) == once


def test_sanitize_keeps_safe_characters():
    assert sanitize_filename("Ultimate Go - Part 1 (2024).") == "Ultimate Go - Part 1 (2024)."


def test_item_name():
    assert item_name(3, "Pointers: Part 1") == "3_Pointers: Part 1"
