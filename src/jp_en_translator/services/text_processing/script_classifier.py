"""Script classification - decides whether text is written in Japanese."""

# Inclusive code point ranges treated as Japanese script.
JAPANESE_RANGES = (
    (0x3040, 0x309F),  # Hiragana
    (0x30A0, 0x30FF),  # Katakana
    (0x4E00, 0x9FAF),  # CJK unified ideographs (common kanji)
    (0xFF00, 0xFFEF),  # Halfwidth and fullwidth forms
)


def is_japanese_char(char: str) -> bool:
    """Return True if a single character falls in a Japanese range."""
    code_point = ord(char)
    for start, end in JAPANESE_RANGES:
        if start <= code_point <= end:
            return True
    return False


def contains_japanese(text: str) -> bool:
    """
    Check whether any character of the text is Japanese.

    Pure code point range membership: no normalization and no locale
    handling. Empty text is not Japanese.

    Args:
        text: Text to inspect.

    Returns:
        True as soon as one Japanese character is found.
    """
    return any(is_japanese_char(char) for char in text)
