"""Correction extraction - pulls the corrected sentence out of a grammar check reply."""

import re
from typing import Optional

CORRECT_SENTENCE_HEADER = "【正しい英文】"
SUGGESTED_FIX_HEADER = "【修正提案】"


def _section_pattern(header: str) -> re.Pattern:
    # Header line, then everything up to a blank line, the next 【header】 or the end.
    return re.compile(re.escape(header) + r"\s*\n(.+?)(?:\n\n|\n【|$)", re.DOTALL)


_SECTION_PATTERNS = {
    CORRECT_SENTENCE_HEADER: _section_pattern(CORRECT_SENTENCE_HEADER),
    SUGGESTED_FIX_HEADER: _section_pattern(SUGGESTED_FIX_HEADER),
}


def extract_section(text: str, header: str) -> Optional[str]:
    """Return the trimmed body of a bracketed section, or None if absent."""
    pattern = _SECTION_PATTERNS.get(header) or _section_pattern(header)
    match = pattern.search(text)
    if match:
        return match.group(1).strip()
    return None


def extract_corrected(grammar_response_text: str, fallback: str) -> str:
    """
    Extract the final corrected sentence from a grammar check reply.

    The model is asked to answer in a four-section template but is not
    guaranteed to follow it, so the lookup degrades in order:
    1. the 【正しい英文】 section,
    2. the 【修正提案】 section,
    3. the fallback (the user's original text), returned unchanged.

    Args:
        grammar_response_text: Raw assistant text from the grammar check.
        fallback: Text to return when neither section is present.

    Returns:
        The corrected sentence, trimmed, or the fallback.
    """
    for header in (CORRECT_SENTENCE_HEADER, SUGGESTED_FIX_HEADER):
        section = extract_section(grammar_response_text, header)
        if section is not None:
            return section
    return fallback
