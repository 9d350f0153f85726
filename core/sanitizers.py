# core/sanitizers.py
"""
Input sanitization for VentureLink.

All user-generated text (idea titles and descriptions, chat messages,
profile fields) passes through these functions before it is stored.
"""
import html
import re
from typing import Optional

import bleach

MAX_STRIP_PASSES = 5


def sanitize_text(text: Optional[str], max_length: Optional[int] = None, strip: bool = True) -> str:
    """
    Sanitize plain text input.

    - Strips leading/trailing whitespace
    - Removes control characters
    - Enforces maximum length
    - Returns empty string for None input
    """
    if text is None:
        return ""

    if strip:
        text = text.strip()

    # Remove control characters except newlines and tabs
    text = re.sub(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]', '', text)

    if max_length and len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_line(text: Optional[str], max_length: Optional[int] = None) -> str:
    """
    Single-line fields (titles, names, amounts): no newlines, collapsed spaces.
    """
    text = sanitize_text(text, max_length=max_length)
    text = re.sub(r'[\r\n]+', ' ', text)
    text = re.sub(r'\s+', ' ', text)
    return text


def strip_tags(text: Optional[str]) -> str:
    """
    Remove markup from a plain-text field.

    bleach escapes a bare `<` or `>` it keeps, so the result is unescaped
    back to the text the user typed. Unescaping can join fragments into a new
    tag (`<scr<script>ipt>`), so cleaning repeats until the text is stable.
    """
    if text is None:
        return ""
    for _ in range(MAX_STRIP_PASSES):
        cleaned = html.unescape(bleach.clean(text, tags=[], attributes={}, strip=True))
        if cleaned == text:
            break
        text = cleaned
    return text
