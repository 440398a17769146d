"""
Mention extraction for notification text.

A mention is an at-sign immediately followed by an email address, e.g.
"Hello @studentagnes@gmail.com". The leading at-sign is not part of the email.

Matching is a left-to-right, non-overlapping scan with ASCII word characters,
so "@a@x.com@b@y.com" yields "a@x.com" then "b@y.com", and a bare
"studentjon@gmail.com" (no leading at-sign) is not a mention.
"""

from __future__ import annotations

import re

MENTION_PATTERN = re.compile(r"@([\w.%+-]+@[\w.-]+\.[a-zA-Z]{2,})", re.ASCII)


def extract_mentions(text: str) -> list[str]:
    """
    Return mentioned emails in first-appearance order, without duplicates.
    """
    if not text:
        return []
    return list(dict.fromkeys(match.group(1) for match in MENTION_PATTERN.finditer(text)))
