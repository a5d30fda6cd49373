"""Chirp body validation and profanity redaction.

Length is measured in UTF-8 bytes, so a 140-character chirp with multi-byte
characters can still be rejected; a lone surrogate counts as three bytes.
Redaction is whole-token only: the body is split on single spaces (runs of
spaces yield empty tokens, which are kept) and any token whose lowercased
form is in the denylist becomes ``****``.
"""
from __future__ import annotations

from app.core.errors import ContentTooLong

MAX_CHIRP_LENGTH = 140
REDACTION_MARKER = "****"

BAD_WORDS: frozenset[str] = frozenset({"kerfuffle", "sharbert", "fornax"})


def clean_body(body: str, bad_words: frozenset[str] = BAD_WORDS) -> str:
    words = body.split(" ")
    for i, word in enumerate(words):
        if word.lower() in bad_words:
            words[i] = REDACTION_MARKER
    return " ".join(words)


def validate_chirp(body: str) -> str:
    """Return the cleaned body, or raise ContentTooLong if it exceeds the limit."""
    if len(body.encode("utf-8", "surrogatepass")) > MAX_CHIRP_LENGTH:
        raise ContentTooLong()
    return clean_body(body, BAD_WORDS)
