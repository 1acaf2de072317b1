# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

PROFANE_WORDS = frozenset({"kerfuffle", "sharbert", "fornax"})
MASK = "****"


def clean_chirp_body(body: str) -> str:
    """Mask denylisted words, matched case-insensitively per whitespace token.

    Runs of whitespace collapse to one space and leading/trailing whitespace is
    dropped.
    """

    words = body.split()
    return " ".join(MASK if word.lower() in PROFANE_WORDS else word for word in words)
