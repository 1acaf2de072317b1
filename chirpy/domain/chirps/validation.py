# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Content rules a chirp body must satisfy before it is stored."""

from __future__ import annotations

from .exceptions import ChirpEmptyError, ChirpTooLongError
from .moderation import clean_chirp_body

MAX_CHIRP_LENGTH = 140


def validate_chirp_body(body: str) -> None:
    """Raise if body is empty or longer than MAX_CHIRP_LENGTH characters.

    Whitespace counts towards the length, so a body made only of spaces is
    accepted here and cleaned down to an empty string afterwards.
    """

    if len(body) > MAX_CHIRP_LENGTH:
        raise ChirpTooLongError(context={"length": len(body)})
    if not body:
        raise ChirpEmptyError()


def prepare_chirp_body(body: str) -> str:
    """Validate then moderate a submitted body."""

    validate_chirp_body(body)
    return clean_chirp_body(body)
