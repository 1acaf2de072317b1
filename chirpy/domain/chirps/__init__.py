# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .moderation import PROFANE_WORDS, clean_chirp_body
from .validation import MAX_CHIRP_LENGTH, prepare_chirp_body, validate_chirp_body

__all__ = [
    "MAX_CHIRP_LENGTH",
    "PROFANE_WORDS",
    "clean_chirp_body",
    "prepare_chirp_body",
    "validate_chirp_body",
]
