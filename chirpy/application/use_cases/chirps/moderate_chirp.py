# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from chirpy.domain.chirps.validation import prepare_chirp_body


class ModerateChirpUseCase:
    """Validate and clean a body without storing it."""

    def execute(self, body: str) -> str:
        return prepare_chirp_body(body)
