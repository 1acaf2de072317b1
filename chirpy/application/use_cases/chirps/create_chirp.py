# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from uuid import UUID

from chirpy.domain.chirps.entities import Chirp
from chirpy.domain.chirps.repositories import ChirpRepository
from chirpy.domain.chirps.validation import prepare_chirp_body
from chirpy.shared.logging import logger


class CreateChirpUseCase:
    def __init__(self, *, chirps: ChirpRepository) -> None:
        self._chirps = chirps

    def execute(self, body: str, user_id: UUID) -> Chirp:
        cleaned = prepare_chirp_body(body)
        chirp = self._chirps.create(cleaned, user_id)
        logger.info(f"chirps.create: ok chirp_id={chirp.id} user_id={user_id}")
        return chirp
