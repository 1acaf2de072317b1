# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from uuid import UUID

from chirpy.domain.chirps.entities import Chirp
from chirpy.domain.chirps.exceptions import ChirpNotFoundError
from chirpy.domain.chirps.repositories import ChirpRepository


class GetChirpUseCase:
    def __init__(self, *, chirps: ChirpRepository) -> None:
        self._chirps = chirps

    def execute(self, chirp_id: str) -> Chirp:
        try:
            parsed = UUID(chirp_id)
        except ValueError as exc:
            raise ChirpNotFoundError(context={"chirp_id": chirp_id}) from exc

        chirp = self._chirps.find_by_id(parsed)
        if chirp is None:
            raise ChirpNotFoundError(context={"chirp_id": chirp_id})
        return chirp
