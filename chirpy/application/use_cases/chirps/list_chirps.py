# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from chirpy.domain.chirps.entities import Chirp
from chirpy.domain.chirps.repositories import ChirpRepository


class ListChirpsUseCase:
    def __init__(self, *, chirps: ChirpRepository) -> None:
        self._chirps = chirps

    def execute(self) -> list[Chirp]:
        return list(self._chirps.list_all())
