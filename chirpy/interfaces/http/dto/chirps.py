# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from chirpy.domain.chirps.entities import Chirp


class CreateChirpRequestDTO(BaseModel):
    body: str
    user_id: UUID


class ValidateChirpRequestDTO(BaseModel):
    body: str


class CleanedChirpDTO(BaseModel):
    cleaned_body: str


class ChirpDTO(BaseModel):
    id: UUID
    created_at: datetime
    updated_at: datetime
    body: str
    user_id: UUID

    @classmethod
    def from_entity(cls, chirp: Chirp) -> ChirpDTO:
        return cls(
            id=chirp.id,
            created_at=chirp.created_at,
            updated_at=chirp.updated_at,
            body=chirp.body,
            user_id=chirp.user_id,
        )
