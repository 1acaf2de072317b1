# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from chirpy.domain.users.entities import User


class CreateUserRequestDTO(BaseModel):
    email: str = Field(min_length=1)


class UserDTO(BaseModel):
    id: UUID
    created_at: datetime
    updated_at: datetime
    email: str

    @classmethod
    def from_entity(cls, user: User) -> UserDTO:
        return cls(
            id=user.id,
            created_at=user.created_at,
            updated_at=user.updated_at,
            email=user.email,
        )
