# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(slots=True, frozen=True)
class Chirp:
    """A short text post. The body is stored already moderated."""

    id: UUID
    body: str
    user_id: UUID
    created_at: datetime
    updated_at: datetime
