# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol
from uuid import UUID

from .entities import Chirp


class ChirpRepository(Protocol):
    def create(self, body: str, user_id: UUID) -> Chirp: ...
    def list_all(self) -> Sequence[Chirp]: ...
    def find_by_id(self, chirp_id: UUID) -> Chirp | None: ...
