# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from chirpy.application.services.visit_counter import VisitCounter
from chirpy.domain.users.repositories import UserRepository
from chirpy.shared.logging import logger


class ResetUseCase:
    """Delete every user and zero the visit counter.

    The counter is cleared even when the deletion fails; the store error still
    propagates to the caller.
    """

    def __init__(self, *, users: UserRepository, visits: VisitCounter) -> None:
        self._users = users
        self._visits = visits

    def execute(self) -> None:
        try:
            self._users.delete_all()
        finally:
            self._visits.reset()
        logger.info("admin.reset: users deleted, visit counter cleared")
