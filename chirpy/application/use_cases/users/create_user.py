# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from chirpy.domain.users.entities import User
from chirpy.domain.users.repositories import UserRepository
from chirpy.shared.logging import logger


class CreateUserUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, email: str) -> User:
        user = self._users.create(email)
        logger.info(f"users.create: ok user_id={user.id}")
        return user
