# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import User


class UserRepository(Protocol):
    def create(self, email: str) -> User: ...
    def count(self) -> int: ...
    def delete_all(self) -> None: ...
