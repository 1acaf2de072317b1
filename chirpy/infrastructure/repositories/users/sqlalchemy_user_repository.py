# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import UTC, datetime

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from chirpy.domain.users.entities import User as DomainUser
from chirpy.domain.users.exceptions import EmailAlreadyExistsError
from chirpy.domain.users.repositories import UserRepository
from chirpy.infrastructure.db.models import User
from chirpy.infrastructure.unit_of_work import unit_of_work_scope
from chirpy.shared.errors import StoreError


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        email=row.email,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def create(self, email: str) -> DomainUser:
        now = datetime.now(UTC)
        row = User(id=uuid.uuid4(), email=email, created_at=now, updated_at=now)
        try:
            with unit_of_work_scope(self._session_factory) as session:
                session.add(row)
                session.flush()
        except IntegrityError as exc:
            raise EmailAlreadyExistsError() from exc
        except SQLAlchemyError as exc:
            raise StoreError("users.create") from exc
        return _to_domain(row)

    def count(self) -> int:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                return session.scalar(select(func.count()).select_from(User)) or 0
        except SQLAlchemyError as exc:
            raise StoreError("users.count") from exc

    def delete_all(self) -> None:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                session.execute(delete(User))
        except SQLAlchemyError as exc:
            raise StoreError("users.delete_all") from exc
