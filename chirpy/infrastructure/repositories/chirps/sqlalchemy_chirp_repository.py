# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from chirpy.domain.chirps.entities import Chirp as DomainChirp
from chirpy.domain.chirps.repositories import ChirpRepository
from chirpy.infrastructure.db.models import Chirp
from chirpy.infrastructure.unit_of_work import unit_of_work_scope
from chirpy.shared.errors import StoreError


def _to_domain(row: Chirp) -> DomainChirp:
    return DomainChirp(
        id=row.id,
        body=row.body,
        user_id=row.user_id,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyChirpRepository(ChirpRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def create(self, body: str, user_id: uuid.UUID) -> DomainChirp:
        now = datetime.now(UTC)
        row = Chirp(
            id=uuid.uuid4(),
            body=body,
            user_id=user_id,
            created_at=now,
            updated_at=now,
        )
        try:
            with unit_of_work_scope(self._session_factory) as session:
                session.add(row)
                session.flush()
        except SQLAlchemyError as exc:
            raise StoreError("chirps.create") from exc
        return _to_domain(row)

    def list_all(self) -> Sequence[DomainChirp]:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                rows = session.scalars(
                    select(Chirp).order_by(Chirp.created_at.asc(), Chirp.id.asc())
                ).all()
        except SQLAlchemyError as exc:
            raise StoreError("chirps.list") from exc
        return [_to_domain(row) for row in rows]

    def find_by_id(self, chirp_id: uuid.UUID) -> DomainChirp | None:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = session.get(Chirp, chirp_id)
        except SQLAlchemyError as exc:
            raise StoreError("chirps.get") from exc
        if row is None:
            return None
        return _to_domain(row)
