# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from chirpy.infrastructure.db.session import Base
from chirpy.infrastructure.db.types import UTCDateTime


class User(Base):
    __tablename__ = "users"
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    email: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    # Never populated: no handler accepts credentials.
    hashed_password: Mapped[str] = mapped_column(
        Text, nullable=False, default="", server_default=""
    )


class Chirp(Base):
    __tablename__ = "chirps"
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, index=True)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    # No foreign key to users: chirps may reference unknown or deleted users.
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
