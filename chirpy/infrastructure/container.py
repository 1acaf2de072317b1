# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import cached_property
from pathlib import Path

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, scoped_session, sessionmaker

from chirpy.application.services.visit_counter import VisitCounter
from chirpy.application.use_cases.admin.reset import ResetUseCase
from chirpy.application.use_cases.chirps.create_chirp import CreateChirpUseCase
from chirpy.application.use_cases.chirps.get_chirp import GetChirpUseCase
from chirpy.application.use_cases.chirps.list_chirps import ListChirpsUseCase
from chirpy.application.use_cases.chirps.moderate_chirp import ModerateChirpUseCase
from chirpy.application.use_cases.users.create_user import CreateUserUseCase
from chirpy.infrastructure.repositories.chirps.sqlalchemy_chirp_repository import (
    SqlAlchemyChirpRepository,
)
from chirpy.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from chirpy.interfaces.http.controllers.admin_controller import AdminController
from chirpy.interfaces.http.controllers.chirps_controller import ChirpsController
from chirpy.interfaces.http.controllers.front_controller import FrontController
from chirpy.interfaces.http.controllers.misc_controller import MiscController
from chirpy.interfaces.http.controllers.users_controller import UsersController
from chirpy.shared.config import load_config


class Container:
    def __init__(
        self,
        engine: Engine | None = None,
        assets_dir: Path | None = None,
    ) -> None:
        self._engine = engine
        self._assets_dir = assets_dir

    @cached_property
    def engine(self) -> Engine:
        if self._engine is not None:
            return self._engine
        from chirpy.infrastructure.db import ENGINE

        return ENGINE

    @cached_property
    def session_factory(self) -> Callable[[], Session]:
        if self._engine is None:
            from chirpy.infrastructure.db import SessionLocal

            return SessionLocal
        return scoped_session(
            sessionmaker(
                bind=self._engine,
                autoflush=False,
                autocommit=False,
                expire_on_commit=False,
            )
        )

    @cached_property
    def visit_counter(self) -> VisitCounter:
        return VisitCounter()

    # Repositories

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def chirp_repository(self) -> SqlAlchemyChirpRepository:
        return SqlAlchemyChirpRepository(self.session_factory)

    # Use cases

    @cached_property
    def create_user_use_case(self) -> CreateUserUseCase:
        return CreateUserUseCase(users=self.user_repository)

    @cached_property
    def create_chirp_use_case(self) -> CreateChirpUseCase:
        return CreateChirpUseCase(chirps=self.chirp_repository)

    @cached_property
    def list_chirps_use_case(self) -> ListChirpsUseCase:
        return ListChirpsUseCase(chirps=self.chirp_repository)

    @cached_property
    def get_chirp_use_case(self) -> GetChirpUseCase:
        return GetChirpUseCase(chirps=self.chirp_repository)

    @cached_property
    def moderate_chirp_use_case(self) -> ModerateChirpUseCase:
        return ModerateChirpUseCase()

    @cached_property
    def reset_use_case(self) -> ResetUseCase:
        return ResetUseCase(users=self.user_repository, visits=self.visit_counter)

    # Controllers

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(create_user=self.create_user_use_case)

    @cached_property
    def chirps_controller(self) -> ChirpsController:
        return ChirpsController(
            create_chirp=self.create_chirp_use_case,
            list_chirps=self.list_chirps_use_case,
            get_chirp=self.get_chirp_use_case,
            moderate_chirp=self.moderate_chirp_use_case,
        )

    @cached_property
    def admin_controller(self) -> AdminController:
        return AdminController(reset=self.reset_use_case, visits=self.visit_counter)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()

    @cached_property
    def front_controller(self) -> FrontController:
        assets_dir = self._assets_dir or load_config().assets_dir
        return FrontController(visits=self.visit_counter, assets_dir=assets_dir)


container = Container()
