# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request

from chirpy.application.use_cases.users.create_user import CreateUserUseCase
from chirpy.interfaces.http.dto.users import CreateUserRequestDTO, UserDTO
from chirpy.shared.errors.validation import parse_payload


class UsersController:
    def __init__(self, *, create_user: CreateUserUseCase) -> None:
        self._create_user = create_user

    def create(self) -> tuple[Response, HTTPStatus]:
        dto = parse_payload(CreateUserRequestDTO, request.get_json(force=True, silent=True))
        user = self._create_user.execute(dto.email)
        return jsonify(UserDTO.from_entity(user).model_dump(mode="json")), HTTPStatus.CREATED

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix="/api")
        bp.add_url_rule("/users", view_func=self.create, methods=["POST"])
        return bp
